"""
Marketplace Infrastructure Layer

Adapters implementing the marketplace ports.
"""
