"""
Marketplace Application Layer

Ports, DTOs, use cases and the service facade.
"""
