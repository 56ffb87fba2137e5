"""
Marketplace Repositories
"""

from surplus.domains.marketplace.infrastructure.repositories.in_memory_catalog import InMemoryCatalog

__all__ = ["InMemoryCatalog"]
