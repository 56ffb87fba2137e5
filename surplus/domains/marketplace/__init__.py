"""
Marketplace Domain

Discovery of nearby surplus-food stores and the order lifecycle.
"""

from surplus.domains.marketplace.application.services.marketplace_service import MarketplaceService

__all__ = ["MarketplaceService"]
