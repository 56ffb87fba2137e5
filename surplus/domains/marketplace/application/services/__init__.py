"""
Marketplace Application Services

The ``MarketplaceService`` facade lives in ``marketplace_service`` and is
imported from there directly.
"""

from surplus.domains.marketplace.application.services.side_effects import SideEffectDispatcher

__all__ = ["SideEffectDispatcher"]
