"""
Discovery DTOs

Ranked nearby-store results.
"""

from dataclasses import dataclass, field
from typing import Any

from surplus.domains.marketplace.domain.entities import Product, Store
from surplus.domains.marketplace.domain.services import DistanceCalculator


@dataclass
class NearbyStore:
    """One ranked discovery hit."""

    store: Store
    distance_km: float
    is_open: bool
    products: list[Product] = field(default_factory=list)

    @property
    def formatted_distance(self) -> str:
        return DistanceCalculator.format_distance(self.distance_km)

    def to_dict(self) -> dict[str, Any]:
        return {
            "store": self.store.to_dict(),
            "distance_km": self.distance_km,
            "distance": self.formatted_distance,
            "is_open": self.is_open,
            "products": [product.to_dict() for product in self.products],
        }


@dataclass
class NearbyStoresResult:
    """
    Discovery response.

    The two flags let callers tell "no approved store exists at all" apart
    from "approved stores exist but none has a visible product right now".
    """

    results: list[NearbyStore] = field(default_factory=list)
    has_approved_stores: bool = False
    has_visible_products: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.results

    def to_dict(self) -> dict[str, Any]:
        return {
            "results": [result.to_dict() for result in self.results],
            "has_approved_stores": self.has_approved_stores,
            "has_visible_products": self.has_visible_products,
        }


__all__ = ["NearbyStore", "NearbyStoresResult"]
