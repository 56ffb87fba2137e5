"""
Marketplace Domain Layer

Entities, value objects and domain services for stores, surplus-food
listings and orders.
"""

from surplus.domains.marketplace.domain.entities import Order, Product, Store
from surplus.domains.marketplace.domain.services import AvailabilityClock, CodeGenerator, DistanceCalculator
from surplus.domains.marketplace.domain.value_objects import (
    Coordinate,
    OpeningHours,
    OrderStatus,
    StoreStatus,
    parse_location_string,
)

__all__ = [
    "Order",
    "Product",
    "Store",
    "AvailabilityClock",
    "CodeGenerator",
    "DistanceCalculator",
    "Coordinate",
    "OpeningHours",
    "OrderStatus",
    "StoreStatus",
    "parse_location_string",
]
