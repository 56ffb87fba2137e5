"""
Marketplace Domain Entities
"""

from surplus.domains.marketplace.domain.entities.order import Order, validate_order_quantity
from surplus.domains.marketplace.domain.entities.product import Product
from surplus.domains.marketplace.domain.entities.store import Store

__all__ = [
    "Order",
    "Product",
    "Store",
    "validate_order_quantity",
]
