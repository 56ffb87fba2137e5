"""
Catalog Result Types

Tagged results returned by the catalog's conditional writes. Callers
branch on the type instead of catching exceptions.
"""

from dataclasses import dataclass

from surplus.domains.marketplace.domain.entities import Order, Product, Store
from surplus.domains.marketplace.domain.value_objects import OrderStatus


@dataclass(frozen=True)
class StockDecremented:
    """Conditional decrement applied; ``new_quantity`` is what remains."""

    product_id: int
    new_quantity: int

    @property
    def sold_out(self) -> bool:
        return self.new_quantity == 0


@dataclass(frozen=True)
class InsufficientStock:
    """Conditional decrement refused; nothing was changed."""

    product_id: int
    requested: int
    available: int


StockDecrementResult = StockDecremented | InsufficientStock


@dataclass(frozen=True)
class StatusChanged:
    """Compare-and-set succeeded; ``order`` reflects the new status."""

    order: Order


@dataclass(frozen=True)
class StatusConflict:
    """Compare-and-set lost; the order was in ``actual`` instead of the expected status."""

    order_id: int
    expected: OrderStatus
    actual: OrderStatus


StatusChangeResult = StatusChanged | StatusConflict


@dataclass
class StoreListing:
    """An approved store together with its currently visible products."""

    store: Store
    products: list[Product]


__all__ = [
    "StockDecremented",
    "InsufficientStock",
    "StockDecrementResult",
    "StatusChanged",
    "StatusConflict",
    "StatusChangeResult",
    "StoreListing",
]
