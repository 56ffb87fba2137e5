"""
Marketplace Application Ports

Interface definitions (ports) for the marketplace domain.
Uses Protocol for structural typing.
"""

from contextlib import AbstractAsyncContextManager
from datetime import datetime
from typing import Protocol, runtime_checkable

from surplus.domains.marketplace.application.dto import (
    Notification,
    StatusChangeResult,
    StockDecrementResult,
    StoreListing,
)
from surplus.domains.marketplace.domain.entities import Order, Product, Store
from surplus.domains.marketplace.domain.value_objects import OrderStatus


@runtime_checkable
class ICatalog(Protocol):
    """
    Interface for the catalog of stores, products and orders.

    Reads return detached entities; changes go through the write methods.
    Conditional writes report their outcome as tagged results.
    """

    async def get_product(self, product_id: int) -> Product | None:
        """Get product by ID"""
        ...

    async def get_store(self, store_id: int) -> Store | None:
        """Get store by ID"""
        ...

    async def get_order(self, order_id: int) -> Order | None:
        """Get order by ID"""
        ...

    async def get_order_by_code(self, code: str) -> Order | None:
        """Get order by its human-readable code"""
        ...

    async def has_approved_stores(self) -> bool:
        """Whether at least one APPROVED store exists, regardless of stock"""
        ...

    async def list_approved_stores_with_visible_products(self, now: datetime) -> list[StoreListing]:
        """APPROVED stores that have at least one product visible at ``now``"""
        ...

    async def try_decrement_product_quantity(self, product_id: int, amount: int) -> StockDecrementResult:
        """
        Atomically subtract ``amount`` if at least that much is in stock.

        A product brought to zero is deactivated in the same step.
        """
        ...

    async def create_product(self, product: Product) -> Product:
        """Persist a new product and return it with its ID"""
        ...

    async def product_code_exists(self, code: str) -> bool:
        """Whether a product already uses ``code``"""
        ...

    async def create_order(self, order: Order) -> Order:
        """Persist a new order and return it with its ID"""
        ...

    async def order_code_exists(self, code: str) -> bool:
        """Whether an order already uses ``code``"""
        ...

    async def count_pending_orders(self, buyer_id: int) -> int:
        """Number of PENDING orders placed by a buyer"""
        ...

    async def list_orders_by_buyer(self, buyer_id: int, limit: int = 20) -> list[Order]:
        """Buyer's orders, newest first"""
        ...

    async def list_orders_by_store(
        self, store_id: int, status: OrderStatus | None = None, limit: int = 50
    ) -> list[Order]:
        """Store's orders, newest first, optionally filtered by status"""
        ...

    async def set_order_status(
        self, order_id: int, expected: OrderStatus, new_status: OrderStatus
    ) -> StatusChangeResult:
        """Compare-and-set the order status"""
        ...

    def transaction(self) -> AbstractAsyncContextManager[None]:
        """
        Group writes so they commit together.

        If the block raises, every write made inside it is rolled back.
        """
        ...


@runtime_checkable
class INotifier(Protocol):
    """
    Interface for delivering order events to buyers and sellers.

    Delivery failures are the notifier's concern; the engine never retries.
    """

    async def notify_buyer(self, buyer_id: int, message: Notification) -> None:
        """Send a message to a buyer"""
        ...

    async def notify_seller(self, store_id: int, message: Notification) -> None:
        """Send a message to the seller who owns a store"""
        ...


@runtime_checkable
class IRatings(Protocol):
    """Interface for the post-purchase rating workflow."""

    async def request_post_purchase_rating(self, buyer_id: int, product_id: int) -> None:
        """Ask a buyer to rate a product they received"""
        ...


__all__ = [
    "ICatalog",
    "INotifier",
    "IRatings",
]
