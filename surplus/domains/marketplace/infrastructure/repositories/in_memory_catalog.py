"""
In-Memory Catalog

Catalog adapter backed by dictionaries, used for local runs and tests.
"""

import asyncio
import copy
import itertools
import logging
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any

from surplus.core.domain import ConflictException, EntityNotFoundException, ValidationException
from surplus.domains.marketplace.application.dto import (
    InsufficientStock,
    StatusChanged,
    StatusChangeResult,
    StatusConflict,
    StockDecremented,
    StockDecrementResult,
    StoreListing,
)
from surplus.domains.marketplace.domain.entities import Order, Product, Store
from surplus.domains.marketplace.domain.services import AvailabilityClock
from surplus.domains.marketplace.domain.value_objects import OrderStatus

logger = logging.getLogger(__name__)


class InMemoryCatalog:
    """
    Dictionary-backed implementation of ``ICatalog``.

    Behaves like a small database:
    - entities are copied on the way in and out, so callers cannot change
      stored state except through the write methods
    - one ``asyncio.Lock`` serializes every access, and ``transaction()``
      holds it for the whole block
    - writes inside a transaction are recorded in an undo log and reverted
      if the block raises

    Example:
        ```python
        catalog = InMemoryCatalog()
        store = await catalog.add_store(Store(name="Bakery", owner_id=7, ...))
        async with catalog.transaction():
            await catalog.set_order_status(order_id, OrderStatus.PENDING, OrderStatus.CONFIRMED)
            await catalog.try_decrement_product_quantity(product_id, 2)
        ```
    """

    def __init__(self, visibility: AvailabilityClock | None = None):
        """
        Initialize the catalog.

        Args:
            visibility: Rules deciding which products are visible at a given instant
        """
        self._stores: dict[int, Store] = {}
        self._products: dict[int, Product] = {}
        self._orders: dict[int, Order] = {}
        self._store_ids = itertools.count(1)
        self._product_ids = itertools.count(1)
        self._order_ids = itertools.count(1)

        self._visibility = visibility or AvailabilityClock()
        self._lock = asyncio.Lock()
        self._tx_owner: asyncio.Task[Any] | None = None
        self._undo_log: list[Callable[[], None]] | None = None

    # Concurrency

    def _in_own_transaction(self) -> bool:
        return self._tx_owner is not None and self._tx_owner is asyncio.current_task()

    @asynccontextmanager
    async def _access(self) -> AsyncIterator[None]:
        if self._in_own_transaction():
            yield
            return
        async with self._lock:
            yield

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        """
        Run a block of writes atomically.

        Nested calls from the same task join the outer transaction.
        """
        if self._in_own_transaction():
            yield
            return

        async with self._lock:
            self._tx_owner = asyncio.current_task()
            self._undo_log = []
            try:
                yield
            except BaseException:
                undo_log = self._undo_log
                for undo in reversed(undo_log):
                    undo()
                logger.debug(f"Catalog transaction rolled back ({len(undo_log)} writes)")
                raise
            finally:
                self._tx_owner = None
                self._undo_log = None

    def _remember(self, table: dict[int, Any], key: int) -> None:
        """Record how to restore ``table[key]`` if the transaction fails."""
        if self._undo_log is None or not self._in_own_transaction():
            return
        previous = copy.deepcopy(table.get(key))

        def undo() -> None:
            if previous is None:
                table.pop(key, None)
            else:
                table[key] = previous

        self._undo_log.append(undo)

    # Seeding / seller edits

    async def add_store(self, store: Store) -> Store:
        """Store a store, assigning an ID when it has none."""
        async with self._access():
            stored = copy.deepcopy(store)
            if stored.id is None:
                stored.id = next(self._store_ids)
            self._remember(self._stores, stored.id)
            self._stores[stored.id] = stored
            return copy.deepcopy(stored)

    async def save_product(self, product: Product) -> Product:
        """
        Overwrite an existing product (seller edits).

        An edit that leaves no stock deactivates the product.
        """
        async with self._access():
            if product.id is None or product.id not in self._products:
                raise EntityNotFoundException("Product", product.id)
            stored = copy.deepcopy(product)
            if stored.quantity == 0:
                stored.is_active = False
            self._remember(self._products, stored.id)
            self._products[stored.id] = stored
            return copy.deepcopy(stored)

    # Reads

    async def get_product(self, product_id: int) -> Product | None:
        async with self._access():
            return copy.deepcopy(self._products.get(product_id))

    async def get_store(self, store_id: int) -> Store | None:
        async with self._access():
            return copy.deepcopy(self._stores.get(store_id))

    async def get_order(self, order_id: int) -> Order | None:
        async with self._access():
            return copy.deepcopy(self._orders.get(order_id))

    async def get_order_by_code(self, code: str) -> Order | None:
        async with self._access():
            for order in self._orders.values():
                if order.code == code:
                    return copy.deepcopy(order)
            return None

    async def has_approved_stores(self) -> bool:
        async with self._access():
            return any(store.is_approved() for store in self._stores.values())

    async def list_approved_stores_with_visible_products(self, now: datetime) -> list[StoreListing]:
        async with self._access():
            by_store: dict[int, list[Product]] = {}
            for product in sorted(self._products.values(), key=lambda p: p.id or 0):
                if self._visibility.is_product_visible(product, now):
                    by_store.setdefault(product.store_id, []).append(copy.deepcopy(product))

            return [
                StoreListing(store=copy.deepcopy(store), products=by_store[store_id])
                for store_id, store in sorted(self._stores.items())
                if store.is_approved() and store_id in by_store
            ]

    async def product_code_exists(self, code: str) -> bool:
        async with self._access():
            return any(product.code == code for product in self._products.values())

    async def order_code_exists(self, code: str) -> bool:
        async with self._access():
            return any(order.code == code for order in self._orders.values())

    async def count_pending_orders(self, buyer_id: int) -> int:
        async with self._access():
            return sum(1 for order in self._orders.values() if order.buyer_id == buyer_id and order.is_pending())

    async def list_orders_by_buyer(self, buyer_id: int, limit: int = 20) -> list[Order]:
        async with self._access():
            orders = [order for order in self._orders.values() if order.buyer_id == buyer_id]
            return [copy.deepcopy(order) for order in _newest_first(orders)[:limit]]

    async def list_orders_by_store(
        self, store_id: int, status: OrderStatus | None = None, limit: int = 50
    ) -> list[Order]:
        async with self._access():
            orders = [
                order
                for order in self._orders.values()
                if order.store_id == store_id and (status is None or order.status == status)
            ]
            return [copy.deepcopy(order) for order in _newest_first(orders)[:limit]]

    # Writes

    async def create_product(self, product: Product) -> Product:
        async with self._access():
            if product.code and any(p.code == product.code for p in self._products.values()):
                raise ConflictException(f"Product code {product.code} already in use", code="DUPLICATE_CODE")
            stored = copy.deepcopy(product)
            stored.id = next(self._product_ids)
            self._remember(self._products, stored.id)
            self._products[stored.id] = stored
            return copy.deepcopy(stored)

    async def create_order(self, order: Order) -> Order:
        async with self._access():
            if any(o.code == order.code for o in self._orders.values()):
                raise ConflictException(f"Order code {order.code} already in use", code="DUPLICATE_CODE")
            stored = copy.deepcopy(order)
            stored.id = next(self._order_ids)
            self._remember(self._orders, stored.id)
            self._orders[stored.id] = stored
            return copy.deepcopy(stored)

    async def try_decrement_product_quantity(self, product_id: int, amount: int) -> StockDecrementResult:
        if isinstance(amount, bool) or not isinstance(amount, int) or amount < 1:
            raise ValidationException("Decrement amount must be a positive integer", field="amount")
        async with self._access():
            product = self._products.get(product_id)
            if product is None:
                raise EntityNotFoundException("Product", product_id)
            if product.quantity < amount:
                return InsufficientStock(product_id=product_id, requested=amount, available=product.quantity)

            self._remember(self._products, product_id)
            new_quantity = product.decrement_stock(amount)
            return StockDecremented(product_id=product_id, new_quantity=new_quantity)

    async def set_order_status(
        self, order_id: int, expected: OrderStatus, new_status: OrderStatus
    ) -> StatusChangeResult:
        async with self._access():
            order = self._orders.get(order_id)
            if order is None:
                raise EntityNotFoundException("Order", order_id)
            if order.status != expected:
                return StatusConflict(order_id=order_id, expected=expected, actual=order.status)

            self._remember(self._orders, order_id)
            order.transition_to(new_status)
            return StatusChanged(order=copy.deepcopy(order))


def _newest_first(orders: list[Order]) -> list[Order]:
    return sorted(orders, key=lambda order: (order.created_at, order.id or 0), reverse=True)


__all__ = ["InMemoryCatalog"]
