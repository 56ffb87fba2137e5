"""
Order Lookup Use Cases

Read-only access to single orders and order histories.
"""

from surplus.core.domain import EntityNotFoundException, ValidationException
from surplus.domains.marketplace.application.ports import ICatalog
from surplus.domains.marketplace.domain.entities import Order
from surplus.domains.marketplace.domain.value_objects import OrderStatus


class GetOrderUseCase:
    """Use Case: fetch one order by ID or by its human-readable code."""

    def __init__(self, catalog: ICatalog):
        self.catalog = catalog

    async def by_id(self, order_id: int) -> Order:
        order = await self.catalog.get_order(order_id)
        if order is None:
            raise EntityNotFoundException("Order", order_id)
        return order

    async def by_code(self, code: str) -> Order:
        normalized = (code or "").strip().upper()
        if not normalized:
            raise ValidationException("Order code is required", field="code")
        order = await self.catalog.get_order_by_code(normalized)
        if order is None:
            raise EntityNotFoundException("Order", normalized, message=f"Order with code {normalized} not found")
        return order


class ListOrdersUseCase:
    """
    Use Case: order histories

    Buyer history and the seller's per-store queue, newest first.
    """

    def __init__(self, catalog: ICatalog, max_limit: int = 100):
        self.catalog = catalog
        self.max_limit = max_limit

    async def for_buyer(self, buyer_id: int, limit: int = 20) -> list[Order]:
        return await self.catalog.list_orders_by_buyer(buyer_id, limit=self._clamp(limit))

    async def for_store(self, store_id: int, status: OrderStatus | None = None, limit: int = 50) -> list[Order]:
        store = await self.catalog.get_store(store_id)
        if store is None:
            raise EntityNotFoundException("Store", store_id)
        return await self.catalog.list_orders_by_store(store_id, status=status, limit=self._clamp(limit))

    def _clamp(self, limit: int) -> int:
        if limit < 1:
            raise ValidationException("limit must be a positive integer", field="limit")
        return min(limit, self.max_limit)


__all__ = ["GetOrderUseCase", "ListOrdersUseCase"]
