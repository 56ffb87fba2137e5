"""
Order Decision Base

Shared loading and guard logic for the seller's confirm/reject decisions.
"""

from surplus.core.domain import EntityNotFoundException, InvalidOperationException
from surplus.domains.marketplace.application.dto import StatusChanged, StatusChangeResult
from surplus.domains.marketplace.application.ports import ICatalog, INotifier
from surplus.domains.marketplace.application.services.side_effects import SideEffectDispatcher
from surplus.domains.marketplace.domain.entities import Order, Product, Store


class OrderDecisionUseCase:
    """Base for use cases that move a PENDING order to a terminal state."""

    operation = "decide"

    def __init__(self, catalog: ICatalog, notifier: INotifier, dispatcher: SideEffectDispatcher):
        self.catalog = catalog
        self.notifier = notifier
        self.dispatcher = dispatcher

    async def _load_pending_order(self, order_id: int) -> Order:
        order = await self.catalog.get_order(order_id)
        if order is None:
            raise EntityNotFoundException("Order", order_id)
        if not order.is_pending():
            raise InvalidOperationException(
                operation=self.operation,
                current_state=order.status.value,
                message=f"Order {order.code} is already {order.status.value}",
            )
        return order

    async def _load_product_and_store(self, order: Order) -> tuple[Product, Store]:
        product = await self.catalog.get_product(order.product_id)
        if product is None:
            raise EntityNotFoundException("Product", order.product_id)
        store = await self.catalog.get_store(product.store_id)
        if store is None:
            raise EntityNotFoundException("Store", product.store_id)
        return product, store

    def _require_changed(self, order: Order, result: StatusChangeResult) -> Order:
        """Unwrap a compare-and-set result, raising when another decision won."""
        if isinstance(result, StatusChanged):
            return result.order
        raise InvalidOperationException(
            operation=self.operation,
            current_state=result.actual.value,
            message=f"Order {order.code} was already {result.actual.value}",
        )


__all__ = ["OrderDecisionUseCase"]
