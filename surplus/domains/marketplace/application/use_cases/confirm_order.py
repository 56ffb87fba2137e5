"""
Confirm Order Use Case

Seller approval: sells the units and closes the order as CONFIRMED.
"""

import logging
from dataclasses import dataclass

from surplus.core.domain import AuthorizationException, InsufficientStockException
from surplus.domains.marketplace.application.dto import InsufficientStock, Notification
from surplus.domains.marketplace.application.ports import ICatalog, INotifier, IRatings
from surplus.domains.marketplace.application.services.side_effects import SideEffectDispatcher
from surplus.domains.marketplace.application.use_cases.order_decision import OrderDecisionUseCase
from surplus.domains.marketplace.domain.entities import Order
from surplus.domains.marketplace.domain.value_objects import OrderStatus

logger = logging.getLogger(__name__)


@dataclass
class ConfirmOrderRequest:
    """Request for confirming an order."""

    order_id: int
    acting_seller_id: int


class ConfirmOrderUseCase(OrderDecisionUseCase):
    """
    Use Case: Confirm Order

    The status compare-and-set and the conditional stock decrement run in
    one catalog transaction. When stock has run out the transaction is
    rolled back, so neither the order nor the product changes.

    Buyer notification and the rating request are dispatched only after
    the transaction has committed.
    """

    operation = "confirm"

    def __init__(
        self,
        catalog: ICatalog,
        notifier: INotifier,
        ratings: IRatings,
        dispatcher: SideEffectDispatcher,
    ):
        super().__init__(catalog, notifier, dispatcher)
        self.ratings = ratings

    async def execute(self, request: ConfirmOrderRequest) -> Order:
        """
        Confirm a pending order.

        Args:
            request: Order and acting seller

        Returns:
            The CONFIRMED order

        Raises:
            EntityNotFoundException: Unknown order, product or store
            InvalidOperationException: Order is not PENDING (or lost a race)
            AuthorizationException: Seller does not own the product's store
            InsufficientStockException: Not enough stock left to fulfil it
        """
        order = await self._load_pending_order(request.order_id)
        product, store = await self._load_product_and_store(order)

        if not store.is_owned_by(request.acting_seller_id):
            raise AuthorizationException(
                operation="confirm_order",
                resource=f"order:{order.id}",
                user_id=request.acting_seller_id,
            )

        async with self.catalog.transaction():
            result = await self.catalog.set_order_status(order.id, OrderStatus.PENDING, OrderStatus.CONFIRMED)
            confirmed = self._require_changed(order, result)

            stock = await self.catalog.try_decrement_product_quantity(order.product_id, order.quantity)
            if isinstance(stock, InsufficientStock):
                raise InsufficientStockException(
                    product_id=stock.product_id,
                    requested=stock.requested,
                    available=stock.available,
                )

        logger.info(
            f"Order confirmed: {confirmed.code} (product {confirmed.product_id}, "
            f"qty {confirmed.quantity}, {stock.new_quantity} left)"
        )

        self.dispatcher.dispatch(
            self.notifier.notify_buyer(confirmed.buyer_id, Notification.order_confirmed(confirmed, product)),
            f"notify buyer of confirmed order {confirmed.code}",
        )
        self.dispatcher.dispatch(
            self.ratings.request_post_purchase_rating(confirmed.buyer_id, confirmed.product_id),
            f"rating request for order {confirmed.code}",
        )
        return confirmed


__all__ = ["ConfirmOrderUseCase", "ConfirmOrderRequest"]
