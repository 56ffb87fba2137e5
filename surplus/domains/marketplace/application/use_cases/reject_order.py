"""
Reject Order Use Case

Seller rejection or buyer cancellation of a still-pending order.
"""

import logging
from dataclasses import dataclass

from surplus.core.domain import AuthorizationException
from surplus.domains.marketplace.application.dto import Notification
from surplus.domains.marketplace.application.use_cases.order_decision import OrderDecisionUseCase
from surplus.domains.marketplace.domain.entities import Order
from surplus.domains.marketplace.domain.value_objects import OrderStatus

logger = logging.getLogger(__name__)


@dataclass
class RejectOrderRequest:
    """Request for rejecting (or cancelling) an order."""

    order_id: int
    acting_user_id: int


class RejectOrderUseCase(OrderDecisionUseCase):
    """
    Use Case: Reject Order

    Allowed for the owner of the product's store and for the buyer who
    placed the order. Stock is untouched since nothing was reserved.
    """

    operation = "reject"

    async def execute(self, request: RejectOrderRequest) -> Order:
        """
        Cancel a pending order.

        Args:
            request: Order and acting user

        Returns:
            The CANCELLED order

        Raises:
            EntityNotFoundException: Unknown order, product or store
            InvalidOperationException: Order is not PENDING (or lost a race)
            AuthorizationException: Actor is neither the seller nor the buyer
        """
        order = await self._load_pending_order(request.order_id)
        product, store = await self._load_product_and_store(order)

        by_seller = store.is_owned_by(request.acting_user_id)
        by_buyer = order.buyer_id == request.acting_user_id
        if not (by_seller or by_buyer):
            raise AuthorizationException(
                operation="reject_order",
                resource=f"order:{order.id}",
                user_id=request.acting_user_id,
            )

        result = await self.catalog.set_order_status(order.id, OrderStatus.PENDING, OrderStatus.CANCELLED)
        cancelled = self._require_changed(order, result)

        cancelled_by_buyer = by_buyer and not by_seller
        logger.info(
            f"Order cancelled: {cancelled.code} (product {cancelled.product_id}, "
            f"by {'buyer' if cancelled_by_buyer else 'seller'} {request.acting_user_id})"
        )

        message = Notification.order_cancelled(cancelled, product, cancelled_by_buyer=cancelled_by_buyer)
        self.dispatcher.dispatch(
            self.notifier.notify_buyer(cancelled.buyer_id, message),
            f"notify buyer of cancelled order {cancelled.code}",
        )
        if cancelled_by_buyer:
            self.dispatcher.dispatch(
                self.notifier.notify_seller(cancelled.store_id, message),
                f"notify seller of cancelled order {cancelled.code}",
            )
        return cancelled


__all__ = ["RejectOrderUseCase", "RejectOrderRequest"]
