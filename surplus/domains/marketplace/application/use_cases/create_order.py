"""
Create Order Use Case

Business logic for placing a PENDING order against a listing.
"""

import logging
from dataclasses import dataclass

from surplus.core.domain import EntityNotFoundException, ValidationException
from surplus.domains.marketplace.application.dto import Notification
from surplus.domains.marketplace.application.ports import ICatalog, INotifier
from surplus.domains.marketplace.application.services.side_effects import SideEffectDispatcher
from surplus.domains.marketplace.domain.entities import Order, validate_order_quantity
from surplus.domains.marketplace.domain.services import AvailabilityClock, CodeGenerator

logger = logging.getLogger(__name__)


@dataclass
class CreateOrderRequest:
    """Request for creating an order."""

    buyer_id: int
    product_id: int
    quantity: int


class CreateOrderUseCase:
    """
    Use Case: Create Order

    Stock is checked, not reserved: two buyers may both pass the check for
    the same remaining units. The conditional decrement at confirmation
    decides who gets them.

    Responsibilities:
    - Validate quantity, product availability and the open-order limit
    - Capture the total price and a unique order code
    - Persist the order and tell the seller about it
    """

    def __init__(
        self,
        catalog: ICatalog,
        notifier: INotifier,
        dispatcher: SideEffectDispatcher,
        clock: AvailabilityClock,
        code_generator: CodeGenerator,
        max_pending_orders: int = 10,
    ):
        self.catalog = catalog
        self.notifier = notifier
        self.dispatcher = dispatcher
        self.clock = clock
        self.code_generator = code_generator
        self.max_pending_orders = max_pending_orders

    async def execute(self, request: CreateOrderRequest) -> Order:
        """
        Create a new order.

        Args:
            request: Buyer, product and quantity

        Returns:
            The persisted PENDING order

        Raises:
            ValidationException: Bad quantity, unavailable product, not enough
                stock or too many open orders
            EntityNotFoundException: Unknown product
            OrderCodeGenerationException: No unique code could be generated
        """
        quantity = validate_order_quantity(request.quantity)

        product = await self.catalog.get_product(request.product_id)
        if product is None:
            raise EntityNotFoundException("Product", request.product_id)

        if not self.clock.is_product_visible(product):
            raise ValidationException(
                f"Product {product.id} is no longer available",
                field="product_id",
                details={"product_id": product.id},
            )

        if quantity > product.quantity:
            raise ValidationException(
                f"Only {product.quantity} left of product {product.id}",
                field="quantity",
                details={"requested": quantity, "available": product.quantity},
            )

        # Limit check and insert commit as one step
        async with self.catalog.transaction():
            pending = await self.catalog.count_pending_orders(request.buyer_id)
            if pending >= self.max_pending_orders:
                raise ValidationException(
                    f"Buyer {request.buyer_id} already has {pending} open orders",
                    field="buyer_id",
                    details={"pending_orders": pending, "limit": self.max_pending_orders},
                )

            code = await self.code_generator.generate_unique(self.catalog.order_code_exists, kind="order")
            order = await self.catalog.create_order(
                Order.place(code=code, buyer_id=request.buyer_id, product=product, quantity=quantity)
            )

        logger.info(
            f"Order created: {order.code} (buyer {order.buyer_id}, product {order.product_id}, qty {order.quantity})"
        )

        self.dispatcher.dispatch(
            self.notifier.notify_seller(order.store_id, Notification.order_created(order, product)),
            f"notify seller of order {order.code}",
        )
        return order


__all__ = ["CreateOrderUseCase", "CreateOrderRequest"]
