"""
Notification DTOs

Structured messages handed to the notifier. Rendering to user-facing text
(localization, keyboards) belongs to the transport layer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from surplus.domains.marketplace.domain.entities import Order, Product


class NotificationKind(str, Enum):
    ORDER_CREATED = "order_created"
    ORDER_CONFIRMED = "order_confirmed"
    ORDER_CANCELLED = "order_cancelled"


class NotificationAction(str, Enum):
    """Affordances the recipient can act on."""

    CONFIRM = "confirm"
    REJECT = "reject"


@dataclass(frozen=True)
class Notification:
    """
    Order event addressed to a buyer or a seller.

    Example:
        ```python
        message = Notification.order_created(order, product)
        await notifier.notify_seller(order.store_id, message)
        ```
    """

    kind: NotificationKind
    order_id: int
    order_code: str
    product_id: int
    product_name: str
    store_id: int
    buyer_id: int
    quantity: int
    total_price: str
    actions: tuple[NotificationAction, ...] = field(default_factory=tuple)
    requires_rating: bool = False
    cancelled_by_buyer: bool = False

    @classmethod
    def _for_order(cls, kind: NotificationKind, order: Order, product: Product, **extra: Any) -> "Notification":
        return cls(
            kind=kind,
            order_id=order.id or 0,
            order_code=order.code,
            product_id=order.product_id,
            product_name=product.name,
            store_id=order.store_id,
            buyer_id=order.buyer_id,
            quantity=order.quantity,
            total_price=str(order.total_price.amount),
            **extra,
        )

    @classmethod
    def order_created(cls, order: Order, product: Product) -> "Notification":
        """New order for the seller, with confirm/reject affordances."""
        return cls._for_order(
            NotificationKind.ORDER_CREATED,
            order,
            product,
            actions=(NotificationAction.CONFIRM, NotificationAction.REJECT),
        )

    @classmethod
    def order_confirmed(cls, order: Order, product: Product) -> "Notification":
        return cls._for_order(NotificationKind.ORDER_CONFIRMED, order, product, requires_rating=True)

    @classmethod
    def order_cancelled(cls, order: Order, product: Product, cancelled_by_buyer: bool = False) -> "Notification":
        return cls._for_order(
            NotificationKind.ORDER_CANCELLED,
            order,
            product,
            cancelled_by_buyer=cancelled_by_buyer,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind.value,
            "order_id": self.order_id,
            "order_code": self.order_code,
            "product_id": self.product_id,
            "product_name": self.product_name,
            "store_id": self.store_id,
            "buyer_id": self.buyer_id,
            "quantity": self.quantity,
            "total_price": self.total_price,
            "actions": [action.value for action in self.actions],
            "requires_rating": self.requires_rating,
            "cancelled_by_buyer": self.cancelled_by_buyer,
        }


__all__ = ["Notification", "NotificationAction", "NotificationKind"]
