"""
Order Entity for the Marketplace Domain

A buyer's request for a quantity of one product, approved or rejected by
the seller.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from surplus.core.domain import AggregateRoot, InvalidOperationException, Money, ValidationException

from ..value_objects.status import OrderStatus
from .product import Product


@dataclass
class Order(AggregateRoot[int]):
    """
    Order aggregate root.

    Created in PENDING and moved exactly once to CONFIRMED or CANCELLED.
    ``total_price`` is captured at creation and never recomputed.

    Example:
        ```python
        order = Order.place(code="9F3A1C", buyer_id=42, product=product, quantity=2)
        order.transition_to(OrderStatus.CONFIRMED)
        ```
    """

    code: str = ""
    buyer_id: int = 0
    product_id: int = 0
    store_id: int = 0
    quantity: int = 1
    total_price: Money = field(default_factory=Money.zero)
    status: OrderStatus = OrderStatus.PENDING

    confirmed_at: datetime | None = None
    cancelled_at: datetime | None = None

    def __post_init__(self):
        validate_order_quantity(self.quantity)

    @classmethod
    def place(cls, code: str, buyer_id: int, product: Product, quantity: int) -> "Order":
        """
        Build a new PENDING order priced from the product's current price.

        Args:
            code: Unique human-readable order code
            buyer_id: Buyer placing the order
            product: Product being bought
            quantity: Units requested
        """
        return cls(
            code=code,
            buyer_id=buyer_id,
            product_id=product.id or 0,
            store_id=product.store_id,
            quantity=quantity,
            total_price=product.total_for(quantity),
        )

    def is_pending(self) -> bool:
        return self.status == OrderStatus.PENDING

    def is_terminal(self) -> bool:
        return self.status.is_terminal()

    def transition_to(self, new_status: OrderStatus) -> None:
        """
        Move to a new lifecycle state.

        Raises:
            InvalidOperationException: If the transition is not allowed
        """
        if not self.status.can_transition_to(new_status):
            raise InvalidOperationException(
                operation=f"transition_to_{new_status.value}",
                current_state=self.status.value,
                message=f"Order {self.code} is {self.status.value} and cannot become {new_status.value}",
            )

        now = datetime.now(UTC)
        if new_status == OrderStatus.CONFIRMED:
            self.confirmed_at = now
        elif new_status == OrderStatus.CANCELLED:
            self.cancelled_at = now
        self.status = new_status
        self.updated_at = now
        self.increment_version()

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "code": self.code,
            "buyer_id": self.buyer_id,
            "product_id": self.product_id,
            "store_id": self.store_id,
            "quantity": self.quantity,
            "total_price": str(self.total_price.amount),
            "status": self.status.value,
            "created_at": self.created_at.isoformat(),
            "confirmed_at": self.confirmed_at.isoformat() if self.confirmed_at else None,
            "cancelled_at": self.cancelled_at.isoformat() if self.cancelled_at else None,
        }


def validate_order_quantity(quantity: Any) -> int:
    """
    Ensure an order quantity is a positive integer.

    Raises:
        ValidationException: If quantity is not an integer >= 1
    """
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
        raise ValidationException("Order quantity must be at least 1", field="quantity", details={"value": quantity})
    return quantity
