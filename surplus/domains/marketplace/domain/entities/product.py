"""
Product Entity for the Marketplace Domain

A time-limited surplus-food listing with limited stock.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from surplus.core.domain import AggregateRoot, InsufficientStockException, Money, ValidationException

from ..value_objects.timestamps import as_utc


def _default_available_until() -> datetime:
    return datetime.now(UTC) + timedelta(days=1)


@dataclass
class Product(AggregateRoot[int]):
    """
    Product aggregate root.

    Contains business logic for:
    - Stock decrement on order confirmation
    - Discount display
    - Availability window

    Invariant: a product with quantity 0 is inactive, whether it was listed
    that way or sold out through ``decrement_stock``.

    Example:
        ```python
        product = Product(
            store_id=1,
            name="Croissant box",
            price=Money(Decimal("12000")),
            original_price=Money(Decimal("20000")),
            quantity=5,
            available_until=closing_time,
            code="A1B2C3",
        )
        product.discount_percentage  # 40
        ```
    """

    store_id: int = 0
    name: str = ""
    description: str | None = None
    price: Money = field(default_factory=Money.zero)
    original_price: Money | None = None
    quantity: int = 0
    available_from: datetime | None = None
    available_until: datetime = field(default_factory=_default_available_until)
    is_active: bool = True
    code: str = ""

    def __post_init__(self):
        """Validate product after initialization."""
        if not self.name:
            raise ValidationException("Product name is required", field="name")
        if not self.price.is_positive():
            raise ValidationException("Product price must be greater than zero", field="price")
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int) or self.quantity < 0:
            raise ValidationException("Product quantity must be a non-negative integer", field="quantity")
        if self.available_from is not None and as_utc(self.available_from) >= as_utc(self.available_until):
            raise ValidationException("available_from must be before available_until", field="available_from")
        if self.quantity == 0:
            self.is_active = False

    # Stock Management

    def has_stock(self, quantity: int = 1) -> bool:
        return self.quantity >= quantity

    def decrement_stock(self, amount: int) -> int:
        """
        Remove sold units from stock.

        Args:
            amount: Units sold

        Returns:
            Remaining quantity

        Raises:
            InsufficientStockException: If fewer than ``amount`` units remain
        """
        if amount > self.quantity:
            raise InsufficientStockException(product_id=self.id, requested=amount, available=self.quantity)
        self.quantity -= amount
        if self.quantity == 0:
            self.is_active = False
        self.touch()
        return self.quantity

    def deactivate(self) -> None:
        """Soft-deactivate; products referenced by orders are never deleted."""
        self.is_active = False
        self.touch()

    # Pricing

    @property
    def discount_percentage(self) -> int:
        """Whole-percent discount against the original price (0 when none)."""
        if self.original_price is None or self.original_price.amount <= self.price.amount:
            return 0
        ratio = (self.original_price.amount - self.price.amount) / self.original_price.amount * 100
        return int(ratio.quantize(Decimal("1"), ROUND_HALF_UP))

    def total_for(self, quantity: int) -> Money:
        """Price for ``quantity`` units."""
        return self.price.multiply(quantity)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "store_id": self.store_id,
            "name": self.name,
            "code": self.code,
            "price": str(self.price.amount),
            "original_price": str(self.original_price.amount) if self.original_price else None,
            "discount_percentage": self.discount_percentage,
            "quantity": self.quantity,
            "available_from": self.available_from.isoformat() if self.available_from else None,
            "available_until": self.available_until.isoformat(),
            "is_active": self.is_active,
        }
