"""
Immutable value types shared by every domain.

Value objects carry no identity: two prices of 12,000 are the same price.
"""

from abc import ABC
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Self

CENT = Decimal("0.01")


@dataclass(frozen=True)
class ValueObject(ABC):
    """Frozen dataclass whose subclasses check their fields in ``_validate``."""

    def __post_init__(self):
        self._validate()

    def _validate(self) -> None:
        pass


@dataclass(frozen=True)
class Money(ValueObject):
    """
    Non-negative amount in the marketplace currency.

    Ints and floats are coerced to Decimal on construction. Products are
    listed in whole units (e.g. 12000), so only ``multiply`` rounds, to cents.

    Example:
        ```python
        total = Money(Decimal("12000")).multiply(3)  # 36,000.00
        ```
    """

    amount: Decimal

    def _validate(self) -> None:
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", Decimal(str(self.amount)))
        if not self.amount.is_finite():
            raise ValueError("Money amount must be a finite number")
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def multiply(self, factor: int | float | Decimal) -> "Money":
        return Money((self.amount * Decimal(str(factor))).quantize(CENT, ROUND_HALF_UP))

    def is_zero(self) -> bool:
        return not self.amount

    def is_positive(self) -> bool:
        return self.amount > 0

    def __str__(self) -> str:
        return f"{self.amount:,.2f}"

    def __repr__(self) -> str:
        return f"Money({self.amount})"

    @classmethod
    def zero(cls) -> "Money":
        return cls(Decimal(0))

    @classmethod
    def from_float(cls, amount: float) -> "Money":
        """Build from a float, rounding half-up to cents."""
        return cls(Decimal(str(amount)).quantize(CENT, ROUND_HALF_UP))


class StatusEnum(str, Enum):
    """String enum used for store, order and conversation states."""

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Look a member up by value, ignoring case."""
        wanted = value.lower()
        for member in cls:
            if member.value.lower() == wanted:
                return member
        raise ValueError(f"Invalid {cls.__name__}: {value}")
