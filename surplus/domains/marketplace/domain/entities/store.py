"""
Store Entity for the Marketplace Domain

A seller's shop: approval status, location and daily opening hours.
"""

from dataclasses import dataclass
from typing import Any

from surplus.core.domain import AggregateRoot, ValidationException

from ..value_objects.coordinate import Coordinate
from ..value_objects.opening_hours import OpeningHours, validate_store_hours
from ..value_objects.status import StoreStatus


@dataclass
class Store(AggregateRoot[int]):
    """
    Store aggregate root.

    Owned by a seller account (``owner_id``). Hours are minutes since
    midnight; a window with ``opens_at_minute > closes_at_minute`` wraps
    past midnight.

    Example:
        ```python
        store = Store(
            name="Bakery on Navoi",
            owner_id=7,
            status=StoreStatus.APPROVED,
            location=Coordinate(41.3111, 69.2797),
            opens_at_minute=540,
            closes_at_minute=1320,
        )
        ```
    """

    name: str = ""
    owner_id: int = 0
    status: StoreStatus = StoreStatus.PENDING
    location: Coordinate | None = None
    opens_at_minute: int = 540
    closes_at_minute: int = 1320
    address: str | None = None
    phone: str | None = None

    def __post_init__(self):
        if not self.name:
            raise ValidationException("Store name is required", field="name")
        validate_store_hours(self.opens_at_minute, self.closes_at_minute)

    @property
    def hours(self) -> OpeningHours:
        return OpeningHours(self.opens_at_minute, self.closes_at_minute)

    def is_approved(self) -> bool:
        return self.status.is_discoverable()

    def has_location(self) -> bool:
        return self.location is not None

    def is_owned_by(self, user_id: int) -> bool:
        return self.owner_id == user_id

    # Seller edits

    def update_hours(self, opens_at_minute: int, closes_at_minute: int) -> None:
        """
        Change the opening window.

        Raises:
            ValidationException: If either minute is outside [0, 1439]
        """
        validate_store_hours(opens_at_minute, closes_at_minute)
        self.opens_at_minute = opens_at_minute
        self.closes_at_minute = closes_at_minute
        self.touch()

    def update_location(self, location: Coordinate) -> None:
        self.location = location
        self.touch()

    def change_status(self, status: StoreStatus) -> None:
        """Apply an approval-workflow decision."""
        self.status = status
        self.touch()

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "owner_id": self.owner_id,
            "status": self.status.value,
            "latitude": self.location.latitude if self.location else None,
            "longitude": self.location.longitude if self.location else None,
            "hours": str(self.hours),
            "address": self.address,
            "phone": self.phone,
        }
