"""
Availability Clock

Time-window logic for store opening hours and product validity windows.
"""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from ..entities.product import Product
from ..entities.store import Store
from ..value_objects.opening_hours import (
    OpeningHours,
    format_store_hours,
    validate_minute_of_day,
    validate_store_hours,
)
from ..value_objects.timestamps import as_utc


def utc_now() -> datetime:
    return datetime.now(UTC)


class AvailabilityClock:
    """
    Domain service answering "is it open?" and "is it still on sale?".

    Opening hours are local minutes-of-day. Local time is wall-clock UTC
    shifted by a fixed offset, so the service needs no timezone database.

    Example:
        ```python
        clock = AvailabilityClock(utc_offset_hours=5)
        clock.is_open(540, 1320, 600)  # True, 09:00-22:00 at 10:00
        clock.is_store_open(store)  # uses the current local minute
        ```
    """

    def __init__(
        self,
        utc_offset_hours: float = 0.0,
        clock: Callable[[], datetime] = utc_now,
    ):
        """
        Initialize availability clock.

        Args:
            utc_offset_hours: Offset from UTC of the stores' local time
            clock: Source of the current instant (timezone-aware)
        """
        self.utc_offset = timedelta(hours=utc_offset_hours)
        self._clock = clock

    def now(self) -> datetime:
        return as_utc(self._clock())

    def current_minute_of_day(self, now: datetime | None = None) -> int:
        """Local minute-of-day for ``now`` (defaults to the clock)."""
        local = as_utc(now or self._clock()) + self.utc_offset
        return local.hour * 60 + local.minute

    @staticmethod
    def is_open(opens_at_minute: int, closes_at_minute: int, now_minute: int) -> bool:
        """
        Check an opening window against a minute-of-day.

        Raises:
            ValidationException: If any input is outside [0, 1439]
        """
        validate_minute_of_day("now_minute", now_minute)
        return OpeningHours(opens_at_minute, closes_at_minute).is_open_at(now_minute)

    def is_store_open(self, store: Store, now: datetime | None = None) -> bool:
        return store.hours.is_open_at(self.current_minute_of_day(now))

    def is_product_visible(self, product: Product, now: datetime | None = None) -> bool:
        """
        Check whether a product can be shown to buyers.

        Visible iff active, not yet expired and, when a start is set,
        already started.
        """
        current = as_utc(now or self._clock())
        if not product.is_active:
            return False
        if current >= as_utc(product.available_until):
            return False
        return product.available_from is None or current >= as_utc(product.available_from)

    @staticmethod
    def format_store_hours(opens_at_minute: int, closes_at_minute: int) -> str:
        return format_store_hours(opens_at_minute, closes_at_minute)

    @staticmethod
    def validate_store_hours(opens_at_minute: int, closes_at_minute: int) -> None:
        validate_store_hours(opens_at_minute, closes_at_minute)


__all__ = ["AvailabilityClock", "utc_now"]
