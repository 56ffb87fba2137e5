"""
Opening Hours Value Object

Daily opening window expressed in minutes since midnight. A window whose
opening minute is greater than its closing minute wraps past midnight.
"""

from dataclasses import dataclass

from surplus.core.domain import ValidationException, ValueObject

MINUTES_PER_DAY = 1440
LAST_MINUTE_OF_DAY = MINUTES_PER_DAY - 1


def validate_minute_of_day(field: str, value: int) -> int:
    """
    Ensure a value is a minute-of-day in [0, 1439].

    Raises:
        ValidationException: If not an integer in range
    """
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= LAST_MINUTE_OF_DAY:
        raise ValidationException(
            f"{field} must be an integer between 0 and {LAST_MINUTE_OF_DAY}",
            field=field,
            details={"value": value},
        )
    return value


def validate_store_hours(opens_at_minute: int, closes_at_minute: int) -> None:
    """
    Validate both ends of an opening window.

    Raises ``ValidationException`` naming the bad field; use
    ``is_valid_store_hours`` for a plain yes/no check.
    """
    validate_minute_of_day("opens_at_minute", opens_at_minute)
    validate_minute_of_day("closes_at_minute", closes_at_minute)


def is_valid_store_hours(opens_at_minute: int, closes_at_minute: int) -> bool:
    """True when both ends are minutes-of-day in [0, 1439]."""
    try:
        validate_store_hours(opens_at_minute, closes_at_minute)
    except ValidationException:
        return False
    return True


def format_minute_of_day(minute: int) -> str:
    """Render a minute-of-day as HH:MM."""
    hours, minutes = divmod(minute, 60)
    return f"{hours:02d}:{minutes:02d}"


def format_store_hours(opens_at_minute: int, closes_at_minute: int) -> str:
    """Render an opening window as "HH:MM - HH:MM"."""
    return f"{format_minute_of_day(opens_at_minute)} - {format_minute_of_day(closes_at_minute)}"


def parse_time_of_day(value: str) -> int:
    """
    Parse "HH:MM" into a minute-of-day.

    Raises:
        ValidationException: If the text is not a valid 24h time
    """
    parts = value.strip().split(":")
    if len(parts) != 2 or not all(part.isdigit() for part in parts):
        raise ValidationException(f"Invalid time of day: {value!r}", field="time")
    hours, minutes = int(parts[0]), int(parts[1])
    if hours > 23 or minutes > 59:
        raise ValidationException(f"Invalid time of day: {value!r}", field="time")
    return hours * 60 + minutes


@dataclass(frozen=True)
class OpeningHours(ValueObject):
    """
    Store opening window.

    Example:
        ```python
        hours = OpeningHours(opens_at_minute=1320, closes_at_minute=360)  # 22:00 - 06:00
        hours.wraps_midnight  # True
        hours.is_open_at(1380)  # True (23:00)
        ```
    """

    opens_at_minute: int
    closes_at_minute: int

    def _validate(self) -> None:
        validate_store_hours(self.opens_at_minute, self.closes_at_minute)

    @property
    def wraps_midnight(self) -> bool:
        return self.opens_at_minute > self.closes_at_minute

    def is_open_at(self, minute_of_day: int) -> bool:
        """
        Check whether the window contains a minute-of-day.

        Same-day windows are inclusive on both ends. Wrapping windows are
        open from the opening minute until midnight and again from
        midnight until the closing minute.
        """
        if not self.wraps_midnight:
            return self.opens_at_minute <= minute_of_day <= self.closes_at_minute
        return minute_of_day >= self.opens_at_minute or minute_of_day <= self.closes_at_minute

    def __str__(self) -> str:
        return format_store_hours(self.opens_at_minute, self.closes_at_minute)

    @classmethod
    def from_strings(cls, opens: str, closes: str) -> "OpeningHours":
        """Build from "HH:MM" strings."""
        return cls(opens_at_minute=parse_time_of_day(opens), closes_at_minute=parse_time_of_day(closes))
