"""
Marketplace Domain Value Objects

Immutable value objects for the marketplace domain.
"""

from surplus.domains.marketplace.domain.value_objects.coordinate import (
    Coordinate,
    parse_location_string,
    validate_coordinate_component,
)
from surplus.domains.marketplace.domain.value_objects.opening_hours import (
    MINUTES_PER_DAY,
    OpeningHours,
    format_minute_of_day,
    format_store_hours,
    is_valid_store_hours,
    parse_time_of_day,
    validate_minute_of_day,
    validate_store_hours,
)
from surplus.domains.marketplace.domain.value_objects.status import (
    ORDER_TRANSITIONS,
    OrderStatus,
    StoreStatus,
)
from surplus.domains.marketplace.domain.value_objects.timestamps import as_utc

__all__ = [
    "Coordinate",
    "parse_location_string",
    "validate_coordinate_component",
    "MINUTES_PER_DAY",
    "OpeningHours",
    "format_minute_of_day",
    "format_store_hours",
    "is_valid_store_hours",
    "parse_time_of_day",
    "validate_minute_of_day",
    "validate_store_hours",
    "ORDER_TRANSITIONS",
    "OrderStatus",
    "StoreStatus",
    "as_utc",
]
