"""
Coordinate Value Object

Latitude/longitude pair in decimal degrees.
"""

import math
import re
from dataclasses import dataclass
from typing import Any

from surplus.core.domain import InvalidCoordinateException, ValueObject

# "(lon,lat)" point literal as stored by the persistence layer
_POINT_PATTERN = re.compile(r"^\s*\(\s*([^,()]+?)\s*,\s*([^,()]+?)\s*\)\s*$")


def validate_coordinate_component(field: str, value: Any, bound: float) -> float:
    """
    Validate one coordinate component.

    Args:
        field: "latitude" or "longitude" (used in the error)
        value: Raw value
        bound: Absolute range limit (90 or 180)

    Returns:
        The value as float

    Raises:
        InvalidCoordinateException: If not a number, NaN or out of range
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidCoordinateException(field, value)
    number = float(value)
    if math.isnan(number) or number < -bound or number > bound:
        raise InvalidCoordinateException(field, value)
    return number


@dataclass(frozen=True)
class Coordinate(ValueObject):
    """
    Immutable geographic point.

    Example:
        ```python
        tashkent = Coordinate(latitude=41.3111, longitude=69.2797)
        ```
    """

    latitude: float
    longitude: float

    def _validate(self) -> None:
        object.__setattr__(self, "latitude", validate_coordinate_component("latitude", self.latitude, 90))
        object.__setattr__(self, "longitude", validate_coordinate_component("longitude", self.longitude, 180))

    def to_point_string(self) -> str:
        """Render as the "(lon,lat)" point literal."""
        return f"({self.longitude},{self.latitude})"

    def __str__(self) -> str:
        return f"{self.latitude:.6f}, {self.longitude:.6f}"


def parse_location_string(value: str | None) -> Coordinate | None:
    """
    Parse a "(lon,lat)" point literal.

    Args:
        value: Raw point string, e.g. "(69.2797,41.3111)"

    Returns:
        Coordinate, or None when the string is empty, malformed or out of range
    """
    if not value:
        return None
    match = _POINT_PATTERN.match(value)
    if match is None:
        return None
    try:
        longitude = float(match.group(1))
        latitude = float(match.group(2))
        return Coordinate(latitude=latitude, longitude=longitude)
    except (ValueError, InvalidCoordinateException):
        return None
