"""
Distance Calculator

Great-circle distance between two points on a spherical Earth.
"""

import math

from ..value_objects.coordinate import Coordinate, validate_coordinate_component

EARTH_RADIUS_KM = 6371.0


class DistanceCalculator:
    """
    Domain service for geospatial math.

    Stateless; one instance can be shared freely.

    Example:
        ```python
        calculator = DistanceCalculator()
        km = calculator.distance_km(searcher, store.location)
        calculator.format_distance(km)  # "850 m" or "3.4 km"
        ```
    """

    def __init__(self, radius_km: float = EARTH_RADIUS_KM):
        self.radius_km = radius_km

    def distance_km(self, a: Coordinate, b: Coordinate) -> float:
        """
        Haversine distance between two coordinates.

        Components are re-validated so values built around the constructor
        (e.g. via ``object.__new__``) still fail loudly.

        Args:
            a: First point
            b: Second point

        Returns:
            Distance in km, rounded to 2 decimals and never negative

        Raises:
            InvalidCoordinateException: If any component is NaN or out of range
        """
        lat1 = validate_coordinate_component("latitude", a.latitude, 90)
        lon1 = validate_coordinate_component("longitude", a.longitude, 180)
        lat2 = validate_coordinate_component("latitude", b.latitude, 90)
        lon2 = validate_coordinate_component("longitude", b.longitude, 180)

        phi1 = math.radians(lat1)
        phi2 = math.radians(lat2)
        d_phi = math.radians(lat2 - lat1)
        d_lambda = math.radians(lon2 - lon1)

        h = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
        # Float error can push h marginally outside [0, 1]
        h = min(1.0, max(0.0, h))
        distance = 2 * self.radius_km * math.atan2(math.sqrt(h), math.sqrt(1 - h))

        return max(0.0, round(distance, 2))

    @staticmethod
    def format_distance(km: float) -> str:
        """
        Human-readable distance.

        Below 1 km the value is shown in whole meters ("850 m"),
        otherwise in kilometers with one decimal ("3.4 km").
        """
        if km < 1:
            meters = math.floor(km * 1000 + 0.5)
            return f"{meters} m"
        return f"{km:.1f} km"


__all__ = ["DistanceCalculator", "EARTH_RADIUS_KM"]
