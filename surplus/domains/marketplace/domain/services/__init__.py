"""
Marketplace Domain Services

Stateless services for logic that does not belong to a single entity.
"""

from surplus.domains.marketplace.domain.services.availability_clock import AvailabilityClock, utc_now
from surplus.domains.marketplace.domain.services.code_generator import CodeGenerator
from surplus.domains.marketplace.domain.services.distance_calculator import EARTH_RADIUS_KM, DistanceCalculator

__all__ = [
    "AvailabilityClock",
    "CodeGenerator",
    "DistanceCalculator",
    "EARTH_RADIUS_KM",
    "utc_now",
]
