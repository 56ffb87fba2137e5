"""
Find Nearby Stores Use Case

Ranks approved stores with visible listings by distance from the buyer.
"""

import logging
import math
from dataclasses import dataclass

from surplus.core.domain import ValidationException
from surplus.domains.marketplace.application.dto import NearbyStore, NearbyStoresResult
from surplus.domains.marketplace.application.ports import ICatalog
from surplus.domains.marketplace.domain.services import AvailabilityClock, DistanceCalculator
from surplus.domains.marketplace.domain.value_objects import Coordinate

logger = logging.getLogger(__name__)


@dataclass
class FindNearbyStoresRequest:
    """Request for nearby store discovery."""

    latitude: float
    longitude: float
    limit: int | None = None
    radius_km: float | None = None


class FindNearbyStoresUseCase:
    """
    Use Case: Find Nearby Stores

    Responsibilities:
    - Validate the searcher's coordinates
    - Keep only approved stores that have a visible product
    - Rank by distance (store ID breaks ties) and flag open/closed
    - Report whether approved stores and visible products exist at all
    """

    def __init__(
        self,
        catalog: ICatalog,
        clock: AvailabilityClock,
        distance_calculator: DistanceCalculator | None = None,
        default_limit: int = 10,
        max_limit: int = 50,
        default_radius_km: float | None = None,
    ):
        """
        Initialize use case with dependencies.

        Args:
            catalog: Catalog port
            clock: Availability clock (opening hours, product windows)
            distance_calculator: Geospatial math service
            default_limit: Limit used when the caller gives none
            max_limit: Upper clamp for caller-provided limits
            default_radius_km: Radius used when the caller gives none (None = unlimited)
        """
        self.catalog = catalog
        self.clock = clock
        self.distance_calculator = distance_calculator or DistanceCalculator()
        self.default_limit = default_limit
        self.max_limit = max_limit
        self.default_radius_km = default_radius_km

    async def execute(self, request: FindNearbyStoresRequest) -> NearbyStoresResult:
        """
        Find nearby stores.

        Args:
            request: Searcher location, limit and optional radius

        Returns:
            NearbyStoresResult ordered by ascending distance

        Raises:
            InvalidCoordinateException: If the searcher location is invalid
            ValidationException: If limit or radius is invalid
        """
        searcher = Coordinate(latitude=request.latitude, longitude=request.longitude)
        limit = self._resolve_limit(request.limit)
        radius_km = self._resolve_radius(request.radius_km)

        now = self.clock.now()
        listings = await self.catalog.list_approved_stores_with_visible_products(now)

        hits: list[NearbyStore] = []
        for listing in listings:
            store = listing.store
            if not store.is_approved():
                continue
            # Listing may be slightly stale; re-check against this request's instant
            products = [p for p in listing.products if self.clock.is_product_visible(p, now)]
            if not products:
                continue
            if store.location is None:
                logger.warning(f"Skipping store {store.id} in discovery: no location set")
                continue

            distance = self.distance_calculator.distance_km(searcher, store.location)
            if radius_km is not None and distance > radius_km:
                continue

            hits.append(
                NearbyStore(
                    store=store,
                    distance_km=distance,
                    is_open=self.clock.is_store_open(store, now),
                    products=products,
                )
            )

        hits.sort(key=lambda hit: (hit.distance_km, hit.store.id or 0))

        has_visible_products = bool(listings)
        has_approved_stores = has_visible_products or await self.catalog.has_approved_stores()

        logger.debug(f"Discovery at {searcher}: {len(hits)} stores in range, returning {min(len(hits), limit)}")

        return NearbyStoresResult(
            results=hits[:limit],
            has_approved_stores=has_approved_stores,
            has_visible_products=has_visible_products,
        )

    def _resolve_limit(self, limit: int | None) -> int:
        if limit is None:
            return self.default_limit
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise ValidationException("limit must be a positive integer", field="limit", details={"value": limit})
        return min(limit, self.max_limit)

    def _resolve_radius(self, radius_km: float | None) -> float | None:
        if radius_km is None:
            return self.default_radius_km
        if isinstance(radius_km, bool) or not isinstance(radius_km, (int, float)):
            raise ValidationException("radius_km must be a number", field="radius_km")
        if math.isnan(radius_km) or radius_km <= 0:
            raise ValidationException("radius_km must be greater than zero", field="radius_km")
        return float(radius_km)


__all__ = ["FindNearbyStoresUseCase", "FindNearbyStoresRequest"]
