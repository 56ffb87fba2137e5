"""
Shared pytest fixtures for all tests.

This module provides the frozen clock, in-memory catalog, mocked
collaborators and a seeded marketplace used across the unit tests.
"""

import os
from dataclasses import dataclass
from datetime import UTC, datetime
from unittest.mock import AsyncMock, Mock

import pytest
import pytest_asyncio
from redis.asyncio import Redis

from surplus.config.settings import Settings
from surplus.core.container import DependencyContainer
from surplus.domains.marketplace.application.services.marketplace_service import MarketplaceService
from surplus.domains.marketplace.application.services.side_effects import SideEffectDispatcher
from surplus.domains.marketplace.domain.entities import Product, Store
from surplus.domains.marketplace.domain.services import AvailabilityClock, CodeGenerator
from surplus.domains.marketplace.infrastructure.repositories import InMemoryCatalog
from tests.utils.builders import SELLER_ID, ProductBuilder, StoreBuilder

# Ensure test environment
os.environ["ENVIRONMENT"] = "test"

# 05:00 UTC is 10:00 local (minute 600) with the default +5 offset
FIXED_NOW = datetime(2026, 3, 10, 5, 0, tzinfo=UTC)


# ============================================================================
# CLOCK / SETTINGS
# ============================================================================


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def clock(fixed_now) -> AvailabilityClock:
    """Availability clock frozen at FIXED_NOW with a +5 hour offset."""
    return AvailabilityClock(utc_offset_hours=5, clock=lambda: fixed_now)


@pytest.fixture
def settings() -> Settings:
    """Settings with defaults only (no .env file)."""
    return Settings(_env_file=None)


# ============================================================================
# MARKETPLACE FIXTURES
# ============================================================================


@pytest.fixture
def catalog(clock) -> InMemoryCatalog:
    return InMemoryCatalog(visibility=clock)


@pytest.fixture
def mock_notifier() -> AsyncMock:
    """Mock INotifier; both methods are awaitable."""
    notifier = AsyncMock()
    notifier.notify_buyer = AsyncMock(return_value=None)
    notifier.notify_seller = AsyncMock(return_value=None)
    return notifier


@pytest.fixture
def mock_ratings() -> AsyncMock:
    ratings = AsyncMock()
    ratings.request_post_purchase_rating = AsyncMock(return_value=None)
    return ratings


@pytest_asyncio.fixture
async def dispatcher():
    """Side-effect dispatcher drained at teardown so no task outlives the loop."""
    dispatcher = SideEffectDispatcher()
    yield dispatcher
    await dispatcher.drain()


@pytest.fixture
def code_generator() -> CodeGenerator:
    return CodeGenerator(length=6, max_attempts=10)


@dataclass
class SeededMarketplace:
    """A store owned by SELLER_ID with one product of 5 units at 12000."""

    catalog: InMemoryCatalog
    store: Store
    product: Product


@pytest_asyncio.fixture
async def seeded(catalog) -> SeededMarketplace:
    store = await catalog.add_store(StoreBuilder().owned_by(SELLER_ID).build())
    product = await catalog.create_product(ProductBuilder().in_store(store.id).with_quantity(5).build())
    return SeededMarketplace(catalog=catalog, store=store, product=product)


@pytest.fixture
def container(settings, catalog, mock_notifier, mock_ratings, clock) -> DependencyContainer:
    return DependencyContainer(
        settings=settings,
        catalog=catalog,
        notifier=mock_notifier,
        ratings=mock_ratings,
        clock=clock,
    )


@pytest_asyncio.fixture
async def service(container):
    service: MarketplaceService = container.get_marketplace_service()
    yield service
    await service.shutdown()


# ============================================================================
# REDIS FIXTURES
# ============================================================================


@pytest.fixture
def mock_redis() -> Mock:
    """Create a mock Redis client."""
    mock = Mock(spec=Redis)
    mock.get = AsyncMock(return_value=None)
    mock.set = AsyncMock(return_value=True)
    mock.delete = AsyncMock(return_value=1)
    mock.incrby = AsyncMock(return_value=1)
    mock.expire = AsyncMock(return_value=True)
    mock.ttl = AsyncMock(return_value=-2)
    mock.ping = AsyncMock(return_value=True)
    mock.aclose = AsyncMock(return_value=None)
    return mock


# ============================================================================
# KEY-VALUE CLOCK
# ============================================================================


class FakeMonotonic:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_monotonic() -> FakeMonotonic:
    return FakeMonotonic()
