"""
Unit tests for MarketplaceService wired through DependencyContainer.

Exercises the order lookups, product publishing and the end-to-end
buyer/seller flow against the in-memory catalog.
"""

from datetime import timedelta
from decimal import Decimal

import pytest
import pytest_asyncio

from surplus.core.container import DependencyContainer
from surplus.core.domain import AuthorizationException, EntityNotFoundException, ValidationException
from surplus.domains.conversation.application import ConversationSessionStore, RateLimiter
from surplus.domains.marketplace.domain.value_objects import OrderStatus
from surplus.domains.marketplace.infrastructure.repositories import InMemoryCatalog
from surplus.domains.marketplace.infrastructure.services import LoggingNotifier, LoggingRatings
from surplus.integrations.key_value import InMemoryKeyValueStore
from tests.utils.builders import BUYER_ID, FAR_FUTURE, SELLER_ID, StoreBuilder


@pytest_asyncio.fixture
async def store(catalog):
    return await catalog.add_store(StoreBuilder().owned_by(SELLER_ID).build())


@pytest_asyncio.fixture
async def product(service, store):
    return await service.publish_product(
        seller_id=SELLER_ID,
        store_id=store.id,
        name="Samsa tray",
        price="12000",
        original_price="20000",
        quantity=4,
        available_until=FAR_FUTURE,
    )


class TestPublishProduct:
    @pytest.mark.asyncio
    async def test_publishes_with_unique_code(self, service, store, product):
        assert product.id is not None
        assert product.store_id == store.id
        assert len(product.code) == 6
        assert product.price.amount == Decimal("12000")
        assert product.discount_percentage == 40

    @pytest.mark.asyncio
    async def test_requires_store_owner(self, service, store):
        with pytest.raises(AuthorizationException):
            await service.publish_product(
                seller_id=SELLER_ID + 1,
                store_id=store.id,
                name="Samsa tray",
                price="12000",
                quantity=1,
                available_until=FAR_FUTURE,
            )

    @pytest.mark.asyncio
    async def test_unknown_store(self, service):
        with pytest.raises(EntityNotFoundException):
            await service.publish_product(
                seller_id=SELLER_ID,
                store_id=404,
                name="Samsa tray",
                price="12000",
                quantity=1,
                available_until=FAR_FUTURE,
            )

    @pytest.mark.asyncio
    @pytest.mark.parametrize("price", ["abc", "-5", "0"])
    async def test_invalid_price(self, service, store, price):
        with pytest.raises(ValidationException):
            await service.publish_product(
                seller_id=SELLER_ID,
                store_id=store.id,
                name="Samsa tray",
                price=price,
                quantity=1,
                available_until=FAR_FUTURE,
            )

    @pytest.mark.asyncio
    async def test_invalid_window(self, service, store, fixed_now):
        with pytest.raises(ValidationException):
            await service.publish_product(
                seller_id=SELLER_ID,
                store_id=store.id,
                name="Samsa tray",
                price="12000",
                quantity=1,
                available_from=fixed_now,
                available_until=fixed_now - timedelta(hours=1),
            )

    @pytest.mark.asyncio
    async def test_window_accepts_naive_start(self, service, store, fixed_now):
        product = await service.publish_product(
            seller_id=SELLER_ID,
            store_id=store.id,
            name="Samsa tray",
            price="12000",
            quantity=1,
            available_from=fixed_now.replace(tzinfo=None),
            available_until=fixed_now + timedelta(hours=3),
        )

        assert product.id is not None

    @pytest.mark.asyncio
    async def test_window_with_naive_start_after_aware_end(self, service, store, fixed_now):
        with pytest.raises(ValidationException):
            await service.publish_product(
                seller_id=SELLER_ID,
                store_id=store.id,
                name="Samsa tray",
                price="12000",
                quantity=1,
                available_from=(fixed_now + timedelta(hours=4)).replace(tzinfo=None),
                available_until=fixed_now + timedelta(hours=3),
            )

    @pytest.mark.asyncio
    async def test_zero_stock_listing_is_not_discoverable(self, service, store):
        product = await service.publish_product(
            seller_id=SELLER_ID,
            store_id=store.id,
            name="Samsa tray",
            price="12000",
            quantity=0,
            available_until=FAR_FUTURE,
        )

        result = await service.search_nearby(41.3111, 69.2797)

        assert not product.is_active
        assert result.results == []
        assert result.has_approved_stores
        assert not result.has_visible_products


class TestOrderLookups:
    @pytest.mark.asyncio
    async def test_get_order_by_code_is_case_insensitive(self, service, product):
        order = await service.create_order(BUYER_ID, product.id, 1)

        found = await service.get_order_by_code(f"  {order.code.lower()} ")

        assert found.id == order.id

    @pytest.mark.asyncio
    async def test_get_order_by_blank_code(self, service):
        with pytest.raises(ValidationException):
            await service.get_order_by_code("   ")

    @pytest.mark.asyncio
    async def test_get_unknown_order(self, service):
        with pytest.raises(EntityNotFoundException):
            await service.get_order(404)
        with pytest.raises(EntityNotFoundException):
            await service.get_order_by_code("FFFFFF")

    @pytest.mark.asyncio
    async def test_buyer_history(self, service, product):
        first = await service.create_order(BUYER_ID, product.id, 1)
        second = await service.create_order(BUYER_ID, product.id, 2)
        await service.create_order(BUYER_ID + 1, product.id, 1)

        history = await service.list_buyer_orders(BUYER_ID)

        assert {o.id for o in history} == {first.id, second.id}

    @pytest.mark.asyncio
    async def test_store_queue(self, service, store, product):
        kept = await service.create_order(BUYER_ID, product.id, 1)
        dropped = await service.create_order(BUYER_ID, product.id, 1)
        await service.reject_order(dropped.id, acting_user_id=SELLER_ID)

        queue = await service.list_store_orders(store.id, status=OrderStatus.PENDING)

        assert [o.id for o in queue] == [kept.id]

    @pytest.mark.asyncio
    async def test_store_queue_unknown_store(self, service):
        with pytest.raises(EntityNotFoundException):
            await service.list_store_orders(404)

    @pytest.mark.asyncio
    async def test_history_limit_must_be_positive(self, service):
        with pytest.raises(ValidationException):
            await service.list_buyer_orders(BUYER_ID, limit=0)


class TestEndToEnd:
    @pytest.mark.asyncio
    async def test_discover_order_confirm(self, service, store, product, mock_notifier, mock_ratings):
        # Discover
        nearby = await service.search_nearby(41.3111, 69.2797)
        assert [hit.store.id for hit in nearby.results] == [store.id]
        assert nearby.results[0].distance_km == 0.0

        # Order and confirm
        order = await service.create_order(BUYER_ID, product.id, 4)
        confirmed = await service.confirm_order(order.id, acting_seller_id=SELLER_ID)
        await service.shutdown()

        assert confirmed.status == OrderStatus.CONFIRMED
        mock_notifier.notify_seller.assert_awaited_once()
        mock_notifier.notify_buyer.assert_awaited_once()
        mock_ratings.request_post_purchase_rating.assert_awaited_once_with(BUYER_ID, product.id)

        # Sold out: no longer discoverable
        after = await service.search_nearby(41.3111, 69.2797)
        assert after.is_empty
        assert after.has_approved_stores
        assert not after.has_visible_products


class TestDependencyContainer:
    def test_defaults(self, settings):
        container = DependencyContainer(settings=settings)

        assert isinstance(container.get_catalog(), InMemoryCatalog)
        assert isinstance(container.get_notifier(), LoggingNotifier)
        assert isinstance(container.get_ratings(), LoggingRatings)
        assert isinstance(container.get_key_value_store(), InMemoryKeyValueStore)
        assert container.get_clock().utc_offset == timedelta(hours=5)

    def test_shared_collaborators_are_cached(self, container):
        assert container.get_catalog() is container.get_catalog()
        assert container.get_dispatcher() is container.get_dispatcher()
        assert container.get_marketplace_service() is container.get_marketplace_service()

    def test_code_generator_follows_settings(self, settings):
        settings.ORDER_CODE_LENGTH = 8
        container = DependencyContainer(settings=settings)

        assert container.create_code_generator().length == 8

    def test_conversation_services_share_store(self, settings):
        container = DependencyContainer(settings=settings)

        sessions = container.create_session_store()
        limiter = container.create_rate_limiter(scope="orders")

        assert isinstance(sessions, ConversationSessionStore)
        assert sessions.ttl_seconds == settings.SESSION_TTL_SECONDS
        assert isinstance(limiter, RateLimiter)
        assert limiter.scope == "orders"
        assert limiter.max_requests == settings.RATE_LIMIT_MAX_REQUESTS
