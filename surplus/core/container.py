"""
Dependency Container

Wires adapters to ports and builds use cases and services.
"""

import logging

from surplus.config.settings import Settings, get_settings
from surplus.core.interfaces import IKeyValueStore
from surplus.domains.conversation.application import ConversationSessionStore, RateLimiter
from surplus.domains.marketplace.application.ports import ICatalog, INotifier, IRatings
from surplus.domains.marketplace.application.services.marketplace_service import MarketplaceService
from surplus.domains.marketplace.application.services.side_effects import SideEffectDispatcher
from surplus.domains.marketplace.application.use_cases import (
    ConfirmOrderUseCase,
    CreateOrderUseCase,
    FindNearbyStoresUseCase,
    GetOrderUseCase,
    ListOrdersUseCase,
    PublishProductUseCase,
    RejectOrderUseCase,
)
from surplus.domains.marketplace.domain.services import AvailabilityClock, CodeGenerator, DistanceCalculator
from surplus.domains.marketplace.infrastructure.repositories import InMemoryCatalog
from surplus.domains.marketplace.infrastructure.services import LoggingNotifier, LoggingRatings
from surplus.integrations.key_value import create_key_value_store

logger = logging.getLogger(__name__)


class DependencyContainer:
    """
    Composition root.

    Adapters passed to the constructor win over the defaults (in-memory
    catalog, logging notifier/ratings, settings-selected key-value store).
    Shared collaborators are created once and cached.

    Example:
        ```python
        container = DependencyContainer(catalog=sql_catalog, notifier=telegram_notifier)
        service = container.get_marketplace_service()
        ```
    """

    def __init__(
        self,
        settings: Settings | None = None,
        catalog: ICatalog | None = None,
        notifier: INotifier | None = None,
        ratings: IRatings | None = None,
        key_value_store: IKeyValueStore | None = None,
        clock: AvailabilityClock | None = None,
    ):
        self.settings = settings or get_settings()

        self._catalog = catalog
        self._notifier = notifier
        self._ratings = ratings
        self._key_value_store = key_value_store
        self._clock = clock
        self._dispatcher: SideEffectDispatcher | None = None
        self._marketplace_service: MarketplaceService | None = None

        logger.info(f"DependencyContainer initialized (environment={self.settings.ENVIRONMENT})")

    # Shared collaborators

    def get_clock(self) -> AvailabilityClock:
        if self._clock is None:
            self._clock = AvailabilityClock(utc_offset_hours=self.settings.STORE_UTC_OFFSET_HOURS)
        return self._clock

    def get_catalog(self) -> ICatalog:
        if self._catalog is None:
            logger.info("Using in-memory catalog")
            self._catalog = InMemoryCatalog(visibility=self.get_clock())
        return self._catalog

    def get_notifier(self) -> INotifier:
        if self._notifier is None:
            self._notifier = LoggingNotifier()
        return self._notifier

    def get_ratings(self) -> IRatings:
        if self._ratings is None:
            self._ratings = LoggingRatings()
        return self._ratings

    def get_dispatcher(self) -> SideEffectDispatcher:
        if self._dispatcher is None:
            self._dispatcher = SideEffectDispatcher()
        return self._dispatcher

    def get_key_value_store(self) -> IKeyValueStore:
        if self._key_value_store is None:
            logger.info(f"Creating key-value store: {self.settings.KEY_VALUE_BACKEND}")
            self._key_value_store = create_key_value_store(self.settings)
        return self._key_value_store

    def create_code_generator(self) -> CodeGenerator:
        return CodeGenerator(
            length=self.settings.ORDER_CODE_LENGTH,
            max_attempts=self.settings.ORDER_CODE_MAX_ATTEMPTS,
        )

    # Use cases

    def create_find_nearby_stores_use_case(self) -> FindNearbyStoresUseCase:
        return FindNearbyStoresUseCase(
            catalog=self.get_catalog(),
            clock=self.get_clock(),
            distance_calculator=DistanceCalculator(),
            default_limit=self.settings.DISCOVERY_DEFAULT_LIMIT,
            max_limit=self.settings.DISCOVERY_MAX_LIMIT,
            default_radius_km=self.settings.DISCOVERY_DEFAULT_RADIUS_KM,
        )

    def create_create_order_use_case(self) -> CreateOrderUseCase:
        return CreateOrderUseCase(
            catalog=self.get_catalog(),
            notifier=self.get_notifier(),
            dispatcher=self.get_dispatcher(),
            clock=self.get_clock(),
            code_generator=self.create_code_generator(),
            max_pending_orders=self.settings.MAX_PENDING_ORDERS_PER_BUYER,
        )

    def create_confirm_order_use_case(self) -> ConfirmOrderUseCase:
        return ConfirmOrderUseCase(
            catalog=self.get_catalog(),
            notifier=self.get_notifier(),
            ratings=self.get_ratings(),
            dispatcher=self.get_dispatcher(),
        )

    def create_reject_order_use_case(self) -> RejectOrderUseCase:
        return RejectOrderUseCase(
            catalog=self.get_catalog(),
            notifier=self.get_notifier(),
            dispatcher=self.get_dispatcher(),
        )

    def create_publish_product_use_case(self) -> PublishProductUseCase:
        return PublishProductUseCase(catalog=self.get_catalog(), code_generator=self.create_code_generator())

    # Services

    def get_marketplace_service(self) -> MarketplaceService:
        if self._marketplace_service is None:
            self._marketplace_service = MarketplaceService(
                find_nearby_stores=self.create_find_nearby_stores_use_case(),
                create_order=self.create_create_order_use_case(),
                confirm_order=self.create_confirm_order_use_case(),
                reject_order=self.create_reject_order_use_case(),
                get_order=GetOrderUseCase(self.get_catalog()),
                list_orders=ListOrdersUseCase(self.get_catalog()),
                publish_product=self.create_publish_product_use_case(),
                dispatcher=self.get_dispatcher(),
            )
        return self._marketplace_service

    def create_session_store(self) -> ConversationSessionStore:
        return ConversationSessionStore(self.get_key_value_store(), ttl_seconds=self.settings.SESSION_TTL_SECONDS)

    def create_rate_limiter(self, scope: str = "messages") -> RateLimiter:
        return RateLimiter(
            self.get_key_value_store(),
            max_requests=self.settings.RATE_LIMIT_MAX_REQUESTS,
            window_seconds=self.settings.RATE_LIMIT_WINDOW_SECONDS,
            scope=scope,
        )


__all__ = ["DependencyContainer"]
