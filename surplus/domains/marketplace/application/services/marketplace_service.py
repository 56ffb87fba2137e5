"""
Marketplace Service

Entry point for the bot/HTTP layers: one method per exposed engine
operation, each delegating to its use case.
"""

from datetime import datetime
from decimal import Decimal

from surplus.domains.marketplace.application.dto import NearbyStoresResult
from surplus.domains.marketplace.application.services.side_effects import SideEffectDispatcher
from surplus.domains.marketplace.application.use_cases import (
    ConfirmOrderRequest,
    ConfirmOrderUseCase,
    CreateOrderRequest,
    CreateOrderUseCase,
    FindNearbyStoresRequest,
    FindNearbyStoresUseCase,
    GetOrderUseCase,
    ListOrdersUseCase,
    PublishProductRequest,
    PublishProductUseCase,
    RejectOrderRequest,
    RejectOrderUseCase,
)
from surplus.domains.marketplace.domain.entities import Order, Product
from surplus.domains.marketplace.domain.value_objects import OrderStatus


class MarketplaceService:
    """
    Facade over the discovery and order lifecycle use cases.

    Example:
        ```python
        service = container.get_marketplace_service()
        nearby = await service.search_nearby(41.31, 69.28, limit=5)
        order = await service.create_order(buyer_id=42, product_id=7, quantity=2)
        await service.confirm_order(order.id, acting_seller_id=3)
        ```
    """

    def __init__(
        self,
        find_nearby_stores: FindNearbyStoresUseCase,
        create_order: CreateOrderUseCase,
        confirm_order: ConfirmOrderUseCase,
        reject_order: RejectOrderUseCase,
        get_order: GetOrderUseCase,
        list_orders: ListOrdersUseCase,
        publish_product: PublishProductUseCase,
        dispatcher: SideEffectDispatcher,
    ):
        self._find_nearby_stores = find_nearby_stores
        self._create_order = create_order
        self._confirm_order = confirm_order
        self._reject_order = reject_order
        self._get_order = get_order
        self._list_orders = list_orders
        self._publish_product = publish_product
        self.dispatcher = dispatcher

    async def search_nearby(
        self,
        latitude: float,
        longitude: float,
        limit: int | None = None,
        radius_km: float | None = None,
    ) -> NearbyStoresResult:
        return await self._find_nearby_stores.execute(
            FindNearbyStoresRequest(latitude=latitude, longitude=longitude, limit=limit, radius_km=radius_km)
        )

    async def create_order(self, buyer_id: int, product_id: int, quantity: int) -> Order:
        return await self._create_order.execute(
            CreateOrderRequest(buyer_id=buyer_id, product_id=product_id, quantity=quantity)
        )

    async def confirm_order(self, order_id: int, acting_seller_id: int) -> Order:
        return await self._confirm_order.execute(
            ConfirmOrderRequest(order_id=order_id, acting_seller_id=acting_seller_id)
        )

    async def reject_order(self, order_id: int, acting_user_id: int) -> Order:
        """Seller rejection, or cancellation by the buyer who placed the order."""
        return await self._reject_order.execute(RejectOrderRequest(order_id=order_id, acting_user_id=acting_user_id))

    async def get_order(self, order_id: int) -> Order:
        return await self._get_order.by_id(order_id)

    async def get_order_by_code(self, code: str) -> Order:
        return await self._get_order.by_code(code)

    async def list_buyer_orders(self, buyer_id: int, limit: int = 20) -> list[Order]:
        return await self._list_orders.for_buyer(buyer_id, limit=limit)

    async def list_store_orders(
        self, store_id: int, status: OrderStatus | None = None, limit: int = 50
    ) -> list[Order]:
        return await self._list_orders.for_store(store_id, status=status, limit=limit)

    async def publish_product(
        self,
        seller_id: int,
        store_id: int,
        name: str,
        price: Decimal | float | str,
        quantity: int,
        available_until: datetime,
        available_from: datetime | None = None,
        original_price: Decimal | float | str | None = None,
        description: str | None = None,
    ) -> Product:
        return await self._publish_product.execute(
            PublishProductRequest(
                seller_id=seller_id,
                store_id=store_id,
                name=name,
                price=price,
                quantity=quantity,
                available_until=available_until,
                available_from=available_from,
                original_price=original_price,
                description=description,
            )
        )

    async def shutdown(self) -> None:
        """Let in-flight notifications finish."""
        await self.dispatcher.drain()


__all__ = ["MarketplaceService"]
