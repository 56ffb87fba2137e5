"""
Marketplace Use Cases
"""

from surplus.domains.marketplace.application.use_cases.confirm_order import ConfirmOrderRequest, ConfirmOrderUseCase
from surplus.domains.marketplace.application.use_cases.create_order import CreateOrderRequest, CreateOrderUseCase
from surplus.domains.marketplace.application.use_cases.find_nearby_stores import (
    FindNearbyStoresRequest,
    FindNearbyStoresUseCase,
)
from surplus.domains.marketplace.application.use_cases.get_orders import GetOrderUseCase, ListOrdersUseCase
from surplus.domains.marketplace.application.use_cases.publish_product import (
    PublishProductRequest,
    PublishProductUseCase,
)
from surplus.domains.marketplace.application.use_cases.reject_order import RejectOrderRequest, RejectOrderUseCase

__all__ = [
    "ConfirmOrderRequest",
    "ConfirmOrderUseCase",
    "CreateOrderRequest",
    "CreateOrderUseCase",
    "FindNearbyStoresRequest",
    "FindNearbyStoresUseCase",
    "GetOrderUseCase",
    "ListOrdersUseCase",
    "PublishProductRequest",
    "PublishProductUseCase",
    "RejectOrderRequest",
    "RejectOrderUseCase",
]
