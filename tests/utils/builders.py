"""
Test data builders using the Builder pattern.

Provides fluent interfaces for constructing domain entities with sensible defaults.
"""

import itertools
from datetime import UTC, datetime
from decimal import Decimal
from typing import Any

from surplus.core.domain import Money
from surplus.domains.marketplace.domain.entities import Order, Product, Store
from surplus.domains.marketplace.domain.value_objects import Coordinate, OrderStatus, StoreStatus

# Tashkent city centre
DEFAULT_LOCATION = Coordinate(latitude=41.3111, longitude=69.2797)
FAR_FUTURE = datetime(2099, 1, 1, tzinfo=UTC)

SELLER_ID = 100
BUYER_ID = 1

_codes = itertools.count(1)


class StoreBuilder:
    """Builder for creating stores."""

    def __init__(self):
        self._data: dict[str, Any] = {
            "id": None,
            "name": "Test Bakery",
            "owner_id": SELLER_ID,
            "status": StoreStatus.APPROVED,
            "location": DEFAULT_LOCATION,
            "opens_at_minute": 540,  # 09:00
            "closes_at_minute": 1320,  # 22:00
        }

    def with_id(self, store_id: int) -> "StoreBuilder":
        self._data["id"] = store_id
        return self

    def with_name(self, name: str) -> "StoreBuilder":
        self._data["name"] = name
        return self

    def owned_by(self, owner_id: int) -> "StoreBuilder":
        self._data["owner_id"] = owner_id
        return self

    def with_status(self, status: StoreStatus) -> "StoreBuilder":
        self._data["status"] = status
        return self

    def pending(self) -> "StoreBuilder":
        return self.with_status(StoreStatus.PENDING)

    def at(self, latitude: float, longitude: float) -> "StoreBuilder":
        self._data["location"] = Coordinate(latitude=latitude, longitude=longitude)
        return self

    def without_location(self) -> "StoreBuilder":
        self._data["location"] = None
        return self

    def open_between(self, opens_at_minute: int, closes_at_minute: int) -> "StoreBuilder":
        self._data["opens_at_minute"] = opens_at_minute
        self._data["closes_at_minute"] = closes_at_minute
        return self

    def build(self) -> Store:
        return Store(**self._data)


class ProductBuilder:
    """Builder for creating products."""

    def __init__(self):
        self._data: dict[str, Any] = {
            "id": None,
            "store_id": 1,
            "name": "Croissant box",
            "price": Money(Decimal("12000")),
            "original_price": Money(Decimal("20000")),
            "quantity": 5,
            "available_from": None,
            "available_until": FAR_FUTURE,
            "is_active": True,
            "code": f"P{next(_codes):05d}",
        }

    def with_id(self, product_id: int) -> "ProductBuilder":
        self._data["id"] = product_id
        return self

    def in_store(self, store_id: int) -> "ProductBuilder":
        self._data["store_id"] = store_id
        return self

    def with_name(self, name: str) -> "ProductBuilder":
        self._data["name"] = name
        return self

    def with_price(self, price: str) -> "ProductBuilder":
        self._data["price"] = Money(Decimal(price))
        return self

    def with_original_price(self, price: str | None) -> "ProductBuilder":
        self._data["original_price"] = Money(Decimal(price)) if price is not None else None
        return self

    def with_quantity(self, quantity: int) -> "ProductBuilder":
        self._data["quantity"] = quantity
        return self

    def available_until(self, until: datetime) -> "ProductBuilder":
        self._data["available_until"] = until
        return self

    def available_from(self, start: datetime) -> "ProductBuilder":
        self._data["available_from"] = start
        return self

    def inactive(self) -> "ProductBuilder":
        self._data["is_active"] = False
        return self

    def with_code(self, code: str) -> "ProductBuilder":
        self._data["code"] = code
        return self

    def build(self) -> Product:
        return Product(**self._data)


class OrderBuilder:
    """Builder for creating orders."""

    def __init__(self):
        self._data: dict[str, Any] = {
            "id": None,
            "code": "ABC123",
            "buyer_id": BUYER_ID,
            "product_id": 1,
            "store_id": 1,
            "quantity": 1,
            "total_price": Money(Decimal("12000")),
            "status": OrderStatus.PENDING,
        }

    def with_id(self, order_id: int) -> "OrderBuilder":
        self._data["id"] = order_id
        return self

    def with_code(self, code: str) -> "OrderBuilder":
        self._data["code"] = code
        return self

    def for_buyer(self, buyer_id: int) -> "OrderBuilder":
        self._data["buyer_id"] = buyer_id
        return self

    def for_product(self, product_id: int, store_id: int = 1) -> "OrderBuilder":
        self._data["product_id"] = product_id
        self._data["store_id"] = store_id
        return self

    def with_quantity(self, quantity: int) -> "OrderBuilder":
        self._data["quantity"] = quantity
        return self

    def with_status(self, status: OrderStatus) -> "OrderBuilder":
        self._data["status"] = status
        return self

    def created_at(self, created_at: datetime) -> "OrderBuilder":
        self._data["created_at"] = created_at
        return self

    def build(self) -> Order:
        return Order(**self._data)
