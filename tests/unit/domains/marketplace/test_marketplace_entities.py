"""
Unit tests for Store, Product and Order entities.
"""

from datetime import timedelta
from decimal import Decimal

import pytest

from surplus.core.domain import (
    InsufficientStockException,
    InvalidOperationException,
    Money,
    ValidationException,
)
from surplus.domains.marketplace.domain.entities import Order, Product, validate_order_quantity
from surplus.domains.marketplace.domain.value_objects import Coordinate, OrderStatus, StoreStatus
from tests.utils.builders import FAR_FUTURE, OrderBuilder, ProductBuilder, StoreBuilder


class TestStore:
    def test_name_is_required(self):
        with pytest.raises(ValidationException):
            StoreBuilder().with_name("").build()

    def test_hours_are_validated(self):
        with pytest.raises(ValidationException):
            StoreBuilder().open_between(540, 1440).build()

    def test_update_hours_validates(self):
        store = StoreBuilder().build()

        with pytest.raises(ValidationException):
            store.update_hours(-5, 600)
        assert store.opens_at_minute == 540

        store.update_hours(1320, 360)
        assert store.hours.wraps_midnight

    def test_approval_and_ownership(self):
        store = StoreBuilder().pending().owned_by(7).build()

        assert not store.is_approved()
        assert store.is_owned_by(7)

        store.change_status(StoreStatus.APPROVED)
        assert store.is_approved()

    def test_location(self):
        store = StoreBuilder().without_location().build()

        assert not store.has_location()

        store.update_location(Coordinate(41.3, 69.2))
        assert store.has_location()

    def test_to_dict(self):
        data = StoreBuilder().with_id(3).build().to_dict()

        assert data["id"] == 3
        assert data["status"] == "approved"
        assert data["hours"] == "09:00 - 22:00"
        assert data["latitude"] == 41.3111


class TestProduct:
    def test_price_must_be_positive(self):
        with pytest.raises(ValidationException):
            ProductBuilder().with_price("0").build()

    def test_quantity_must_be_non_negative_int(self):
        with pytest.raises(ValidationException):
            ProductBuilder().with_quantity(-1).build()
        with pytest.raises(ValidationException):
            ProductBuilder().with_quantity(True).build()

    def test_window_must_be_ordered(self):
        with pytest.raises(ValidationException):
            ProductBuilder().available_from(FAR_FUTURE).available_until(FAR_FUTURE).build()

    def test_zero_quantity_is_allowed_but_inactive(self):
        product = ProductBuilder().with_quantity(0).build()

        assert not product.has_stock()
        assert not product.is_active

    def test_window_mixes_naive_and_aware_timestamps(self):
        until = FAR_FUTURE
        start = (FAR_FUTURE - timedelta(hours=3)).replace(tzinfo=None)

        product = ProductBuilder().available_from(start).available_until(until).build()

        assert product.available_from == start
        with pytest.raises(ValidationException):
            ProductBuilder().available_from(until.replace(tzinfo=None)).available_until(until).build()
        with pytest.raises(ValidationException):
            ProductBuilder().available_from(until).available_until(start).build()

    @pytest.mark.parametrize(
        "price,original,expected",
        [
            ("12000", "20000", 40),
            ("10000", "30000", 67),
            ("12000", None, 0),
            ("12000", "12000", 0),
            ("15000", "12000", 0),
        ],
    )
    def test_discount_percentage(self, price, original, expected):
        product = ProductBuilder().with_price(price).with_original_price(original).build()

        assert product.discount_percentage == expected

    def test_decrement_stock(self):
        product = ProductBuilder().with_quantity(5).build()

        assert product.decrement_stock(2) == 3
        assert product.is_active

    def test_decrement_to_zero_deactivates(self):
        product = ProductBuilder().with_quantity(2).build()

        assert product.decrement_stock(2) == 0
        assert not product.is_active

    def test_decrement_beyond_stock(self):
        product = ProductBuilder().with_quantity(1).build()

        with pytest.raises(InsufficientStockException):
            product.decrement_stock(2)
        assert product.quantity == 1

    def test_total_for(self):
        product = ProductBuilder().with_price("12000.50").build()

        assert product.total_for(3) == Money(Decimal("36001.50"))

    def test_to_dict(self):
        data = ProductBuilder().with_code("A1B2C3").build().to_dict()

        assert data["code"] == "A1B2C3"
        assert data["price"] == "12000"
        assert data["discount_percentage"] == 40
        assert data["available_from"] is None


class TestOrder:
    def test_place_captures_total(self):
        product = ProductBuilder().with_id(4).in_store(2).with_price("12000").build()

        order = Order.place(code="9F3A1C", buyer_id=42, product=product, quantity=2)

        assert order.status == OrderStatus.PENDING
        assert order.product_id == 4
        assert order.store_id == 2
        assert order.total_price.amount == Decimal("24000.00")

    def test_total_not_recomputed_when_price_changes(self):
        product = ProductBuilder().with_id(4).with_price("12000").build()
        order = Order.place(code="9F3A1C", buyer_id=42, product=product, quantity=2)

        product.price = Money(Decimal("1"))

        assert order.total_price.amount == Decimal("24000.00")

    def test_confirm_sets_timestamp_and_version(self):
        order = OrderBuilder().build()

        order.transition_to(OrderStatus.CONFIRMED)

        assert order.status == OrderStatus.CONFIRMED
        assert order.confirmed_at is not None
        assert order.cancelled_at is None
        assert order.version == 1
        assert order.is_terminal()

    def test_cancel_sets_timestamp(self):
        order = OrderBuilder().build()

        order.transition_to(OrderStatus.CANCELLED)

        assert order.cancelled_at is not None

    @pytest.mark.parametrize("first", [OrderStatus.CONFIRMED, OrderStatus.CANCELLED])
    @pytest.mark.parametrize("second", [OrderStatus.PENDING, OrderStatus.CONFIRMED, OrderStatus.CANCELLED])
    def test_terminal_orders_cannot_move(self, first, second):
        order = OrderBuilder().build()
        order.transition_to(first)

        with pytest.raises(InvalidOperationException):
            order.transition_to(second)
        assert order.status == first

    @pytest.mark.parametrize("quantity", [0, -1, 1.5, True, "2"])
    def test_quantity_must_be_positive_int(self, quantity):
        with pytest.raises(ValidationException):
            validate_order_quantity(quantity)

    def test_to_dict(self):
        order = OrderBuilder().with_id(9).with_code("ABC123").with_quantity(2).build()

        data = order.to_dict()

        assert data["id"] == 9
        assert data["status"] == "pending"
        assert data["confirmed_at"] is None


class TestProductVisibilityWindow:
    def test_short_lived_product(self, fixed_now):
        product = Product(
            store_id=1,
            name="Soup",
            price=Money(Decimal("5000")),
            quantity=1,
            available_from=fixed_now,
            available_until=fixed_now + timedelta(hours=2),
        )

        assert product.available_from < product.available_until
