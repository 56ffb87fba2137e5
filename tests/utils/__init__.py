"""Test utilities: fluent builders for domain entities."""

from tests.utils.builders import (
    FAR_FUTURE,
    OrderBuilder,
    ProductBuilder,
    StoreBuilder,
)

__all__ = [
    "FAR_FUTURE",
    "OrderBuilder",
    "ProductBuilder",
    "StoreBuilder",
]
