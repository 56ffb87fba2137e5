"""
Core Interfaces Module

Abstract ports shared by more than one domain.
"""

from surplus.core.interfaces.key_value_store import (
    IKeyValueStore,
    KeyValueConnectionError,
    KeyValueStoreError,
)

__all__ = [
    "IKeyValueStore",
    "KeyValueStoreError",
    "KeyValueConnectionError",
]
