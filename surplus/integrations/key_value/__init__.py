"""
Key-Value Store Integrations

Adapters for ``IKeyValueStore`` and a settings-driven factory.
"""

from surplus.config.settings import Settings
from surplus.core.interfaces import IKeyValueStore
from surplus.integrations.key_value.memory_store import InMemoryKeyValueStore
from surplus.integrations.key_value.redis_store import RedisKeyValueStore


def create_key_value_store(settings: Settings) -> IKeyValueStore:
    """Build the backend selected by ``KEY_VALUE_BACKEND``."""
    if settings.KEY_VALUE_BACKEND == "redis":
        return RedisKeyValueStore.from_settings(settings)
    return InMemoryKeyValueStore()


__all__ = [
    "InMemoryKeyValueStore",
    "RedisKeyValueStore",
    "create_key_value_store",
]
