"""
In-Memory Key-Value Store

Process-local ``IKeyValueStore`` with explicit per-key expiry.
"""

import math
import time
from collections.abc import Callable
from dataclasses import dataclass

from surplus.core.interfaces import KeyValueStoreError


@dataclass
class _Entry:
    value: str
    expires_at: float | None = None  # clock reading, None = no expiry

    def is_expired(self, now: float) -> bool:
        return self.expires_at is not None and now >= self.expires_at


class InMemoryKeyValueStore:
    """
    Dictionary-backed keyed store.

    Expired keys are dropped lazily on access. Every method completes
    without awaiting, so each call is atomic on the event loop.

    Example:
        ```python
        store = InMemoryKeyValueStore()
        await store.set("session:42", "{}", ttl=1800)
        ```
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        """
        Args:
            clock: Monotonic seconds source (injectable for tests)
        """
        self._clock = clock
        self._data: dict[str, _Entry] = {}

    def _live_entry(self, key: str) -> _Entry | None:
        entry = self._data.get(key)
        if entry is None:
            return None
        if entry.is_expired(self._clock()):
            del self._data[key]
            return None
        return entry

    def _expiry(self, ttl: int | None) -> float | None:
        if ttl is None:
            return None
        if ttl <= 0:
            raise ValueError("ttl must be positive")
        return self._clock() + ttl

    async def get(self, key: str) -> str | None:
        entry = self._live_entry(key)
        return entry.value if entry else None

    async def set(self, key: str, value: str, ttl: int | None = None) -> bool:
        self._data[key] = _Entry(value=value, expires_at=self._expiry(ttl))
        return True

    async def delete(self, key: str) -> bool:
        if self._live_entry(key) is None:
            return False
        del self._data[key]
        return True

    async def increment(self, key: str, amount: int = 1) -> int:
        entry = self._live_entry(key)
        if entry is None:
            self._data[key] = _Entry(value=str(amount))
            return amount
        try:
            new_value = int(entry.value) + amount
        except ValueError as e:
            raise KeyValueStoreError(f"Value at {key} is not an integer") from e
        entry.value = str(new_value)
        return new_value

    async def expire(self, key: str, ttl: int) -> bool:
        entry = self._live_entry(key)
        if entry is None:
            return False
        entry.expires_at = self._expiry(ttl)
        return True

    async def get_ttl(self, key: str) -> int | None:
        entry = self._live_entry(key)
        if entry is None or entry.expires_at is None:
            return None
        return max(0, math.ceil(entry.expires_at - self._clock()))

    def __len__(self) -> int:
        now = self._clock()
        return sum(1 for entry in self._data.values() if not entry.is_expired(now))


__all__ = ["InMemoryKeyValueStore"]
