"""
Keyed TTL store interface

Contract for the small keyed store backing conversation sessions and
rate-limit counters (Redis, in-memory, etc.). Process-wide state lives
behind this port instead of module globals.
"""

from abc import abstractmethod
from typing import Protocol, runtime_checkable


@runtime_checkable
class IKeyValueStore(Protocol):
    """
    Interface for a string keyed store with per-key expiry.

    Example:
        ```python
        await store.set("session:42", payload, ttl=1800)
        raw = await store.get("session:42")
        ```
    """

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """
        Get a value.

        Args:
            key: Key to read

        Returns:
            Stored value or None if missing/expired
        """
        ...

    @abstractmethod
    async def set(self, key: str, value: str, ttl: int | None = None) -> bool:
        """
        Store a value.

        Args:
            key: Key
            value: Serialized value
            ttl: Time-to-live in seconds (None = no expiry)

        Returns:
            True if stored
        """
        ...

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Delete a key. Returns False if it did not exist."""
        ...

    @abstractmethod
    async def increment(self, key: str, amount: int = 1) -> int:
        """
        Atomically increment a counter, creating it at 0 if missing.

        Returns:
            New value
        """
        ...

    @abstractmethod
    async def expire(self, key: str, ttl: int) -> bool:
        """Set the expiry of an existing key. Returns False if it does not exist."""
        ...

    @abstractmethod
    async def get_ttl(self, key: str) -> int | None:
        """
        Remaining time-to-live in seconds.

        Returns:
            Seconds left, or None if the key is missing or never expires
        """
        ...


class KeyValueStoreError(Exception):
    """Base error for keyed store backends."""

    pass


class KeyValueConnectionError(KeyValueStoreError):
    """Backend connection failure."""

    pass
