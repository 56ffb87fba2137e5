"""
Redis Key-Value Store

``IKeyValueStore`` on redis.asyncio, shared across engine processes.
"""

import logging

import redis.asyncio as aioredis

from surplus.config.settings import Settings
from surplus.core.interfaces import KeyValueConnectionError, KeyValueStoreError

logger = logging.getLogger(__name__)


class RedisKeyValueStore:
    """
    Redis-backed keyed store.

    Keys are namespaced with ``prefix``. Connection problems surface as
    ``KeyValueConnectionError``; other Redis errors as ``KeyValueStoreError``.

    Usage:
        store = RedisKeyValueStore.from_settings(settings, prefix="surplus")
        await store.set("session:42", payload, ttl=1800)
        await store.close()
    """

    def __init__(self, client: aioredis.Redis, prefix: str = ""):
        self._client = client
        self.prefix = prefix

    @classmethod
    def from_settings(cls, settings: Settings, prefix: str = "surplus") -> "RedisKeyValueStore":
        client = aioredis.Redis(
            host=settings.REDIS_HOST,
            port=settings.REDIS_PORT,
            db=settings.REDIS_DB,
            password=settings.REDIS_PASSWORD,
            decode_responses=True,
            socket_timeout=5.0,
            socket_connect_timeout=5.0,
        )
        logger.info(f"Redis key-value store configured: {settings.REDIS_HOST}:{settings.REDIS_PORT}/{settings.REDIS_DB}")
        return cls(client, prefix=prefix)

    def _key(self, key: str) -> str:
        return f"{self.prefix}:{key}" if self.prefix else key

    async def ping(self) -> bool:
        try:
            return bool(await self._client.ping())
        except (aioredis.ConnectionError, aioredis.TimeoutError) as e:
            raise KeyValueConnectionError(f"Redis unreachable: {e}") from e

    async def get(self, key: str) -> str | None:
        try:
            value = await self._client.get(self._key(key))
        except (aioredis.ConnectionError, aioredis.TimeoutError) as e:
            raise KeyValueConnectionError(f"Redis get failed for {key}: {e}") from e
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    async def set(self, key: str, value: str, ttl: int | None = None) -> bool:
        try:
            return bool(await self._client.set(self._key(key), value, ex=ttl))
        except (aioredis.ConnectionError, aioredis.TimeoutError) as e:
            raise KeyValueConnectionError(f"Redis set failed for {key}: {e}") from e

    async def delete(self, key: str) -> bool:
        try:
            return bool(await self._client.delete(self._key(key)))
        except (aioredis.ConnectionError, aioredis.TimeoutError) as e:
            raise KeyValueConnectionError(f"Redis delete failed for {key}: {e}") from e

    async def increment(self, key: str, amount: int = 1) -> int:
        try:
            return int(await self._client.incrby(self._key(key), amount))
        except (aioredis.ConnectionError, aioredis.TimeoutError) as e:
            raise KeyValueConnectionError(f"Redis incr failed for {key}: {e}") from e
        except aioredis.ResponseError as e:
            raise KeyValueStoreError(f"Value at {key} is not an integer") from e

    async def expire(self, key: str, ttl: int) -> bool:
        try:
            return bool(await self._client.expire(self._key(key), ttl))
        except (aioredis.ConnectionError, aioredis.TimeoutError) as e:
            raise KeyValueConnectionError(f"Redis expire failed for {key}: {e}") from e

    async def get_ttl(self, key: str) -> int | None:
        try:
            ttl = await self._client.ttl(self._key(key))
        except (aioredis.ConnectionError, aioredis.TimeoutError) as e:
            raise KeyValueConnectionError(f"Redis ttl failed for {key}: {e}") from e
        # -2: missing key, -1: no expiry
        return ttl if ttl >= 0 else None

    async def close(self) -> None:
        await self._client.aclose()


__all__ = ["RedisKeyValueStore"]
