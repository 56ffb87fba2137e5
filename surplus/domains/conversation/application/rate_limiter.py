"""
Rate Limiter

Per-user fixed-window request limiter on an injected keyed TTL store.
"""

import logging
from dataclasses import dataclass
from typing import Any

from surplus.core.interfaces import IKeyValueStore, KeyValueStoreError

logger = logging.getLogger(__name__)


@dataclass
class RateLimitResult:
    """Result of a rate limit check."""

    allowed: bool
    current_count: int = 0
    limit: int = 0
    retry_after_seconds: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "rate_limited": not self.allowed,
            "current_count": self.current_count,
            "limit": self.limit,
            "retry_after_seconds": self.retry_after_seconds,
        }


class RateLimiter:
    """
    Fixed-window counter per user.

    Uses INCR with an expiry set on the first hit of each window.
    Fails open (allows the request) when the store is unavailable.

    Usage:
        limiter = RateLimiter(store, max_requests=30, window_seconds=60)
        result = await limiter.hit(user_id)
        if not result.allowed:
            ...
    """

    KEY_PREFIX = "rate"

    def __init__(self, store: IKeyValueStore, max_requests: int = 30, window_seconds: int = 60, scope: str = "messages"):
        if max_requests < 1 or window_seconds < 1:
            raise ValueError("max_requests and window_seconds must be positive")
        self._store = store
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self.scope = scope

    def _key(self, user_id: int | str) -> str:
        return f"{self.KEY_PREFIX}:{self.scope}:{user_id}"

    async def hit(self, user_id: int | str) -> RateLimitResult:
        """
        Count one request and decide whether it is allowed.

        Args:
            user_id: Requesting user

        Returns:
            RateLimitResult for this request
        """
        key = self._key(user_id)
        try:
            count = await self._store.increment(key)
            if count == 1:
                await self._store.expire(key, self.window_seconds)

            if count <= self.max_requests:
                return RateLimitResult(allowed=True, current_count=count, limit=self.max_requests)

            ttl = await self._store.get_ttl(key)
            if ttl is None:
                # Counter lost its expiry (e.g. crash between INCR and EXPIRE)
                await self._store.expire(key, self.window_seconds)
            return RateLimitResult(
                allowed=False,
                current_count=count,
                limit=self.max_requests,
                retry_after_seconds=ttl if ttl else self.window_seconds,
            )
        except KeyValueStoreError as e:
            logger.error(f"Rate limit check failed for {user_id}: {e}")
            return RateLimitResult(allowed=True, limit=self.max_requests)

    async def reset(self, user_id: int | str) -> None:
        await self._store.delete(self._key(user_id))


__all__ = ["RateLimiter", "RateLimitResult"]
