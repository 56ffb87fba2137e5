"""
Unit tests for the Redis key-value store (client mocked).
"""

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import ResponseError
from redis.exceptions import TimeoutError as RedisTimeoutError

from surplus.core.interfaces import KeyValueConnectionError, KeyValueStoreError
from surplus.integrations.key_value import RedisKeyValueStore


@pytest.fixture
def store(mock_redis) -> RedisKeyValueStore:
    return RedisKeyValueStore(mock_redis, prefix="surplus")


class TestRedisKeyValueStore:
    @pytest.mark.asyncio
    async def test_get_uses_prefix(self, store, mock_redis):
        mock_redis.get.return_value = "{}"

        assert await store.get("session:1") == "{}"
        mock_redis.get.assert_awaited_once_with("surplus:session:1")

    @pytest.mark.asyncio
    async def test_get_decodes_bytes(self, store, mock_redis):
        mock_redis.get.return_value = b"value"

        assert await store.get("k") == "value"

    @pytest.mark.asyncio
    async def test_set_passes_ttl(self, store, mock_redis):
        assert await store.set("k", "v", ttl=30) is True

        mock_redis.set.assert_awaited_once_with("surplus:k", "v", ex=30)

    @pytest.mark.asyncio
    async def test_delete_returns_bool(self, store, mock_redis):
        mock_redis.delete.return_value = 0

        assert await store.delete("k") is False

    @pytest.mark.asyncio
    async def test_increment(self, store, mock_redis):
        mock_redis.incrby.return_value = 3

        assert await store.increment("rate:1") == 3
        mock_redis.incrby.assert_awaited_once_with("surplus:rate:1", 1)

    @pytest.mark.asyncio
    async def test_increment_non_integer(self, store, mock_redis):
        mock_redis.incrby.side_effect = ResponseError("value is not an integer")

        with pytest.raises(KeyValueStoreError):
            await store.increment("k")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("raw,expected", [(-2, None), (-1, None), (0, 0), (42, 42)])
    async def test_get_ttl(self, store, mock_redis, raw, expected):
        mock_redis.ttl.return_value = raw

        assert await store.get_ttl("k") == expected

    @pytest.mark.asyncio
    async def test_connection_errors_are_wrapped(self, store, mock_redis):
        mock_redis.get.side_effect = RedisConnectionError("connection refused")

        with pytest.raises(KeyValueConnectionError):
            await store.get("k")

    @pytest.mark.asyncio
    async def test_timeouts_are_wrapped(self, store, mock_redis):
        mock_redis.expire.side_effect = RedisTimeoutError("timed out")

        with pytest.raises(KeyValueConnectionError):
            await store.expire("k", 10)

    @pytest.mark.asyncio
    async def test_ping(self, store, mock_redis):
        assert await store.ping() is True

    @pytest.mark.asyncio
    async def test_close(self, store, mock_redis):
        await store.close()

        mock_redis.aclose.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_no_prefix(self, mock_redis):
        store = RedisKeyValueStore(mock_redis)

        await store.get("k")

        mock_redis.get.assert_awaited_once_with("k")
