from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from lynk.backend.exception import StoreUnavailableError
from lynk.backend.store import RedisChannelStore


def _store(client):
    return RedisChannelStore("redis://example:6379", client=client)


@pytest.mark.asyncio
async def test_set_ex_uses_set_with_expiry():
    client = AsyncMock()
    await _store(client).set_ex("channel:abc", "{}", 900)
    client.set.assert_awaited_once_with("channel:abc", "{}", ex=900)


@pytest.mark.asyncio
async def test_results_are_normalized():
    client = AsyncMock()
    client.exists.return_value = 1
    client.ttl.return_value = 42
    client.expire.return_value = 0
    client.delete.return_value = 1
    store = _store(client)

    assert await store.exists("k") is True
    assert await store.ttl("k") == 42
    assert await store.expire("k", 900) is False
    assert await store.delete("k") is True


@pytest.mark.asyncio
async def test_redis_errors_become_store_unavailable():
    client = AsyncMock()
    client.get.side_effect = RedisConnectionError("connection refused")
    with pytest.raises(StoreUnavailableError) as exc_info:
        await _store(client).get("channel:abc")
    assert exc_info.value.code == "STORE_UNAVAILABLE"
    assert exc_info.value.status_code == 500


@pytest.mark.asyncio
async def test_close_releases_client():
    client = AsyncMock()
    await _store(client).close()
    client.aclose.assert_awaited_once()


@pytest.mark.asyncio
async def test_undecodable_value_becomes_store_unavailable():
    client = AsyncMock()
    client.get.side_effect = UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
    with pytest.raises(StoreUnavailableError):
        await _store(client).get("channel:abc")
