"""Redis-backed channel store"""

import logging
from contextlib import contextmanager
from typing import Optional

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from ..exception import StoreUnavailableError
from .base import ChannelStore

logger = logging.getLogger(__name__)


@contextmanager
def _store_errors(command: str, key: str = ""):
    """Raise any Redis failure as StoreUnavailableError

    Includes values that are not valid UTF-8, since the client decodes replies.
    """
    try:
        yield
    except (RedisError, UnicodeDecodeError) as e:
        logger.error(f"Redis {command} failed for '{key}': {e}")
        raise StoreUnavailableError(f"store {command} failed") from e


class RedisChannelStore(ChannelStore):
    """Channel store on top of redis.asyncio

    The client holds a connection pool, so one instance is shared by all
    requests of the application.
    """

    def __init__(self, url: str, client: Optional[aioredis.Redis] = None):
        self.url = url
        self._client = client or aioredis.Redis.from_url(url, decode_responses=True)

    async def set_ex(self, key: str, value: str, ttl_seconds: int) -> None:
        with _store_errors("SET", key):
            await self._client.set(key, value, ex=ttl_seconds)

    async def get(self, key: str) -> Optional[str]:
        with _store_errors("GET", key):
            return await self._client.get(key)

    async def exists(self, key: str) -> bool:
        with _store_errors("EXISTS", key):
            return bool(await self._client.exists(key))

    async def ttl(self, key: str) -> int:
        with _store_errors("TTL", key):
            return int(await self._client.ttl(key))

    async def expire(self, key: str, ttl_seconds: int) -> bool:
        with _store_errors("EXPIRE", key):
            return bool(await self._client.expire(key, ttl_seconds))

    async def delete(self, key: str) -> bool:
        with _store_errors("DEL", key):
            return bool(await self._client.delete(key))

    async def ping(self) -> bool:
        with _store_errors("PING"):
            return bool(await self._client.ping())

    async def close(self) -> None:
        await self._client.aclose()
        logger.info("Redis connection pool closed")
