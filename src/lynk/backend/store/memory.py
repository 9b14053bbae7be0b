"""In-process channel store for development and tests"""

import math
import time
from typing import Callable, Dict, Optional, Tuple

from .base import ChannelStore, TTL_KEY_MISSING, TTL_NO_EXPIRY


class MemoryChannelStore(ChannelStore):
    """Dict-backed store with Redis-like expiry semantics

    Expired keys are evicted lazily when touched. Not shared between
    processes; data is lost on restart.

    Args:
        clock: Monotonic time source in seconds (injectable for tests)
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._data: Dict[str, Tuple[str, Optional[float]]] = {}

    def _live(self, key: str) -> Optional[Tuple[str, Optional[float]]]:
        entry = self._data.get(key)
        if entry is None:
            return None
        _, deadline = entry
        if deadline is not None and deadline <= self._clock():
            del self._data[key]
            return None
        return entry

    async def set_ex(self, key: str, value: str, ttl_seconds: int) -> None:
        self._data[key] = (value, self._clock() + ttl_seconds)

    async def get(self, key: str) -> Optional[str]:
        entry = self._live(key)
        return entry[0] if entry else None

    async def exists(self, key: str) -> bool:
        return self._live(key) is not None

    async def ttl(self, key: str) -> int:
        entry = self._live(key)
        if entry is None:
            return TTL_KEY_MISSING
        _, deadline = entry
        if deadline is None:
            return TTL_NO_EXPIRY
        return math.ceil(deadline - self._clock())

    async def expire(self, key: str, ttl_seconds: int) -> bool:
        entry = self._live(key)
        if entry is None:
            return False
        self._data[key] = (entry[0], self._clock() + ttl_seconds)
        return True

    async def delete(self, key: str) -> bool:
        if self._live(key) is None:
            return False
        del self._data[key]
        return True

    async def ping(self) -> bool:
        return True

    def __len__(self) -> int:
        return sum(1 for key in list(self._data) if self._live(key) is not None)
