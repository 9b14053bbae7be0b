"""Key-value store contract used by the channel service"""

from abc import ABC, abstractmethod
from typing import Optional

# Sentinels returned by ttl(), same as Redis TTL
TTL_KEY_MISSING = -2
TTL_NO_EXPIRY = -1


class ChannelStore(ABC):
    """Expiring key-value store with string keys and string values

    Implementations must be safe to share between concurrent requests.
    Each method is a single store command; none of them retries.
    """

    @abstractmethod
    async def set_ex(self, key: str, value: str, ttl_seconds: int) -> None:
        """Upsert a value that expires after ttl_seconds"""

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Return the value, or None if the key is not present"""

    @abstractmethod
    async def exists(self, key: str) -> bool:
        """Return True if the key is present"""

    @abstractmethod
    async def ttl(self, key: str) -> int:
        """Remaining seconds, TTL_NO_EXPIRY, or TTL_KEY_MISSING"""

    @abstractmethod
    async def expire(self, key: str, ttl_seconds: int) -> bool:
        """Reset the key's TTL; returns False (and does nothing) if absent"""

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Remove the key; returns False if it was not present"""

    @abstractmethod
    async def ping(self) -> bool:
        """Return True if the store answers"""

    async def close(self) -> None:
        """Release connections held by the store"""
