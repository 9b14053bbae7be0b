"""
Key-value store adapters.
"""

import logging

from .base import ChannelStore, TTL_KEY_MISSING, TTL_NO_EXPIRY
from .memory import MemoryChannelStore
from .redis_store import RedisChannelStore

logger = logging.getLogger(__name__)

__all__ = [
    "ChannelStore",
    "TTL_KEY_MISSING",
    "TTL_NO_EXPIRY",
    "MemoryChannelStore",
    "RedisChannelStore",
    "create_store",
]


def create_store(settings) -> ChannelStore:
    """Build the store selected by settings.store_backend

    Args:
        settings: Application settings

    Returns:
        Store instance (not yet connected; Redis connects lazily)

    Raises:
        ValueError: Unknown backend name
    """
    backend = settings.store_backend
    if backend == "redis":
        logger.info("Using Redis channel store")
        return RedisChannelStore(settings.redis_url)
    if backend == "memory":
        logger.warning("Using in-memory channel store, channels are lost on restart")
        return MemoryChannelStore()
    raise ValueError(f"Unknown store backend: {backend}")
