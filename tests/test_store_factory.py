from types import SimpleNamespace

import pytest

from lynk.backend.config import Settings
from lynk.backend.store import MemoryChannelStore, RedisChannelStore, create_store


def test_redis_backend():
    # Connections are opened lazily, so no server is needed here
    store = create_store(Settings(store_backend="redis", redis_url="redis://cache.invalid:6379/0"))
    assert isinstance(store, RedisChannelStore)


def test_memory_backend():
    store = create_store(Settings(store_backend="memory"))
    assert isinstance(store, MemoryChannelStore)
    assert len(store) == 0


def test_unknown_backend():
    with pytest.raises(ValueError, match="etcd"):
        create_store(SimpleNamespace(store_backend="etcd", redis_url=""))
