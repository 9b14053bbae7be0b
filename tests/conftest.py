import os
from pathlib import Path

import pytest

# Keep a developer's ~/.lynk/config.toml out of the tests
os.environ["LYNK_INSTANCE_PATH"] = str(Path(__file__).resolve().parent / ".no-instance")

from lynk.backend.services import ChannelService
from lynk.backend.store import MemoryChannelStore


class FakeClock:
    """Manually advanced monotonic clock"""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    return MemoryChannelStore(clock=clock)


@pytest.fixture
def service(store):
    return ChannelService(store, ttl_seconds=900)


@pytest.fixture
def protected_service(store):
    return ChannelService(store, ttl_seconds=900, password_protection=True)
