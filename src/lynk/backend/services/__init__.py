"""Business services"""
from .channel_service import (
    ChannelService,
    ChannelSnapshot,
    CreatedChannel,
    DEFAULT_CHANNEL_TTL_SECONDS,
    channel_key,
)

__all__ = [
    "ChannelService",
    "ChannelSnapshot",
    "CreatedChannel",
    "DEFAULT_CHANNEL_TTL_SECONDS",
    "channel_key",
]
