"""
Channel encoding and validation.
"""

from .codec import serialize_channel, deserialize_channel
from .validator import (
    DEFAULT_MAX_CHANNEL_BYTES,
    channel_size,
    validate_channel_data,
)

__all__ = [
    "serialize_channel",
    "deserialize_channel",
    "DEFAULT_MAX_CHANNEL_BYTES",
    "channel_size",
    "validate_channel_data",
]
