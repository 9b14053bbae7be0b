"""
Schema package for API request/response models.
"""

from .response import ErrorResponse, HealthResponse
from .channel import (
    CreateChannelRequest,
    UpdateChannelRequest,
    CreateChannelResponse,
    ChannelPayloadResponse,
)

__all__ = [
    # Response schemas
    "ErrorResponse",
    "HealthResponse",
    # Channel schemas
    "CreateChannelRequest",
    "UpdateChannelRequest",
    "CreateChannelResponse",
    "ChannelPayloadResponse",
]
