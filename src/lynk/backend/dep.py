"""Dependency injection functions for FastAPI routes"""

import logging
from typing import Optional

from fastapi import Header, Request

from .services import ChannelService

logger = logging.getLogger(__name__)

CHANNEL_PASSWORD_HEADER = "x-channel-password"


def get_channel_service(request: Request) -> ChannelService:
    """Get the channel service from app state

    Usage:
        from typing import Annotated
        from fastapi import Depends

        ChannelServiceDep = Annotated[ChannelService, Depends(get_channel_service)]

        @router.get("/example/{channel_id}")
        async def example_route(channel_id: str, service: ChannelServiceDep):
            snapshot = await service.fetch(channel_id)
            ...
    """
    return request.app.state.channel_service


def get_channel_password(
    x_channel_password: Optional[str] = Header(None, alias=CHANNEL_PASSWORD_HEADER),
) -> Optional[str]:
    """Read the channel password header

    An empty header value counts as no password.
    """
    return x_channel_password or None
