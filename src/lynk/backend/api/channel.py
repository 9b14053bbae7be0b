"""Channel API endpoints"""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Response, status

from ..schema.channel import (
    CreateChannelRequest,
    UpdateChannelRequest,
    CreateChannelResponse,
    ChannelPayloadResponse,
)
from ..schema.response import ErrorResponse
from ..services import ChannelService
from ..dep import get_channel_service, get_channel_password

logger = logging.getLogger(__name__)

# Router configuration
router = APIRouter(prefix="/channels", tags=["Channels"])


# ==================== Type Aliases ====================

ChannelServiceDep = Annotated[ChannelService, Depends(get_channel_service)]
ChannelPasswordDep = Annotated[Optional[str], Depends(get_channel_password)]

GATED_ERRORS = {
    401: {"model": ErrorResponse, "description": "INVALID_CHANNEL_PASSWORD"},
    404: {"model": ErrorResponse, "description": "CHANNEL_NOT_FOUND"},
}
WRITE_ERRORS = {
    400: {"model": ErrorResponse, "description": "PAYLOAD_TOO_LARGE or INVALID_FILE_DATA"},
    413: {"model": ErrorResponse, "description": "Request body too large"},
}


# ==================== API Endpoints ====================

@router.post(
    "",
    response_model=CreateChannelResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    responses=WRITE_ERRORS,
    summary="Create channel",
)
async def create_channel(request: CreateChannelRequest, service: ChannelServiceDep):
    """Create a channel holding text and attachments

    Flow:
    1. Generate channel id (and password when enabled or supplied)
    2. Validate aggregate size and attachment encoding
    3. Store the channel with the configured TTL

    The password, if any, is returned only in this response.
    """
    created = await service.create(
        text=request.text,
        files=request.files,
        password=request.password,
    )
    return CreateChannelResponse(
        id=created.id,
        password=created.password,
        ttl_seconds=created.ttl_seconds,
    )


@router.get(
    "/{channel_id}",
    response_model=ChannelPayloadResponse,
    responses=GATED_ERRORS,
    summary="Fetch channel",
)
async def fetch_channel(
    channel_id: str,
    service: ChannelServiceDep,
    password: ChannelPasswordDep,
):
    """Fetch a channel and reset its TTL

    ttl_seconds is the lifetime that remained before this read.
    """
    snapshot = await service.fetch(channel_id, password)
    return ChannelPayloadResponse.model_validate(snapshot)


@router.put(
    "/{channel_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={**GATED_ERRORS, **WRITE_ERRORS},
    summary="Update channel",
)
async def update_channel(
    channel_id: str,
    request: UpdateChannelRequest,
    service: ChannelServiceDep,
    password: ChannelPasswordDep,
):
    """Replace a channel's text and attachments

    The channel keeps its password; it cannot be changed here.
    """
    await service.update(channel_id, password, request.text, request.files)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{channel_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=GATED_ERRORS,
    summary="Delete channel",
)
async def delete_channel(
    channel_id: str,
    service: ChannelServiceDep,
    password: ChannelPasswordDep,
):
    """Delete a channel before it expires"""
    await service.delete(channel_id, password)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{channel_id}/files/{file_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=GATED_ERRORS,
    summary="Delete channel file",
)
async def delete_channel_file(
    channel_id: str,
    file_id: str,
    service: ChannelServiceDep,
    password: ChannelPasswordDep,
):
    """Remove one attachment from a channel

    Returns 404 FILE_NOT_FOUND when no attachment has that id.
    """
    await service.delete_file(channel_id, password, file_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
