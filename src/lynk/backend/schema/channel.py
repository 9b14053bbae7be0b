"""Channel-related schemas for API input/output"""

from typing import List, Optional

from pydantic import BaseModel, Field

from ..model import ChannelFile


# ==================== Input Schemas ====================

class CreateChannelRequest(BaseModel):
    """Create channel request"""

    text: Optional[str] = Field(None, description="Channel text", examples=["hello"])
    files: List[ChannelFile] = Field(default_factory=list, description="Attachments")
    password: Optional[str] = Field(
        None,
        description="Optional caller-chosen password; empty means none unless the server generates one",
    )


class UpdateChannelRequest(BaseModel):
    """Update channel request (replaces text and files)"""

    text: str = Field(..., description="New channel text")
    files: List[ChannelFile] = Field(default_factory=list, description="New attachments")


# ==================== Output Schemas ====================

class CreateChannelResponse(BaseModel):
    """Create channel response

    password is only present for protected channels and is never
    returned again.
    """

    id: str = Field(..., description="Channel identifier (8 hex chars)", examples=["a1b2c3d4"])
    password: Optional[str] = Field(None, description="Plain text channel password")
    ttl_seconds: int = Field(..., description="Channel lifetime in seconds", examples=[900])


class ChannelPayloadResponse(BaseModel):
    """Fetched channel contents"""

    id: str = Field(..., description="Channel identifier")
    text: str = Field(..., description="Channel text")
    files: List[ChannelFile] = Field(..., description="Attachments")
    ttl_seconds: int = Field(..., description="Remaining lifetime before this read refreshed it")

    class Config:
        from_attributes = True
