"""Channel data models

These models are both the in-memory representation and the persisted
JSON shape. StoredChannel flattens the ChannelData fields next to
password_hash, so a stored record looks like:

    {"password_hash": "...", "text": "...", "files": [...]}
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class ChannelFile(BaseModel):
    """One attachment of a channel"""

    id: str = Field(..., description="Attachment id (caller supplied)")
    name: str = Field(..., description="Display name")
    mime_type: str = Field(..., description="MIME type")
    size: int = Field(..., description="Declared size in bytes (advisory)")
    data_base64: str = Field(..., description="File content, standard base64")


class ChannelData(BaseModel):
    """User-visible channel body"""

    text: str = Field("", description="Channel text (UTF-8)")
    files: List[ChannelFile] = Field(default_factory=list, description="Attachments in display order")


class StoredChannel(ChannelData):
    """Persisted channel record

    An absent or empty password_hash means the channel is unprotected.
    """

    password_hash: Optional[str] = Field(None, description="SHA-256 hex digest of the channel password")

    @property
    def data(self) -> ChannelData:
        return ChannelData(text=self.text, files=list(self.files))

    @property
    def is_protected(self) -> bool:
        return bool(self.password_hash)

    def with_data(self, data: ChannelData) -> "StoredChannel":
        """Return a copy holding new data and the same password hash"""
        return StoredChannel(
            password_hash=self.password_hash,
            text=data.text,
            files=list(data.files),
        )
