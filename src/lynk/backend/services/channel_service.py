"""Channel lifecycle service

Creates, reads, updates and deletes channels in the key-value store.
Every operation round-trips through the store; nothing is cached in
process and no lock is held across store calls, so concurrent writes to
the same channel resolve as last-write-wins.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..channel import (
    DEFAULT_MAX_CHANNEL_BYTES,
    deserialize_channel,
    serialize_channel,
    validate_channel_data,
)
from ..config import DEFAULT_CHANNEL_TTL_SECONDS
from ..exception import (
    ChannelFileNotFoundError,
    ChannelNotFoundError,
    InvalidChannelPasswordError,
    StoreUnavailableError,
)
from ..model import ChannelData, ChannelFile, StoredChannel
from ..security import (
    generate_channel_id,
    generate_channel_password,
    hash_channel_password,
    verify_channel_password,
)
from ..store import ChannelStore

logger = logging.getLogger(__name__)

CHANNEL_KEY_PREFIX = "channel:"


@dataclass
class CreatedChannel:
    """Result of creating a channel

    password is the plain text password, returned only here.
    """

    id: str
    ttl_seconds: int
    password: Optional[str] = None


@dataclass
class ChannelSnapshot:
    """Channel contents as returned by fetch"""

    id: str
    text: str
    files: List[ChannelFile] = field(default_factory=list)
    ttl_seconds: int = DEFAULT_CHANNEL_TTL_SECONDS


def channel_key(channel_id: str) -> str:
    return f"{CHANNEL_KEY_PREFIX}{channel_id}"


class ChannelService:
    """Channel lifecycle manager

    Args:
        store: Key-value store shared by all requests
        ttl_seconds: Lifetime applied on create and on every successful access
        max_channel_bytes: Size limit checked before every write
        password_protection: Generate a password for every new channel
    """

    def __init__(
        self,
        store: ChannelStore,
        ttl_seconds: int = DEFAULT_CHANNEL_TTL_SECONDS,
        max_channel_bytes: int = DEFAULT_MAX_CHANNEL_BYTES,
        password_protection: bool = False,
    ):
        self.store = store
        self.ttl_seconds = ttl_seconds if ttl_seconds > 0 else DEFAULT_CHANNEL_TTL_SECONDS
        self.max_channel_bytes = max_channel_bytes
        self.password_protection = password_protection

    # ==================== Internal Helpers ====================

    async def _load(self, channel_id: str, password: Optional[str]) -> StoredChannel:
        """Read a channel and check its password

        Raises:
            ChannelNotFoundError: Key not present
            InvalidChannelPasswordError: Password missing or wrong
        """
        raw = await self.store.get(channel_key(channel_id))
        if raw is None:
            logger.info(f"Channel not found: {channel_id}")
            raise ChannelNotFoundError()

        stored = deserialize_channel(raw)
        if not verify_channel_password(stored.password_hash, password):
            logger.warning(f"Rejected password for channel {channel_id}")
            raise InvalidChannelPasswordError()

        return stored

    async def _write(self, channel_id: str, stored: StoredChannel) -> None:
        """Validate and store a full channel record with a fresh TTL"""
        validate_channel_data(stored.data, self.max_channel_bytes)
        serialized = serialize_channel(stored)
        await self.store.set_ex(channel_key(channel_id), serialized, self.ttl_seconds)

    async def _remaining_ttl(self, key: str) -> int:
        """Remaining lifetime, or the configured TTL if the store cannot tell"""
        try:
            remaining = await self.store.ttl(key)
        except StoreUnavailableError:
            logger.warning(f"Could not read TTL for {key}, using configured TTL")
            return self.ttl_seconds
        if remaining < 0:
            return self.ttl_seconds
        return remaining

    # ==================== Operations ====================

    async def create(
        self,
        text: Optional[str] = None,
        files: Optional[List[ChannelFile]] = None,
        password: Optional[str] = None,
    ) -> CreatedChannel:
        """Create a new channel

        The identifier is not checked against existing keys; a collision
        overwrites the older channel.

        Args:
            text: Channel text (empty when omitted)
            files: Attachments
            password: Caller-chosen password; empty or None lets the
                service decide based on password_protection

        Returns:
            CreatedChannel with the id, TTL and plain text password (if any)

        Raises:
            InvalidFileDataError: An attachment is not valid base64
            PayloadTooLargeError: Channel exceeds the size limit
            StoreUnavailableError: Store write failed
        """
        channel_id = generate_channel_id()

        if not password and self.password_protection:
            password = generate_channel_password()
        password = password or None

        stored = StoredChannel(
            password_hash=hash_channel_password(password) if password else None,
            text=text or "",
            files=list(files or []),
        )
        await self._write(channel_id, stored)

        logger.info(
            f"Created channel {channel_id} "
            f"(files={len(stored.files)}, protected={stored.is_protected})"
        )
        return CreatedChannel(id=channel_id, ttl_seconds=self.ttl_seconds, password=password)

    async def fetch(self, channel_id: str, password: Optional[str] = None) -> ChannelSnapshot:
        """Read a channel and extend its lifetime

        Returns:
            ChannelSnapshot with the TTL observed before the refresh

        Raises:
            ChannelNotFoundError: Channel does not exist
            InvalidChannelPasswordError: Password missing or wrong
            StoreUnavailableError: Store read or refresh failed
        """
        stored = await self._load(channel_id, password)

        key = channel_key(channel_id)
        ttl_seconds = await self._remaining_ttl(key)

        # EXPIRE on a key deleted in the meantime is a no-op
        await self.store.expire(key, self.ttl_seconds)

        logger.debug(f"Fetched channel {channel_id} (ttl={ttl_seconds})")
        return ChannelSnapshot(
            id=channel_id,
            text=stored.text,
            files=list(stored.files),
            ttl_seconds=ttl_seconds,
        )

    async def update(
        self,
        channel_id: str,
        password: Optional[str],
        text: str,
        files: Optional[List[ChannelFile]] = None,
    ) -> None:
        """Replace a channel's text and files

        The password hash of the existing channel is kept as is.

        Raises:
            ChannelNotFoundError: Channel does not exist
            InvalidChannelPasswordError: Password missing or wrong
            InvalidFileDataError: An attachment is not valid base64
            PayloadTooLargeError: Channel exceeds the size limit
            StoreUnavailableError: Store call failed
        """
        stored = await self._load(channel_id, password)

        data = ChannelData(text=text, files=list(files or []))
        await self._write(channel_id, stored.with_data(data))

        logger.info(f"Updated channel {channel_id} (files={len(data.files)})")

    async def delete_file(
        self,
        channel_id: str,
        password: Optional[str],
        file_id: str,
    ) -> None:
        """Remove one attachment from a channel

        Only the first attachment with a matching id is removed.

        Raises:
            ChannelNotFoundError: Channel does not exist
            InvalidChannelPasswordError: Password missing or wrong
            ChannelFileNotFoundError: No attachment with that id
            StoreUnavailableError: Store call failed
        """
        stored = await self._load(channel_id, password)

        files = list(stored.files)
        index = next((i for i, f in enumerate(files) if f.id == file_id), None)
        if index is None:
            logger.info(f"File {file_id} not found in channel {channel_id}")
            raise ChannelFileNotFoundError()
        del files[index]

        await self._write(channel_id, stored.with_data(ChannelData(text=stored.text, files=files)))

        logger.info(f"Deleted file {file_id} from channel {channel_id}")

    async def delete(self, channel_id: str, password: Optional[str] = None) -> None:
        """Delete a channel before it expires

        Raises:
            ChannelNotFoundError: Channel does not exist
            InvalidChannelPasswordError: Password missing or wrong
            StoreUnavailableError: Store call failed
        """
        await self._load(channel_id, password)
        await self.store.delete(channel_key(channel_id))

        logger.info(f"Deleted channel {channel_id}")
