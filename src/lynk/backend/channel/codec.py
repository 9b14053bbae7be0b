"""Conversion between StoredChannel and its persisted string form"""

import logging

from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticSerializationError

from ..exception import SerializationError
from ..model import StoredChannel

logger = logging.getLogger(__name__)


def serialize_channel(channel: StoredChannel) -> str:
    """Encode a channel record as JSON

    Args:
        channel: Record to encode

    Returns:
        JSON string stored as the key's value

    Raises:
        SerializationError: Encoder failure (not expected for well-formed models)
    """
    try:
        return channel.model_dump_json()
    except (PydanticSerializationError, ValueError) as e:
        logger.exception("Failed to serialize channel record")
        raise SerializationError(f"failed to serialize channel: {e}")


def deserialize_channel(raw: str) -> StoredChannel:
    """Decode a stored value, never failing

    Values that are not a structured record (legacy plain text from before
    the JSON format, or corrupted data) are returned as an unprotected
    channel whose text is the raw value.

    Args:
        raw: Value read from the store

    Returns:
        Decoded channel record
    """
    try:
        return StoredChannel.model_validate_json(raw)
    except PydanticValidationError:
        logger.debug("Stored value is not a channel record, treating it as plain text")
        return StoredChannel(password_hash=None, text=raw, files=[])
