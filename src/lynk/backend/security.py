"""Security utilities for channel identifiers and channel passwords"""

import hashlib
import hmac
import logging
import secrets
import string
import uuid
from typing import Optional

logger = logging.getLogger(__name__)

CHANNEL_ID_LENGTH = 8
CHANNEL_PASSWORD_LENGTH = 12
CHANNEL_PASSWORD_ALPHABET = string.ascii_letters + string.digits


def generate_channel_id() -> str:
    """Generate a short channel identifier

    Returns:
        8 lowercase hex characters taken from a fresh UUID4
    """
    return uuid.uuid4().hex[:CHANNEL_ID_LENGTH]


def generate_channel_password() -> str:
    """Generate a random channel password

    Returns:
        12 alphanumeric characters from a CSPRNG
    """
    return "".join(
        secrets.choice(CHANNEL_PASSWORD_ALPHABET)
        for _ in range(CHANNEL_PASSWORD_LENGTH)
    )


def hash_channel_password(password: str) -> str:
    """Hash a channel password with SHA-256

    No salt is applied. Generated passwords carry ~71 bits of entropy,
    so precomputed tables are not the threat model.

    Args:
        password: Plain text password

    Returns:
        Hex digest
    """
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


def verify_channel_password(
    stored_hash: Optional[str],
    provided: Optional[str],
) -> bool:
    """Check a provided password against a stored hash

    Args:
        stored_hash: Hash from the stored record; None or "" means unprotected
        provided: Password sent by the caller, if any

    Returns:
        True if access is allowed, False otherwise
    """
    if not stored_hash:
        return True
    if provided is None:
        return False

    computed = hash_channel_password(provided)
    return hmac.compare_digest(
        stored_hash.encode("utf-8"),
        computed.encode("utf-8"),
    )
