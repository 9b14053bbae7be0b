"""Channel size accounting"""

import base64
import binascii

from ..config import MAX_CHANNEL_BYTES as DEFAULT_MAX_CHANNEL_BYTES
from ..exception import InvalidFileDataError, PayloadTooLargeError
from ..model import ChannelData


def decoded_file_size(data_base64: str) -> int:
    """Return the decoded byte length of an attachment

    Raises:
        InvalidFileDataError: Not strict, padded standard base64
    """
    try:
        return len(base64.b64decode(data_base64, validate=True))
    except (binascii.Error, ValueError):
        raise InvalidFileDataError()


def channel_size(data: ChannelData) -> int:
    """Total channel size: UTF-8 text bytes plus decoded attachment bytes

    The first attachment that fails to decode aborts the count.
    """
    total = len(data.text.encode("utf-8"))
    for file in data.files:
        total += decoded_file_size(file.data_base64)
    return total


def validate_channel_data(
    data: ChannelData,
    max_bytes: int = DEFAULT_MAX_CHANNEL_BYTES,
) -> None:
    """Check a channel body before it is written

    Args:
        data: Channel body to check (not modified)
        max_bytes: Largest allowed total size, inclusive

    Raises:
        InvalidFileDataError: An attachment is not valid base64
        PayloadTooLargeError: Total size exceeds max_bytes
    """
    if channel_size(data) > max_bytes:
        raise PayloadTooLargeError()
