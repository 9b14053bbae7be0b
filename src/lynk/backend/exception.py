"""Custom exceptions for Lynk application"""


class LynkException(Exception):
    """Base exception for all Lynk business errors

    All custom exceptions should inherit from this class.
    The global exception handler will catch this and return ErrorResponse.

    Attributes:
        message: Human-readable error message
        code: Error code for client-side error handling
        status_code: HTTP status returned to the client
    """

    def __init__(self, message: str, code: str, status_code: int = 400):
        """Initialize Lynk exception

        Args:
            message: Human-readable error message
            code: Error code (e.g., "CHANNEL_NOT_FOUND")
            status_code: HTTP status code for the response
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        super().__init__(message)


# ==================== Caller Errors ====================


class ChannelNotFoundError(LynkException):
    """Channel does not exist (never created, expired, or deleted)"""

    def __init__(self, message: str = "channel not found"):
        super().__init__(message, "CHANNEL_NOT_FOUND", status_code=404)


class InvalidChannelPasswordError(LynkException):
    """Password missing or wrong for a protected channel"""

    def __init__(self, message: str = "invalid channel password"):
        super().__init__(message, "INVALID_CHANNEL_PASSWORD", status_code=401)


class PayloadTooLargeError(LynkException):
    """Channel content exceeds the configured size limit

    Examples:
        - Text plus decoded attachments larger than max_channel_bytes
        - Request body larger than max_request_bytes (status 413)
    """

    def __init__(
        self,
        message: str = "channel payload exceeds allowed size",
        status_code: int = 400,
    ):
        super().__init__(message, "PAYLOAD_TOO_LARGE", status_code=status_code)


class InvalidFileDataError(LynkException):
    """Attachment data is not valid base64"""

    def __init__(self, message: str = "invalid file data encoding"):
        super().__init__(message, "INVALID_FILE_DATA", status_code=400)


class ChannelFileNotFoundError(LynkException):
    """Attachment id not present in the channel"""

    def __init__(self, message: str = "channel file not found"):
        super().__init__(message, "FILE_NOT_FOUND", status_code=404)


# ==================== Internal Errors ====================


class StoreUnavailableError(LynkException):
    """Key-value store call failed

    Examples:
        - Redis connection refused or reset
        - Command timeout
    """

    def __init__(self, message: str = "channel store unavailable"):
        super().__init__(message, "STORE_UNAVAILABLE", status_code=500)


class SerializationError(LynkException):
    """Channel record could not be encoded for storage"""

    def __init__(self, message: str = "failed to serialize channel"):
        super().__init__(message, "SERIALIZATION_ERROR", status_code=500)
