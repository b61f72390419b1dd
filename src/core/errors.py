"""
Custom exceptions and error handling for the location aggregator.

Defines application-specific exceptions with error codes so the Lambda
handler can map any failure to an HTTP status and a client-facing message.

Usage:
    from core.errors import UpstreamError

    raise UpstreamError("HTTP 404 from /123/photos", status_code=404, body=payload)
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for client-facing error messages."""

    # Request errors
    INVALID_REQUEST = "INVALID_REQUEST"

    # Configuration errors
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"

    # Content API errors
    UPSTREAM_ERROR = "UPSTREAM_ERROR"
    NETWORK_ERROR = "NETWORK_ERROR"

    # System errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.INVALID_REQUEST: "Invalid request format",
    ErrorCode.CONFIGURATION_ERROR: "Failed to fetch data",
    ErrorCode.UPSTREAM_ERROR: "Failed to fetch data",
    ErrorCode.NETWORK_ERROR: "Failed to fetch data",
    ErrorCode.INTERNAL_ERROR: "Failed to fetch data",
}

STATUS_CODES: dict[ErrorCode, int] = {
    ErrorCode.INVALID_REQUEST: 400,
    ErrorCode.CONFIGURATION_ERROR: 500,
    ErrorCode.UPSTREAM_ERROR: 500,
    ErrorCode.NETWORK_ERROR: 500,
    ErrorCode.INTERNAL_ERROR: 500,
}


class AggregatorError(Exception):
    """Base exception for all location aggregator errors."""

    default_code = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str, code: ErrorCode | None = None):
        self.message = message
        self.code = code or self.default_code
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])

    @property
    def status_code(self) -> int:
        return STATUS_CODES.get(self.code, 500)


class RequestFormatError(AggregatorError):
    """Inbound request body is malformed or lacks a valid locationId."""

    default_code = ErrorCode.INVALID_REQUEST


class ConfigurationError(AggregatorError):
    """Required configuration (the content API key) is missing or unreadable."""

    default_code = ErrorCode.CONFIGURATION_ERROR


class UpstreamError(AggregatorError):
    """The content API answered with a non-success status or an unusable body."""

    default_code = ErrorCode.UPSTREAM_ERROR

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: Any = None,
        code: ErrorCode | None = None,
    ):
        super().__init__(message, code)
        self.upstream_status = status_code
        self.body = body


class NetworkError(UpstreamError):
    """The content API could not be reached."""

    default_code = ErrorCode.NETWORK_ERROR
