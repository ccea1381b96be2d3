"""
Structured error system for the Animal Spotter API client.

Authenticated fetches and the image fetch fail with ``FetchError`` carrying
an ``ErrorKind``. Sign-up and sign-in fail with the generic errors below
instead. Both families derive from ``SpotterError``.
"""

from enum import Enum
from typing import Any, Dict, Optional
import logging

logger = logging.getLogger(__name__)


class SpotterError(Exception):
    """Base exception for all Animal Spotter client errors."""

    code = "SPOTTER_ERROR"

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.status = status
        self.details = details or {}
        self.original_error = original_error

    def to_dict(self) -> Dict[str, Any]:
        """Describe the error for debug logging."""
        return {
            "type": type(self).__name__,
            "code": self.code,
            "message": self.message,
            "status": self.status,
            "details": dict(self.details),
        }

    def __str__(self) -> str:
        if self.status is None:
            return f"{self.message} [{self.code}]"
        return f"{self.message} [{self.code}, HTTP {self.status}]"


class ErrorKind(Enum):
    """Failure kinds for authenticated fetches and image downloads."""
    NO_AUTH = "noAuth"
    OTHER_ERROR = "otherError"
    BAD_AUTH = "badAuth"
    BAD_DATA = "badData"
    NO_DECODE = "noDecode"
    BAD_URL = "badURL"


_DEFAULT_FETCH_MESSAGES = {
    ErrorKind.NO_AUTH: "No bearer token available; sign in first",
    ErrorKind.OTHER_ERROR: "Request failed before a response was received",
    ErrorKind.BAD_AUTH: "Server rejected the bearer token",
    ErrorKind.BAD_DATA: "Server responded with no usable data",
    ErrorKind.NO_DECODE: "Response body could not be decoded",
    ErrorKind.BAD_URL: "Malformed URL",
}


class FetchError(SpotterError):
    """Failure of an authenticated fetch or an image download."""

    def __init__(
        self,
        kind: ErrorKind,
        message: Optional[str] = None,
        **kwargs
    ):
        super().__init__(message or _DEFAULT_FETCH_MESSAGES[kind], **kwargs)
        self.kind = kind

    @property
    def code(self) -> str:
        return self.kind.value

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["kind"] = self.kind.name
        return data


class EncodingError(SpotterError):
    """Request body could not be encoded."""

    code = "ENCODING_ERROR"

    def __init__(self, message: str = "Error encoding user object", **kwargs):
        super().__init__(message, **kwargs)


class DecodingError(SpotterError):
    """Response body could not be decoded."""

    code = "DECODING_ERROR"

    def __init__(self, message: str = "Error decoding bearer object", **kwargs):
        super().__init__(message, **kwargs)


class MissingDataError(SpotterError):
    """Server answered successfully but sent no body."""

    code = "DATA_NOT_FOUND"

    def __init__(self, message: str = "Data not found", **kwargs):
        super().__init__(message, **kwargs)


class StatusCodeError(SpotterError):
    """Server answered with a status other than 200."""

    code = "HTTP_STATUS"

    def __init__(self, status: int, message: Optional[str] = None, **kwargs):
        super().__init__(message or f"Unexpected HTTP status {status}", status=status, **kwargs)


class NetworkError(SpotterError):
    """Error for network-related issues."""

    code = "NETWORK_ERROR"

    def __init__(self, message: str = "Network error", **kwargs):
        super().__init__(message, **kwargs)


def create_user_friendly_message(error: SpotterError) -> str:
    """
    Create a user-friendly error message.

    Args:
        error: The SpotterError to convert

    Returns:
        User-friendly error message
    """
    if isinstance(error, FetchError):
        if error.kind is ErrorKind.NO_AUTH:
            return "You are not signed in. Provide a username and password and try again."
        elif error.kind is ErrorKind.BAD_AUTH:
            return "The server rejected your session. Please sign in again."
        elif error.kind is ErrorKind.OTHER_ERROR:
            return "Network error occurred. Please check your internet connection and try again."
        elif error.kind is ErrorKind.BAD_DATA:
            return "The server sent no usable data."
        elif error.kind is ErrorKind.NO_DECODE:
            return "The server's response could not be understood."
        url = error.details.get("url")
        return f"The image URL is not valid: {url}" if url else "The image URL is not valid."

    elif isinstance(error, StatusCodeError):
        if error.status in (401, 403):
            return "Sign-in failed. Please check your username and password."
        return f"The server refused the request (HTTP {error.status})."

    elif isinstance(error, NetworkError):
        return "Network error occurred. Please check your internet connection and try again."

    elif isinstance(error, (DecodingError, MissingDataError)):
        return "The server's sign-in response could not be understood."

    else:
        return f"An error occurred: {error.message}"
