"""
Exception hierarchy for the EduCMS client library.

Exceptions map to HTTP status codes of the EduCMS API and keep the server's
``message``.
"""

from typing import Any, Dict, Optional


class EduCMSClientError(Exception):
    """
    Base exception for all EduCMS client errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (if applicable)
        details: Additional error details from the response
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details or {}

    def __str__(self) -> str:
        if self.status_code:
            return f"{self.message} (HTTP {self.status_code})"
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"status_code={self.status_code})"
        )


# =============================================================================
# Client Errors (4xx)
# =============================================================================


class ValidationError(EduCMSClientError):
    """The server rejected the request body (e.g., an empty create)."""

    def __init__(
        self,
        message: str = "Invalid request",
        *,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=status_code, details=details)


class NotFoundError(EduCMSClientError):
    """No endpoint for this method and path, or the table is not routable."""

    def __init__(
        self,
        message: str = "Endpoint not found",
        *,
        status_code: int = 404,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=status_code, details=details)


class PayloadTooLargeError(EduCMSClientError):
    """The attachment exceeds the server's upload limit."""

    def __init__(
        self,
        message: str = "Request body too large",
        *,
        status_code: int = 413,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=status_code, details=details)


# =============================================================================
# Server Errors (5xx)
# =============================================================================


class ServerError(EduCMSClientError):
    """
    The server or its storage backend failed.

    The API reports every storage failure (missing row, constraint violation,
    connectivity) as HTTP 500 with the backend's message.
    """

    def __init__(
        self,
        message: str = "Internal server error",
        *,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=status_code, details=details)


# =============================================================================
# Network Errors (Client-side)
# =============================================================================


class NetworkError(EduCMSClientError):
    """Connection problem, DNS failure or other transport error."""

    def __init__(
        self,
        message: str = "Network error",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=None, details=details)


class TimeoutError(NetworkError):
    """Request timed out."""

    def __init__(
        self,
        message: str = "Request timed out",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)


# =============================================================================
# Data Sync Errors
# =============================================================================


class DataLoadError(EduCMSClientError):
    """A request of the dashboard load batch failed; the whole batch is discarded."""

    def __init__(
        self,
        message: str = "Failed to load data from server",
        *,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        if status_code is not None and message == "Failed to load data from server":
            message = f"{message}: {status_code}"
        super().__init__(message, status_code=status_code, details=details)

    def __str__(self) -> str:
        return self.message


# =============================================================================
# Exception Mapping
# =============================================================================

STATUS_CODE_EXCEPTIONS = {
    400: ValidationError,
    404: NotFoundError,
    413: PayloadTooLargeError,
    500: ServerError,
    502: ServerError,
    503: ServerError,
    504: ServerError,
}


def exception_from_response(
    status_code: int,
    message: str,
    details: Optional[Dict[str, Any]] = None,
) -> EduCMSClientError:
    """Create the exception matching an HTTP error status."""
    exception_class = STATUS_CODE_EXCEPTIONS.get(status_code)
    if exception_class is None:
        exception_class = ServerError if status_code >= 500 else EduCMSClientError
    return exception_class(message, status_code=status_code, details=details)
