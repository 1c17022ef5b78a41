"""
Custom HTTP exceptions with registry error codes.

Every exception renders as ``{"success": false, "message": ...}``; the error
code and context are only used for logging.
"""

from typing import Any, Dict, Optional
from fastapi import HTTPException, Request, status

from educms_backend.exceptions.error_registry import get_error_definition
from educms_types.errors import ErrorResponse

API_PREFIX = "/api"


class EduCMSException(HTTPException):
    """
    Base exception class for all EduCMS exceptions.

    Args:
        error_code: Error code from error registry (e.g., "DB_001")
        detail: Message for the client (overrides the registry message)
        headers: HTTP response headers
        context: Additional context for logging
    """

    def __init__(
        self,
        error_code: str,
        detail: Any = None,
        headers: Optional[Dict[str, str]] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.error_code = error_code
        self.context = context or {}

        # Starlette replaces an empty detail with the reason phrase
        if detail is None or detail == "":
            detail = get_error_definition(error_code).message

        # The actual status_code is set by subclasses
        super().__init__(status_code=500, detail=detail, headers=headers)

    @property
    def message(self) -> str:
        if isinstance(self.detail, str):
            return self.detail
        return str(self.detail)

    def to_error_response(self) -> ErrorResponse:
        error_def = get_error_definition(self.error_code)

        return ErrorResponse(
            error_code=self.error_code,
            message=self.message,
            status_code=self.status_code,
            category=error_def.category,
            severity=error_def.severity,
            details=self.context or None,
        )


# ============================================================================
# VALIDATION EXCEPTIONS (400)
# ============================================================================


class BadRequestException(EduCMSException):
    """Malformed request - 400"""

    def __init__(
        self,
        error_code: str = "VAL_001",
        detail: Any = None,
        headers: Optional[Dict[str, str]] = None,
        **kwargs,
    ):
        super().__init__(error_code=error_code, detail=detail, headers=headers, **kwargs)
        self.status_code = status.HTTP_400_BAD_REQUEST


class EmptyBodyException(BadRequestException):
    """Create called without any field - 400"""

    def __init__(self, detail: Any = "Request body is empty", **kwargs):
        super().__init__(error_code="VAL_002", detail=detail, **kwargs)


class PayloadTooLargeException(EduCMSException):
    """Request body over the upload limit - 413"""

    def __init__(self, detail: Any = None, **kwargs):
        super().__init__(error_code="VAL_003", detail=detail, **kwargs)
        self.status_code = 413


# ============================================================================
# NOT FOUND EXCEPTIONS (404)
# ============================================================================


class EndpointNotFoundException(EduCMSException):
    """No route for this method and path - 404"""

    def __init__(self, detail: Any = None, **kwargs):
        super().__init__(error_code="NF_001", detail=detail, **kwargs)
        self.status_code = status.HTTP_404_NOT_FOUND

    @classmethod
    def for_request(cls, request: Request) -> "EndpointNotFoundException":
        return cls(detail=not_found_message(request.method, request.url.path))


def not_found_message(method: str, path: str) -> str:
    """Paths under the API prefix are reported relative to it."""
    if path.startswith(API_PREFIX + "/"):
        path = path[len(API_PREFIX):]
    return f"{method} {path} not found"


# ============================================================================
# STORAGE EXCEPTIONS (500)
# ============================================================================


class StorageOperationException(EduCMSException):
    """Storage backend reported a failure - 500"""

    def __init__(self, detail: Any = None, **kwargs):
        super().__init__(error_code="DB_001", detail=detail, **kwargs)
        self.status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class ConfigurationException(EduCMSException):
    """Server is missing required configuration - 500"""

    def __init__(self, detail: Any = None, **kwargs):
        super().__init__(error_code="CFG_001", detail=detail, **kwargs)
        self.status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class InternalServerException(EduCMSException):
    """Unexpected failure - 500"""

    def __init__(self, error_code: str = "INT_001", detail: Any = None, **kwargs):
        super().__init__(error_code=error_code, detail=detail, **kwargs)
        self.status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
