"""
Error definitions for the EduCMS API.

Error codes are declared in the backend's error registry and parsed into
these models.
"""

from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field

from educms_types.envelopes import ErrorEnvelope


class ErrorSeverity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    DATABASE = "database"
    CONFIGURATION = "configuration"
    INTERNAL = "internal"


class ErrorDefinition(BaseModel):
    """Error definition from the registry."""
    code: str = Field(..., description="Unique error code (e.g., DB_001)")
    http_status: int = Field(..., description="HTTP status code")
    category: ErrorCategory
    severity: ErrorSeverity
    title: str = Field(..., description="Short error title")
    message: str = Field(..., description="Default message when none is given")
    internal_description: str = ""

    model_config = ConfigDict(use_enum_values=True)


class ErrorResponse(BaseModel):
    """Error information assembled for logging and for the response body."""
    error_code: str
    message: str
    status_code: int
    category: ErrorCategory
    severity: ErrorSeverity
    details: Optional[Any] = None

    model_config = ConfigDict(use_enum_values=True)

    def to_envelope(self) -> dict:
        return ErrorEnvelope(message=self.message).model_dump()
