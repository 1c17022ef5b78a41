"""
Response envelopes shared by the EduCMS backend and client.

Every API response is wrapped as ``{success, data?, message?}``; error
responses are ``{success: false, message}``.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field


class ApiResponse(BaseModel):
    """Standard success envelope. Unset fields are left out of the payload."""
    success: bool = Field(True, description="Whether the operation succeeded")
    data: Optional[Any] = Field(None, description="Operation payload")
    message: Optional[str] = Field(None, description="Human-readable outcome")

    @classmethod
    def ok(cls, data: Any = None, message: Optional[str] = None, *, include_data: bool = True) -> "ApiResponse":
        fields: Dict[str, Any] = {"success": True}
        if include_data:
            fields["data"] = data
        if message is not None:
            fields["message"] = message
        return cls(**fields)


class ErrorEnvelope(BaseModel):
    success: bool = False
    message: str


class TableProbe(BaseModel):
    """Result of probing one backend table."""
    exists: bool
    columns: List[str] = Field(default_factory=list)


class DashboardStats(BaseModel):
    kelas: int = 0
    pengguna: int = 0
    materi: int = 0
    kuis: int = 0
    forum: int = 0
    pengumpulan: int = 0


class HealthStatus(BaseModel):
    status: str
    message: str
    timestamp: str
