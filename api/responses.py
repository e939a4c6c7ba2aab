"""
Standardized API response models.
Provides consistent response formatting across all endpoints.
"""

from typing import Optional, Any, List
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from datetime import datetime, timezone


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class FieldError(BaseModel):
    """One binding failure: which value could not be bound and why"""

    object_name: str = Field(..., description="Request part ('body', 'path', 'query')")
    field: Optional[str] = Field(None, description="Dotted path of the offending field")
    rejected_value: Any = Field(None, description="Value that failed to bind")
    default_message: str = Field(..., description="Error message")
    code: Optional[str] = Field(None, description="Error type code")
    binding_failure: bool = Field(True, description="Always true for binding errors")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorDetail(BaseModel):
    """Detailed error information"""

    code: str = Field(..., description="Error code")
    message: str = Field(..., description="Error message")
    details: Optional[dict] = Field(None, description="Additional error details")


class ErrorResponse(BaseModel):
    """Standardized error response"""

    success: bool = Field(False, description="Always false for errors")
    error: ErrorDetail = Field(..., description="Error details")
    timestamp: datetime = Field(
        default_factory=_utc_now, description="Error timestamp"
    )


class HealthResponse(BaseModel):
    """Health check response"""

    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Service name")
    version: Optional[str] = Field(None, description="Service version")


# Response documentation shared by routers that accept request bodies
VALIDATION_RESPONSES: dict = {
    400: {
        "description": "Constraint violations (list of strings) or binding failures (list of field errors)",
        "model": List[Any],
    },
}


def error_response(code: str, message: str, details: dict = None) -> dict:
    """Create a standardized error response body"""
    return ErrorResponse(
        error=ErrorDetail(code=code, message=message, details=details)
    ).model_dump(mode="json")
