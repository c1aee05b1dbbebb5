"""Unified API response format and error codes."""

from typing import Any
from datetime import datetime

from pydantic import BaseModel, Field

from utils.request_context import get_current_request_id
from utils.timezone import now_utc


class APIError(BaseModel):
    """Error details in API response."""

    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class APIMeta(BaseModel):
    """Metadata included in every API response."""

    timestamp: datetime = Field(..., description="Response timestamp (UTC)")
    request_id: str = Field(..., description="Unique request identifier for tracing")


class APIResponse(BaseModel):
    """
    Unified response format for all API endpoints.

    Every endpoint returns this structure, making client parsing predictable.
    """

    success: bool
    data: Any | None = None
    error: APIError | None = None
    meta: APIMeta


def success_response(data: Any) -> APIResponse:
    """Create a success response."""
    return APIResponse(
        success=True,
        data=data,
        error=None,
        meta=APIMeta(
            timestamp=now_utc(),
            request_id=get_current_request_id(),
        ),
    )


def error_response(code: str, message: str) -> APIResponse:
    """Create an error response."""
    return APIResponse(
        success=False,
        data=None,
        error=APIError(code=code, message=message),
        meta=APIMeta(
            timestamp=now_utc(),
            request_id=get_current_request_id(),
        ),
    )


class ErrorCodes:
    """Standard error codes for consistent error handling."""

    # Validation Errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_REQUEST = "INVALID_REQUEST"

    # Conversion
    UNKNOWN_ZONE = "UNKNOWN_ZONE"
    INVALID_CIVIL_TIME = "INVALID_CIVIL_TIME"

    # Infrastructure
    INTERNAL_ERROR = "INTERNAL_ERROR"
    ZONE_DATABASE_UNAVAILABLE = "ZONE_DATABASE_UNAVAILABLE"
