"""
Pydantic schemas for error responses.
"""

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Standard error response format.

    Examples:
        400: {"error": "validation_failed", "message": "..."}
        404: {"error": "not_found", "message": "Configuration 'X' not found"}
        502: {"error": "remote_store_error", "message": "..."}
    """

    error: str = Field(
        ...,
        description="Error code string",
        examples=["validation_failed", "not_found", "remote_store_error"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] | None = Field(
        default=None,
        description="Optional additional error details",
    )
