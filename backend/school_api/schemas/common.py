"""
School Records API: Shared Response Schemas
=============================================

Envelopes used by more than one route module: the error body, the delete
confirmation and the health report.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class EntityResponse(BaseModel):
    """Generated fields every entity response carries."""
    id: int = Field(description="Store-generated identifier")
    created_at: datetime = Field(description="When the record was created (UTC)")
    updated_at: datetime = Field(description="When the record was last written (UTC)")

    model_config = {"from_attributes": True}


class MessageResponse(BaseModel):
    """
    What:  Confirmation body for delete requests.
    Example: {"message": "School deleted successfully"}
    """
    message: str = Field(description="Human-readable confirmation")


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Example:
        {
            "error": "not_found",
            "message": "School with ID '999' was not found",
            "request_id": "1a2b3c4d"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer probes."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
