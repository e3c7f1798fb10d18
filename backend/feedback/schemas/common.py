"""
Feedback Tracker Backend — Shared Response Schemas
===================================================

What:  Response models that are not tied to one entity: the error envelope
       and the health check report.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Standardized error body for 401 and 500 responses.

    400 and 404 responses from the entity resources carry no body at all;
    their reason travels in the alert headers.
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
