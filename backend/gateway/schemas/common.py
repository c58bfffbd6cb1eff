"""
Board Gateway - Shared Request/Response Schemas
================================================

What:  Pydantic models shared by every resource group: bulk-delete payloads,
       the uniform error body and the health check response.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class IdsPayload(BaseModel):
    """
    What:  Body of the bulk-delete endpoints: {"ids": [1, 2, 3]}.

    `ids` is optional at the schema level so the service can answer a missing
    or empty list with the resource's own 400 message.
    """
    ids: Optional[List[int]] = Field(
        default=None,
        description="Primary keys of the rows to delete",
        examples=[[1, 2, 3]],
    )

    model_config = {"extra": "forbid"}


class ErrorResponse(BaseModel):
    """
    What:  Uniform error body returned by every failing endpoint.

    Example:
        {"error": "Total users cannot exceed 10.", "request_id": "1a2b3c4d"}
    """
    error: str = Field(description="Human-readable error message")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
