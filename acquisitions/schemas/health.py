"""Pydantic schemas for health check responses."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response body for the health check endpoint."""

    status: Literal["OK"] = Field(default="OK", description="Service status")
    timestamp: str = Field(description="Current server time (ISO 8601, UTC)")
    uptime: float = Field(description="Seconds since the application started")
    environment: str = Field(description="Current app environment (dev, test, prod)")
    database: Literal["connected", "disconnected"] | None = Field(
        default=None,
        description="Database connectivity status when check is performed",
    )


class ApiInfoResponse(BaseModel):
    message: str
