"""Response models for API endpoints."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error response."""

    error: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    tracks: int
    videos: int
    uptime_seconds: int
