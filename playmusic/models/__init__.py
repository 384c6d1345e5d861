"""Pydantic models for the PlayMusic API."""

from playmusic.models.responses import ErrorResponse, HealthResponse
from playmusic.models.track import Track, TrackCreate
from playmusic.models.video import Video, VideoCreate

__all__ = [
    # Track models
    "Track",
    "TrackCreate",
    # Video models
    "Video",
    "VideoCreate",
    # Response models
    "ErrorResponse",
    "HealthResponse",
]
