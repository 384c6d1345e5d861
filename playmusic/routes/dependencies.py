"""Request dependencies handing the application's stores to route handlers."""

from fastapi import Request
from playmusic.services.store import TrackStore, VideoStore


def get_track_store(request: Request) -> TrackStore:
    """Get the track store created at startup."""
    return request.app.state.tracks


def get_video_store(request: Request) -> VideoStore:
    """Get the video store created at startup."""
    return request.app.state.videos
