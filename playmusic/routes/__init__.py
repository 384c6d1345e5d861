"""API routes for the PlayMusic API."""

from playmusic.routes.tracks import router as tracks_router
from playmusic.routes.videos import router as videos_router

__all__ = ["tracks_router", "videos_router"]
