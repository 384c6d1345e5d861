"""Backend services for the PlayMusic API."""

from playmusic.services.ids import IdGenerator, generate_id
from playmusic.services.store import InvalidInput, JsonStore, NotFound, StoreError, TrackStore, VideoStore

__all__ = ["IdGenerator", "generate_id", "JsonStore", "TrackStore", "VideoStore", "StoreError", "NotFound", "InvalidInput"]
