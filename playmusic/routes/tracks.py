"""Track routes for the PlayMusic API."""

from fastapi import APIRouter, Depends
from playmusic.core.logging import log_api_request
from playmusic.models.track import TrackCreate
from playmusic.routes.dependencies import get_track_store
from playmusic.services.store import TrackStore

router = APIRouter(prefix="/tracks", tags=["tracks"])


@router.get("")
async def list_tracks(store: TrackStore = Depends(get_track_store)):
    """Get all tracks in insertion order."""
    return [track.to_json() for track in store.list()]


# Registered before /{track_id} so "search" is never taken for an id
@router.get("/search")
async def search_tracks(q: str = "", store: TrackStore = Depends(get_track_store)):
    """Search title, artist, url and playlist names. An empty query returns nothing."""
    results = store.search(q)
    log_api_request("search_tracks", description=f"q={q!r} -> {len(results)} results")
    return [track.to_json() for track in results]


@router.get("/{track_id}")
async def get_track(track_id: str, store: TrackStore = Depends(get_track_store)):
    """Get a single track by ID."""
    return store.get(track_id).to_json()


@router.post("", status_code=201)
async def create_track(request: TrackCreate | None = None, store: TrackStore = Depends(get_track_store)):
    """Add a track to the library."""
    fields = request.model_dump(exclude_unset=True) if request is not None else {}
    track = store.create(fields)
    log_api_request("create_track", description=f"{track.id} {track.title}")
    return track.to_json()


@router.delete("/{track_id}")
async def delete_track(track_id: str, store: TrackStore = Depends(get_track_store)):
    """Remove a track and return it."""
    removed = store.delete(track_id)
    log_api_request("delete_track", description=removed.id)
    return removed.to_json()
