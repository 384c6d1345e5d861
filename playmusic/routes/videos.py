"""Video routes for the PlayMusic API."""

from fastapi import APIRouter, Depends
from playmusic.core.logging import log_api_request
from playmusic.models.video import VideoCreate
from playmusic.routes.dependencies import get_video_store
from playmusic.services.store import VideoStore

router = APIRouter(prefix="/videos", tags=["videos"])


@router.get("")
async def list_videos(store: VideoStore = Depends(get_video_store)):
    """Get all videos in insertion order."""
    return [video.to_json() for video in store.list()]


@router.get("/search")
async def search_videos(q: str = "", store: VideoStore = Depends(get_video_store)):
    """Search title and url. An empty query returns nothing."""
    results = store.search(q)
    log_api_request("search_videos", description=f"q={q!r} -> {len(results)} results")
    return [video.to_json() for video in results]


@router.get("/{video_id}")
async def get_video(video_id: str, store: VideoStore = Depends(get_video_store)):
    """Get a single video by ID."""
    return store.get(video_id).to_json()


@router.post("", status_code=201)
async def create_video(request: VideoCreate | None = None, store: VideoStore = Depends(get_video_store)):
    """Add a video. Either url or localUri must be given."""
    fields = request.model_dump(exclude_unset=True) if request is not None else {}
    video = store.create(fields)
    log_api_request("create_video", description=f"{video.id} {video.title}")
    return video.to_json()


@router.delete("/{video_id}")
async def delete_video(video_id: str, store: VideoStore = Depends(get_video_store)):
    """Remove a video and return it."""
    removed = store.delete(video_id)
    log_api_request("delete_video", description=removed.id)
    return removed.to_json()
