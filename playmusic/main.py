"""FastAPI application for the PlayMusic API.

This is the main entry point for the media library service.
It provides REST API endpoints for the tracks and videos collections,
each persisted to its own JSON file.
"""

import time
from contextlib import asynccontextmanager
from eliot import log_message
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from playmusic import __version__
from playmusic.core.config import Settings, get_settings
from playmusic.core.logging import setup_logging
from playmusic.models.responses import ErrorResponse, HealthResponse
from playmusic.routes.tracks import router as tracks_router
from playmusic.routes.videos import router as videos_router
from playmusic.services.store import StoreError, TrackStore, VideoStore


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application.

    Stores are created in the lifespan handler, so nothing touches disk until
    the server (or a TestClient context) starts.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        app.state.started_at = time.time()
        app.state.tracks = TrackStore(settings.tracks_path, seed_path=settings.SEED_FILE)
        app.state.videos = VideoStore(settings.videos_path)

        log_message(
            message_type="application_ready",
            message=f"{settings.APP_NAME} v{__version__} started "
            f"({len(app.state.tracks)} tracks, {len(app.state.videos)} videos)",
            tracks_file=str(settings.tracks_path),
            videos_file=str(settings.videos_path),
        )

        yield

        log_message(message_type="application_shutdown", message=f"{settings.APP_NAME} shutting down")

    app = FastAPI(
        title=settings.APP_NAME,
        description="REST API for the PlayMusic media library",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        return JSONResponse(ErrorResponse(error=exc.message).model_dump(), status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(ErrorResponse(error="Invalid request body").model_dump(), status_code=400)

    app.include_router(tracks_router)
    app.include_router(videos_router)

    @app.get("/health", response_model=HealthResponse)
    async def health_check(request: Request):
        """Health check endpoint."""
        state = request.app.state
        return HealthResponse(
            status="healthy",
            version=__version__,
            tracks=len(state.tracks),
            videos=len(state.videos),
            uptime_seconds=int(time.time() - state.started_at),
        )

    return app


app = create_app()


def run():
    """Entry point for running the server."""
    import uvicorn

    settings = get_settings()
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    uvicorn.run(
        "playmusic.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
