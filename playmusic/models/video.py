"""Video models for the media library."""

from datetime import UTC, datetime
from playmusic.models.base import StoredRecord
from pydantic import BaseModel, ConfigDict, Field
from typing import Any


def utc_timestamp() -> str:
    """Current time as ISO-8601 UTC with millisecond precision, e.g. ``2025-01-31T12:00:00.000Z``."""
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class Video(StoredRecord):
    """A stored video, either remote (``url``) or on-device (``localUri``)."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    url: str | None = None
    local_uri: str | None = Field(None, alias="localUri")
    title: str
    thumbnail: str | None = None
    duration: int | float | None = None
    created_at: str = Field(default_factory=utc_timestamp, alias="createdAt")

    def to_json(self) -> dict[str, Any]:
        """Serialize for the wire and the data file; nulls are kept."""
        return self.model_dump(by_alias=True, warnings=False)


class VideoCreate(BaseModel):
    """Request body for creating a video."""

    model_config = ConfigDict(populate_by_name=True)

    url: str | None = None
    local_uri: str | None = Field(None, alias="localUri")
    title: str | None = None
    thumbnail: str | None = None
    duration: int | float | None = None
