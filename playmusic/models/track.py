"""Track models for the music library."""

from playmusic.models.base import StoredRecord
from pydantic import BaseModel, ConfigDict
from typing import Any


class Track(StoredRecord):
    """A stored audio track.

    Keys outside the declared fields (from a hand-edited or seed file) are kept
    and written back unchanged.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    url: str
    title: str
    artist: str | None = None
    artwork: str | None = None
    playlist: list[str] | None = None
    rating: int | float | None = None

    def to_json(self) -> dict[str, Any]:
        """Serialize for the wire and the data file.

        Declared fields that were never given are omitted; everything that was
        given, including explicit nulls and unknown keys, is kept.
        """
        unset = {name for name in type(self).model_fields if name not in self.model_fields_set}
        return self.model_dump(exclude=unset, warnings=False)


class TrackCreate(BaseModel):
    """Request body for creating a track.

    Everything is optional here so the store can answer a missing field with its
    own error message instead of a validation error.
    """

    url: str | None = None
    title: str | None = None
    artist: str | None = None
    artwork: str | None = None
