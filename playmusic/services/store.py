"""JSON-file backed stores for the tracks and videos collections.

Each store keeps its collection in memory, in insertion order, and rewrites the
whole backing file after every mutation. The in-memory list is what requests
see; a failed write is logged and otherwise ignored, so a mutation that could
not be persisted still succeeds for the rest of the process lifetime.
"""

import json
import threading
from collections.abc import Callable, Iterator, Mapping
from eliot import start_action
from pathlib import Path
from playmusic.core.logging import log_error, log_file_operation, log_store_operation
from playmusic.models.track import Track
from playmusic.models.video import Video
from playmusic.services.ids import generate_id
from playmusic.models.base import StoredRecord
from pydantic import ValidationError
from typing import Any, Generic, TypeVar

RecordT = TypeVar("RecordT", Track, Video)


class StoreError(Exception):
    """Base class for errors reported back to API callers."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(StoreError):
    """No record with the requested id."""

    status_code = 404

    def __init__(self, message: str = "Not found"):
        super().__init__(message)


class InvalidInput(StoreError):
    """A required field is missing at create time."""

    status_code = 400


def is_missing(value: Any) -> bool:
    """Absent, null and empty-string values all count as missing."""
    return value is None or value == ""


class JsonStore(Generic[RecordT]):
    """Ordered collection of records mirrored to a JSON array on disk.

    Subclasses set ``collection`` and ``model`` and implement ``validate``,
    ``build`` and ``search_values``.
    """

    collection: str = "records"
    model: type[StoredRecord]

    def __init__(self, path: str | Path, id_generator: Callable[[], str] | None = None):
        self.path = Path(path)
        self._generate_id = id_generator or generate_id
        self._lock = threading.RLock()
        self._records: list[RecordT] = self.load_all()

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return any(record.id == record_id for record in self._records)

    # ==================== Loading ====================

    def load_all(self) -> list[RecordT]:
        """Read the backing file, falling back when it is absent or unreadable."""
        with start_action(action_type="playmusic:store:load", collection=self.collection, path=str(self.path)) as action:
            records = self._read_records(self.path)
            if records is None:
                records = self._fallback()
            action.add_success_fields(records=len(records))
        log_store_operation("load", self.collection, records=len(records))
        return records

    def _read_raw(self, path: Path) -> list | None:
        """Parse ``path`` as a JSON array, or return None if that is not possible."""
        if not path.exists():
            return None
        try:
            with open(path, encoding="utf-8") as f:
                raw = json.load(f)
            if not isinstance(raw, list):
                raise ValueError(f"{path.name} is not a JSON array")
        except (OSError, ValueError) as e:
            log_error(e, operation="read", filepath=str(path))
            return None
        log_file_operation("read", path, records=len(raw))
        return raw

    def _to_records(self, raw: list, path: Path) -> list[RecordT]:
        """Turn parsed entries into records.

        An entry that fails the schema is kept as read; only entries that are not
        JSON objects are skipped.
        """
        records = []
        for position, item in enumerate(raw):
            if not isinstance(item, dict):
                log_store_operation("skip_entry", self.collection, position=position, filepath=str(path))
                continue
            try:
                records.append(self.model.model_validate(item))
            except ValidationError as e:
                log_error(e, operation="validate", filepath=str(path), position=position)
                records.append(self.model.from_stored(item))
        return records

    def _read_records(self, path: Path) -> list[RecordT] | None:
        raw = self._read_raw(path)
        if raw is None:
            return None
        return self._to_records(raw, path)

    def _fallback(self) -> list[RecordT]:
        """Collection to start with when the backing file cannot be used."""
        return []

    # ==================== Persistence ====================

    def save(self) -> bool:
        """Rewrite the backing file with the full collection.

        Returns:
            False if the write failed. The failure is logged, never raised.
        """
        with self._lock:
            try:
                payload = json.dumps([record.to_json() for record in self._records], indent=2, ensure_ascii=False)
                self.path.parent.mkdir(parents=True, exist_ok=True)
                with open(self.path, "w", encoding="utf-8") as f:
                    f.write(payload)
            except (OSError, TypeError, ValueError) as e:
                log_error(e, operation="write", filepath=str(self.path), collection=self.collection)
                return False
            log_file_operation("write", self.path, records=len(self._records))
            return True

    # ==================== Queries ====================

    def get(self, record_id: str) -> RecordT:
        """Return the record with ``record_id``.

        Raises:
            NotFound: no such record
        """
        for record in self._records:
            if record.id == record_id:
                return record
        raise NotFound()

    def search(self, query: str | None) -> list[RecordT]:
        """Case-insensitive substring search over the collection's text fields.

        An empty query matches nothing.
        """
        if not query:
            return []
        needle = query.lower()
        return [
            record
            for record in self._records
            if any(needle in value.lower() for value in self.search_values(record) if isinstance(value, str))
        ]

    def search_values(self, record: RecordT) -> Iterator[str | None]:
        raise NotImplementedError

    # ==================== Mutations ====================

    def create(self, fields: Mapping[str, Any]) -> RecordT:
        """Validate ``fields``, append a new record and persist the collection.

        Raises:
            InvalidInput: a required field is missing or has the wrong type
        """
        self.validate(fields)
        with self._lock, start_action(action_type="playmusic:store:create", collection=self.collection) as action:
            try:
                record = self.build(self._new_id(), fields)
            except ValidationError as e:
                raise InvalidInput("Invalid request body") from e
            self._records.append(record)
            self.save()
            action.add_success_fields(record_id=record.id)
        log_store_operation("create", self.collection, record_id=record.id)
        return record

    def delete(self, record_id: str) -> RecordT:
        """Remove the record with ``record_id`` and persist the collection.

        Raises:
            NotFound: no such record
        """
        with self._lock, start_action(action_type="playmusic:store:delete", collection=self.collection, record_id=record_id):
            for index, record in enumerate(self._records):
                if record.id == record_id:
                    removed = self._records.pop(index)
                    break
            else:
                raise NotFound()
            self.save()
        log_store_operation("delete", self.collection, record_id=record_id)
        return removed

    def validate(self, fields: Mapping[str, Any]) -> None:
        raise NotImplementedError

    def build(self, record_id: str, fields: Mapping[str, Any]) -> RecordT:
        raise NotImplementedError

    def _new_id(self) -> str:
        record_id = self._generate_id()
        while record_id in self:
            record_id = self._generate_id()
        return record_id

    # Defined last: the name shadows the builtin in the rest of the class body
    def list(self) -> list[RecordT]:
        """All records in insertion order."""
        return list(self._records)


class TrackStore(JsonStore[Track]):
    """Audio tracks, seeded from a bundled library file on first run."""

    collection = "tracks"
    model = Track

    def __init__(
        self,
        path: str | Path,
        seed_path: str | Path | None = None,
        id_generator: Callable[[], str] | None = None,
    ):
        self.seed_path = Path(seed_path) if seed_path else None
        super().__init__(path, id_generator=id_generator)

    def _fallback(self) -> list[Track]:
        if self.seed_path is None:
            return []
        raw = self._read_raw(self.seed_path)
        if raw is None:
            return []
        # An id already present in a seed entry wins
        entries = [{"id": self._generate_id(), **entry} if isinstance(entry, dict) else entry for entry in raw]
        records = self._to_records(entries, self.seed_path)
        self._records = records
        self.save()
        log_file_operation("seed", self.seed_path, records=len(records))
        return records

    def validate(self, fields: Mapping[str, Any]) -> None:
        if is_missing(fields.get("url")) or is_missing(fields.get("title")):
            raise InvalidInput("url and title are required")

    def build(self, record_id: str, fields: Mapping[str, Any]) -> Track:
        optional = {key: fields[key] for key in ("artist", "artwork") if key in fields}
        return Track(id=record_id, url=fields["url"], title=fields["title"], **optional)

    def search_values(self, record: Track) -> Iterator[str | None]:
        yield record.title
        yield record.artist
        yield record.url
        if isinstance(record.playlist, list):
            yield from record.playlist


class VideoStore(JsonStore[Video]):
    """Videos, either remote or on-device."""

    collection = "videos"
    model = Video

    def validate(self, fields: Mapping[str, Any]) -> None:
        if is_missing(fields.get("url")) and is_missing(fields.get("local_uri")):
            raise InvalidInput("url or localUri is required")
        if is_missing(fields.get("title")):
            raise InvalidInput("title is required")

    def build(self, record_id: str, fields: Mapping[str, Any]) -> Video:
        return Video(
            id=record_id,
            url=fields.get("url") or None,
            local_uri=fields.get("local_uri") or None,
            title=fields["title"],
            thumbnail=fields.get("thumbnail") or None,
            duration=fields.get("duration"),
        )

    def search_values(self, record: Video) -> Iterator[str | None]:
        yield record.title
        yield record.url
