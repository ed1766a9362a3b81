"""
Notes API - In-Memory Note Store
==================================

What:  Keyed storage of notes for the lifetime of the process.
How:   A dict of id → Note guarded by a lock. Every read returns a copy and
       every write stores a copy, so callers can never alias stored state.
Who:   Owned by the FastAPI application (`app.state.note_store`), injected
       into NoteService through `get_note_store`.
When:  One instance per application object; tests build their own.

Contract:
    create(data)          → Note            (always succeeds)
    find_all()            → List[Note]      (insertion order)
    find_by_id(id)        → Optional[Note]  (None when absent, never raises)
    update(id, data)      → Optional[Note]  (None when absent)
    delete(id)            → bool            (True if an entry was removed)

    `data` is the already-validated request payload. Only the keys present
    in it are applied on update; `tags` is applied only when it is a list.

Concurrency:
    Route handlers run on the event loop, but the lock also covers callers
    on worker threads (sync dependencies, TestClient). No operation blocks
    on I/O, so holding the lock is always short.
"""

import logging
import threading
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Mapping, Optional

from starlette.requests import Request

from notes_api.models.note import Note

logger = logging.getLogger(__name__)

# Serialized timestamps carry millisecond precision; a refreshed updated_at
# must differ from the previous one at that precision.
TIMESTAMP_RESOLUTION = timedelta(milliseconds=1)


def utcnow() -> datetime:
    """Current UTC time truncated to the serialized precision."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond - now.microsecond % 1000)


class NoteStore:
    """
    Process-lifetime table of notes.

    The store performs no validation; NoteService is responsible for only
    passing well-formed payloads.
    """

    def __init__(self) -> None:
        self._notes: Dict[str, Note] = {}
        self._lock = threading.Lock()

    def create(self, data: Mapping[str, Any]) -> Note:
        now = utcnow()
        tags = data.get("tags")
        note = Note(
            id=str(uuid.uuid4()),
            title=data.get("title"),
            content=data.get("content"),
            tags=list(tags) if isinstance(tags, list) else [],
            created_at=now,
            updated_at=now,
        )
        with self._lock:
            self._notes[note.id] = note
        logger.debug("Stored note %s", note.id)
        return note.copy()

    def find_all(self) -> List[Note]:
        with self._lock:
            return [note.copy() for note in self._notes.values()]

    def find_by_id(self, note_id: str) -> Optional[Note]:
        with self._lock:
            note = self._notes.get(note_id)
            return note.copy() if note is not None else None

    def update(self, note_id: str, data: Mapping[str, Any]) -> Optional[Note]:
        """
        Merge the fields present in `data` over the stored note.

        updated_at is refreshed to now, or bumped one millisecond past the
        previous value when the clock has not moved far enough.
        """
        with self._lock:
            existing = self._notes.get(note_id)
            if existing is None:
                return None

            updated = existing.copy()
            if "title" in data:
                updated.title = data["title"]
            if "content" in data:
                updated.content = data["content"]
            if isinstance(data.get("tags"), list):
                updated.tags = list(data["tags"])
            updated.updated_at = max(utcnow(), existing.updated_at + TIMESTAMP_RESOLUTION)

            self._notes[note_id] = updated
            return updated.copy()

    def delete(self, note_id: str) -> bool:
        with self._lock:
            return self._notes.pop(note_id, None) is not None

    def count(self) -> int:
        with self._lock:
            return len(self._notes)

    def clear(self) -> int:
        """Drop every note; returns how many were removed."""
        with self._lock:
            removed = len(self._notes)
            self._notes.clear()
            return removed


# ── Store Dependency ──────────────────────────────────────────────────────
def get_note_store(request: Request) -> NoteStore:
    """
    FastAPI dependency returning the store owned by the running application.

    Example usage in a route:
        @router.get("/notes")
        async def list_notes(store: NoteStore = Depends(get_note_store)):
            return store.find_all()
    """
    return request.app.state.note_store
