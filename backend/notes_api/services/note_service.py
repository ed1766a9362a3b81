"""
Notes API - Note Service (Validation & Business Rules)
========================================================

What:  Sits between the notes router and the store; validates payloads,
       checks existence, and raises typed errors.
How:   Holds a NoteStore reference (injected) and delegates storage to it.
Who:   Built per request by `get_note_service`; used directly in unit tests.
When:  For every note operation.

Validation Rules (evaluated independently; every failure is reported):
    ┌──────────┬───────────────────────────────┬──────────────────────────────────────┐
    │ Field    │ Checked when                  │ Rule                                 │
    ├──────────┼───────────────────────────────┼──────────────────────────────────────┤
    │ title    │ create, or key in payload     │ str, non-empty after strip()         │
    │ content  │ create, or key in payload     │ str, non-empty after strip()         │
    │ tags     │ key in payload                │ list whose elements are all str      │
    └──────────┴───────────────────────────────┴──────────────────────────────────────┘

Error Handling Strategy:
    ValidationError and NotFoundError are the only failures raised here.
    Anything else coming out of the store propagates untouched so the
    catch-all handler reports it as an internal error.
"""

import logging
from typing import Any, List, Mapping, NamedTuple, Optional

from fastapi import Depends

from notes_api.exceptions import NotFoundError, ValidationError
from notes_api.models.note import Note
from notes_api.store import NoteStore, get_note_store

logger = logging.getLogger(__name__)

TITLE_ERROR = "title must be a non-empty string"
CONTENT_ERROR = "content must be a non-empty string"
TAGS_ERROR = "tags must be an array of strings"


class ValidationResult(NamedTuple):
    valid: bool
    errors: List[str]


def _is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


class NoteService:
    """
    Business logic layer for note operations.

    Responsibilities:
        - validate(): Input rules shared by create and update
        - list() / get_by_id(): Reads, absence reported as None
        - create() / update() / delete(): Writes guarded by validation
          and existence checks
    """

    def __init__(self, store: NoteStore):
        self.store = store

    def validate(self, payload: Mapping[str, Any], partial: bool = False) -> ValidationResult:
        """
        Check a create (partial=False) or update (partial=True) payload.

        A key that is present counts even if its value is None, so an
        explicit JSON null for title on update is rejected.

        Returns:
            ValidationResult with valid flag and the ordered list of messages
        """
        errors: List[str] = []

        if not partial or "title" in payload:
            if not _is_non_empty_string(payload.get("title")):
                errors.append(TITLE_ERROR)

        if not partial or "content" in payload:
            if not _is_non_empty_string(payload.get("content")):
                errors.append(CONTENT_ERROR)

        if "tags" in payload:
            tags = payload["tags"]
            if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
                errors.append(TAGS_ERROR)

        return ValidationResult(valid=not errors, errors=errors)

    def list(self) -> List[Note]:
        """Returns all notes."""
        return self.store.find_all()

    def get_by_id(self, note_id: str) -> Optional[Note]:
        """Returns a note by its id, or None if there is no such note."""
        return self.store.find_by_id(note_id)

    def create(self, payload: Mapping[str, Any]) -> Note:
        """
        Validate a full payload and store a new note.

        Raises:
            ValidationError: title/content missing or blank, or bad tags
        """
        result = self.validate(payload, partial=False)
        if not result.valid:
            logger.debug("Rejected create: %s", result.errors)
            raise ValidationError(result.errors)

        note = self.store.create(payload)
        logger.info("Created note %s (%d tags)", note.id, len(note.tags))
        return note

    def update(self, note_id: str, payload: Mapping[str, Any]) -> Note:
        """
        Validate a partial payload, then apply it to an existing note.

        Validation runs before the existence check: an invalid payload
        for an unknown id is reported as a validation error.

        Raises:
            ValidationError: a supplied field breaks its rule
            NotFoundError: no note with this id
        """
        result = self.validate(payload, partial=True)
        if not result.valid:
            logger.debug("Rejected update of %s: %s", note_id, result.errors)
            raise ValidationError(result.errors)

        if self.store.find_by_id(note_id) is None:
            raise NotFoundError(resource_id=note_id)

        note = self.store.update(note_id, payload)
        if note is None:
            # Deleted between the existence check and the write
            raise NotFoundError(resource_id=note_id)
        changed = [name for name in ("title", "content", "tags") if name in payload]
        logger.info("Updated note %s (fields: %s)", note_id, ", ".join(changed) or "none")
        return note

    def delete(self, note_id: str) -> bool:
        """
        Remove a note.

        Raises:
            NotFoundError: no note with this id
        """
        if self.store.find_by_id(note_id) is None:
            raise NotFoundError(resource_id=note_id)

        removed = self.store.delete(note_id)
        logger.info("Deleted note %s", note_id)
        return removed


# ── Service Dependency ────────────────────────────────────────────────────
def get_note_service(store: NoteStore = Depends(get_note_store)) -> NoteService:
    """FastAPI dependency: a NoteService bound to the application's store."""
    return NoteService(store)
