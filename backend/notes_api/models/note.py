"""
Notes API - Note Entity
=========================

What:  The single domain record held by the store.
How:   A plain dataclass; the store hands out copies made with `copy()`,
       never the instances it keeps in its table.
Who:   Created and mutated only by NoteStore; read by the service and
       serialized by the response schemas.

Field rules:
    - id: UUID4 text, assigned by the store, never changes
    - title / content: non-empty after trimming (enforced by NoteService)
    - tags: list of strings, [] when not supplied on create
    - created_at: UTC, set once
    - updated_at: UTC, equal to created_at on creation, strictly increasing
      on every update
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import List


@dataclass
class Note:
    """A titled piece of text with tags and timestamps."""

    id: str
    title: str
    content: str
    created_at: datetime
    updated_at: datetime
    tags: List[str] = field(default_factory=list)

    def copy(self) -> "Note":
        """Detached copy; the tag list is duplicated, not shared."""
        return replace(self, tags=list(self.tags))
