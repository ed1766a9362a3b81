"""
Notes API - Pydantic Response Schemas
=======================================

What:  Pydantic models defining the JSON the API returns.
How:   FastAPI serializes route results through these models and builds the
       OpenAPI documentation from them.
Who:   Used by the notes and health routers, and by the error handlers'
       documented responses.

Wire format:
    Note:      {"id", "title", "content", "tags", "createdAt", "updatedAt"}
    Envelope:  {"data": Note} / {"data": [Note, ...]}
    Errors:    {"error": "Note not found"}
               {"error": "Validation error", "details": ["...", "..."]}

    Timestamps are ISO 8601 UTC with millisecond precision and a "Z"
    suffix, e.g. "2024-01-15T12:00:00.123Z".

Request bodies are deliberately NOT modelled here: the router hands the
raw JSON object to NoteService.validate() so every rule violation is
reported in a single 400 response instead of FastAPI's 422.
"""

from datetime import datetime, timezone
from typing import List

from pydantic import BaseModel, Field, field_serializer
from pydantic.alias_generators import to_camel


def format_timestamp(value: datetime) -> str:
    """UTC ISO 8601 with milliseconds and a trailing Z."""
    return (
        value.astimezone(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """
    What:  Full representation of a note.
    Who:   Embedded in every successful notes response.
    """
    id: str = Field(description="Unique note identifier (UUID)")
    title: str = Field(description="Note title")
    content: str = Field(description="Note body text")
    tags: List[str] = Field(default_factory=list, description="Ordered list of tags")
    created_at: datetime = Field(description="When the note was created (UTC ISO 8601)")
    updated_at: datetime = Field(description="When the note was last changed (UTC ISO 8601)")

    # Accepts both created_at (from the Note dataclass) and createdAt (from
    # FastAPI re-validating a dumped model); always emits camelCase.
    model_config = {
        "from_attributes": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    @field_serializer("created_at", "updated_at")
    def serialize_timestamp(self, value: datetime) -> str:
        return format_timestamp(value)


class NoteEnvelope(BaseModel):
    """Single note wrapped in `data` (GET by id, POST, PUT)."""
    data: NoteResponse


class NoteListEnvelope(BaseModel):
    """All notes wrapped in `data` (GET collection)."""
    data: List[NoteResponse]


# ══════════════════════════════════════════════════════════════════════════
# Error Response Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Body of 404 and 500 responses.

    Example:
        {"error": "Note not found"}
    """
    error: str = Field(description="Human-readable error summary")


class ValidationErrorResponse(BaseModel):
    """
    What:  Body of 400 responses; one entry in `details` per violated rule.

    Example:
        {
            "error": "Validation error",
            "details": ["title must be a non-empty string"]
        }
    """
    error: str = Field(default="Validation error", description="Always 'Validation error'")
    details: List[str] = Field(description="Every rule the payload violated, in order")


class HealthResponse(BaseModel):
    """
    What:  Health check response.
    Who:   Returned by GET /health for container and load balancer probes.
    """
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    notes_count: int = Field(description="Number of notes currently held in memory")
    uptime_seconds: float = Field(description="Seconds since service started")
