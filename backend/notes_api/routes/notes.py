"""
Notes API - Notes Route Handlers
==================================

What:  The controller for the notes resource, one handler per verb/path.
How:   Reads the raw JSON body, delegates to NoteService, wraps results in
       the `data` envelope. Typed service errors are not caught here: the
       handlers registered in main.py turn them into 400/404 responses.

Route Inventory:
    GET    /api/notes          → 200 {data: Note[]}
    GET    /api/notes/{id}     → 200 {data: Note}   | 404
    POST   /api/notes          → 201 {data: Note}   | 400
    PUT    /api/notes/{id}     → 200 {data: Note}   | 400 | 404
    DELETE /api/notes/{id}     → 204 (empty)        | 404
"""

import json
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request, Response

from notes_api.config import settings
from notes_api.exceptions import NotFoundError, ValidationError
from notes_api.schemas.note import (
    ErrorResponse,
    NoteEnvelope,
    NoteListEnvelope,
    NoteResponse,
    ValidationErrorResponse,
)
from notes_api.services.note_service import NoteService, get_note_service

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix=settings.api_prefix, tags=["Notes"])

NOT_FOUND_RESPONSE = {404: {"description": "Note not found", "model": ErrorResponse}}
VALIDATION_RESPONSE = {400: {"description": "Validation error", "model": ValidationErrorResponse}}


async def read_json_body(request: Request) -> Dict[str, Any]:
    """
    Dependency returning the request body as a dict.

    An empty body or JSON null reads as {}. Malformed JSON and non-object
    JSON values are reported through the normal validation envelope.
    """
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        payload = json.loads(raw)
    except ValueError:
        raise ValidationError(["request body must be valid JSON"])
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ValidationError(["request body must be a JSON object"])
    return payload


@router.get(
    "/notes",
    response_model=NoteListEnvelope,
    summary="List all notes",
)
async def list_notes(
    service: NoteService = Depends(get_note_service),
) -> NoteListEnvelope:
    """Every stored note, in creation order."""
    notes = service.list()
    logger.debug("Listing %d notes", len(notes))
    return NoteListEnvelope(data=[NoteResponse.model_validate(n) for n in notes])


@router.get(
    "/notes/{note_id}",
    response_model=NoteEnvelope,
    responses=NOT_FOUND_RESPONSE,
    summary="Get a single note by ID",
)
async def get_note(
    note_id: str,
    service: NoteService = Depends(get_note_service),
) -> NoteEnvelope:
    note = service.get_by_id(note_id)
    if note is None:
        # The service reports absence as None; the 404 is an HTTP concern
        raise NotFoundError(resource_id=note_id)
    return NoteEnvelope(data=NoteResponse.model_validate(note))


@router.post(
    "/notes",
    response_model=NoteEnvelope,
    status_code=201,
    responses=VALIDATION_RESPONSE,
    summary="Create a note",
    description="Body: `{title, content, tags?}`. `tags` defaults to an empty list.",
)
async def create_note(
    payload: Dict[str, Any] = Depends(read_json_body),
    service: NoteService = Depends(get_note_service),
) -> NoteEnvelope:
    note = service.create(payload)
    return NoteEnvelope(data=NoteResponse.model_validate(note))


@router.put(
    "/notes/{note_id}",
    response_model=NoteEnvelope,
    responses={**VALIDATION_RESPONSE, **NOT_FOUND_RESPONSE},
    summary="Update a note",
    description="Body: `{title?, content?, tags?}`. Only supplied fields change.",
)
async def update_note(
    note_id: str,
    payload: Dict[str, Any] = Depends(read_json_body),
    service: NoteService = Depends(get_note_service),
) -> NoteEnvelope:
    note = service.update(note_id, payload)
    return NoteEnvelope(data=NoteResponse.model_validate(note))


@router.delete(
    "/notes/{note_id}",
    status_code=204,
    response_class=Response,
    responses=NOT_FOUND_RESPONSE,
    summary="Delete a note",
)
async def delete_note(
    note_id: str,
    service: NoteService = Depends(get_note_service),
) -> Response:
    service.delete(note_id)
    return Response(status_code=204)
