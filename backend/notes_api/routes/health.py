"""
Notes API - Health Check Route
================================

What:  Liveness endpoint for container health checks and load balancers.
How:   Reports version, uptime, and how many notes the in-memory store holds.
       There are no external dependencies to probe.
"""

import logging
import time

from fastapi import APIRouter, Depends

from notes_api import __version__
from notes_api.schemas.note import HealthResponse
from notes_api.store import NoteStore, get_note_store

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Set once when the module loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(store: NoteStore = Depends(get_note_store)) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        notes_count=store.count(),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
