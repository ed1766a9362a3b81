"""
Notes API - Test Configuration (conftest.py)
==============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, created fresh for each test):
    ├── note_store: Empty NoteStore
    ├── note_service: NoteService over note_store
    ├── test_app: create_app() instance with its own store
    ├── test_client: HTTPX AsyncClient bound to test_app
    └── sample_payload: Valid create payload
"""

import os

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["API_PREFIX"] = "/api"

from notes_api.main import create_app  # noqa: E402
from notes_api.services.note_service import NoteService  # noqa: E402
from notes_api.store import NoteStore  # noqa: E402


@pytest.fixture
def note_store():
    """A fresh, empty store; nothing leaks between tests."""
    return NoteStore()


@pytest.fixture
def note_service(note_store):
    return NoteService(note_store)


@pytest.fixture
def sample_payload():
    """
    Provides a valid create payload.

    Returns a new dict per test, so tests may mutate it freely.
    """
    return {
        "title": "Shopping list",
        "content": "Milk, eggs, bread",
        "tags": ["home", "errands"],
    }


@pytest.fixture
def test_app():
    return create_app()


@pytest_asyncio.fixture
async def test_client(test_app):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
