"""
Notes API - Health Check & Middleware Tests
=============================================

What:  GET /health, X-Request-ID handling, and the access log line.
"""

import logging

import pytest

from notes_api import __version__


class TestHealth:

    @pytest.mark.asyncio
    async def test_health_reports_note_count(self, test_client):
        await test_client.post("/api/notes", json={"title": "A", "content": "B"})

        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["version"] == __version__
        assert body["notes_count"] == 1
        assert body["uptime_seconds"] >= 0


class TestRequestID:

    @pytest.mark.asyncio
    async def test_request_id_generated(self, test_client):
        response = await test_client.get("/api/notes")

        assert len(response.headers["X-Request-ID"]) == 8

    @pytest.mark.asyncio
    async def test_client_request_id_echoed(self, test_client):
        response = await test_client.get(
            "/api/notes/missing", headers={"X-Request-ID": "trace-123"}
        )

        assert response.status_code == 404
        assert response.headers["X-Request-ID"] == "trace-123"


class TestRequestLogging:

    @pytest.mark.asyncio
    async def test_client_errors_logged_as_warning(self, test_client, caplog):
        with caplog.at_level(logging.INFO, logger="notes_api.access"):
            await test_client.get("/api/notes/missing")

        records = [r for r in caplog.records if r.name == "notes_api.access"]
        assert len(records) == 1
        assert records[0].levelno == logging.WARNING
        assert records[0].status == 404
        assert records[0].path == "/api/notes/missing"

    @pytest.mark.asyncio
    async def test_health_not_logged(self, test_client, caplog):
        with caplog.at_level(logging.INFO, logger="notes_api.access"):
            await test_client.get("/health")

        assert not [r for r in caplog.records if r.name == "notes_api.access"]
