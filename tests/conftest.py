"""
Notes API — Test Configuration (conftest.py)
=============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, created fresh for each test):
    ├── note_store: Empty NoteStore
    ├── service: NoteService instance
    ├── sample_payload: The "Meeting Notes" payload used across tests
    ├── app: Fresh FastAPI app (and therefore a fresh store)
    └── test_client: HTTPX AsyncClient bound to that app
"""

import os

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["CORS_ORIGINS"] = "*"

from notes_api.main import create_app  # noqa: E402
from notes_api.schemas.note import NotePayload  # noqa: E402
from notes_api.services.note_service import NoteService  # noqa: E402
from notes_api.store import NoteStore  # noqa: E402


@pytest.fixture
def note_store():
    """An empty in-memory store, isolated per test."""
    return NoteStore()


@pytest.fixture
def service():
    return NoteService()


@pytest.fixture
def sample_note_data():
    """Request body for the note used by the end-to-end scenario."""
    return {
        "title": "Meeting Notes",
        "tags": ["work"],
        "body": "Discussed project roadmap.",
    }


@pytest.fixture
def sample_payload(sample_note_data):
    return NotePayload(**sample_note_data)


@pytest.fixture
def app():
    """A freshly built application; each one owns its own empty store."""
    return create_app()


@pytest_asyncio.fixture
async def test_client(app):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/notes")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
