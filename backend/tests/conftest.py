"""
School Records API: Test Configuration (conftest.py)
======================================================

Fixture Hierarchy (all function-scoped):
    ├── test_settings:   Settings pointing at a fresh SQLite file in tmp_path
    ├── database:        Database handle with tables created
    ├── app:             FastAPI app wired to that database
    ├── test_client:     HTTPX AsyncClient talking to the app over ASGI
    └── mock_repository: AsyncMock standing in for a CRUDRepository
"""

import os
from unittest.mock import AsyncMock

# Override settings BEFORE any school_api import: main.py builds a default
# app at import time and must not reach for PostgreSQL.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test_default.db"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from school_api.config import Settings
from school_api.database import Database
from school_api.main import create_app


@pytest.fixture
def test_settings(tmp_path):
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'school.db'}",
        log_level="WARNING",
    )


@pytest_asyncio.fixture
async def database(test_settings):
    """A Database with all three tables created; disposed after the test."""
    db = Database(config=test_settings)
    await db.create_tables()
    yield db
    await db.dispose()


@pytest.fixture
def app(test_settings, database):
    return create_app(config=test_settings, database=database)


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient routed straight into the ASGI app.

    ASGITransport does not run the lifespan, which is why the `database`
    fixture creates the tables itself.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def mock_repository():
    repository = AsyncMock()
    repository.list_all = AsyncMock(return_value=[])
    repository.get_by_id = AsyncMock()
    repository.create = AsyncMock()
    repository.update = AsyncMock()
    repository.delete = AsyncMock(return_value=None)
    return repository


@pytest.fixture
def sample_student_payload():
    return {
        "student_id": 42,
        "name": "Asha Rao",
        "marks": 87,
        "address": {"street": "12 Lake Road", "city": "Pune", "state": "MH"},
    }
