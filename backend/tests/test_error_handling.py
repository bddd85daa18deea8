"""
School Records API: Error Handling Tests
==========================================

What we test:
    ✅ Malformed ids on every id-taking endpoint → 400, service never called
    ✅ DatabaseError from any layer → 500 with the store's message
    ✅ A real store failure (missing table) surfaces the driver text
    ✅ Error bodies carry the request id
"""

from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from school_api.database import Database
from school_api.exceptions import DatabaseError
from school_api.main import create_app

ENTITIES = ("schools", "classes", "students")
SERVICE_ATTRS = {
    "schools": "school_service",
    "classes": "class_service",
    "students": "student_service",
}


@pytest.fixture
def mocked_services(app):
    """Replace every service on app.state with an AsyncMock."""
    services = {}
    for entity, attr in SERVICE_ATTRS.items():
        service = AsyncMock()
        setattr(app.state, attr, service)
        services[entity] = service
    return services


class TestMalformedIdentifiers:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("entity", ENTITIES)
    @pytest.mark.parametrize(
        "bad_id",
        ["abc", "-3", "1e3", "+1", "1_0", "%201", "1.0", "99999999999999999999"],
    )
    async def test_bad_ids_never_reach_the_store(self, test_client, mocked_services, entity, bad_id):
        service = mocked_services[entity]

        get_response = await test_client.get(f"/{entity}/{bad_id}")
        put_response = await test_client.put(f"/{entity}/{bad_id}", json={})
        delete_response = await test_client.delete(f"/{entity}/{bad_id}")

        assert get_response.status_code == 400
        assert put_response.status_code == 400
        assert delete_response.status_code == 400
        service.get_by_id.assert_not_called()
        service.update.assert_not_called()
        service.delete.assert_not_called()


class TestStoreFailures:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("entity", ENTITIES)
    async def test_list_failure_returns_500_with_store_text(self, test_client, mocked_services, entity):
        mocked_services[entity].list_all.side_effect = DatabaseError(message="connection refused")

        response = await test_client.get(f"/{entity}")

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "database_error"
        assert body["message"] == "connection refused"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("entity", ENTITIES)
    async def test_get_failure_returns_500_with_store_text(self, test_client, mocked_services, entity):
        mocked_services[entity].get_by_id.side_effect = DatabaseError(message="server closed the connection")

        response = await test_client.get(f"/{entity}/1")

        assert response.status_code == 500
        assert response.json()["message"] == "server closed the connection"
        mocked_services[entity].get_by_id.assert_awaited_once_with(1)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("entity", ENTITIES)
    async def test_update_failure_returns_500_with_store_text(self, test_client, mocked_services, entity):
        mocked_services[entity].update.side_effect = DatabaseError(message="UNIQUE constraint failed")

        response = await test_client.put(f"/{entity}/2", json={})

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "database_error"
        assert body["message"] == "UNIQUE constraint failed"
        (sent,), _ = mocked_services[entity].update.await_args
        assert sent.id == 2

    @pytest.mark.asyncio
    async def test_create_failure_returns_500(self, test_client, mocked_services):
        mocked_services["students"].create.side_effect = DatabaseError(message="disk full")

        response = await test_client.post("/students", json={"name": "X"})

        assert response.status_code == 500
        assert response.json()["message"] == "disk full"

    @pytest.mark.asyncio
    async def test_delete_failure_returns_500(self, test_client, mocked_services):
        mocked_services["classes"].delete.side_effect = DatabaseError(message="lock timeout")

        response = await test_client.delete("/classes/1")

        assert response.status_code == 500

    @pytest.mark.asyncio
    async def test_error_body_echoes_request_id(self, test_client):
        response = await test_client.get("/schools/404", headers={"X-Request-ID": "trace-123"})

        assert response.status_code == 404
        assert response.json()["request_id"] == "trace-123"
        assert response.headers["X-Request-ID"] == "trace-123"


@pytest_asyncio.fixture
async def client_without_tables(test_settings):
    """An app whose database has no tables, so every query fails."""
    database = Database(config=test_settings)
    app = create_app(config=test_settings, database=database)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    await database.dispose()


@pytest.mark.asyncio
async def test_real_store_error_is_surfaced(client_without_tables):
    response = await client_without_tables.get("/schools")

    assert response.status_code == 500
    assert "no such table" in response.json()["message"]
