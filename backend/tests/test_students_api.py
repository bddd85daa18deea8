"""
School Records API: /students Endpoint Tests
==============================================

Students are the only entity with a nested value (address), so these tests
also cover the JSON object ↔ three-column mapping.
"""

import pytest


class TestStudentEndpoints:

    @pytest.mark.asyncio
    async def test_create_with_only_name_defaults_the_rest(self, test_client):
        response = await test_client.post("/students", json={"name": "New Student"})

        assert response.status_code == 201
        body = response.json()
        assert body["id"] >= 1
        assert body["name"] == "New Student"
        assert body["marks"] == 0
        assert body["student_id"] == 0
        assert body["address"] == {"street": "", "city": "", "state": ""}

    @pytest.mark.asyncio
    async def test_create_then_get_preserves_address(self, test_client, sample_student_payload):
        created = (await test_client.post("/students", json=sample_student_payload)).json()

        response = await test_client.get(f"/students/{created['id']}")

        assert response.status_code == 200
        body = response.json()
        for key, value in sample_student_payload.items():
            assert body[key] == value

    @pytest.mark.asyncio
    async def test_student_id_is_not_the_primary_key(self, test_client, sample_student_payload):
        created = (await test_client.post("/students", json=sample_student_payload)).json()

        assert created["student_id"] == 42
        assert created["id"] == 1
        assert (await test_client.get("/students/42")).status_code == 404

    @pytest.mark.asyncio
    async def test_update_replaces_address(self, test_client, sample_student_payload):
        await test_client.post("/students", json=sample_student_payload)
        changed = dict(sample_student_payload, marks=91, address={"street": "1 Hill St", "city": "Nashik", "state": "MH"})

        response = await test_client.put("/students/1", json=changed)

        assert response.status_code == 200
        body = response.json()
        assert body["marks"] == 91
        assert body["address"]["city"] == "Nashik"
        assert (await test_client.get("/students/1")).json()["address"]["street"] == "1 Hill St"

    @pytest.mark.asyncio
    async def test_update_unknown_id_creates_student(self, test_client):
        response = await test_client.put("/students/5", json={"name": "Newcomer", "address": {"city": "Pune"}})

        assert response.status_code == 200
        assert response.json()["id"] == 5
        fetched = (await test_client.get("/students/5")).json()
        assert fetched["name"] == "Newcomer"
        assert fetched["address"] == {"street": "", "city": "Pune", "state": ""}

    @pytest.mark.asyncio
    async def test_address_must_be_an_object(self, test_client):
        response = await test_client.post("/students", json={"name": "X", "address": "12 Lake Road"})

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_list_and_delete(self, test_client):
        await test_client.post("/students", json={"name": "One"})
        await test_client.post("/students", json={"name": "Two"})

        deleted = await test_client.delete("/students/1")
        listing = await test_client.get("/students")

        assert deleted.json() == {"message": "Student deleted successfully"}
        assert [s["name"] for s in listing.json()] == ["Two"]
