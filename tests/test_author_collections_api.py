"""
HTTP tests for fetching and creating authors in bulk.
"""

from uuid import uuid4

import pytest

from tests.mocks.author_mocks import ARNOLD_ID, BERRY_ID, NANCY_ID


def new_author(first_name: str) -> dict:
    return {
        "firstName": first_name,
        "lastName": "Doe",
        "dateOfBirth": "1990-01-01",
        "mainCategory": "Maps",
    }


class TestGetAuthorCollection:
    @pytest.mark.asyncio
    async def test_get(self, seeded_client):
        response = await seeded_client.get(
            f"/api/authorcollections/({NANCY_ID},{BERRY_ID},{ARNOLD_ID})"
        )

        assert response.status_code == 200
        assert [a["id"] for a in response.json()] == [
            str(ARNOLD_ID),
            str(BERRY_ID),
            str(NANCY_ID),
        ]

    @pytest.mark.asyncio
    async def test_any_missing_id_is_not_found(self, seeded_client):
        response = await seeded_client.get(
            f"/api/authorcollections/({BERRY_ID},{uuid4()})"
        )

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_malformed_id(self, seeded_client):
        response = await seeded_client.get(
            f"/api/authorcollections/({BERRY_ID},not-a-uuid)"
        )

        assert response.status_code == 400


class TestCreateAuthorCollection:
    @pytest.mark.asyncio
    async def test_create_and_follow_location(self, client):
        response = await client.post(
            "/api/authorcollections", json=[new_author("Jane"), new_author("John")]
        )

        assert response.status_code == 201
        created = response.json()
        assert [a["name"] for a in created] == ["Jane Doe", "John Doe"]

        fetched = await client.get(response.headers["Location"])
        assert fetched.status_code == 200
        assert {a["id"] for a in fetched.json()} == {a["id"] for a in created}

    @pytest.mark.asyncio
    async def test_one_invalid_author_creates_none(self, client):
        invalid = new_author("x" * 51)

        response = await client.post(
            "/api/authorcollections", json=[new_author("Jane"), invalid]
        )

        assert response.status_code == 422
        listing = await client.get("/api/authors")
        assert listing.json()["value"] == []

    @pytest.mark.asyncio
    async def test_empty_collection(self, client):
        response = await client.post("/api/authorcollections", json=[])

        assert response.status_code == 400
