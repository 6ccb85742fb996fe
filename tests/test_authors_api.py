"""
HTTP tests for the author endpoints.

Requests go through the full application (routers, middlewares, error
handling) against an in-memory database holding the sample authors.
"""

import json
from uuid import uuid4

import pytest

from course_library.constants import HATEOAS_MEDIA_TYPE, PAGINATION_HEADER
from tests.mocks.author_mocks import BERRY_ID, SAMPLE_AUTHOR_COUNT


def pagination(response) -> dict:
    return json.loads(response.headers[PAGINATION_HEADER])


class TestListAuthors:
    """GET /api/authors"""

    @pytest.mark.asyncio
    async def test_default_listing(self, seeded_client):
        response = await seeded_client.get("/api/authors")

        assert response.status_code == 200
        body = response.json()
        assert len(body["value"]) == SAMPLE_AUTHOR_COUNT
        assert body["value"][0]["name"] == "Arnold The Unseen Stafford"
        assert set(body["value"][0]) == {"id", "name", "age", "mainCategory", "links"}
        assert [link["rel"] for link in body["links"]] == ["self"]
        assert pagination(response) == {
            "totalCount": SAMPLE_AUTHOR_COUNT,
            "pageSize": 10,
            "currentPage": 1,
            "totalPages": 1,
            "previousPageLink": None,
            "nextPageLink": None,
        }

    @pytest.mark.asyncio
    async def test_middle_page_links(self, seeded_client):
        response = await seeded_client.get(
            "/api/authors", params={"pageNumber": 2, "pageSize": 3}
        )

        body = response.json()
        links = {link["rel"]: link for link in body["links"]}
        assert list(links) == ["self", "nextPage", "previousPage"]
        assert "pageNumber=3" in links["nextPage"]["href"]
        assert "pageNumber=1" in links["previousPage"]["href"]
        assert links["self"]["method"] == "GET"

        metadata = pagination(response)
        assert metadata["totalPages"] == 3
        assert metadata["nextPageLink"] == links["nextPage"]["href"]
        assert metadata["previousPageLink"] == links["previousPage"]["href"]

    @pytest.mark.asyncio
    async def test_page_past_the_end(self, seeded_client):
        response = await seeded_client.get(
            "/api/authors", params={"pageNumber": 4, "pageSize": 3}
        )

        assert response.json()["value"] == []
        assert [link["rel"] for link in response.json()["links"]] == ["self"]

    @pytest.mark.asyncio
    async def test_huge_page_number(self, seeded_client):
        response = await seeded_client.get(
            "/api/authors", params={"pageNumber": str(10**19)}
        )

        assert response.status_code == 200
        assert response.json()["value"] == []
        metadata = pagination(response)
        assert metadata["currentPage"] == 10**19
        assert metadata["previousPageLink"] is None
        assert metadata["nextPageLink"] is None

    @pytest.mark.asyncio
    async def test_page_size_is_clamped(self, seeded_client):
        response = await seeded_client.get("/api/authors", params={"pageSize": 1000})

        assert pagination(response)["pageSize"] == 20

    @pytest.mark.asyncio
    async def test_filter_search_and_sort(self, seeded_client):
        response = await seeded_client.get(
            "/api/authors",
            params={"category": "Singing", "orderBy": "age desc", "fields": "name"},
        )

        assert [a["name"] for a in response.json()["value"]] == [
            "Arnold The Unseen Stafford",
            "Eli Ivory Bones Sweet",
        ]

    @pytest.mark.asyncio
    async def test_shaped_authors_keep_links(self, seeded_client):
        response = await seeded_client.get(
            "/api/authors", params={"fields": "name,mainCategory"}
        )

        author = response.json()["value"][0]
        assert set(author) == {"name", "mainCategory", "links"}
        self_link = author["links"][0]
        assert self_link["rel"] == "self"
        assert "fields=name%2CmainCategory" in self_link["href"]

    @pytest.mark.asyncio
    async def test_unknown_sort_field(self, seeded_client):
        response = await seeded_client.get("/api/authors", params={"orderBy": "bogus"})

        assert response.status_code == 400
        assert response.json()["detail"] == "Key mapping for bogus is missing"

    @pytest.mark.asyncio
    async def test_unknown_shape_field(self, seeded_client):
        response = await seeded_client.get(
            "/api/authors", params={"fields": "notAField"}
        )

        assert response.status_code == 400
        assert "notAField" in response.json()["detail"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "params",
        [{"orderBy": "name,"}, {"orderBy": "id,,"}, {"fields": "id,"}],
    )
    async def test_empty_list_element(self, seeded_client, params):
        response = await seeded_client.get("/api/authors", params=params)

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_invalid_page_number(self, seeded_client):
        response = await seeded_client.get("/api/authors", params={"pageNumber": 0})

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_head(self, seeded_client):
        response = await seeded_client.head("/api/authors")

        assert response.status_code == 200
        assert pagination(response)["totalCount"] == SAMPLE_AUTHOR_COUNT

    @pytest.mark.asyncio
    async def test_options(self, client):
        response = await client.options("/api/authors")

        assert response.status_code == 200
        assert response.headers["Allow"] == "GET, HEAD, POST, OPTIONS"

    @pytest.mark.asyncio
    async def test_correlation_id_header(self, client):
        response = await client.get("/api/authors")

        assert len(response.headers["X-Correlation-ID"]) == 8


class TestGetAuthor:
    """GET /api/authors/{authorId}"""

    @pytest.mark.asyncio
    async def test_plain_json(self, seeded_client):
        response = await seeded_client.get(f"/api/authors/{BERRY_ID}")

        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "Berry Griffin Beak Eldritch"
        assert body["mainCategory"] == "Ships"
        assert "links" not in body

    @pytest.mark.asyncio
    async def test_hateoas_media_type_adds_links(self, seeded_client):
        response = await seeded_client.get(
            f"/api/authors/{BERRY_ID}",
            params={"fields": "id"},
            headers={"Accept": HATEOAS_MEDIA_TYPE},
        )

        body = response.json()
        assert body["id"] == str(BERRY_ID)
        assert [(link["rel"], link["method"]) for link in body["links"]] == [
            ("self", "GET"),
            ("create_course_for_author", "POST"),
            ("courses", "GET"),
        ]
        assert body["links"][2]["href"].endswith(f"/api/authors/{BERRY_ID}/courses")

    @pytest.mark.asyncio
    async def test_malformed_accept_header(self, seeded_client):
        response = await seeded_client.get(
            f"/api/authors/{BERRY_ID}", headers={"Accept": "not a media type"}
        )

        assert response.status_code == 400
        assert "not a valid media type" in response.json()["detail"]

    @pytest.mark.asyncio
    async def test_accept_list_with_hateoas(self, seeded_client):
        response = await seeded_client.get(
            f"/api/authors/{BERRY_ID}",
            headers={"Accept": f"application/json;q=0.5, {HATEOAS_MEDIA_TYPE}"},
        )

        assert response.status_code == 200
        assert "links" in response.json()

    @pytest.mark.asyncio
    async def test_missing_author(self, seeded_client):
        response = await seeded_client.get(f"/api/authors/{uuid4()}")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_malformed_id(self, client):
        response = await client.get("/api/authors/not-a-uuid")

        assert response.status_code == 422


class TestCreateAuthor:
    """POST /api/authors"""

    @pytest.mark.asyncio
    async def test_create_with_courses(self, client):
        response = await client.post(
            "/api/authors",
            json={
                "firstName": "Jane",
                "lastName": "Doe",
                "dateOfBirth": "1990-06-01",
                "mainCategory": "Maps",
                "courses": [
                    {"title": "Charts", "description": "Reading charts"},
                    {"title": "Compasses"},
                ],
            },
        )

        assert response.status_code == 201
        body = response.json()
        assert body["name"] == "Jane Doe"
        assert response.headers["Location"].endswith(f"/api/authors/{body['id']}")
        assert [link["rel"] for link in body["links"]] == [
            "self",
            "create_course_for_author",
            "courses",
        ]

        courses = await client.get(f"/api/authors/{body['id']}/courses")
        assert [c["title"] for c in courses.json()] == ["Charts", "Compasses"]

    @pytest.mark.asyncio
    async def test_invalid_nested_course(self, client):
        response = await client.post(
            "/api/authors",
            json={
                "firstName": "Jane",
                "lastName": "Doe",
                "dateOfBirth": "1990-06-01",
                "mainCategory": "Maps",
                "courses": [{"title": "Same", "description": "Same"}],
            },
        )

        assert response.status_code == 422
        listing = await client.get("/api/authors")
        assert listing.json()["value"] == []

    @pytest.mark.asyncio
    async def test_missing_required_field(self, client):
        response = await client.post("/api/authors", json={"firstName": "Jane"})

        assert response.status_code == 422


class TestDeleteAuthor:
    """DELETE /api/authors/{authorId}"""

    @pytest.mark.asyncio
    async def test_delete_cascades(self, seeded_client):
        response = await seeded_client.delete(f"/api/authors/{BERRY_ID}")

        assert response.status_code == 204
        assert (await seeded_client.get(f"/api/authors/{BERRY_ID}")).status_code == 404
        courses = await seeded_client.get(f"/api/authors/{BERRY_ID}/courses")
        assert courses.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_missing(self, client):
        response = await client.delete(f"/api/authors/{uuid4()}")

        assert response.status_code == 404
