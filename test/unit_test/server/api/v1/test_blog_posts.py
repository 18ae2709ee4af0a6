"""
Unit tests for the public and admin blog endpoints.
"""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio

PUBLIC = "/api/cms/blog"
ADMIN = "/api/cms/admin/blog"


async def create_post(client: AsyncClient, headers: dict, **overrides) -> dict:
    payload = {"title": "Devlog #1", "slug": "devlog-1", "content": "First devlog"}
    payload.update(overrides)
    response = await client.post(ADMIN, json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


class TestAdminBlog:
    async def test_requires_token(self, client: AsyncClient):
        response = await client.get(ADMIN)

        assert response.status_code == 401

    async def test_draft_has_no_publish_time(self, client: AsyncClient, auth_headers: dict):
        data = await create_post(client, auth_headers)

        assert data["status"] == "draft"
        assert data["publishedAt"] is None

    async def test_publishing_stamps_time(self, client: AsyncClient, auth_headers: dict):
        data = await create_post(client, auth_headers, status="published")

        assert data["publishedAt"] is not None

    async def test_keeps_explicit_publish_time(self, client: AsyncClient, auth_headers: dict):
        data = await create_post(client, auth_headers, status="published", publishedAt="2024-03-01T10:00:00Z")

        assert data["publishedAt"].startswith("2024-03-01T10:00:00")

    async def test_publish_via_update(self, client: AsyncClient, auth_headers: dict):
        created = await create_post(client, auth_headers)

        response = await client.put(f"{ADMIN}/{created['id']}", json={"status": "published"}, headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["publishedAt"] is not None

    async def test_update_rejects_empty_content(self, client: AsyncClient, auth_headers: dict):
        created = await create_post(client, auth_headers)

        response = await client.put(f"{ADMIN}/{created['id']}", json={"content": ""}, headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["details"]["validationErrors"][0]["field"] == "content"

    async def test_delete_post(self, client: AsyncClient, auth_headers: dict):
        created = await create_post(client, auth_headers)

        response = await client.delete(f"{ADMIN}/{created['id']}", headers=auth_headers)

        assert response.json() == {"message": "Blog post deleted successfully."}
        again = await client.delete(f"{ADMIN}/{created['id']}", headers=auth_headers)
        assert again.status_code == 404
        assert again.json() == {"error": "Blog post not found"}


class TestPublicBlog:
    async def test_empty_page(self, client: AsyncClient):
        response = await client.get(PUBLIC)

        assert response.status_code == 200
        assert response.json() == {
            "meta": {"total": 0, "perPage": 10, "currentPage": 1, "lastPage": 1, "firstPage": 1},
            "data": [],
        }

    async def test_huge_page_number_is_clamped(self, client: AsyncClient):
        response = await client.get(PUBLIC, params={"page": 10**20, "limit": 10**20})

        assert response.status_code == 200
        assert response.json() == {
            "meta": {"total": 0, "perPage": 100, "currentPage": 100_000, "lastPage": 1, "firstPage": 1},
            "data": [],
        }

    async def test_lists_published_newest_first(self, client: AsyncClient, auth_headers: dict):
        await create_post(client, auth_headers, slug="old", status="published", publishedAt="2024-01-01T00:00:00Z")
        await create_post(client, auth_headers, slug="new", status="published", publishedAt="2024-06-01T00:00:00Z")
        await create_post(client, auth_headers, slug="draft")

        response = await client.get(PUBLIC, params={"limit": 1, "page": 2})

        body = response.json()
        assert body["meta"] == {"total": 2, "perPage": 1, "currentPage": 2, "lastPage": 2, "firstPage": 1}
        assert [p["slug"] for p in body["data"]] == ["old"]

    async def test_get_published_by_slug(self, client: AsyncClient, auth_headers: dict):
        await create_post(client, auth_headers, status="published")

        response = await client.get(f"{PUBLIC}/devlog-1")

        assert response.status_code == 200
        assert response.json()["title"] == "Devlog #1"

    async def test_draft_is_hidden(self, client: AsyncClient, auth_headers: dict):
        await create_post(client, auth_headers)

        response = await client.get(f"{PUBLIC}/devlog-1")

        assert response.status_code == 404
