"""
Unit tests for the studio profile endpoints.
"""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio

STUDIO = {
    "name": "Blich Studio",
    "description": "Small indie studio",
    "foundedYear": 2020,
    "teamMembers": [{"name": "Ada", "role": "Developer"}],
    "socialLinks": {"x": "https://x.com/blich"},
}


class TestStudio:
    async def test_missing_profile(self, client: AsyncClient):
        response = await client.get("/api/cms/studio")

        assert response.status_code == 404
        assert response.json() == {"error": "Studio not found"}

    async def test_put_requires_token(self, client: AsyncClient):
        response = await client.put("/api/cms/admin/studio", json=STUDIO)

        assert response.status_code == 401

    async def test_create_then_replace(self, client: AsyncClient, auth_headers: dict):
        created = await client.put("/api/cms/admin/studio", json={**STUDIO, "logo": "/logo.png"}, headers=auth_headers)
        assert created.status_code == 200

        replaced = await client.put(
            "/api/cms/admin/studio", json={**STUDIO, "name": "Blich Games"}, headers=auth_headers
        )

        data = replaced.json()
        assert data["id"] == created.json()["id"]
        assert data["name"] == "Blich Games"
        assert data["logo"] is None

        public = await client.get("/api/cms/studio")
        assert public.json()["teamMembers"][0]["name"] == "Ada"
        assert public.json()["socialLinks"]["x"] == "https://x.com/blich"

    async def test_founded_year_range(self, client: AsyncClient, auth_headers: dict):
        response = await client.put(
            "/api/cms/admin/studio", json={**STUDIO, "foundedYear": 1800}, headers=auth_headers
        )

        assert response.status_code == 400
        assert response.json()["details"]["validationErrors"][0]["field"] == "foundedYear"
