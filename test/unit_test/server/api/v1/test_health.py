"""
Unit tests for health endpoints and generic routing errors.
"""

from datetime import datetime

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


class TestHealth:
    async def test_health(self, client: AsyncClient):
        response = await client.get("/api/v1/cms/health")

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "CMS API is healthy"
        datetime.fromisoformat(data["timestamp"])

    async def test_database_health(self, client: AsyncClient):
        response = await client.get("/api/v1/cms/health/db")

        assert response.json() == {"database": "ok"}

    async def test_process_time_header(self, client: AsyncClient):
        response = await client.get("/api/v1/cms/health")

        assert float(response.headers["x-process-time"]) >= 0

    async def test_unknown_route(self, client: AsyncClient):
        response = await client.get("/api/v1/cms/nope")

        assert response.status_code == 404
        assert response.json() == {"error": "Route GET /api/v1/cms/nope not found"}
