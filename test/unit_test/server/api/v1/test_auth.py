"""
Unit tests for admin login, logout and the current-user endpoint.
"""

import pytest
from httpx import AsyncClient

from blich_cms.core.security import decode_access_token
from blich_cms.server.core.config import settings

pytestmark = pytest.mark.asyncio

ADMIN_EMAIL = "admin@blich.studio"
ADMIN_PASSWORD = "correct-horse-battery"


class TestLogin:
    async def test_login_success(self, client: AsyncClient, admin_user):
        response = await client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})

        assert response.status_code == 200
        body = response.json()
        assert body["user"]["email"] == ADMIN_EMAIL
        assert "passwordHash" not in body["user"]
        claims = decode_access_token(body["token"], secret=settings.jwt.secret)
        assert claims["sub"] == str(admin_user.id)
        assert claims["username"] == ADMIN_EMAIL

    async def test_login_email_is_case_insensitive(self, client: AsyncClient, admin_user):
        response = await client.post(
            "/api/auth/login", json={"email": ADMIN_EMAIL.upper(), "password": ADMIN_PASSWORD}
        )

        assert response.status_code == 200

    async def test_login_wrong_password(self, client: AsyncClient, admin_user):
        response = await client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": "wrong-password"})

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid credentials"}

    async def test_login_unknown_user(self, client: AsyncClient):
        response = await client.post("/api/auth/login", json={"email": "nobody@blich.studio", "password": "x"})

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid credentials"}


class TestCurrentUser:
    async def test_me(self, client: AsyncClient, auth_headers: dict):
        response = await client.get("/api/auth/me", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["email"] == ADMIN_EMAIL

    async def test_me_without_token(self, client: AsyncClient):
        response = await client.get("/api/auth/me")

        assert response.status_code == 401

    async def test_inactive_user_is_rejected(self, client: AsyncClient, session, admin_user, auth_headers: dict):
        admin_user.is_active = False
        session.add(admin_user)
        await session.commit()

        response = await client.get("/api/auth/me", headers=auth_headers)

        assert response.status_code == 401

    async def test_logout(self, client: AsyncClient):
        response = await client.post("/api/auth/logout")

        assert response.json() == {"message": "Logged out"}
