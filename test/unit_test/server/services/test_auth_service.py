"""
Unit tests for AuthService.
"""

import pytest

from blich_cms.core.database.repositories import AdminUserRepository
from blich_cms.core.errors import AuthenticationError, ConflictError, ValidationError
from blich_cms.core.security import create_access_token
from blich_cms.server.core.config import JWTConfig
from blich_cms.server.services.auth import AuthService

pytestmark = pytest.mark.asyncio

JWT = JWTConfig(secret="unit-test-secret", algorithm="HS256", expires_minutes=5)


@pytest.fixture
def auth_service(session):
    return AuthService(AdminUserRepository(session), JWT)


class TestCreateAdmin:
    async def test_normalizes_email_and_hashes_password(self, auth_service):
        user = await auth_service.create_admin("  Admin@Blich.Studio ", "long-enough-pw", "Admin")

        assert user.email == "admin@blich.studio"
        assert user.password_hash != "long-enough-pw"

    async def test_rejects_short_password(self, auth_service):
        with pytest.raises(ValidationError, match="at least 8 characters"):
            await auth_service.create_admin("a@b.c", "short")

    async def test_rejects_bad_email(self, auth_service):
        with pytest.raises(ValidationError, match="Invalid email address"):
            await auth_service.create_admin("not-an-email", "long-enough-pw")

    async def test_duplicate_email(self, auth_service):
        await auth_service.create_admin("a@b.c", "long-enough-pw")

        with pytest.raises(ConflictError):
            await auth_service.create_admin("A@B.C", "long-enough-pw")


class TestLoginAndResolve:
    async def test_round_trip(self, auth_service):
        user = await auth_service.create_admin("a@b.c", "long-enough-pw")

        response = await auth_service.login("a@b.c", "long-enough-pw")
        resolved = await auth_service.resolve_user(response.token)

        assert resolved.id == user.id
        assert response.user.email == "a@b.c"

    async def test_wrong_password(self, auth_service):
        await auth_service.create_admin("a@b.c", "long-enough-pw")

        with pytest.raises(AuthenticationError, match="Invalid credentials"):
            await auth_service.login("a@b.c", "other-password")

    async def test_token_for_unknown_user(self, auth_service):
        token = create_access_token("9999", secret=JWT.secret)

        with pytest.raises(AuthenticationError, match="Invalid token"):
            await auth_service.resolve_user(token)

    async def test_non_numeric_subject(self, auth_service):
        token = create_access_token("abc", secret=JWT.secret)

        with pytest.raises(AuthenticationError, match="Invalid token"):
            await auth_service.resolve_user(token)

    async def test_missing_token(self, auth_service):
        with pytest.raises(AuthenticationError, match="Missing bearer token"):
            await auth_service.resolve_user(None)
