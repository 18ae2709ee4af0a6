from typing import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from blich_cms.core.database import get_session
from blich_cms.core.database.entities.admin_users import AdminUser
from blich_cms.core.security import create_access_token, hash_password
from blich_cms.server.core.config import settings

ADMIN_EMAIL = "admin@blich.studio"
ADMIN_PASSWORD = "correct-horse-battery"


@pytest_asyncio.fixture(name="client")
async def client_fixture(session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client with the database session overridden."""
    from blich_cms.server.main import app

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        yield session

    app.dependency_overrides[get_session] = get_session_override

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        yield client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def admin_user(session: AsyncSession) -> AdminUser:
    user = AdminUser(email=ADMIN_EMAIL, full_name="Studio Admin", password_hash=hash_password(ADMIN_PASSWORD))
    session.add(user)
    await session.commit()
    await session.refresh(user)
    return user


@pytest_asyncio.fixture
async def auth_headers(admin_user: AdminUser) -> dict:
    token = create_access_token(
        str(admin_user.id),
        secret=settings.jwt.secret,
        algorithm=settings.jwt.algorithm,
        extra_claims={"username": admin_user.email},
    )
    return {"Authorization": f"Bearer {token}"}
