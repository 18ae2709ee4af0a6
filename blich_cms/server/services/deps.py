"""
Service Dependencies.

Request-scoped services built on the request's database session, plus the
bearer-token guard used by every admin route.
"""

from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from blich_cms.core.database import get_session
from blich_cms.core.database.entities.admin_users import AdminUser
from blich_cms.core.database.repositories import (
    AdminUserRepository,
    ArticleRepository,
    AssetRepository,
    BlogPostRepository,
    StudioRepository,
)
from blich_cms.server.core.config import settings

from .articles import ArticleService
from .auth import AuthService
from .content import AssetService, BlogPostService, StudioService

SessionDep = Annotated[AsyncSession, Depends(get_session)]

_bearer = HTTPBearer(auto_error=False)


def get_article_service(session: SessionDep) -> ArticleService:
    return ArticleService(ArticleRepository(session))


def get_asset_service(session: SessionDep) -> AssetService:
    return AssetService(AssetRepository(session))


def get_blog_post_service(session: SessionDep) -> BlogPostService:
    return BlogPostService(BlogPostRepository(session))


def get_studio_service(session: SessionDep) -> StudioService:
    return StudioService(StudioRepository(session))


def get_auth_service(session: SessionDep) -> AuthService:
    return AuthService(AdminUserRepository(session), settings.jwt)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]


async def get_current_admin(
    auth_service: AuthServiceDep,
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(_bearer)],
) -> AdminUser:
    """Resolve the admin user from the ``Authorization: Bearer`` header (401 otherwise)."""
    return await auth_service.resolve_user(credentials.credentials if credentials else None)


ArticleServiceDep = Annotated[ArticleService, Depends(get_article_service)]
AssetServiceDep = Annotated[AssetService, Depends(get_asset_service)]
BlogPostServiceDep = Annotated[BlogPostService, Depends(get_blog_post_service)]
StudioServiceDep = Annotated[StudioService, Depends(get_studio_service)]
CurrentAdminDep = Annotated[AdminUser, Depends(get_current_admin)]
