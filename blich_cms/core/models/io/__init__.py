"""
I/O models for API requests and responses.

This package contains Pydantic-based I/O schemas that define the contract
between API endpoints and clients. These models are separate from database
entities to allow independent evolution of API contracts.

Modules:
- articles: Article I/O models and list pagination
- assets: Asset ("game") I/O models
- blog_posts: Blog post I/O models and page envelope
- studios: Studio profile I/O models
- auth: Login and admin user I/O models
"""

from .articles import (
    ArticleCreate,
    ArticleCreated,
    ArticleFilters,
    ArticleRead,
    ArticleUpdate,
    PaginatedArticles,
    PaginationMeta,
    PaginationQuery,
)
from .assets import AssetCreate, AssetLinks, AssetRead, AssetUpdate
from .auth import AdminUserRead, LoginRequest, LoginResponse, MessageResponse
from .blog_posts import BlogPostCreate, BlogPostPage, BlogPostRead, BlogPostUpdate, PageMeta
from .studios import SocialLinks, StudioRead, StudioWrite, TeamMember

__all__ = [
    "AdminUserRead",
    "ArticleCreate",
    "ArticleCreated",
    "ArticleFilters",
    "ArticleRead",
    "ArticleUpdate",
    "AssetCreate",
    "AssetLinks",
    "AssetRead",
    "AssetUpdate",
    "BlogPostCreate",
    "BlogPostPage",
    "BlogPostRead",
    "BlogPostUpdate",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "PageMeta",
    "PaginatedArticles",
    "PaginationMeta",
    "PaginationQuery",
    "SocialLinks",
    "StudioRead",
    "StudioWrite",
    "TeamMember",
]
