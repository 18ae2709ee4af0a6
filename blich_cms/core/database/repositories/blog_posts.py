"""
Blog post repository interface and implementation.

This module provides data access operations for blog posts, including the
page-numbered listing of published posts used by ``GET /api/cms/blog``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.blog_posts import BlogPost
from .base import AsyncBaseRepository, QueryBuilder


class BlogPostRepository(AsyncBaseRepository[BlogPost]):
    """Repository for blog post data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, BlogPost)

    async def get_by_slug(self, slug: str, *, published_only: bool = False) -> Optional[BlogPost]:
        """Get a blog post by its URL slug.

        Args:
            slug: Post slug
            published_only: Ignore drafts

        Returns:
            BlogPost instance or None if not found
        """
        stmt = select(BlogPost).where(BlogPost.slug == slug)
        if published_only:
            stmt = stmt.where(BlogPost.status == "published")
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def paginate_published(self, page: int, per_page: int) -> Tuple[List[BlogPost], int]:
        """Get one page of published posts, most recently published first.

        Args:
            page: 1-based page number
            per_page: Page size

        Returns:
            Tuple of (posts on the page, total number of published posts)
        """
        stmt = select(BlogPost).where(BlogPost.status == "published")
        total = await self.count(stmt)

        stmt = stmt.order_by(BlogPost.published_at.desc(), BlogPost.id.desc())
        stmt = QueryBuilder.apply_pagination(stmt, per_page, (page - 1) * per_page)
        result = await self.session.execute(stmt)
        return list(result.scalars().all()), total

    async def list(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[BlogPost]:
        """List blog posts newest first.

        Args:
            limit: Maximum records to return
            offset: Records to skip
            filters: Optional equality filters (``status``)

        Returns:
            List of BlogPost instances
        """
        stmt = select(BlogPost)
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, BlogPost, filters)
        stmt = stmt.order_by(BlogPost.created_at.desc(), BlogPost.id.desc())
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)

        result = await self.session.execute(stmt)
        return list(result.scalars().all())
