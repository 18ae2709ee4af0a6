"""
Asset repository interface and implementation.

This module provides data access operations for showcased assets ("games"
on the public site) using SQLModel and async SQLAlchemy.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.assets import Asset
from .base import AsyncBaseRepository, QueryBuilder


class AssetRepository(AsyncBaseRepository[Asset]):
    """Repository for asset data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Asset)

    async def get_by_slug(self, slug: str, *, published_only: bool = False) -> Optional[Asset]:
        """Get an asset by its URL slug.

        Args:
            slug: Asset slug
            published_only: Ignore unpublished assets

        Returns:
            Asset instance or None if not found
        """
        stmt = select(Asset).where(Asset.slug == slug)
        if published_only:
            stmt = stmt.where(Asset.published.is_(True))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[Asset]:
        """List assets newest first.

        Args:
            limit: Maximum records to return
            offset: Records to skip
            filters: Optional equality filters (``published``, ``type``, ``status``)

        Returns:
            List of Asset instances
        """
        stmt = select(Asset)
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, Asset, filters)
        stmt = stmt.order_by(Asset.created_at.desc(), Asset.id.desc())
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)

        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_published(self) -> List[Asset]:
        """List published assets newest first."""
        return await self.list(filters={"published": True})
