"""
Studio repository interface and implementation.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.studios import Studio
from .base import AsyncBaseRepository, QueryBuilder


class StudioRepository(AsyncBaseRepository[Studio]):
    """Repository for the studio profile."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Studio)

    async def get_current(self) -> Optional[Studio]:
        """Get the studio profile shown on the site (the first record)."""
        stmt = select(Studio).order_by(Studio.id).limit(1)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[Studio]:
        stmt = select(Studio)
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, Studio, filters)
        stmt = QueryBuilder.apply_pagination(stmt.order_by(Studio.id), limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
