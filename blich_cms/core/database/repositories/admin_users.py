"""
Admin user repository interface and implementation.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.admin_users import AdminUser
from .base import AsyncBaseRepository, QueryBuilder


class AdminUserRepository(AsyncBaseRepository[AdminUser]):
    """Repository for admin accounts."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, AdminUser)

    async def get_by_email(self, email: str) -> Optional[AdminUser]:
        """Get an admin user by email (case-insensitive).

        Args:
            email: Login email address

        Returns:
            AdminUser instance or None if not found
        """
        stmt = select(AdminUser).where(AdminUser.email == email.strip().lower())
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[AdminUser]:
        stmt = select(AdminUser)
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, AdminUser, filters)
        stmt = QueryBuilder.apply_pagination(stmt.order_by(AdminUser.id), limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
