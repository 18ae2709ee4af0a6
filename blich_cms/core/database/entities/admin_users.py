"""
Admin user entity models.

Admin users authenticate against ``POST /api/auth/login`` and receive the
bearer token required by every ``/api/cms/admin`` route.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import Column, DateTime
from sqlmodel import Field

from ..base import Base, utc_now


class AdminUser(Base, table=True):
    """Persistent admin account.

    Table: admin_users
    """

    __tablename__ = "admin_users"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(max_length=254, unique=True, index=True)
    full_name: str = Field(default="", max_length=200)
    password_hash: str = Field(max_length=255)
    is_active: bool = Field(default=True)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False))
    updated_at: Optional[datetime] = Field(
        default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=True, onupdate=utc_now)
    )

    def __repr__(self) -> str:
        return f"AdminUser(id={self.id}, email={self.email})"
