"""
Asset entity models.

Assets are the studio's showcased works (games, animations, tools...). The
public site calls them "games"; the admin console manages them under
``/api/cms/admin/games``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from sqlalchemy import JSON, Column, DateTime, Text
from sqlmodel import Field

from ..base import Base, utc_now


class Asset(Base, table=True):
    """Persistent showcased asset.

    Table: assets
    """

    __tablename__ = "assets"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=200)
    slug: str = Field(max_length=200, unique=True, index=True)
    description: str = Field(sa_column=Column(Text, nullable=False))
    cover_image: Optional[str] = Field(default=None, max_length=500)
    screenshots: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    trailer_url: Optional[str] = Field(default=None, max_length=500)
    type: str = Field(default="game", max_length=16)
    status: str = Field(default="in-development", max_length=20)
    platforms: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    release_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime(timezone=True), nullable=True))
    links: Dict[str, str] = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))
    published: bool = Field(default=False, index=True)

    created_at: datetime = Field(
        default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False, index=True)
    )
    updated_at: Optional[datetime] = Field(
        default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=True, onupdate=utc_now)
    )

    def __repr__(self) -> str:
        return f"Asset(id={self.id}, slug={self.slug}, type={self.type}, published={self.published})"
