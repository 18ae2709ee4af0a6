"""
Blog post entity models.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from sqlalchemy import JSON, Column, DateTime, Text
from sqlmodel import Field

from ..base import Base, utc_now


class BlogPost(Base, table=True):
    """Persistent blog post.

    Table: blog_posts
    """

    __tablename__ = "blog_posts"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=200)
    slug: str = Field(max_length=200, unique=True, index=True)
    content: str = Field(sa_column=Column(Text, nullable=False))
    excerpt: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    featured_image: Optional[str] = Field(default=None, max_length=500)
    tags: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    status: str = Field(default="draft", max_length=16, index=True)
    published_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime(timezone=True), nullable=True, index=True)
    )

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False))
    updated_at: Optional[datetime] = Field(
        default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=True, onupdate=utc_now)
    )

    def __repr__(self) -> str:
        return f"BlogPost(id={self.id}, slug={self.slug}, status={self.status})"
