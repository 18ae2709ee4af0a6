"""
Blog post I/O models for API requests and responses.

The public listing uses a page-numbered envelope
(``{"meta": {...}, "data": [...]}``) rather than the offset pagination of the
article API.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import ConfigDict, Field, field_validator

from ..domain.enums import BlogPostStatus
from .common import CamelModel, is_valid_slug


class BlogPostCreate(CamelModel):
    """Schema for creating a blog post via the admin API."""

    model_config = ConfigDict(use_enum_values=True, validate_default=True)

    title: str = Field(min_length=1, max_length=200)
    slug: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)
    excerpt: Optional[str] = None
    featured_image: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    status: BlogPostStatus = BlogPostStatus.draft
    published_at: Optional[datetime] = None

    @field_validator("slug")
    @classmethod
    def _check_slug(cls, value: str) -> str:
        if not is_valid_slug(value):
            raise ValueError("slug must contain only lowercase letters, numbers and hyphens")
        return value


class BlogPostUpdate(CamelModel):
    """Schema for a partial blog post update."""

    model_config = ConfigDict(use_enum_values=True, validate_default=True)

    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    slug: Optional[str] = Field(default=None, min_length=1, max_length=200)
    content: Optional[str] = Field(default=None, min_length=1)
    excerpt: Optional[str] = None
    featured_image: Optional[str] = None
    tags: Optional[List[str]] = None
    status: Optional[BlogPostStatus] = None
    published_at: Optional[datetime] = None

    @field_validator("slug")
    @classmethod
    def _check_slug(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not is_valid_slug(value):
            raise ValueError("slug must contain only lowercase letters, numbers and hyphens")
        return value


class BlogPostRead(CamelModel):
    """Schema for reading a blog post from the API."""

    id: int
    title: str
    slug: str
    content: str
    excerpt: Optional[str] = None
    featured_image: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    status: BlogPostStatus
    published_at: Optional[datetime] = None
    created_at: datetime
    updated_at: Optional[datetime] = None


class PageMeta(CamelModel):
    """Page-numbered pagination metadata."""

    total: int
    per_page: int
    current_page: int
    last_page: int
    first_page: int = 1


class BlogPostPage(CamelModel):
    meta: PageMeta
    data: List[BlogPostRead]
