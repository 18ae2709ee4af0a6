"""
Article I/O models for API requests and responses.

This module contains the Pydantic schemas behind ``/api/v1/cms/articles``.
Write schemas carry user-facing validation messages because
``ArticleService`` joins them into ``"Validation failed: ..."`` errors.
Read schemas expose the article identifier as ``_id`` and timestamps as
epoch milliseconds, which is the shape the API gateway consumes.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_core import PydanticCustomError

from ..domain.enums import ArticleStatus, SortOrder
from .common import CamelModel, is_valid_slug

# Column sizes of the articles and article_tags tables
TITLE_MAX_LENGTH = 200
SLUG_MAX_LENGTH = 200
AUTHOR_ID_MAX_LENGTH = 64
TAG_MAX_LENGTH = 64

# Labels used to build "<Label> is required" messages for missing fields
FIELD_LABELS = {
    "title": "Title",
    "slug": "Slug",
    "perex": "Perex",
    "content": "Content",
    "authorId": "Author ID",
    "author_id": "Author ID",
    "status": "Status",
    "tags": "Tags",
}


def _required(label: str, value: str) -> str:
    if not value or not value.strip():
        raise PydanticCustomError("required", "{label} is required", {"label": label})
    return value


def _max_length(label: str, value: str, limit: int) -> str:
    if len(value) > limit:
        raise PydanticCustomError(
            "too_long", "{label} must be less than {limit} characters", {"label": label, "limit": limit}
        )
    return value


class _ArticleWriteModel(CamelModel):
    """Field-level checks shared by the create and update schemas."""

    @field_validator("title", check_fields=False)
    @classmethod
    def _check_title(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        _required("Title", value)
        return _max_length("Title", value, TITLE_MAX_LENGTH)

    @field_validator("slug", check_fields=False)
    @classmethod
    def _check_slug(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        _required("Slug", value)
        _max_length("Slug", value, SLUG_MAX_LENGTH)
        if not is_valid_slug(value):
            raise PydanticCustomError("slug_format", "Slug must contain only lowercase letters, numbers and hyphens")
        return value

    @field_validator("perex", check_fields=False)
    @classmethod
    def _check_perex(cls, value: Optional[str]) -> Optional[str]:
        return value if value is None else _required("Perex", value)

    @field_validator("content", check_fields=False)
    @classmethod
    def _check_content(cls, value: Optional[str]) -> Optional[str]:
        return value if value is None else _required("Content", value)

    @field_validator("author_id", check_fields=False)
    @classmethod
    def _check_author_id(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        _required("Author ID", value)
        return _max_length("Author ID", value, AUTHOR_ID_MAX_LENGTH)

    @field_validator("status", mode="before", check_fields=False)
    @classmethod
    def _check_status(cls, value):
        if value is None or isinstance(value, ArticleStatus):
            return value
        allowed = [status.value for status in ArticleStatus]
        if value not in allowed:
            raise PydanticCustomError("status", "Status must be one of: {allowed}", {"allowed": ", ".join(allowed)})
        return value

    @field_validator("tags", check_fields=False)
    @classmethod
    def _check_tags(cls, value: Optional[List[str]]) -> Optional[List[str]]:
        if value is None:
            return value
        tags = [tag.strip() for tag in value if tag and tag.strip()]
        for tag in tags:
            _max_length("Tag", tag, TAG_MAX_LENGTH)
        return tags


class ArticleCreate(_ArticleWriteModel):
    """Schema for creating an article."""

    title: str = Field(description="Article headline, 1 to 200 characters")
    slug: str = Field(description="URL slug, lowercase words separated by hyphens")
    perex: str = Field(description="Short lead paragraph shown in listings")
    content: str = Field(description="Article body")
    author_id: str = Field(description="Identifier of the authoring user")
    status: ArticleStatus = Field(default=ArticleStatus.draft, description="Editorial state")
    tags: List[str] = Field(default_factory=list, description="Free-form tags")


class ArticleUpdate(_ArticleWriteModel):
    """Schema for partially updating an article. Only provided fields change."""

    title: Optional[str] = None
    slug: Optional[str] = None
    perex: Optional[str] = None
    content: Optional[str] = None
    author_id: Optional[str] = None
    status: Optional[ArticleStatus] = None
    tags: Optional[List[str]] = None


class ArticleRead(CamelModel):
    """Schema for reading an article from the API."""

    id: str = Field(alias="_id", description="24-character hex identifier")
    title: str
    slug: str
    perex: str
    content: str
    author_id: str
    status: ArticleStatus
    tags: List[str] = Field(default_factory=list)
    created_at: int = Field(description="Creation time in epoch milliseconds")
    updated_at: int = Field(description="Last update time in epoch milliseconds")


class ArticleCreated(CamelModel):
    """Response body of a successful create."""

    id: str
    message: str = "Article created successfully"


class PaginationQuery(CamelModel):
    """Raw paging and sorting input; ``ArticleService`` normalizes it."""

    page: Optional[int] = None
    limit: Optional[int] = None
    sort: Optional[str] = None
    order: Optional[SortOrder] = None


class ArticleFilters(CamelModel):
    """Optional list filters. Tags match when an article carries any of them."""

    status: Optional[ArticleStatus] = None
    author_id: Optional[str] = None
    tags: Optional[List[str]] = None
    search: Optional[str] = None


class PaginationMeta(CamelModel):
    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool


class PaginatedArticles(CamelModel):
    """One page of articles plus paging metadata."""

    data: List[ArticleRead]
    pagination: PaginationMeta
