"""
Asset ("game") I/O models for API requests and responses.

Admin writes accept the whitelisted asset fields only; anything else in the
request body is ignored.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import ConfigDict, Field, field_validator

from ..domain.enums import AssetStatus, AssetType
from .common import CamelModel, is_valid_slug


class AssetLinks(CamelModel):
    """External store and community links of an asset."""

    steam: Optional[str] = None
    itch: Optional[str] = None
    website: Optional[str] = None
    discord: Optional[str] = None


class AssetCreate(CamelModel):
    """Schema for creating an asset via the admin API."""

    model_config = ConfigDict(use_enum_values=True, validate_default=True)

    title: str = Field(min_length=1, max_length=200)
    slug: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1)
    cover_image: Optional[str] = None
    screenshots: List[str] = Field(default_factory=list)
    trailer_url: Optional[str] = None
    type: AssetType = AssetType.game
    status: AssetStatus = AssetStatus.in_development
    platforms: List[str] = Field(default_factory=list, description="e.g. ['PC', 'Xbox', 'PlayStation']")
    release_date: Optional[datetime] = None
    links: AssetLinks = Field(default_factory=AssetLinks)
    published: bool = False

    @field_validator("slug")
    @classmethod
    def _check_slug(cls, value: str) -> str:
        if not is_valid_slug(value):
            raise ValueError("slug must contain only lowercase letters, numbers and hyphens")
        return value


class AssetUpdate(CamelModel):
    """Schema for a partial asset update. Only provided fields are merged."""

    model_config = ConfigDict(use_enum_values=True, validate_default=True)

    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    slug: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, min_length=1)
    cover_image: Optional[str] = None
    screenshots: Optional[List[str]] = None
    trailer_url: Optional[str] = None
    type: Optional[AssetType] = None
    status: Optional[AssetStatus] = None
    platforms: Optional[List[str]] = None
    release_date: Optional[datetime] = None
    links: Optional[AssetLinks] = None
    published: Optional[bool] = None

    @field_validator("slug")
    @classmethod
    def _check_slug(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not is_valid_slug(value):
            raise ValueError("slug must contain only lowercase letters, numbers and hyphens")
        return value


class AssetRead(CamelModel):
    """Schema for reading an asset from the API."""

    id: int
    title: str
    slug: str
    description: str
    cover_image: Optional[str] = None
    screenshots: List[str] = Field(default_factory=list)
    trailer_url: Optional[str] = None
    type: AssetType
    status: AssetStatus
    platforms: List[str] = Field(default_factory=list)
    release_date: Optional[datetime] = None
    links: AssetLinks = Field(default_factory=AssetLinks)
    published: bool
    created_at: datetime
    updated_at: Optional[datetime] = None
