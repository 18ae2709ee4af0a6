"""
Studio profile I/O models.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .common import CamelModel


class TeamMember(CamelModel):
    name: str = Field(min_length=1)
    role: str = Field(min_length=1)
    bio: Optional[str] = None
    avatar: Optional[str] = None


class SocialLinks(CamelModel):
    x: Optional[str] = None
    facebook: Optional[str] = None
    linkedin: Optional[str] = None
    itch: Optional[str] = None
    instagram: Optional[str] = None
    youtube: Optional[str] = None
    twitch: Optional[str] = None
    discord: Optional[str] = None


class StudioWrite(CamelModel):
    """Schema for creating or replacing the studio profile."""

    name: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1)
    logo: Optional[str] = None
    founded_year: int = Field(ge=1900, le=2100)
    team_members: List[TeamMember] = Field(default_factory=list)
    social_links: SocialLinks = Field(default_factory=SocialLinks)


class StudioRead(CamelModel):
    """Schema for reading the studio profile."""

    id: int
    name: str
    description: str
    logo: Optional[str] = None
    founded_year: int
    team_members: List[TeamMember] = Field(default_factory=list)
    social_links: SocialLinks = Field(default_factory=SocialLinks)
    created_at: datetime
    updated_at: Optional[datetime] = None
