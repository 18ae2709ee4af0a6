"""
Studio entity models.

The studio record holds the "about us" content: name, logo, founding year,
team members and social links. The site only ever shows one studio.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import JSON, Column, DateTime, Text
from sqlmodel import Field

from ..base import Base, utc_now


class Studio(Base, table=True):
    """Persistent studio profile.

    Table: studios
    """

    __tablename__ = "studios"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=200)
    description: str = Field(sa_column=Column(Text, nullable=False))
    logo: Optional[str] = Field(default=None, max_length=500)
    founded_year: int
    team_members: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    social_links: Dict[str, str] = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False))
    updated_at: Optional[datetime] = Field(
        default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=True, onupdate=utc_now)
    )

    def __repr__(self) -> str:
        return f"Studio(id={self.id}, name={self.name})"
