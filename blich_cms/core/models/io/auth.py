"""
Authentication I/O models.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from .common import CamelModel


class LoginRequest(CamelModel):
    email: str = Field(min_length=3, max_length=254)
    password: str = Field(min_length=1)


class AdminUserRead(CamelModel):
    """Public view of an admin account (never includes the password hash)."""

    id: int
    email: str
    full_name: str
    is_active: bool
    created_at: datetime
    updated_at: Optional[datetime] = None


class LoginResponse(CamelModel):
    token: str
    user: AdminUserRead


class MessageResponse(CamelModel):
    message: str
