"""
Base database models and utilities.

This module provides the foundational database components used across
all entities in the centralized database layer using SQLModel.
"""

from __future__ import annotations

import os
import time
from datetime import datetime, timezone

from pydantic import ConfigDict
from sqlmodel import SQLModel


class Base(SQLModel):
    """Base class for all SQLModel entities."""

    model_config = ConfigDict(arbitrary_types_allowed=True)


def utc_now() -> datetime:
    """Get the current UTC time as a timezone-aware datetime."""
    return datetime.now(timezone.utc)


def epoch_millis() -> int:
    """Get the current UTC time as integer milliseconds since the epoch."""
    return int(time.time() * 1000)


def new_object_id() -> str:
    """Generate a 24-character hex identifier in MongoDB ObjectId layout.

    The first 4 bytes are the big-endian unix timestamp, the remaining 8 are
    random, so identifiers sort roughly by creation time.
    """
    return int(time.time()).to_bytes(4, "big").hex() + os.urandom(8).hex()
