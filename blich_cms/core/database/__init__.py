"""
Centralized database layer for Blich CMS.

This package provides a unified location for all database entities and repositories,
organized by content type.

Structure:
- entities/: Database entity models organized by table
- repositories/: Data access layer organized by table
- session.py: Global engine and session factory management
- utils.py: Database utility functions (engine, session factory, table creation)
"""

from .base import Base
from .session import (
    async_session_maker,
    engine,
    get_session,
    init_db,
    ping,
)
from .utils import (
    create_all,
    create_engine,
    create_sessionmaker,
)

__all__ = [
    "Base",
    "async_session_maker",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "engine",
    "get_session",
    "init_db",
    "ping",
]
