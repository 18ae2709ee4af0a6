"""
Global database session and engine management.

This module manages the global AsyncEngine and async_sessionmaker instances
that are used throughout the CMS server for database access.
"""

from __future__ import annotations

from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from blich_cms.core.logging_config import get_logger
from blich_cms.server.core.config import settings

from .utils import create_all, create_engine, create_sessionmaker

logger = get_logger(__name__)

engine = create_engine(settings.database.url, echo=settings.database.echo)
async_session_maker = create_sessionmaker(engine)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency generator for database sessions.

    Yields:
        AsyncSession: An asynchronous SQLAlchemy session.
    """
    async with async_session_maker() as session:
        yield session


async def init_db() -> None:
    """
    Initialize the database.

    SQLite databases (local development, tests) get their tables created from
    the ORM metadata. Every other backend is expected to be migrated by Alembic
    before the server starts, so only connectivity is checked.
    """
    if engine.dialect.name == "sqlite":
        await create_all(engine)
        logger.info("SQLite schema created from ORM metadata")
    else:
        await ping()


async def ping() -> bool:
    """Check database connectivity.

    Returns:
        True if a trivial query succeeds, False otherwise.
    """
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.warning(f"Database ping failed: {e}")
        return False
