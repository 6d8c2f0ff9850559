"""
Database configuration module with async SQLAlchemy engine and session management.

This module provides the database connection, session factory, and utility
functions for health checks and shutdown.
"""
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy import text

from hrms.core.config import settings
from hrms.core.logging import get_logger

logger = get_logger(__name__)


def _engine_options(database_url: str) -> dict:
    """Pool options for the configured backend; SQLite ignores pool sizing."""
    options = {"echo": settings.database_echo, "pool_pre_ping": True}
    if not database_url.startswith("sqlite"):
        options["pool_size"] = settings.database_pool_size
        options["max_overflow"] = settings.database_max_overflow
    return options


engine: AsyncEngine = create_async_engine(
    settings.database_url,
    **_engine_options(settings.database_url),
)


async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
    autocommit=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency function that yields AsyncSession instances.

    Routers own the transaction: they commit explicitly, anything left
    uncommitted is rolled back when the session closes.

    Example:
        @router.get("/users")
        async def get_users(db: AsyncSession = Depends(get_db)):
            ...
    """
    async with async_session_factory() as session:
        try:
            yield session
        finally:
            await session.close()


async def check_db_connection() -> bool:
    """
    Verify database connectivity.

    Returns:
        bool: True if connection is successful, False otherwise.
    """
    try:
        async with engine.begin() as conn:
            await conn.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.warning("database_connection_check_failed", error=str(e))
        return False


async def dispose_engine() -> None:
    """
    Dispose of the database engine and close all connections.

    Call this during application shutdown.
    """
    await engine.dispose()
