"""
Engine and session management for the blogdb scripts.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from ..config import Settings

LOGGER = logging.getLogger(__name__)


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """Turn on foreign key enforcement for every new SQLite connection."""

    @event.listens_for(engine.sync_engine, "connect")
    def _set_foreign_keys(dbapi_connection: Any, _connection_record: Any) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def create_engine(settings: Settings) -> AsyncEngine:
    """Create an async engine from database settings."""

    options: dict[str, Any] = {"echo": settings.database.echo}
    if settings.database.is_sqlite:
        engine = create_async_engine(str(settings.database.url), **options)
        enable_sqlite_foreign_keys(engine)
        return engine
    options["pool_size"] = settings.database.pool_size
    return create_async_engine(str(settings.database.url), **options)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Build a session factory whose records stay readable after commit."""

    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@asynccontextmanager
async def database_context(settings: Settings) -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    """
    Yield a session factory bound to a fresh engine.

    The engine is disposed when the context exits.
    """
    engine = create_engine(settings)
    LOGGER.debug("Database engine created for %s", engine.url.render_as_string(hide_password=True))
    try:
        yield create_session_factory(engine)
    finally:
        await engine.dispose()
        LOGGER.debug("Database engine disposed")


@asynccontextmanager
async def session_scope(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """
    Provide a transactional database session.

    The session is committed on success and rolled back on exception.
    """
    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


__all__ = [
    "create_engine",
    "create_session_factory",
    "database_context",
    "enable_sqlite_foreign_keys",
    "session_scope",
]
