"""
Shared pytest fixtures for database engines, sessions, and settings.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from blogdb.config import DatabaseSettings, LoggingSettings, Settings
from blogdb.db.models import Base
from blogdb.db.session import create_session_factory, enable_sqlite_foreign_keys

SQLITE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def db_engine() -> AsyncIterator[AsyncEngine]:
    """Provide an in-memory SQLite engine with the schema created.

    StaticPool keeps a single connection so every session sees the same database.
    Foreign keys are enforced the same way the application engine enforces them.
    """
    engine = create_async_engine(SQLITE_URL, poolclass=StaticPool)
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.create_all)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def session_factory(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory configured the same way the scripts configure theirs."""

    return create_session_factory(db_engine)


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """Yield a session whose work is rolled back after the test."""

    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def sqlite_settings(tmp_path) -> Settings:
    """Settings pointing at SQLite and a temporary log directory."""

    return Settings(
        database=DatabaseSettings(url=SQLITE_URL),
        logging=LoggingSettings(directory=tmp_path / "logs"),
    )
