"""Async SQLAlchemy engine, session factory, declarative Base and session dependencies.

The engine is built on first use (get_session_factory, get_db,
get_db_transactional, create_tables) so import does not trigger Settings
validation. Schema comes from ORM metadata via create_tables(); there are
no migrations.
"""

import logging
from collections.abc import AsyncIterator
from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from inventory.core.config import get_settings

logger = logging.getLogger(__name__)

# Set by get_session_factory() on first use; avoids get_settings() at import time.
engine: AsyncEngine | None = None
AsyncSessionLocal: async_sessionmaker[AsyncSession] | None = None


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy declarative models."""


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(database_url: str, *, echo: bool = False, **overrides: Any) -> AsyncEngine:
    """Create an async engine; pool sizing only applies to server databases."""
    kwargs: dict[str, Any] = {"echo": echo}
    if database_url.startswith("sqlite"):
        kwargs.update(overrides)
        new_engine = create_async_engine(database_url, **kwargs)
        event.listen(new_engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        return new_engine
    settings = get_settings()
    kwargs.update(
        pool_pre_ping=True,
        pool_size=settings.db_pool_size if settings.db_pool_size is not None else 10,
        max_overflow=(
            settings.db_max_overflow if settings.db_max_overflow is not None else 20
        ),
        pool_recycle=3600,
    )
    kwargs.update(overrides)
    return create_async_engine(database_url, **kwargs)


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=bind,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
        autocommit=False,
    )


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Create engine and AsyncSessionLocal on first use."""
    global engine, AsyncSessionLocal
    if AsyncSessionLocal is None:
        settings = get_settings()
        engine = build_engine(settings.database_url, echo=settings.database_echo)
        AsyncSessionLocal = build_session_factory(engine)
    return AsyncSessionLocal


async def create_tables() -> None:
    """Create all mapped tables that do not exist yet."""
    # Import models so they register on Base.metadata.
    from inventory.infrastructure.persistence import models  # noqa: F401

    get_session_factory()
    assert engine is not None
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ensured")


async def dispose_engine() -> None:
    """Dispose the engine (shutdown) and forget the session factory."""
    global engine, AsyncSessionLocal
    if engine is not None:
        await engine.dispose()
        logger.info("Database engine disposed")
    engine = None
    AsyncSessionLocal = None


async def get_db() -> AsyncIterator[AsyncSession]:
    """Session for read-only routes; never commits."""
    session_factory = get_session_factory()
    async with session_factory() as session:
        yield session


async def get_db_transactional() -> AsyncIterator[AsyncSession]:
    """Session wrapped in one transaction: commit when the route returns, rollback if it raises."""
    session_factory = get_session_factory()
    async with session_factory() as session:
        async with session.begin():
            yield session
