"""Pytest configuration and fixtures for inventory.

HTTP tests use inventory.main:app with get_db / get_db_transactional
overridden to an in-memory SQLite database (one per test). ASGITransport
does not run the lifespan, so the client fixture installs the validation
store on app.state itself.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("VALIDATION_REFRESH_ENABLED", "false")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from inventory.core.constants import RELOAD_SOURCE_STARTUP
from inventory.core.limiter import limiter
from inventory.core.validation_store import ValidationStore
from inventory.infrastructure.persistence import models  # noqa: F401
from inventory.infrastructure.persistence.database import (
    Base,
    build_engine,
    build_session_factory,
    get_db,
    get_db_transactional,
)
from inventory.infrastructure.persistence.seed import seed_sample_data
from inventory.infrastructure.services.reference_data import reload_reference_data
from inventory.main import app


@pytest.fixture
async def engine() -> AsyncEngine:
    """Fresh in-memory SQLite engine with all tables created."""
    test_engine = build_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return build_session_factory(engine)


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncSession:
    """Database session for repository tests. Rolls back after test."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def store() -> ValidationStore:
    return ValidationStore()


@pytest.fixture
async def seeded(
    session_factory: async_sessionmaker[AsyncSession], store: ValidationStore
) -> ValidationStore:
    """Insert the sample suppliers and products, then load reference sets into store."""
    async with session_factory() as session:
        async with session.begin():
            await seed_sample_data(session)
    await reload_reference_data(store, session_factory, RELOAD_SOURCE_STARTUP)
    return store


@pytest.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession], store: ValidationStore
) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI) backed by the test database."""

    async def _get_db():
        async with session_factory() as session:
            yield session

    async def _get_db_transactional():
        async with session_factory() as session:
            async with session.begin():
                yield session

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_db_transactional] = _get_db_transactional
    app.state.validation_store = store
    limiter.reset()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
