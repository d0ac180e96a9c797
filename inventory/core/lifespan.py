"""Application lifespan: startup and shutdown.

Wiring only: database schema and seed, validation store preload, periodic
refresh task, engine dispose.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from inventory.core.config import get_settings
from inventory.core.constants import RELOAD_SOURCE_STARTUP
from inventory.core.validation_store import ValidationStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: validation store, tables (if enabled), seed data (if
    enabled), reference preload (if enabled), refresh task (if enabled).
    Shutdown order: refresh task cancel, store clear, SQL engine dispose.
    """
    settings = get_settings()

    from inventory.infrastructure.persistence import database
    from inventory.infrastructure.persistence.seed import seed_sample_data
    from inventory.infrastructure.services.reference_data import (
        reload_reference_data,
        run_periodic_refresh,
    )

    # ---- Startup ----
    store = ValidationStore()
    app.state.validation_store = store
    session_factory = database.get_session_factory()

    if settings.db_create_tables:
        await database.create_tables()

    if settings.db_seed_data:
        async with session_factory() as session:
            async with session.begin():
                await seed_sample_data(session)

    if settings.validation_preload_on_startup:
        await reload_reference_data(store, session_factory, RELOAD_SOURCE_STARTUP)

    if settings.validation_refresh_enabled:
        app.state.validation_refresh_task = asyncio.create_task(
            run_periodic_refresh(
                store, session_factory, settings.validation_refresh_interval_seconds
            )
        )
    else:
        app.state.validation_refresh_task = None

    yield

    # ---- Shutdown ----
    refresh_task = getattr(app.state, "validation_refresh_task", None)
    if refresh_task is not None:
        refresh_task.cancel()
        try:
            await refresh_task
        except asyncio.CancelledError:
            pass
        logger.info("Validation refresh task stopped")

    store.clear_all_caches()
    store.reset_initialization()

    await database.dispose_engine()
