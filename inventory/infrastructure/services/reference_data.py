"""Reload validation reference sets in their own session, once or on a schedule."""

from __future__ import annotations

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from inventory.application.services.validation_cache_service import (
    ValidationCacheService,
)
from inventory.core.constants import RELOAD_SOURCE_SCHEDULED
from inventory.core.validation_store import ValidationStore
from inventory.infrastructure.persistence.repositories import (
    ProductRepository,
    SupplierRepository,
)

logger = logging.getLogger(__name__)


async def reload_reference_data(
    store: ValidationStore,
    session_factory: async_sessionmaker[AsyncSession],
    source: str,
) -> dict[str, int]:
    """Open a read session, reload every reference set into store, return counts."""
    async with session_factory() as session:
        service = ValidationCacheService(
            store, SupplierRepository(session), ProductRepository(session)
        )
        return await service.reload_all(source)


async def run_periodic_refresh(
    store: ValidationStore,
    session_factory: async_sessionmaker[AsyncSession],
    interval_seconds: float,
) -> None:
    """Reload reference data every interval_seconds until cancelled.

    A failed cycle is logged and retried on the next tick; the previous
    sets stay published meanwhile.
    """
    logger.info("Validation refresh task started (every %ss)", interval_seconds)
    while True:
        await asyncio.sleep(interval_seconds)
        try:
            await reload_reference_data(store, session_factory, RELOAD_SOURCE_SCHEDULED)
        except Exception:
            logger.exception("Scheduled validation reload failed; keeping previous sets")
