"""Validation cache diagnostics: inspect, reload and clear reference sets."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from inventory.api.v1.dependencies import (
    get_validation_cache_service,
    get_validation_store,
)
from inventory.application.services import ValidationCacheService
from inventory.core.constants import RELOAD_SOURCE_API
from inventory.core.limiter import limit_cache_reload, limit_writes
from inventory.core.validation_store import ValidationStore
from inventory.schemas.validation import (
    ValidationCacheResponse,
    ValidationReloadResponse,
    ValidationStateResponse,
)

router = APIRouter()


@router.get("", response_model=ValidationCacheResponse)
async def get_validation_cache(
    store: Annotated[ValidationStore, Depends(get_validation_store)],
):
    """Return store state, loaded keys and the size of each set."""
    state = store.state
    keys = store.get_all_cache_keys()
    return ValidationCacheResponse(
        state=ValidationStateResponse(
            is_initialized=state.is_initialized,
            last_reload_source=state.last_reload_source,
            last_reload_time=state.last_reload_time,
        ),
        keys=keys,
        counts={key: store.get_cache_count(key) for key in keys},
    )


@router.post("/reload", response_model=ValidationReloadResponse)
@limit_cache_reload
async def reload_validation_cache(
    request: Request,
    service: Annotated[ValidationCacheService, Depends(get_validation_cache_service)],
):
    """Reload every reference set from the database now."""
    counts = await service.reload_all(RELOAD_SOURCE_API)
    return ValidationReloadResponse(source=RELOAD_SOURCE_API, counts=counts)


@router.delete("", status_code=204)
@limit_writes
async def clear_validation_cache(
    request: Request,
    service: Annotated[ValidationCacheService, Depends(get_validation_cache_service)],
):
    """Drop every reference set and mark the store uninitialized."""
    service.clear_all_caches()


@router.delete("/{key}", status_code=204)
@limit_writes
async def clear_validation_cache_key(
    request: Request,
    key: str,
    store: Annotated[ValidationStore, Depends(get_validation_store)],
):
    """Drop one reference set; unknown keys are a no-op."""
    store.clear_cache(key)
