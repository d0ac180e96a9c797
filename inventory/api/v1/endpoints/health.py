"""Health check endpoint. Liveness always answers; readiness needs loaded reference data."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from inventory.api.v1.dependencies import get_validation_store
from inventory.core.validation_store import ValidationStore
from inventory.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={
        503: {
            "description": "Validation reference data not loaded",
            "model": ReadinessErrorResponse,
        }
    },
)
async def readiness_check(
    store: Annotated[ValidationStore, Depends(get_validation_store)],
) -> ReadinessResponse | JSONResponse:
    """Return 200 once the validation store has been initialized; 503 before that."""
    if store.state.is_initialized:
        return ReadinessResponse()
    return JSONResponse(
        status_code=503,
        content=ReadinessErrorResponse(
            message="Validation store not initialized",
        ).model_dump(),
    )
