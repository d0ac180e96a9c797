"""Validation cache diagnostics schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class ValidationStateResponse(BaseModel):
    is_initialized: bool
    last_reload_source: str | None
    last_reload_time: datetime | None


class ValidationCacheResponse(BaseModel):
    """Snapshot of the validation store: state, loaded keys and their sizes."""

    state: ValidationStateResponse
    keys: list[str]
    counts: dict[str, int] = Field(default_factory=dict)


class ValidationReloadResponse(BaseModel):
    source: str
    counts: dict[str, int]
