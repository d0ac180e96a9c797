"""Todo item API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class TodoCreateRequest(BaseModel):
    title: str = Field(..., max_length=200)


class TodoUpdateRequest(BaseModel):
    title: str = Field(..., max_length=200)
    is_done: bool


class TodoResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    is_done: bool
    created_at: datetime
