"""DTOs for todo items."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TodoResult:
    """Todo item read-model."""

    id: int
    title: str
    is_done: bool
    created_at: datetime
