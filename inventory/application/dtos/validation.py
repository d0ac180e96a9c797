"""DTOs for validation outcomes."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class FieldError:
    """One failed rule on one field."""

    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


@dataclass
class ItemValidationError:
    """All errors for one item of a validated batch (index is its position in the batch)."""

    index: int
    item: Any
    errors: list[str] = field(default_factory=list)
