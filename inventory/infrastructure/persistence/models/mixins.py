"""SQLAlchemy mixins for common model patterns (DRY).

Provides: IntIdMixin, CreatedAtMixin, UpdatedAtMixin.
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer
from sqlalchemy.orm import Mapped, declared_attr, mapped_column

from inventory.shared.utils.datetime import utc_now


class IntIdMixin:
    """Mixin for models using an autoincrement integer primary key."""

    @declared_attr
    def id(cls) -> Mapped[int]:
        return mapped_column(Integer, primary_key=True, autoincrement=True)


class CreatedAtMixin:
    """Mixin for created_at (timezone-aware, set on insert)."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(DateTime(timezone=True), default=utc_now, nullable=False)


class UpdatedAtMixin:
    """Mixin for updated_at: null until the first update (repositories stamp it)."""

    @declared_attr
    def updated_at(cls) -> Mapped[datetime | None]:
        return mapped_column(DateTime(timezone=True), nullable=True)
