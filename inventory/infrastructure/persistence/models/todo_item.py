"""TodoItem ORM model."""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from inventory.infrastructure.persistence.database import Base
from inventory.infrastructure.persistence.models.mixins import CreatedAtMixin, IntIdMixin


class TodoItem(IntIdMixin, CreatedAtMixin, Base):
    """Todo item. Table: todo_item."""

    __tablename__ = "todo_item"

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    is_done: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
