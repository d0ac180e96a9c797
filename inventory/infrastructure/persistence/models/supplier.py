"""Supplier ORM model. One supplier has many products."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from inventory.infrastructure.persistence.database import Base
from inventory.infrastructure.persistence.models.mixins import CreatedAtMixin, IntIdMixin

if TYPE_CHECKING:
    from inventory.infrastructure.persistence.models.product import Product


class Supplier(IntIdMixin, CreatedAtMixin, Base):
    """Supplier. Table: supplier. Unique supplier_code."""

    __tablename__ = "supplier"

    supplier_code: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    supplier_name: Mapped[str] = mapped_column(String(200), nullable=False)
    contact_person: Mapped[str | None] = mapped_column(String(100), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    address: Mapped[str | None] = mapped_column(String(500), nullable=True)
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    country: Mapped[str | None] = mapped_column(String(100), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    # Async sessions: load explicitly (selectinload / joins), never lazily.
    products: Mapped[list[Product]] = relationship(
        back_populates="supplier", lazy="raise", passive_deletes=True
    )
