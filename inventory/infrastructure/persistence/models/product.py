"""Product ORM model. Each product belongs to one supplier."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from inventory.infrastructure.persistence.database import Base
from inventory.infrastructure.persistence.models.mixins import (
    CreatedAtMixin,
    IntIdMixin,
    UpdatedAtMixin,
)

if TYPE_CHECKING:
    from inventory.infrastructure.persistence.models.supplier import Supplier


class Product(IntIdMixin, CreatedAtMixin, UpdatedAtMixin, Base):
    """Product. Table: product. Unique product_code; indexed category and supplier_id."""

    __tablename__ = "product"

    product_code: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    product_name: Mapped[str] = mapped_column(String(200), nullable=False)
    category: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    unit_price: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    in_stock: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    supplier_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("supplier.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    supplier: Mapped[Supplier] = relationship(back_populates="products", lazy="raise")
