"""Supplier repository. Returns application DTOs with product counts.

When a ValidationStore is given, SupplierIds follows creates and deletes
once the surrounding transaction commits.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from inventory.application.dtos.product import ProductResult
from inventory.application.dtos.supplier import SupplierData, SupplierResult
from inventory.core.constants import CACHE_KEY_SUPPLIER_IDS
from inventory.core.validation_store import ValidationStore
from inventory.domain.exceptions import SupplierHasProductsException
from inventory.infrastructure.persistence.models.product import Product
from inventory.infrastructure.persistence.models.supplier import Supplier
from inventory.infrastructure.persistence.repositories.base import BaseRepository
from inventory.infrastructure.persistence.repositories.product_repo import (
    product_to_result,
)
from inventory.shared.utils.datetime import ensure_utc


def _to_result(s: Supplier, product_count: int) -> SupplierResult:
    return SupplierResult(
        id=s.id,
        supplier_code=s.supplier_code,
        supplier_name=s.supplier_name,
        contact_person=s.contact_person,
        email=s.email,
        phone=s.phone,
        address=s.address,
        city=s.city,
        country=s.country,
        is_active=s.is_active,
        created_at=ensure_utc(s.created_at),
        product_count=product_count,
    )


def _with_product_count() -> Select[Any]:
    return (
        select(Supplier, func.count(Product.id))
        .outerjoin(Product, Product.supplier_id == Supplier.id)
        .group_by(Supplier.id)
    )


def _apply(entity: Supplier, data: SupplierData) -> None:
    entity.supplier_code = data.supplier_code
    entity.supplier_name = data.supplier_name
    entity.contact_person = data.contact_person
    entity.email = data.email
    entity.phone = data.phone
    entity.address = data.address
    entity.city = data.city
    entity.country = data.country
    entity.is_active = data.is_active


class SupplierRepository(BaseRepository[Supplier]):
    """Supplier repository."""

    def __init__(
        self, db: AsyncSession, validation_store: ValidationStore | None = None
    ) -> None:
        super().__init__(db, Supplier, validation_store)

    async def list_suppliers(self) -> list[SupplierResult]:
        result = await self.db.execute(_with_product_count().order_by(Supplier.id))
        return [_to_result(s, count) for s, count in result.all()]

    async def get_supplier(self, supplier_id: int) -> SupplierResult | None:
        result = await self.db.execute(
            _with_product_count().where(Supplier.id == supplier_id)
        )
        row = result.first()
        return _to_result(row[0], row[1]) if row else None

    async def list_ids(self) -> list[int]:
        result = await self.db.execute(select(Supplier.id).order_by(Supplier.id))
        return list(result.scalars().all())

    async def exists(self, supplier_id: int) -> bool:
        result = await self.db.execute(
            select(Supplier.id).where(Supplier.id == supplier_id)
        )
        return result.scalar_one_or_none() is not None

    async def count_products(self, supplier_id: int) -> int:
        result = await self.db.execute(
            select(func.count(Product.id)).where(Product.supplier_id == supplier_id)
        )
        return result.scalar_one()

    async def create_supplier(self, data: SupplierData) -> SupplierResult:
        entity = Supplier()
        _apply(entity, data)
        created = await self.create(entity)
        return _to_result(created, 0)

    async def update_supplier(
        self, supplier_id: int, data: SupplierData
    ) -> SupplierResult | None:
        entity = await self.get_by_id(supplier_id)
        if not entity:
            return None
        _apply(entity, data)
        updated = await self.update(entity)
        return _to_result(updated, await self.count_products(supplier_id))

    async def delete_supplier(self, supplier_id: int) -> bool:
        """Delete supplier; raises SupplierHasProductsException while products reference it."""
        entity = await self.get_by_id(supplier_id)
        if not entity:
            return False
        await self.delete(entity)
        return True

    async def list_active_supplier_products(self) -> list[ProductResult]:
        result = await self.db.execute(
            select(Product, Supplier.supplier_name)
            .join(Supplier, Product.supplier_id == Supplier.id)
            .where(Supplier.is_active.is_(True))
            .order_by(Supplier.id, Product.id)
        )
        return [product_to_result(p, name) for p, name in result.all()]

    async def _after_insert(self, obj: Supplier) -> None:
        supplier_id = obj.id
        self._on_commit(lambda s: s.add_if_loaded(CACHE_KEY_SUPPLIER_IDS, supplier_id))

    async def _guard_delete(self, obj: Supplier) -> None:
        count = await self.count_products(obj.id)
        if count:
            raise SupplierHasProductsException(obj.id, count)

    async def _after_delete(self, obj: Supplier) -> None:
        supplier_id = obj.id
        self._on_commit(lambda s: s.remove_from_cache(CACHE_KEY_SUPPLIER_IDS, supplier_id))
