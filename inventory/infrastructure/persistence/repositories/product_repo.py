"""Product repository. Returns application DTOs joined with supplier name.

When a ValidationStore is given, ProductCodes and Categories follow writes
once the surrounding transaction commits.
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from inventory.application.dtos.product import ProductData, ProductResult
from inventory.core.constants import CACHE_KEY_CATEGORIES, CACHE_KEY_PRODUCT_CODES
from inventory.core.validation_store import ValidationStore
from inventory.domain.exceptions import ResourceNotFoundException
from inventory.infrastructure.persistence.models.product import Product
from inventory.infrastructure.persistence.models.supplier import Supplier
from inventory.infrastructure.persistence.repositories.base import BaseRepository
from inventory.shared.utils.datetime import ensure_utc, utc_now

logger = logging.getLogger(__name__)


def product_to_result(p: Product, supplier_name: str) -> ProductResult:
    """Map ORM Product plus its supplier's name to ProductResult."""
    return ProductResult(
        id=p.id,
        product_code=p.product_code,
        product_name=p.product_name,
        category=p.category,
        unit_price=p.unit_price,
        quantity=p.quantity,
        in_stock=p.in_stock,
        description=p.description,
        created_at=ensure_utc(p.created_at),
        updated_at=ensure_utc(p.updated_at),
        supplier_id=p.supplier_id,
        supplier_name=supplier_name,
    )


def _with_supplier_name() -> Select[Any]:
    return select(Product, Supplier.supplier_name).join(
        Supplier, Product.supplier_id == Supplier.id
    )


class ProductRepository(BaseRepository[Product]):
    """Product repository."""

    def __init__(
        self, db: AsyncSession, validation_store: ValidationStore | None = None
    ) -> None:
        super().__init__(db, Product, validation_store)

    async def _fetch(self, stmt: Select[Any]) -> list[ProductResult]:
        result = await self.db.execute(stmt)
        return [product_to_result(p, name) for p, name in result.all()]

    async def _supplier_name(self, supplier_id: int) -> str:
        result = await self.db.execute(
            select(Supplier.supplier_name).where(Supplier.id == supplier_id)
        )
        name = result.scalar_one_or_none()
        if name is None:
            raise ResourceNotFoundException("Supplier", supplier_id)
        return name

    async def list_products(self) -> list[ProductResult]:
        return await self._fetch(_with_supplier_name().order_by(Product.id))

    async def get_product(self, product_id: int) -> ProductResult | None:
        rows = await self._fetch(_with_supplier_name().where(Product.id == product_id))
        return rows[0] if rows else None

    async def list_by_category(self, category: str) -> list[ProductResult]:
        return await self._fetch(
            _with_supplier_name().where(Product.category == category).order_by(Product.id)
        )

    async def list_by_supplier(self, supplier_id: int) -> list[ProductResult]:
        return await self._fetch(
            _with_supplier_name()
            .where(Product.supplier_id == supplier_id)
            .order_by(Product.id)
        )

    async def list_codes(self) -> list[str]:
        result = await self.db.execute(select(Product.product_code))
        return list(result.scalars().all())

    async def list_categories(self) -> list[str]:
        result = await self.db.execute(
            select(Product.category).distinct().order_by(Product.category)
        )
        return list(result.scalars().all())

    async def get_existing_codes(self, codes: list[str]) -> list[str]:
        if not codes:
            return []
        result = await self.db.execute(
            select(Product.product_code)
            .where(Product.product_code.in_(set(codes)))
            .order_by(Product.product_code)
        )
        return list(result.scalars().all())

    async def _category_in_use(self, category: str) -> bool:
        result = await self.db.execute(
            select(func.count(Product.id)).where(Product.category == category)
        )
        return result.scalar_one() > 0

    async def create_product(self, data: ProductData) -> ProductResult:
        supplier_name = await self._supplier_name(data.supplier_id)
        entity = Product(
            product_code=data.product_code,
            product_name=data.product_name,
            category=data.category,
            unit_price=data.unit_price,
            quantity=data.quantity,
            in_stock=data.in_stock,
            description=data.description,
            supplier_id=data.supplier_id,
        )
        created = await self.create(entity)
        return product_to_result(created, supplier_name)

    async def update_product(
        self, product_id: int, data: ProductData
    ) -> ProductResult | None:
        entity = await self.get_by_id(product_id)
        if not entity:
            return None
        supplier_name = await self._supplier_name(data.supplier_id)
        old_code, old_category = entity.product_code, entity.category
        entity.product_code = data.product_code
        entity.product_name = data.product_name
        entity.category = data.category
        entity.unit_price = data.unit_price
        entity.quantity = data.quantity
        entity.in_stock = data.in_stock
        entity.description = data.description
        entity.supplier_id = data.supplier_id
        entity.updated_at = utc_now()
        updated = await self.update(entity)
        if self._store is not None:
            if old_code != updated.product_code:
                self._on_commit(
                    lambda s: s.remove_from_cache(CACHE_KEY_PRODUCT_CODES, old_code)
                )
            if old_category != updated.category and not await self._category_in_use(
                old_category
            ):
                self._on_commit(
                    lambda s: s.remove_from_cache(CACHE_KEY_CATEGORIES, old_category)
                )
        return product_to_result(updated, supplier_name)

    async def delete_product(self, product_id: int) -> bool:
        entity = await self.get_by_id(product_id)
        if not entity:
            return False
        await self.delete(entity)
        return True

    async def _after_insert(self, obj: Product) -> None:
        code, category = obj.product_code, obj.category
        self._on_commit(lambda s: s.add_if_loaded(CACHE_KEY_PRODUCT_CODES, code))
        self._on_commit(lambda s: s.add_if_loaded(CACHE_KEY_CATEGORIES, category))

    async def _after_update(self, obj: Product) -> None:
        await self._after_insert(obj)

    async def _after_delete(self, obj: Product) -> None:
        if self._store is None:
            return
        code, category = obj.product_code, obj.category
        self._on_commit(lambda s: s.remove_from_cache(CACHE_KEY_PRODUCT_CODES, code))
        if not await self._category_in_use(category):
            self._on_commit(lambda s: s.remove_from_cache(CACHE_KEY_CATEGORIES, category))
            logger.debug(
                "Category %r no longer used; dropping it from the reference set on commit",
                category,
            )
