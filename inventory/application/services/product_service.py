"""Product use cases, including batch validation against fresh reference data."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from inventory.application.dtos.product import ProductData, ProductResult
from inventory.application.dtos.validation import ItemValidationError
from inventory.application.interfaces.repositories import (
    IProductRepository,
    ISupplierRepository,
)
from inventory.application.services.validation_scope import MultiValidationScope
from inventory.core.constants import (
    CACHE_KEY_CATEGORIES,
    CACHE_KEY_PRODUCT_CODES,
    CACHE_KEY_SUPPLIER_IDS,
)
from inventory.core.validation_store import ValidationStore
from inventory.domain.exceptions import ResourceNotFoundException

logger = logging.getLogger(__name__)


class ProductService:
    """CRUD and lookups over products.

    Reference checks on create/update payloads (supplier exists, code unique)
    run before these methods are called; see existence_rules.
    """

    def __init__(
        self,
        product_repo: IProductRepository,
        supplier_repo: ISupplierRepository,
    ) -> None:
        self.product_repo = product_repo
        self.supplier_repo = supplier_repo

    async def list_products(self) -> list[ProductResult]:
        return await self.product_repo.list_products()

    async def get_product(self, product_id: int) -> ProductResult:
        product = await self.product_repo.get_product(product_id)
        if product is None:
            raise ResourceNotFoundException("Product", product_id)
        return product

    async def list_by_category(self, category: str) -> list[ProductResult]:
        return await self.product_repo.list_by_category(category)

    async def list_by_supplier(self, supplier_id: int) -> list[ProductResult]:
        return await self.product_repo.list_by_supplier(supplier_id)

    async def get_existing_codes(self, codes: list[str]) -> list[str]:
        """Return which of the given product codes already exist."""
        return await self.product_repo.get_existing_codes(codes)

    async def create_product(self, data: ProductData) -> ProductResult:
        created = await self.product_repo.create_product(data)
        logger.info("Product created: id=%s code=%s", created.id, created.product_code)
        return created

    async def update_product(self, product_id: int, data: ProductData) -> ProductResult:
        updated = await self.product_repo.update_product(product_id, data)
        if updated is None:
            raise ResourceNotFoundException("Product", product_id)
        return updated

    async def delete_product(self, product_id: int) -> None:
        if not await self.product_repo.delete_product(product_id):
            raise ResourceNotFoundException("Product", product_id)

    async def validate_batch(
        self,
        items: list[Mapping[str, Any]],
        model: type[BaseModel],
    ) -> list[ItemValidationError]:
        """Validate product drafts against reference data read now from the database.

        Uses a private store so the process-wide sets are left untouched.
        """
        supplier_ids = await self.supplier_repo.list_ids()
        categories = await self.product_repo.list_categories()
        codes = await self.product_repo.list_codes()
        with (
            MultiValidationScope(ValidationStore())
            .load_cache(CACHE_KEY_SUPPLIER_IDS, supplier_ids, int)
            .load_cache(CACHE_KEY_CATEGORIES, categories, str)
            .load_cache(CACHE_KEY_PRODUCT_CODES, codes, str)
        ) as scope:
            return scope.validate_list(items, model)
