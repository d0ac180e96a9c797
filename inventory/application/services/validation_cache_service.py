"""Loads validation reference sets from the database into a ValidationStore."""

from __future__ import annotations

import logging

from inventory.application.interfaces.repositories import (
    IProductRepository,
    ISupplierRepository,
)
from inventory.core.constants import (
    CACHE_KEY_CATEGORIES,
    CACHE_KEY_PRODUCT_CODES,
    CACHE_KEY_SUPPLIER_IDS,
)
from inventory.core.validation_store import ValidationStore

logger = logging.getLogger(__name__)


class ValidationCacheService:
    """Data-source side of the validation store: fetch authoritative values, publish sets."""

    def __init__(
        self,
        store: ValidationStore,
        supplier_repo: ISupplierRepository,
        product_repo: IProductRepository,
    ) -> None:
        self.store = store
        self.supplier_repo = supplier_repo
        self.product_repo = product_repo

    async def load_supplier_ids(self) -> int:
        """Load all supplier ids into SupplierIds. Returns the number loaded."""
        ids = await self.supplier_repo.list_ids()
        self.store.set_cache(CACHE_KEY_SUPPLIER_IDS, ids, int)
        return len(ids)

    async def load_categories(self) -> int:
        """Load distinct product categories into Categories."""
        categories = await self.product_repo.list_categories()
        self.store.set_cache(CACHE_KEY_CATEGORIES, categories, str)
        return len(categories)

    async def load_product_codes(self) -> int:
        """Load all product codes into ProductCodes."""
        codes = await self.product_repo.list_codes()
        self.store.set_cache(CACHE_KEY_PRODUCT_CODES, codes, str)
        return len(codes)

    async def reload_all(self, source: str) -> dict[str, int]:
        """Reload every reference set, then mark the store initialized from source.

        Sets become visible one at a time; a reader may see a new SupplierIds
        next to old ProductCodes while this runs.
        """
        counts = {
            CACHE_KEY_SUPPLIER_IDS: await self.load_supplier_ids(),
            CACHE_KEY_CATEGORIES: await self.load_categories(),
            CACHE_KEY_PRODUCT_CODES: await self.load_product_codes(),
        }
        self.store.mark_initialized(source)
        logger.info("Validation reference data reloaded (source=%s): %s", source, counts)
        return counts

    async def get_supplier_ids(self) -> list[int]:
        """Supplier ids straight from the database (no caching)."""
        return await self.supplier_repo.list_ids()

    async def supplier_exists(self, supplier_id: int) -> bool:
        """Check the database directly, bypassing the cache."""
        return await self.supplier_repo.exists(supplier_id)

    def clear_all_caches(self) -> None:
        self.store.clear_all_caches()
        self.store.reset_initialization()
