"""Supplier use cases."""

from __future__ import annotations

import logging

from inventory.application.dtos.product import ProductResult
from inventory.application.dtos.supplier import SupplierData, SupplierResult
from inventory.application.interfaces.repositories import ISupplierRepository
from inventory.domain.exceptions import ResourceNotFoundException

logger = logging.getLogger(__name__)


class SupplierService:
    """CRUD over suppliers. Deleting a supplier that still has products is refused."""

    def __init__(self, supplier_repo: ISupplierRepository) -> None:
        self.supplier_repo = supplier_repo

    async def list_suppliers(self) -> list[SupplierResult]:
        return await self.supplier_repo.list_suppliers()

    async def list_ids(self) -> list[int]:
        return await self.supplier_repo.list_ids()

    async def get_supplier(self, supplier_id: int) -> SupplierResult:
        supplier = await self.supplier_repo.get_supplier(supplier_id)
        if supplier is None:
            raise ResourceNotFoundException("Supplier", supplier_id)
        return supplier

    async def create_supplier(self, data: SupplierData) -> SupplierResult:
        created = await self.supplier_repo.create_supplier(data)
        logger.info("Supplier created: id=%s code=%s", created.id, created.supplier_code)
        return created

    async def update_supplier(self, supplier_id: int, data: SupplierData) -> SupplierResult:
        updated = await self.supplier_repo.update_supplier(supplier_id, data)
        if updated is None:
            raise ResourceNotFoundException("Supplier", supplier_id)
        return updated

    async def delete_supplier(self, supplier_id: int) -> None:
        """Delete supplier. Raises SupplierHasProductsException while products reference it."""
        if not await self.supplier_repo.delete_supplier(supplier_id):
            raise ResourceNotFoundException("Supplier", supplier_id)
        logger.info("Supplier deleted: id=%s", supplier_id)

    async def get_active_supplier_products(self) -> list[ProductResult]:
        return await self.supplier_repo.list_active_supplier_products()
