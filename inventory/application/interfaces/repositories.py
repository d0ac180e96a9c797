"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from inventory.application.dtos.product import ProductData, ProductResult
    from inventory.application.dtos.supplier import SupplierData, SupplierResult
    from inventory.application.dtos.todo import TodoResult


class ITodoRepository(Protocol):
    """Protocol for todo item repository."""

    async def list_todos(self) -> list[TodoResult]:
        """Return all todo items, newest first."""

    async def get_todo(self, todo_id: int) -> TodoResult | None:
        """Return todo item by id or None."""

    async def create_todo(self, title: str) -> TodoResult:
        """Create a todo item (not done)."""

    async def update_todo(
        self, todo_id: int, title: str, is_done: bool
    ) -> TodoResult | None:
        """Replace title and done flag; None if not found."""

    async def delete_todo(self, todo_id: int) -> bool:
        """Delete by id; False if not found."""


class ISupplierRepository(Protocol):
    """Protocol for supplier repository."""

    async def list_suppliers(self) -> list[SupplierResult]:
        """Return all suppliers with product counts."""

    async def get_supplier(self, supplier_id: int) -> SupplierResult | None:
        """Return supplier by id (with product count) or None."""

    async def list_ids(self) -> list[int]:
        """Return ids of all suppliers."""

    async def exists(self, supplier_id: int) -> bool:
        """Return True if a supplier with this id exists."""

    async def create_supplier(self, data: SupplierData) -> SupplierResult:
        """Create a supplier."""

    async def update_supplier(
        self, supplier_id: int, data: SupplierData
    ) -> SupplierResult | None:
        """Replace writable fields; None if not found."""

    async def count_products(self, supplier_id: int) -> int:
        """Return the number of products referencing the supplier."""

    async def delete_supplier(self, supplier_id: int) -> bool:
        """Delete by id; False if not found."""

    async def list_active_supplier_products(self) -> list[ProductResult]:
        """Return products whose supplier is active."""


class IProductRepository(Protocol):
    """Protocol for product repository."""

    async def list_products(self) -> list[ProductResult]:
        """Return all products."""

    async def get_product(self, product_id: int) -> ProductResult | None:
        """Return product by id or None."""

    async def list_by_category(self, category: str) -> list[ProductResult]:
        """Return products in an exact category."""

    async def list_by_supplier(self, supplier_id: int) -> list[ProductResult]:
        """Return products of one supplier."""

    async def list_codes(self) -> list[str]:
        """Return all product codes."""

    async def list_categories(self) -> list[str]:
        """Return distinct product categories."""

    async def get_existing_codes(self, codes: list[str]) -> list[str]:
        """Return the subset of codes that already exist."""

    async def create_product(self, data: ProductData) -> ProductResult:
        """Create a product."""

    async def update_product(
        self, product_id: int, data: ProductData
    ) -> ProductResult | None:
        """Replace writable fields; None if not found."""

    async def delete_product(self, product_id: int) -> bool:
        """Delete by id; False if not found."""
