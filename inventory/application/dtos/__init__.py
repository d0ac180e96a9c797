"""Application DTOs (no dependency on ORM or HTTP schemas)."""

from inventory.application.dtos.product import ProductData, ProductResult
from inventory.application.dtos.supplier import SupplierData, SupplierResult
from inventory.application.dtos.todo import TodoResult
from inventory.application.dtos.validation import FieldError, ItemValidationError

__all__ = [
    "FieldError",
    "ItemValidationError",
    "ProductData",
    "ProductResult",
    "SupplierData",
    "SupplierResult",
    "TodoResult",
]
