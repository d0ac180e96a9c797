"""Application services: use cases and validation helpers."""

from inventory.application.services.existence_rules import (
    CategoryExists,
    ExistenceRule,
    ExistsIn,
    NotExistsIn,
    ProductCodeUnique,
    SupplierExists,
    ensure_valid_references,
    validate_object,
)
from inventory.application.services.product_service import ProductService
from inventory.application.services.supplier_service import SupplierService
from inventory.application.services.todo_service import TodoService
from inventory.application.services.validation_cache_service import (
    ValidationCacheService,
)
from inventory.application.services.validation_scope import MultiValidationScope

__all__ = [
    "CategoryExists",
    "ExistenceRule",
    "ExistsIn",
    "MultiValidationScope",
    "NotExistsIn",
    "ProductCodeUnique",
    "ProductService",
    "SupplierExists",
    "SupplierService",
    "TodoService",
    "ValidationCacheService",
    "ensure_valid_references",
    "validate_object",
]
