"""Domain layer: exceptions shared by application and infrastructure layers."""

from inventory.domain.exceptions import (
    InventoryException,
    ReferenceValidationException,
    ResourceNotFoundException,
    SupplierHasProductsException,
    ValidationException,
)

__all__ = [
    "InventoryException",
    "ReferenceValidationException",
    "ResourceNotFoundException",
    "SupplierHasProductsException",
    "ValidationException",
]
