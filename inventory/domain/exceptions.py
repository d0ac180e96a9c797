"""Domain exceptions for the inventory service.

Business rule violations, independent of infrastructure. The presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class InventoryException(Exception):
    """Base exception for all inventory application errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON error responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(InventoryException):
    """Raised when input validation fails (e.g. blank title)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ReferenceValidationException(InventoryException):
    """Raised when submitted values fail existence rules against reference sets.

    errors is a list of {"field": ..., "message": ...} entries.
    """

    def __init__(self, errors: list[dict[str, str]]) -> None:
        super().__init__(
            "Reference validation failed",
            "REFERENCE_VALIDATION_ERROR",
            {"errors": errors},
        )


class ResourceNotFoundException(InventoryException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: int | str) -> None:
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class SupplierHasProductsException(InventoryException):
    """Raised when deleting a supplier that still has products."""

    def __init__(self, supplier_id: int, product_count: int) -> None:
        super().__init__(
            "Cannot delete supplier with existing products.",
            "SUPPLIER_HAS_PRODUCTS",
            {"supplier_id": supplier_id, "product_count": product_count},
        )
