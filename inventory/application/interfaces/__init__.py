"""Application ports (repository protocols)."""

from inventory.application.interfaces.repositories import (
    IProductRepository,
    ISupplierRepository,
    ITodoRepository,
)

__all__ = ["IProductRepository", "ISupplierRepository", "ITodoRepository"]
