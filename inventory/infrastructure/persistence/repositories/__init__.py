"""SQLAlchemy repositories returning application DTOs."""

from inventory.infrastructure.persistence.repositories.base import BaseRepository
from inventory.infrastructure.persistence.repositories.product_repo import (
    ProductRepository,
)
from inventory.infrastructure.persistence.repositories.supplier_repo import (
    SupplierRepository,
)
from inventory.infrastructure.persistence.repositories.todo_repo import TodoRepository

__all__ = [
    "BaseRepository",
    "ProductRepository",
    "SupplierRepository",
    "TodoRepository",
]
