"""Persistence models: ORM entities and mixins."""

from inventory.infrastructure.persistence.models.mixins import (
    CreatedAtMixin,
    IntIdMixin,
    UpdatedAtMixin,
)
from inventory.infrastructure.persistence.models.product import Product
from inventory.infrastructure.persistence.models.supplier import Supplier
from inventory.infrastructure.persistence.models.todo_item import TodoItem

__all__ = [
    "CreatedAtMixin",
    "IntIdMixin",
    "Product",
    "Supplier",
    "TodoItem",
    "UpdatedAtMixin",
]
