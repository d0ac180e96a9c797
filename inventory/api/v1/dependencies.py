"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions, the validation store and
application services. Routes depend only on these, not on infra directly.
Read paths use get_db; write paths use get_db_transactional and hand the
validation store to repositories so reference sets follow the writes.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from inventory.application.services import (
    ProductService,
    SupplierService,
    TodoService,
    ValidationCacheService,
)
from inventory.core.validation_store import ValidationStore
from inventory.infrastructure.persistence.database import (
    get_db,
    get_db_transactional,
)
from inventory.infrastructure.persistence.repositories import (
    ProductRepository,
    SupplierRepository,
    TodoRepository,
)


def get_validation_store(request: Request) -> ValidationStore:
    """Process-wide validation store created by the lifespan."""
    return request.app.state.validation_store


# ---- Todos ----


async def get_todo_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TodoService:
    return TodoService(TodoRepository(db))


async def get_todo_service_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> TodoService:
    return TodoService(TodoRepository(db))


# ---- Suppliers ----


async def get_supplier_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> SupplierService:
    return SupplierService(SupplierRepository(db))


async def get_supplier_service_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
    store: Annotated[ValidationStore, Depends(get_validation_store)],
) -> SupplierService:
    """Supplier service whose repository keeps SupplierIds current."""
    return SupplierService(SupplierRepository(db, validation_store=store))


# ---- Products ----


async def get_product_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ProductService:
    return ProductService(ProductRepository(db), SupplierRepository(db))


async def get_product_service_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
    store: Annotated[ValidationStore, Depends(get_validation_store)],
) -> ProductService:
    """Product service whose repository keeps ProductCodes and Categories current."""
    return ProductService(
        ProductRepository(db, validation_store=store),
        SupplierRepository(db, validation_store=store),
    )


# ---- Validation cache ----


async def get_validation_cache_service(
    db: Annotated[AsyncSession, Depends(get_db)],
    store: Annotated[ValidationStore, Depends(get_validation_store)],
) -> ValidationCacheService:
    return ValidationCacheService(
        store, SupplierRepository(db), ProductRepository(db)
    )
