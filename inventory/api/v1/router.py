"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from inventory.api.v1.dependencies.
"""

from fastapi import APIRouter

from inventory.api.v1.endpoints import (
    health,
    products,
    suppliers,
    todos,
    validation_cache,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(todos.router, prefix="/todos", tags=["todos"])
api_router.include_router(suppliers.router, prefix="/suppliers", tags=["suppliers"])
api_router.include_router(products.router, prefix="/products", tags=["products"])
api_router.include_router(
    validation_cache.router, prefix="/validation/cache", tags=["validation"]
)
