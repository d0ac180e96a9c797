"""Supplier API: thin routes delegating to SupplierService."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.exc import IntegrityError

from inventory.api.v1.dependencies import (
    get_supplier_service,
    get_supplier_service_for_write,
)
from inventory.application.services import SupplierService
from inventory.core.limiter import limit_writes
from inventory.schemas.product import ProductResponse
from inventory.schemas.supplier import (
    SupplierCreateRequest,
    SupplierResponse,
    SupplierUpdateRequest,
)

router = APIRouter()

_DUPLICATE_CODE = "Supplier with this supplier_code already exists"


@router.get("", response_model=list[SupplierResponse])
async def list_suppliers(
    service: Annotated[SupplierService, Depends(get_supplier_service)],
):
    """List suppliers with their product counts."""
    return [SupplierResponse.model_validate(s) for s in await service.list_suppliers()]


@router.get("/ids", response_model=list[int])
async def list_supplier_ids(
    service: Annotated[SupplierService, Depends(get_supplier_service)],
):
    return await service.list_ids()


@router.get("/with-products", response_model=list[ProductResponse])
async def list_active_supplier_products(
    service: Annotated[SupplierService, Depends(get_supplier_service)],
):
    """Products whose supplier is active, grouped by supplier id."""
    products = await service.get_active_supplier_products()
    return [ProductResponse.model_validate(p) for p in products]


@router.get("/{supplier_id}", response_model=SupplierResponse)
async def get_supplier(
    supplier_id: int,
    service: Annotated[SupplierService, Depends(get_supplier_service)],
):
    return SupplierResponse.model_validate(await service.get_supplier(supplier_id))


@router.post("", response_model=SupplierResponse, status_code=201)
@limit_writes
async def create_supplier(
    request: Request,
    body: SupplierCreateRequest,
    service: Annotated[SupplierService, Depends(get_supplier_service_for_write)],
):
    """Create an active supplier. Its id becomes valid for product references at once."""
    try:
        created = await service.create_supplier(body.to_data())
    except IntegrityError as e:
        raise HTTPException(status_code=409, detail=_DUPLICATE_CODE) from e
    return SupplierResponse.model_validate(created)


@router.put("/{supplier_id}", response_model=SupplierResponse)
@limit_writes
async def update_supplier(
    request: Request,
    supplier_id: int,
    body: SupplierUpdateRequest,
    service: Annotated[SupplierService, Depends(get_supplier_service_for_write)],
):
    try:
        updated = await service.update_supplier(supplier_id, body.to_data())
    except IntegrityError as e:
        raise HTTPException(status_code=409, detail=_DUPLICATE_CODE) from e
    return SupplierResponse.model_validate(updated)


@router.delete("/{supplier_id}", status_code=204)
@limit_writes
async def delete_supplier(
    request: Request,
    supplier_id: int,
    service: Annotated[SupplierService, Depends(get_supplier_service_for_write)],
):
    """Delete a supplier; 409 while products still reference it."""
    await service.delete_supplier(supplier_id)
