"""Product API: thin routes delegating to ProductService.

Create and update bodies are checked against the validation store's
reference sets before any database work.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.exc import IntegrityError

from inventory.api.v1.dependencies import (
    get_product_service,
    get_product_service_for_write,
    get_validation_store,
)
from inventory.application.services import ProductService, ensure_valid_references
from inventory.core.limiter import limit_writes
from inventory.core.validation_store import ValidationStore
from inventory.schemas.product import (
    ExistingCodesRequest,
    ExistingCodesResponse,
    ItemValidationErrorResponse,
    ProductBatchValidationRequest,
    ProductBatchValidationResponse,
    ProductCreateRequest,
    ProductDraft,
    ProductResponse,
    ProductUpdateRequest,
)

router = APIRouter()

_DUPLICATE_CODE = "Product with this product_code already exists"


@router.get("", response_model=list[ProductResponse])
async def list_products(
    service: Annotated[ProductService, Depends(get_product_service)],
):
    return [ProductResponse.model_validate(p) for p in await service.list_products()]


@router.get("/category/{category}", response_model=list[ProductResponse])
async def list_products_by_category(
    category: str,
    service: Annotated[ProductService, Depends(get_product_service)],
):
    products = await service.list_by_category(category)
    return [ProductResponse.model_validate(p) for p in products]


@router.get("/supplier/{supplier_id}", response_model=list[ProductResponse])
async def list_products_by_supplier(
    supplier_id: int,
    service: Annotated[ProductService, Depends(get_product_service)],
):
    products = await service.list_by_supplier(supplier_id)
    return [ProductResponse.model_validate(p) for p in products]


@router.post("/existing-codes", response_model=ExistingCodesResponse)
async def get_existing_codes(
    body: ExistingCodesRequest,
    service: Annotated[ProductService, Depends(get_product_service)],
):
    """Return which of the submitted product codes are already taken."""
    return ExistingCodesResponse(existing=await service.get_existing_codes(body.codes))


@router.post("/validate", response_model=ProductBatchValidationResponse)
async def validate_products(
    body: ProductBatchValidationRequest,
    service: Annotated[ProductService, Depends(get_product_service)],
):
    """Validate a batch of product drafts without saving them.

    Each item is checked for shape (name, supplier id) and against current
    supplier ids, categories and product codes. Only failing items are listed.
    """
    errors = await service.validate_batch(body.items, ProductDraft)
    return ProductBatchValidationResponse(
        total=len(body.items),
        invalid=len(errors),
        errors=[ItemValidationErrorResponse.model_validate(e) for e in errors],
    )


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: int,
    service: Annotated[ProductService, Depends(get_product_service)],
):
    return ProductResponse.model_validate(await service.get_product(product_id))


@router.post("", response_model=ProductResponse, status_code=201)
@limit_writes
async def create_product(
    request: Request,
    body: ProductCreateRequest,
    store: Annotated[ValidationStore, Depends(get_validation_store)],
    service: Annotated[ProductService, Depends(get_product_service_for_write)],
):
    """Create a product. Unknown supplier or taken code is rejected with 400."""
    ensure_valid_references(body, store)
    try:
        created = await service.create_product(body.to_data())
    except IntegrityError as e:
        raise HTTPException(status_code=409, detail=_DUPLICATE_CODE) from e
    return ProductResponse.model_validate(created)


@router.put("/{product_id}", response_model=ProductResponse)
@limit_writes
async def update_product(
    request: Request,
    product_id: int,
    body: ProductUpdateRequest,
    store: Annotated[ValidationStore, Depends(get_validation_store)],
    service: Annotated[ProductService, Depends(get_product_service_for_write)],
):
    ensure_valid_references(body, store)
    try:
        updated = await service.update_product(product_id, body.to_data())
    except IntegrityError as e:
        raise HTTPException(status_code=409, detail=_DUPLICATE_CODE) from e
    return ProductResponse.model_validate(updated)


@router.delete("/{product_id}", status_code=204)
@limit_writes
async def delete_product(
    request: Request,
    product_id: int,
    service: Annotated[ProductService, Depends(get_product_service_for_write)],
):
    await service.delete_product(product_id)
