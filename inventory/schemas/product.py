"""Product API schemas.

Fields carrying existence rules (SupplierExists, ProductCodeUnique,
CategoryExists) are checked against the validation store after parsing.
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field

from inventory.application.dtos.product import ProductData
from inventory.application.services.existence_rules import (
    CategoryExists,
    ProductCodeUnique,
    SupplierExists,
)


class _ProductFields(BaseModel):
    product_name: str = Field(..., min_length=1, max_length=200)
    category: str = Field(..., min_length=1, max_length=100)
    unit_price: Decimal = Field(..., ge=0, max_digits=18, decimal_places=2)
    quantity: int = Field(..., ge=0)
    in_stock: bool = True
    description: str | None = Field(default=None, max_length=2000)
    supplier_id: Annotated[int, SupplierExists()]

    def to_data(self) -> ProductData:
        return ProductData(**self.model_dump())


class ProductCreateRequest(_ProductFields):
    """Request body for creating a product; code must be new."""

    product_code: Annotated[
        str, Field(min_length=1, max_length=50), ProductCodeUnique()
    ]


class ProductUpdateRequest(_ProductFields):
    """Request body for PUT (full replacement)."""

    product_code: str = Field(..., min_length=1, max_length=50)


class ProductDraft(BaseModel):
    """One entry of a batch submitted to POST /products/validate."""

    product_name: str = Field(..., min_length=2, max_length=200)
    supplier_id: Annotated[int, SupplierExists()]
    category: Annotated[str | None, CategoryExists()] = None
    product_code: Annotated[str | None, ProductCodeUnique()] = None


class ProductResponse(BaseModel):
    """Product with supplier name and total stock value."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    product_code: str
    product_name: str
    category: str
    unit_price: Decimal
    quantity: int
    in_stock: bool
    description: str | None
    created_at: datetime
    updated_at: datetime | None
    supplier_id: int
    supplier_name: str
    total_value: Decimal


class ExistingCodesRequest(BaseModel):
    codes: list[str] = Field(default_factory=list, max_length=1000)


class ExistingCodesResponse(BaseModel):
    existing: list[str]


class ProductBatchValidationRequest(BaseModel):
    items: list[dict[str, Any]] = Field(..., max_length=1000)


class ItemValidationErrorResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    index: int
    item: Any
    errors: list[str]


class ProductBatchValidationResponse(BaseModel):
    total: int
    invalid: int
    errors: list[ItemValidationErrorResponse]
