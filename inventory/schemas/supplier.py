"""Supplier API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from inventory.application.dtos.supplier import SupplierData


class SupplierCreateRequest(BaseModel):
    """Request body for creating a supplier (always created active)."""

    supplier_code: str = Field(..., min_length=1, max_length=50)
    supplier_name: str = Field(..., min_length=1, max_length=200)
    contact_person: str | None = Field(default=None, max_length=100)
    email: str | None = Field(default=None, max_length=255)
    phone: str | None = Field(default=None, max_length=50)
    address: str | None = Field(default=None, max_length=500)
    city: str | None = Field(default=None, max_length=100)
    country: str | None = Field(default=None, max_length=100)

    def to_data(self) -> SupplierData:
        return SupplierData(**self.model_dump(), is_active=True)


class SupplierUpdateRequest(SupplierCreateRequest):
    """Request body for PUT (full replacement)."""

    is_active: bool = True

    def to_data(self) -> SupplierData:
        return SupplierData(**self.model_dump())


class SupplierResponse(BaseModel):
    """Supplier with the number of products it supplies."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    supplier_code: str
    supplier_name: str
    contact_person: str | None
    email: str | None
    phone: str | None
    address: str | None
    city: str | None
    country: str | None
    is_active: bool
    created_at: datetime
    product_count: int
