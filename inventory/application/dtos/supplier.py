"""DTOs for suppliers (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class SupplierData:
    """Writable supplier fields (create and full update)."""

    supplier_code: str
    supplier_name: str
    contact_person: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    city: str | None = None
    country: str | None = None
    is_active: bool = True


@dataclass(frozen=True)
class SupplierResult:
    """Supplier read-model with the number of products it supplies."""

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
