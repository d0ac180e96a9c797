"""DTOs for products (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class ProductData:
    """Writable product fields (create and full update)."""

    product_code: str
    product_name: str
    category: str
    unit_price: Decimal
    quantity: int
    supplier_id: int
    in_stock: bool = True
    description: str | None = None


@dataclass(frozen=True)
class ProductResult:
    """Product read-model joined with its supplier's name."""

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

    @property
    def total_value(self) -> Decimal:
        return self.unit_price * self.quantity
