"""Sample suppliers and products for development databases.

seed_sample_data() inserts 5 suppliers and 12 products when both tables are
empty; otherwise it does nothing.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from inventory.application.dtos.product import ProductData
from inventory.application.dtos.supplier import SupplierData
from inventory.infrastructure.persistence.models.product import Product
from inventory.infrastructure.persistence.models.supplier import Supplier
from inventory.infrastructure.persistence.repositories.product_repo import (
    ProductRepository,
)
from inventory.infrastructure.persistence.repositories.supplier_repo import (
    SupplierRepository,
)

logger = logging.getLogger(__name__)

SAMPLE_SUPPLIERS: tuple[SupplierData, ...] = (
    SupplierData(
        supplier_code="SUP001",
        supplier_name="TechCorp Solutions",
        contact_person="John Smith",
        email="john@techcorp.com",
        phone="+1-555-0100",
        address="123 Tech Street",
        city="San Francisco",
        country="USA",
    ),
    SupplierData(
        supplier_code="SUP002",
        supplier_name="Global Electronics Ltd",
        contact_person="Sarah Johnson",
        email="sarah@globalelec.com",
        phone="+1-555-0200",
        address="456 Innovation Ave",
        city="Tokyo",
        country="Japan",
    ),
    SupplierData(
        supplier_code="SUP003",
        supplier_name="FurniturePro International",
        contact_person="Michael Chen",
        email="michael@furnipro.com",
        phone="+1-555-0300",
        address="789 Design Boulevard",
        city="Milan",
        country="Italy",
    ),
    SupplierData(
        supplier_code="SUP004",
        supplier_name="BookStore Wholesale",
        contact_person="Emily Brown",
        email="emily@bookstore.com",
        phone="+1-555-0400",
        address="321 Library Lane",
        city="London",
        country="UK",
    ),
    SupplierData(
        supplier_code="SUP005",
        supplier_name="Office Supplies Co",
        contact_person="David Lee",
        email="david@officesupplies.com",
        phone="+1-555-0500",
        address="654 Business Park",
        city="Singapore",
        country="Singapore",
    ),
)

# (code, name, category, unit_price, quantity, in_stock, description, supplier index)
_SAMPLE_PRODUCTS: tuple[tuple[str, str, str, str, int, bool, str, int], ...] = (
    ("P001", "Business Laptop", "Electronics", "85000", 15, True, "High-performance notebook PC", 0),
    ("P002", "Wireless Earbuds", "Electronics", "2500", 50, True, "Bluetooth earbuds", 1),
    ("P003", "Ergonomic Office Chair", "Furniture", "25000", 8, True, "Adjustable mesh chair", 2),
    ("P004", "LED Monitor 27-inch", "Electronics", "35000", 12, True, "4K display", 1),
    ("P005", "Mechanical Keyboard", "Electronics", "8500", 25, True, "RGB backlit keyboard", 0),
    ("P006", "Desk Lamp", "Office", "4500", 20, True, "Dimmable LED lamp", 4),
    ("P007", "Book: Web Apps in Practice", "Books", "3200", 0, False, "Developer handbook", 3),
    ("P008", "USB Hub 7-port", "Electronics", "1800", 35, True, "USB 3.0 hub", 0),
    ("P009", "Desk Mat", "Office", "2200", 18, True, "Large desk mat 90x45cm", 4),
    ("P010", "Noise-cancelling Headset", "Electronics", "6500", 22, True, "Over-ear headset", 1),
    ("P011", "Web Camera 1080p", "Electronics", "7800", 14, True, "Full HD webcam", 0),
    ("P012", "Ballpoint Pens (3 pack)", "Office", "1500", 30, True, "Assorted colours", 4),
)


async def seed_sample_data(session: AsyncSession) -> bool:
    """Insert sample suppliers and products into empty tables. Returns True if seeded."""
    suppliers = await session.execute(select(func.count(Supplier.id)))
    products = await session.execute(select(func.count(Product.id)))
    if suppliers.scalar_one() or products.scalar_one():
        logger.info("Seed skipped: suppliers or products already present")
        return False

    supplier_repo = SupplierRepository(session)
    product_repo = ProductRepository(session)
    supplier_ids = [
        (await supplier_repo.create_supplier(data)).id for data in SAMPLE_SUPPLIERS
    ]
    for code, name, category, price, qty, in_stock, description, idx in _SAMPLE_PRODUCTS:
        await product_repo.create_product(
            ProductData(
                product_code=code,
                product_name=name,
                category=category,
                unit_price=Decimal(price),
                quantity=qty,
                in_stock=in_stock,
                description=description,
                supplier_id=supplier_ids[idx],
            )
        )
    logger.info(
        "Seeded %d suppliers and %d products", len(supplier_ids), len(_SAMPLE_PRODUCTS)
    )
    return True
