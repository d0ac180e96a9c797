"""Product endpoints: reference checks on write, lookups, batch validation."""

from httpx import AsyncClient

from inventory.core.validation_store import ValidationStore


def _product(**overrides) -> dict:
    body = {
        "product_code": "P100",
        "product_name": "Standing Desk",
        "category": "Furniture",
        "unit_price": "450.00",
        "quantity": 3,
        "supplier_id": 3,
        "description": "Height adjustable",
    }
    body.update(overrides)
    return body


async def test_list_products(client: AsyncClient, seeded: ValidationStore) -> None:
    response = await client.get("/api/v1/products")
    assert response.status_code == 200
    products = response.json()
    assert len(products) == 12
    assert products[0]["product_code"] == "P001"
    assert products[0]["supplier_name"] == "TechCorp Solutions"


async def test_create_product(client: AsyncClient, seeded: ValidationStore) -> None:
    """A created product carries its supplier name and total value; its code becomes taken."""
    response = await client.post("/api/v1/products", json=_product())
    assert response.status_code == 201
    product = response.json()
    assert product["supplier_name"] == "FurniturePro International"
    assert float(product["total_value"]) == 1350.0
    assert product["updated_at"] is None
    assert seeded.contains("ProductCodes", "P100")


async def test_create_product_new_category_joins_reference_set(
    client: AsyncClient, seeded: ValidationStore
) -> None:
    assert not seeded.contains("Categories", "Garden")
    response = await client.post("/api/v1/products", json=_product(category="Garden"))
    assert response.status_code == 201
    assert seeded.contains("Categories", "Garden")


async def test_create_product_unknown_supplier_is_rejected(
    client: AsyncClient, seeded: ValidationStore
) -> None:
    """Supplier ids outside SupplierIds fail before any database work."""
    response = await client.post("/api/v1/products", json=_product(supplier_id=999))
    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "REFERENCE_VALIDATION_ERROR"
    assert body["details"]["errors"] == [
        {"field": "supplier_id", "message": "Supplier ID does not exist in the system"}
    ]
    assert not seeded.contains("ProductCodes", "P100")


async def test_create_product_taken_code_is_rejected(
    client: AsyncClient, seeded: ValidationStore
) -> None:
    response = await client.post("/api/v1/products", json=_product(product_code="P001"))
    assert response.status_code == 400
    errors = response.json()["details"]["errors"]
    assert errors == [
        {"field": "product_code", "message": "Product Code already exists in the system"}
    ]


async def test_create_product_without_loaded_reference_data_is_rejected(
    client: AsyncClient, store: ValidationStore
) -> None:
    response = await client.post("/api/v1/products", json=_product())
    assert response.status_code == 400
    messages = [e["message"] for e in response.json()["details"]["errors"]]
    assert any("not loaded" in m for m in messages)


async def test_create_product_invalid_body_is_422(
    client: AsyncClient, seeded: ValidationStore
) -> None:
    response = await client.post("/api/v1/products", json=_product(quantity=-1))
    assert response.status_code == 422


async def test_update_product_moves_code_and_category(
    client: AsyncClient, seeded: ValidationStore
) -> None:
    """Renaming the only Books product drops the old code and the unused category."""
    response = await client.put(
        "/api/v1/products/7",
        json=_product(product_code="B007", category="Manuals", supplier_id=4, quantity=0),
    )
    assert response.status_code == 200
    body = response.json()
    assert body["product_code"] == "B007"
    assert body["updated_at"] is not None
    assert seeded.contains("ProductCodes", "B007")
    assert not seeded.contains("ProductCodes", "P007")
    assert seeded.contains("Categories", "Manuals")
    assert not seeded.contains("Categories", "Books")


async def test_update_product_to_existing_code_is_409(
    client: AsyncClient, seeded: ValidationStore
) -> None:
    response = await client.put("/api/v1/products/2", json=_product(product_code="P001"))
    assert response.status_code == 409
    assert seeded.contains("ProductCodes", "P002")


async def test_update_unknown_product_is_404(
    client: AsyncClient, seeded: ValidationStore
) -> None:
    response = await client.put("/api/v1/products/999", json=_product())
    assert response.status_code == 404


async def test_delete_product_frees_code(client: AsyncClient, seeded: ValidationStore) -> None:
    """After delete the code is free again; the category stays while still used."""
    response = await client.delete("/api/v1/products/2")
    assert response.status_code == 204
    assert not seeded.contains("ProductCodes", "P002")
    assert seeded.contains("Categories", "Electronics")
    assert (await client.get("/api/v1/products/2")).status_code == 404


async def test_products_by_category_and_supplier(
    client: AsyncClient, seeded: ValidationStore
) -> None:
    by_category = (await client.get("/api/v1/products/category/Office")).json()
    assert [p["product_code"] for p in by_category] == ["P006", "P009", "P012"]
    by_supplier = (await client.get("/api/v1/products/supplier/2")).json()
    assert [p["product_code"] for p in by_supplier] == ["P002", "P004", "P010"]


async def test_existing_codes(client: AsyncClient, seeded: ValidationStore) -> None:
    response = await client.post(
        "/api/v1/products/existing-codes", json={"codes": ["P003", "NEW1", "P001"]}
    )
    assert response.status_code == 200
    assert response.json() == {"existing": ["P001", "P003"]}


async def test_validate_batch(client: AsyncClient, seeded: ValidationStore) -> None:
    """Only failing drafts are reported, each with its index and messages."""
    items = [
        {"product_name": "Desk Lamp Pro", "supplier_id": 5, "category": "Office"},
        {"product_name": "Tablet", "supplier_id": 999},
        {"product_name": "X", "supplier_id": 1, "product_code": "P001"},
    ]
    response = await client.post("/api/v1/products/validate", json={"items": items})
    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 3
    assert body["invalid"] == 2
    assert [e["index"] for e in body["errors"]] == [1, 2]
    assert body["errors"][0]["errors"] == [
        "supplier_id: Supplier ID does not exist in the system"
    ]
    assert len(body["errors"][1]["errors"]) == 2
    assert body["errors"][1]["item"] == items[2]


async def test_validate_batch_leaves_shared_store_alone(
    client: AsyncClient, seeded: ValidationStore
) -> None:
    keys_before = sorted(seeded.get_all_cache_keys())
    await client.post(
        "/api/v1/products/validate",
        json={"items": [{"product_name": "Tablet", "supplier_id": 1}]},
    )
    assert sorted(seeded.get_all_cache_keys()) == keys_before
