"""Existence rules attached to pydantic fields, evaluated against a ValidationStore."""

from typing import Annotated

import pytest
from pydantic import BaseModel

from inventory.application.dtos.validation import FieldError
from inventory.application.services.existence_rules import (
    CategoryExists,
    ExistenceRule,
    ExistsIn,
    NotExistsIn,
    ProductCodeUnique,
    SupplierExists,
    check_values,
    ensure_valid_references,
    field_rules,
    validate_object,
)
from inventory.core.validation_store import ValidationStore
from inventory.domain.exceptions import ReferenceValidationException


class _Draft(BaseModel):
    name: str
    supplier_id: Annotated[int, SupplierExists()]
    category: Annotated[str | None, CategoryExists()] = None
    product_code: Annotated[str | None, ProductCodeUnique()] = None


@pytest.fixture
def loaded_store() -> ValidationStore:
    store = ValidationStore()
    store.set_cache("SupplierIds", [1, 2, 3, 4, 5], int)
    store.set_cache("Categories", ["Books", "Electronics"], str)
    store.set_cache("ProductCodes", ["P001", "P002"], str)
    return store


def test_field_rules_lists_annotated_fields_only() -> None:
    rules = field_rules(_Draft)
    assert list(rules) == ["supplier_id", "category", "product_code"]
    assert isinstance(rules["supplier_id"][0], SupplierExists)


def test_valid_object_has_no_errors(loaded_store: ValidationStore) -> None:
    draft = _Draft(name="Desk", supplier_id=3, category="Books", product_code="P999")
    assert validate_object(draft, loaded_store) == []


def test_unknown_supplier_fails(loaded_store: ValidationStore) -> None:
    """A supplier id outside the loaded set is a foreign-key style failure."""
    draft = _Draft(name="Desk", supplier_id=999)
    assert validate_object(draft, loaded_store) == [
        FieldError("supplier_id", "Supplier ID does not exist in the system")
    ]


def test_taken_product_code_fails(loaded_store: ValidationStore) -> None:
    draft = _Draft(name="Desk", supplier_id=1, product_code="P001")
    errors = validate_object(draft, loaded_store)
    assert [e.field for e in errors] == ["product_code"]
    assert errors[0].message == "Product Code already exists in the system"


def test_unknown_category_fails(loaded_store: ValidationStore) -> None:
    draft = _Draft(name="Desk", supplier_id=1, category="Garden")
    errors = validate_object(draft, loaded_store)
    assert errors == [FieldError("category", "Category does not exist in the system")]


def test_none_values_pass(loaded_store: ValidationStore) -> None:
    """Optional fields left empty are not checked."""
    draft = _Draft(name="Desk", supplier_id=2, category=None, product_code=None)
    assert validate_object(draft, loaded_store) == []


def test_unloaded_cache_is_an_error() -> None:
    """A rule whose reference set is not loaded fails rather than passing silently."""
    store = ValidationStore()
    draft = _Draft(name="Desk", supplier_id=1)
    errors = validate_object(draft, store)
    assert len(errors) == 1
    assert errors[0].field == "supplier_id"
    assert "not loaded" in errors[0].message


def test_value_of_other_type_is_not_checked(loaded_store: ValidationStore) -> None:
    rule = SupplierExists()
    assert rule.check("999", "supplier_id", loaded_store) is None


def test_check_values_on_raw_mapping(loaded_store: ValidationStore) -> None:
    """Raw values are checked without building the model; missing fields count as None."""
    errors = check_values(_Draft, {"supplier_id": 42}, loaded_store)
    assert [e.field for e in errors] == ["supplier_id"]


def test_custom_messages_and_generic_rules(loaded_store: ValidationStore) -> None:
    exists = ExistsIn("Categories", "Category", str)
    unique = NotExistsIn("ProductCodes", "Product Code", str, message="Code taken")
    assert exists.check("Toys", "category", loaded_store) == FieldError(
        "category", "Category 'Toys' does not exist in the system"
    )
    assert unique.check("P002", "code", loaded_store) == FieldError("code", "Code taken")
    assert SupplierExists("No such supplier").check(9, "s", loaded_store) == FieldError(
        "s", "No such supplier"
    )


def test_ensure_valid_references_raises_with_all_errors(
    loaded_store: ValidationStore,
) -> None:
    draft = _Draft(name="Desk", supplier_id=999, product_code="P001")
    with pytest.raises(ReferenceValidationException) as exc_info:
        ensure_valid_references(draft, loaded_store)
    exc = exc_info.value
    assert exc.error_code == "REFERENCE_VALIDATION_ERROR"
    assert [e["field"] for e in exc.details["errors"]] == ["supplier_id", "product_code"]


def test_ensure_valid_references_passes(loaded_store: ValidationStore) -> None:
    ensure_valid_references(_Draft(name="Desk", supplier_id=5), loaded_store)


def test_rule_without_check_cannot_be_built() -> None:
    """A rule subclass must say how it is violated and how it reports it."""

    class HalfRule(ExistenceRule):
        def _default_message(self, value) -> str:
            return "bad"

    with pytest.raises(TypeError):
        HalfRule("SupplierIds", "Supplier ID", int)
    with pytest.raises(TypeError):
        ExistenceRule("SupplierIds", "Supplier ID", int)
