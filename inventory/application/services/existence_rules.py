"""Existence rules: field validators backed by ValidationStore reference sets.

Rules are attached to pydantic model fields as Annotated metadata:

    supplier_id: Annotated[int, SupplierExists()]

and evaluated with validate_object(obj, store) or check_values(model, values, store).
A rule whose reference set is not loaded fails hard; None values pass.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from inventory.application.dtos.validation import FieldError
from inventory.core.constants import (
    CACHE_KEY_CATEGORIES,
    CACHE_KEY_PRODUCT_CODES,
    CACHE_KEY_SUPPLIER_IDS,
)
from inventory.core.validation_store import ValidationStore
from inventory.domain.exceptions import ReferenceValidationException


class ExistenceRule(ABC):
    """Base rule: checks one value against the reference set named cache_key.

    Values whose type is not element_type are not checked (the rule passes).
    """

    def __init__(
        self,
        cache_key: str,
        entity_name: str,
        element_type: type,
        message: str | None = None,
    ) -> None:
        self.cache_key = cache_key
        self.entity_name = entity_name
        self.element_type = element_type
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.cache_key!r})"

    @abstractmethod
    def _violates(self, store: ValidationStore, value: Any) -> bool:
        """True when value breaks the rule against the loaded set."""

    @abstractmethod
    def _default_message(self, value: Any) -> str: ...

    def check(self, value: Any, field: str, store: ValidationStore) -> FieldError | None:
        """Return a FieldError if value breaks the rule, else None."""
        if value is None:
            return None
        if not store.is_cache_loaded(self.cache_key):
            return FieldError(
                field,
                f"{self.entity_name} cache is not loaded; load it before validating.",
            )
        if type(value) is not self.element_type:
            return None
        if self._violates(store, value):
            return FieldError(field, self.message or self._default_message(value))
        return None


class ExistsIn(ExistenceRule):
    """Value must be a member of the reference set (foreign-key style)."""

    def _violates(self, store: ValidationStore, value: Any) -> bool:
        return not store.contains(self.cache_key, value)

    def _default_message(self, value: Any) -> str:
        return f"{self.entity_name} '{value}' does not exist in the system"


class NotExistsIn(ExistenceRule):
    """Value must not be a member of the reference set (uniqueness)."""

    def _violates(self, store: ValidationStore, value: Any) -> bool:
        return store.contains(self.cache_key, value)

    def _default_message(self, value: Any) -> str:
        return f"{self.entity_name} '{value}' already exists in the system"


class SupplierExists(ExistsIn):
    """Supplier id must be one of the loaded SupplierIds."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            CACHE_KEY_SUPPLIER_IDS,
            "Supplier ID",
            int,
            message or "Supplier ID does not exist in the system",
        )


class CategoryExists(ExistsIn):
    """Category must be one of the loaded Categories."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            CACHE_KEY_CATEGORIES,
            "Category",
            str,
            message or "Category does not exist in the system",
        )


class ProductCodeUnique(NotExistsIn):
    """Product code must not already be among the loaded ProductCodes."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            CACHE_KEY_PRODUCT_CODES,
            "Product Code",
            str,
            message or "Product Code already exists in the system",
        )


def field_rules(model: type[BaseModel]) -> dict[str, list[ExistenceRule]]:
    """Return existence rules per field name, in field order (fields without rules omitted)."""
    rules: dict[str, list[ExistenceRule]] = {}
    for name, info in model.model_fields.items():
        found = [m for m in info.metadata if isinstance(m, ExistenceRule)]
        if found:
            rules[name] = found
    return rules


def check_values(
    model: type[BaseModel], values: Mapping[str, Any], store: ValidationStore
) -> list[FieldError]:
    """Evaluate model's existence rules against raw field values (missing fields count as None)."""
    errors: list[FieldError] = []
    for name, rules in field_rules(model).items():
        value = values.get(name)
        for rule in rules:
            error = rule.check(value, name, store)
            if error is not None:
                errors.append(error)
    return errors


def validate_object(obj: BaseModel, store: ValidationStore) -> list[FieldError]:
    """Evaluate every existence rule declared on obj's fields."""
    values = {name: getattr(obj, name) for name in type(obj).model_fields}
    return check_values(type(obj), values, store)


def ensure_valid_references(obj: BaseModel, store: ValidationStore) -> None:
    """Raise ReferenceValidationException if any existence rule on obj fails."""
    errors = validate_object(obj, store)
    if errors:
        raise ReferenceValidationException([e.to_dict() for e in errors])
