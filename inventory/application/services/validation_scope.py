"""Batch validation scope: load reference sets, validate a list of items, clear on exit."""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Mapping
from types import TracebackType
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from inventory.application.dtos.validation import ItemValidationError
from inventory.application.services.existence_rules import check_values, validate_object
from inventory.core.validation_store import ValidationStore

logger = logging.getLogger(__name__)


def _format_pydantic_errors(exc: PydanticValidationError) -> list[str]:
    messages = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"]) or "__root__"
        messages.append(f"{loc}: {err['msg']}")
    return messages


class MultiValidationScope:
    """Context manager that loads one or more caches and validates batches against them.

    Usage:
        with MultiValidationScope(store).load_cache("SupplierIds", ids) as scope:
            errors = scope.validate_list(items, ProductDraft)

    When auto_clear is True the keys loaded through this scope are cleared on
    exit. Keys are cleared on the given store, so pass a private store when the
    process-wide one must keep its sets.
    """

    def __init__(self, store: ValidationStore, auto_clear: bool = True) -> None:
        self._store = store
        self._auto_clear = auto_clear
        self._cache_keys: list[str] = []

    @property
    def store(self) -> ValidationStore:
        return self._store

    def load_cache(
        self,
        cache_key: str,
        valid_values: Iterable[Hashable],
        element_type: type | None = None,
    ) -> MultiValidationScope:
        """Load (replace) one reference set; returns self for chaining."""
        self._store.set_cache(cache_key, valid_values, element_type)
        if cache_key not in self._cache_keys:
            self._cache_keys.append(cache_key)
        return self

    def validate_item(
        self, item: BaseModel | Mapping[str, Any], model: type[BaseModel] | None = None
    ) -> list[str]:
        """Validate one item: shape rules via the pydantic model, then existence rules.

        item is either a model instance or a mapping validated with model.
        """
        if isinstance(item, BaseModel):
            return [f"{e.field}: {e.message}" for e in validate_object(item, self._store)]
        if model is None:
            raise TypeError("model is required when validating mappings")
        errors: list[str] = []
        try:
            parsed = model.model_validate(item)
        except PydanticValidationError as exc:
            errors.extend(_format_pydantic_errors(exc))
            rule_errors = check_values(model, item, self._store)
        else:
            rule_errors = validate_object(parsed, self._store)
        errors.extend(f"{e.field}: {e.message}" for e in rule_errors)
        return errors

    def validate_list(
        self,
        items: Iterable[BaseModel | Mapping[str, Any]],
        model: type[BaseModel] | None = None,
    ) -> list[ItemValidationError]:
        """Return one ItemValidationError per invalid item (valid items are omitted)."""
        results: list[ItemValidationError] = []
        for index, item in enumerate(items):
            errors = self.validate_item(item, model)
            if errors:
                results.append(ItemValidationError(index=index, item=item, errors=errors))
        logger.debug(
            "Validated batch against %s: %d invalid item(s)",
            self._cache_keys,
            len(results),
        )
        return results

    def close(self) -> None:
        if self._auto_clear:
            for cache_key in self._cache_keys:
                self._store.clear_cache(cache_key)
        self._cache_keys.clear()

    def __enter__(self) -> MultiValidationScope:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
