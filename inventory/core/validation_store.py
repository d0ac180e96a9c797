"""In-memory reference-data store for existence validation.

Holds named sets of currently valid values (e.g. supplier ids) that field
validators query synchronously. One instance per process, owned by the app
lifespan (app.state.validation_store); tests build their own.

Every mutation builds a new immutable snapshot (key -> CacheSet) and installs
it with a compare-and-set, so readers never lock and never see a partially
updated set. The lock below guards only the compare-and-set step itself.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Hashable, Iterable, Mapping
from dataclasses import dataclass, replace
from datetime import datetime
from types import MappingProxyType
from typing import Any

from inventory.shared.utils.datetime import utc_now

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheSet:
    """Immutable set of reference values of a single element type.

    element_type is None for a set loaded empty without an explicit type; such
    a set matches any requested type since it holds no members. A set of mixed
    value types is tagged object and matches only object (or no type).
    """

    element_type: type | None
    values: frozenset[Any]

    def accepts(self, element_type: type | None) -> bool:
        """Return True if this set may be read as holding element_type values."""
        if element_type is None or self.element_type is None:
            return True
        return self.element_type is element_type


@dataclass(frozen=True)
class ValidationState:
    """Initialization record: whether a full reload completed, from where, and when."""

    is_initialized: bool = False
    last_reload_source: str | None = None
    last_reload_time: datetime | None = None


_EMPTY_SNAPSHOT: Mapping[str, CacheSet] = MappingProxyType({})


def _infer_element_type(values: frozenset[Any]) -> type | None:
    """Exact type shared by every value; object when they differ, None when empty."""
    types = {type(v) for v in values}
    if not types:
        return None
    if len(types) == 1:
        return types.pop()
    return object


def _resolve_element_type(
    key: str, values: frozenset[Any], declared: type | None
) -> type | None:
    """The tag for a new set: declared when every value is exactly of it, else inferred."""
    inferred = _infer_element_type(values)
    if declared is None:
        return inferred
    if inferred is None or declared is object or inferred is declared:
        return declared
    logger.warning(
        "Validation cache %s declared as %s but holds %s values; tagged by value type",
        key,
        declared.__name__,
        inferred.__name__,
    )
    return inferred


class ValidationStore:
    """Thread-safe store of named reference sets with snapshot reads.

    Query methods (contains, is_cache_loaded, get_cache_count, get_cache,
    get_all_cache_keys) never raise for missing keys or type mismatches; they
    return False, None, 0 or an empty list.
    """

    def __init__(self) -> None:
        self._snapshot: Mapping[str, CacheSet] = _EMPTY_SNAPSHOT
        self._state = ValidationState()
        self._swap_lock = threading.Lock()

    # ---- snapshot plumbing ----

    def _compare_and_set_snapshot(
        self, expected: Mapping[str, CacheSet], new: Mapping[str, CacheSet]
    ) -> bool:
        with self._swap_lock:
            if self._snapshot is not expected:
                return False
            self._snapshot = new
            return True

    def _mutate(
        self, derive: Callable[[Mapping[str, CacheSet]], Mapping[str, CacheSet] | None]
    ) -> None:
        """Read the current snapshot, derive a new one, install it; retry on interference.

        derive returns None when no change is needed.
        """
        while True:
            current = self._snapshot
            new = derive(current)
            if new is None or self._compare_and_set_snapshot(current, new):
                return

    @staticmethod
    def _with_item(
        snapshot: Mapping[str, CacheSet], key: str, cache_set: CacheSet
    ) -> Mapping[str, CacheSet]:
        return MappingProxyType({**snapshot, key: cache_set})

    # ---- writers ----

    def set_cache(
        self,
        key: str,
        values: Iterable[Hashable],
        element_type: type | None = None,
    ) -> None:
        """Replace the set for key with the deduplicated values (empty is allowed).

        A declared element_type that the values do not match is not trusted;
        the set is tagged with the values' own type instead.
        """
        frozen = frozenset(values)
        cache_set = CacheSet(_resolve_element_type(key, frozen, element_type), frozen)
        self._mutate(lambda snap: self._with_item(snap, key, cache_set))
        logger.debug("Validation cache SET: %s (%d values)", key, len(frozen))

    def add_to_cache(self, key: str, value: Hashable) -> None:
        """Add one value; creates a singleton set when key is absent or holds another type."""

        def derive(snap: Mapping[str, CacheSet]) -> Mapping[str, CacheSet] | None:
            existing = snap.get(key)
            if existing is not None and existing.accepts(type(value)):
                if value in existing.values:
                    return None
                element_type = existing.element_type or type(value)
                new_set = CacheSet(element_type, existing.values | {value})
            else:
                new_set = CacheSet(type(value), frozenset((value,)))
            return self._with_item(snap, key, new_set)

        self._mutate(derive)
        logger.debug("Validation cache ADD: %s += %r", key, value)

    def add_if_loaded(self, key: str, value: Hashable) -> bool:
        """Add one value only when key is already loaded; returns whether key was loaded.

        Used to keep loaded sets current after writes without marking an
        unloaded key as loaded with a partial set.
        """
        loaded = False

        def derive(snap: Mapping[str, CacheSet]) -> Mapping[str, CacheSet] | None:
            nonlocal loaded
            existing = snap.get(key)
            loaded = existing is not None
            if existing is None or not existing.accepts(type(value)):
                return None
            if value in existing.values:
                return None
            element_type = existing.element_type or type(value)
            return self._with_item(
                snap, key, CacheSet(element_type, existing.values | {value})
            )

        self._mutate(derive)
        return loaded

    def remove_from_cache(self, key: str, value: Hashable) -> None:
        """Remove one value; no-op when key or value is absent."""

        def derive(snap: Mapping[str, CacheSet]) -> Mapping[str, CacheSet] | None:
            existing = snap.get(key)
            if existing is None or not existing.accepts(type(value)):
                return None
            if value not in existing.values:
                return None
            return self._with_item(
                snap, key, CacheSet(existing.element_type, existing.values - {value})
            )

        self._mutate(derive)
        logger.debug("Validation cache REMOVE: %s -= %r", key, value)

    def clear_cache(self, key: str) -> None:
        """Remove key entirely. Idempotent."""

        def derive(snap: Mapping[str, CacheSet]) -> Mapping[str, CacheSet] | None:
            if key not in snap:
                return None
            return MappingProxyType({k: v for k, v in snap.items() if k != key})

        self._mutate(derive)

    def clear_all_caches(self) -> None:
        """Reset to the empty snapshot."""
        with self._swap_lock:
            self._snapshot = _EMPTY_SNAPSHOT
        logger.debug("Validation cache CLEARED")

    # ---- readers ----

    def get_cache(self, key: str, element_type: type | None = None) -> frozenset[Any] | None:
        """Return the set for key, or None if absent or not of element_type."""
        cache_set = self._snapshot.get(key)
        if cache_set is None or not cache_set.accepts(element_type):
            return None
        return cache_set.values

    def contains(self, key: str, value: Any) -> bool:
        """Return True only if key is loaded with value's type and value is a member."""
        cache_set = self._snapshot.get(key)
        if cache_set is None or not cache_set.accepts(type(value)):
            return False
        try:
            return value in cache_set.values
        except TypeError:
            # unhashable values are never members
            return False

    def is_cache_loaded(self, key: str) -> bool:
        return key in self._snapshot

    def get_cache_count(self, key: str) -> int:
        cache_set = self._snapshot.get(key)
        return len(cache_set.values) if cache_set is not None else 0

    def get_all_cache_keys(self) -> list[str]:
        """Keys at call time (diagnostics; may be stale under concurrent writers)."""
        return list(self._snapshot.keys())

    # ---- initialization state ----

    @property
    def state(self) -> ValidationState:
        return self._state

    def _compare_and_set_state(
        self, expected: ValidationState, new: ValidationState
    ) -> bool:
        with self._swap_lock:
            if self._state is not expected:
                return False
            self._state = new
            return True

    def _update_state(self, **changes: Any) -> None:
        while True:
            current = self._state
            if self._compare_and_set_state(current, replace(current, **changes)):
                return

    def mark_initialized(self, source: str | None = None) -> None:
        """Record a completed full reload cycle from source, stamped now (UTC)."""
        new_state = ValidationState(
            is_initialized=True,
            last_reload_source=source,
            last_reload_time=utc_now(),
        )
        with self._swap_lock:
            self._state = new_state
        logger.info("Validation store initialized (source=%s)", source)

    def reset_initialization(self) -> None:
        with self._swap_lock:
            self._state = ValidationState()

    def update_is_initialized(self, is_initialized: bool) -> None:
        self._update_state(is_initialized=is_initialized)

    def update_last_reload_source(self, source: str | None) -> None:
        self._update_state(last_reload_source=source)

    def update_last_reload_time(self, time: datetime | None) -> None:
        self._update_state(last_reload_time=time)
