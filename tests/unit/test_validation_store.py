"""ValidationStore unit tests: snapshot semantics, type isolation, state, concurrency."""

import threading
from datetime import UTC, datetime

import pytest

from inventory.core.validation_store import CacheSet, ValidationState, ValidationStore


def test_set_cache_then_contains() -> None:
    """Members are found; non-members are not."""
    store = ValidationStore()
    store.set_cache("SupplierIds", [1, 2, 3, 4, 5])
    assert store.contains("SupplierIds", 3)
    assert not store.contains("SupplierIds", 999)


def test_set_cache_deduplicates_values() -> None:
    """Duplicate values collapse; order is irrelevant."""
    store = ValidationStore()
    store.set_cache("k", [3, 1, 3, 2, 1])
    assert store.get_cache_count("k") == 3
    assert store.get_cache("k") == frozenset({1, 2, 3})


def test_set_cache_replaces_previous_set() -> None:
    """Overwrite publishes the new set in full and drops the old members."""
    store = ValidationStore()
    store.set_cache("k", [1, 2])
    store.set_cache("k", [7])
    assert store.get_cache("k", int) == frozenset({7})
    assert not store.contains("k", 1)


def test_empty_set_is_loaded_but_empty() -> None:
    """Loading no values is distinct from never loading the key."""
    store = ValidationStore()
    store.set_cache("k", [])
    assert store.is_cache_loaded("k")
    assert store.get_cache_count("k") == 0
    assert store.get_cache("k") == frozenset()
    assert not store.contains("k", 1)


def test_unknown_key_queries_never_raise() -> None:
    """A key never set reads as absent, unloaded, zero and not containing anything."""
    store = ValidationStore()
    assert store.contains("missing", "anything") is False
    assert store.contains("missing", None) is False
    assert store.is_cache_loaded("missing") is False
    assert store.get_cache_count("missing") == 0
    assert store.get_cache("missing") is None
    assert store.get_cache("missing", int) is None
    assert store.get_all_cache_keys() == []


def test_clear_cache_is_idempotent() -> None:
    """Clearing twice, or clearing a key never set, leaves it unloaded without error."""
    store = ValidationStore()
    store.set_cache("k", [1])
    store.clear_cache("k")
    store.clear_cache("k")
    store.clear_cache("never-set")
    assert not store.is_cache_loaded("k")
    assert not store.is_cache_loaded("never-set")


def test_clear_all_caches_resets_snapshot() -> None:
    store = ValidationStore()
    store.set_cache("a", [1])
    store.set_cache("b", ["x"])
    store.clear_all_caches()
    assert store.get_all_cache_keys() == []
    assert not store.is_cache_loaded("a")


def test_add_and_remove_update_counts() -> None:
    """Add then remove follow copy-and-publish semantics on the loaded set."""
    store = ValidationStore()
    store.set_cache("k", [1, 2, 3])
    store.add_to_cache("k", 4)
    assert store.contains("k", 4)
    assert store.get_cache_count("k") == 4
    store.remove_from_cache("k", 2)
    assert store.get_cache_count("k") == 3
    assert not store.contains("k", 2)


def test_add_to_absent_key_creates_singleton() -> None:
    store = ValidationStore()
    store.add_to_cache("k", "P001")
    assert store.is_cache_loaded("k")
    assert store.get_cache("k", str) == frozenset({"P001"})


def test_add_existing_value_keeps_count() -> None:
    store = ValidationStore()
    store.set_cache("k", [1, 2])
    store.add_to_cache("k", 2)
    assert store.get_cache_count("k") == 2


def test_remove_from_absent_key_or_value_is_noop() -> None:
    store = ValidationStore()
    store.remove_from_cache("missing", 1)
    assert not store.is_cache_loaded("missing")
    store.set_cache("k", [1])
    store.remove_from_cache("k", 42)
    assert store.get_cache("k") == frozenset({1})


def test_add_if_loaded_skips_unloaded_keys() -> None:
    """add_if_loaded never marks a key as loaded."""
    store = ValidationStore()
    assert store.add_if_loaded("k", 1) is False
    assert not store.is_cache_loaded("k")
    store.set_cache("k", [1], int)
    assert store.add_if_loaded("k", 2) is True
    assert store.get_cache("k") == frozenset({1, 2})


def test_add_if_loaded_on_empty_untyped_set_takes_value_type() -> None:
    store = ValidationStore()
    store.set_cache("k", [])
    store.add_if_loaded("k", "Books")
    assert store.get_cache("k", str) == frozenset({"Books"})
    assert store.get_cache("k", int) is None


def test_get_cache_with_other_type_is_absent() -> None:
    """An int set requested as str reads as absent, never as the int set."""
    store = ValidationStore()
    store.set_cache("k", [1, 2, 3])
    assert store.get_cache("k", str) is None
    assert store.get_cache("k", int) == frozenset({1, 2, 3})
    assert store.get_cache("k") == frozenset({1, 2, 3})


def test_contains_with_other_type_is_false() -> None:
    store = ValidationStore()
    store.set_cache("SupplierIds", [1, 2, 3], int)
    assert not store.contains("SupplierIds", "1")
    assert not store.contains("SupplierIds", 1.0)


def test_bool_is_not_treated_as_int() -> None:
    store = ValidationStore()
    store.set_cache("k", [1, 0], int)
    assert not store.contains("k", True)


def test_contains_unhashable_value_is_false() -> None:
    store = ValidationStore()
    store.set_cache("k", [1, 2], object)
    assert store.contains("k", [1]) is False


def test_mixed_type_set_is_not_read_as_one_type() -> None:
    """A set holding ints and strs is neither an int set nor a str set."""
    store = ValidationStore()
    store.set_cache("k", [1, "a"])
    assert store.get_cache("k", str) is None
    assert store.get_cache("k", int) is None
    assert not store.contains("k", 1)
    assert not store.contains("k", "a")
    assert store.get_cache("k", object) == frozenset({1, "a"})
    assert store.get_cache("k") == frozenset({1, "a"})


def test_declared_type_not_matching_values_is_ignored() -> None:
    """Values decide the tag when a declared element type does not fit them."""
    store = ValidationStore()
    store.set_cache("k", [1, 2], str)
    assert store.get_cache("k", str) is None
    assert store.get_cache("k", int) == frozenset({1, 2})
    assert not store.contains("k", "1")
    assert store.contains("k", 1)


def test_declared_type_kept_for_empty_and_object_sets() -> None:
    store = ValidationStore()
    store.set_cache("empty", [], str)
    store.set_cache("any", [1, "a"], object)
    assert store.get_cache("empty", str) == frozenset()
    assert store.get_cache("empty", int) is None
    assert store.get_cache("any", object) == frozenset({1, "a"})
    assert store.get_cache("any", int) is None


def test_add_of_other_type_replaces_set() -> None:
    """Adding a value of a different type starts a new singleton set under that key."""
    store = ValidationStore()
    store.set_cache("k", [1, 2], int)
    store.add_to_cache("k", "x")
    assert store.get_cache("k", str) == frozenset({"x"})
    assert store.get_cache("k", int) is None


def test_returned_sets_are_immutable_snapshots() -> None:
    """A set handed to a reader is unaffected by later writers."""
    store = ValidationStore()
    store.set_cache("k", [1, 2, 3])
    before = store.get_cache("k")
    store.add_to_cache("k", 4)
    store.remove_from_cache("k", 1)
    assert before == frozenset({1, 2, 3})
    assert isinstance(before, frozenset)


def test_get_all_cache_keys_lists_loaded_keys() -> None:
    store = ValidationStore()
    store.set_cache("SupplierIds", [1])
    store.set_cache("Categories", ["Books"])
    assert sorted(store.get_all_cache_keys()) == ["Categories", "SupplierIds"]


def test_supplier_reference_scenario() -> None:
    """Loaded supplier ids accept 3 and reject 999."""
    store = ValidationStore()
    store.set_cache("SupplierIds", [1, 2, 3, 4, 5])
    assert store.contains("SupplierIds", 999) is False
    assert store.contains("SupplierIds", 3) is True


def test_initial_state_is_uninitialized() -> None:
    assert ValidationStore().state == ValidationState()


def test_mark_initialized_and_reset() -> None:
    """mark_initialized records source and time; reset clears all of it."""
    store = ValidationStore()
    store.mark_initialized("startup")
    state = store.state
    assert state.is_initialized is True
    assert state.last_reload_source == "startup"
    assert state.last_reload_time is not None
    assert state.last_reload_time.tzinfo is not None
    store.reset_initialization()
    assert store.state.is_initialized is False
    assert store.state.last_reload_source is None


def test_single_field_state_updates() -> None:
    store = ValidationStore()
    when = datetime(2025, 1, 15, 12, 0, tzinfo=UTC)
    store.update_is_initialized(True)
    store.update_last_reload_source("api")
    store.update_last_reload_time(when)
    assert store.state == ValidationState(True, "api", when)


def test_state_is_frozen() -> None:
    store = ValidationStore()
    with pytest.raises(AttributeError):
        store.state.is_initialized = True  # type: ignore[misc]


def test_cache_set_accepts() -> None:
    assert CacheSet(None, frozenset()).accepts(int)
    assert CacheSet(int, frozenset({1})).accepts(None)
    assert CacheSet(object, frozenset({1, "a"})).accepts(object)
    assert CacheSet(object, frozenset({1, "a"})).accepts(None)
    assert not CacheSet(object, frozenset({1, "a"})).accepts(str)
    assert not CacheSet(int, frozenset({1})).accepts(str)


@pytest.mark.slow
def test_concurrent_set_cache_readers_never_see_partial_sets() -> None:
    """Readers racing two writers always observe one writer's set in full."""
    store = ValidationStore()
    first = frozenset(range(0, 500))
    second = frozenset(range(1000, 1300))
    store.set_cache("k", first)
    stop = threading.Event()
    bad: list[frozenset] = []

    def writer(values: frozenset) -> None:
        while not stop.is_set():
            store.set_cache("k", values, int)

    def reader() -> None:
        for _ in range(2000):
            seen = store.get_cache("k", int)
            if seen not in (first, second):
                bad.append(seen)

    writers = [threading.Thread(target=writer, args=(v,)) for v in (first, second)]
    readers = [threading.Thread(target=reader) for _ in range(4)]
    for t in writers + readers:
        t.start()
    for t in readers:
        t.join()
    stop.set()
    for t in writers:
        t.join()
    assert bad == []


@pytest.mark.slow
def test_concurrent_adds_to_different_keys_are_not_lost() -> None:
    """Writers on separate keys never drop each other's updates."""
    store = ValidationStore()
    keys = [f"k{i}" for i in range(4)]
    for key in keys:
        store.set_cache(key, [], int)

    def add_many(key: str) -> None:
        for value in range(200):
            store.add_to_cache(key, value)

    threads = [threading.Thread(target=add_many, args=(key,)) for key in keys]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert [store.get_cache_count(key) for key in keys] == [200] * 4


@pytest.mark.slow
def test_concurrent_state_updates_are_not_lost() -> None:
    """Single-field updaters on different fields keep both changes."""
    store = ValidationStore()
    when = datetime(2025, 1, 1, tzinfo=UTC)

    def set_source() -> None:
        for _ in range(500):
            store.update_last_reload_source("scheduled")

    def set_time() -> None:
        for _ in range(500):
            store.update_last_reload_time(when)

    threads = [threading.Thread(target=set_source), threading.Thread(target=set_time)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert store.state.last_reload_source == "scheduled"
    assert store.state.last_reload_time == when
