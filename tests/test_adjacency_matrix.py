"""Tests specific to the fixed-capacity adjacency matrix backend."""

import pytest

from contactbook.application import CapacityExceeded, ContactAdded, DuplicateIdentity
from contactbook.domain import ContactRecord, NameMatch
from contactbook.infrastructure import AdjacencyMatrixBackend


def test_capacity_two_rejects_third_contact():
    store = AdjacencyMatrixBackend(2)
    assert isinstance(store.add(ContactRecord("Alice", 1)), ContactAdded)
    assert isinstance(store.add(ContactRecord("Bob", 2)), ContactAdded)
    result = store.add(ContactRecord("Carol", 3))
    assert isinstance(result, CapacityExceeded)
    assert result.capacity == 2
    assert len(store) == 2
    assert store.capacity == 2


def test_duplicate_reported_before_capacity():
    store = AdjacencyMatrixBackend(1)
    store.add(ContactRecord("Alice", 1))
    assert isinstance(store.add(ContactRecord("Alice", 1)), DuplicateIdentity)


def test_deleted_slot_is_reused():
    store = AdjacencyMatrixBackend(3)
    for i, name in enumerate(("Alice", "Bob", "Carol")):
        store.add(ContactRecord(name, i))
    assert store.slot_of("Bob") == 1
    store.delete("Bob")
    assert isinstance(store.add(ContactRecord("Dave", 4)), ContactAdded)
    assert store.slot_of("Dave") == 1
    assert [r.name for r in store.list_all()] == ["Alice", "Dave", "Carol"]


def test_reused_slot_starts_without_edges():
    store = AdjacencyMatrixBackend(3)
    for i, name in enumerate(("Alice", "Bob", "Carol")):
        store.add(ContactRecord(name, i))
    store.add_connection("Alice", "Bob")
    store.add_connection("Bob", "Carol")
    store.delete("Bob")
    store.add(ContactRecord("Dave", 4))
    dave = store.search("Dave")
    assert store.neighbors(dave) == ()
    assert store.neighbors(store.search("Alice")) == ()
    assert store.neighbors(store.search("Carol")) == ()


def test_update_keeps_slot():
    store = AdjacencyMatrixBackend(4)
    alice = ContactRecord("Alice", 1)
    store.add(ContactRecord("Zed", 0))
    store.add(alice)
    store.update(alice, "Alicia", 5)
    assert store.slot_of("Alicia") == 1
    assert store.slot_of("Alice") is None


def test_full_store_never_grows():
    store = AdjacencyMatrixBackend(3)
    results = [store.add(ContactRecord(f"C{i}", i)) for i in range(10)]
    assert sum(isinstance(r, ContactAdded) for r in results) == 3
    assert all(isinstance(r, CapacityExceeded) for r in results[3:])
    assert len(list(store.list_all())) == 3


def test_search_is_exact_by_default():
    store = AdjacencyMatrixBackend(2)
    store.add(ContactRecord("Alice", 1))
    assert store.name_match is NameMatch.EXACT
    assert store.search(" Alice ") == ContactRecord("Alice", 1)
    assert store.resolve("alice") is None


@pytest.mark.parametrize("capacity", [0, -1, True, "10"])
def test_invalid_capacity(capacity):
    with pytest.raises(ValueError):
        AdjacencyMatrixBackend(capacity)
