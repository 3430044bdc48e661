"""Unit tests for TupleStore copy-on-write behavior."""

import pytest

from typedcollection import InvalidArgumentError, ScalarKind, ScalarType
from typedcollection.store import Store, TupleStore

STRING = ScalarType(ScalarKind.STRING)


@pytest.fixture
def letters() -> TupleStore[str]:
    return TupleStore(STRING, ["a", "b", "c"])


def test_initial_items_are_validated():
    with pytest.raises(InvalidArgumentError, match="position 2"):
        TupleStore(STRING, ["a", "b", 3])


def test_store_copies_initial_items():
    """Changing the source list afterwards does not reach the store."""
    source = ["a", "b"]
    store = TupleStore(STRING, source)

    source.append("c")

    assert store.items == ("a", "b")


def test_appended_returns_new_store(letters):
    longer = letters.appended("d")

    assert longer.items == ("a", "b", "c", "d")
    assert letters.items == ("a", "b", "c")
    assert longer.descriptor == letters.descriptor


def test_appended_validates(letters):
    with pytest.raises(InvalidArgumentError):
        letters.appended(4)


def test_extended_validates_everything_before_building(letters):
    with pytest.raises(InvalidArgumentError):
        letters.extended(["d", None])

    assert letters.items == ("a", "b", "c")


def test_spliced_inserts_before_index(letters):
    assert letters.spliced(1, ["x", "y"]).items == ("a", "x", "y", "b", "c")
    assert letters.spliced(3, ["z"]).items == ("a", "b", "c", "z")


def test_removed_drops_one_element(letters):
    assert letters.removed(1).items == ("a", "c")
    assert letters.items == ("a", "b", "c")


def test_derived_keeps_descriptor(letters):
    derived = letters.derived(reversed(letters.items))

    assert derived.items == ("c", "b", "a")
    assert derived.descriptor is letters.descriptor


def test_snapshot_is_a_fresh_list(letters):
    snapshot = letters.snapshot()
    snapshot.clear()

    assert len(letters) == 3
    assert letters[0] == "a"
    assert list(letters) == ["a", "b", "c"]


def test_tuple_store_satisfies_store_protocol(letters):
    """Every Store member a collection relies on is available on TupleStore."""
    store: Store[str] = letters

    assert store.descriptor == STRING
    assert len(store) == 3
    assert store[1] == "b"
    assert list(store) == ["a", "b", "c"]
    assert store.appended("d").items == ("a", "b", "c", "d")
    assert store.extended(["d"]).items == ("a", "b", "c", "d")
    assert store.spliced(0, ["z"]).items == ("z", "a", "b", "c")
    assert store.removed(0).items == ("b", "c")
    assert store.derived(["c"]).items == ("c",)
    assert store.snapshot() == ["a", "b", "c"]


def test_collection_is_backed_by_a_store(numbers):
    assert isinstance(numbers._store, TupleStore)
    assert numbers._store.items == (1, 2, 3)
