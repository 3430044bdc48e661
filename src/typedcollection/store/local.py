"""Tuple-backed validated store.

Simple copy-on-write storage: every change builds a new tuple. Collections
are expected to be small, so no structural sharing is attempted.

Usage:
    store = TupleStore(ScalarType(ScalarKind.STRING), ["a", "b"])
    store = store.spliced(1, ["x"])  # ("a", "x", "b")
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from typedcollection.core.guard import TypeDescriptor, validate_many, validate_one


class TupleStore[T]:
    """Validated store holding its elements in a tuple.

    Args:
        descriptor: Type every element must conform to.
        items: Initial elements, validated fail-fast.
    """

    __slots__ = ("_descriptor", "_items")

    def __init__(self, descriptor: TypeDescriptor, items: Iterable[Any] = ()) -> None:
        """Initialize the store, validating every initial element.

        Raises:
            InvalidArgumentError: If any element does not conform to descriptor.
        """
        snapshot = tuple(items)
        validate_many(descriptor, snapshot)
        self._descriptor = descriptor
        self._items: tuple[T, ...] = snapshot

    @classmethod
    def _trusted(cls, descriptor: TypeDescriptor, items: tuple[T, ...]) -> TupleStore[T]:
        """Build a store from elements already known to conform, skipping validation."""
        store = cls.__new__(cls)
        store._descriptor = descriptor
        store._items = items
        return store

    @property
    def descriptor(self) -> TypeDescriptor:
        """Type every element conforms to."""
        return self._descriptor

    @property
    def items(self) -> tuple[T, ...]:
        """Immutable snapshot of the elements."""
        return self._items

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def appended(self, item: Any) -> TupleStore[T]:
        """Validate item and return a store with it appended.

        Raises:
            InvalidArgumentError: If item does not conform.
        """
        validate_one(self._descriptor, item)
        return self._trusted(self._descriptor, (*self._items, item))

    def extended(self, items: Iterable[Any]) -> TupleStore[T]:
        """Validate all items and return a store with them appended.

        Raises:
            InvalidArgumentError: On the first item that does not conform.
        """
        incoming = tuple(items)
        validate_many(self._descriptor, incoming)
        return self._trusted(self._descriptor, self._items + incoming)

    def spliced(self, index: int, items: Iterable[Any]) -> TupleStore[T]:
        """Validate all items and return a store with them inserted before index.

        The index is not range-checked here; callers apply the index policy.

        Raises:
            InvalidArgumentError: On the first item that does not conform.
        """
        incoming = tuple(items)
        validate_many(self._descriptor, incoming)
        return self._trusted(
            self._descriptor, self._items[:index] + incoming + self._items[index:]
        )

    def removed(self, index: int) -> TupleStore[T]:
        """Return a store without the element at index."""
        return self._trusted(self._descriptor, self._items[:index] + self._items[index + 1 :])

    def derived(self, items: Iterable[T]) -> TupleStore[T]:
        """Return a store over a subset or reordering of this store's elements."""
        return self._trusted(self._descriptor, tuple(items))

    def snapshot(self) -> list[T]:
        """Return the elements as a fresh list."""
        return list(self._items)
