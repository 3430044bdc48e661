"""Store protocol for the validated sequence behind a collection.

A store is an ordered, index-addressable sequence whose elements all conform
to one type descriptor. Stores are persistent: every method that changes
membership returns a new store and leaves the receiver untouched.

Usage:
    store = TupleStore(ScalarType(ScalarKind.INTEGER), [1, 2, 3])
    longer = store.appended(4)
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Protocol, Self, TypeVar

from typedcollection.core.guard import TypeDescriptor

T = TypeVar("T")


class Store(Protocol[T]):
    """Abstract validated store interface."""

    @property
    def descriptor(self) -> TypeDescriptor:
        """Type every element conforms to."""
        ...

    @property
    def items(self) -> tuple[T, ...]:
        """Immutable snapshot of the elements."""
        ...

    def __len__(self) -> int: ...

    def __getitem__(self, index: int) -> T: ...

    def __iter__(self) -> Iterator[T]: ...

    def appended(self, item: Any) -> Self:
        """Validate item and return a store with it appended."""
        ...

    def extended(self, items: Iterable[Any]) -> Self:
        """Validate all items and return a store with them appended."""
        ...

    def spliced(self, index: int, items: Iterable[Any]) -> Self:
        """Validate all items and return a store with them inserted before index."""
        ...

    def removed(self, index: int) -> Self:
        """Return a store without the element at index."""
        ...

    def derived(self, items: Iterable[T]) -> Self:
        """Return a store over items already known to conform (subsets, reorderings)."""
        ...

    def snapshot(self) -> list[T]:
        """Return the elements as a fresh, caller-owned list."""
        ...
