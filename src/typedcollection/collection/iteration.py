"""Iteration adapter for collections.

Usage:
    for value in numbers:
        ...
"""

from __future__ import annotations

from collections.abc import Iterator


class CollectionIterator[T](Iterator[T]):
    """Single-pass iterator over a snapshot of a collection's elements.

    The snapshot is the collection's backing tuple at creation time. In-place
    mutators replace that tuple rather than changing it, so an iterator keeps
    yielding the elements it started with.

    Args:
        items: Elements to iterate, in order.
    """

    __slots__ = ("_items", "_position")

    def __init__(self, items: tuple[T, ...]) -> None:
        self._items = items
        self._position = 0

    def __iter__(self) -> CollectionIterator[T]:
        return self

    def __next__(self) -> T:
        if self._position >= len(self._items):
            raise StopIteration
        item = self._items[self._position]
        self._position += 1
        return item

    def __length_hint__(self) -> int:
        return len(self._items) - self._position
