"""Typed collection: a persistent sequence with a runtime-checked element type.

Usage:
    numbers = Collection("integer", [1, 2, 3])
    more = numbers.add(4)                       # numbers is unchanged
    evens = more.filter(lambda n: n % 2 == 0)
    total = more.reduce(lambda acc, n: acc + n, 0)

    numbers.add("x")                            # InvalidArgumentError

    # The two in-place mutators change the receiver itself:
    numbers.insert(0, 0)                        # numbers is now [0, 1, 2, 3]
"""

from __future__ import annotations

import random
import warnings
from collections.abc import Callable, Iterable, Mapping
from functools import cmp_to_key
from functools import reduce as fold
from typing import Any, TypeVar

from typedcollection.collection.iteration import CollectionIterator
from typedcollection.config import get_settings
from typedcollection.core.errors import InvalidArgumentError, OutOfRangeError
from typedcollection.core.guard import UNTYPED, TypeDescriptor, infer_type, resolve_type
from typedcollection.core.index import (
    check_non_negative,
    index_exists,
    is_integer,
    validate_index,
    validate_slice_bounds,
)
from typedcollection.core.types import Combiner, Comparator, Predicate, Procedure
from typedcollection.store import Store, TupleStore

F = TypeVar("F", bound=Callable[..., Any])


def mutates_in_place(method: F) -> F:
    """Mark a method that changes the receiver instead of returning a new collection.

    Marked methods carry ``__mutates_in_place__ = True``.
    """
    method.__mutates_in_place__ = True  # type: ignore[attr-defined]
    return method


def is_in_place(method: Callable[..., Any]) -> bool:
    """Check if a method was marked with @mutates_in_place."""
    return getattr(method, "__mutates_in_place__", False)


class Collection[T]:
    """Ordered collection whose elements all conform to one declared type.

    Every operation either returns a new Collection satisfying the same
    invariant or raises. The receiver is never changed, except by the two
    methods marked @mutates_in_place (insert, insert_range).

    Args:
        element_type: Type name, class, ScalarKind or TypeDescriptor.
        items: Initial elements, all validated against the resolved type.
    """

    __slots__ = ("_store",)

    def __init__(self, element_type: Any, items: Iterable[T] = ()) -> None:
        """Initialize collection, resolving the type and validating all items.

        Raises:
            InvalidArgumentError: If the type is unrecognized, items is not an
                iterable of elements, or an element does not conform.
        """
        descriptor = resolve_type(element_type)
        if isinstance(items, str | bytes | Mapping) or not isinstance(items, Iterable):
            raise InvalidArgumentError(
                f"Items must be an iterable of elements, got {items.__class__.__name__}"
            )
        self._store: Store[T] = TupleStore(descriptor, items)

    @classmethod
    def from_items(cls, items: Iterable[T]) -> Collection[T]:
        """Create a collection whose type is inferred from the first item.

        Raises:
            InvalidArgumentError: If items is empty or a later item has another kind.
        """
        snapshot = list(items)
        if not snapshot:
            raise InvalidArgumentError("Cannot infer a type from an empty sequence")
        return cls(infer_type(snapshot[0]), snapshot)

    @classmethod
    def _wrap(cls, store: Store[Any]) -> Collection[Any]:
        """Build a collection around an already-validated store."""
        collection = cls.__new__(cls)
        collection._store = store
        return collection

    # Accessors

    def get_type(self) -> TypeDescriptor:
        """Return the declared element type."""
        return self._store.descriptor

    @property
    def element_type(self) -> TypeDescriptor:
        """Declared element type."""
        return self._store.descriptor

    def count(self) -> int:
        """Return the number of elements."""
        return len(self._store)

    def at(self, index: int) -> T:
        """Return the element at index.

        Raises:
            InvalidArgumentError: If index is not a non-negative integer.
            OutOfRangeError: If index >= count().
        """
        return self._store[validate_index(index, self.count())]

    def index_exists(self, index: int) -> bool:
        """Check if index addresses an element.

        Raises:
            InvalidArgumentError: If index is not a non-negative integer.
        """
        return index_exists(index, self.count())

    def to_list(self) -> list[T]:
        """Return the elements as a new list. Changing it does not affect the collection."""
        return self._store.snapshot()

    # In-place mutators

    @mutates_in_place
    def insert(self, index: int, item: T) -> None:
        """Insert item before index, changing this collection.

        The index must address an existing element, so inserting into an
        empty collection or at count() raises OutOfRangeError.

        Raises:
            InvalidArgumentError: If index is malformed or item does not conform.
            OutOfRangeError: If index >= count().
        """
        validate_index(index, self.count())
        self._store = self._store.spliced(index, (item,))

    @mutates_in_place
    def insert_range(self, index: int, items: Iterable[T]) -> None:
        """Insert all items before index, changing this collection.

        A negative index counts from the end as ``count() + index + 1``, so -1
        inserts after the last element. Non-negative indices must address an
        existing element.

        Args:
            index: Insert position.
            items: A list, tuple or Collection of elements.

        Raises:
            InvalidArgumentError: If index or items are malformed, or an item does not conform.
            OutOfRangeError: If the index (after resolution) is out of bounds.
        """
        incoming = self._as_elements(items, "insert_range")
        count = self.count()
        if is_integer(index) and index < 0:
            position = count + index + 1
            if position < 0:
                raise OutOfRangeError(
                    f"Index {index} out of bounds of collection of size {count}"
                )
        else:
            position = validate_index(index, count)
        self._store = self._store.spliced(position, incoming)

    # Persistent membership changes

    def add(self, item: T) -> Collection[T]:
        """Return a new collection with item appended.

        Raises:
            InvalidArgumentError: If item does not conform.
        """
        return self._wrap(self._store.appended(item))

    def clear(self) -> Collection[T]:
        """Return an empty collection of the same type."""
        return self._wrap(self._store.derived(()))

    def remove_at(self, index: int) -> Collection[T]:
        """Return a new collection without the element at index.

        Raises:
            InvalidArgumentError: If index is not a non-negative integer.
            OutOfRangeError: If index >= count().
        """
        return self._wrap(self._store.removed(validate_index(index, self.count())))

    def merge(self, other: Collection[T] | list[T] | tuple[T, ...]) -> Collection[T]:
        """Return a new collection with other's elements appended.

        Raises:
            InvalidArgumentError: If other is neither a Collection nor a list/tuple,
                or one of its elements does not conform to this collection's type.
        """
        return self._wrap(self._store.extended(self._as_elements(other, "merge")))

    def filter(self, condition: Predicate[T]) -> Collection[T]:
        """Return a new collection of the elements for which condition is truthy."""
        return self._wrap(self._store.derived(item for item in self._store if condition(item)))

    def without(self, condition: Predicate[T]) -> Collection[T]:
        """Return a new collection of the elements for which condition is falsy."""
        return self.filter(lambda item: not condition(item))

    # Slicing

    def slice(self, start: int, end: int) -> Collection[T]:
        """Return the elements from start to end, both inclusive.

        ``end`` may be up to count() + 1; the window is cut at the last element.

        Raises:
            InvalidArgumentError: If a bound is not a non-negative integer,
                start > end, or end > count() + 1.
        """
        start, end = validate_slice_bounds(start, end, self.count())
        length = end - start + 1
        return self._wrap(self._store.derived(self._store.items[start : start + length]))

    def take(self, num: int) -> Collection[T]:
        """Return the first num elements."""
        if check_non_negative(num, "Count") == 0:
            return self.clear()
        return self.slice(0, num - 1)

    def take_right(self, num: int) -> Collection[T]:
        """Return the last num elements."""
        check_non_negative(num, "Count")
        return self.slice(self.count() - num, self.count())

    def drop(self, num: int) -> Collection[T]:
        """Return everything after the first num elements."""
        check_non_negative(num, "Count")
        return self.slice(num, self.count())

    def drop_right(self, num: int) -> Collection[T]:
        """Return everything before the last num elements."""
        if check_non_negative(num, "Count") == self.count():
            return self.clear()
        return self.slice(0, self.count() - num - 1)

    def tail(self) -> Collection[T]:
        """Return everything but the first element.

        Raises:
            InvalidArgumentError: If the collection is empty.
        """
        return self.slice(1, self.count())

    def _count_while_true(self, condition: Predicate[T]) -> int:
        count = 0
        for item in self._store:
            if not condition(item):
                break
            count += 1
        return count

    def take_while(self, condition: Predicate[T]) -> Collection[T]:
        """Return the longest prefix whose elements all satisfy condition."""
        count = self._count_while_true(condition)
        return self.take(count) if count else self.clear()

    def drop_while(self, condition: Predicate[T]) -> Collection[T]:
        """Return what remains after the longest prefix satisfying condition.

        Returns this same instance when the first element fails condition.
        """
        count = self._count_while_true(condition)
        return self.drop(count) if count else self

    # Reordering

    def reverse(self) -> Collection[T]:
        """Return a new collection with the elements in reverse order."""
        return self._wrap(self._store.derived(reversed(self._store.items)))

    def sort(self, comparator: Comparator[T]) -> Collection[T]:
        """Return a new collection ordered by a three-way comparator.

        The sort is stable: elements comparing equal keep their relative order.
        """
        return self._wrap(self._store.derived(sorted(self._store, key=cmp_to_key(comparator))))

    def shuffle(self, rng: random.Random | None = None) -> Collection[T]:
        """Return a new collection with the elements in random order.

        Args:
            rng: Random source. Defaults to a new ``random.Random`` seeded with
                the configured shuffle_seed (unseeded when not configured).
        """
        if rng is None:
            rng = random.Random(get_settings().shuffle_seed)
        items = self._store.snapshot()
        rng.shuffle(items)
        return self._wrap(self._store.derived(items))

    # Transformation

    def map(self, transform: Callable[[T], Any], element_type: Any = None) -> Collection[Any]:
        """Return a new collection of transformed elements.

        The result type is ``element_type`` when given, otherwise inferred from
        the first transformed value. Mapping an empty collection without an
        explicit type yields an untyped collection.

        Raises:
            InvalidArgumentError: If the results do not all conform to the result type.
        """
        results = [transform(item) for item in self._store]
        if element_type is not None:
            descriptor = resolve_type(element_type)
        elif results:
            descriptor = infer_type(results[0])
        else:
            descriptor = UNTYPED
            if get_settings().warn_on_untyped:
                warnings.warn(
                    "map() over an empty collection has no result to infer a type from; "
                    "the result is untyped. Pass element_type to keep it usable.",
                    stacklevel=2,
                )
        return self._wrap(TupleStore(descriptor, results))

    def reduce[A](self, combiner: Combiner[A, T], initial: A | None = None) -> A | None:
        """Fold the elements left to right, calling ``combiner(accumulator, item)``."""
        return fold(combiner, self._store, initial)

    def reduce_right[A](self, combiner: Combiner[A, T], initial: A | None = None) -> A | None:
        """Fold the elements right to left, calling ``combiner(accumulator, item)``."""
        return fold(combiner, reversed(self._store.items), initial)

    def each(self, procedure: Procedure[T]) -> None:
        """Call procedure once per element, in order."""
        for item in self._store:
            procedure(item)

    # Search

    def find_index(self, condition: Predicate[T]) -> int:
        """Return the index of the first element satisfying condition, or -1."""
        for index, item in enumerate(self._store):
            if condition(item):
                return index
        return -1

    def find_last_index(self, condition: Predicate[T]) -> int:
        """Return the index of the last element satisfying condition, or -1."""
        items = self._store.items
        for index in range(len(items) - 1, -1, -1):
            if condition(items[index]):
                return index
        return -1

    def find(self, condition: Predicate[T], default: Any = None) -> T | Any:
        """Return the first element satisfying condition, or default."""
        index = self.find_index(condition)
        return default if index == -1 else self._store[index]

    def find_last(self, condition: Predicate[T], default: Any = None) -> T | Any:
        """Return the last element satisfying condition, or default."""
        index = self.find_last_index(condition)
        return default if index == -1 else self._store[index]

    def contains(self, condition: Predicate[T]) -> bool:
        """Check if any element satisfies condition."""
        return self.find_index(condition) != -1

    def every(self, condition: Predicate[T]) -> bool:
        """Check that condition holds for all elements.

        Only a result that is exactly ``False`` counts as failing; other falsy
        results such as None or 0 do not. Stops at the first failure.
        """
        for item in self._store:
            if condition(item) is False:
                return False
        return True

    # Python protocols

    def __iter__(self) -> CollectionIterator[T]:
        return CollectionIterator(self._store.items)

    def __len__(self) -> int:
        return self.count()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Collection):
            return NotImplemented
        return self.get_type() == other.get_type() and self._store.items == other._store.items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.get_type())!r}, {self.to_list()!r})"

    @staticmethod
    def _as_elements(items: Any, operation: str) -> tuple[Any, ...]:
        """Accept a Collection, list or tuple of elements.

        Raises:
            InvalidArgumentError: For anything else, strings included.
        """
        if isinstance(items, Collection):
            return items._store.items
        if isinstance(items, list | tuple):
            return tuple(items)
        raise InvalidArgumentError(
            f"{operation}() must be given a list, tuple or Collection, "
            f"got {items.__class__.__name__}"
        )
