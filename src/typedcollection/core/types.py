"""Core type definitions for typedcollection."""

from collections.abc import Callable
from typing import Any

type Predicate[T] = Callable[[T], Any]
"""Callback tested for truthiness (``every`` compares the result against ``False``)."""

type Comparator[T] = Callable[[T, T], int]
"""Three-way comparator: negative, zero or positive like ``a - b``."""

type Combiner[A, T] = Callable[[A, T], A]
"""Fold step taking ``(accumulator, item)`` and returning the next accumulator."""

type Procedure[T] = Callable[[T], object]
"""Side-effecting callback; its return value is ignored."""
