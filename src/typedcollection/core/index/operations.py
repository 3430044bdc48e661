"""Shared index validation policy.

Two tiers, applied by every index-consuming operation:
1. The index must be a non-negative int (bool excluded) -> InvalidArgumentError.
2. The index must be below the element count -> OutOfRangeError.
"""

from __future__ import annotations

from typing import Any

from typedcollection.core.errors import InvalidArgumentError, OutOfRangeError


def is_integer(value: Any) -> bool:
    """Return true if value is an int and not a bool."""
    return isinstance(value, int) and not isinstance(value, bool)


def check_non_negative(value: Any, name: str = "Index") -> int:
    """Tier-1 check shared by indices and element counts.

    Args:
        value: Candidate index or count.
        name: Name used in the error message.

    Returns:
        The value, unchanged.

    Raises:
        InvalidArgumentError: If value is not an int or is negative.
    """
    if not is_integer(value):
        raise InvalidArgumentError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise InvalidArgumentError(f"{name} must be a non-negative integer, got {value}")
    return value


def index_exists(index: Any, count: int) -> bool:
    """Check if an index addresses an element.

    Raises:
        InvalidArgumentError: If index fails tier 1.
    """
    return check_non_negative(index) < count


def validate_index(index: Any, count: int) -> int:
    """Validate an index against both tiers.

    Args:
        index: Candidate index.
        count: Number of elements.

    Returns:
        The validated index.

    Raises:
        InvalidArgumentError: If index is not a non-negative integer.
        OutOfRangeError: If index >= count.
    """
    if not index_exists(index, count):
        raise OutOfRangeError(f"Index {index} out of bounds of collection of size {count}")
    return index


def validate_slice_bounds(start: Any, end: Any, count: int) -> tuple[int, int]:
    """Validate inclusive slice bounds.

    ``end`` may run one past ``count`` so the final window can be written as
    ``slice(n, count)``.

    Returns:
        The validated (start, end) pair.

    Raises:
        InvalidArgumentError: If either bound is malformed, start > end, or end > count + 1.
    """
    check_non_negative(start, "Start")
    check_non_negative(end, "End")
    if start > end:
        raise InvalidArgumentError(f"End must be greater than start, got start={start} end={end}")
    if end > count + 1:
        raise InvalidArgumentError(
            f"End {end} exceeds the count of the items in the collection ({count})"
        )
    return start, end
