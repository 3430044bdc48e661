"""Index functionality: the shared two-tier validation policy."""

from typedcollection.core.index.operations import (
    check_non_negative,
    index_exists,
    is_integer,
    validate_index,
    validate_slice_bounds,
)

__all__ = [
    "is_integer",
    "check_non_negative",
    "index_exists",
    "validate_index",
    "validate_slice_bounds",
]
