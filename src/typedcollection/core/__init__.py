"""Core functionalities: stateless protocols and primitives.

Architecture Note:
    core/ contains pure, stateless functionalities: error types, type
    descriptors and the guard that checks them, and index validation.
    The stateful value type lives in collection/, its backing store in store/.
"""

from typedcollection.core.errors import CollectionError, InvalidArgumentError, OutOfRangeError
from typedcollection.core.guard import (
    UNTYPED,
    NominalType,
    ScalarKind,
    ScalarType,
    TypeDescriptor,
    TypeRegistry,
    Untyped,
    conforms,
    get_registry,
    infer_type,
    nominal,
    resolve_type,
    validate_many,
    validate_one,
)
from typedcollection.core.index import (
    check_non_negative,
    index_exists,
    is_integer,
    validate_index,
    validate_slice_bounds,
)
from typedcollection.core.types import Combiner, Comparator, Predicate, Procedure

__all__ = [
    # Types
    "Predicate",
    "Comparator",
    "Combiner",
    "Procedure",
    # Errors
    "CollectionError",
    "InvalidArgumentError",
    "OutOfRangeError",
    # Guard
    "TypeDescriptor",
    "ScalarKind",
    "ScalarType",
    "NominalType",
    "Untyped",
    "UNTYPED",
    "TypeRegistry",
    "get_registry",
    "nominal",
    "resolve_type",
    "infer_type",
    "conforms",
    "validate_one",
    "validate_many",
    # Index
    "is_integer",
    "check_non_negative",
    "index_exists",
    "validate_index",
    "validate_slice_bounds",
]
