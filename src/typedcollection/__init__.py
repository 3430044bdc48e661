"""typedcollection: runtime-checked, persistent typed sequences.

Usage:
    from typedcollection import Collection, InvalidArgumentError

    numbers = Collection("integer", [3, 1, 2])
    ordered = numbers.sort(lambda a, b: a - b)      # Collection('integer', [1, 2, 3])
    window = ordered.slice(0, 1)                    # inclusive end: [1, 2]

    @nominal
    @dataclass
    class Position:
        x: float
        y: float

    path = Collection("Position", [Position(0, 0)])
    path.add("north")                               # raises InvalidArgumentError
"""

__version__ = "0.1.0"

# Core primitives
from typedcollection.core import (
    UNTYPED,
    CollectionError,
    InvalidArgumentError,
    NominalType,
    OutOfRangeError,
    ScalarKind,
    ScalarType,
    TypeDescriptor,
    Untyped,
    conforms,
    infer_type,
    nominal,
    resolve_type,
)

# Collections
from typedcollection.collection import (
    Collection,
    CollectionIterator,
    is_in_place,
    mutates_in_place,
)

# Configuration
from typedcollection.config import GuardSettings, get_settings

# Storage
from typedcollection.store import Store, TupleStore

__all__ = [
    # Version
    "__version__",
    # Core
    "TypeDescriptor",
    "ScalarKind",
    "ScalarType",
    "NominalType",
    "Untyped",
    "UNTYPED",
    "nominal",
    "resolve_type",
    "infer_type",
    "conforms",
    # Errors
    "CollectionError",
    "InvalidArgumentError",
    "OutOfRangeError",
    # Collection
    "Collection",
    "CollectionIterator",
    "mutates_in_place",
    "is_in_place",
    # Storage
    "Store",
    "TupleStore",
    # Configuration
    "GuardSettings",
    "get_settings",
]
