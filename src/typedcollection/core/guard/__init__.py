"""Type guard functionality: descriptors, registry and conformance checks."""

from typedcollection.core.guard.models import (
    SCALAR_ALIASES,
    UNTYPED,
    NominalType,
    ScalarKind,
    ScalarType,
    TypeDescriptor,
    Untyped,
)
from typedcollection.core.guard.operations import (
    conforms,
    infer_type,
    resolve_type,
    validate_many,
    validate_one,
)
from typedcollection.core.guard.registry import TypeRegistry, get_registry, nominal

__all__ = [
    # Models
    "TypeDescriptor",
    "ScalarKind",
    "ScalarType",
    "NominalType",
    "Untyped",
    "UNTYPED",
    "SCALAR_ALIASES",
    # Registry
    "TypeRegistry",
    "get_registry",
    "nominal",
    # Operations
    "resolve_type",
    "infer_type",
    "conforms",
    "validate_one",
    "validate_many",
]
