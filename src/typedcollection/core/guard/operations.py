"""Type guard: resolving, inferring and checking type descriptors.

These are pure functions; the only state they read is the guard settings
(explicit argument, or the cached process-wide instance).
"""

from __future__ import annotations

import importlib
from collections.abc import Iterable, Mapping
from typing import Any

from typedcollection.config import GuardSettings, get_settings
from typedcollection.core.errors import InvalidArgumentError
from typedcollection.core.guard.models import (
    SCALAR_ALIASES,
    NominalType,
    ScalarKind,
    ScalarType,
    TypeDescriptor,
    Untyped,
)
from typedcollection.core.guard.registry import get_registry

_BUILTIN_KINDS: dict[type, ScalarKind] = {
    bool: ScalarKind.BOOLEAN,
    int: ScalarKind.INTEGER,
    float: ScalarKind.FLOAT,
    str: ScalarKind.STRING,
    list: ScalarKind.ARRAY,
    dict: ScalarKind.MAPPING,
    type(None): ScalarKind.NULL,
}

# Values of these types never count as "object"; tuples join them when they are arrays
_NON_OBJECT_TYPES = (int, float, str, list, dict)


def _is_plain_protocol(cls: type) -> bool:
    """Check if class is a Protocol that isinstance() cannot be used with."""
    return bool(getattr(cls, "_is_protocol", False)) and not getattr(
        cls, "_is_runtime_protocol", False
    )


def _resolve_class(cls: type, settings: GuardSettings) -> TypeDescriptor:
    if cls is tuple:
        return ScalarType(ScalarKind.ARRAY) if settings.tuple_is_array else NominalType(tuple)
    kind = _BUILTIN_KINDS.get(cls)
    if kind is not None:
        return ScalarType(kind)
    if _is_plain_protocol(cls):
        raise InvalidArgumentError(
            f"Protocol {cls.__name__} is not @runtime_checkable and cannot be used as a type"
        )
    return NominalType(cls)


def _import_dotted(path: str) -> type:
    """Import ``package.module.Class`` and return the class.

    Raises:
        InvalidArgumentError: If the module or attribute is missing, or is not a class.
    """
    module_name, _, attr = path.rpartition(".")
    if not module_name or not attr or module_name.startswith("."):
        raise InvalidArgumentError(f"Cannot resolve type {path!r}: malformed dotted path")
    try:
        module = importlib.import_module(module_name)
    except (ImportError, ValueError, TypeError) as e:
        raise InvalidArgumentError(f"Cannot resolve type {path!r}: {e}") from e
    target = getattr(module, attr, None)
    if not isinstance(target, type):
        raise InvalidArgumentError(f"Cannot resolve type {path!r}: not a class")
    return target


def resolve_type(spec: Any, settings: GuardSettings | None = None) -> TypeDescriptor:
    """Convert a constructor type argument to a TypeDescriptor.

    Handles multiple input formats:
    - TypeDescriptor -> passthrough
    - ScalarKind -> ScalarType
    - Builtin class (int, str, list, ...) -> ScalarType of its kind
    - tuple -> ScalarType array, or NominalType(tuple) when tuples are not arrays
    - Any other class -> NominalType
    - Scalar name or alias ("integer", "double", ...) -> ScalarType
    - Registered name ("Position") -> NominalType
    - Dotted path ("package.module.Class") -> NominalType

    Args:
        spec: Type specification in one of the formats above.
        settings: Guard settings. Defaults to the process-wide settings.

    Returns:
        Resolved TypeDescriptor.

    Raises:
        InvalidArgumentError: If spec is not a recognized or supported type.
    """
    if isinstance(spec, ScalarType | NominalType | Untyped):
        return spec
    if isinstance(spec, ScalarKind):
        return ScalarType(spec)
    settings = settings or get_settings()
    if isinstance(spec, type):
        return _resolve_class(spec, settings)
    if isinstance(spec, str) and spec:
        kind = SCALAR_ALIASES.get(spec.lower())
        if kind is not None:
            return ScalarType(kind)
        registered = get_registry().get(spec)
        if registered is not None:
            return _resolve_class(registered, settings)
        if "." in spec:
            return _resolve_class(_import_dotted(spec), settings)
        raise InvalidArgumentError(f"Unknown type {spec!r}")
    raise InvalidArgumentError(f"Unsupported type descriptor: {spec!r}")


def infer_type(value: Any, settings: GuardSettings | None = None) -> ScalarType:
    """Infer the scalar kind of a value from its runtime type.

    Any instance that is not a builtin scalar, sequence or mapping is ``object``.
    A tuple is ``array`` while tuple_is_array is on and ``object`` otherwise.
    """
    settings = settings or get_settings()
    if value is None:
        kind = ScalarKind.NULL
    elif isinstance(value, bool):
        kind = ScalarKind.BOOLEAN
    elif isinstance(value, int):
        kind = ScalarKind.INTEGER
    elif isinstance(value, float):
        kind = ScalarKind.FLOAT
    elif isinstance(value, str):
        kind = ScalarKind.STRING
    elif isinstance(value, list):
        kind = ScalarKind.ARRAY
    elif isinstance(value, tuple):
        kind = ScalarKind.ARRAY if settings.tuple_is_array else ScalarKind.OBJECT
    elif isinstance(value, Mapping):
        kind = ScalarKind.MAPPING
    else:
        kind = ScalarKind.OBJECT
    return ScalarType(kind)


def _scalar_conforms(kind: ScalarKind, value: Any, settings: GuardSettings) -> bool:
    match kind:
        case ScalarKind.INTEGER:
            return isinstance(value, int) and (
                settings.bool_is_integer or not isinstance(value, bool)
            )
        case ScalarKind.FLOAT:
            if isinstance(value, float):
                return True
            return (
                settings.int_is_float and isinstance(value, int) and not isinstance(value, bool)
            )
        case ScalarKind.STRING:
            return isinstance(value, str)
        case ScalarKind.BOOLEAN:
            return isinstance(value, bool)
        case ScalarKind.ARRAY:
            return isinstance(value, list) or (settings.tuple_is_array and isinstance(value, tuple))
        case ScalarKind.MAPPING:
            return isinstance(value, Mapping)
        case ScalarKind.CALLABLE:
            return callable(value)
        case ScalarKind.NULL:
            return value is None
        case ScalarKind.OBJECT:
            if isinstance(value, tuple):
                return not settings.tuple_is_array
            return value is not None and not isinstance(value, _NON_OBJECT_TYPES)
    return False


def conforms(
    descriptor: TypeDescriptor, value: Any, settings: GuardSettings | None = None
) -> bool:
    """Check if a value conforms to a type descriptor.

    Args:
        descriptor: Declared element type.
        value: Candidate value.
        settings: Guard settings. Defaults to the process-wide settings.

    Returns:
        True if value conforms, False otherwise. Nothing conforms to Untyped.
    """
    if isinstance(descriptor, NominalType):
        return isinstance(value, descriptor.cls)
    if isinstance(descriptor, ScalarType):
        return _scalar_conforms(descriptor.kind, value, settings or get_settings())
    return False


def validate_one(
    descriptor: TypeDescriptor, value: Any, settings: GuardSettings | None = None
) -> None:
    """Validate a single value against a type descriptor.

    Raises:
        InvalidArgumentError: If value does not conform.
    """
    if not conforms(descriptor, value, settings):
        raise InvalidArgumentError(
            f"Expected value of type {descriptor}, got {type(value).__name__}: {value!r}"
        )


def validate_many(
    descriptor: TypeDescriptor, values: Iterable[Any], settings: GuardSettings | None = None
) -> None:
    """Validate every value, stopping at the first one that does not conform.

    Raises:
        InvalidArgumentError: Naming the position of the first non-conforming value.
    """
    settings = settings or get_settings()
    for position, value in enumerate(values):
        if not conforms(descriptor, value, settings):
            raise InvalidArgumentError(
                f"Expected value of type {descriptor} at position {position}, "
                f"got {type(value).__name__}: {value!r}"
            )
