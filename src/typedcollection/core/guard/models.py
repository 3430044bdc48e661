"""Type descriptor models.

A descriptor names the single element kind a collection accepts:

    ScalarType(ScalarKind.INTEGER)   # builtin scalar kind
    NominalType(Position)            # class, ABC or runtime-checkable protocol
    UNTYPED                          # nothing could be inferred
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ScalarKind(StrEnum):
    """Builtin kinds a collection can be declared over."""

    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    BOOLEAN = "boolean"
    ARRAY = "array"  # list, and tuple unless disabled in settings
    MAPPING = "mapping"
    OBJECT = "object"  # any non-builtin instance
    CALLABLE = "callable"
    NULL = "null"


SCALAR_ALIASES: dict[str, ScalarKind] = {
    **{kind.value: kind for kind in ScalarKind},
    "int": ScalarKind.INTEGER,
    "double": ScalarKind.FLOAT,
    "str": ScalarKind.STRING,
    "bool": ScalarKind.BOOLEAN,
    "list": ScalarKind.ARRAY,
    "dict": ScalarKind.MAPPING,
    "none": ScalarKind.NULL,
}
"""Lower-cased names accepted for scalar kinds."""


@dataclass(frozen=True, slots=True)
class ScalarType:
    """Descriptor for a builtin scalar kind."""

    kind: ScalarKind

    def __str__(self) -> str:
        return self.kind.value


@dataclass(frozen=True, slots=True)
class NominalType:
    """Descriptor matching instances of a class or interface."""

    cls: type

    @property
    def name(self) -> str:
        """Fully qualified name of the matched class."""
        return f"{self.cls.__module__}.{self.cls.__qualname__}"

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Untyped:
    """Marker for a collection whose element type could not be inferred.

    Produced by ``map`` over an empty collection. No value conforms to it.
    """

    def __str__(self) -> str:
        return "untyped"


UNTYPED = Untyped()

TypeDescriptor = ScalarType | NominalType | Untyped
