"""Tests for type resolution, inference and conformance.

Critical Invariants:
- Unknown type names are rejected, never silently accepted
- bool is not an integer unless configured
- validate_many stops at the first violation and names its position
"""

from collections.abc import Sized
from typing import Protocol, runtime_checkable

import pytest

from typedcollection import InvalidArgumentError
from typedcollection.config import GuardSettings
from typedcollection.core.guard import (
    UNTYPED,
    NominalType,
    ScalarKind,
    ScalarType,
    conforms,
    infer_type,
    resolve_type,
    validate_many,
    validate_one,
)


@runtime_checkable
class Named(Protocol):
    name: str


class Plain(Protocol):
    name: str


class Dog:
    def __init__(self, name: str) -> None:
        self.name = name


class Puppy(Dog):
    pass


INTEGER = ScalarType(ScalarKind.INTEGER)


# Resolution


@pytest.mark.parametrize(
    ("spec", "kind"),
    [
        ("integer", ScalarKind.INTEGER),
        ("int", ScalarKind.INTEGER),
        ("double", ScalarKind.FLOAT),
        ("float", ScalarKind.FLOAT),
        ("String", ScalarKind.STRING),
        ("bool", ScalarKind.BOOLEAN),
        ("array", ScalarKind.ARRAY),
        ("dict", ScalarKind.MAPPING),
        ("object", ScalarKind.OBJECT),
        ("NULL", ScalarKind.NULL),
        (int, ScalarKind.INTEGER),
        (bool, ScalarKind.BOOLEAN),
        (tuple, ScalarKind.ARRAY),
        (type(None), ScalarKind.NULL),
        (ScalarKind.CALLABLE, ScalarKind.CALLABLE),
    ],
)
def test_resolve_scalar_names_and_builtins(spec, kind):
    assert resolve_type(spec) == ScalarType(kind)


def test_resolve_class_gives_nominal_type():
    assert resolve_type(Dog) == NominalType(Dog)


def test_resolve_passes_descriptors_through():
    descriptor = NominalType(Dog)

    assert resolve_type(descriptor) is descriptor
    assert resolve_type(UNTYPED) is UNTYPED


def test_resolve_dotted_import_path():
    assert resolve_type("collections.OrderedDict") == NominalType(
        __import__("collections").OrderedDict
    )


def test_resolve_runtime_checkable_protocol():
    assert resolve_type(Named) == NominalType(Named)


def test_resolve_rejects_plain_protocol():
    """Plain protocols cannot be checked with isinstance()."""
    with pytest.raises(InvalidArgumentError, match="runtime_checkable"):
        resolve_type(Plain)


@pytest.mark.parametrize(
    "spec",
    [
        "widget",
        "",
        "no.such.module.Thing",
        "collections.no_such_thing",
        ".Foo",
        "..x",
        ".",
        "os.",
        "a..b",
        None,
        42,
        1.5,
    ],
)
def test_resolve_rejects_unknown_specs(spec):
    with pytest.raises(InvalidArgumentError):
        resolve_type(spec)


def test_resolve_rejects_dotted_path_to_non_class():
    with pytest.raises(InvalidArgumentError, match="not a class"):
        resolve_type("os.path.join")


def test_resolve_tuple_follows_tuple_is_array():
    loose = GuardSettings(tuple_is_array=False)

    assert resolve_type(tuple) == ScalarType(ScalarKind.ARRAY)
    assert resolve_type(tuple, loose) == NominalType(tuple)
    assert conforms(resolve_type(tuple, loose), (1, 2), loose)


# Inference


@pytest.mark.parametrize(
    ("value", "kind"),
    [
        (1, ScalarKind.INTEGER),
        (True, ScalarKind.BOOLEAN),
        (1.5, ScalarKind.FLOAT),
        ("a", ScalarKind.STRING),
        ([1], ScalarKind.ARRAY),
        ((1,), ScalarKind.ARRAY),
        ({"a": 1}, ScalarKind.MAPPING),
        (None, ScalarKind.NULL),
        (Dog("rex"), ScalarKind.OBJECT),
    ],
)
def test_infer_type(value, kind):
    assert infer_type(value) == ScalarType(kind)


@pytest.mark.parametrize("tuple_is_array", [True, False])
def test_inferred_type_accepts_its_own_value(tuple_is_array):
    settings = GuardSettings(tuple_is_array=tuple_is_array)

    for value in (1, True, 1.5, "a", [1], (1, 2), {"a": 1}, None, Dog("rex")):
        assert conforms(infer_type(value, settings), value, settings)


def test_tuples_are_objects_when_not_arrays():
    loose = GuardSettings(tuple_is_array=False)

    assert infer_type((1, 2), loose) == ScalarType(ScalarKind.OBJECT)
    assert conforms(ScalarType(ScalarKind.OBJECT), (1, 2), loose)
    assert not conforms(ScalarType(ScalarKind.OBJECT), [1, 2], loose)


# Conformance


def test_bool_is_not_an_integer_by_default():
    assert conforms(INTEGER, 1)
    assert not conforms(INTEGER, True)


def test_bool_is_integer_when_configured():
    assert conforms(INTEGER, True, GuardSettings(bool_is_integer=True))


def test_int_is_not_a_float_unless_configured():
    double = ScalarType(ScalarKind.FLOAT)

    assert conforms(double, 1.0)
    assert not conforms(double, 1)
    assert conforms(double, 1, GuardSettings(int_is_float=True))
    assert not conforms(double, True, GuardSettings(int_is_float=True))


def test_tuple_array_membership_is_configurable():
    array = ScalarType(ScalarKind.ARRAY)

    assert conforms(array, [1])
    assert conforms(array, (1,))
    assert not conforms(array, (1,), GuardSettings(tuple_is_array=False))
    assert not conforms(array, "abc")


def test_object_excludes_builtin_scalars():
    obj = ScalarType(ScalarKind.OBJECT)

    assert conforms(obj, Dog("rex"))
    assert conforms(obj, object())
    for value in (1, 1.0, "s", [1], (1,), {"a": 1}, None, False):
        assert not conforms(obj, value)


def test_callable_and_null_kinds():
    assert conforms(ScalarType(ScalarKind.CALLABLE), len)
    assert not conforms(ScalarType(ScalarKind.CALLABLE), 3)
    assert conforms(ScalarType(ScalarKind.NULL), None)
    assert not conforms(ScalarType(ScalarKind.NULL), 0)


def test_nominal_accepts_subclasses_and_interfaces():
    assert conforms(NominalType(Dog), Puppy("bo"))
    assert conforms(NominalType(Named), Dog("rex"))
    assert conforms(NominalType(Sized), [1, 2])
    assert not conforms(NominalType(Puppy), Dog("rex"))


def test_nothing_conforms_to_untyped():
    for value in (1, "a", None, Dog("rex")):
        assert not conforms(UNTYPED, value)


# Validation


def test_validate_one_raises_on_mismatch():
    validate_one(INTEGER, 3)

    with pytest.raises(InvalidArgumentError, match="integer"):
        validate_one(INTEGER, "3")


def test_validate_many_is_fail_fast():
    """The first violation is reported; later values are never examined."""
    seen = []

    def values():
        for value in (1, "bad", 2, "worse"):
            seen.append(value)
            yield value

    with pytest.raises(InvalidArgumentError, match="position 1"):
        validate_many(INTEGER, values())

    assert seen == [1, "bad"]


def test_invalid_argument_error_is_a_value_error():
    with pytest.raises(ValueError):
        validate_one(INTEGER, "x")
