"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from dataclasses import dataclass

from typedcollection import Collection, nominal
from typedcollection.config import get_settings
from typedcollection.core.guard import get_registry


@pytest.fixture
def settings_env(monkeypatch):
    """Set TYPEDCOLLECTION_* variables and reload the cached settings.

    Usage: settings_env(BOOL_IS_INTEGER="true")
    """

    def apply(**values: str) -> None:
        for key, value in values.items():
            monkeypatch.setenv(f"TYPEDCOLLECTION_{key}", value)
        get_settings.cache_clear()

    get_settings.cache_clear()
    yield apply
    get_settings.cache_clear()


@nominal(name="FixturePoint")
@dataclass(frozen=True, slots=True)
class FixturePoint:
    x: float
    y: float


@pytest.fixture
def point_cls():
    return FixturePoint


@pytest.fixture
def numbers():
    """Collection("integer", [1, 2, 3])."""
    return Collection("integer", [1, 2, 3])


@pytest.fixture
def empty_numbers():
    return Collection("integer")


@pytest.fixture
def registry():
    """Global type registry; names registered during a test are removed afterwards."""
    reg = get_registry()
    before = set(reg._by_name)
    yield reg
    for name in set(reg._by_name) - before:
        reg.unregister(name)
