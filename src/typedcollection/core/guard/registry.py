"""Nominal type registry and decorator.

Lets user classes be named by string, the same way scalar kinds are:

    @nominal
    @dataclass
    class Position:
        x: float
        y: float

    positions = Collection("Position", [Position(0, 0)])
"""

from __future__ import annotations

from collections.abc import Callable
from typing import overload

from typedcollection.core.errors import InvalidArgumentError


class TypeRegistry:
    """Process-local registry mapping short names to classes."""

    def __init__(self) -> None:
        """Initialize empty type registry."""
        self._by_name: dict[str, type] = {}

    def register(self, cls: type, name: str | None = None) -> str:
        """Register a class under a name and return the name used.

        Args:
            cls: Class to register.
            name: Name to register under. Defaults to ``cls.__name__``.

        Returns:
            The registered name.

        Raises:
            InvalidArgumentError: If the name is already taken by a different class.
        """
        key = name or cls.__name__
        existing = self._by_name.get(key)
        if existing is not None and existing is not cls:
            raise InvalidArgumentError(
                f"Type name collision: {key!r} already registered for "
                f"{existing.__module__}.{existing.__qualname__}"
            )
        self._by_name[key] = cls
        return key

    def unregister(self, name: str) -> bool:
        """Remove a name. Returns True if it was registered."""
        return self._by_name.pop(name, None) is not None

    def get(self, name: str) -> type | None:
        """Get the class registered under a name.

        Args:
            name: Registered name to look up.

        Returns:
            The class if registered, None otherwise.
        """
        return self._by_name.get(name)

    def is_registered(self, name: str) -> bool:
        """Check if a name is registered."""
        return name in self._by_name


# Module-level registry instance
_registry = TypeRegistry()


def get_registry() -> TypeRegistry:
    """Access the global type registry.

    Returns:
        The process-local TypeRegistry instance.
    """
    return _registry


@overload
def nominal(cls: type) -> type: ...


@overload
def nominal(cls: None = None, *, name: str | None = None) -> Callable[[type], type]: ...


def nominal(cls: type | None = None, *, name: str | None = None) -> type | Callable[[type], type]:
    """Register a class so collections can name it by string.

    Supports three forms:
        @nominal                    # bare decorator
        @nominal()                  # parenthesized, no args
        @nominal(name="Point")      # custom name

    Args:
        cls: The class to register, or None if called with arguments.
        name: Name to register under. Defaults to the class name.

    Returns:
        Decorated class or decorator function.
    """

    def decorator(c: type) -> type:
        _registry.register(c, name=name)
        return c

    if cls is None:
        return decorator
    return decorator(cls)
