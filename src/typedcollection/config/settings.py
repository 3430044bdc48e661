"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for the type
guard and for collection operations that need a default (shuffle seed).

Usage:
    from typedcollection.config import GuardSettings, get_settings

    # Load from environment variables (TYPEDCOLLECTION_*)
    settings = get_settings()

    # Or override with explicit values
    lenient = GuardSettings(bool_is_integer=True)
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class GuardSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for type conformance checks.

    Attributes:
        bool_is_integer: Accept True/False where an integer is declared.
        int_is_float: Accept ints where a float is declared.
        tuple_is_array: Accept tuples where an array is declared.
        warn_on_untyped: Warn when map() over an empty collection yields an untyped result.
        shuffle_seed: Seed for the default shuffle random source (None = unseeded).

    Environment Variables:
        TYPEDCOLLECTION_BOOL_IS_INTEGER
        TYPEDCOLLECTION_INT_IS_FLOAT
        TYPEDCOLLECTION_TUPLE_IS_ARRAY
        TYPEDCOLLECTION_WARN_ON_UNTYPED
        TYPEDCOLLECTION_SHUFFLE_SEED
    """

    model_config = SettingsConfigDict(
        env_prefix="TYPEDCOLLECTION_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    bool_is_integer: bool = False
    int_is_float: bool = False
    tuple_is_array: bool = True
    warn_on_untyped: bool = True
    shuffle_seed: int | None = None


@lru_cache(maxsize=1)
def get_settings() -> GuardSettings:
    """Process-wide settings, loaded once. Call ``get_settings.cache_clear()`` to reload."""
    return GuardSettings()
