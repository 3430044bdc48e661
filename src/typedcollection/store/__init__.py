"""Validated store backends."""

from typedcollection.store.local import TupleStore
from typedcollection.store.protocol import Store

__all__ = [
    "Store",
    "TupleStore",
]
