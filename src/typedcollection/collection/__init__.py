"""Collection functionality: the typed value type and its iteration adapter."""

from typedcollection.collection.collection import Collection, is_in_place, mutates_in_place
from typedcollection.collection.iteration import CollectionIterator

__all__ = [
    "Collection",
    "CollectionIterator",
    "mutates_in_place",
    "is_in_place",
]
