"""Error taxonomy raised by the guard, the store and collections.

Both concrete errors subclass a builtin so callers that only know the standard
exceptions still catch them:

    try:
        numbers.at(10)
    except IndexError:
        ...
"""


class CollectionError(Exception):
    """Base class for all typedcollection errors."""

    pass


class InvalidArgumentError(CollectionError, ValueError):
    """Raised when an argument is malformed or a value does not conform to the type."""

    pass


class OutOfRangeError(CollectionError, IndexError):
    """Raised when a well-formed index is past the end of the collection."""

    pass
