"""Error types for querystyle."""

from __future__ import annotations


class QueryStyleError(Exception):
    """Base class for all encoding errors."""


class ShapeMismatchError(QueryStyleError):
    """A style was applied to a value shape it does not define."""


class UnsupportedNestingError(ShapeMismatchError):
    """A container was found where only scalars are allowed."""


class UnsupportedValueError(ShapeMismatchError):
    """The value has no wire form in the requested style."""


class DuplicateKeyError(QueryStyleError):
    """A mapping holds the same key more than once."""

    def __init__(self, key: str) -> None:
        super().__init__(f"duplicate key {key!r}")
        self.key = key


class UnsupportedStyleError(QueryStyleError, ValueError):
    """Unknown parameter style, or a style used where it cannot appear."""
