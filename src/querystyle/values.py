"""Value types for querystyle."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .errors import DuplicateKeyError, UnsupportedNestingError, UnsupportedValueError


@dataclass(frozen=True, slots=True)
class VScalar:
    value: str  # already stringified

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class VSequence:
    items: tuple["Value", ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))

    def __str__(self) -> str:
        return "[" + ", ".join(str(v) for v in self.items) + "]"


@dataclass(frozen=True, slots=True)
class VMapping:
    """Ordered key/value pairs; keys must be unique."""

    entries: tuple[tuple[str, "Value"], ...] = ()

    def __post_init__(self) -> None:
        # tuple copy: the key check must hold for the mapping's whole lifetime
        object.__setattr__(self, "entries", tuple((k, v) for k, v in self.entries))
        seen: set[str] = set()
        for key, _ in self.entries:
            if key in seen:
                raise DuplicateKeyError(key)
            seen.add(key)

    def __str__(self) -> str:
        return "{" + ", ".join(f"{k}: {v}" for k, v in self.entries) + "}"


class _Empty:
    """Singleton for an absent value."""

    _instance: "_Empty | None" = None

    def __new__(cls) -> "_Empty":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Empty"

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return ""


Empty = _Empty()

Value = Union[VScalar, VSequence, VMapping, _Empty]


# ---------------------------------------------------------------------------
# Shape helpers shared by the style encoders
# ---------------------------------------------------------------------------

def scalar_text(value: Value) -> str:
    """Return the text of a scalar found inside a container.

    Containers cannot nest in any style, and Empty has no meaning inside
    a container.
    """
    if isinstance(value, VScalar):
        return value.value
    if isinstance(value, (VSequence, VMapping)):
        raise UnsupportedNestingError("nested containers not supported")
    raise UnsupportedValueError("empty value inside a container")


def non_empty(value: VSequence | VMapping) -> tuple:
    """Return the items or entries of a container, rejecting empty ones."""
    members = value.items if isinstance(value, VSequence) else value.entries
    if not members:
        raise UnsupportedValueError(f"empty {type(value).__name__} has no encoding")
    return members
