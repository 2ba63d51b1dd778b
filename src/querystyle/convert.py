"""Plain Python data → Value conversion."""

from __future__ import annotations

import dataclasses
from decimal import Decimal
from enum import Enum
from typing import Any, Mapping

from .errors import UnsupportedValueError
from .values import Value, VMapping, VScalar, VSequence, _Empty, Empty


def to_value(obj: Any) -> Value:
    """Convert a Python object to a Value.

    - ``None`` → Empty
    - ``bool`` → VScalar ``"true"``/``"false"``
    - ``int``/``float``/``Decimal``/``str`` → VScalar
    - ``bytes`` → VSequence of byte values
    - ``Enum`` → its ``.value``, converted
    - ``list``/``tuple`` → VSequence
    - mappings and dataclass instances → VMapping, in order

    Values that are already a Value are returned unchanged. Depth is not
    checked here; each style encoder rejects what it cannot encode.
    """
    if isinstance(obj, (VScalar, VSequence, VMapping, _Empty)):
        return obj
    if obj is None:
        return Empty
    # bool before int: bool is an int subclass
    if isinstance(obj, bool):
        return VScalar("true" if obj else "false")
    if isinstance(obj, Enum):
        return to_value(obj.value)
    if isinstance(obj, str):
        return VScalar(obj)
    if isinstance(obj, (int, float, Decimal)):
        return VScalar(str(obj))
    if isinstance(obj, (bytes, bytearray)):
        return VSequence([VScalar(str(b)) for b in obj])
    if isinstance(obj, (list, tuple)):
        return VSequence([to_value(item) for item in obj])
    if isinstance(obj, Mapping):
        return VMapping([(_key_text(k), to_value(v)) for k, v in obj.items()])
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return VMapping(
            [(f.name, to_value(getattr(obj, f.name))) for f in dataclasses.fields(obj)]
        )
    raise UnsupportedValueError(f"cannot convert {type(obj).__name__} to a value")


def _key_text(key: Any) -> str:
    """Mapping keys follow the same canonical text as scalar values."""
    value = to_value(key)
    if not isinstance(value, VScalar):
        raise UnsupportedValueError(f"mapping key {key!r} is not a scalar")
    return value.value
