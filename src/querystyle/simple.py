"""Style encoder: ``simple`` (path and header parameters)."""

from __future__ import annotations

from .encoding import EncodingFn, encode
from .errors import UnsupportedValueError
from .values import Value, VMapping, VScalar, VSequence, non_empty, scalar_text


def encode_simple(value: Value, explode: bool = False, encoder: EncodingFn = encode) -> str:
    """Encode *value* in ``simple`` style.

    - VScalar → ``blue``
    - VSequence → ``blue,black,brown`` (``explode`` has no effect)
    - VMapping → ``R,100,G,200`` or, exploded, ``R=100,G=200``

    The result carries no key; the caller places it in a path segment or
    header value.
    """
    if isinstance(value, VScalar):
        return encoder(value.value)

    if isinstance(value, VSequence):
        return ",".join(encoder(scalar_text(item)) for item in non_empty(value))

    if isinstance(value, VMapping):
        sep = "=" if explode else ","
        return ",".join(
            f"{encoder(key)}{sep}{encoder(scalar_text(item))}"
            for key, item in non_empty(value)
        )

    raise UnsupportedValueError("simple style has no encoding for an empty value")
