"""Style encoder: ``form`` (query parameters)."""

from __future__ import annotations

from .encoding import EncodingFn, encode
from .model import EncodedPair
from .values import Value, VMapping, VScalar, VSequence, non_empty, scalar_text


def encode_form(
    name: str,
    value: Value,
    explode: bool = True,
    encoder: EncodingFn = encode,
) -> list[EncodedPair]:
    """Encode *value* as ``form`` query pairs.

    ============  =============================  =======================
    value         explode=True                   explode=False
    ============  =============================  =======================
    Empty         ``color=``                     ``color=``
    VScalar       ``color=blue``                 ``color=blue``
    VSequence     ``color=blue&color=black``     ``color=blue,black``
    VMapping      ``R=100&G=200``                ``color=R,100,G,200``
    ============  =============================  =======================

    An exploded mapping drops *name*: each field becomes its own key.
    """
    key = encoder(name)

    if isinstance(value, VScalar):
        return [EncodedPair(key, encoder(value.value))]

    if isinstance(value, VSequence):
        texts = [encoder(scalar_text(item)) for item in non_empty(value)]
        if explode:
            return [EncodedPair(key, text) for text in texts]
        return [EncodedPair(key, ",".join(texts))]

    if isinstance(value, VMapping):
        fields = [
            (encoder(field), encoder(scalar_text(item)))
            for field, item in non_empty(value)
        ]
        if explode:
            return [EncodedPair(field, text) for field, text in fields]
        return [EncodedPair(key, ",".join(f"{field},{text}" for field, text in fields))]

    # Empty: key with no value
    return [EncodedPair(key, "")]
