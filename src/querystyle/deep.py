"""Style encoder: ``deepObject``."""

from __future__ import annotations

import logging

from .encoding import EncodingFn, encode
from .errors import UnsupportedNestingError, UnsupportedValueError
from .model import EncodedPair
from .values import Value, VMapping, VScalar, VSequence, non_empty, scalar_text

logger = logging.getLogger(__name__)


def encode_deep_object(
    name: str,
    value: Value,
    explode: bool = True,
    encoder: EncodingFn = encode,
) -> list[EncodedPair]:
    """Encode a mapping as ``deepObject`` pairs.

    Example::

        encode_deep_object("coord", VMapping([("x", VScalar("1")), ("y", VScalar("2"))]))
        # → coord[x]=1&coord[y]=2

    A field holding a sequence repeats its bracketed key once per item
    (``filter[tag]=a&filter[tag]=b``).

    ``explode=False`` is not defined by OpenAPI. Fields still get bracketed
    keys, but a sequence field is collapsed into one comma-joined value
    (``filter[tag]=a,b``) instead of repeating the key.
    """
    if not isinstance(value, VMapping):
        raise UnsupportedValueError(
            f"deepObject requires a mapping, got {type(value).__name__}"
        )
    if not explode:
        logger.debug("non-exploded deepObject requested for %r", name)

    prefix = encoder(name)
    pairs: list[EncodedPair] = []
    for field, item in non_empty(value):
        key = f"{prefix}[{encoder(field)}]"
        if isinstance(item, VSequence):
            texts = [encoder(scalar_text(v)) for v in non_empty(item)]
            if explode:
                pairs.extend(EncodedPair(key, text) for text in texts)
            else:
                pairs.append(EncodedPair(key, ",".join(texts)))
        elif isinstance(item, VMapping):
            raise UnsupportedNestingError(
                f"deepObject field {field!r} is itself a mapping"
            )
        elif isinstance(item, VScalar):
            pairs.append(EncodedPair(key, encoder(item.value)))
        else:
            raise UnsupportedValueError(f"deepObject field {field!r} is empty")
    return pairs
