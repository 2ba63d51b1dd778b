"""Deepform: a form body mixing flat fields with deepObject fields."""

from __future__ import annotations

import logging
from typing import Mapping, Union

from .deep import encode_deep_object
from .encoding import EncodingFn, encode
from .errors import UnsupportedNestingError, UnsupportedValueError
from .form import encode_form
from .model import EncodedPair
from .values import Value, VMapping, VSequence, non_empty

logger = logging.getLogger(__name__)

Explode = Union[bool, Mapping[str, bool]]


def encode_deepform(
    value: Value,
    explode: Explode = True,
    encoder: EncodingFn = encode,
) -> list[EncodedPair]:
    """Encode the fields of a top-level mapping as one form body.

    Scalar, empty and sequence fields are encoded as ``form`` parameters
    named after the field; mapping fields are encoded as ``deepObject``
    parameters. Both delegates receive the same *encoder*.

    *explode* is either one flag for every field, or a mapping from field
    name to flag (unlisted fields explode).

    Example::

        body = VMapping([
            ("id", VScalar("5")),
            ("filter", VMapping([("status", VScalar("open"))])),
        ])
        join_pairs(encode_deepform(body))
        # → id=5&filter[status]=open
    """
    if not isinstance(value, VMapping):
        raise UnsupportedValueError(
            f"deepform requires a mapping, got {type(value).__name__}"
        )
    _check_explode(explode)

    pairs: list[EncodedPair] = []
    for field, item in non_empty(value):
        field_explode = _field_explode(explode, field)
        if isinstance(item, VMapping):
            logger.debug("deepform field %r encoded as deepObject", field)
            pairs.extend(encode_deep_object(field, item, field_explode, encoder))
            continue
        if isinstance(item, VSequence) and any(
            isinstance(v, VMapping) for v in item.items
        ):
            raise UnsupportedNestingError(
                f"deepform field {field!r} is a sequence of mappings"
            )
        pairs.extend(encode_form(field, item, field_explode, encoder))
    return pairs


def _check_explode(explode: Explode) -> None:
    if isinstance(explode, bool):
        return
    if not isinstance(explode, Mapping):
        raise TypeError(
            f"explode must be a bool or a mapping of field names, got {type(explode).__name__}"
        )


def _field_explode(explode: Explode, field: str) -> bool:
    if isinstance(explode, bool):
        return explode
    return explode.get(field, True)
