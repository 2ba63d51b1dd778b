"""Parameter dispatch and query-string assembly."""

from __future__ import annotations

import logging
from typing import Any

from .convert import to_value
from .deep import encode_deep_object
from .deepform import Explode, encode_deepform
from .errors import UnsupportedStyleError
from .form import encode_form
from .model import EncodedPair, EncodedParameter, ParameterSpec, Style, join_pairs
from .simple import encode_simple

logger = logging.getLogger(__name__)


def encode_parameter(spec: ParameterSpec, value: Any) -> str | list[EncodedPair]:
    """Encode *value* according to *spec*.

    *value* may be a Value or plain Python data (see :func:`to_value`).
    Returns a string for ``simple`` and a list of pairs for every other
    style. For ``deepform`` the spec name is not used; the body's field
    names become the keys.
    """
    v = to_value(value)
    encoder = spec.encoder
    logger.debug("encoding %r as %s (explode=%s)", spec.name, spec.style.value, spec.explode)

    if spec.style is Style.SIMPLE:
        return encode_simple(v, spec.explode, encoder)
    if spec.style is Style.FORM:
        return encode_form(spec.name, v, spec.explode, encoder)
    if spec.style is Style.DEEP_OBJECT:
        return encode_deep_object(spec.name, v, spec.explode, encoder)
    return encode_deepform(v, spec.explode, encoder)


class QueryBuilder:
    """Accumulates encoded parameters into one query string or form body.

    Usage::

        qb = QueryBuilder()
        qb.add_form("color", ["blue", "black"])
        qb.add_deep_object("filter", {"status": "open"})
        qb.to_string()   # → "color=blue&color=black&filter[status]=open"
    """

    def __init__(self) -> None:
        self.params: list[EncodedParameter] = []

    @property
    def pairs(self) -> list[EncodedPair]:
        return [pair for param in self.params for pair in param.pairs]

    def add(self, spec: ParameterSpec, value: Any) -> list[EncodedPair]:
        """Encode *value* and append its pairs. Returns the new pairs."""
        if spec.style is Style.SIMPLE:
            raise UnsupportedStyleError(
                f"simple style has no key and cannot be added to a query ({spec.name!r})"
            )
        pairs = encode_parameter(spec, value)
        self.params.append(EncodedParameter(spec, pairs))
        return pairs

    def add_form(self, name: str, value: Any, explode: bool = True) -> list[EncodedPair]:
        return self.add(ParameterSpec(name, Style.FORM, explode), value)

    def add_deep_object(self, name: str, value: Any, explode: bool = True) -> list[EncodedPair]:
        return self.add(ParameterSpec(name, Style.DEEP_OBJECT, explode), value)

    def add_deepform(self, value: Any, explode: Explode = True) -> list[EncodedPair]:
        pairs = encode_deepform(to_value(value), explode)
        if isinstance(explode, bool):
            param = EncodedParameter(ParameterSpec("", Style.DEEPFORM, explode), pairs)
        else:
            param = EncodedParameter(
                ParameterSpec("", Style.DEEPFORM, True), pairs, dict(explode)
            )
        self.params.append(param)
        return pairs

    def reset(self) -> None:
        self.params = []

    def to_string(self) -> str:
        return join_pairs(self.pairs)

    def __str__(self) -> str:
        return self.to_string()
