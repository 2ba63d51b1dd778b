"""Parameter descriptions and encoded output for querystyle."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable

from .encoding import EncodingFn, encode, encode_query_allow_reserved
from .errors import UnsupportedStyleError


# ---------------------------------------------------------------------------
# Style
# ---------------------------------------------------------------------------

class Style(Enum):
    SIMPLE = "simple"
    FORM = "form"
    DEEP_OBJECT = "deepObject"
    DEEPFORM = "deepform"

    @classmethod
    def parse(cls, name: str) -> Style:
        for style in cls:
            if style.value == name:
                return style
        raise UnsupportedStyleError(f"unsupported style {name!r}")


# Default style for each OpenAPI parameter location
_LOCATION_STYLES = {
    "query": Style.FORM,
    "cookie": Style.FORM,
    "path": Style.SIMPLE,
    "header": Style.SIMPLE,
}


# ---------------------------------------------------------------------------
# ParameterSpec
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParameterSpec:
    name: str
    style: Style = Style.FORM
    explode: bool | None = None
    allow_reserved: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.style, str):
            object.__setattr__(self, "style", Style.parse(self.style))
        if self.explode is None:
            # OpenAPI: explode defaults to true only for form (and the styles
            # built on it)
            object.__setattr__(self, "explode", self.style is not Style.SIMPLE)

    @property
    def encoder(self) -> EncodingFn:
        return encode_query_allow_reserved if self.allow_reserved else encode

    @classmethod
    def from_openapi(cls, obj: dict[str, Any]) -> ParameterSpec:
        """Build a spec from an OpenAPI Parameter Object.

        Example::

            ParameterSpec.from_openapi({"name": "id", "in": "path"})
            # → ParameterSpec(name="id", style=Style.SIMPLE, explode=False)
        """
        location = obj.get("in", "query")
        style_name = obj.get("style")
        if style_name is None:
            style = _LOCATION_STYLES.get(location, Style.FORM)
        else:
            style = Style.parse(style_name)
        return cls(
            name=obj["name"],
            style=style,
            explode=obj.get("explode"),
            allow_reserved=bool(obj.get("allowReserved", False)),
        )


# ---------------------------------------------------------------------------
# EncodedPair
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class EncodedPair:
    key: str    # already percent-encoded
    value: str  # already percent-encoded

    def __str__(self) -> str:
        return f"{self.key}={self.value}"


def join_pairs(pairs: Iterable[EncodedPair]) -> str:
    """Join pairs into a query string or form body (``k=v&k=v``)."""
    return "&".join(str(p) for p in pairs)


@dataclass
class EncodedParameter:
    """One parameter as recorded by a :class:`~querystyle.query.QueryBuilder`."""

    spec: ParameterSpec
    pairs: list[EncodedPair] = field(default_factory=list)
    # deepform only: per-field explode overrides
    field_explode: dict[str, bool] = field(default_factory=dict)
