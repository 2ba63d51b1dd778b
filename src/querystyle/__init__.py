"""querystyle — OpenAPI parameter style encoding (simple, form, deepObject, deepform)."""

from .convert import to_value
from .deep import encode_deep_object
from .deepform import encode_deepform
from .encoding import (
    encode,
    encode_path,
    encode_query,
    encode_query_allow_reserved,
    encode_www_form_urlencoded,
    passthrough,
)
from .errors import (
    DuplicateKeyError,
    QueryStyleError,
    ShapeMismatchError,
    UnsupportedNestingError,
    UnsupportedStyleError,
    UnsupportedValueError,
)
from .form import encode_form
from .model import EncodedPair, ParameterSpec, Style, join_pairs
from .query import QueryBuilder, encode_parameter
from .repl import QueryRepl
from .simple import encode_simple
from .values import Empty, Value, VMapping, VScalar, VSequence

__all__ = [
    "to_value",
    "encode",
    "encode_path",
    "encode_query",
    "encode_query_allow_reserved",
    "encode_www_form_urlencoded",
    "passthrough",
    "encode_simple",
    "encode_form",
    "encode_deep_object",
    "encode_deepform",
    "encode_parameter",
    "join_pairs",
    "EncodedPair",
    "ParameterSpec",
    "Style",
    "QueryBuilder",
    "QueryRepl",
    "Empty",
    "Value",
    "VScalar",
    "VSequence",
    "VMapping",
    "QueryStyleError",
    "ShapeMismatchError",
    "UnsupportedNestingError",
    "UnsupportedValueError",
    "DuplicateKeyError",
    "UnsupportedStyleError",
]
