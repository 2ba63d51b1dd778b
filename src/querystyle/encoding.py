"""Percent-encoding functions shared by all style encoders.

Every function takes raw text and returns the escaped text. Style encoders
accept any of them through their ``encoder`` argument; the default is
:func:`encode`.

``+`` is always escaped to ``%2B`` and space is always ``%20``. Form bodies
historically decode ``+`` as a space, so a bare ``+`` is never emitted and a
space is never written as ``+``. Encoding is not idempotent: feed raw text
only, never text that has already been escaped.
"""

from __future__ import annotations

from typing import Callable
from urllib.parse import quote

EncodingFn = Callable[[str], str]

# RFC 3986 sub-delims plus ":" and "@" (pchar), minus "+"
_PCHAR_SAFE = "!$&'()*,;=:@"
_QUERY_SAFE = _PCHAR_SAFE + "/?"
_QUERY_RESERVED_SAFE = _QUERY_SAFE + "#[]"


def encode(raw: str) -> str:
    """Escape everything outside the unreserved set ``[A-Za-z0-9-_.~]``."""
    return quote(raw, safe="")


def encode_path(raw: str) -> str:
    """Escape *raw* for use inside a URL path segment.

    ``+`` is left alone here since it has no special meaning in a path.
    """
    return quote(raw, safe=_PCHAR_SAFE + "+")


def encode_query(raw: str) -> str:
    """Escape *raw* for a query string, leaving query-safe delimiters as-is.

    ``&`` and ``=`` pass unescaped, so only use this when the value cannot
    collide with the pair separators.
    """
    return quote(raw, safe=_QUERY_SAFE)


def encode_query_allow_reserved(raw: str) -> str:
    """Like :func:`encode_query` but also passes ``:/?#[]@`` (``allowReserved``)."""
    return quote(raw, safe=_QUERY_RESERVED_SAFE)


def encode_www_form_urlencoded(raw: str) -> str:
    """WHATWG ``application/x-www-form-urlencoded`` percent-encode set.

    Only alphanumerics and ``*-._`` pass. ``quote`` always keeps ``~``, so it
    is escaped separately.
    """
    return quote(raw, safe="*").replace("~", "%7E")


def passthrough(raw: str) -> str:
    """Identity encoder; the caller escapes the output itself."""
    return raw
