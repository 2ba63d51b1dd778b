"""Tests for querystyle.encoding."""

import pytest

from querystyle.encoding import (
    encode,
    encode_path,
    encode_query,
    encode_query_allow_reserved,
    encode_www_form_urlencoded,
    passthrough,
)


class TestEncode:
    def test_plus_and_space(self):
        assert encode("a+b c") == "a%2Bb%20c"

    def test_unreserved_untouched(self):
        assert encode("AZaz09-_.~") == "AZaz09-_.~"

    @pytest.mark.parametrize("raw,expected", [
        ("&", "%26"),
        ("=", "%3D"),
        ("/", "%2F"),
        ("[", "%5B"),
        ("#", "%23"),
        (",", "%2C"),
        ("%", "%25"),
    ])
    def test_reserved_escaped(self, raw, expected):
        assert encode(raw) == expected

    def test_unicode_is_utf8(self):
        assert encode("é") == "%C3%A9"

    def test_empty(self):
        assert encode("") == ""

    def test_never_emits_plus(self):
        assert "+" not in encode("1 + 1 = 2")

    def test_not_idempotent(self):
        once = encode("a b")
        assert once == "a%20b"
        assert encode(once) == "a%2520b"
        assert encode(once) != once


class TestAlternativeSets:
    def test_path_keeps_sub_delims(self):
        assert encode_path("a+b;c=d") == "a+b;c=d"
        assert encode_path("a/b") == "a%2Fb"
        assert encode_path("a b") == "a%20b"

    def test_query_keeps_slash_and_question_mark(self):
        assert encode_query("a/b?c") == "a/b?c"
        assert encode_query("a+b") == "a%2Bb"
        assert encode_query("x[y]") == "x%5By%5D"

    def test_query_allow_reserved(self):
        assert encode_query_allow_reserved("a red&car~") == "a%20red&car~"
        assert encode_query_allow_reserved("a/blue=boat") == "a/blue=boat"
        assert encode_query_allow_reserved("x[y]#z") == "x[y]#z"
        assert encode_query_allow_reserved("a+b") == "a%2Bb"

    def test_www_form_urlencoded(self):
        assert encode_www_form_urlencoded("a red&car~") == "a%20red%26car%7E"
        assert encode_www_form_urlencoded("a/blue=boat") == "a%2Fblue%3Dboat"
        assert encode_www_form_urlencoded("*-._") == "*-._"

    def test_passthrough(self):
        assert passthrough("a b&c") == "a b&c"
