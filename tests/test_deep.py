"""Tests for the deepObject style."""

import logging

import pytest

from querystyle import (
    EncodedPair,
    Empty,
    VMapping,
    VScalar,
    VSequence,
    encode_deep_object,
    join_pairs,
)
from querystyle.errors import ShapeMismatchError, UnsupportedNestingError, UnsupportedValueError


def seq(*items):
    return VSequence([VScalar(i) for i in items])


def mapping(*pairs):
    return VMapping([(k, VScalar(v)) for k, v in pairs])


def test_mapping():
    v = mapping(("x", "1"), ("y", "2"))
    assert encode_deep_object("coord", v) == [
        EncodedPair("coord[x]", "1"),
        EncodedPair("coord[y]", "2"),
    ]


def test_values_escaped():
    v = mapping(("a", "12"), ("b", "#hello"))
    assert join_pairs(encode_deep_object("value", v)) == "value[a]=12&value[b]=%23hello"


def test_name_and_field_escaped_brackets_literal():
    v = mapping(("a b", "1"))
    assert encode_deep_object("f[x]", v) == [EncodedPair("f%5Bx%5D[a%20b]", "1")]


def test_order():
    v = mapping(("R", "100"), ("G", "200"), ("B", "150"))
    assert join_pairs(encode_deep_object("color", v)) == "color[R]=100&color[G]=200&color[B]=150"


def test_sequence_field_repeats_key():
    v = VMapping([("tag", seq("a", "b")), ("n", VScalar("1"))])
    assert join_pairs(encode_deep_object("filter", v)) == "filter[tag]=a&filter[tag]=b&filter[n]=1"


def test_no_explode_keeps_brackets():
    v = VMapping([("tag", seq("a", "b")), ("n", VScalar("1"))])
    assert join_pairs(encode_deep_object("filter", v, False)) == "filter[tag]=a,b&filter[n]=1"


def test_no_explode_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="querystyle.deep"):
        encode_deep_object("filter", mapping(("a", "1")), False)
    assert "non-exploded" in caplog.text


@pytest.mark.parametrize("value", [VScalar("blue"), seq("a"), Empty])
def test_non_mapping_rejected(value):
    with pytest.raises(ShapeMismatchError):
        encode_deep_object("color", value)


def test_nested_mapping_rejected():
    v = VMapping([("t", mapping(("R", "100")))])
    with pytest.raises(UnsupportedNestingError):
        encode_deep_object("color", v)


def test_empty_field_rejected():
    with pytest.raises(UnsupportedValueError):
        encode_deep_object("color", VMapping([("R", Empty)]))


def test_empty_mapping_rejected():
    with pytest.raises(UnsupportedValueError):
        encode_deep_object("color", VMapping([]))
