"""Tests for the simple style."""

import pytest

from querystyle import Empty, VMapping, VScalar, VSequence, encode_simple, passthrough
from querystyle.errors import UnsupportedNestingError, UnsupportedValueError


def seq(*items):
    return VSequence([VScalar(i) for i in items])


def mapping(*pairs):
    return VMapping([(k, VScalar(v)) for k, v in pairs])


def test_scalar():
    assert encode_simple(VScalar("blue")) == "blue"


def test_scalar_explode_ignored():
    assert encode_simple(VScalar("a b"), True) == encode_simple(VScalar("a b"), False) == "a%20b"


def test_sequence_explode_ignored():
    v = seq("blue", "black", "brown")
    assert encode_simple(v, False) == "blue,black,brown"
    assert encode_simple(v, True) == "blue,black,brown"


def test_sequence_items_escaped_individually():
    assert encode_simple(seq("a,b", "c d")) == "a%2Cb,c%20d"


def test_mapping():
    v = mapping(("role", "admin"), ("id", "5"))
    assert encode_simple(v, False) == "role,admin,id,5"
    assert encode_simple(v, True) == "role=admin,id=5"


def test_mapping_order():
    v = mapping(("R", "100"), ("G", "200"), ("B", "150"))
    assert encode_simple(v, False) == "R,100,G,200,B,150"
    w = mapping(("B", "150"), ("G", "200"), ("R", "100"))
    assert encode_simple(w, False) == "B,150,G,200,R,100"


def test_custom_encoder():
    assert encode_simple(seq("a b"), encoder=passthrough) == "a b"


def test_empty_rejected():
    with pytest.raises(UnsupportedValueError):
        encode_simple(Empty)


def test_empty_containers_rejected():
    with pytest.raises(UnsupportedValueError):
        encode_simple(VSequence([]))
    with pytest.raises(UnsupportedValueError):
        encode_simple(VMapping([]))


def test_nesting_rejected():
    v = VMapping([("t", mapping(("R", "100")))])
    with pytest.raises(UnsupportedNestingError):
        encode_simple(v)
    with pytest.raises(UnsupportedNestingError):
        encode_simple(VSequence([seq("a")]))
