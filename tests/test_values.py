"""Tests for the Value types."""

from datetime import datetime, timezone

from toml_core.values import (
    ValueKind,
    VArray,
    VBool,
    VDateTime,
    VFloat,
    VInteger,
    VString,
    unwrap,
)


def _dt():
    return datetime(1979, 5, 27, 7, 32, tzinfo=timezone.utc)


def test_kinds():
    assert VInteger(1).kind is ValueKind.Integer
    assert VArray([]).kind is ValueKind.Array
    assert str(ValueKind.DateTime) == "datetime"

def test_str_scalars():
    assert str(VInteger(-3)) == "-3"
    assert str(VFloat(1.5)) == "1.5"
    assert str(VBool(False)) == "false"
    assert str(VDateTime(_dt())) == "1979-05-27T07:32:00Z"
    assert str(VString("hi")) == "hi"

def test_str_array_quotes_strings():
    arr = VArray([VArray([VString("a")]), VArray([VInteger(1), VInteger(2)])])
    assert str(arr) == '[["a"], [1, 2]]'

def test_element_kind():
    assert VArray([]).element_kind() is None
    assert VArray([VArray([]), VBool(True)]).element_kind() is ValueKind.Boolean

def test_empty_array_is_still_a_value():
    assert bool(VArray([]))

def test_unwrap():
    assert unwrap(VDateTime(_dt())) == _dt()
    assert unwrap(VArray([VString("x"), VArray([VInteger(1)])])) == ["x", [1]]
