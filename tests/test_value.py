import pytest

from fuzzlisp.errors import FuzzlispTypeError
from fuzzlisp.types.value import (
    FuzzyElement,
    ValueType,
    is_equal,
    new_bool,
    new_error,
    new_expression,
    new_float,
    new_fuzzy,
    new_int,
    new_string,
)


def test_accessors_return_their_variant():
    assert new_string("a").as_string() == "a"
    assert new_int(3).as_int() == 3
    assert new_float(0.25).as_float() == 0.25
    assert new_bool(True).as_bool() is True
    assert new_error("boom").as_error() == "boom"
    assert new_expression([new_string("f")]).as_expression() == (new_string("f"),)


@pytest.mark.parametrize(
    "value",
    [new_string("x"), new_bool(True), new_expression([]), new_error("e")],
)
def test_wrong_accessor_returns_zero_value(value):
    if value.type is not ValueType.STRING:
        assert value.as_string() == ""
    if value.type is not ValueType.BOOL:
        assert value.as_bool() is False
    if value.type is not ValueType.EXPRESSION:
        assert value.as_expression() == ()
    if value.type is not ValueType.ERROR:
        assert value.as_error() == ""
    assert value.as_int() == 0
    assert value.as_float() == 0.0
    assert value.as_fuzzy_set() == ()


def test_float_accessor_widens_int():
    assert new_int(4).as_float() == 4.0


def test_new_float_accepts_int():
    v = new_float(1)
    assert v.type is ValueType.FLOAT
    assert isinstance(v.as_float(), float)


@pytest.mark.parametrize(
    "ctor,arg",
    [
        (new_string, 1),
        (new_int, True),
        (new_int, 1.0),
        (new_float, False),
        (new_float, "1.0"),
        (new_bool, 1),
    ]
)
def test_constructors_reject_wrong_python_types(ctor, arg):
    with pytest.raises(FuzzlispTypeError):
        ctor(arg)


def test_new_error_accepts_exception():
    assert new_error(ValueError("bad")).as_error() == "bad"


@pytest.mark.parametrize(
    "a,b,expected",
    [
        (new_string("a"), new_string("a"), True),
        (new_string("a"), new_string("b"), False),
        (new_int(1), new_float(1.0), False),
        (new_int(1), new_int(1), True),
        (new_bool(False), new_bool(False), True),
        (new_error("x"), new_error("x"), True),
        (new_error("x"), new_string("x"), False),
        (new_expression([new_string("f"), new_int(1)]),
         new_expression([new_string("f"), new_int(1)]), True),
        (new_expression([new_string("f")]),
         new_expression([new_string("f"), new_int(1)]), False),
        (new_expression([new_string("f"), new_expression([new_int(2)])]),
         new_expression([new_string("f"), new_expression([new_int(3)])]), False),
    ]
)
def test_structural_equality(a, b, expected):
    assert is_equal(a, b) is expected
    assert (a == b) is expected


def test_fuzzy_set_equality_is_ordered_and_weighted():
    a = FuzzyElement(new_string("a"), 0.5)
    b = FuzzyElement(new_string("b"), 0.5)
    assert new_fuzzy([a, b]) == new_fuzzy([a, b])
    assert new_fuzzy([a, b]) != new_fuzzy([b, a])
    assert new_fuzzy([a]) != new_fuzzy([FuzzyElement(new_string("a"), 0.4)])
    assert new_fuzzy([a]) != new_fuzzy([a, b])


def test_values_are_hashable():
    seen = {new_string("a"), new_string("a"), new_int(1)}
    assert len(seen) == 2


@pytest.mark.parametrize(
    "value,text",
    [
        (new_expression([new_string("and"), new_bool(True),
                         new_expression([new_string("env"), new_string("a")])]),
         "(and true (env a))"),
        (new_float(0.5), "0.5"),
        (new_int(-3), "-3"),
        (new_error("nope"), "#<error: nope>"),
        (new_fuzzy([FuzzyElement(new_string("x"), 0.1)]), "{x:0.1}"),
    ]
)
def test_str_renders_source(value, text):
    assert str(value) == text


def test_depth():
    assert new_int(1).depth() == 0
    assert new_expression([]).depth() == 1
    nested = new_expression([new_string("f"), new_expression([new_string("g")])])
    assert nested.depth() == 2


def test_depth_of_very_deep_tree():
    node = new_int(0)
    for _ in range(5000):
        node = new_expression([new_string("f"), node])
    assert node.depth() == 5000
    assert node.depth_exceeds(4999)
    assert not node.depth_exceeds(5000)


def test_depth_exceeds_scalar():
    assert not new_int(1).depth_exceeds(0)
    assert new_expression([]).depth_exceeds(0)
