import pytest

from sublisp.errors import SublispTypeError, SublispEvalError
from sublisp.types.token import (
    Token, List, Num, Str, Sym, Quote, Func, from_bool, from_float, TRUE, FALSE, NIL,
)


def _noop(tail, ctx, evaluate_fn):
    return NIL


# -----------------------------------------------------
# Coercion
# -----------------------------------------------------

def test_to_float_on_numbers():
    assert Num("3").to_float() == 3.0
    assert Num("-2.5").to_float() == -2.5
    assert Num("1.").to_float() == 1.0


@pytest.mark.parametrize("tok", [Str('"1"'), Sym("one"), Quote("1"), List([Num("1")]), Func("f", _noop)])
def test_to_float_rejects_non_numbers(tok):
    with pytest.raises(SublispTypeError) as exc:
        tok.to_float()
    assert str(exc.value) == "error: value is not a number."


def test_to_bool_on_boolean_symbols():
    assert Sym("#t").to_bool() is True
    assert Sym("#f").to_bool() is False
    assert Sym("#nil").to_bool() is False


@pytest.mark.parametrize("tok", [Sym("t"), Sym("nil"), Num("1"), Str('"#t"'), List([])])
def test_to_bool_rejects_everything_else(tok):
    with pytest.raises(SublispTypeError):
        tok.to_bool()


def test_vectorized_coercions():
    assert Token.to_vec_float([Num("1"), Num("2.5")]) == [1.0, 2.5]
    assert Token.to_vec_bool([TRUE, FALSE, NIL]) == [True, False, False]
    with pytest.raises(SublispTypeError):
        Token.to_vec_float([Num("1"), Sym("x"), Num("2")])
    with pytest.raises(SublispTypeError):
        Token.to_vec_bool([TRUE, Num("0")])


def test_from_bool_and_float():
    assert from_bool(True) == Sym("#t")
    assert from_bool(False) == Sym("#f")
    assert from_float(6.0) == Num("6")
    assert from_float(-2.0) == Num("-2")
    assert from_float(0.25) == Num("0.25")
    assert from_float(3.5) == Num("3.5")


@pytest.mark.parametrize(
    "value, text",
    [(1e-05, "0.00001"), (-0.000125, "-0.000125"), (1.5e-07, "0.00000015"), (123.0625, "123.0625")],
)
def test_from_float_never_uses_an_exponent(value, text):
    assert from_float(value) == Num(text)


@pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
def test_from_float_rejects_non_finite_values(value):
    with pytest.raises(SublispEvalError):
        from_float(value)


# -----------------------------------------------------
# Display
# -----------------------------------------------------

def test_display():
    assert str(List([])) == "()"
    assert str(List([Sym("+"), Num("1"), List([Str('"a b"')])])) == '(+ 1 ("a b"))'
    assert str(Quote("(1 2)")) == "(1 2)"
    assert str(Sym("#nil")) == "#nil"
    assert str(Func("+", _noop)) == "Fn<()>"


def test_repr():
    assert repr(Num("3")) == "Num('3')"
    assert repr(List([Sym("x"), Str('"s"')])) == "List([Sym('x'), Str('\"s\"')])"
    assert repr(Func("car", _noop)) == "Func('car')"


# -----------------------------------------------------
# Equality
# -----------------------------------------------------

def test_equality_is_structural_per_variant():
    assert Num("1") == Num("1")
    assert Num("1") != Num("1.0")
    assert Num("1") != Sym("1")
    assert Quote("a") != Sym("a")
    assert Str('"a"') == Str('"a"')
    assert List([Num("1"), List([Sym("a")])]) == List([Num("1"), List([Sym("a")])])
    assert List([Num("1")]) != List([Num("1"), Num("2")])
    assert List([]) == List([])


def test_func_is_never_equal():
    f = Func("+", _noop)
    assert not (f == f)
    assert f != f
    assert f != Func("+", _noop)
    assert List([f]) != List([f])


def test_tokens_are_immutable():
    with pytest.raises(AttributeError):
        Num("1").text = "2"
    with pytest.raises(AttributeError):
        List([]).items = (Num("1"),)
    with pytest.raises(AttributeError):
        Func("f", _noop).name = "g"


def test_empty_list_is_still_a_value():
    assert List([])
    assert len(List([Num("1"), Num("2")])) == 2
