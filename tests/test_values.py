import pytest

from lispy.values import Error, Number, Sexpr, Symbol, to_string


def test_number_printing_uses_general_format():
    assert to_string(Number(1e20)) == "1e+20"


def test_fractional_number_prints_as_given():
    assert to_string(Number(-0.5)) == "-0.5"


def test_error_printing():
    assert to_string(Error("Division by zero!")) == "Error: Division by zero!"


def test_symbol_printing():
    assert to_string(Symbol("^")) == "^"


def test_empty_sexpr_printing():
    assert to_string(Sexpr()) == "()"


def test_nested_sexpr_printing():
    expr = Sexpr([Symbol("+"), Number(1.0), Number(2.0)])
    assert to_string(expr) == "(+ 1 2)"
    outer = Sexpr([expr])
    assert to_string(outer) == "(" + to_string(expr) + ")"


def test_append_and_pop():
    expr = Sexpr()
    expr.append(Symbol("+"))
    expr.append(Number(3.0))
    assert len(expr) == 2
    assert expr.pop(0) == Symbol("+")
    assert list(expr) == [Number(3.0)]
    assert expr.pop(0) == Number(3.0)
    assert len(expr) == 0


def test_pop_from_empty_raises():
    with pytest.raises(IndexError):
        Sexpr().pop(0)


def test_to_string_rejects_foreign_values():
    with pytest.raises(TypeError):
        to_string(42)