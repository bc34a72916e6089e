"""Evaluation of lispy values."""

from __future__ import annotations

import math
import operator
from typing import Callable, Iterable

from lispy.values import Error, Number, Sexpr, Symbol, Value


def _is_odd_integer(y: float) -> bool:
    return y.is_integer() and y % 2 == 1


def _fmod(x: float, y: float) -> float:
    try:
        return math.fmod(x, y)
    except ValueError:
        return math.nan


def _pow(x: float, y: float) -> float:
    try:
        return math.pow(x, y)
    except OverflowError:
        return -math.inf if x < 0 and _is_odd_integer(y) else math.inf
    except ValueError:
        if x == 0:
            return math.copysign(math.inf, x) if _is_odd_integer(y) else math.inf
        return math.nan


_OPERATORS: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
    "%": _fmod,
    "^": _pow,
}


def builtin_op(args: Iterable[Value], op: str) -> Value:
    """Apply the arithmetic operator ``op`` across the arguments."""
    cells = list(args)
    if not all(isinstance(cell, Number) for cell in cells):
        return Error("Cannot operate on non-number!")
    if not cells:
        raise ValueError("an operator needs at least one argument")

    first, *rest = cells
    result = first.value
    if op == "-" and not rest:
        return Number(-result)

    apply = _OPERATORS.get(op)
    for argument in rest:
        if op == "/" and argument.value == 0:
            return Error("Division by zero!")
        if apply is not None:
            result = apply(result, argument.value)
    return Number(result)


def evaluate_sexpr(expr: Sexpr) -> Value:
    """Evaluate every element of an S-expression and apply its operator."""
    cells = [evaluate(cell) for cell in expr]

    for cell in cells:
        if isinstance(cell, Error):
            return cell
    if not cells:
        return Sexpr()
    if len(cells) == 1:
        return cells[0]

    head, *rest = cells
    if not isinstance(head, Symbol):
        return Error("S-expression does not start with symbol!")
    return builtin_op(Sexpr(rest), head.name)


def evaluate(value: Value) -> Value:
    """Evaluate a value; everything but an S-expression evaluates to itself."""
    if isinstance(value, Sexpr):
        return evaluate_sexpr(value)
    return value