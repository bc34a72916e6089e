"""Parse source text into lispy values."""

from __future__ import annotations

import math
import re
import sys

from lispy.values import Error, Number, Sexpr, Symbol, Value

_NUMBER = re.compile(r"-?[0-9]+\.?[0-9]*")
_SYMBOLS = frozenset("+-*/%^")


class ParseError(Exception):
    """Raised when the input does not match the grammar."""

    def __init__(self, filename: str, line: int, column: int, expected: str, found: str):
        self.filename = filename
        self.line = line
        self.column = column
        self.expected = expected
        self.found = found
        super().__init__(f"{filename}:{line}:{column}: error: expected {expected} at {found}")


def read_number(text: str) -> Value:
    """Convert number text, giving an error value when it is out of range."""
    number = float(text)
    out_of_range = (
        math.isinf(number)
        or 0.0 < abs(number) < sys.float_info.min
        or (number == 0.0 and re.search("[1-9]", text) is not None)
    )
    return Error("invalid number") if out_of_range else Number(number)


class _Reader:
    def __init__(self, text: str, filename: str):
        self.text = text
        self.filename = filename
        self.pos = 0

    def _skip_space(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1

    def _fail(self, expected: str) -> ParseError:
        if self.pos >= len(self.text):
            found = "end of input"
        else:
            found = f"'{self.text[self.pos]}'"
        line = self.text.count("\n", 0, self.pos) + 1
        column = self.pos - (self.text.rfind("\n", 0, self.pos) + 1) + 1
        return ParseError(self.filename, line, column, expected, found)

    def read_program(self) -> Sexpr:
        root = Sexpr()
        self._skip_space()
        while self.pos < len(self.text):
            root.append(self._read_expr("expression or end of input"))
        return root

    def _read_expr(self, expected: str) -> Value:
        char = self.text[self.pos]
        if char == "(":
            self.pos += 1
            self._skip_space()
            return self._read_sexpr()
        match = _NUMBER.match(self.text, self.pos)
        if match:
            self.pos = match.end()
            self._skip_space()
            return read_number(match.group())
        if char in _SYMBOLS:
            self.pos += 1
            self._skip_space()
            return Symbol(char)
        raise self._fail(expected)

    def _read_sexpr(self) -> Sexpr:
        expr = Sexpr()
        while True:
            if self.pos >= len(self.text):
                raise self._fail("expression or ')'")
            if self.text[self.pos] == ")":
                self.pos += 1
                self._skip_space()
                return expr
            expr.append(self._read_expr("expression or ')'"))


def parse(text: str, filename: str = "<stdin>") -> Sexpr:
    """Parse a whole line of input into a top-level S-expression."""
    return _Reader(text, filename).read_program()