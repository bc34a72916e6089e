"""Value types produced by the reader and the evaluator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union


@dataclass(frozen=True)
class Number:
    """A floating-point number."""

    value: float


@dataclass(frozen=True)
class Error:
    """An error produced while reading or evaluating."""

    message: str


@dataclass(frozen=True)
class Symbol:
    """An operator symbol such as ``+``."""

    name: str


@dataclass
class Sexpr:
    """An S-expression: an ordered list of values."""

    cells: list[Value] = field(default_factory=list)

    def append(self, value: Value) -> None:
        """Add a value to the end of the expression."""
        self.cells.append(value)

    def pop(self, index: int = 0) -> Value:
        """Remove and return the value at ``index``."""
        return self.cells.pop(index)

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.cells)


Value = Union[Number, Error, Symbol, Sexpr]


def to_string(value: Value) -> str:
    """Render a value the way the interpreter prints it."""
    if isinstance(value, Number):
        return "%g" % value.value
    if isinstance(value, Error):
        return f"Error: {value.message}"
    if isinstance(value, Symbol):
        return value.name
    if isinstance(value, Sexpr):
        return "(" + " ".join(to_string(cell) for cell in value.cells) + ")"
    raise TypeError(f"not a lispy value: {value!r}")