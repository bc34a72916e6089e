"""Greeting printer."""

from __future__ import annotations

import sys
from typing import Optional, Sequence, TextIO

GREETING = "Hello, world!\n"


def say_hello(num_times: int, stdout: Optional[TextIO] = None) -> None:
    """Print the greeting ``num_times`` twice over, once per loop style."""
    stdout = sys.stdout if stdout is None else stdout
    stdout.write("Hello with for loop\n\n")
    for _ in range(num_times):
        stdout.write(GREETING + "\n")
    stdout.write("Hello with while loop\n\n")
    remaining = num_times
    while remaining > 0:
        stdout.write(GREETING + "\n")
        remaining -= 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    say_hello(5)
    return 0