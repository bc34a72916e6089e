"""Interactive prompt that reads, evaluates and prints lispy expressions."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, TextIO, Sequence

from lispy.evaluator import evaluate
from lispy.reader import ParseError, parse
from lispy.values import to_string

BANNER = "Lispy Version 0.0.0.0.3\n\nPress ctrl+c to exit\n\n"
PROMPT = "lispy> "


def evaluate_line(line: str) -> str:
    """Return what the prompt prints for one line of input."""
    try:
        program = parse(line)
    except ParseError as exc:
        return str(exc)
    return to_string(evaluate(program))


def run(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
    """Run the prompt until the input ends."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stdout.write(BANNER)
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            stdout.write("\n")
            return
        stdout.write(evaluate_line(line.rstrip("\r\n")) + "\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="lispy", description="Evaluate lispy expressions.")
    parser.parse_args(argv)
    try:
        run()
    except KeyboardInterrupt:
        pass
    return 0