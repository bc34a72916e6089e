"""Early prompt that only echoes its input back."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence, TextIO

PROMPT = "lispy> "
DEFAULT_VERSION = "0.0.0.0.2"


def echo_reply(line: str) -> str:
    """Return the reply to one line of input."""
    return f"No you're a {line}"


def run(
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    version: str = DEFAULT_VERSION,
) -> None:
    """Echo each input line until the input ends."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stdout.write(f"Lispy Version {version}\n\nPress ctrl+c to exit\n\n")
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            stdout.write("\n")
            return
        stdout.write(echo_reply(line.rstrip("\r\n")) + "\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="lispy-echo", description="Echo lines back.")
    parser.parse_args(argv)
    try:
        run()
    except KeyboardInterrupt:
        pass
    return 0