# lispy

A small interactive Lisp-style calculator. You type S-expressions made of
numbers and the operators `+ - * / % ^`, and it prints the result.

## Installation

```
pip install .
```

## Usage

Start the interactive prompt:

```
lispy
```

```
Lispy Version 0.0.0.0.3

Press ctrl+c to exit

lispy> + 1 2 3
6
lispy> (* 2 (- 10 4))
12
lispy> - 5
-5
lispy> / 10 0
Error: Division by zero!
lispy> ^ 2 10
1024
```

Input is one line at a time. A line holding several expressions is evaluated
as an S-expression whose first element must be an operator symbol; a line
holding a single expression prints that expression's value, and an empty line
prints `()`. Numbers may be negative and may have a decimal part (`-3.5`);
results are printed in the shortest `%g` form.

- `-` with a single argument negates it.
- `/` reports `Error: Division by zero!` when any divisor is zero.
- `%` is the floating-point remainder and `^` raises to a power.
- Applying an operator to anything but numbers gives
  `Error: Cannot operate on non-number!`, and an S-expression that does not
  start with a symbol gives `Error: S-expression does not start with symbol!`.

Input that does not parse is reported as
`<stdin>:<line>:<column>: error: expected ... at ...`. The prompt runs until
the input ends (ctrl+d) or is interrupted (ctrl+c).

### Other commands

`lispy-echo` is a plain prompt that echoes each line it reads:

```
lispy> hello
No you're a hello
```

`lispy-hello` prints "Hello, world!" five times from a counted loop and then
five times more from a conditional loop.

## Using it as a library

```python
from lispy.reader import parse
from lispy.evaluator import evaluate
from lispy.values import to_string

print(to_string(evaluate(parse("(+ 1 (* 2 3))"))))  # 7
```

- `lispy.values` holds the value types `Number`, `Error`, `Symbol` and
  `Sexpr`, and `to_string` to render them.
- `lispy.reader.parse(text, filename="<stdin>")` returns a top-level `Sexpr`
  and raises `ParseError` (with `filename`, `line`, `column`, `expected` and
  `found`) on bad input; `read_number` converts number text, giving
  `Error("invalid number")` when it is out of range.
- `lispy.evaluator.evaluate` evaluates a value; `builtin_op(args, op)` applies
  one operator across a list of numbers.
- `lispy.repl.evaluate_line` returns the text the prompt would print for one
  line, and `lispy.repl.run(stdin, stdout)` runs the prompt over any text
  streams.

## What it does not do

There are no variables, user-defined functions or other special forms: only
the six arithmetic operators. The prompt reads plain lines and keeps no
history or line editing.

## Running the tests

```
pip install .[test]
pytest
```