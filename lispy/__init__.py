"""A small Lisp-style calculator: reader, evaluator and interactive prompts."""

__version__ = "0.1.0"
__all__ = ["values", "reader", "evaluator", "repl", "echo", "hello"]