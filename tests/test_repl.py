import io
import sys

from lispy.repl import BANNER, PROMPT, evaluate_line, main, run


def test_evaluates_expression():
    assert evaluate_line("(* 2 3)") == "6"


def test_empty_line_prints_empty_list():
    assert evaluate_line("") == "()"


def test_division_error_text():
    assert evaluate_line("(/ 1 0)") == "Error: Division by zero!"


def test_top_level_acts_as_expression():
    assert evaluate_line("+ 1 2") == evaluate_line("(+ 1 2)")


def test_parse_error_is_reported():
    assert evaluate_line("(+ 1").startswith("<stdin>:1:")


def test_run_session():
    stdout = io.StringIO()
    run(io.StringIO("(/ 4 0)\n(- 7)\n"), stdout)
    output = stdout.getvalue()
    assert output.startswith("Lispy Version 0.0.0.0.3\n\nPress ctrl+c to exit\n\n")
    assert output == (
        BANNER
        + PROMPT + evaluate_line("(/ 4 0)") + "\n"
        + PROMPT + evaluate_line("(- 7)") + "\n"
        + PROMPT + "\n"
    )
    assert output.count(PROMPT) == 3


def test_run_strips_line_endings():
    stdout = io.StringIO()
    run(io.StringIO("(- 2)\r\n"), stdout)
    assert (PROMPT + evaluate_line("(- 2)") + "\n") in stdout.getvalue()


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("(/ 1 0)\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith(BANNER)
    assert "Error: Division by zero!" in out