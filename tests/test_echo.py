import io
import sys

from lispy.echo import PROMPT, echo_reply, main, run


def test_echo_reply():
    assert echo_reply("hello") == "No you're a hello"


def test_run_echoes_each_line():
    stdout = io.StringIO()
    run(io.StringIO("a\nb\n"), stdout)
    assert stdout.getvalue() == (
        "Lispy Version 0.0.0.0.2\n\nPress ctrl+c to exit\n\n"
        + PROMPT + echo_reply("a") + "\n"
        + PROMPT + echo_reply("b") + "\n"
        + PROMPT + "\n"
    )


def test_run_with_other_version():
    stdout = io.StringIO()
    run(io.StringIO(""), stdout, version="0.0.0.0.1")
    assert stdout.getvalue().startswith("Lispy Version 0.0.0.0.1\n\n")


def test_main(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("x\n"))
    assert main([]) == 0
    assert echo_reply("x") + "\n" in capsys.readouterr().out