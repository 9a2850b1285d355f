"""
Tests for the REPL and the command line entry point.
"""
import io

import pytest

import monkey
from monkeylang import repl
from monkeylang.evaluator import Interpreter
from monkeylang.exceptions import ParseError


def run_repl(lines: str) -> str:
    """
    Feed ``lines`` to the REPL and return everything it wrote.
    """
    out = io.StringIO()
    repl.start(io.StringIO(lines), out)
    return out.getvalue()


def test_repl_prints_results():
    """
    Test that each line is evaluated and its value printed after a prompt.
    """
    output = run_repl("5 + 5 * 2\nif (1 < 2) { 10 } else { 20 }\n")
    assert output == ">> 15\n>> 10\n>> "


def test_repl_keeps_bindings_between_lines():
    """
    Test that the REPL environment persists across lines.
    """
    output = run_repl("let add = fn(a, b) { a + b };\nadd(2, 3)\n")
    assert output == ">> null\n>> 5\n>> "


def test_repl_prints_parser_errors():
    """
    Test that parse errors are printed tab-indented and nothing is evaluated.
    """
    output = run_repl("let x 5;\n")
    assert output == ">> \texpected next token to be ASSIGN, got INT instead\n>> "


def test_repl_prints_runtime_errors():
    """
    Test that runtime errors are printed like any other value.
    """
    output = run_repl("5 + true;\n")
    assert output == ">> ERROR: type mismatch: INTEGER + BOOLEAN\n>> "


def test_repl_survives_deep_recursion():
    """
    Test that deep and unbounded recursion leave the session running.
    """
    output = run_repl(
        "let f = fn(n) { if (n == 0) { 0 } else { 1 + f(n - 1) } };\n"
        "f(500)\n"
        "let g = fn(n) { g(n + 1) };\n"
        "g(0)\n"
        "1 + 1\n"
    )
    assert output == (
        ">> null\n"
        ">> 500\n"
        ">> null\n"
        ">> ERROR: maximum recursion depth exceeded\n"
        ">> 2\n"
        ">> "
    )


def test_repl_reports_host_exceptions_and_continues(monkeypatch):
    """
    Test that an unexpected exception on one line is printed and the next line still runs.
    """
    real_evaluate = repl.evaluate_program
    calls = []

    def flaky(program, env):
        calls.append(program)
        if len(calls) == 1:
            raise RuntimeError("boom")
        return real_evaluate(program, env)

    monkeypatch.setattr(repl, "evaluate_program", flaky)
    output = run_repl("1\n2 * 3\n")
    assert output == ">> RuntimeError: boom\n>> 6\n>> "


def test_interpreter_run_raises_parse_error():
    """
    Test that the convenience front end raises when parsing fails.
    """
    with pytest.raises(ParseError) as exc_info:
        Interpreter().run("let = 1;")
    assert "expected next token to be IDENT, got ASSIGN instead" in exc_info.value.errors


def test_interpreter_run_keeps_environment():
    """
    Test that one Interpreter accumulates bindings.
    """
    interpreter = Interpreter()
    interpreter.run("let x = 2;")
    assert interpreter.run("x * 21").inspect() == "42"


def test_cli_runs_script(tmp_path, capsys):
    """
    Test running a script file prints its final value.
    """
    script = tmp_path / "adder.mk"
    script.write_text(
        "let newAdder = fn(x) { fn(y) { x + y } };\n"
        "let addTwo = newAdder(2);\n"
        "addTwo(3);\n",
        encoding="utf-8",
    )
    assert monkey.main(["monkey", str(script)]) == 0
    assert capsys.readouterr().out.strip() == "5"


def test_cli_reports_runtime_error(tmp_path, capsys):
    """
    Test that a runtime error is printed and gives a non-zero exit code.
    """
    script = tmp_path / "bad.mk"
    script.write_text("foobar;\n", encoding="utf-8")
    assert monkey.main(["monkey", str(script)]) == 1
    assert capsys.readouterr().out.strip() == "ERROR: identifier not found: foobar"


def test_cli_reports_parse_errors(tmp_path, capsys):
    """
    Test that parse errors are listed and give a non-zero exit code.
    """
    script = tmp_path / "broken.mk"
    script.write_text("let x 5;\n", encoding="utf-8")
    assert monkey.main(["monkey", str(script)]) == 1
    out = capsys.readouterr().out
    assert "ParseError" in out
    assert "\texpected next token to be ASSIGN, got INT instead\n" in out


def test_cli_usage(capsys):
    """
    Test the help flag and bad argument handling.
    """
    assert monkey.main(["monkey", "--help"]) == 0
    assert "Usage:" in capsys.readouterr().out
    assert monkey.main(["monkey", "a", "b"]) == 1


def test_cli_reports_unbounded_recursion(tmp_path, capsys):
    """
    Test that a script recursing without end exits with an error instead of a traceback.
    """
    script = tmp_path / "loop.mk"
    script.write_text("let f = fn(n) { f(n + 1) };\nf(0);\n", encoding="utf-8")
    assert monkey.main(["monkey", str(script)]) == 1
    assert capsys.readouterr().out.strip() == "ERROR: maximum recursion depth exceeded"
