"""
Tests for the interactive REPL.
"""
from monkey.environment import Environment
from monkey.repl import PROMPT, eval_line, run_repl


def _feed(monkeypatch, lines):
    """
    Replace input() with a reader over ``lines`` that raises EOFError at the end.
    """
    remaining = list(lines)
    prompts = []

    def fake_input(prompt=""):
        prompts.append(prompt)
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    monkeypatch.setattr("builtins.input", fake_input)
    return prompts


def test_eval_line_prints_inspect(capsys):
    env = Environment()
    result = eval_line("1 + 2", env)
    assert result.value == 3
    assert capsys.readouterr().out == "3\n"


def test_eval_line_let_prints_nothing(capsys):
    env = Environment()
    eval_line("let a = 1;", env)
    assert capsys.readouterr().out == ""
    assert "a" in env


def test_eval_line_let_prints_runtime_error(capsys):
    """
    Test that a failing let is still reported even though a let normally prints nothing.
    """
    env = Environment()
    result = eval_line("let x = 1 + true;", env)
    assert result.message == "type mismatch: INTEGER + BOOLEAN"
    assert capsys.readouterr().out == "ERROR: type mismatch: INTEGER + BOOLEAN\n"
    assert "x" not in env


def test_eval_line_reports_parse_errors(capsys):
    env = Environment()
    assert eval_line("let = 1;", env) is None
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Parse errors in <stdin>:"
    assert out[1] == "\tline 1, column 5: expected next token to be IDENT, got = instead"


def test_session_keeps_bindings(monkeypatch, capsys):
    """
    Test that definitions on one line are visible on the next.
    """
    prompts = _feed(monkeypatch, [
        "let add = fn(a, b) { a + b };",
        "let x = 4;",
        "add(x, 3)",
        "5 + true",
        "fn(x) { x }",
        "",
        "quit",
    ])
    run_repl()
    out = capsys.readouterr().out.splitlines()
    assert out[2:] == ["7", "ERROR: type mismatch: INTEGER + BOOLEAN", "fn(x) {", "x", "}"]
    assert all(p == PROMPT for p in prompts)


def test_repl_exits_on_eof(monkeypatch, capsys):
    _feed(monkeypatch, [])
    run_repl()
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Monkey Language Interpreter - REPL"
    assert out[-1] == ""


def test_repl_reports_runaway_recursion(monkeypatch, capsys):
    _feed(monkeypatch, ["let f = fn(n) { f(n + 1) };", "f(0)", "1"])
    run_repl()
    out = capsys.readouterr().out.splitlines()
    assert any(line.startswith("RecursionError:") for line in out)
    assert "1" in out
