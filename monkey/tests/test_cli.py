"""
Tests for the command-line entry point.
"""
from monkey.cli import main


def test_command_prints_result(capsys):
    assert main(["-c", "let a = 5; a * 2"]) == 0
    assert capsys.readouterr().out == "10\n"


def test_command_error_result_exits_nonzero(capsys):
    assert main(["-c", "5 + true"]) == 1
    assert capsys.readouterr().out == "ERROR: type mismatch: INTEGER + BOOLEAN\n"


def test_command_parse_errors_exit_nonzero(capsys):
    """
    Test that a program with diagnostics is reported and never evaluated.
    """
    assert main(["-c", "let x 5; x"]) == 1
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Parse errors in <string>:",
        "\tline 1, column 7: expected next token to be =, got INT instead",
    ]


def test_runs_script_file(tmp_path, capsys):
    script = tmp_path / "fib.mk"
    script.write_text(
        "let fib = fn(n) {\n"
        "  if (n < 2) { return n; }\n"
        "  fib(n - 1) + fib(n - 2)\n"
        "};\n"
        "fib(10);\n",
        encoding="utf-8",
    )
    assert main([str(script)]) == 0
    assert capsys.readouterr().out == "55\n"


def test_missing_script_reports_error(tmp_path, capsys):
    assert main([str(tmp_path / "missing.mk")]) == 1
    assert capsys.readouterr().out.startswith("FileNotFoundError:")


def test_debug_flag_dumps_tokens_and_ast(capsys):
    assert main(["--debug", "-c", "1 + 2"]) == 0
    out = capsys.readouterr().out
    assert "Tokens:" in out
    assert "AST:" in out
    assert out.endswith("3\n")


def test_no_arguments_starts_repl(monkeypatch, capsys):
    def fake_input(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)
    assert main([]) == 0
    assert capsys.readouterr().out.startswith("Monkey Language Interpreter - REPL\n")


def test_debug_flag_skips_dump_for_malformed_source(capsys):
    """
    Test that a program that fails to parse reports its diagnostics without a dump.
    """
    assert main(["--debug", "-c", "let = 1;"]) == 1
    out = capsys.readouterr().out
    assert "Tokens:" not in out
    assert out.splitlines() == [
        "Parse errors in <string>:",
        "\tline 1, column 5: expected next token to be IDENT, got = instead",
    ]
