"""
Monkey Language Interpreter

This is the main entry point for the Monkey interpreter.

Workflow:
1. The source is read from the file named on the command line, or from ``-c``.
2. The Lexer tokenizes the source code into a stream of tokens.
3. The Parser builds an AST, collecting diagnostics for malformed input.
4. The Evaluator walks the AST and the value of the final statement is printed.

With no arguments, the interactive REPL is started instead.


File: cli.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import argparse

from monkey.environment import Environment
from monkey.evaluator import evaluate
from monkey.exceptions import MonkeySyntaxError
from monkey.objects import Error
from monkey.parser import parse_source
from monkey.repl import debug_enabled, debug_print_tokens_ast, print_parser_errors, run_repl


def run_source(code: str, file: str, debug: bool = False) -> int:
    """
    Parse and evaluate a complete source text, printing the final value.

    Returns:
        int: The process exit code.
    """
    try:
        program = parse_source(code, file)
    except MonkeySyntaxError as e:
        print_parser_errors(e.diagnostics, e.file)
        return 1

    if debug:
        debug_print_tokens_ast(code, program)

    try:
        result = evaluate(program, Environment())
    except RecursionError as e:
        print(f"{type(e).__name__}: {e}")
        return 1

    print(result.inspect())
    return 1 if isinstance(result, Error) else 0


def run_script(script_name: str, debug: bool = False) -> int:
    """
    Run a Monkey script
    """
    try:
        with open(script_name, "r", encoding="utf-8") as f:
            code = f.read()
    except OSError as e:
        print(f"{type(e).__name__}: {e}")
        return 1
    return run_source(code, script_name, debug)


def build_arg_parser() -> argparse.ArgumentParser:
    """
    Build the command-line argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="monkey",
        description="Monkey Language Interpreter. Run with no arguments to enter the REPL.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "script",
        nargs="?",
        default=None,
        help="Path to a Monkey source file to execute",
    )
    parser.add_argument(
        "-c", "--command",
        dest="command",
        default=None,
        help="Program passed in as a string",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print tokens and AST before evaluation (also enabled by MONKEYDEBUG)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: enter the REPL.
    - ``-c CODE``: evaluate CODE and print the result.
    - One positional argument: treat it as the path to a script and run it.
    """
    args = build_arg_parser().parse_args(argv)
    debug = args.debug or debug_enabled()

    if args.command is not None:
        return run_source(args.command, "<string>", debug)
    if args.script is not None:
        return run_script(args.script, debug)
    run_repl(debug=debug)
    return 0
