"""
Interactive read-eval-print loop.

Each input line is lexed and parsed on its own, then evaluated against one
environment that lives for the whole session, so ``let`` bindings and
functions defined on earlier lines stay visible. Lines with parse
diagnostics are reported and not evaluated.


File: repl.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import os

from monkey import nodes
from monkey.environment import Environment
from monkey.evaluator import evaluate
from monkey.exceptions import MonkeySyntaxError
from monkey.lexer import tokenize
from monkey.objects import Error, MonkeyObject
from monkey.parser import parse_source

PROMPT = ">> "


def debug_enabled() -> bool:
    """
    Return True if the ``MONKEYDEBUG`` environment variable is set.
    """
    return bool(os.environ.get("MONKEYDEBUG"))


def debug_print_tokens_ast(source: str, program: nodes.Program):
    """
    Print tokenized source and AST
    """
    print("\nTokens:\n")
    print(tokenize(source))
    print("\nAST:\n")
    print(repr(program))
    print(" ")


def print_parser_errors(errors, file: str = "<stdin>"):
    """
    Print every parse diagnostic, one per line.
    """
    print(f"Parse errors in {file}:")
    for err in errors:
        print(f"\t{err}")


def eval_line(source: str, env: Environment, debug: bool = False) -> MonkeyObject | None:
    """
    Run one line of input against the session environment and print the result.

    Returns:
        MonkeyObject | None: The evaluated value, or None if the line did not parse.
    """
    try:
        program = parse_source(source, "<stdin>")
    except MonkeySyntaxError as e:
        print_parser_errors(e.diagnostics, e.file)
        return None

    if debug:
        debug_print_tokens_ast(source, program)

    result = evaluate(program, env)
    # A trailing let prints nothing unless it failed.
    if isinstance(result, Error) or (
        program.statements and not isinstance(program.statements[-1], nodes.LetStatement)
    ):
        print(result.inspect())
    return result


def run_repl(env: Environment | None = None, debug: bool = False):
    """
    Run the interactive REPL
    """
    print("Monkey Language Interpreter - REPL")
    print("Type `exit` or `quit` to leave.")
    env = env if env is not None else Environment()
    debug = debug or debug_enabled()
    while True:
        try:
            line = input(PROMPT)
            if line.strip() in {"exit", "quit"}:
                break
            if not line.strip():
                continue
            try:
                eval_line(line, env, debug)
            except RecursionError as e:
                print(f"{type(e).__name__}: {e}")
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break
