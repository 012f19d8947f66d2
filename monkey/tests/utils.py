"""
Utility functions shared across Monkey tests.
"""
from monkey.environment import Environment
from monkey.evaluator import evaluate
from monkey.lexer import Lexer
from monkey.parser import Parser


def parse_source(source: str):
    """
    Parse source code and return the program, asserting it parsed cleanly.
    """
    parser = Parser(Lexer(source), "<test>")
    program = parser.parse_program()
    assert parser.errors == [], [str(e) for e in parser.errors]
    return program


def parse_with_errors(source: str):
    """
    Parse source code and return the program together with its diagnostics.
    """
    parser = Parser(Lexer(source), "<test>")
    program = parser.parse_program()
    return program, parser.errors


def eval_source(source: str, env: Environment | None = None):
    """
    Parse and evaluate source code, ignoring diagnostics, and return the result.
    """
    parser = Parser(Lexer(source), "<test>")
    program = parser.parse_program()
    return evaluate(program, env if env is not None else Environment())
