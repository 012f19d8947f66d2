"""
Expression parsing utilities for Monkey.

These functions operate on a `monkey.parser.parser.Parser` instance and
implement Pratt (precedence-climbing) parsing: each token type registers a
prefix and/or infix routine, and :func:`parse_expression` keeps folding infix
operators into the left operand for as long as the next operator binds
tighter than the current threshold.

Every routine is entered with the parser's current token on the first token
of its construct and leaves it on the last one. A routine that cannot match
records a diagnostic and returns ``None``.


File: expressions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING, Optional

from monkey import nodes
from monkey.operations import Precedence
from monkey.tokens import TokenType

if TYPE_CHECKING:
    from monkey.parser import Parser

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


# ---- Entry point ----

def parse_expression(parser: 'Parser', precedence: Precedence) -> Optional[nodes.Expression]:
    """
    Parse an expression, stopping at the first operator that does not bind
    tighter than ``precedence``.
    """
    prefix = parser.prefix_parse_fns.get(parser.cur_token.type)
    if prefix is None:
        parser.no_prefix_parse_fn_error(parser.cur_token.type)
        return None

    left = prefix()
    if left is None:
        return None

    while (
        not parser.peek_token_is(TokenType.SEMICOLON)
        and precedence < parser.peek_precedence()
    ):
        infix = parser.infix_parse_fns.get(parser.peek_token.type)
        if infix is None:
            return left
        parser.next_token()
        left = infix(left)
        if left is None:
            return None

    return left


# ---- Prefix routines ----

def parse_identifier(parser: 'Parser') -> nodes.Expression:
    """Parse an identifier reference."""
    tok = parser.cur_token
    return nodes.Identifier(tok, tok.literal)


def parse_integer_literal(parser: 'Parser') -> Optional[nodes.Expression]:
    """Parse a decimal integer literal that fits in a signed 64-bit word."""
    tok = parser.cur_token
    value = int(tok.literal)
    if not INT64_MIN <= value <= INT64_MAX:
        parser.error(f"could not parse {tok.literal} as integer")
        return None
    return nodes.IntegerLiteral(tok, value)


def parse_boolean(parser: 'Parser') -> nodes.Expression:
    """Parse ``true`` or ``false``."""
    tok = parser.cur_token
    return nodes.Boolean(tok, tok.type == TokenType.TRUE)


def parse_prefix_expression(parser: 'Parser') -> Optional[nodes.Expression]:
    """
    Parse ``!<expr>`` or ``-<expr>``.

    The operand is parsed at prefix precedence so ``-a * b`` groups as
    ``((-a) * b)``.
    """
    tok = parser.cur_token
    parser.next_token()
    operand = parser.parse_expression(Precedence.PREFIX)
    if operand is None:
        return None
    return nodes.PrefixExpression(tok, tok.literal, operand)


def parse_grouped_expression(parser: 'Parser') -> Optional[nodes.Expression]:
    """Parse ``( <expr> )``; the grouping leaves no node of its own."""
    parser.next_token()
    expr = parser.parse_expression(Precedence.LOWEST)
    if expr is None:
        return None
    if not parser.expect_peek(TokenType.RPAREN):
        return None
    return expr


def parse_if_expression(parser: 'Parser') -> Optional[nodes.Expression]:
    """
    Parse an if expression.

    Syntax:
        if ( <expr> ) { <statement>* } [ else { <statement>* } ]
    """
    tok = parser.cur_token
    if not parser.expect_peek(TokenType.LPAREN):
        return None

    parser.next_token()
    condition = parser.parse_expression(Precedence.LOWEST)
    if condition is None:
        return None

    if not parser.expect_peek(TokenType.RPAREN):
        return None
    if not parser.expect_peek(TokenType.LBRACE):
        return None
    consequence = parser.parse_block_statement()

    alternative = None
    if parser.peek_token_is(TokenType.ELSE):
        parser.next_token()
        if not parser.expect_peek(TokenType.LBRACE):
            return None
        alternative = parser.parse_block_statement()

    return nodes.IfExpression(tok, condition, consequence, alternative)


def parse_function_literal(parser: 'Parser') -> Optional[nodes.Expression]:
    """
    Parse a function literal.

    Syntax:
        fn ( <ident>, ... ) { <statement>* }
    """
    tok = parser.cur_token
    if not parser.expect_peek(TokenType.LPAREN):
        return None

    parameters = _parse_function_parameters(parser)
    if parameters is None:
        return None

    if not parser.expect_peek(TokenType.LBRACE):
        return None
    body = parser.parse_block_statement()

    return nodes.FunctionLiteral(tok, parameters, body)


def _parse_function_parameters(parser: 'Parser') -> Optional[list[nodes.Identifier]]:
    """Parse a parenthesized parameter list; the current token is ``(``."""
    parameters: list[nodes.Identifier] = []

    if parser.peek_token_is(TokenType.RPAREN):
        parser.next_token()
        return parameters

    if not parser.expect_peek(TokenType.IDENT):
        return None
    parameters.append(parse_identifier(parser))

    while parser.peek_token_is(TokenType.COMMA):
        parser.next_token()
        if not parser.expect_peek(TokenType.IDENT):
            return None
        parameters.append(parse_identifier(parser))

    if not parser.expect_peek(TokenType.RPAREN):
        return None
    return parameters


# ---- Infix routines ----

def parse_infix_expression(parser: 'Parser', left: nodes.Expression) -> Optional[nodes.Expression]:
    """
    Parse the right operand of a binary operator.

    The right side is parsed at the operator's own precedence, which makes
    operators of equal binding power left-associative.
    """
    tok = parser.cur_token
    precedence = parser.cur_precedence()
    parser.next_token()
    right = parser.parse_expression(precedence)
    if right is None:
        return None
    return nodes.InfixExpression(tok, left, tok.literal, right)


def parse_call_expression(parser: 'Parser', callee: nodes.Expression) -> Optional[nodes.Expression]:
    """Parse ``<callee>( <expr>, ... )``; the current token is ``(``."""
    tok = parser.cur_token
    arguments = _parse_call_arguments(parser)
    if arguments is None:
        return None
    return nodes.CallExpression(tok, callee, arguments)


def _parse_call_arguments(parser: 'Parser') -> Optional[list[nodes.Expression]]:
    arguments: list[nodes.Expression] = []

    if parser.peek_token_is(TokenType.RPAREN):
        parser.next_token()
        return arguments

    parser.next_token()
    arg = parser.parse_expression(Precedence.LOWEST)
    if arg is None:
        return None
    arguments.append(arg)

    while parser.peek_token_is(TokenType.COMMA):
        parser.next_token()
        parser.next_token()
        arg = parser.parse_expression(Precedence.LOWEST)
        if arg is None:
            return None
        arguments.append(arg)

    if not parser.expect_peek(TokenType.RPAREN):
        return None
    return arguments
