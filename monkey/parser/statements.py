"""Statement parsing utilities for Monkey.

These functions operate on a `monkey.parser.parser.Parser` instance and
handle the statement forms of the language: ``let`` bindings, ``return``,
expression statements and brace-delimited blocks.


File: statements.py
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


def parse_statement(parser: 'Parser') -> Optional[nodes.Statement]:
    """
    Parse a single statement, dispatching on its leading keyword.

    Args:
        parser: The parser instance.

    Returns:
        Statement | None: The statement node, or None if it was malformed.
    """
    tok = parser.cur_token
    if tok.type == TokenType.LET:
        return parser.parse_let_statement()
    elif tok.type == TokenType.RETURN:
        return parser.parse_return_statement()
    else:
        return parser.parse_expression_statement()


def parse_let_statement(parser: 'Parser') -> Optional[nodes.Statement]:
    """
    Parse a ``let`` binding.

    Syntax:
        let <identifier> = <expression> [;]

    Args:
        parser: The parser instance.

    Returns:
        LetStatement | None
    """
    tok = parser.cur_token
    if not parser.expect_peek(TokenType.IDENT):
        return None
    name = nodes.Identifier(parser.cur_token, parser.cur_token.literal)

    if not parser.expect_peek(TokenType.ASSIGN):
        return None

    parser.next_token()
    value = parser.parse_expression(Precedence.LOWEST)
    if value is None:
        return None

    if parser.peek_token_is(TokenType.SEMICOLON):
        parser.next_token()
    return nodes.LetStatement(tok, name, value)


def parse_return_statement(parser: 'Parser') -> Optional[nodes.Statement]:
    """
    Parse a ``return`` statement.

    Syntax:
        return <expression> [;]

    Args:
        parser: The parser instance.

    Returns:
        ReturnStatement | None
    """
    tok = parser.cur_token
    parser.next_token()
    value = parser.parse_expression(Precedence.LOWEST)
    if value is None:
        return None

    if parser.peek_token_is(TokenType.SEMICOLON):
        parser.next_token()
    return nodes.ReturnStatement(tok, value)


def parse_expression_statement(parser: 'Parser') -> Optional[nodes.Statement]:
    """
    Parse an expression used as a statement, with an optional terminator.

    Syntax:
        <expression> [;]
    """
    tok = parser.cur_token
    expr = parser.parse_expression(Precedence.LOWEST)
    if expr is None:
        return None

    if parser.peek_token_is(TokenType.SEMICOLON):
        parser.next_token()
    return nodes.ExpressionStatement(tok, expr)


def parse_block_statement(parser: 'Parser') -> nodes.BlockStatement:
    """
    Parse a block of statements enclosed in braces.

    The block ends at the closing brace or at end of input. A malformed
    statement inside the block is skipped up to the next ``;`` or ``}``.

    Syntax:
        { <statement>* }

    Args:
        parser: The parser instance.

    Returns:
        BlockStatement: The block, with the current token left on its ``}``.
    """
    block = nodes.BlockStatement(parser.cur_token, [])
    parser.next_token()

    while not parser.cur_token_is(TokenType.RBRACE) and not parser.cur_token_is(TokenType.EOF):
        stmt = parser.parse_statement()
        if stmt is not None:
            block.statements.append(stmt)
        else:
            parser.synchronize(TokenType.RBRACE)
            if parser.cur_token_is(TokenType.RBRACE):
                break
        parser.next_token()

    return block
