"""
Main parser entry point for Monkey.

This module defines the `Parser` class, which owns the two-token window
over the lexer, the prefix/infix dispatch registries and the diagnostics
list. The actual parsing routines are split across
`monkey.parser.expressions` and `monkey.parser.statements`.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import Callable, Optional

from monkey import nodes
from monkey.exceptions import MonkeySyntaxError, ParseDiagnostic
from monkey.lexer import Lexer
from monkey.operations import Precedence, precedence_of
from monkey.tokens import Token, TokenType

from . import expressions as _expr
from . import statements as _stmt

PrefixParseFn = Callable[[], Optional[nodes.Expression]]
InfixParseFn = Callable[[nodes.Expression], Optional[nodes.Expression]]


class Parser:
    """Monkey Pratt parser."""

    def __init__(self, lexer: Lexer, file: str = "<input>"):
        """
        Initialize the parser over a token stream.

        Parameters:
            lexer (Lexer): Any object with a ``next_token()`` method.
            file (str): The name of the source, used in error messages.
        """
        self.lexer = lexer
        self.source_file = file
        self.errors: list[ParseDiagnostic] = []

        self.cur_token: Token = None
        self.peek_token: Token = None

        self.prefix_parse_fns: dict[TokenType, PrefixParseFn] = {}
        self.infix_parse_fns: dict[TokenType, InfixParseFn] = {}

        self.register_prefix(TokenType.IDENT, self.parse_identifier)
        self.register_prefix(TokenType.INT, self.parse_integer_literal)
        self.register_prefix(TokenType.TRUE, self.parse_boolean)
        self.register_prefix(TokenType.FALSE, self.parse_boolean)
        self.register_prefix(TokenType.BANG, self.parse_prefix_expression)
        self.register_prefix(TokenType.MINUS, self.parse_prefix_expression)
        self.register_prefix(TokenType.LPAREN, self.parse_grouped_expression)
        self.register_prefix(TokenType.IF, self.parse_if_expression)
        self.register_prefix(TokenType.FUNCTION, self.parse_function_literal)

        for token_type in (
            TokenType.PLUS,
            TokenType.MINUS,
            TokenType.ASTERISK,
            TokenType.SLASH,
            TokenType.EQ,
            TokenType.NEQ,
            TokenType.LT,
            TokenType.LTE,
            TokenType.GT,
            TokenType.GTE,
            TokenType.LAND,
            TokenType.LOR,
        ):
            self.register_infix(token_type, self.parse_infix_expression)
        self.register_infix(TokenType.LPAREN, self.parse_call_expression)

        # Fill both cells of the window.
        self.next_token()
        self.next_token()

    # ------------------------------------------------------------------
    # Token window
    # ------------------------------------------------------------------

    def next_token(self) -> None:
        """
        Shift the peek token into the current cell and pull the next one.
        """
        self.cur_token = self.peek_token
        self.peek_token = self.lexer.next_token()

    def cur_token_is(self, token_type: TokenType) -> bool:
        return self.cur_token.type == token_type

    def peek_token_is(self, token_type: TokenType) -> bool:
        return self.peek_token.type == token_type

    def expect_peek(self, token_type: TokenType) -> bool:
        """
        Advance if the peek token has the expected type, otherwise record a diagnostic.

        Parameters:
            token_type (TokenType): The expected token type.

        Returns:
            bool: True if the parser advanced.
        """
        if self.peek_token_is(token_type):
            self.next_token()
            return True
        self.peek_error(token_type)
        return False

    def peek_precedence(self) -> Precedence:
        return precedence_of(self.peek_token.type)

    def cur_precedence(self) -> Precedence:
        return precedence_of(self.cur_token.type)

    # ------------------------------------------------------------------
    # Registries and diagnostics
    # ------------------------------------------------------------------

    def register_prefix(self, token_type: TokenType, fn: PrefixParseFn) -> None:
        self.prefix_parse_fns[token_type] = fn

    def register_infix(self, token_type: TokenType, fn: InfixParseFn) -> None:
        self.infix_parse_fns[token_type] = fn

    def error(self, message: str, tok: Optional[Token] = None) -> None:
        """
        Record a diagnostic at ``tok`` (the current token by default).
        """
        tok = tok or self.cur_token
        self.errors.append(ParseDiagnostic(message, tok.line, tok.column))

    def peek_error(self, token_type: TokenType) -> None:
        self.error(
            f"expected next token to be {token_type.value}, "
            f"got {self.peek_token.type.value} instead",
            self.peek_token,
        )

    def no_prefix_parse_fn_error(self, token_type: TokenType) -> None:
        self.error(f"no prefix parse function for {token_type.value} found")

    def synchronize(self, *stop_at: TokenType) -> None:
        """
        Skip past a malformed statement.

        Advances until the current token is a statement terminator, one of
        ``stop_at``, or end of input.
        """
        while not (
            self.cur_token_is(TokenType.SEMICOLON)
            or self.cur_token_is(TokenType.EOF)
            or self.cur_token.type in stop_at
        ):
            self.next_token()

    # Expression wrappers
    def parse_expression(self, precedence: Precedence) -> Optional[nodes.Expression]:
        """
        Parse an expression whose operators all bind tighter than ``precedence``.
        """
        return _expr.parse_expression(self, precedence)

    def parse_identifier(self) -> nodes.Expression:
        """
        Parse an identifier reference.
        """
        return _expr.parse_identifier(self)

    def parse_integer_literal(self) -> Optional[nodes.Expression]:
        """
        Parse a decimal integer literal.
        """
        return _expr.parse_integer_literal(self)

    def parse_boolean(self) -> nodes.Expression:
        """
        Parse a ``true`` or ``false`` literal.
        """
        return _expr.parse_boolean(self)

    def parse_prefix_expression(self) -> Optional[nodes.Expression]:
        """
        Parse a prefix ``!`` or ``-`` expression.
        """
        return _expr.parse_prefix_expression(self)

    def parse_infix_expression(self, left: nodes.Expression) -> Optional[nodes.Expression]:
        """
        Parse the right-hand side of a binary operator.
        """
        return _expr.parse_infix_expression(self, left)

    def parse_grouped_expression(self) -> Optional[nodes.Expression]:
        """
        Parse a parenthesized expression.
        """
        return _expr.parse_grouped_expression(self)

    def parse_if_expression(self) -> Optional[nodes.Expression]:
        """
        Parse an ``if``/``else`` expression.
        """
        return _expr.parse_if_expression(self)

    def parse_function_literal(self) -> Optional[nodes.Expression]:
        """
        Parse a ``fn`` literal.
        """
        return _expr.parse_function_literal(self)

    def parse_call_expression(self, callee: nodes.Expression) -> Optional[nodes.Expression]:
        """
        Parse the argument list of a call.
        """
        return _expr.parse_call_expression(self, callee)

    # Statement wrappers
    def parse_statement(self) -> Optional[nodes.Statement]:
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def parse_let_statement(self) -> Optional[nodes.Statement]:
        """
        Parse a ``let`` binding.
        """
        return _stmt.parse_let_statement(self)

    def parse_return_statement(self) -> Optional[nodes.Statement]:
        """
        Parse a ``return`` statement.
        """
        return _stmt.parse_return_statement(self)

    def parse_expression_statement(self) -> Optional[nodes.Statement]:
        """
        Parse an expression used as a statement.
        """
        return _stmt.parse_expression_statement(self)

    def parse_block_statement(self) -> nodes.BlockStatement:
        """
        Parse a block of statements enclosed in braces.
        """
        return _stmt.parse_block_statement(self)

    def parse_program(self) -> nodes.Program:
        """
        Parse the full input into a program.

        Malformed statements are left out of the result; each one leaves a
        diagnostic in ``self.errors``.
        """
        program = nodes.Program()
        while not self.cur_token_is(TokenType.EOF):
            stmt = self.parse_statement()
            if stmt is not None:
                program.statements.append(stmt)
            else:
                self.synchronize()
            self.next_token()
        return program


def parse_source(source: str, file: str = "<input>") -> nodes.Program:
    """
    Parse source text, raising if the parser recorded any diagnostics.

    Raises:
        MonkeySyntaxError: If the source is malformed.
    """
    parser = Parser(Lexer(source), file)
    program = parser.parse_program()
    if parser.errors:
        raise MonkeySyntaxError(parser.errors, file)
    return program
