"""Token definitions for Monkey.

Token types form a closed enumeration shared by the lexer and the parser.
Operator and delimiter members carry their literal text as the enum value so
that parse diagnostics read naturally (``expected next token to be )``).


File: tokens.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum


class TokenType(str, Enum):
    """
    Enumeration of every token kind the lexer can produce.
    """

    ILLEGAL = "ILLEGAL"
    EOF = "EOF"

    # Identifiers and literals
    IDENT = "IDENT"
    INT = "INT"

    # Operators
    ASSIGN = "="
    PLUS = "+"
    MINUS = "-"
    BANG = "!"
    ASTERISK = "*"
    SLASH = "/"

    LT = "<"
    LTE = "<="
    GT = ">"
    GTE = ">="
    EQ = "=="
    NEQ = "!="

    LAND = "&&"
    LOR = "||"
    BAND = "&"
    BOR = "|"

    # Delimiters
    COMMA = ","
    SEMICOLON = ";"
    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"

    # Keywords
    FUNCTION = "FUNCTION"
    LET = "LET"
    TRUE = "TRUE"
    FALSE = "FALSE"
    IF = "IF"
    ELSE = "ELSE"
    RETURN = "RETURN"

    def __str__(self) -> str:
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


KEYWORDS: dict[str, TokenType] = {
    "fn": TokenType.FUNCTION,
    "let": TokenType.LET,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "return": TokenType.RETURN,
}


def lookup_ident(literal: str) -> TokenType:
    """
    Return the keyword type for ``literal``, or ``IDENT`` if it is not reserved.
    """
    return KEYWORDS.get(literal, TokenType.IDENT)


class Token:
    """
    Represents a lexical token with a type, its source text and position.
    """
    __slots__ = ("type", "literal", "line", "column")

    def __init__(self, type_: TokenType, literal: str, line: int = 1, column: int = 1):
        """
        Initialize a new token.

        Parameters:
            type_ (TokenType): The token type.
            literal (str): The exact source text matched.
            line (int): 1-based source line.
            column (int): 1-based source column.
        """
        object.__setattr__(self, "type", type_)
        object.__setattr__(self, "literal", literal)
        object.__setattr__(self, "line", line)
        object.__setattr__(self, "column", column)

    def __setattr__(self, name, value):
        raise AttributeError("Token is immutable")

    def __eq__(self, other) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.literal == other.literal

    def __hash__(self) -> int:
        return hash((self.type, self.literal))

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.type.name}, {self.literal!r}, line={self.line}, col={self.column})"


__all__ = ["TokenType", "Token", "KEYWORDS", "lookup_ident"]
