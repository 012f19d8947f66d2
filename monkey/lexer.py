"""Lexer for Monkey.

The lexer performs a single pass over the source code using a combined
regular expression of named groups. Matches are produced lazily: the parser
pulls one :class:`Token` at a time through :meth:`Lexer.next_token`, so the
stream never needs to be materialized. Each token records its type, the
exact source text matched and its line/column position.

Characters that match no rule are returned as ``ILLEGAL`` tokens rather than
raising, leaving the parser to report them as diagnostics. Once the input is
exhausted the lexer keeps returning ``EOF``.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import re
from typing import Iterator

from monkey.tokens import Token, TokenType, lookup_ident


# Order matters: two-character operators must precede their one-character prefixes.
TOKEN_SPECIFICATION: list[tuple[str, str]] = [
    # Literals and names
    ('INT',        r'[0-9]+'),
    ('IDENT',      r'[A-Za-z_]+'),

    # Comparison operators
    ('EQ',         r'=='),
    ('NEQ',        r'!='),
    ('LTE',        r'<='),
    ('GTE',        r'>='),
    ('LT',         r'<'),
    ('GT',         r'>'),

    # Logical and bitwise operators
    ('LAND',       r'&&'),
    ('LOR',        r'\|\|'),
    ('BAND',       r'&'),
    ('BOR',        r'\|'),

    # Assignment and arithmetic
    ('ASSIGN',     r'='),
    ('PLUS',       r'\+'),
    ('MINUS',      r'-'),
    ('BANG',       r'!'),
    ('ASTERISK',   r'\*'),
    ('SLASH',      r'/'),

    # Delimiters
    ('COMMA',      r','),
    ('SEMICOLON',  r';'),
    ('LPAREN',     r'\('),
    ('RPAREN',     r'\)'),
    ('LBRACE',     r'\{'),
    ('RBRACE',     r'\}'),

    # Miscellaneous
    ('NEWLINE',    r'\n'),
    ('SKIP',       r'[ \t\r]+'),
    ('MISMATCH',   r'.'),
]

TOKEN_REGEX = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in TOKEN_SPECIFICATION)
)


class Lexer:
    """
    Lazily advanced token stream over a source string.
    """

    def __init__(self, source: str):
        """
        Initialize the lexer.

        Parameters:
            source (str): The source code to tokenize.
        """
        self.source = source
        self._matches = TOKEN_REGEX.finditer(source)
        self._line = 1
        self._line_start = 0
        self._eof = None

    def next_token(self) -> Token:
        """
        Return the next token in the stream, or ``EOF`` once input is exhausted.
        """
        for match_obj in self._matches:
            kind = match_obj.lastgroup
            value = match_obj.group()
            column = match_obj.start() - self._line_start + 1

            if kind == 'NEWLINE':
                self._line += 1
                self._line_start = match_obj.end()
                continue
            if kind == 'SKIP':
                continue
            if kind == 'MISMATCH':
                return Token(TokenType.ILLEGAL, value, self._line, column)
            if kind == 'IDENT':
                return Token(lookup_ident(value), value, self._line, column)
            return Token(TokenType[kind], value, self._line, column)

        if self._eof is None:
            column = len(self.source) - self._line_start + 1
            self._eof = Token(TokenType.EOF, "", self._line, column)
        return self._eof

    def __iter__(self) -> Iterator[Token]:
        """
        Iterate over tokens up to and including the first ``EOF``.
        """
        while True:
            tok = self.next_token()
            yield tok
            if tok.type == TokenType.EOF:
                return


def tokenize(source: str) -> list[Token]:
    """
    Convert a string of source code into a list of tokens ending in ``EOF``.

    Parameters:
        source (str): The source code to tokenize.

    Returns:
        list[Token]: A list of Token instances.
    """
    return list(Lexer(source))
