"""
Tests for the Monkey lexer.
"""
import pytest

from monkey.lexer import Lexer, tokenize
from monkey.tokens import Token, TokenType


def test_next_token_sequence():
    """
    Test that a representative program is split into the expected tokens.
    """
    source = (
        "let five = 5;\n"
        "let add = fn(x, y) {\n"
        "  x + y;\n"
        "};\n"
        "!-/*5;\n"
        "if (5 < 10) { return true; } else { return false; }\n"
        "return 1|2 == 2 && 1 >= 2 || 2 <= 3 && 2&0 != 3;\n"
    )
    expected = [
        (TokenType.LET, "let"), (TokenType.IDENT, "five"), (TokenType.ASSIGN, "="),
        (TokenType.INT, "5"), (TokenType.SEMICOLON, ";"),
        (TokenType.LET, "let"), (TokenType.IDENT, "add"), (TokenType.ASSIGN, "="),
        (TokenType.FUNCTION, "fn"), (TokenType.LPAREN, "("), (TokenType.IDENT, "x"),
        (TokenType.COMMA, ","), (TokenType.IDENT, "y"), (TokenType.RPAREN, ")"),
        (TokenType.LBRACE, "{"), (TokenType.IDENT, "x"), (TokenType.PLUS, "+"),
        (TokenType.IDENT, "y"), (TokenType.SEMICOLON, ";"), (TokenType.RBRACE, "}"),
        (TokenType.SEMICOLON, ";"),
        (TokenType.BANG, "!"), (TokenType.MINUS, "-"), (TokenType.SLASH, "/"),
        (TokenType.ASTERISK, "*"), (TokenType.INT, "5"), (TokenType.SEMICOLON, ";"),
        (TokenType.IF, "if"), (TokenType.LPAREN, "("), (TokenType.INT, "5"),
        (TokenType.LT, "<"), (TokenType.INT, "10"), (TokenType.RPAREN, ")"),
        (TokenType.LBRACE, "{"), (TokenType.RETURN, "return"), (TokenType.TRUE, "true"),
        (TokenType.SEMICOLON, ";"), (TokenType.RBRACE, "}"), (TokenType.ELSE, "else"),
        (TokenType.LBRACE, "{"), (TokenType.RETURN, "return"), (TokenType.FALSE, "false"),
        (TokenType.SEMICOLON, ";"), (TokenType.RBRACE, "}"),
        (TokenType.RETURN, "return"), (TokenType.INT, "1"), (TokenType.BOR, "|"),
        (TokenType.INT, "2"), (TokenType.EQ, "=="), (TokenType.INT, "2"),
        (TokenType.LAND, "&&"), (TokenType.INT, "1"), (TokenType.GTE, ">="),
        (TokenType.INT, "2"), (TokenType.LOR, "||"), (TokenType.INT, "2"),
        (TokenType.LTE, "<="), (TokenType.INT, "3"), (TokenType.LAND, "&&"),
        (TokenType.INT, "2"), (TokenType.BAND, "&"), (TokenType.INT, "0"),
        (TokenType.NEQ, "!="), (TokenType.INT, "3"), (TokenType.SEMICOLON, ";"),
        (TokenType.EOF, ""),
    ]
    tokens = tokenize(source)
    assert [(t.type, t.literal) for t in tokens] == expected


def test_positions_are_tracked():
    """
    Test that tokens carry 1-based line and column numbers.
    """
    tokens = tokenize("let a = 1;\n  a + 2")
    plus = tokens[6]
    assert plus.type == TokenType.PLUS
    assert (plus.line, plus.column) == (2, 5)
    assert (tokens[0].line, tokens[0].column) == (1, 1)


def test_unknown_character_is_illegal():
    """
    Test that unmatched characters become ILLEGAL tokens instead of raising.
    """
    tokens = tokenize("1 @ 2")
    assert [t.type for t in tokens] == [
        TokenType.INT, TokenType.ILLEGAL, TokenType.INT, TokenType.EOF
    ]
    assert tokens[1].literal == "@"


def test_eof_repeats():
    """
    Test that the lexer keeps returning EOF after the input is exhausted.
    """
    lexer = Lexer("x")
    assert lexer.next_token().type == TokenType.IDENT
    assert lexer.next_token().type == TokenType.EOF
    assert lexer.next_token().type == TokenType.EOF


def test_identifiers_exclude_digits():
    """
    Test that identifiers are letters and underscores only.
    """
    tokens = tokenize("foo_bar1")
    assert [(t.type, t.literal) for t in tokens[:-1]] == [
        (TokenType.IDENT, "foo_bar"), (TokenType.INT, "1")
    ]


def test_tokens_are_immutable():
    """
    Test that a token cannot be modified once produced.
    """
    tok = Token(TokenType.INT, "5")
    with pytest.raises(AttributeError):
        tok.literal = "6"
    assert tok.literal == "5"
