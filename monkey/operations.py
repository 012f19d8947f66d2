"""Shared operator definitions.

This module centralizes the binding power of every infix operator so the
parser's precedence-climbing loop and the operator registrations cannot drift
apart when operators are added.
"""

from enum import IntEnum

from monkey.tokens import TokenType


class Precedence(IntEnum):
    """
    Binding power levels, lowest to highest.
    """

    LOWEST = 1
    LOGICAL_OR = 2      # ||
    LOGICAL_AND = 3     # &&
    EQUALS = 4          # == !=
    LESSGREATER = 5     # < <= > >=
    SUM = 6             # + -
    PRODUCT = 7         # * /
    PREFIX = 8          # -x !x
    CALL = 9            # f(x)


PRECEDENCES: dict[TokenType, Precedence] = {
    TokenType.LOR: Precedence.LOGICAL_OR,
    TokenType.LAND: Precedence.LOGICAL_AND,
    TokenType.EQ: Precedence.EQUALS,
    TokenType.NEQ: Precedence.EQUALS,
    TokenType.LT: Precedence.LESSGREATER,
    TokenType.LTE: Precedence.LESSGREATER,
    TokenType.GT: Precedence.LESSGREATER,
    TokenType.GTE: Precedence.LESSGREATER,
    TokenType.PLUS: Precedence.SUM,
    TokenType.MINUS: Precedence.SUM,
    TokenType.ASTERISK: Precedence.PRODUCT,
    TokenType.SLASH: Precedence.PRODUCT,
    TokenType.LPAREN: Precedence.CALL,
}


def precedence_of(token_type: TokenType) -> Precedence:
    """
    Return the binding power of ``token_type``, ``LOWEST`` if it is not an operator.
    """
    return PRECEDENCES.get(token_type, Precedence.LOWEST)


__all__ = ["Precedence", "PRECEDENCES", "precedence_of"]
