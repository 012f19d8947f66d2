"""Abstract syntax tree for Monkey.

Nodes are plain dataclasses split into two families, statements and
expressions, rooted at :class:`Program`. Every node keeps the token it was
built from so diagnostics and ``token_literal()`` can refer back to the
source.

Rendering is not spread over the node classes: :func:`format_node` is the
single place that turns a node back into canonical source text. The forms
it produces are load-bearing, since runtime error messages, function
inspection and the parser tests compare against them, and any rendering
parses back to a tree with the same rendering.


File: nodes.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from monkey.tokens import Token


class Node:
    """Base class for every AST node."""

    token: Token

    def token_literal(self) -> str:
        """
        Return the literal of the token this node was built from.
        """
        return self.token.literal

    def __str__(self) -> str:
        return format_node(self)


class Statement(Node):
    """Marker base class for statement nodes."""


class Expression(Node):
    """Marker base class for expression nodes."""


@dataclass
class Program(Node):
    """Root node: the ordered top-level statements of a source text."""

    statements: list[Statement] = field(default_factory=list)

    def token_literal(self) -> str:
        if self.statements:
            return self.statements[0].token_literal()
        return ""


# ----------------------------------------------------------------------
# Expressions
# ----------------------------------------------------------------------

@dataclass
class Identifier(Expression):
    token: Token
    value: str


@dataclass
class IntegerLiteral(Expression):
    token: Token
    value: int


@dataclass
class Boolean(Expression):
    token: Token
    value: bool


@dataclass
class PrefixExpression(Expression):
    token: Token
    operator: str
    operand: Expression


@dataclass
class InfixExpression(Expression):
    token: Token
    left: Expression
    operator: str
    right: Expression


@dataclass
class IfExpression(Expression):
    token: Token
    condition: Expression
    consequence: BlockStatement
    alternative: Optional[BlockStatement] = None


@dataclass
class FunctionLiteral(Expression):
    token: Token
    parameters: list[Identifier]
    body: BlockStatement


@dataclass
class CallExpression(Expression):
    token: Token
    callee: Expression
    arguments: list[Expression]


# ----------------------------------------------------------------------
# Statements
# ----------------------------------------------------------------------

@dataclass
class LetStatement(Statement):
    token: Token
    name: Identifier
    value: Expression


@dataclass
class ReturnStatement(Statement):
    token: Token
    value: Expression


@dataclass
class ExpressionStatement(Statement):
    token: Token
    expression: Expression


@dataclass
class BlockStatement(Statement):
    token: Token
    statements: list[Statement] = field(default_factory=list)


# ----------------------------------------------------------------------
# Rendering
# ----------------------------------------------------------------------

def _format_statements(statements: list[Statement]) -> str:
    """
    Join statements so the result parses back into the same sequence.

    Expression statements have no terminator of their own; one is added
    between them so that a following ``(`` or ``-`` is not read as a call or
    an infix operator.
    """
    parts = []
    last = len(statements) - 1
    for i, stmt in enumerate(statements):
        text = format_node(stmt)
        if isinstance(stmt, ExpressionStatement) and i < last:
            text += ";"
        parts.append(text)
    return " ".join(parts)


def _format_braced(block: BlockStatement) -> str:
    body = _format_statements(block.statements)
    return f"{{ {body} }}" if body else "{ }"


def format_node(node: Node) -> str:
    """
    Render a node as canonical source text.

    Args:
        node (Node): Any AST node.

    Returns:
        str: The canonical rendering.
    """
    match node:
        case Program(statements=statements):
            return _format_statements(statements)
        case Identifier(value=name):
            return name
        case IntegerLiteral(value=value):
            return str(value)
        case Boolean(value=value):
            return "true" if value else "false"
        case PrefixExpression(operator=op, operand=operand):
            return f"({op}{format_node(operand)})"
        case InfixExpression(left=left, operator=op, right=right):
            return f"({format_node(left)} {op} {format_node(right)})"
        case IfExpression(condition=cond, consequence=cons, alternative=alt):
            text = f"if ({format_node(cond)}) {_format_braced(cons)}"
            if alt is not None:
                text += f" else {_format_braced(alt)}"
            return text
        case FunctionLiteral(parameters=params, body=body):
            names = ", ".join(format_node(p) for p in params)
            return f"{node.token_literal()}({names}) {_format_braced(body)}"
        case CallExpression(callee=callee, arguments=args):
            rendered = ", ".join(format_node(a) for a in args)
            return f"{format_node(callee)}({rendered})"
        case LetStatement(name=name, value=value):
            return f"{node.token_literal()} {format_node(name)} = {format_node(value)};"
        case ReturnStatement(value=value):
            return f"{node.token_literal()} {format_node(value)};"
        case ExpressionStatement(expression=expr):
            return format_node(expr)
        case BlockStatement(statements=statements):
            return _format_statements(statements)
        case _:
            raise TypeError(f"Cannot render node of type {type(node).__name__}")
