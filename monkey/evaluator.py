"""Evaluator.

This is a tree-walk interpreter for evaluating AST nodes produced by the parser. It supports
integer arithmetic, comparisons, boolean logic, conditionals, let bindings, first-class
functions with closures, and early return.

1. Execution Model
`evaluate(node, env)` dispatches on the node's class and recurses into its children. Every
call returns a runtime value; nothing in the language raises a host exception.

2. Environment
Names resolve through a chain of `Environment` scopes. Each function call runs its body in
a fresh scope enclosed by the function's *defining* environment, never the caller's, so
scoping is lexical and closures keep the scope they were created in alive.

3. Sentinels
Two values are signals rather than data:
- `ReturnValue` wraps the value of a `return`. Blocks hand it upward untouched; it is
  unwrapped once, at the boundary of the function call (or at the program top level).
- `Error` reports a runtime failure (type mismatch, unsupported operator, unknown name).
  Every composite node checks each sub-result and hands either sentinel upward unchanged,
  so evaluation stops at the first failure and a `return` nested in an expression still
  leaves the function.

4. Truthiness
Only `false` and `null` are falsy. Every other value, including `0`, is truthy.

5. Operators
Both operands of an infix operator are evaluated, left then right, before the operator is
applied; `&&` and `||` do not short-circuit. Integer arithmetic wraps to signed 64 bits and
division truncates toward zero.


File: evaluator.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from monkey import nodes
from monkey.environment import Environment
from monkey.objects import (
    FALSE,
    NULL,
    TRUE,
    Error,
    Function,
    Integer,
    MonkeyObject,
    ObjectType,
    ReturnValue,
    is_error,
    is_sentinel,
    is_truthy,
    native_bool_to_boolean,
)


def _wrap_int64(value: int) -> int:
    """Reduce ``value`` to the signed 64-bit range, two's complement."""
    value &= 0xFFFFFFFFFFFFFFFF
    return value - (1 << 64) if value & (1 << 63) else value


def evaluate(node: nodes.Node, env: Environment) -> MonkeyObject:
    """
    Evaluate a node against an environment and return its value.

    Parameters:
        node (Node): Any AST node, usually a Program.
        env (Environment): The scope to evaluate in. Reuse the same environment across
            calls to keep bindings alive between inputs.

    Returns:
        MonkeyObject: The resulting value, an `Error` on runtime failure.

    Raises:
        TypeError: If the node is not a known AST node.
    """
    match node:
        # Statements
        case nodes.Program():
            return _eval_program(node, env)
        case nodes.BlockStatement():
            return _eval_block_statement(node, env)
        case nodes.ExpressionStatement(expression=expr):
            return evaluate(expr, env)
        case nodes.ReturnStatement(value=value_node):
            value = evaluate(value_node, env)
            if is_sentinel(value):
                return value
            return ReturnValue(value)
        case nodes.LetStatement(name=name, value=value_node):
            value = evaluate(value_node, env)
            if is_sentinel(value):
                return value
            env.set(name.value, value)
            return NULL

        # Literals
        case nodes.IntegerLiteral(value=value):
            return Integer(value)
        case nodes.Boolean(value=value):
            return native_bool_to_boolean(value)

        # Expressions
        case nodes.PrefixExpression(operator=op, operand=operand_node):
            operand = evaluate(operand_node, env)
            if is_sentinel(operand):
                return operand
            return _eval_prefix_expression(op, operand)
        case nodes.InfixExpression(left=left_node, operator=op, right=right_node):
            left = evaluate(left_node, env)
            if is_sentinel(left):
                return left
            right = evaluate(right_node, env)
            if is_sentinel(right):
                return right
            return _eval_infix_expression(op, left, right)
        case nodes.IfExpression():
            return _eval_if_expression(node, env)
        case nodes.Identifier(value=name):
            return _eval_identifier(name, env)
        case nodes.FunctionLiteral(parameters=params, body=body):
            return Function(params, body, env)
        case nodes.CallExpression(callee=callee_node, arguments=arg_nodes):
            function = evaluate(callee_node, env)
            if is_sentinel(function):
                return function
            args = _eval_expressions(arg_nodes, env)
            if len(args) == 1 and is_sentinel(args[0]):
                return args[0]
            return _apply_function(function, args)

    raise TypeError(f"Unknown node type: {type(node).__name__}")


def _eval_program(program: nodes.Program, env: Environment) -> MonkeyObject:
    """Run top-level statements; a `return` here simply yields its value."""
    result = NULL
    for stmt in program.statements:
        result = evaluate(stmt, env)
        if isinstance(result, ReturnValue):
            return result.value
        if is_error(result):
            return result
    return result


def _eval_block_statement(block: nodes.BlockStatement, env: Environment) -> MonkeyObject:
    """Run block statements, handing any sentinel upward still wrapped."""
    result = NULL
    for stmt in block.statements:
        result = evaluate(stmt, env)
        if isinstance(result, (ReturnValue, Error)):
            return result
    return result


def _eval_expressions(exprs: list[nodes.Expression], env: Environment) -> list[MonkeyObject]:
    """
    Evaluate left to right. On the first `Error` or `ReturnValue`, return a
    one-element list holding it and skip the rest.
    """
    result = []
    for expr in exprs:
        evaluated = evaluate(expr, env)
        if is_sentinel(evaluated):
            return [evaluated]
        result.append(evaluated)
    return result


def _eval_identifier(name: str, env: Environment) -> MonkeyObject:
    value, found = env.get(name)
    if not found:
        return Error(f"identifier not found: {name}")
    return value


def _eval_if_expression(node: nodes.IfExpression, env: Environment) -> MonkeyObject:
    condition = evaluate(node.condition, env)
    if is_sentinel(condition):
        return condition
    if is_truthy(condition):
        return evaluate(node.consequence, env)
    if node.alternative is not None:
        return evaluate(node.alternative, env)
    return NULL


# ----------------------------------------------------------------------
# Operators
# ----------------------------------------------------------------------

def _eval_prefix_expression(op: str, operand: MonkeyObject) -> MonkeyObject:
    match op:
        case "!":
            return FALSE if is_truthy(operand) else TRUE
        case "-":
            if operand.type() != ObjectType.INTEGER:
                return Error(f"unknown operator: -{operand.type()}")
            return Integer(_wrap_int64(-operand.value))
        case _:
            return Error(f"unknown operator: {op}{operand.type()}")


def _eval_infix_expression(op: str, left: MonkeyObject, right: MonkeyObject) -> MonkeyObject:
    if left.type() != right.type():
        return Error(f"type mismatch: {left.type()} {op} {right.type()}")
    if left.type() == ObjectType.INTEGER:
        return _eval_integer_infix_expression(op, left, right)
    if left.type() == ObjectType.BOOLEAN:
        return _eval_boolean_infix_expression(op, left, right)

    match op:
        case "==":
            return native_bool_to_boolean(left is right)
        case "!=":
            return native_bool_to_boolean(left is not right)
    return Error(f"unknown operator: {left.type()} {op} {right.type()}")


def _eval_integer_infix_expression(op: str, left: Integer, right: Integer) -> MonkeyObject:
    lhs = left.value
    rhs = right.value
    match op:
        # Arithmetic
        case "+":
            return Integer(_wrap_int64(lhs + rhs))
        case "-":
            return Integer(_wrap_int64(lhs - rhs))
        case "*":
            return Integer(_wrap_int64(lhs * rhs))
        case "/":
            if rhs == 0:
                return Error("division by zero")
            quotient = abs(lhs) // abs(rhs)
            if (lhs < 0) != (rhs < 0):
                quotient = -quotient
            return Integer(_wrap_int64(quotient))
        # Comparison
        case "<":
            return native_bool_to_boolean(lhs < rhs)
        case "<=":
            return native_bool_to_boolean(lhs <= rhs)
        case ">":
            return native_bool_to_boolean(lhs > rhs)
        case ">=":
            return native_bool_to_boolean(lhs >= rhs)
        case "==":
            return native_bool_to_boolean(lhs == rhs)
        case "!=":
            return native_bool_to_boolean(lhs != rhs)
    return Error(f"unknown operator: {left.type()} {op} {right.type()}")


def _eval_boolean_infix_expression(op: str, left: MonkeyObject, right: MonkeyObject) -> MonkeyObject:
    match op:
        case "==":
            return native_bool_to_boolean(left is right)
        case "!=":
            return native_bool_to_boolean(left is not right)
        case "&&":
            return native_bool_to_boolean(left is TRUE and right is TRUE)
        case "||":
            return native_bool_to_boolean(left is TRUE or right is TRUE)
    return Error(f"unknown operator: {left.type()} {op} {right.type()}")


# ----------------------------------------------------------------------
# Function application
# ----------------------------------------------------------------------

def _apply_function(function: MonkeyObject, args: list[MonkeyObject]) -> MonkeyObject:
    """
    Call a function value.

    The body runs in a new scope enclosed by the function's captured environment, with
    parameters bound positionally. A `ReturnValue` coming out of the body is unwrapped here
    and nowhere else.
    """
    if not isinstance(function, Function):
        return Error(f"not a function: {function.type()}")
    if len(args) != len(function.parameters):
        return Error(
            f"wrong number of arguments: want={len(function.parameters)}, got={len(args)}"
        )

    call_env = Environment.new_enclosed(function.env)
    for param, arg in zip(function.parameters, args):
        call_env.set(param.value, arg)

    result = evaluate(function.body, call_env)
    if isinstance(result, ReturnValue):
        return result.value
    return result
