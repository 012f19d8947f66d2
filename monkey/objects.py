"""Runtime values for Monkey.

Every value the evaluator produces is a :class:`MonkeyObject` carrying an
uppercase type tag and an ``inspect()`` rendering used by the REPL and in
error messages. ``true``, ``false`` and ``null`` are canonical singletons,
so identity comparison is valid for them.

Two variants are not user-visible data: :class:`ReturnValue` carries a
``return`` up to the enclosing call, and :class:`Error` carries a runtime
failure up to the top level.


File: objects.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from monkey.nodes import BlockStatement, Identifier, format_node

if TYPE_CHECKING:
    from monkey.environment import Environment


class ObjectType(str, Enum):
    """
    Type tags used in runtime error messages.
    """

    INTEGER = "INTEGER"
    BOOLEAN = "BOOLEAN"
    NULL = "NULL"
    RETURN_VALUE = "RETURN_VALUE"
    ERROR = "ERROR"
    FUNCTION = "FUNCTION"

    def __str__(self) -> str:
        return self.value


class MonkeyObject:
    """Base class for runtime values."""

    __slots__ = ()

    def type(self) -> ObjectType:
        raise NotImplementedError

    def inspect(self) -> str:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.inspect()})"


class Integer(MonkeyObject):
    """A signed 64-bit integer."""

    __slots__ = ("value",)

    def __init__(self, value: int):
        self.value = value

    def type(self) -> ObjectType:
        return ObjectType.INTEGER

    def inspect(self) -> str:
        return str(self.value)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Integer):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)


class Boolean(MonkeyObject):
    """A boolean; use the ``TRUE``/``FALSE`` singletons rather than constructing one."""

    __slots__ = ("value",)

    def __init__(self, value: bool):
        self.value = value

    def type(self) -> ObjectType:
        return ObjectType.BOOLEAN

    def inspect(self) -> str:
        return "true" if self.value else "false"


class Null(MonkeyObject):
    """The absence of a value."""

    __slots__ = ()

    def type(self) -> ObjectType:
        return ObjectType.NULL

    def inspect(self) -> str:
        return "null"


class ReturnValue(MonkeyObject):
    """Wraps the value of a ``return`` until the enclosing call unwraps it."""

    __slots__ = ("value",)

    def __init__(self, value: MonkeyObject):
        self.value = value

    def type(self) -> ObjectType:
        return ObjectType.RETURN_VALUE

    def inspect(self) -> str:
        return self.value.inspect()


class Error(MonkeyObject):
    """A runtime failure, propagated as a value."""

    __slots__ = ("message",)

    def __init__(self, message: str):
        self.message = message

    def type(self) -> ObjectType:
        return ObjectType.ERROR

    def inspect(self) -> str:
        return f"ERROR: {self.message}"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Error):
            return NotImplemented
        return self.message == other.message

    def __hash__(self) -> int:
        return hash(self.message)


class Function(MonkeyObject):
    """
    A closure: parameters and body plus the environment it was defined in.

    The environment is held by reference, so bindings added to it after the
    function is created are visible when the function runs.
    """

    __slots__ = ("parameters", "body", "env")

    def __init__(self, parameters: list[Identifier], body: BlockStatement, env: Environment):
        self.parameters = parameters
        self.body = body
        self.env = env

    def type(self) -> ObjectType:
        return ObjectType.FUNCTION

    def inspect(self) -> str:
        params = ", ".join(p.value for p in self.parameters)
        return f"fn({params}) {{\n{format_node(self.body)}\n}}"

    def __repr__(self) -> str:
        params = ", ".join(p.value for p in self.parameters)
        return f"Function({params})"


TRUE = Boolean(True)
FALSE = Boolean(False)
NULL = Null()


def native_bool_to_boolean(value: bool) -> Boolean:
    """
    Return the canonical ``Boolean`` singleton for a Python bool.
    """
    return TRUE if value else FALSE


def is_error(obj: MonkeyObject) -> bool:
    return isinstance(obj, Error)


def is_sentinel(obj: MonkeyObject) -> bool:
    """
    True for the values that must stop the enclosing construct: `Error` and `ReturnValue`.
    """
    return isinstance(obj, (Error, ReturnValue))


def is_truthy(obj: MonkeyObject) -> bool:
    """
    Only ``false`` and ``null`` are falsy; every other value, ``0`` included, is truthy.
    """
    return obj is not FALSE and obj is not NULL
