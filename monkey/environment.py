"""Lexical environments.

An environment maps names to runtime values and optionally points at an
enclosing environment. Lookups walk outward through the chain; bindings
are always made in the receiving environment itself. One environment is
created per top-level session and one per function call, the latter
chained to the function's defining environment, which gives lexical
rather than dynamic scoping.


File: environment.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from typing import Optional

from monkey.objects import MonkeyObject


class Environment:
    """A scope in the environment chain."""

    def __init__(self, outer: Optional[Environment] = None):
        self.store: dict[str, MonkeyObject] = {}
        self.outer = outer

    @classmethod
    def new_enclosed(cls, outer: Environment) -> Environment:
        """
        Create a child scope of ``outer``.
        """
        return cls(outer)

    def get(self, name: str) -> tuple[Optional[MonkeyObject], bool]:
        """
        Resolve ``name`` through the chain.

        Returns:
            tuple: ``(value, True)`` if found, ``(None, False)`` otherwise.
        """
        env = self
        while env is not None:
            if name in env.store:
                return env.store[name], True
            env = env.outer
        return None, False

    def set(self, name: str, value: MonkeyObject) -> MonkeyObject:
        """
        Bind ``name`` in this scope, shadowing any outer binding.
        """
        self.store[name] = value
        return value

    def __contains__(self, name: str) -> bool:
        return self.get(name)[1]

    def __repr__(self) -> str:
        names = ", ".join(sorted(self.store))
        return f"Environment({names})" if self.outer is None else f"Environment({names}) -> {self.outer!r}"
