"""Monkey: a small expression-oriented language.

The pipeline is source text -> tokens (:mod:`monkey.lexer`) -> AST
(:mod:`monkey.parser`) -> runtime value (:mod:`monkey.evaluator`), evaluated
against an :class:`~monkey.environment.Environment` that a session may
reuse across inputs.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

__version__ = "0.1.0"
