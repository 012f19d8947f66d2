"""Errors.

Host-level error types. Monkey runtime errors are ordinary values (see
``monkey.objects.Error``) and never raise; the classes here cover parse
diagnostics, which the drivers surface before evaluation.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParseDiagnostic:
    """
    A positioned parse error.
    """
    message: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"line {self.line}, column {self.column}: {self.message}"


class MonkeySyntaxError(SyntaxError):
    """
    Error for source text that produced parse diagnostics.
    """
    def __init__(self, diagnostics, file=None):
        self.diagnostics = list(diagnostics)
        self.file = file
        message = "; ".join(str(d) for d in self.diagnostics) or "invalid syntax"
        if file is not None:
            message += f" in {file}"
        super().__init__(message)
