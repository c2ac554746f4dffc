"""Error taxonomy for the expression engine.

Every failure the engine can report is one of a closed set of kinds, each
with a fixed, human-readable message. The HTTP and CLI layers surface that
message verbatim and nothing else.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Kinds of engine failure."""

    EXPRESSION = "expression"
    BRACKETS = "brackets"
    DIVIDE_BY_ZERO = "divide-by-zero"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.EXPRESSION: "There is an error in the expression",
    ErrorKind.BRACKETS: "There is an error in the brackets",
    ErrorKind.DIVIDE_BY_ZERO: "Division by zero",
}


class CalcError(Exception):
    """Base class for engine failures. ``str(exc)`` is the kind's message."""

    kind: ErrorKind = ErrorKind.EXPRESSION

    def __init__(self) -> None:
        super().__init__(self.kind.message)

    @property
    def message(self) -> str:
        return self.kind.message


class ExpressionError(CalcError):
    """Malformed expression: placement, adjacency, literal or final stack size."""

    kind = ErrorKind.EXPRESSION


class BracketError(CalcError):
    """Unbalanced or mismatched parentheses."""

    kind = ErrorKind.BRACKETS


class DivideByZeroError(CalcError):
    """Division by zero. Only raised when strict division is enabled."""

    kind = ErrorKind.DIVIDE_BY_ZERO
