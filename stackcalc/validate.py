"""The three validation passes run around evaluation.

1. validate_expression — structural checks on the raw string
2. validate_brackets — parenthesis balance
3. check_operator_adjacency — literal operator pairs, run by the evaluator

They overlap and disagree on purpose. The structural pass classifies
"operator symbols" by Unicode general category, so it sees ``+`` (Sm) but not
``-`` (Pd), ``*`` or ``/`` (Po). ``"1++2"`` fails there; ``"1--2"`` only fails
the adjacency pass.
"""

from __future__ import annotations

import unicodedata

from stackcalc.errors import BracketError, ExpressionError

OPERATORS = ("+", "-", "*", "/")


def is_symbol(char: str) -> bool:
    """True if char is in one of the Unicode Symbol categories (Sm, Sc, Sk, So)."""
    return unicodedata.category(char).startswith("S")


def validate_expression(expression: str) -> None:
    """Reject empty input and symbol-class characters at the edges or in pairs.

    Raises:
        ExpressionError: on the first violation found.
    """
    if not expression:
        raise ExpressionError()

    if is_symbol(expression[0]) or is_symbol(expression[-1]):
        raise ExpressionError()

    for prev, char in zip(expression, expression[1:]):
        if is_symbol(prev) and is_symbol(char):
            raise ExpressionError()

    if expression[-1] in OPERATORS:
        raise ExpressionError()


def validate_brackets(expression: str) -> None:
    """Check that every ')' closes an earlier '(' and none is left open.

    Raises:
        BracketError: on a stray ')' or an unclosed '('.
    """
    stack: list[str] = []
    for char in expression:
        if char == "(":
            stack.append(char)
        elif char == ")":
            if not stack:
                raise BracketError()
            stack.pop()

    if stack:
        raise BracketError()


def check_operator_adjacency(expression: str) -> None:
    """Reject two of ``+ - * /`` that sit directly next to each other.

    Only immediate neighbours in the raw text count; ``"1- -2"`` passes.
    """
    for prev, char in zip(expression, expression[1:]):
        if prev in OPERATORS and char in OPERATORS:
            raise ExpressionError()
