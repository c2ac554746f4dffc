"""Stack-based expression evaluator.

Pipeline per call:
1. validate_expression, validate_brackets (raw string checks)
2. Single left-to-right pass: literals go to the operand stack, operators and
   '(' go to the operator stack, ')' drains back to its '('
3. check_operator_adjacency on the raw string
4. Final drain of the operator stack, most recent operator first

There is no precedence table. Outside brackets operators are applied
right-to-left, so "2+3*4+5" is 2+(3*(4+5)) = 29.
"""

from __future__ import annotations

import math
import operator
from typing import Callable

from stackcalc.errors import BracketError, DivideByZeroError, ExpressionError
from stackcalc.validate import (
    OPERATORS,
    check_operator_adjacency,
    validate_brackets,
    validate_expression,
)

_OPERATIONS: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}


def _is_literal_char(char: str) -> bool:
    return char.isdecimal() or char == "."


def _parse_literal(buffer: str) -> float:
    """Parse an accumulated literal. Non-ASCII digits and literals too large
    for a float are rejected."""
    if not buffer.isascii():
        raise ExpressionError()
    try:
        value = float(buffer)
    except ValueError:
        raise ExpressionError() from None
    if math.isinf(value):
        raise ExpressionError()
    return value


def apply_operator(
    numbers: list[float],
    operators: list[str],
    strict_division: bool = False,
) -> bool:
    """Pop two operands and one operator, push the result back.

    ``numbers`` and ``operators`` are modified in place. Returns False, leaving
    both untouched, when there are fewer than two operands or no operator.

    Division by zero still consumes both operands and the operator but pushes
    nothing; the caller's final stack-size check then fails. With
    ``strict_division`` it raises DivideByZeroError instead.
    """
    if len(numbers) < 2 or not operators:
        return False

    num2 = numbers.pop()
    num1 = numbers.pop()
    op = operators.pop()

    if op == "/" and num2 == 0:
        if strict_division:
            raise DivideByZeroError()
        return True

    numbers.append(_OPERATIONS[op](num1, num2))
    return True


def _reduce(numbers: list[float], operators: list[str], strict_division: bool) -> None:
    # A reduction that cannot run would leave the drain loops spinning
    if not apply_operator(numbers, operators, strict_division):
        raise ExpressionError()


def calc(expression: str, strict_division: bool = False) -> float:
    """Evaluate an arithmetic expression.

    Args:
        expression: Digits, '.', '+ - * /' and parentheses. Other characters
            separate literals and are otherwise ignored.
        strict_division: Raise DivideByZeroError on division by zero instead
            of reporting a malformed expression.

    Returns:
        The value left on the operand stack.

    Raises:
        ExpressionError, BracketError, DivideByZeroError.
    """
    validate_expression(expression)
    validate_brackets(expression)

    numbers: list[float] = []
    operators: list[str] = []
    current = ""

    for char in expression:
        if _is_literal_char(char):
            current += char
            continue

        if current:
            numbers.append(_parse_literal(current))
            current = ""

        if char in OPERATORS or char == "(":
            operators.append(char)
        elif char == ")":
            while operators and operators[-1] != "(":
                _reduce(numbers, operators, strict_division)
            if not operators:
                raise BracketError()
            operators.pop()

    check_operator_adjacency(expression)

    if current:
        numbers.append(_parse_literal(current))

    while operators:
        _reduce(numbers, operators, strict_division)

    if len(numbers) != 1:
        raise ExpressionError()

    return numbers[0]
