"""stackcalc — stack-based arithmetic expression calculator.

Evaluates expressions made of numbers, '+ - * /' and parentheses with a
two-stack reduction, and serves the engine over HTTP.

Usage:
    python -m stackcalc eval "(2+3)*4"   # 20.000000
    python -m stackcalc check "1++2"     # Show which validation pass rejects it
    python -m stackcalc serve            # POST /api/v1/calculate on :8080
"""

from stackcalc.engine import apply_operator, calc
from stackcalc.errors import BracketError, CalcError, DivideByZeroError, ErrorKind, ExpressionError

__all__ = [
    "BracketError",
    "CalcError",
    "DivideByZeroError",
    "ErrorKind",
    "ExpressionError",
    "apply_operator",
    "calc",
]
