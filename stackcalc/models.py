"""Wire models for the calculate endpoint.

CalcRequest, CalcResponse, ErrorResponse — the JSON shapes that flow between
the HTTP layer and the engine.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

INTERNAL_ERROR_MESSAGE = "Internal server error"


class RequestError(ValueError):
    """Request body could not be decoded into a CalcRequest."""


def format_result(value: float) -> str:
    """Fixed-point with six fractional digits, e.g. 4.0 -> '4.000000'.

    Non-finite results print as '+Inf', '-Inf' and 'NaN'.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return f"{value:.6f}"


@dataclass
class CalcRequest:
    """Inbound payload: ``{"expression": "..."}``."""

    expression: str = ""

    @classmethod
    def from_json(cls, data: Any) -> CalcRequest:
        """Build from a decoded JSON body.

        A null body, or a missing or null ``expression``, is an empty
        expression. Any other non-object body, or a non-string
        ``expression``, is a RequestError.
        """
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise RequestError("request body must be a JSON object")
        expression = data.get("expression")
        if expression is None:
            return cls()
        if not isinstance(expression, str):
            raise RequestError("'expression' must be a string")
        return cls(expression=expression)


@dataclass
class CalcResponse:
    """Outbound success payload."""

    result: str

    @classmethod
    def from_value(cls, value: float) -> CalcResponse:
        return cls(result=format_result(value))

    def to_dict(self) -> dict:
        return {"result": self.result}


@dataclass
class ErrorResponse:
    """Outbound failure payload."""

    error: str

    def to_dict(self) -> dict:
        return {"error": self.error}
