"""Flask HTTP service around the expression engine.

POST /api/v1/calculate
    {"expression": "2+2"}  ->  200 {"result": "4.000000"}
    engine failure          ->  422 {"error": "<message>"}
    malformed body          ->  500 {"error": "Internal server error"}
Any other method gets Flask's 405 before the engine is touched.
"""

from __future__ import annotations

import logging
from typing import Optional

from flask import Flask, jsonify, request
from rich.logging import RichHandler
from werkzeug.exceptions import BadRequest

from stackcalc.config import Settings
from stackcalc.engine import calc
from stackcalc.errors import CalcError
from stackcalc.models import (
    INTERNAL_ERROR_MESSAGE,
    CalcRequest,
    CalcResponse,
    ErrorResponse,
    RequestError,
)

CALCULATE_PATH = "/api/v1/calculate"

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Route stdlib logging through Rich on stderr."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=False, show_path=False)],
        force=True,
    )


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask application.

    Args:
        settings: Resolved settings. Only ``strict_division`` is read here;
            host and port belong to whoever runs the app.
    """
    settings = settings or Settings()
    app = Flask(__name__)
    app.config["STACKCALC_SETTINGS"] = settings

    @app.route(CALCULATE_PATH, methods=["POST"])
    def calculate():
        try:
            payload = CalcRequest.from_json(request.get_json(force=True))
        except (BadRequest, RequestError) as e:
            logger.warning("Rejected malformed request body: %s", e)
            return jsonify(ErrorResponse(INTERNAL_ERROR_MESSAGE).to_dict()), 500

        try:
            value = calc(payload.expression, strict_division=settings.strict_division)
        except CalcError as e:
            logger.info("Could not evaluate %r: %s", payload.expression, e.message)
            return jsonify(ErrorResponse(e.message).to_dict()), 422

        return jsonify(CalcResponse.from_value(value).to_dict()), 200

    return app


def serve(settings: Settings) -> None:
    """Configure logging and run the development server until interrupted."""
    configure_logging(settings.log_level)
    app = create_app(settings)
    logger.info(
        "Listening on %s:%d (strict division: %s)",
        settings.host, settings.port, "on" if settings.strict_division else "off",
    )
    app.run(host=settings.host, port=settings.port)
