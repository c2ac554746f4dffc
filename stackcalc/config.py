"""Runtime settings for stackcalc, read from the environment.

Every setting has a default; CLI options override whatever is loaded here.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_LOG_LEVEL = "INFO"

_TRUTHY = ("1", "true", "yes", "on")
_FALSY = ("", "0", "false", "no", "off")


class ConfigError(ValueError):
    """A setting was present but could not be used."""


@dataclass(frozen=True)
class Settings:
    """Resolved settings for the HTTP service and the engine."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    strict_division: bool = False
    log_level: str = DEFAULT_LOG_LEVEL


def _parse_port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError:
        raise ConfigError(f"STACKCALC_PORT is not an integer: {raw!r}") from None
    if not 1 <= port <= 65535:
        raise ConfigError(f"STACKCALC_PORT out of range: {port}")
    return port


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ConfigError(f"{name} is not a boolean: {raw!r}")


def _parse_log_level(raw: str) -> str:
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"STACKCALC_LOG_LEVEL is not a logging level: {raw!r}")
    return level


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from STACKCALC_* variables.

    Args:
        environ: Mapping to read from. Defaults to os.environ.

    Raises:
        ConfigError: if a variable is set to an unusable value.
    """
    env = os.environ if environ is None else environ
    return Settings(
        host=env.get("STACKCALC_HOST", DEFAULT_HOST) or DEFAULT_HOST,
        port=_parse_port(env.get("STACKCALC_PORT", str(DEFAULT_PORT))),
        strict_division=_parse_bool(
            "STACKCALC_STRICT_DIVISION", env.get("STACKCALC_STRICT_DIVISION", "")
        ),
        log_level=_parse_log_level(env.get("STACKCALC_LOG_LEVEL", DEFAULT_LOG_LEVEL)),
    )
