"""
Runtime configuration for the calculator.

Settings are read from ``CALCULATOR_*`` environment variables so the CLI and
the web server share one source of truth.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ConfigError

DEFAULT_HISTORY_LIMIT = 5
DEFAULT_PRECISION = 12
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(slots=True)
class CalculatorConfig:
    history_limit: int = DEFAULT_HISTORY_LIMIT
    precision: int = DEFAULT_PRECISION
    log_level: str = "WARNING"
    host: str = "0.0.0.0"
    port: int = 5000


def _int_setting(environ: Mapping[str, str], name: str, default: int, minimum: int) -> int:
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ConfigError(f"{name} must be >= {minimum}, got {value}")
    return value


def load_config(environ: Optional[Mapping[str, str]] = None) -> CalculatorConfig:
    """
    Build a config from environment variables.

    Args:
        environ: Mapping to read from (defaults to ``os.environ``)

    Returns:
        CalculatorConfig with defaults filled in for unset variables

    Raises:
        ConfigError: If a numeric setting is malformed or out of range
    """
    env = os.environ if environ is None else environ
    return CalculatorConfig(
        history_limit=_int_setting(env, "CALCULATOR_HISTORY_LIMIT", DEFAULT_HISTORY_LIMIT, 1),
        precision=_int_setting(env, "CALCULATOR_PRECISION", DEFAULT_PRECISION, 1),
        log_level=env.get("CALCULATOR_LOG_LEVEL", "WARNING").upper(),
        host=env.get("CALCULATOR_HOST", "0.0.0.0"),
        port=_int_setting(env, "CALCULATOR_PORT", 5000, 1),
    )


def configure_logging(level: str = "WARNING") -> None:
    """Configure root logging for the CLI and server entry points."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ConfigError(f"Unknown log level: {level}")
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
    logging.getLogger().setLevel(numeric)
