"""Process-wide logging setup for the CLI."""

from __future__ import annotations

import logging

from model_presets.core.errors import ConfigError

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def normalize_log_level(raw: object) -> str:
    level = str(raw or "INFO").strip().upper()
    if level == "WARN":
        level = "WARNING"
    if level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level {raw!r}; expected one of {', '.join(LOG_LEVELS)}")
    return level


def configure_logging(level: str = "INFO") -> None:
    try:
        resolved = getattr(logging, normalize_log_level(level))
    except ValueError as exc:
        raise ConfigError(str(exc)) from exc
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger().setLevel(resolved)
    # httpx logs every request URL at INFO.
    logging.getLogger("httpx").setLevel(max(resolved, logging.WARNING))
