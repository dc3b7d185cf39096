"""Logging setup for applications that embed jwtcodec.

The library only emits records through module loggers under ``jwtcodec``
and never configures handlers itself. Call :func:`configure_logging` once at
process start-up to get formatted output on stderr.
"""

import logging
import os

_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}
_CONFIGURED = False


def _resolve_log_level(level: int | str | None = None) -> int:
    if isinstance(level, int):
        return level
    raw = (level if level is not None else os.getenv("LOG_LEVEL", "INFO")).strip().upper()
    if raw in _LEVELS:
        return getattr(logging, raw)
    return logging.INFO


def configure_logging(level: int | str | None = None) -> None:
    """Configure root handlers and the ``jwtcodec`` logger level.

    ``level`` wins over the ``LOG_LEVEL`` environment variable. Later calls
    are ignored.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    resolved = _resolve_log_level(level)
    logging.basicConfig(
        level=resolved,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("jwtcodec").setLevel(resolved)
    _CONFIGURED = True
