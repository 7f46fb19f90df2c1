"""
Logging setup for the blogdb scripts.
"""

from __future__ import annotations

import logging
from logging.config import dictConfig
from typing import Any

from .config import Settings, get_settings

_LOGGER_CONFIGURED = False


def _resolve_log_level(level_name: str) -> int:
    """Return a logging level constant from a case-insensitive string."""

    numeric_level = logging.getLevelName(level_name.upper())
    if isinstance(numeric_level, int):
        return numeric_level
    raise ValueError(f"Unsupported log level: {level_name}")


def _build_logging_config(settings: Settings, *, log_to_file: bool) -> dict[str, Any]:
    """Construct a dictConfig payload for the console and optional rotating file."""

    log_settings = settings.logging
    level = logging.DEBUG if settings.app.debug else _resolve_log_level(log_settings.level)

    handlers: dict[str, dict[str, Any]] = {
        # Logs go to stderr so printed records on stdout stay clean.
        "console": {
            "class": "logging.StreamHandler",
            "level": level,
            "formatter": "standard",
            "stream": "ext://sys.stderr",
        },
    }
    if log_to_file:
        log_dir = log_settings.directory
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": level,
            "formatter": "standard",
            "filename": str(log_dir / log_settings.file_name),
            "encoding": "utf-8",
            "maxBytes": log_settings.max_bytes,
            "backupCount": log_settings.backup_count,
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"standard": {"format": log_settings.format}},
        "handlers": handlers,
        "loggers": {
            # SQL statements are only wanted when database echo is on.
            "sqlalchemy.engine": {
                "level": logging.INFO if settings.database.echo else logging.WARNING,
            },
        },
        "root": {
            "level": level,
            "handlers": list(handlers),
        },
    }


def setup_logging(settings: Settings | None = None, *, log_to_file: bool = True) -> logging.Logger:
    """
    Configure the global logging stack and return the application logger.

    Only the first call applies the configuration.
    """

    global _LOGGER_CONFIGURED

    runtime_settings = settings or get_settings()

    if not _LOGGER_CONFIGURED:
        dictConfig(_build_logging_config(runtime_settings, log_to_file=log_to_file))
        _LOGGER_CONFIGURED = True

    return logging.getLogger(runtime_settings.app.name)


__all__ = ["setup_logging"]
