"""
holidayrules Configuration

Settings come from environment variables:

    HR_DEFAULT_LOCALE   locale used when none is given (default: en-NZ)
    HR_LOG_LEVEL        level for the "holidayrules" logger (default: WARNING)
    HR_LOG_FORMAT       "text" or "json" (default: text)
    HR_PACK_DIR         directory of extra YAML rule-set packs (optional)

The library never installs log handlers on import; call
configure_logging() from an application entry point to opt in.
"""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Mapping, Optional

from .exceptions import ConfigurationError

LOGGER_NAME = "holidayrules"

DEFAULT_LOCALE = "en-NZ"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMATS = ("text", "json")


def default_locale_from_env(environ: Optional[Mapping[str, str]] = None) -> str:
    """HR_DEFAULT_LOCALE alone, without validating the other settings."""
    env = os.environ if environ is None else environ
    return env.get("HR_DEFAULT_LOCALE") or DEFAULT_LOCALE


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the holiday engine and its registry."""
    default_locale: str = DEFAULT_LOCALE
    log_level: str = DEFAULT_LOG_LEVEL
    log_format: str = "text"
    pack_dir: Optional[Path] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Settings:
        env = os.environ if environ is None else environ

        log_level = env.get("HR_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigurationError(
                message=f"Unknown log level: {log_level}",
                details={"HR_LOG_LEVEL": log_level},
            )

        log_format = env.get("HR_LOG_FORMAT", "text").lower()
        if log_format not in LOG_FORMATS:
            raise ConfigurationError(
                message=f"HR_LOG_FORMAT must be one of {', '.join(LOG_FORMATS)}, got {log_format}",
                details={"HR_LOG_FORMAT": log_format},
            )

        pack_dir = env.get("HR_PACK_DIR") or None
        return cls(
            default_locale=default_locale_from_env(env),
            log_level=log_level,
            log_format=log_format,
            pack_dir=Path(pack_dir) if pack_dir else None,
        )


# =============================================================================
# Logging Setup
# =============================================================================

class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        # Add extra fields if present
        if hasattr(record, "locale"):
            log_entry["locale"] = record.locale
        if hasattr(record, "year"):
            log_entry["year"] = record.year
        if hasattr(record, "holiday"):
            log_entry["holiday"] = record.holiday
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry)


TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Calling it again replaces the handler rather than stacking another one.
    """
    settings = settings or Settings.from_env()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, settings.log_level))

    for handler in list(logger.handlers):
        if getattr(handler, "_holidayrules_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    if settings.log_format == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    handler._holidayrules_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger


__all__ = [
    "LOGGER_NAME",
    "DEFAULT_LOCALE",
    "default_locale_from_env",
    "Settings",
    "JSONFormatter",
    "configure_logging",
]
