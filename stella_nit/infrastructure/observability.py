"""Structured Logging — configures the stella_nit logger from Settings.

Invariants:
    - Only the "stella_nit" logger is touched; the host's root logger is left alone
    - Repeated calls replace the handler installed earlier (no duplicated lines)
    - JSON records carry timestamp, level, logger, message plus the validator's
      extra fields (formatted, error_code, error_count) when present
    - STELLA_NIT_LOG_LEVEL / STELLA_NIT_LOG_FORMAT reach the logger only through
      configure_logging; importing the package configures nothing

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - Timestamp from record.created, not formatting time: batched handlers keep
      the moment the NIT was validated
"""

import json
import logging
from datetime import datetime, timezone

from stella_nit.config import Settings, get_settings

PACKAGE_LOGGER = "stella_nit"

_EXTRA_FIELDS = ("formatted", "error_code", "error_count")
_HANDLER_MARKER = "_stella_nit_handler"


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def _build_formatter(fmt: str) -> logging.Formatter:
    if fmt.lower() == "json":
        return JSONFormatter()
    return logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s [%(error_code)s] %(message)s",
        defaults={"error_code": "-"},
    )


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install a stream handler on the stella_nit logger. Returns the handler."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(logger.handlers):
        if getattr(existing, _HANDLER_MARKER, False):
            logger.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.setFormatter(_build_formatter(fmt))
    setattr(handler, _HANDLER_MARKER, True)
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler


def configure_logging(settings: Settings | None = None) -> logging.Handler:
    """Apply STELLA_NIT_LOG_LEVEL / STELLA_NIT_LOG_FORMAT to the stella_nit logger."""
    settings = settings or get_settings()
    return setup_logging(settings.log_level, settings.log_format)
