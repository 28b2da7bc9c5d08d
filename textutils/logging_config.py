# textutils/logging_config.py

"""Logging setup: one JSON object per record, or plain text for local use."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TextIO

# Attributes every LogRecord carries; anything else came in through extra=.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime", "taskName"}

_NOISY_LOGGERS = ("streamlit", "urllib3", "watchdog")

TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
    """Returns the fields attached to a record through ``extra=``."""
    return {k: v for k, v in vars(record).items() if k not in _RESERVED_ATTRS}


class StructuredFormatter(logging.Formatter):
    """Formats records as JSON lines, extra fields included."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        for key, value in extra_fields(record).items():
            payload.setdefault(key, value)

        return json.dumps(payload, default=str)


def configure_logging(
    level: str = "INFO",
    json_format: bool = True,
    stream: Optional[TextIO] = None,
) -> logging.Handler:
    """Replaces the root handlers with a single stream handler.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: Emit JSON lines; plain text otherwise
        stream: Target stream, stdout by default

    Returns:
        The installed handler
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(
        StructuredFormatter() if json_format else logging.Formatter(TEXT_FORMAT)
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(log_level)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).debug(
        "Logging configured", extra={"log_level": level, "json_format": json_format}
    )
    return handler
