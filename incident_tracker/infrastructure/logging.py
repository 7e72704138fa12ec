"""
Centralized Logging

Architectural Intent:
- All tracker output goes through the `incident_tracker` logger
- The logger level is the single process-wide debug switch: enabling it from
  one tracker enables it for every tracker in the process
- Debug lines carry a timestamp plus the calling function and line number
"""

import json
import logging
import sys
from datetime import datetime, UTC
from pprint import pformat
from typing import Any

LOGGER_NAME = "incident_tracker"

DEBUG_FORMAT = "[%(asctime)s] %(funcName)s(%(lineno)d) > %(message)s"
DEBUG_DATEFMT = "%Y/%m/%d %H:%M:%S"

# Debug output stays off until configure_logging/enable_debug lowers this,
# whatever level the root logger has
logging.getLogger(LOGGER_NAME).setLevel(logging.WARNING)


class JSONFormatter(logging.Formatter):
    """Structured JSON log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "function": record.funcName,
            "line": record.lineno,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry)


def configure_logging(
    level: int = logging.WARNING,
    json_format: bool = False,
) -> None:
    """Configure the incident_tracker logger.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, etc.)
        json_format: If True, use JSON structured output. Otherwise the
            "[timestamp] function(line) > message" debug format.
    """
    root = logging.getLogger(LOGGER_NAME)
    root.setLevel(level)

    # Remove existing handlers
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(DEBUG_FORMAT, DEBUG_DATEFMT))

    root.addHandler(handler)


def enable_debug(json_format: bool = False) -> None:
    """Switch the shared logger to DEBUG, keeping an existing JSON format."""
    root = logging.getLogger(LOGGER_NAME)
    if any(isinstance(h.formatter, JSONFormatter) for h in root.handlers):
        json_format = True
    configure_logging(level=logging.DEBUG, json_format=json_format)


def debug_enabled() -> bool:
    return logging.getLogger(LOGGER_NAME).isEnabledFor(logging.DEBUG)


def format_value(value: Any) -> str:
    """Render one debug value.

    Structured values are pretty-printed; scalars are printed as text with
    trailing newlines trimmed.
    """
    if value is None:
        return ""
    if isinstance(value, (dict, list, tuple, set)):
        return pformat(value)
    return str(value).rstrip("\n")


def debug(logger: logging.Logger, *values: Any) -> None:
    """Log each value at debug level, attributed to the caller."""
    if not values or not logger.isEnabledFor(logging.DEBUG):
        return
    message = "\n".join(format_value(v) for v in values)
    logger.debug("%s", message, stacklevel=2)
