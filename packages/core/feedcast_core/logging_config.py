"""
Logging configuration.

Every module grabs its logger through ``get_logger(__name__)``; applications
call ``init_logging`` once at startup.
"""

import json
import logging
import sys
from datetime import UTC, datetime

_ROOT_LOGGER = "feedcast"

# LogRecord attributes that are not user supplied ``extra`` values
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
) | {"message", "asctime"}


class StructuredFormatter(logging.Formatter):
    """Format log records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # Anything passed through ``extra=`` ends up as a record attribute
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                log_entry[key] = value

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False, default=str)


def init_logging(log_level: str = "INFO", json_format: bool = False) -> None:
    """
    Configure the ``feedcast`` logger hierarchy.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR).
        json_format: Emit structured JSON lines instead of plain text.
    """
    logger = logging.getLogger(_ROOT_LOGGER)
    logger.setLevel(getattr(logging, log_level.upper()))

    # Remove existing handlers (avoid duplicates on re-init)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    if json_format:
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
    logger.addHandler(handler)
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger inside the ``feedcast`` hierarchy.

    Args:
        name: Usually the caller's ``__name__``.

    Returns:
        Logger instance.
    """
    if name.startswith("feedcast_"):
        name = f"{_ROOT_LOGGER}.{name.removeprefix('feedcast_')}"
    elif name != _ROOT_LOGGER and not name.startswith(f"{_ROOT_LOGGER}."):
        name = f"{_ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
