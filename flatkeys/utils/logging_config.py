"""Logging configuration for flatkeys.

Every module logs through ``logging.getLogger(__name__)``, so all records
land under the ``flatkeys`` logger configured here.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional, Union

ROOT_LOGGER_NAME = "flatkeys"

# Attributes every LogRecord carries; anything else came in through ``extra``
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Render each record as one JSON object, including ``extra`` fields."""

    def format(self, record: logging.LogRecord) -> str:
        data = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key, value in vars(record).items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                data[key] = value

        if record.exc_info:
            data["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(data, default=str)


def setup_logging(
    level: Union[str, int] = "INFO",
    json_format: bool = False,
    stream=None,
) -> logging.Logger:
    """Configure the ``flatkeys`` logger.

    Calling this again replaces the handler installed by the previous call.

    Args:
        level: Log level name or number
        json_format: Emit one JSON object per line instead of plain text
        stream: Output stream (defaults to stderr)

    Returns:
        The configured ``flatkeys`` logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)

    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if getattr(handler, "_flatkeys_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler._flatkeys_handler = True
    if json_format:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
    logger.addHandler(handler)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger under the ``flatkeys`` namespace."""
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
