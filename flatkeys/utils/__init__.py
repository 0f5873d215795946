"""Utility modules.

Includes:
- Logging configuration
- Operation timing
"""

from .logging_config import JsonFormatter, get_logger, setup_logging
from .timing import Timer, timed_operation

__all__ = [
    "setup_logging",
    "get_logger",
    "JsonFormatter",
    "Timer",
    "timed_operation",
]
