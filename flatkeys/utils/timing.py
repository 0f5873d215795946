"""Timing helpers."""

import logging
import time
from contextlib import contextmanager
from typing import Optional


class Timer:
    """Elapsed time of a ``timed_operation`` block.

    Fields added to ``extra`` inside the block are logged with the duration.
    """

    def __init__(self):
        self.start_time = time.perf_counter()
        self.end_time: Optional[float] = None
        self.duration_ms: float = 0.0
        self.extra: dict = {}


@contextmanager
def timed_operation(name: str, logger: Optional[logging.Logger] = None):
    """Context manager to time an operation.

    Usage:
        with timed_operation("flatten_records", logger) as timer:
            flat = flatten_records(records)
            timer.extra["record_count"] = len(flat)
        print(f"Took {timer.duration_ms}ms")

    Args:
        name: Operation name for logging
        logger: Optional logger; completion is logged at DEBUG

    Yields:
        Timer with a ``duration_ms`` attribute, set when the block exits
    """
    timer = Timer()

    try:
        yield timer
    finally:
        timer.end_time = time.perf_counter()
        timer.duration_ms = (timer.end_time - timer.start_time) * 1000

        if logger:
            logger.debug(
                f"Operation '{name}' completed",
                extra={
                    **timer.extra,
                    "operation": name,
                    "duration_ms": timer.duration_ms,
                }
            )
