"""
Timing helpers for request handlers and the subscriber notification loop.
"""

import time
import functools
from typing import Optional
from contextlib import contextmanager

import structlog

logger = structlog.get_logger(__name__)


class PerformanceTimer:
    """Simple timer for measuring a named stage."""

    def __init__(self, stage_name: str):
        self.stage_name = stage_name
        self.start_time: Optional[float] = None
        self.end_time: Optional[float] = None

    def start(self) -> None:
        self.start_time = time.perf_counter()

    def stop(self) -> float:
        """Stop timing and return duration in seconds."""
        if self.start_time is None:
            raise ValueError("Timer not started")

        self.end_time = time.perf_counter()
        duration = self.end_time - self.start_time
        logger.debug("Stage completed", stage=self.stage_name, duration_seconds=round(duration, 3))
        return duration


@contextmanager
def time_stage(stage_name: str):
    """Context manager for timing a code block."""
    timer = PerformanceTimer(stage_name)
    timer.start()
    try:
        yield timer
    finally:
        timer.stop()


def time_function(stage_name: Optional[str] = None):
    """Decorator for timing function execution."""
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            name = stage_name or f"{func.__module__}.{func.__name__}"
            with time_stage(name):
                return func(*args, **kwargs)
        return wrapper
    return decorator
