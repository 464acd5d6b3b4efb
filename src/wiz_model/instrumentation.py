"""
Timing instrumentation for classification operations.

``timed`` logs how long a call took: WARNING above ``WIZ_PERF_THRESHOLD_MS``,
DEBUG otherwise. ``WIZ_PERF_TRACKING`` turns it off.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from typing import ParamSpec, TypeVar

from wiz_model import const
from wiz_model.logging_abstraction import WizLogger, get_logger

__all__ = [
    "measure_time",
    "timed",
]

P = ParamSpec("P")
T = TypeVar("T")

logger = get_logger(__name__)


def measure_time(start_time: float) -> float:
    """
    Calculate elapsed time in milliseconds.

    Args:
        start_time: Start time from time.perf_counter()

    Returns:
        Elapsed time in milliseconds
    """
    return (time.perf_counter() - start_time) * 1000


def timed(operation_name: str | None = None) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """
    Decorator that times a synchronous call, including calls that raise.

    Settings are read per call, so toggling them at runtime takes effect.

    Args:
        operation_name: Name for the operation (defaults to function name)
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        op_name = operation_name or func.__name__

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            if not const.WIZ_PERF_TRACKING:
                return func(*args, **kwargs)

            start_time = time.perf_counter()
            try:
                return func(*args, **kwargs)
            finally:
                _log_timing(logger, op_name, measure_time(start_time), const.WIZ_PERF_THRESHOLD_MS)

        return wrapper

    return decorator


def _log_timing(log: WizLogger, operation_name: str, elapsed_ms: float, threshold_ms: int) -> None:
    exceeded = elapsed_ms > threshold_ms
    context = {
        "operation": operation_name,
        "duration_ms": round(elapsed_ms, 2),
        "threshold_ms": threshold_ms,
        "exceeded_threshold": exceeded,
    }
    if exceeded:
        log.warning(
            "[%s] completed in %.1fms (threshold: %dms)",
            operation_name,
            elapsed_ms,
            threshold_ms,
            extra=context,
        )
    else:
        log.debug("[%s] completed in %.1fms", operation_name, elapsed_ms, extra=context)
