"""Measurement helpers that time a unit of work and record it.

This module provides:
- ``measure`` / ``measure_async`` for wrapping a callable or awaitable
- ``PerformanceTimer`` context manager for timing a code block
- ``@timed`` decorator for both ``def`` and ``async def`` functions

Every helper records exactly one metric, whether the work succeeds or
fails. Failed work is tagged with ``error: True`` in the metadata and
its exception is re-raised unchanged.
"""

import functools
import inspect
import time
from collections.abc import Awaitable, Callable, Mapping
from typing import Any, ParamSpec, Protocol, TypeVar

from .models import MetricCategory
from .telemetry_logging import LogCategory, get_category_logger

P = ParamSpec("P")
T = TypeVar("T")

Clock = Callable[[], float]

logger = get_category_logger(LogCategory.TIMING)


class MetricRecorder(Protocol):
    """Anything that accepts a finished measurement."""

    def record(
        self,
        name: str,
        duration: float,
        category: MetricCategory | str,
        metadata: Mapping[str, Any] | None = None,
    ) -> Any: ...


def _finish(
    recorder: MetricRecorder,
    name: str,
    category: MetricCategory | str,
    duration_ms: float,
    metadata: Mapping[str, Any] | None,
    error: BaseException | None,
) -> None:
    extra = {
        "duration_ms": duration_ms,
        "operation": name,
        "category": getattr(category, "value", category),
    }
    if error is None:
        recorder.record(name, duration_ms, category, metadata)
        logger.debug(f"[PERF] {name} completed in {duration_ms:.2f}ms", extra=extra)
    else:
        recorder.record(name, duration_ms, category, {**(metadata or {}), "error": True})
        logger.error(
            f"[PERF] {name} failed after {duration_ms:.2f}ms: {error!r}", extra=extra
        )


def measure(
    recorder: MetricRecorder,
    name: str,
    category: MetricCategory | str,
    work: Callable[[], T],
    metadata: Mapping[str, Any] | None = None,
    clock: Clock = time.perf_counter,
) -> T:
    """Call ``work()`` and record how long it took.

    Args:
        recorder: Destination for the metric.
        name: Operation name.
        category: Operation category.
        work: Zero-argument callable.
        metadata: Optional display-only context.
        clock: Monotonic clock returning seconds.

    Returns:
        Whatever ``work()`` returned.
    """
    start = clock()
    try:
        result = work()
    except BaseException as e:
        _finish(recorder, name, category, (clock() - start) * 1000, metadata, e)
        raise
    _finish(recorder, name, category, (clock() - start) * 1000, metadata, None)
    return result


async def measure_async(
    recorder: MetricRecorder,
    name: str,
    category: MetricCategory | str,
    work: Callable[[], Awaitable[T]] | Awaitable[T],
    metadata: Mapping[str, Any] | None = None,
    clock: Clock = time.perf_counter,
) -> T:
    """Await ``work`` and record how long it took.

    ``work`` may be an awaitable or a zero-argument callable returning
    one. The only suspension point is the awaited work itself.
    """
    start = clock()
    try:
        awaitable = work if inspect.isawaitable(work) else work()
        result = await awaitable
    except BaseException as e:
        _finish(recorder, name, category, (clock() - start) * 1000, metadata, e)
        raise
    _finish(recorder, name, category, (clock() - start) * 1000, metadata, None)
    return result


class PerformanceTimer:
    """Context manager for timing code blocks.

    The duration is recorded on exit and is also available as an
    attribute. Exceptions raised inside the block are not suppressed.

    Attributes:
        name: Operation name.
        category: Operation category.
        metadata: Extra context stored with the metric.
        duration_ms: Execution time in milliseconds, set on exit.

    Example:
        >>> with PerformanceTimer(monitor, "sidebar-render-update", "render") as timer:
        ...     render_sidebar()
        >>> print(f"Rendered in {timer.duration_ms:.2f}ms")
    """

    def __init__(
        self,
        recorder: MetricRecorder,
        name: str,
        category: MetricCategory | str,
        metadata: Mapping[str, Any] | None = None,
        clock: Clock = time.perf_counter,
    ):
        self.recorder = recorder
        self.name = name
        self.category = category
        self.metadata = metadata
        self._clock = clock
        self.start_time: float = 0
        self.duration_ms: float = 0

    def __enter__(self) -> "PerformanceTimer":
        """Start timing."""
        self.start_time = self._clock()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        """Stop timing and record."""
        self.duration_ms = (self._clock() - self.start_time) * 1000
        _finish(
            self.recorder, self.name, self.category, self.duration_ms, self.metadata, exc_val
        )


def timed(
    recorder: MetricRecorder,
    category: MetricCategory | str,
    name: str | None = None,
    metadata: Mapping[str, Any] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Decorator that records every call of the wrapped function.

    Coroutine functions are awaited inside the timing boundary.

    Args:
        recorder: Destination for the metrics.
        category: Operation category.
        name: Operation name (defaults to the function name).
        metadata: Extra context stored with each metric.

    Example:
        >>> @timed(monitor, "generation", name="form-generation")
        ... def build_form(abi):
        ...     ...
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        op_name = name or func.__name__

        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: P.args, **kwargs: P.kwargs) -> Any:
                return await measure_async(
                    recorder, op_name, category, lambda: func(*args, **kwargs), metadata
                )

            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            return measure(
                recorder, op_name, category, lambda: func(*args, **kwargs), metadata
            )

        return wrapper

    return decorator


__all__ = [
    "MetricRecorder",
    "measure",
    "measure_async",
    "PerformanceTimer",
    "timed",
]
