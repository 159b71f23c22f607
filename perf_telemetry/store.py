"""Bounded, append-only log of metric observations.

The log is a ring buffer: once ``max_metrics`` entries are held, each
new entry evicts the oldest one.
"""

import math
import time
from collections import deque
from collections.abc import Callable, Iterator, Mapping
from typing import Any

from .config import DEFAULT_MAX_METRICS
from .errors import InvalidDurationError
from .models import Metric, MetricCategory
from .telemetry_logging import LogCategory, get_category_logger

logger = get_category_logger(LogCategory.STORE)


class MetricStore:
    """Capacity-bounded metric log.

    Not thread-safe: one store is owned by one logical caller.

    Example:
        store = MetricStore(max_metrics=3)
        for i in range(5):
            store.record("op", float(i), "render")
        [m.duration for m in store.all()]  # [2.0, 3.0, 4.0]
    """

    def __init__(
        self,
        max_metrics: int = DEFAULT_MAX_METRICS,
        validate_durations: bool = False,
        time_source: Callable[[], float] = time.time,
    ):
        """Initialize the store.

        Args:
            max_metrics: Number of most-recent metrics retained.
            validate_durations: Raise on negative or non-finite durations.
            time_source: Returns the capture timestamp in epoch seconds.
        """
        self.max_metrics = max_metrics
        self.validate_durations = validate_durations
        self._time_source = time_source
        self._metrics: deque[Metric] = deque(maxlen=max_metrics)

    def record(
        self,
        name: str,
        duration: float,
        category: MetricCategory | str,
        metadata: Mapping[str, Any] | None = None,
    ) -> Metric:
        """Append a metric stamped with the current time.

        Args:
            name: Operation name.
            duration: Duration in milliseconds.
            category: Operation category.
            metadata: Optional display-only context; copied.

        Returns:
            The recorded metric.

        Raises:
            InvalidDurationError: In strict mode, for negative or
                non-finite durations.
        """
        if self.validate_durations and not (math.isfinite(duration) and duration >= 0):
            raise InvalidDurationError.for_metric(name, duration)

        metric = Metric(
            name=name,
            duration=duration,
            timestamp=self._time_source(),
            category=MetricCategory(category),
            metadata=dict(metadata or {}),
        )
        self._metrics.append(metric)
        return metric

    def all(self) -> list[Metric]:
        """Return all retained metrics, oldest first."""
        return list(self._metrics)

    def for_name(self, name: str) -> list[Metric]:
        return [m for m in self._metrics if m.name == name]

    def for_category(self, category: MetricCategory | str) -> list[Metric]:
        category = MetricCategory(category)
        return [m for m in self._metrics if m.category is category]

    def names(self) -> list[str]:
        """Distinct metric names in first-seen order."""
        return list(dict.fromkeys(m.name for m in self._metrics))

    def clear(self) -> None:
        logger.debug(f"Clearing {len(self._metrics)} metrics")
        self._metrics.clear()

    def __iter__(self) -> Iterator[Metric]:
        return iter(self.all())

    def __len__(self) -> int:
        return len(self._metrics)


__all__ = ["MetricStore"]
