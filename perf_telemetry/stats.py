"""Statistical summaries over metric durations.

Percentiles use the nearest-rank method: for ``n`` sorted values the
p-th percentile is the element at ``max(0, ceil(p / 100 * n) - 1)``.
No interpolation is performed, so every percentile is an observed
value and ``p50 <= p95 <= p99`` holds for sorted input.
"""

import math
from collections.abc import Iterable, Sequence

from .models import CategoryStats, Metric, MetricStats


def percentile(sorted_values: Sequence[float], p: float) -> float:
    """Return the nearest-rank percentile of pre-sorted data.

    Args:
        sorted_values: Values sorted ascending. Must not be empty.
        p: Percentile to calculate (0-100).

    Returns:
        The selected element.
    """
    index = math.ceil((p / 100) * len(sorted_values)) - 1
    return sorted_values[max(0, index)]


def calculate_stats(durations: Iterable[float]) -> MetricStats | None:
    """Calculate count, average, min, max, and p50/p95/p99.

    Args:
        durations: Durations in milliseconds, in any order.

    Returns:
        MetricStats, or None when there are no durations.
    """
    values = sorted(durations)
    if not values:
        return None

    n = len(values)
    return MetricStats(
        count=n,
        average=sum(values) / n,
        min=values[0],
        max=values[-1],
        p50=percentile(values, 50),
        p95=percentile(values, 95),
        p99=percentile(values, 99),
    )


def category_stats(metrics: Sequence[Metric]) -> CategoryStats:
    """Calculate the report statistics block for one category's metrics."""
    values = sorted(m.duration for m in metrics)
    n = len(values)
    return CategoryStats(
        count=n,
        average=sum(values) / n,
        min=values[0],
        max=values[-1],
        p95=percentile(values, 95),
        p99=percentile(values, 99),
    )


__all__ = ["percentile", "calculate_stats", "category_stats"]
