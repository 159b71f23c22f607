"""Report synthesis from a snapshot and optional regressions."""

import time
from collections.abc import Callable, Sequence

from ..models import (
    CategoryStats,
    Metric,
    OperationSummary,
    RegressionAlert,
    Report,
    ReportSummary,
    Severity,
    SlowOperation,
    Snapshot,
)
from ..stats import category_stats
from ..telemetry_logging import LogCategory, get_category_logger

logger = get_category_logger(LogCategory.REPORTING)

DEFAULT_TITLE = "Performance Report"
NO_METRICS = "No metrics recorded"
ALL_CLEAR = "Performance is within acceptable ranges."

# Category average thresholds (ms) that trigger a recommendation
RENDER_AVERAGE_LIMIT = 500
GENERATION_AVERAGE_LIMIT = 200
UPDATE_AVERAGE_LIMIT = 300


def _empty_report(title: str, timestamp: float) -> Report:
    none = OperationSummary(name="N/A", duration=0)
    return Report(
        timestamp=timestamp,
        title=title,
        summary=ReportSummary(
            total_metrics=0,
            total_duration=0,
            average_metric_duration=0,
            slowest_metric=none,
            fastest_metric=none,
        ),
        by_category={},
        slowest_operations=(),
        regressions=(),
        recommendations=(NO_METRICS,),
    )


def generate_recommendations(
    by_category: dict[str, CategoryStats],
    regressions: Sequence[RegressionAlert],
) -> list[str]:
    """Evaluate the recommendation rules in their fixed order.

    Each rule contributes at most one line, except the variance rule,
    which contributes one line per affected category.
    """
    recommendations: list[str] = []

    render = by_category.get("render")
    if render and render.average > RENDER_AVERAGE_LIMIT:
        recommendations.append(
            "Rendering performance is degraded. Consider optimizing component "
            "rendering or using virtualization for large lists."
        )

    generation = by_category.get("generation")
    if generation and generation.average > GENERATION_AVERAGE_LIMIT:
        recommendations.append(
            "Form/content generation is slow. Consider caching or lazy loading."
        )

    update = by_category.get("update")
    if update and update.average > UPDATE_AVERAGE_LIMIT:
        recommendations.append(
            "UI updates are slow. Consider batching updates or using memoization."
        )

    critical = [r.metric_name for r in regressions if r.severity is Severity.CRITICAL]
    if critical:
        recommendations.append(
            f"Critical performance regressions detected in: {', '.join(critical)}"
        )

    for category, stats in by_category.items():
        if stats.average == 0:
            # Zero average: any positive p99 is an unbounded spread
            high_variance = stats.p99 > 0
        else:
            high_variance = (stats.p99 - stats.average) / stats.average > 1
        if high_variance:
            recommendations.append(
                f"High variance in {category} operations. Investigate outliers "
                "and optimize worst-case scenarios."
            )

    if not recommendations:
        recommendations.append(ALL_CLEAR)

    return recommendations


def generate_report(
    snapshot: Snapshot,
    regressions: Sequence[RegressionAlert] = (),
    title: str = DEFAULT_TITLE,
    time_source: Callable[[], float] = time.time,
) -> Report:
    """Build a report from one snapshot.

    Args:
        snapshot: Snapshot to summarize.
        regressions: Alerts to include, typically from ``detect_regressions``.
        title: Report title.
        time_source: Timestamp source for the empty report.

    Returns:
        Report. An empty snapshot yields a zeroed report whose only
        recommendation is ``"No metrics recorded"``.
    """
    metrics = snapshot.metrics
    if not metrics:
        return _empty_report(title, time_source())

    total_duration = sum(m.duration for m in metrics)

    grouped: dict[str, list[Metric]] = {}
    for metric in metrics:
        grouped.setdefault(metric.category.value, []).append(metric)
    by_category = {name: category_stats(group) for name, group in grouped.items()}

    # Stable descending sort: first-recorded wins ties
    ordered = sorted(metrics, key=lambda m: m.duration, reverse=True)
    slowest, fastest = ordered[0], ordered[-1]

    regressions = tuple(regressions)
    recommendations = generate_recommendations(by_category, regressions)

    logger.debug(
        f"Generated report '{title}' from {len(metrics)} metrics "
        f"with {len(regressions)} regressions",
        extra={"metric_count": len(metrics)},
    )

    return Report(
        timestamp=snapshot.timestamp,
        title=title,
        summary=ReportSummary(
            total_metrics=len(metrics),
            total_duration=total_duration,
            average_metric_duration=total_duration / len(metrics),
            slowest_metric=OperationSummary(slowest.name, slowest.duration),
            fastest_metric=OperationSummary(fastest.name, fastest.duration),
        ),
        by_category=by_category,
        slowest_operations=tuple(
            SlowOperation.from_metric(m) for m in snapshot.slowest_operations
        ),
        regressions=regressions,
        recommendations=tuple(recommendations),
    )


__all__ = [
    "DEFAULT_TITLE",
    "NO_METRICS",
    "ALL_CLEAR",
    "generate_recommendations",
    "generate_report",
]
