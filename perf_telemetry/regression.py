"""Regression detection between consecutive snapshots."""

from .benchmarks import BenchmarkRegistry
from .config import DEFAULT_REGRESSION_THRESHOLD
from .models import RegressionAlert, Severity, Snapshot
from .telemetry_logging import LogCategory, get_category_logger

logger = get_category_logger(LogCategory.REGRESSION)


class RegressionDetector:
    """Flags metric names whose average grew beyond a threshold.

    Only increases are reported. Severity is ``critical`` when the
    current average exceeds the metric's critical benchmark threshold,
    ``warning`` otherwise.

    Attributes:
        threshold: Fractional increase that must be exceeded (0.15 = 15%).
    """

    def __init__(
        self,
        benchmarks: BenchmarkRegistry,
        threshold: float = DEFAULT_REGRESSION_THRESHOLD,
    ):
        self.benchmarks = benchmarks
        self.threshold = threshold

    def compare(self, previous: Snapshot, current: Snapshot) -> list[RegressionAlert]:
        """Compare per-name averages of two snapshots.

        Names missing from ``previous``, or with a zero previous average,
        are skipped: a metric cannot regress on its first appearance.

        Args:
            previous: The older snapshot.
            current: The newer snapshot.

        Returns:
            Alerts in the order names appear in ``current``.
        """
        alerts: list[RegressionAlert] = []

        for name, current_avg in current.averages.items():
            previous_avg = previous.averages.get(name)
            if not previous_avg:
                continue

            change = (current_avg - previous_avg) / previous_avg
            if not change > self.threshold:
                continue

            benchmark = self.benchmarks.get(name)
            if benchmark is not None and current_avg > benchmark.critical_threshold_ms:
                severity = Severity.CRITICAL
            else:
                severity = Severity.WARNING

            alert = RegressionAlert(
                metric_name=name,
                previous_average=previous_avg,
                current_average=current_avg,
                percentage_change=change,
                severity=severity,
            )
            alerts.append(alert)
            logger.warning(
                f"[PERF] Regression in {name}: {previous_avg:.2f}ms -> "
                f"{current_avg:.2f}ms ({change:+.1%}, {severity.value})",
                extra={"operation": name, "duration_ms": current_avg},
            )

        return alerts

    def detect(self, history: list[Snapshot]) -> list[RegressionAlert]:
        """Compare the two newest snapshots of a history.

        Returns an empty list when fewer than two snapshots exist.
        """
        if len(history) < 2:
            return []
        return self.compare(history[-2], history[-1])


__all__ = ["RegressionDetector"]
