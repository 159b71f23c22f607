"""Snapshot capture and bounded snapshot history."""

import time
from collections import deque
from collections.abc import Callable, Iterable

from .config import DEFAULT_MAX_SNAPSHOTS
from .models import Metric, Snapshot
from .stats import calculate_stats
from .telemetry_logging import LogCategory, get_category_logger

logger = get_category_logger(LogCategory.SNAPSHOTS)

SLOWEST_OPERATIONS_LIMIT = 10


class SnapshotManager:
    """Materializes aggregate views and keeps the most recent ones.

    Snapshots are only created on request; there is no periodic capture.
    """

    def __init__(
        self,
        max_snapshots: int = DEFAULT_MAX_SNAPSHOTS,
        time_source: Callable[[], float] = time.time,
    ):
        self.max_snapshots = max_snapshots
        self._time_source = time_source
        self._history: deque[Snapshot] = deque(maxlen=max_snapshots)

    def create(self, metrics: Iterable[Metric]) -> Snapshot:
        """Capture a snapshot of the given metrics and append it to history.

        Args:
            metrics: Current contents of the metric store, oldest first.

        Returns:
            The new snapshot.
        """
        captured = tuple(metrics)

        durations_by_name: dict[str, list[float]] = {}
        for metric in captured:
            durations_by_name.setdefault(metric.name, []).append(metric.duration)

        averages: dict[str, float] = {}
        percentiles: dict[str, dict[int, float]] = {}
        for name, durations in durations_by_name.items():
            stats = calculate_stats(durations)
            averages[name] = stats.average
            percentiles[name] = {50: stats.p50, 95: stats.p95, 99: stats.p99}

        # sorted() is stable, so equal durations keep insertion order
        slowest = sorted(captured, key=lambda m: m.duration, reverse=True)

        snapshot = Snapshot(
            timestamp=self._time_source(),
            metrics=captured,
            averages=averages,
            percentiles=percentiles,
            slowest_operations=tuple(slowest[:SLOWEST_OPERATIONS_LIMIT]),
        )
        self._history.append(snapshot)

        logger.debug(
            f"Captured snapshot of {len(captured)} metrics "
            f"across {len(averages)} operations",
            extra={"metric_count": len(captured)},
        )
        return snapshot

    def history(self) -> list[Snapshot]:
        """Return retained snapshots, oldest first."""
        return list(self._history)

    def latest_pair(self) -> tuple[Snapshot, Snapshot] | None:
        """Return ``(previous, current)``, or None with fewer than two snapshots."""
        if len(self._history) < 2:
            return None
        return self._history[-2], self._history[-1]

    def clear(self) -> None:
        self._history.clear()

    def __len__(self) -> int:
        return len(self._history)


__all__ = ["SLOWEST_OPERATIONS_LIMIT", "SnapshotManager"]
