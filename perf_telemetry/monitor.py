"""Performance monitor: the engine facade.

Ties together the metric store, benchmark registry, snapshot history,
and regression detector behind a single object owned by one caller
context (e.g. one editor session).

Example usage:
    monitor = PerformanceMonitor()

    monitor.record("form-generation", 120.0, "generation", {"param_count": 4})

    with monitor.track("sidebar-render-update", "render"):
        render()

    result = await monitor.measure_async("rpc-call", "network", fetch_state)

    monitor.create_snapshot()
    ...
    monitor.create_snapshot()
    alerts = monitor.detect_regressions()
"""

import time
from collections.abc import Awaitable, Callable, Mapping
from typing import Any, TypeVar

from .benchmarks import BenchmarkRegistry
from .config import TelemetryConfig
from .models import (
    Benchmark,
    BenchmarkResult,
    Metric,
    MetricCategory,
    MetricStats,
    RegressionAlert,
    Snapshot,
)
from .regression import RegressionDetector
from .snapshots import SnapshotManager
from .stats import calculate_stats
from .store import MetricStore
from .timing import Clock, PerformanceTimer, measure, measure_async

T = TypeVar("T")


class PerformanceMonitor:
    """Records timed operations and derives statistics, snapshots, and regressions.

    Single-threaded by contract: concurrent calls from several threads
    against one instance are not synchronized.

    Attributes:
        config: The validated configuration this monitor was built from.
        benchmarks: The monitor's own benchmark registry.
    """

    def __init__(
        self,
        config: TelemetryConfig | None = None,
        clock: Clock = time.perf_counter,
        time_source: Callable[[], float] = time.time,
    ):
        """Initialize the monitor.

        Args:
            config: Engine settings. Defaults to ``TelemetryConfig()``.
            clock: Monotonic clock (seconds) used by the measurement helpers.
            time_source: Wall clock (epoch seconds) for metric and
                snapshot timestamps.
        """
        self.config = config or TelemetryConfig()
        self._clock = clock
        self._store = MetricStore(
            max_metrics=self.config.max_metrics,
            validate_durations=self.config.validate_durations,
            time_source=time_source,
        )
        self.benchmarks = BenchmarkRegistry(self.config.benchmarks)
        self._snapshots = SnapshotManager(
            max_snapshots=self.config.max_snapshots, time_source=time_source
        )
        self._detector = RegressionDetector(
            self.benchmarks, threshold=self.config.regression_threshold
        )

    # -- Ingestion ---------------------------------------------------------

    def record(
        self,
        name: str,
        duration: float,
        category: MetricCategory | str,
        metadata: Mapping[str, Any] | None = None,
    ) -> Metric:
        """Record one observation stamped with the current time."""
        return self._store.record(name, duration, category, metadata)

    def measure(
        self,
        name: str,
        category: MetricCategory | str,
        work: Callable[[], T],
        metadata: Mapping[str, Any] | None = None,
    ) -> T:
        """Run ``work()`` synchronously and record its duration.

        The result is returned unchanged; an exception is recorded with
        ``error: True`` and re-raised.
        """
        return measure(self, name, category, work, metadata, clock=self._clock)

    async def measure_async(
        self,
        name: str,
        category: MetricCategory | str,
        work: Callable[[], Awaitable[T]] | Awaitable[T],
        metadata: Mapping[str, Any] | None = None,
    ) -> T:
        """Await ``work`` and record its duration."""
        return await measure_async(
            self, name, category, work, metadata, clock=self._clock
        )

    def track(
        self,
        name: str,
        category: MetricCategory | str,
        metadata: Mapping[str, Any] | None = None,
    ) -> PerformanceTimer:
        """Context manager that records the duration of its block."""
        return PerformanceTimer(self, name, category, metadata, clock=self._clock)

    # -- Queries -----------------------------------------------------------

    def get_metrics(self) -> list[Metric]:
        return self._store.all()

    def get_metrics_for_name(self, name: str) -> list[Metric]:
        return self._store.for_name(name)

    def get_metrics_for_category(self, category: MetricCategory | str) -> list[Metric]:
        return self._store.for_category(category)

    def calculate_stats(self, name: str) -> MetricStats | None:
        """Statistics for every retained metric with this name.

        Returns:
            MetricStats, or None if no metric has this name.
        """
        return calculate_stats(m.duration for m in self._store.for_name(name))

    def clear_metrics(self) -> None:
        self._store.clear()

    # -- Benchmarks --------------------------------------------------------

    def register_benchmark(self, benchmark: Benchmark) -> None:
        self.benchmarks.register(benchmark)

    def get_benchmark(self, name: str) -> Benchmark | None:
        return self.benchmarks.get(name)

    def check_benchmark(self, name: str, duration: float) -> BenchmarkResult:
        return self.benchmarks.check(name, duration)

    # -- Snapshots and regressions ----------------------------------------

    def create_snapshot(self) -> Snapshot:
        """Capture the current metrics into a new snapshot in history."""
        return self._snapshots.create(self._store.all())

    def get_snapshots(self) -> list[Snapshot]:
        return self._snapshots.history()

    def clear_snapshots(self) -> None:
        self._snapshots.clear()

    def detect_regressions(self) -> list[RegressionAlert]:
        """Compare the two newest snapshots.

        Returns:
            Alerts for names whose average grew beyond the threshold;
            empty with fewer than two snapshots.
        """
        pair = self._snapshots.latest_pair()
        if pair is None:
            return []
        return self._detector.compare(*pair)

    @property
    def regression_threshold(self) -> float:
        return self._detector.threshold

    def set_regression_threshold(self, fraction: float) -> None:
        """Set the fractional increase that triggers an alert (0.15 = 15%)."""
        self._detector.threshold = fraction


__all__ = ["PerformanceMonitor"]
