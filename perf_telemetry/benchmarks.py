"""Benchmark registry for threshold checks.

Each registry copies its seed table into a private dict, so separate
monitors never share benchmark state.
"""

from collections.abc import Iterable, Iterator

from .models import Benchmark, BenchmarkResult, BenchmarkStatus, MetricCategory

DEFAULT_BENCHMARKS: tuple[Benchmark, ...] = (
    # Sidebar rendering
    Benchmark("sidebar-render-initial", MetricCategory.RENDER, 500, 750, 1500),
    Benchmark("sidebar-render-update", MetricCategory.RENDER, 200, 350, 750),
    # Form generation
    Benchmark("form-generation", MetricCategory.GENERATION, 100, 200, 500),
    # Simulation panel
    Benchmark("simulation-panel-render", MetricCategory.RENDER, 300, 500, 1000),
    Benchmark("simulation-panel-update", MetricCategory.UPDATE, 150, 300, 750),
    # UI interaction
    Benchmark("ui-interaction-response", MetricCategory.INTERACTION, 100, 200, 500),
)

_UNKNOWN = BenchmarkResult(passed=True, status=BenchmarkStatus.OK)


class BenchmarkRegistry:
    """Named thresholds keyed uniquely by operation name.

    Example:
        registry = BenchmarkRegistry()
        result = registry.check("form-generation", 250)
        # BenchmarkResult(passed=False, status=BenchmarkStatus.WARNING, ...)
    """

    def __init__(self, benchmarks: Iterable[Benchmark] | None = None):
        """Initialize the registry.

        Args:
            benchmarks: Seed table. Defaults to ``DEFAULT_BENCHMARKS``.
        """
        self._benchmarks: dict[str, Benchmark] = {}
        for benchmark in DEFAULT_BENCHMARKS if benchmarks is None else benchmarks:
            self.register(benchmark)

    def register(self, benchmark: Benchmark) -> None:
        """Insert a benchmark, replacing any existing one with the same name."""
        self._benchmarks[benchmark.name] = benchmark

    def get(self, name: str) -> Benchmark | None:
        return self._benchmarks.get(name)

    def check(self, name: str, duration: float) -> BenchmarkResult:
        """Evaluate a duration against the named benchmark.

        Unknown names always pass. Otherwise the status is ``critical``
        above the critical threshold, ``warning`` above the warning
        threshold, and ``ok`` otherwise.

        Args:
            name: Operation name.
            duration: Duration in milliseconds.

        Returns:
            BenchmarkResult with the matched benchmark attached.
        """
        benchmark = self._benchmarks.get(name)
        if benchmark is None:
            return _UNKNOWN

        if duration > benchmark.critical_threshold_ms:
            return BenchmarkResult(False, BenchmarkStatus.CRITICAL, benchmark)
        if duration > benchmark.warning_threshold_ms:
            return BenchmarkResult(False, BenchmarkStatus.WARNING, benchmark)
        return BenchmarkResult(True, BenchmarkStatus.OK, benchmark)

    def all(self) -> list[Benchmark]:
        return list(self._benchmarks.values())

    def __contains__(self, name: object) -> bool:
        return name in self._benchmarks

    def __iter__(self) -> Iterator[Benchmark]:
        return iter(self.all())

    def __len__(self) -> int:
        return len(self._benchmarks)


__all__ = ["DEFAULT_BENCHMARKS", "BenchmarkRegistry"]
