"""Performance telemetry engine.

Records timed operations, computes rolling statistics and percentiles,
detects regressions between snapshots, and renders reports:

- **monitor**: ``PerformanceMonitor`` facade owning all engine state
- **store**: capacity-bounded metric log
- **stats**: nearest-rank percentiles and summaries
- **benchmarks**: target / warning / critical thresholds per operation
- **snapshots**: point-in-time aggregates with bounded history
- **regression**: snapshot-to-snapshot regression alerts
- **timing**: ``measure``, ``measure_async``, ``PerformanceTimer``, ``@timed``
- **reporting**: report generation and JSON / CSV / HTML / Markdown export

Example usage:

    from perf_telemetry import PerformanceMonitor, generate_report, export_as_markdown

    monitor = PerformanceMonitor()
    monitor.record("form-generation", 120.0, "generation")
    monitor.create_snapshot()

    monitor.record("form-generation", 210.0, "generation")
    snapshot = monitor.create_snapshot()

    report = generate_report(snapshot, monitor.detect_regressions())
    print(export_as_markdown(report))
"""

from .benchmarks import DEFAULT_BENCHMARKS, BenchmarkRegistry
from .config import TelemetryConfig
from .errors import InvalidDurationError, TelemetryError
from .models import (
    Benchmark,
    BenchmarkResult,
    BenchmarkStatus,
    CategoryStats,
    Metric,
    MetricCategory,
    MetricStats,
    OperationSummary,
    RegressionAlert,
    Report,
    ReportSummary,
    Severity,
    SlowOperation,
    Snapshot,
)
from .monitor import PerformanceMonitor
from .regression import RegressionDetector
from .reporting import (
    ExportFormat,
    PerformanceReportService,
    export_as_csv,
    export_as_html,
    export_as_json,
    export_as_markdown,
    export_report,
    generate_report,
)
from .snapshots import SnapshotManager
from .stats import calculate_stats, percentile
from .store import MetricStore
from .telemetry_logging import setup_logging
from .timing import PerformanceTimer, measure, measure_async, timed

__version__ = "0.1.0"

__all__ = [
    # Engine
    "PerformanceMonitor",
    "TelemetryConfig",
    "MetricStore",
    "BenchmarkRegistry",
    "DEFAULT_BENCHMARKS",
    "SnapshotManager",
    "RegressionDetector",
    # Models
    "Metric",
    "MetricCategory",
    "MetricStats",
    "Benchmark",
    "BenchmarkResult",
    "BenchmarkStatus",
    "Snapshot",
    "RegressionAlert",
    "Severity",
    "Report",
    "ReportSummary",
    "CategoryStats",
    "OperationSummary",
    "SlowOperation",
    # Stats
    "calculate_stats",
    "percentile",
    # Timing
    "measure",
    "measure_async",
    "PerformanceTimer",
    "timed",
    # Reporting
    "generate_report",
    "export_as_json",
    "export_as_csv",
    "export_as_html",
    "export_as_markdown",
    "export_report",
    "ExportFormat",
    "PerformanceReportService",
    # Errors and logging
    "TelemetryError",
    "InvalidDurationError",
    "setup_logging",
]
