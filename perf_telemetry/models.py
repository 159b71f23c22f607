"""Data models for performance telemetry.

This module defines the records the engine stores and derives:
individual metrics, benchmark policies, aggregate statistics,
snapshots, regression alerts, and reports. Derived models are
built once and never observe later changes to the metric store.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any


class MetricCategory(str, Enum):
    """Closed set of operation categories."""

    RENDER = "render"
    UPDATE = "update"
    GENERATION = "generation"
    INTERACTION = "interaction"
    NETWORK = "network"


class BenchmarkStatus(str, Enum):
    """Outcome of checking a duration against a benchmark."""

    OK = "ok"
    WARNING = "warning"
    CRITICAL = "critical"


class Severity(str, Enum):
    """Regression severity."""

    WARNING = "warning"
    CRITICAL = "critical"


@dataclass(frozen=True)
class Metric:
    """One timed observation of a named operation.

    Attributes:
        name: Operation identifier (not unique across observations).
        duration: Elapsed time in milliseconds.
        timestamp: Capture time as Unix epoch seconds.
        category: Operation category.
        metadata: Opaque key/value context, used only for display.
    """

    name: str
    duration: float
    timestamp: float
    category: MetricCategory
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "duration": self.duration,
            "timestamp": self.timestamp,
            "category": self.category.value,
            "metadata": dict(self.metadata),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Metric:
        """Create from dictionary."""
        return cls(
            name=data["name"],
            duration=data["duration"],
            timestamp=data["timestamp"],
            category=MetricCategory(data["category"]),
            metadata=dict(data.get("metadata") or {}),
        )


@dataclass(frozen=True)
class Benchmark:
    """Three-tier threshold policy for one operation.

    ``target_ms <= warning_threshold_ms <= critical_threshold_ms`` is
    expected but not checked.
    """

    name: str
    category: MetricCategory
    target_ms: float
    warning_threshold_ms: float
    critical_threshold_ms: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "category": self.category.value,
            "target_ms": self.target_ms,
            "warning_threshold_ms": self.warning_threshold_ms,
            "critical_threshold_ms": self.critical_threshold_ms,
        }


@dataclass(frozen=True)
class BenchmarkResult:
    """Result of ``check_benchmark``."""

    passed: bool
    status: BenchmarkStatus
    benchmark: Benchmark | None = None


@dataclass(frozen=True)
class MetricStats:
    """Aggregate statistics for one metric name."""

    count: int
    average: float
    min: float
    max: float
    p50: float
    p95: float
    p99: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "count": self.count,
            "average": self.average,
            "min": self.min,
            "max": self.max,
            "p50": self.p50,
            "p95": self.p95,
            "p99": self.p99,
        }


@dataclass(frozen=True)
class Snapshot:
    """Point-in-time aggregate view of the metric store.

    ``metrics`` is a copy of the store taken at capture time, so later
    trimming or clearing of the live store cannot alter it. ``averages``
    and ``percentiles`` are read-only mappings.
    """

    timestamp: float
    metrics: tuple[Metric, ...]
    averages: Mapping[str, float]
    percentiles: Mapping[str, Mapping[int, float]]
    slowest_operations: tuple[Metric, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "averages", MappingProxyType(dict(self.averages)))
        object.__setattr__(
            self,
            "percentiles",
            MappingProxyType(
                {
                    name: MappingProxyType(dict(values))
                    for name, values in self.percentiles.items()
                }
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization.

        Percentile keys become strings, as JSON object keys must be.
        """
        return {
            "timestamp": self.timestamp,
            "metrics": [m.to_dict() for m in self.metrics],
            "averages": dict(self.averages),
            "percentiles": {
                name: {str(p): v for p, v in values.items()}
                for name, values in self.percentiles.items()
            },
            "slowest_operations": [m.to_dict() for m in self.slowest_operations],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Snapshot:
        """Create from dictionary, e.g. a snapshot persisted by the caller."""
        return cls(
            timestamp=data["timestamp"],
            metrics=tuple(Metric.from_dict(m) for m in data.get("metrics", [])),
            averages=dict(data.get("averages", {})),
            percentiles={
                name: {int(p): v for p, v in values.items()}
                for name, values in data.get("percentiles", {}).items()
            },
            slowest_operations=tuple(
                Metric.from_dict(m) for m in data.get("slowest_operations", [])
            ),
        )


@dataclass(frozen=True)
class RegressionAlert:
    """Average-duration increase between two consecutive snapshots."""

    metric_name: str
    previous_average: float
    current_average: float
    percentage_change: float  # fraction, 0.8 == +80%
    severity: Severity

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "metric_name": self.metric_name,
            "previous_average": self.previous_average,
            "current_average": self.current_average,
            "percentage_change": self.percentage_change,
            "severity": self.severity.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RegressionAlert:
        """Create from dictionary."""
        return cls(
            metric_name=data["metric_name"],
            previous_average=data["previous_average"],
            current_average=data["current_average"],
            percentage_change=data["percentage_change"],
            severity=Severity(data["severity"]),
        )


@dataclass(frozen=True)
class CategoryStats:
    """Per-category statistics block of a report."""

    count: int
    average: float
    min: float
    max: float
    p95: float
    p99: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "count": self.count,
            "average": self.average,
            "min": self.min,
            "max": self.max,
            "p95": self.p95,
            "p99": self.p99,
        }


@dataclass(frozen=True)
class OperationSummary:
    """Name and duration of a single notable metric."""

    name: str
    duration: float

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "duration": self.duration}


@dataclass(frozen=True)
class SlowOperation:
    """Row of the slowest-operations table."""

    name: str
    duration: float
    category: str
    timestamp: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "duration": self.duration,
            "category": self.category,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_metric(cls, metric: Metric) -> SlowOperation:
        return cls(
            name=metric.name,
            duration=metric.duration,
            category=metric.category.value,
            timestamp=metric.timestamp,
        )


@dataclass(frozen=True)
class ReportSummary:
    """Headline numbers of a report."""

    total_metrics: int
    total_duration: float
    average_metric_duration: float
    slowest_metric: OperationSummary
    fastest_metric: OperationSummary

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "total_metrics": self.total_metrics,
            "total_duration": self.total_duration,
            "average_metric_duration": self.average_metric_duration,
            "slowest_metric": self.slowest_metric.to_dict(),
            "fastest_metric": self.fastest_metric.to_dict(),
        }


@dataclass(frozen=True)
class Report:
    """Structured synthesis of one snapshot plus optional regressions."""

    timestamp: float
    title: str
    summary: ReportSummary
    by_category: dict[str, CategoryStats]
    slowest_operations: tuple[SlowOperation, ...]
    regressions: tuple[RegressionAlert, ...]
    recommendations: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "timestamp": self.timestamp,
            "title": self.title,
            "summary": self.summary.to_dict(),
            "by_category": {
                name: stats.to_dict() for name, stats in self.by_category.items()
            },
            "slowest_operations": [op.to_dict() for op in self.slowest_operations],
            "regressions": [r.to_dict() for r in self.regressions],
            "recommendations": list(self.recommendations),
        }


__all__ = [
    "MetricCategory",
    "BenchmarkStatus",
    "Severity",
    "Metric",
    "Benchmark",
    "BenchmarkResult",
    "MetricStats",
    "Snapshot",
    "RegressionAlert",
    "CategoryStats",
    "OperationSummary",
    "SlowOperation",
    "ReportSummary",
    "Report",
]
