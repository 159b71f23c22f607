"""Configuration model for the telemetry engine."""

from pydantic import BaseModel, Field

from .benchmarks import DEFAULT_BENCHMARKS
from .models import Benchmark

DEFAULT_MAX_METRICS = 10_000
DEFAULT_MAX_SNAPSHOTS = 100
DEFAULT_REGRESSION_THRESHOLD = 0.15  # 15% slower triggers regression


class TelemetryConfig(BaseModel):
    """Engine settings, validated once at construction.

    Capacities must be positive. The regression threshold and the
    benchmark thresholds are taken as given.
    """

    max_metrics: int = Field(default=DEFAULT_MAX_METRICS, ge=1)
    max_snapshots: int = Field(default=DEFAULT_MAX_SNAPSHOTS, ge=1)
    regression_threshold: float = Field(default=DEFAULT_REGRESSION_THRESHOLD)

    # Reject negative / NaN / infinite durations instead of storing them
    validate_durations: bool = Field(default=False)

    benchmarks: list[Benchmark] = Field(
        default_factory=lambda: list(DEFAULT_BENCHMARKS)
    )


__all__ = [
    "DEFAULT_MAX_METRICS",
    "DEFAULT_MAX_SNAPSHOTS",
    "DEFAULT_REGRESSION_THRESHOLD",
    "TelemetryConfig",
]
