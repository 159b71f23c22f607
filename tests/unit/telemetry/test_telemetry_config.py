"""Tests for TelemetryConfig validation."""

import pytest
from pydantic import ValidationError

from perf_telemetry.benchmarks import DEFAULT_BENCHMARKS
from perf_telemetry.config import (
    DEFAULT_MAX_METRICS,
    DEFAULT_MAX_SNAPSHOTS,
    DEFAULT_REGRESSION_THRESHOLD,
    TelemetryConfig,
)
from perf_telemetry.models import Benchmark, MetricCategory


class TestTelemetryConfig:
    """Tests for TelemetryConfig."""

    def test_defaults(self):
        config = TelemetryConfig()

        assert config.max_metrics == DEFAULT_MAX_METRICS == 10_000
        assert config.max_snapshots == DEFAULT_MAX_SNAPSHOTS == 100
        assert config.regression_threshold == DEFAULT_REGRESSION_THRESHOLD == 0.15
        assert config.validate_durations is False
        assert [b.name for b in config.benchmarks] == [b.name for b in DEFAULT_BENCHMARKS]

    @pytest.mark.parametrize("field", ["max_metrics", "max_snapshots"])
    @pytest.mark.parametrize("value", [0, -5])
    def test_capacities_must_be_positive(self, field, value):
        with pytest.raises(ValidationError):
            TelemetryConfig(**{field: value})

    def test_default_benchmark_lists_not_shared(self):
        first = TelemetryConfig()
        second = TelemetryConfig()

        first.benchmarks.append(Benchmark("extra", MetricCategory.NETWORK, 1, 2, 3))

        assert len(second.benchmarks) == len(DEFAULT_BENCHMARKS)

    def test_custom_benchmarks(self):
        custom = Benchmark("deploy", MetricCategory.NETWORK, 100, 200, 300)

        config = TelemetryConfig(benchmarks=[custom])

        assert config.benchmarks == [custom]
