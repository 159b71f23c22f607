"""Tests for the benchmark registry."""

import math

import pytest

from perf_telemetry.benchmarks import DEFAULT_BENCHMARKS, BenchmarkRegistry
from perf_telemetry.models import Benchmark, BenchmarkStatus, MetricCategory


class TestBenchmarkRegistry:
    """Tests for BenchmarkRegistry."""

    def test_default_benchmarks_seeded(self):
        registry = BenchmarkRegistry()

        assert len(registry) == len(DEFAULT_BENCHMARKS)
        assert "form-generation" in registry
        assert registry.get("form-generation").critical_threshold_ms == 500

    def test_custom_seed_table(self):
        registry = BenchmarkRegistry([])

        assert len(registry) == 0

    def test_register_overwrites(self):
        registry = BenchmarkRegistry()
        replacement = Benchmark("form-generation", MetricCategory.GENERATION, 10, 20, 30)

        registry.register(replacement)

        assert registry.get("form-generation") is replacement
        assert len(registry) == len(DEFAULT_BENCHMARKS)

    def test_registries_are_independent(self):
        """Registering on one registry does not leak into another."""
        first = BenchmarkRegistry()
        second = BenchmarkRegistry()

        first.register(Benchmark("custom", MetricCategory.NETWORK, 1, 2, 3))

        assert "custom" in first
        assert "custom" not in second

    @pytest.mark.parametrize(
        "duration,status",
        [
            (50, BenchmarkStatus.OK),
            (200, BenchmarkStatus.OK),
            (201, BenchmarkStatus.WARNING),
            (500, BenchmarkStatus.WARNING),
            (501, BenchmarkStatus.CRITICAL),
        ],
    )
    def test_check_thresholds(self, duration, status):
        """Thresholds are exclusive: equal to the limit is not over it."""
        result = BenchmarkRegistry().check("form-generation", duration)

        assert result.status is status
        assert result.passed is (status is BenchmarkStatus.OK)
        assert result.benchmark.name == "form-generation"

    @pytest.mark.parametrize("duration", [0, -1e9, 1e12, math.inf, math.nan])
    def test_unknown_name_always_passes(self, duration):
        result = BenchmarkRegistry().check("never-registered", duration)

        assert result.passed is True
        assert result.status is BenchmarkStatus.OK
        assert result.benchmark is None

    def test_inverted_thresholds_are_deterministic(self):
        """Out-of-order thresholds are kept; critical is checked first."""
        registry = BenchmarkRegistry([])
        registry.register(Benchmark("odd", MetricCategory.RENDER, 100, 500, 200))

        assert registry.check("odd", 300).status is BenchmarkStatus.CRITICAL
        assert registry.check("odd", 150).status is BenchmarkStatus.OK
