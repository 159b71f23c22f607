"""Tests for regression detection."""

import logging

import pytest

from perf_telemetry.benchmarks import BenchmarkRegistry
from perf_telemetry.models import Severity, Snapshot
from perf_telemetry.regression import RegressionDetector


def _snapshot(averages: dict[str, float]) -> Snapshot:
    return Snapshot(
        timestamp=0.0,
        metrics=(),
        averages=averages,
        percentiles={},
        slowest_operations=(),
    )


@pytest.fixture
def detector() -> RegressionDetector:
    return RegressionDetector(BenchmarkRegistry())


class TestRegressionDetector:
    """Tests for RegressionDetector."""

    def test_needs_two_snapshots(self, detector):
        assert detector.detect([]) == []
        assert detector.detect([_snapshot({"a": 1.0})]) == []

    def test_increase_above_threshold(self, detector):
        alerts = detector.compare(_snapshot({"a": 100.0}), _snapshot({"a": 120.0}))

        [alert] = alerts
        assert alert.metric_name == "a"
        assert alert.previous_average == 100.0
        assert alert.current_average == 120.0
        assert alert.percentage_change == pytest.approx(0.2)
        assert alert.severity is Severity.WARNING

    def test_exactly_at_threshold_not_reported(self, detector):
        """The change must strictly exceed the threshold."""
        detector.threshold = 0.5
        alerts = detector.compare(_snapshot({"a": 100.0}), _snapshot({"a": 150.0}))

        assert alerts == []

    def test_decreases_never_alert(self, detector):
        alerts = detector.compare(
            _snapshot({"a": 100.0, "b": 50.0}), _snapshot({"a": 10.0, "b": 50.0})
        )

        assert alerts == []

    def test_new_and_zero_baseline_names_skipped(self, detector):
        alerts = detector.compare(
            _snapshot({"zero": 0.0}), _snapshot({"zero": 10.0, "brand-new": 500.0})
        )

        assert alerts == []

    def test_critical_when_above_benchmark(self, detector):
        """form-generation's critical threshold is 500ms."""
        alerts = detector.compare(
            _snapshot({"form-generation": 400.0}), _snapshot({"form-generation": 600.0})
        )

        assert alerts[0].severity is Severity.CRITICAL

    def test_warning_without_benchmark(self, detector):
        alerts = detector.compare(
            _snapshot({"custom-op": 400.0}), _snapshot({"custom-op": 60000.0})
        )

        assert alerts[0].severity is Severity.WARNING

    def test_detect_uses_two_newest(self, detector):
        history = [
            _snapshot({"a": 1.0}),
            _snapshot({"a": 100.0}),
            _snapshot({"a": 101.0}),
        ]

        assert detector.detect(history) == []

    def test_logs_warning(self, detector, caplog):
        with caplog.at_level(logging.WARNING, logger="perf_telemetry"):
            detector.compare(_snapshot({"a": 100.0}), _snapshot({"a": 200.0}))

        assert "Regression in a" in caplog.text
