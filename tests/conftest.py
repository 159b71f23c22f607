"""
Shared fixtures for the perf_telemetry test suite.

Provides test fixtures for:
- Deterministic clocks for measurement and timestamps
- Fresh monitors with default configuration
- A populated snapshot for report tests
"""

import pytest

from perf_telemetry import PerformanceMonitor, TelemetryConfig


class FakeClock:
    """Manually advanced clock, callable like ``time.perf_counter``."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance_ms(self, ms: float) -> None:
        self.now += ms / 1000


# ---------------------------------------------------------------------------
# Clock fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def clock() -> FakeClock:
    """Monotonic clock advanced explicitly by tests."""
    return FakeClock()


@pytest.fixture()
def wall_clock() -> FakeClock:
    """Wall clock starting at 2024-01-01T00:00:00Z."""
    return FakeClock(start=1_704_067_200.0)


# ---------------------------------------------------------------------------
# Monitor fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def monitor(clock, wall_clock) -> PerformanceMonitor:
    """Monitor with default settings and deterministic clocks."""
    return PerformanceMonitor(clock=clock, time_source=wall_clock)


@pytest.fixture()
def small_monitor(clock, wall_clock) -> PerformanceMonitor:
    """Monitor with tiny capacities for eviction tests."""
    config = TelemetryConfig(max_metrics=5, max_snapshots=3)
    return PerformanceMonitor(config, clock=clock, time_source=wall_clock)


@pytest.fixture()
def populated_snapshot(monitor):
    """Snapshot with render, generation, and interaction metrics."""
    for i in range(20):
        monitor.record("sidebar-render-initial", 400 + i * 5, "render", {"contract_count": 50})
        monitor.record("form-generation", 100 + i * 2, "generation", {"param_count": 10})
        monitor.record("ui-interaction-response", 20 + i * 0.5, "interaction")
        monitor.record("simulation-panel-render", 250 + i * 5, "render")
    return monitor.create_snapshot()
