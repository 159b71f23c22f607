"""Tests for snapshot capture and history."""

import pytest

from perf_telemetry.models import Metric, MetricCategory, Snapshot
from perf_telemetry.snapshots import SLOWEST_OPERATIONS_LIMIT, SnapshotManager


def _metrics(*pairs):
    return [
        Metric(name, duration, float(i), MetricCategory.RENDER)
        for i, (name, duration) in enumerate(pairs)
    ]


class TestSnapshotManager:
    """Tests for SnapshotManager."""

    def test_averages_and_percentiles(self):
        manager = SnapshotManager(time_source=lambda: 99.0)

        snapshot = manager.create(_metrics(("a", 10.0), ("a", 30.0), ("b", 5.0)))

        assert snapshot.timestamp == 99.0
        assert snapshot.averages == {"a": 20.0, "b": 5.0}
        assert snapshot.percentiles["a"] == {50: 10.0, 95: 30.0, 99: 30.0}
        assert snapshot.percentiles["b"] == {50: 5.0, 95: 5.0, 99: 5.0}

    def test_empty_snapshot(self):
        snapshot = SnapshotManager().create([])

        assert snapshot.metrics == ()
        assert snapshot.averages == {}
        assert snapshot.slowest_operations == ()

    def test_slowest_operations_top_ten_descending(self):
        metrics = _metrics(*[(f"op{i}", float(i)) for i in range(25)])

        snapshot = SnapshotManager().create(metrics)

        durations = [m.duration for m in snapshot.slowest_operations]
        assert len(durations) == SLOWEST_OPERATIONS_LIMIT
        assert durations == [float(i) for i in range(24, 14, -1)]

    def test_slowest_ties_keep_insertion_order(self):
        metrics = _metrics(("first", 50.0), ("second", 50.0), ("third", 10.0), ("fourth", 50.0))

        snapshot = SnapshotManager().create(metrics)

        names = [m.name for m in snapshot.slowest_operations]
        assert names == ["first", "second", "fourth", "third"]

    def test_snapshot_is_a_copy(self):
        """Mutating the source list afterwards leaves the snapshot untouched."""
        source = _metrics(("a", 1.0))
        snapshot = SnapshotManager().create(source)

        source.append(Metric("b", 2.0, 0.0, MetricCategory.RENDER))

        assert len(snapshot.metrics) == 1

    def test_aggregates_are_read_only(self):
        """History cannot be altered through a returned snapshot."""
        manager = SnapshotManager()
        snapshot = manager.create(_metrics(("a", 10.0)))

        with pytest.raises(TypeError):
            snapshot.averages["a"] = 0.0
        with pytest.raises(TypeError):
            snapshot.percentiles["a"][50] = 0.0

        assert manager.history()[0].averages == {"a": 10.0}

    def test_caller_dict_not_shared(self):
        averages = {"a": 1.0}
        snapshot = Snapshot(0.0, (), averages, {}, ())

        averages["a"] = 99.0

        assert snapshot.averages["a"] == 1.0

    def test_history_bounded_oldest_evicted(self):
        ticks = iter(range(10))
        manager = SnapshotManager(max_snapshots=3, time_source=lambda: float(next(ticks)))

        for _ in range(5):
            manager.create([])

        assert len(manager) == 3
        assert [s.timestamp for s in manager.history()] == [2.0, 3.0, 4.0]

    def test_latest_pair(self):
        manager = SnapshotManager()
        assert manager.latest_pair() is None

        first = manager.create(_metrics(("a", 1.0)))
        assert manager.latest_pair() is None

        second = manager.create(_metrics(("a", 2.0)))
        assert manager.latest_pair() == (first, second)

    def test_clear(self):
        manager = SnapshotManager()
        manager.create([])

        manager.clear()

        assert manager.history() == []


class TestSnapshotSerialization:
    """Tests for Snapshot.to_dict / from_dict."""

    def test_round_trip_restores_percentile_keys(self):
        snapshot = SnapshotManager(time_source=lambda: 5.0).create(
            _metrics(("a", 10.0), ("b", 20.0))
        )

        data = snapshot.to_dict()
        restored = Snapshot.from_dict(data)

        assert data["percentiles"]["a"] == {"50": 10.0, "95": 10.0, "99": 10.0}
        assert restored == snapshot
