"""
Unit tests for the per-resource latency tracker.
"""

from types import SimpleNamespace

import pytest

from shopstats.api.middleware import LatencySnapshot, LatencyTracker, resource_family


def request_for(route):
    """Minimal stand-in exposing only the ASGI scope."""
    scope = {} if route is None else {"route": route}
    return SimpleNamespace(scope=scope)


class TestLatencySnapshot:
    """Test window summaries"""

    def test_empty_window(self):
        snapshot = LatencySnapshot.of([])

        assert snapshot.count == 0
        assert snapshot.p99_ms == 0.0

    def test_nearest_rank_percentiles(self):
        snapshot = LatencySnapshot.of([float(ms) for ms in range(100, 0, -1)])

        assert snapshot.count == 100
        assert snapshot.p50_ms == 50.0
        assert snapshot.p95_ms == 95.0
        assert snapshot.p99_ms == 99.0
        assert snapshot.min_ms == 1.0
        assert snapshot.max_ms == 100.0
        assert snapshot.mean_ms == 50.5

    def test_single_sample(self):
        snapshot = LatencySnapshot.of([12.5])

        assert snapshot.p50_ms == snapshot.p99_ms == 12.5


class TestLatencyTracker:
    """Test recording by resource family"""

    def test_records_overall_and_per_family(self):
        tracker = LatencyTracker()
        tracker.record("users", 10.0)
        tracker.record("users", 30.0)
        tracker.record("orders", 5.0)

        assert tracker.families() == ["orders", "users"]
        assert tracker.snapshot().count == 3
        assert tracker.snapshot("users").mean_ms == 20.0
        assert tracker.snapshot("orders").max_ms == 5.0

    def test_unknown_family_is_empty(self):
        assert LatencyTracker().snapshot("sellers") == LatencySnapshot()

    def test_windows_are_bounded(self):
        tracker = LatencyTracker(window_size=3)
        for ms in [100.0, 1.0, 2.0, 3.0]:
            tracker.record("products", ms)

        assert tracker.snapshot().count == 3
        assert tracker.snapshot("products").max_ms == 3.0

    def test_reset(self):
        tracker = LatencyTracker()
        tracker.record("health", 1.0)
        tracker.reset()

        assert tracker.families() == []
        assert tracker.snapshot().count == 0


class TestResourceFamily:
    """Test route grouping"""

    @pytest.mark.parametrize(
        "route, expected",
        [
            (SimpleNamespace(tags=["categories"], path="/categories/{id}/sales-stats"), "categories"),
            (SimpleNamespace(tags=[], path="/sellers/{sellerId}/dashboard"), "sellers"),
            (SimpleNamespace(tags=[], path="/"), "root"),
            (None, "unmatched"),
        ],
    )
    def test_family(self, route, expected):
        assert resource_family(request_for(route)) == expected
