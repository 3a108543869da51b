import pytest

from strokescore.core.utils.benchmarking import PerformanceStats, TimingStats, timer


class TestTimingStats:
    """Tests for per-stage accumulation."""

    def test_points_per_second(self):
        stats = TimingStats(name="align")
        stats.add_timing(0.5, points=40)
        stats.add_timing(1.5, points=60)

        assert stats.count == 2
        assert stats.avg_time == pytest.approx(1.0)
        assert stats.points_per_second == pytest.approx(50.0)

    def test_report_line_names_the_unit(self):
        stats = TimingStats(name="align")
        stats.add_timing(2.0, points=100)

        line = str(stats)

        assert line.startswith("align: 1 call(s)")
        assert "100 stroke points at 50 points/s" in line

    def test_no_points(self):
        stats = TimingStats(name="simplify")
        stats.add_timing(0.25)

        assert stats.points_per_second == 0.0
        assert "points/s" not in str(stats)

    def test_empty(self):
        assert str(TimingStats(name="align")) == "align: No timing data"


def test_timer_collects_into_stats():
    stats = PerformanceStats()

    with timer("align", stats, points=12):
        pass
    with timer("align", stats, points=8):
        pass

    assert stats.get_stats("align").count == 2
    assert stats.get_stats("align").points_processed == 20


def test_timer_records_on_error():
    stats = PerformanceStats()

    with pytest.raises(RuntimeError):
        with timer("simplify", stats):
            raise RuntimeError("boom")

    assert stats.get_stats("simplify").count == 1


def test_report_shares():
    stats = PerformanceStats()
    stats.add_timing("align", 3.0, points=30)
    stats.add_timing("simplify", 1.0, points=30)

    lines = stats.report().splitlines()

    assert lines[0].startswith("align:")
    assert lines[0].endswith("(75.0% of timed work)")
    assert lines[1].endswith("(25.0% of timed work)")
    assert PerformanceStats().report() == "No performance data collected"
