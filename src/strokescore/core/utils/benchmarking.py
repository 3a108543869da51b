# src/strokescore/core/utils/benchmarking.py

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Dict, Optional

logger = logging.getLogger(__name__)


@dataclass
class TimingStats:
    """Accumulated wall time and stroke points for one scoring stage."""

    name: str
    total_time: float = 0.0
    count: int = 0
    points_processed: int = 0

    def add_timing(self, elapsed: float, points: int = 0) -> None:
        """Add a timing measurement.

        Args:
            elapsed: Time taken in seconds
            points: Stroke points the stage consumed
        """
        self.total_time += elapsed
        self.count += 1
        self.points_processed += points

    @property
    def avg_time(self) -> float:
        return self.total_time / self.count if self.count > 0 else 0.0

    @property
    def points_per_second(self) -> float:
        """Stroke points handled per second of stage time."""
        if self.total_time > 0 and self.points_processed > 0:
            return self.points_processed / self.total_time
        return 0.0

    def __str__(self) -> str:
        if not self.count:
            return f"{self.name}: No timing data"

        parts = [
            f"{self.count} call(s)",
            f"total {self.total_time:.3f}s",
            f"avg {self.avg_time * 1000:.1f}ms",
        ]
        if self.points_processed:
            parts.append(
                f"{self.points_processed} stroke points at {self.points_per_second:.0f} points/s"
            )
        return f"{self.name}: " + ", ".join(parts)


class PerformanceStats:
    """Collect and report per-stage timings."""

    def __init__(self) -> None:
        self.stats: Dict[str, TimingStats] = {}

    def get_stats(self, name: str) -> TimingStats:
        """Get or create stats for a stage."""
        if name not in self.stats:
            self.stats[name] = TimingStats(name=name)
        return self.stats[name]

    def add_timing(self, name: str, elapsed: float, points: int = 0) -> None:
        self.get_stats(name).add_timing(elapsed, points)

    def report(self) -> str:
        """Generate a performance report, one line per stage with its share of time."""
        if not self.stats:
            return "No performance data collected"

        total_time = sum(s.total_time for s in self.stats.values())
        lines = []
        for name in sorted(self.stats):
            stats = self.stats[name]
            pct = (stats.total_time / total_time) * 100 if total_time > 0 else 0.0
            lines.append(f"{stats} ({pct:.1f}% of timed work)")
        return "\n".join(lines)


@contextmanager
def timer(name: str, stats: Optional[PerformanceStats] = None, points: int = 0):
    """Context manager for timing a stage with optional stats collection.

    Args:
        name: Name of the stage being timed
        stats: Optional PerformanceStats object to collect metrics
        points: Stroke points the stage consumes
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start
        logger.debug("%s took %.4fs for %d points", name, elapsed, points)
        if stats is not None:
            stats.add_timing(name, elapsed, points)
