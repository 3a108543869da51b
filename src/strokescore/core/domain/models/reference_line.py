#!/usr/bin/env python3
# src/strokescore/core/domain/models/reference_line.py

"""
Domain model for the idealized stroke a user is asked to reproduce.
"""

from dataclasses import dataclass
from typing import Optional

from ...config import DEFAULT_REFERENCE_SAMPLES
from ...utils.geometry import interpolate_line
from .point import Curve, Point


@dataclass(frozen=True)
class ReferenceLine:
    """Straight reference stroke defined by its endpoints and sample count."""

    start: Point
    end: Point
    sample_count: int = DEFAULT_REFERENCE_SAMPLES

    def __post_init__(self):
        if self.sample_count < 2:
            raise ValueError(
                f"Reference needs at least 2 samples, got {self.sample_count}"
            )

    @property
    def length(self) -> float:
        """Endpoint span of the reference."""
        return self.start.distance_to(self.end)

    def resample(self, count: Optional[int] = None) -> Curve:
        """
        Sample the reference uniformly.

        Args:
            count: Number of points; defaults to ``sample_count``

        Returns:
            Curve of ``count`` points from start to end inclusive
        """
        count = self.sample_count if count is None else count
        if count < 2:
            raise ValueError(f"Cannot resample a reference to {count} points")
        return Curve.from_array(
            interpolate_line((self.start.x, self.start.y), (self.end.x, self.end.y), count)
        )
