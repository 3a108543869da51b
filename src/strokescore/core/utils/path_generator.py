"""Synthetic stroke producers used by tests and the demo command."""

import math
from typing import Optional

import numpy as np

from ..domain.models.point import Curve, Point
from .geometry import interpolate_line


class PathGenerator:
    """
    Deterministic and seeded-random stroke shapes between two endpoints.

    Randomness comes from a private ``numpy.random.Generator`` so two
    generators built with the same seed produce the same strokes.
    """

    def __init__(self, seed: Optional[int] = None):
        self._rng = np.random.default_rng(seed)

    @staticmethod
    def _line(start: Point, end: Point, steps: int) -> np.ndarray:
        return interpolate_line((start.x, start.y), (end.x, end.y), max(steps, 2))

    @staticmethod
    def _unit_normal(start: Point, end: Point) -> np.ndarray:
        dx, dy = end.x - start.x, end.y - start.y
        length = math.hypot(dx, dy)
        if length == 0:
            raise ValueError("Start and end must differ to define a normal")
        return np.array([-dy / length, dx / length])

    @staticmethod
    def _parameters(steps: int) -> np.ndarray:
        steps = max(steps, 2)
        return np.arange(steps, dtype=float) / (steps - 1)

    def perfect_line(self, start: Point, end: Point, steps: int) -> Curve:
        """Evenly spaced points on the segment, endpoints included."""
        return Curve.from_array(self._line(start, end, steps))

    def noisy_line(self, start: Point, end: Point, steps: int, max_noise: float) -> Curve:
        """Line with uniform per-axis jitter in [-max_noise, max_noise]; endpoints stay exact."""
        coords = self._line(start, end, steps)
        coords = coords + self._rng.uniform(-max_noise, max_noise, size=coords.shape)
        coords[0] = (start.x, start.y)
        coords[-1] = (end.x, end.y)
        return Curve.from_array(coords)

    def rotated_line(self, start: Point, end: Point, steps: int, angle_degrees: float) -> Curve:
        """Perfect line rotated counter-clockwise about its centroid."""
        line = self.perfect_line(start, end, steps)
        return line.rotated(angle_degrees, line.centroid())

    def arc(self, start: Point, end: Point, steps: int, curvature: float) -> Curve:
        """Quadratic Bézier bulge whose control point sits ``curvature`` off the midpoint."""
        t = self._parameters(steps)[:, None]
        p0 = np.array([start.x, start.y])
        p2 = np.array([end.x, end.y])
        control = (p0 + p2) / 2 + self._unit_normal(start, end) * curvature
        coords = (1 - t) ** 2 * p0 + 2 * (1 - t) * t * control + t ** 2 * p2
        return Curve.from_array(coords)

    def sinusoid(
        self, start: Point, end: Point, steps: int, frequency: float, amplitude: float
    ) -> Curve:
        """Line with a perpendicular sine offset of ``frequency`` waves."""
        t = self._parameters(steps)
        offsets = np.sin(t * math.pi * 2 * frequency) * amplitude
        coords = self._line(start, end, steps) + offsets[:, None] * self._unit_normal(start, end)
        return Curve.from_array(coords)

    def spiky_line(
        self, start: Point, end: Point, steps: int, num_spikes: int, spike_height: float
    ) -> Curve:
        """Line with a sawtooth spike on the last tenth of each of ``num_spikes`` periods."""
        t = self._parameters(steps)
        phase = (t * num_spikes) % 1.0
        offsets = np.where(phase > 0.9, spike_height, 0.0)
        coords = self._line(start, end, steps) + offsets[:, None] * self._unit_normal(start, end)
        return Curve.from_array(coords)

    def overlapping_line(self, start: Point, end: Point, steps: int) -> Curve:
        """Line that runs to 70%, doubles back to 50%, then finishes at the end."""
        t = self._parameters(steps)
        adjusted = np.where(
            t < 0.5,
            t * 1.4,
            np.where(t < 0.75, 0.7 - (t - 0.5) * 0.8, 0.5 + (t - 0.75) * 2.0),
        )
        p0 = np.array([start.x, start.y])
        p1 = np.array([end.x, end.y])
        return Curve.from_array(p0 + (p1 - p0) * adjusted[:, None])
