#!/usr/bin/env python3
# src/strokescore/core/domain/models/point.py

"""
Domain models for plane points and ordered curves.
"""

from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple, Union, overload

import numpy as np

from ...utils.geometry import rotate_coordinates


@dataclass(frozen=True)
class Point:
    """A point in the drawing plane."""

    x: float
    y: float

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return float(np.hypot(self.x - other.x, self.y - other.y))


@dataclass(frozen=True)
class Curve:
    """
    Ordered, immutable sequence of points.

    Traversal order is meaningful: it is the direction the stroke was drawn
    in. Every transform returns a new Curve.
    """

    points: Tuple[Point, ...] = ()

    def __post_init__(self):
        # Accept any iterable of points but always store a tuple
        object.__setattr__(self, "points", tuple(self.points))

    @classmethod
    def from_array(cls, coords: Union[np.ndarray, Sequence[Sequence[float]]]) -> "Curve":
        """
        Build a curve from an (n, 2) array-like of coordinates.

        Raises:
            ValueError: If the input cannot be read as (n, 2) coordinates
        """
        arr = np.asarray(coords, dtype=float)
        if arr.size == 0:
            return cls()
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise ValueError(f"Expected coordinates of shape (n, 2), got {arr.shape}")
        return cls(tuple(Point(float(x), float(y)) for x, y in arr))

    @classmethod
    def from_flat(cls, values: Sequence[float]) -> "Curve":
        """Build a curve from interleaved x0, y0, x1, y1, ... values."""
        if len(values) % 2:
            raise ValueError("Flat coordinate list must have an even length")
        return cls(
            tuple(
                Point(float(values[i]), float(values[i + 1]))
                for i in range(0, len(values), 2)
            )
        )

    def to_array(self) -> np.ndarray:
        """Coordinates as a new (n, 2) float array."""
        if not self.points:
            return np.empty((0, 2), dtype=float)
        return np.array([(p.x, p.y) for p in self.points], dtype=float)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    @overload
    def __getitem__(self, index: int) -> Point: ...

    @overload
    def __getitem__(self, index: slice) -> "Curve": ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Curve(self.points[index])
        return self.points[index]

    @property
    def is_empty(self) -> bool:
        return not self.points

    @property
    def first(self) -> Point:
        return self.points[0]

    @property
    def last(self) -> Point:
        return self.points[-1]

    def endpoint_span(self) -> float:
        """Distance between the first and last point (0 for empty curves)."""
        if not self.points:
            return 0.0
        return self.first.distance_to(self.last)

    def centroid(self) -> Point:
        """Arithmetic mean of all points."""
        if not self.points:
            raise ValueError("Centroid of an empty curve is undefined")
        cx, cy = self.to_array().mean(axis=0)
        return Point(float(cx), float(cy))

    def reversed(self) -> "Curve":
        return Curve(self.points[::-1])

    def scaled(self, factor: float) -> "Curve":
        """Uniform scale about the origin."""
        return Curve.from_array(self.to_array() * factor)

    def translated(self, dx: float, dy: float) -> "Curve":
        return Curve.from_array(self.to_array() + np.array([dx, dy]))

    def rotated(self, angle_degrees: float, center: Point = Point(0.0, 0.0)) -> "Curve":
        """Counter-clockwise rotation about ``center``."""
        return Curve.from_array(
            rotate_coordinates(self.to_array(), angle_degrees, (center.x, center.y))
        )
