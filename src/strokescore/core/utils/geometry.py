# src/strokescore/core/utils/geometry.py

"""Vectorized plane geometry shared by the metric, aligner and simplifier."""

from typing import Sequence, Tuple

import numpy as np


def as_coordinates(points) -> np.ndarray:
    """
    Coerce a Curve or array-like into an (n, 2) float array.

    Args:
        points: Curve, sequence of (x, y) pairs, or ndarray

    Returns:
        Array of shape (n, 2); empty input yields shape (0, 2)
    """
    if hasattr(points, "to_array"):
        return points.to_array()
    arr = np.asarray(points, dtype=float)
    if arr.size == 0:
        return np.empty((0, 2), dtype=float)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"Expected coordinates of shape (n, 2), got {arr.shape}")
    return arr


def rotate_coordinates(
    coords: np.ndarray,
    angle_degrees: float,
    center: Tuple[float, float] = (0.0, 0.0),
) -> np.ndarray:
    """Rotate (n, 2) coordinates counter-clockwise about ``center``."""
    return rotate_many(coords, np.array([angle_degrees]), center)[0]


def rotate_many(
    coords: np.ndarray,
    angles_degrees: Sequence[float],
    center: Tuple[float, float] = (0.0, 0.0),
) -> np.ndarray:
    """
    Rotate one curve by several angles at once.

    Returns:
        Array of shape (k, n, 2), one rotated copy per angle
    """
    origin = np.asarray(center, dtype=float)
    offsets = np.asarray(coords, dtype=float) - origin
    radians = np.radians(np.asarray(angles_degrees, dtype=float))
    cos = np.cos(radians)[:, None]
    sin = np.sin(radians)[:, None]
    dx = offsets[None, :, 0]
    dy = offsets[None, :, 1]
    rotated = np.stack([dx * cos - dy * sin, dx * sin + dy * cos], axis=-1)
    return rotated + origin


def point_line_distances(points: np.ndarray, a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """
    Distances from points to the infinite line through ``a`` and ``b``.

    Uses twice the triangle area over the base length. A zero-length base
    falls back to the distance to ``a``.
    """
    px, py = points[:, 0], points[:, 1]
    area = np.abs(
        (a[0] * b[1] + b[0] * py + px * a[1]) - (a[1] * b[0] + b[1] * px + py * a[0])
    )
    base = float(np.hypot(b[0] - a[0], b[1] - a[1]))
    if base == 0:
        return np.hypot(px - a[0], py - a[1])
    return area / base


def point_segment_distances(points: np.ndarray, starts: np.ndarray, ends: np.ndarray) -> np.ndarray:
    """
    Distances from every point to every segment.

    Args:
        points: (n, 2) query points
        starts: (s, 2) segment start points
        ends: (s, 2) segment end points

    Returns:
        (n, s) matrix of point-to-segment distances, projection clamped to [0, 1]
    """
    seg = ends - starts
    seg_len_sq = np.sum(seg * seg, axis=1)
    rel = points[:, None, :] - starts[None, :, :]
    with np.errstate(divide="ignore", invalid="ignore"):
        t = np.sum(rel * seg[None, :, :], axis=2) / seg_len_sq[None, :]
    # Degenerate segments project onto their start point
    t = np.where(seg_len_sq[None, :] == 0.0, 0.0, np.clip(t, 0.0, 1.0))
    nearest = starts[None, :, :] + t[:, :, None] * seg[None, :, :]
    diff = points[:, None, :] - nearest
    return np.sqrt(np.sum(diff * diff, axis=2))


def interpolate_line(start: Tuple[float, float], end: Tuple[float, float], count: int) -> np.ndarray:
    """``count`` evenly spaced points from ``start`` to ``end`` inclusive."""
    ratios = np.arange(count, dtype=float) / (count - 1)
    start_arr = np.asarray(start, dtype=float)
    end_arr = np.asarray(end, dtype=float)
    return start_arr + (end_arr - start_arr) * ratios[:, None]
