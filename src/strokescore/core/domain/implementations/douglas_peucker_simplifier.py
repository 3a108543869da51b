"""Douglas-Peucker simplification and the noise penalty derived from it."""

import logging
from typing import List

import numpy as np

from ...utils.geometry import as_coordinates, point_line_distances, point_segment_distances
from ..interfaces.curve_simplifier import CurveSimplifier
from ..models.point import Curve
from ..models.simplification_result import SimplificationResult

logger = logging.getLogger(__name__)


class DouglasPeuckerSimplifier(CurveSimplifier):
    """
    Reduce a curve to its skeleton with the Douglas-Peucker algorithm.

    This simplifier:
    1. Keeps the point farthest from the chord of each range when it lies
       more than epsilon away, and splits the range there
    2. Scores the discarded detail as the summed distance of every original
       point to the nearest segment of the skeleton
    """

    def analyze(self, curve: Curve, epsilon: float) -> SimplificationResult:
        """
        Simplify a curve and compute its noise penalty.

        Args:
            curve: Curve to analyze
            epsilon: Distance tolerance for dropping points

        Returns:
            SimplificationResult; empty with zero penalty for curves under
            two points
        """
        if len(curve) < 2:
            return SimplificationResult(simplified_curve=Curve(), total_penalty=0.0)

        simplified = self.simplify(curve, epsilon)
        penalty = self.noise_penalty(curve, simplified)
        logger.debug(
            "Simplified %d points to %d (epsilon %.3f), penalty %.4f",
            len(curve),
            len(simplified),
            epsilon,
            penalty,
        )
        return SimplificationResult(simplified_curve=simplified, total_penalty=penalty)

    def simplify(self, curve: Curve, epsilon: float) -> Curve:
        """
        Douglas-Peucker skeleton of a curve.

        Args:
            curve: Curve to simplify
            epsilon: Points closer than this to the local chord are dropped

        Returns:
            Ordered subsequence of the curve's points, always ending with
            the original last point
        """
        if epsilon < 0:
            raise ValueError(f"epsilon must be non-negative, got {epsilon}")
        if len(curve) < 2:
            return Curve(curve.points)

        coords = curve.to_array()
        kept = self._kept_indices(coords, epsilon)
        kept.append(len(coords) - 1)
        return Curve(tuple(curve.points[i] for i in kept))

    @staticmethod
    def _kept_indices(coords: np.ndarray, epsilon: float) -> List[int]:
        """
        Start indices emitted by the recursive split, in curve order.

        An explicit stack replaces recursion; ranges are popped left to
        right so the output order matches the recursive formulation.
        """
        kept = []
        stack = [(0, len(coords) - 1)]
        while stack:
            first, last = stack.pop()
            if last - first < 2:
                kept.append(first)
                continue

            distances = point_line_distances(coords[first + 1 : last], coords[first], coords[last])
            offset = int(np.argmax(distances))
            if distances[offset] > epsilon:
                split = first + 1 + offset
                stack.append((split, last))
                stack.append((first, split))
            else:
                kept.append(first)
        return kept

    @staticmethod
    def noise_penalty(original, simplified) -> float:
        """
        Summed distance of original points to the simplified polyline.

        Args:
            original: Curve that was simplified
            simplified: Its skeleton

        Returns:
            Sum over original points of the distance to the nearest skeleton
            segment; 0 when the skeleton has fewer than two points
        """
        points = as_coordinates(original)
        skeleton = as_coordinates(simplified)
        if len(skeleton) < 2 or len(points) == 0:
            return 0.0
        distances = point_segment_distances(points, skeleton[:-1], skeleton[1:])
        return float(distances.min(axis=1).sum())
