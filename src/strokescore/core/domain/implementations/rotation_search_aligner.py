"""Implementation of curve alignment by exhaustive rotation search."""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from functools import reduce
from typing import Iterable, List, Optional, Tuple

import numpy as np

from ...config import MIN_SCALE_SPAN, ROTATION_CHUNK_SIZE, ROTATION_STEP_DEGREES
from ...utils.geometry import rotate_many
from ..interfaces.curve_aligner import CurveAligner
from ..models.alignment_result import AlignmentResult
from ..models.point import Curve
from .frechet_distance import discrete_frechet_batch

logger = logging.getLogger(__name__)

ORIGINAL, REVERSED = 0, 1


@dataclass(frozen=True)
class RotationCandidate:
    """One evaluated (orientation, angle) pair of the sweep."""

    distance: float
    orientation: int
    angle_index: int

    @property
    def key(self) -> Tuple[float, int, int]:
        # Ties go to the earliest candidate in enumeration order
        return (self.distance, self.orientation, self.angle_index)


def better_candidate(
    best: Optional[RotationCandidate], challenger: RotationCandidate
) -> RotationCandidate:
    """Reduction step of the sweep: keep the candidate with the smaller key."""
    if best is None or challenger.key < best.key:
        return challenger
    return best


def fold_candidates(candidates: Iterable[RotationCandidate]) -> Optional[RotationCandidate]:
    """Reduce candidates to the global best, independent of arrival order."""
    return reduce(better_candidate, candidates, None)


class RotationSearchAligner(CurveAligner):
    """
    Align a query curve onto a reference by brute-force search.

    The query is scaled to the reference's endpoint span, both curves are
    centered on their centroids, and the query is rotated through a full
    turn in both traversal orders. The rotation with the smallest discrete
    Fréchet distance wins.
    """

    def __init__(
        self,
        angle_step: float = ROTATION_STEP_DEGREES,
        chunk_size: int = ROTATION_CHUNK_SIZE,
        max_workers: Optional[int] = None,
    ):
        """
        Initialize aligner.

        Args:
            angle_step: Sweep resolution in degrees; must divide 360 evenly
            chunk_size: Angles evaluated per batched metric call
            max_workers: Evaluate chunks on a thread pool when greater than 1
        """
        if angle_step <= 0:
            raise ValueError(f"angle_step must be positive, got {angle_step}")
        steps = 360.0 / angle_step
        if abs(steps - round(steps)) > 1e-9:
            raise ValueError(f"angle_step must divide 360 evenly, got {angle_step}")
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be at least 1, got {chunk_size}")

        self.angle_step = angle_step
        self.chunk_size = chunk_size
        self.max_workers = max_workers
        self._angle_count = int(round(steps))

    @property
    def angles(self) -> np.ndarray:
        """Swept angles in ascending order, all in [0, 360)."""
        return np.arange(self._angle_count) * self.angle_step

    def align(self, query: Curve, reference: Curve) -> AlignmentResult:
        """
        Align two curves.

        Args:
            query: Captured stroke to transform
            reference: Reference curve

        Returns:
            AlignmentResult in the reference's coordinate frame
        """
        if query.is_empty or reference.is_empty:
            logger.warning("Alignment requested with an empty curve")
            return AlignmentResult.sentinel()

        scale_factor = self._scale_factor(query, reference)

        scaled = query.scaled(scale_factor)
        query_center = scaled.centroid()
        reference_center = reference.centroid()

        centered_query = scaled.translated(-query_center.x, -query_center.y)
        centered_reference = reference.translated(-reference_center.x, -reference_center.y)

        candidates = [centered_query, centered_query.reversed()]
        orientations = [candidate.to_array() for candidate in candidates]
        best = fold_candidates(self._sweep(orientations, centered_reference.to_array()))

        best_angle = float(best.angle_index * self.angle_step)
        aligned = (
            candidates[best.orientation]
            .rotated(best_angle)
            .translated(reference_center.x, reference_center.y)
        )

        normalized_angle = best_angle - 360.0 if best_angle > 180.0 else best_angle

        logger.debug(
            "Best angle %.2f (%s), Fréchet distance %.4f, scale %.4f",
            best_angle,
            "reversed" if best.orientation == REVERSED else "original",
            best.distance,
            scale_factor,
        )

        return AlignmentResult(
            best_angle=best_angle,
            normalized_angle=normalized_angle,
            rotation_magnitude=abs(normalized_angle),
            frechet_distance=best.distance,
            scale_factor=scale_factor,
            aligned_curve=aligned,
            reversed=best.orientation == REVERSED,
        )

    @staticmethod
    def _scale_factor(query: Curve, reference: Curve) -> float:
        """Ratio of endpoint spans, or 1 when either span is degenerate."""
        query_span = query.endpoint_span()
        reference_span = reference.endpoint_span()
        if query_span < MIN_SCALE_SPAN or reference_span < MIN_SCALE_SPAN:
            return 1.0
        return reference_span / query_span

    def _chunks(self) -> List[Tuple[int, int]]:
        return [
            (start, min(start + self.chunk_size, self._angle_count))
            for start in range(0, self._angle_count, self.chunk_size)
        ]

    def _sweep(
        self, orientations: List[np.ndarray], reference: np.ndarray
    ) -> List[RotationCandidate]:
        """Evaluate every chunk of every orientation, one candidate per chunk."""
        tasks = [
            (orientation, start, stop)
            for orientation in range(len(orientations))
            for start, stop in self._chunks()
        ]

        def evaluate(task: Tuple[int, int, int]) -> RotationCandidate:
            orientation, start, stop = task
            return self._evaluate_chunk(
                orientations[orientation], reference, orientation, start, stop
            )

        if self.max_workers and self.max_workers > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                return list(executor.map(evaluate, tasks))
        return [evaluate(task) for task in tasks]

    def _evaluate_chunk(
        self,
        coords: np.ndarray,
        reference: np.ndarray,
        orientation: int,
        start: int,
        stop: int,
    ) -> RotationCandidate:
        angles = np.arange(start, stop) * self.angle_step
        distances = discrete_frechet_batch(rotate_many(coords, angles), reference)

        if logger.isEnabledFor(logging.DEBUG):
            label = "reversed" if orientation == REVERSED else "original"
            for angle, distance in zip(angles, distances):
                if angle % 45 == 0:
                    logger.debug("Angle %.2f (%s) -> Fréchet %.4f", angle, label, distance)

        # argmin returns the first minimum, i.e. the smallest angle on ties
        local = int(np.argmin(distances))
        return RotationCandidate(
            distance=float(distances[local]),
            orientation=orientation,
            angle_index=start + local,
        )
