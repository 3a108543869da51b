"""Service for stroke-to-reference alignment."""

import logging
from typing import Optional

from ..domain.interfaces.curve_aligner import CurveAligner
from ..domain.models.alignment_result import AlignmentResult
from ..domain.models.point import Curve
from ..utils.benchmarking import PerformanceStats, timer

logger = logging.getLogger(__name__)


class AlignmentService:
    """Service for performing curve alignments."""

    def __init__(
        self,
        aligner: Optional[CurveAligner] = None,
        stats: Optional[PerformanceStats] = None,
    ):
        """Initialize service with an alignment strategy."""
        from ..domain.implementations.rotation_search_aligner import RotationSearchAligner

        self._aligner = aligner or RotationSearchAligner()
        self._stats = stats

    @property
    def aligner(self) -> CurveAligner:
        return self._aligner

    def align_curves(self, query: Curve, reference: Curve) -> AlignmentResult:
        """
        Align a captured stroke onto a reference curve.

        Args:
            query: Captured stroke
            reference: Reference curve

        Returns:
            AlignmentResult; the sentinel result if either curve is empty
        """
        if query.is_empty or reference.is_empty:
            return AlignmentResult.sentinel()

        with timer("align", self._stats, points=len(query)):
            result = self._aligner.align(query, reference)

        logger.info(
            "Aligned %d-point stroke: angle %.2f, Fréchet %.3f, scale %.3f",
            len(query),
            result.normalized_angle,
            result.frechet_distance,
            result.scale_factor,
        )
        return result
