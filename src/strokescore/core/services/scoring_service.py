# src/strokescore/core/services/scoring_service.py
"""Service turning a captured stroke into a bounded score."""

import logging
from typing import Dict, Optional, Sequence

from ..config import (
    DECIMATION_STRIDE,
    DMAX_FRACTION,
    MAX_SCORE,
    MIN_SCORE,
    NOISE_EPSILON,
)
from ..domain.implementations.douglas_peucker_simplifier import DouglasPeuckerSimplifier
from ..domain.implementations.penalties import AnglePenalty, NoisePenalty
from ..domain.interfaces.curve_aligner import CurveAligner
from ..domain.interfaces.curve_simplifier import CurveSimplifier
from ..domain.interfaces.score_penalty import ScorePenalty
from ..domain.models.point import Curve
from ..domain.models.reference_line import ReferenceLine
from ..domain.models.score_result import ScoreResult, ScoringOptions
from ..domain.models.simplification_result import SimplificationResult
from ..utils.benchmarking import PerformanceStats, timer
from .alignment_service import AlignmentService

logger = logging.getLogger(__name__)


def clamp_score(value: float) -> float:
    """Clamp a score to [MIN_SCORE, MAX_SCORE]."""
    return max(MIN_SCORE, min(MAX_SCORE, value))


def distance_to_score(frechet_distance: float, reference_length: float) -> float:
    """
    Map a Fréchet distance to a score.

    A distance of a quarter of the reference length or more scores 0, a
    perfect match scores 100, linearly in between.
    """
    d_max = reference_length * DMAX_FRACTION
    if d_max <= 0:
        return MAX_SCORE if frechet_distance == 0 else MIN_SCORE
    normalized = min(frechet_distance, d_max)
    return clamp_score(MAX_SCORE * (1.0 - normalized / d_max))


class ScoringService:
    """
    Score freehand strokes against a reference line.

    Each call is independent: the reference is resampled to the stroke's
    point count, the stroke is aligned onto it, the distance is mapped to
    [0, 100], and the enabled penalties are subtracted.
    """

    def __init__(
        self,
        aligner: Optional[CurveAligner] = None,
        simplifier: Optional[CurveSimplifier] = None,
        penalties: Optional[Sequence[ScorePenalty]] = None,
        stats: Optional[PerformanceStats] = None,
    ):
        """
        Initialize scoring service.

        Args:
            aligner: Alignment strategy; defaults to RotationSearchAligner
            simplifier: Simplification strategy for the noise diagnostic
            penalties: Penalties applied in order; defaults to the angle
                penalty and a zero-weight noise penalty
            stats: Optional collector for per-stage timings
        """
        self._alignment_service = AlignmentService(aligner, stats=stats)
        self._simplifier = simplifier or DouglasPeuckerSimplifier()
        self._penalties = list(penalties) if penalties is not None else [
            AnglePenalty(),
            NoisePenalty(),
        ]
        self._stats = stats

    def score(
        self,
        user_curve: Curve,
        reference: ReferenceLine,
        options: Optional[ScoringOptions] = None,
    ) -> ScoreResult:
        """
        Score a captured stroke.

        Args:
            user_curve: Stroke as captured, in drawing-surface coordinates
            reference: Reference line definition
            options: Scoring toggles; all disabled by default

        Returns:
            ScoreResult; status TOO_SHORT when fewer than two points remain
        """
        options = options or ScoringOptions()

        if len(user_curve) < 2:
            logger.info("Stroke too short to score (%d points)", len(user_curve))
            return ScoreResult.too_short_result()

        if options.decimate:
            user_curve = user_curve[::DECIMATION_STRIDE]
            if len(user_curve) < 2:
                logger.info("Stroke too short after decimation (%d points)", len(user_curve))
                return ScoreResult.too_short_result()

        resampled = reference.resample(len(user_curve))
        alignment = self._alignment_service.align_curves(user_curve, resampled)

        raw_score = distance_to_score(alignment.frechet_distance, reference.length)

        simplification: Optional[SimplificationResult] = None
        if options.noise_diagnostic:
            with timer("simplify", self._stats, points=len(alignment.aligned_curve)):
                simplification = self._simplifier.analyze(alignment.aligned_curve, NOISE_EPSILON)

        applied: Dict[str, float] = {}
        final_score = raw_score
        for penalty in self._penalties:
            if not penalty.is_enabled(options):
                continue
            amount = penalty.compute(alignment, simplification)
            applied[penalty.name] = amount
            final_score -= amount
        final_score = clamp_score(final_score)

        logger.info(
            "Score %.1f/100 (raw %.1f, Fréchet %.2f, angle %.2f)",
            final_score,
            raw_score,
            alignment.frechet_distance,
            alignment.normalized_angle,
        )

        return ScoreResult(
            angle=alignment.normalized_angle,
            frechet_distance=alignment.frechet_distance,
            scale_factor=alignment.scale_factor,
            final_score=final_score,
            aligned_curve=alignment.aligned_curve,
            raw_score=raw_score,
            rotation_magnitude=alignment.rotation_magnitude,
            penalties=applied,
            noise_penalty=simplification.total_penalty if simplification else None,
            simplified_curve=simplification.simplified_curve if simplification else None,
        )
