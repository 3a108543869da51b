"""Score penalties applied by the scoring service."""

from typing import Optional

from ...config import (
    ANGLE_PENALTY_MAX_DEGREES,
    ANGLE_PENALTY_MIN_DEGREES,
    ANGLE_PENALTY_POINTS,
    NOISE_PENALTY_WEIGHT,
)
from ..interfaces.score_penalty import ScorePenalty
from ..models.alignment_result import AlignmentResult
from ..models.score_result import ScoringOptions
from ..models.simplification_result import SimplificationResult


class AnglePenalty(ScorePenalty):
    """
    Deduct points for a stroke drawn at the wrong orientation.

    Near-zero misrotation is tolerated, and so is a near-180 degree turn,
    which is how a stroke traced in the opposite direction shows up.
    """

    name = "angle"

    def __init__(
        self,
        min_degrees: float = ANGLE_PENALTY_MIN_DEGREES,
        max_degrees: float = ANGLE_PENALTY_MAX_DEGREES,
        max_points: float = ANGLE_PENALTY_POINTS,
    ):
        self.min_degrees = min_degrees
        self.max_degrees = max_degrees
        self.max_points = max_points

    def is_enabled(self, options: ScoringOptions) -> bool:
        return options.angle_penalty

    def compute(
        self,
        alignment: AlignmentResult,
        simplification: Optional[SimplificationResult] = None,
    ) -> float:
        magnitude = alignment.rotation_magnitude
        if self.min_degrees < magnitude < self.max_degrees:
            return self.max_points * magnitude / 180.0
        return 0.0


class NoisePenalty(ScorePenalty):
    """Deduct ``weight`` points per unit of Douglas-Peucker noise penalty."""

    name = "noise"

    def __init__(self, weight: float = NOISE_PENALTY_WEIGHT):
        if weight < 0:
            raise ValueError(f"Noise weight must be non-negative, got {weight}")
        self.weight = weight

    def is_enabled(self, options: ScoringOptions) -> bool:
        return options.noise_diagnostic

    def compute(
        self,
        alignment: AlignmentResult,
        simplification: Optional[SimplificationResult] = None,
    ) -> float:
        if simplification is None:
            return 0.0
        return self.weight * simplification.total_penalty
