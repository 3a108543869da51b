"""Domain model classes."""

from .point import Point, Curve
from .reference_line import ReferenceLine
from .alignment_result import AlignmentResult
from .simplification_result import SimplificationResult
from .score_result import ScoreResult, ScoreStatus, ScoringOptions

__all__ = [
    "Point",
    "Curve",
    "ReferenceLine",
    "AlignmentResult",
    "SimplificationResult",
    "ScoreResult",
    "ScoreStatus",
    "ScoringOptions",
]
