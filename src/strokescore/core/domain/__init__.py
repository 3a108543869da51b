"""Core domain models and interfaces."""

from .models import (
    AlignmentResult,
    Curve,
    Point,
    ReferenceLine,
    ScoreResult,
    ScoreStatus,
    ScoringOptions,
    SimplificationResult,
)
from .interfaces import CurveAligner, CurveSimplifier, ScorePenalty

__all__ = [
    "Point",
    "Curve",
    "ReferenceLine",
    "AlignmentResult",
    "SimplificationResult",
    "ScoreResult",
    "ScoreStatus",
    "ScoringOptions",
    "CurveAligner",
    "CurveSimplifier",
    "ScorePenalty",
]
