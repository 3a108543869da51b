"""Stroke scoring against reference curves by discrete Fréchet distance."""

from .core import (
    AlignmentResult,
    AlignmentService,
    Curve,
    Point,
    ReferenceLine,
    ScoreResult,
    ScoreStatus,
    ScoringOptions,
    ScoringService,
    SimplificationResult,
)

__version__ = "0.1.0"

__all__ = [
    "Point",
    "Curve",
    "ReferenceLine",
    "AlignmentResult",
    "SimplificationResult",
    "ScoreResult",
    "ScoreStatus",
    "ScoringOptions",
    "AlignmentService",
    "ScoringService",
]
