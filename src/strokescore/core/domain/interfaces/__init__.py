"""Strategy interfaces for the comparison engine."""

from .curve_aligner import CurveAligner
from .curve_simplifier import CurveSimplifier
from .score_penalty import ScorePenalty

__all__ = [
    "CurveAligner",
    "CurveSimplifier",
    "ScorePenalty",
]
