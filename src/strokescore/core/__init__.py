"""Core domain models, interfaces and services for stroke comparison."""

from .domain.models.point import Point, Curve
from .domain.models.reference_line import ReferenceLine
from .domain.models.alignment_result import AlignmentResult
from .domain.models.simplification_result import SimplificationResult
from .domain.models.score_result import ScoreResult, ScoreStatus, ScoringOptions
from .domain.interfaces.curve_aligner import CurveAligner
from .domain.interfaces.curve_simplifier import CurveSimplifier
from .domain.interfaces.score_penalty import ScorePenalty
from .services.alignment_service import AlignmentService
from .services.scoring_service import ScoringService

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
    "AlignmentService",
    "ScoringService",
]
