"""Core scoring services."""

from .alignment_service import AlignmentService
from .scoring_service import ScoringService, distance_to_score

__all__ = [
    "AlignmentService",
    "ScoringService",
    "distance_to_score",
]
