"""Concrete strategies of the comparison engine."""

from .frechet_distance import discrete_frechet, discrete_frechet_batch
from .rotation_search_aligner import RotationCandidate, RotationSearchAligner
from .douglas_peucker_simplifier import DouglasPeuckerSimplifier
from .penalties import AnglePenalty, NoisePenalty

__all__ = [
    "discrete_frechet",
    "discrete_frechet_batch",
    "RotationCandidate",
    "RotationSearchAligner",
    "DouglasPeuckerSimplifier",
    "AnglePenalty",
    "NoisePenalty",
]
