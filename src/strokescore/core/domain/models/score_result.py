#!/usr/bin/env python3
# src/strokescore/core/domain/models/score_result.py

"""
Domain models for scoring options and scoring results.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional

from .point import Curve


class ScoreStatus(Enum):
    """Outcome of a scoring request."""

    OK = "ok"
    TOO_SHORT = "too_short"


@dataclass(frozen=True)
class ScoringOptions:
    """
    Toggles applied by the scoring service.

    Attributes:
        decimate: Keep only every fourth captured point before scoring
        angle_penalty: Subtract points for a clearly misrotated stroke
        noise_diagnostic: Simplify the aligned stroke and report its noise
        reserved: Extension slot, currently has no effect
        ratio: Extension slot, currently has no effect
    """

    decimate: bool = False
    angle_penalty: bool = False
    noise_diagnostic: bool = False
    reserved: bool = False
    ratio: Optional[float] = None


@dataclass(frozen=True)
class ScoreResult:
    """Bounded score for one stroke plus the diagnostics behind it."""

    angle: float
    frechet_distance: float
    scale_factor: float
    final_score: float
    aligned_curve: Curve = field(default_factory=Curve)
    status: ScoreStatus = ScoreStatus.OK
    raw_score: float = 0.0
    rotation_magnitude: float = 0.0
    penalties: Dict[str, float] = field(default_factory=dict)
    noise_penalty: Optional[float] = None
    simplified_curve: Optional[Curve] = None

    @property
    def too_short(self) -> bool:
        return self.status is ScoreStatus.TOO_SHORT

    @staticmethod
    def too_short_result() -> "ScoreResult":
        """Result for strokes with fewer than two points."""
        return ScoreResult(
            angle=0.0,
            frechet_distance=float("inf"),
            scale_factor=1.0,
            final_score=0.0,
            status=ScoreStatus.TOO_SHORT,
        )

    def summary(self) -> Dict[str, object]:
        """Flat record for tabular reports."""
        return {
            "status": self.status.value,
            "final_score": self.final_score,
            "raw_score": self.raw_score,
            "frechet_distance": self.frechet_distance,
            "angle": self.angle,
            "rotation_magnitude": self.rotation_magnitude,
            "scale_factor": self.scale_factor,
            "noise_penalty": self.noise_penalty,
            "points": len(self.aligned_curve),
        }
