"""Interface for deductions applied to a stroke score."""

from abc import ABC, abstractmethod
from typing import Optional

from ..models.alignment_result import AlignmentResult
from ..models.score_result import ScoringOptions
from ..models.simplification_result import SimplificationResult


class ScorePenalty(ABC):
    """Abstract base class for score penalties."""

    name: str = "penalty"

    @abstractmethod
    def is_enabled(self, options: ScoringOptions) -> bool:
        """Whether the penalty participates under the given toggles."""
        pass

    @abstractmethod
    def compute(
        self,
        alignment: AlignmentResult,
        simplification: Optional[SimplificationResult] = None,
    ) -> float:
        """
        Amount to subtract from the score.

        Args:
            alignment: Alignment of the stroke onto the reference
            simplification: Noise analysis, when it was run

        Returns:
            Non-negative number of points to subtract
        """
        pass
