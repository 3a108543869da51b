"""Interface for curve alignment strategies."""

from abc import ABC, abstractmethod

from ..models.point import Curve
from ..models.alignment_result import AlignmentResult


class CurveAligner(ABC):
    """Abstract base class for curve alignment strategies."""

    @abstractmethod
    def align(self, query: Curve, reference: Curve) -> AlignmentResult:
        """
        Fit a query curve onto a reference curve.

        Args:
            query: Curve to transform (the captured stroke)
            reference: Curve that stays fixed

        Returns:
            AlignmentResult describing the best transform found
        """
        pass
