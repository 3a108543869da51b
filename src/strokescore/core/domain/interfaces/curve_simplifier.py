"""Interface for curve simplification strategies."""

from abc import ABC, abstractmethod

from ..models.point import Curve
from ..models.simplification_result import SimplificationResult


class CurveSimplifier(ABC):
    """Abstract base class for curve simplification strategies."""

    @abstractmethod
    def analyze(self, curve: Curve, epsilon: float) -> SimplificationResult:
        """
        Simplify a curve and measure what was discarded.

        Args:
            curve: Curve to simplify
            epsilon: Tolerance below which detail is dropped

        Returns:
            SimplificationResult with the skeleton and its noise penalty
        """
        pass
