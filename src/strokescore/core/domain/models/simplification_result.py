"""Domain model for curve simplification results."""

from dataclasses import dataclass

from .point import Curve


@dataclass(frozen=True)
class SimplificationResult:
    """Skeleton of a curve and the detail discarded to obtain it."""

    simplified_curve: Curve
    total_penalty: float
