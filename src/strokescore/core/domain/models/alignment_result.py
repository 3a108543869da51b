"""Domain model for curve alignment results."""

import sys
from dataclasses import dataclass, field

from .point import Curve


@dataclass(frozen=True)
class AlignmentResult:
    """Contains the best rigid fit of a query curve onto a reference."""

    best_angle: float
    normalized_angle: float
    rotation_magnitude: float
    frechet_distance: float
    scale_factor: float
    aligned_curve: Curve = field(default_factory=Curve)
    reversed: bool = False

    @property
    def is_sentinel(self) -> bool:
        return self.aligned_curve.is_empty and self.frechet_distance == sys.float_info.max

    @staticmethod
    def sentinel() -> "AlignmentResult":
        """Result reported when either curve is empty."""
        return AlignmentResult(
            best_angle=0.0,
            normalized_angle=0.0,
            rotation_magnitude=0.0,
            frechet_distance=sys.float_info.max,
            scale_factor=1.0,
            aligned_curve=Curve(),
        )
