"""Infrastructure implementations of core interfaces."""

from .repositories.stroke_repository import StrokeRepository

__all__ = [
    "StrokeRepository",
]
