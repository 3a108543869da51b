"""Repository implementations."""

from .stroke_repository import StrokeRepository

__all__ = ["StrokeRepository"]
