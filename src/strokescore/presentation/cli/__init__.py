"""Command-line interface modules."""

from .score_strokes import main as score_strokes_main
from .stroke_demo import main as stroke_demo_main

__all__ = [
    "score_strokes_main",
    "stroke_demo_main",
]
