"""Bubble outline builder."""

from speechbubble.engine.caret import CaretGeometry, caret_points
from speechbubble.engine.outline import BubbleOutline, build, build_outline, caret_is_honored

__all__ = [
    "CaretGeometry",
    "caret_is_honored",
    "caret_points",
    "BubbleOutline",
    "build",
    "build_outline",
]
