"""Speech bubble outlines: a rounded rectangle with one caret, as SVG path segments."""

from speechbubble.engine.outline import BubbleOutline, build, build_outline
from speechbubble.models.rect import BoundingRect
from speechbubble.models.shape_config import CaretEdge, CaretPositionType, ShapeConfig
from speechbubble.shape import BubbleShape

__all__ = [
    "BoundingRect",
    "BubbleOutline",
    "BubbleShape",
    "CaretEdge",
    "CaretPositionType",
    "ShapeConfig",
    "build",
    "build_outline",
]
