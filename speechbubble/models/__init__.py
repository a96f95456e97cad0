"""Value types: rectangles and shape configuration."""

from speechbubble.models.rect import BoundingRect, RectLike
from speechbubble.models.shape_config import CaretEdge, CaretPositionType, ShapeConfig

__all__ = [
    "BoundingRect",
    "RectLike",
    "CaretEdge",
    "CaretPositionType",
    "ShapeConfig",
]
