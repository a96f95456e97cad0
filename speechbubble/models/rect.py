"""Bounding rectangle value used by the outline builder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class BoundingRect:
    """Axis-aligned rectangle in y-down coordinates: (min_x, min_y, max_x, max_y)."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def coerce(cls, rect: RectLike) -> BoundingRect:
        """Accept a BoundingRect or an (xmin, ymin, xmax, ymax) tuple."""
        if isinstance(rect, BoundingRect):
            return rect
        xmin, ymin, xmax, ymax = rect
        return cls(float(xmin), float(ymin), float(xmax), float(ymax))

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def inset_by(self, dx: float, dy: float | None = None) -> BoundingRect:
        """Shrink every side by dx (horizontal) and dy (vertical, defaults to dx).

        Negative amounts grow the rectangle. Nothing is clamped, so a large inset
        produces a rectangle with negative width or height.
        """
        if dy is None:
            dy = dx
        return BoundingRect(self.min_x + dx, self.min_y + dy, self.max_x - dx, self.max_y - dy)

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.min_x, self.min_y, self.max_x, self.max_y)


RectLike = Union[BoundingRect, tuple[float, float, float, float]]
