"""BubbleShape — the render-time face of the builder.

Hosts call ``path(rect)`` once per layout pass with the rectangle they
assigned, and ``inset(amount)`` when a border is stroked inside the fill.
"""

from __future__ import annotations

from dataclasses import dataclass

from svgpathtools import Path

from speechbubble.engine.outline import BubbleOutline, build, build_outline
from speechbubble.models.rect import RectLike
from speechbubble.models.shape_config import ShapeConfig


@dataclass(frozen=True)
class BubbleShape:
    config: ShapeConfig

    def path(self, rect: RectLike) -> Path:
        return build(rect, self.config)

    def outline(self, rect: RectLike) -> BubbleOutline:
        return build_outline(rect, self.config)

    def inset(self, amount: float) -> BubbleShape:
        """Equivalent shape whose contour is shrunk by ``amount``; self is untouched."""
        return BubbleShape(self.config.with_inset(amount))
