"""Bubble outline builder — one closed contour per call.

build(rect, config) is pure: same inputs, same segments, nothing cached.
The contour starts on the edge preceding the caret edge, at the beginning
of the corner arc, and runs clockwise on screen:

    corner arc → run → caret → run → corner arc → run → ... → back to start

The three plain edges and the caret edge share one routine; the per-edge
differences live in the frame table (see frames.py).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from svgpathtools import Arc, Line, Path

from speechbubble.engine.caret import CaretGeometry, caret_fits, caret_segments, resolve_caret
from speechbubble.engine.frames import EDGE_ORDER, FRAMES, corner_points
from speechbubble.models.rect import BoundingRect, RectLike
from speechbubble.models.shape_config import CaretEdge, ShapeConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BubbleOutline:
    """A built contour plus what the builder decided along the way."""

    path: Path
    # None when corner proximity suppressed the caret
    caret: CaretGeometry | None
    # Construction rectangle after the inset
    rect: BoundingRect
    corner_radius: float

    @property
    def caret_honored(self) -> bool:
        return self.caret is not None


def effective_corner_radius(rect: BoundingRect, config: ShapeConfig) -> float:
    """Corner radius after the inset, kept within [0, half the shorter side]."""
    radius = config.corner_radius - config.inset_amount
    return max(0.0, min(radius, rect.width / 2, rect.height / 2))


def build_outline(rect: RectLike, config: ShapeConfig) -> BubbleOutline:
    """Build the bubble contour and report whether the caret was drawn."""
    effective = BoundingRect.coerce(rect).inset_by(config.inset_amount)
    radius = effective_corner_radius(effective, config)
    caret = resolve_caret(effective, config)

    corners = corner_points(effective)
    first = EDGE_ORDER.index(CaretEdge(config.edge))
    segments: list = []

    for step in range(4):
        index = (first + step) % 4
        frame = FRAMES[EDGE_ORDER[index]]
        previous = FRAMES[EDGE_ORDER[index - 1]]

        corner = corners[index]
        run_start = corner + radius * frame.tangent
        run_end = corners[(index + 1) % 4] - radius * frame.tangent

        if radius > 0:
            arc_start = corner - radius * previous.tangent
            segments.append(Arc(arc_start, complex(radius, radius), 0.0, False, True, run_start))

        if step == 0 and caret is not None:
            _line_to(segments, run_start, caret.start)
            segments.extend(caret_segments(caret))
            _line_to(segments, caret.end, run_end)
        else:
            _line_to(segments, run_start, run_end)

    if not segments:
        # Zero-size rectangle with square corners: a single point
        logger.debug("Degenerate outline for rect %s", effective.as_tuple())
        segments.append(Line(corners[first], corners[first]))

    return BubbleOutline(path=Path(*segments), caret=caret, rect=effective, corner_radius=radius)


def build(rect: RectLike, config: ShapeConfig) -> Path:
    """Outline path for ``config`` laid out in ``rect``."""
    return build_outline(rect, config).path


def caret_is_honored(rect: RectLike, config: ShapeConfig) -> bool:
    """Whether build() would draw the caret, without building any segments."""
    return caret_fits(BoundingRect.coerce(rect).inset_by(config.inset_amount), config)


def _line_to(segments: list, start: complex, end: complex) -> None:
    """Append a straight run, skipping zero-length ones."""
    if start != end:
        segments.append(Line(start, end))
