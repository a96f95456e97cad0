"""Edge frames — per-edge basis vectors and caret base-center resolution.

Points are complex numbers (x + y·j) in y-down coordinates, the same
convention svgpathtools uses. The contour runs clockwise on screen, so each
edge's tangent points along the traversal and its outward normal is the
tangent turned a quarter-turn counter-clockwise on screen.
"""

from __future__ import annotations

from dataclasses import dataclass

from speechbubble.models.rect import BoundingRect
from speechbubble.models.shape_config import CaretEdge, CaretPositionType, ShapeConfig


@dataclass(frozen=True)
class EdgeFrame:
    edge: CaretEdge
    # Unit vector along the clockwise traversal of this edge
    tangent: complex
    # Unit vector pointing out of the rectangle
    normal: complex
    # True when the caret position is measured along x (TOP/BOTTOM)
    horizontal: bool


# Clockwise on screen, starting at the top-left corner.
EDGE_ORDER: tuple[CaretEdge, ...] = (
    CaretEdge.TOP,
    CaretEdge.RIGHT,
    CaretEdge.BOTTOM,
    CaretEdge.LEFT,
)

FRAMES: dict[CaretEdge, EdgeFrame] = {
    CaretEdge.TOP: EdgeFrame(CaretEdge.TOP, tangent=1 + 0j, normal=-1j, horizontal=True),
    CaretEdge.RIGHT: EdgeFrame(CaretEdge.RIGHT, tangent=1j, normal=1 + 0j, horizontal=False),
    CaretEdge.BOTTOM: EdgeFrame(CaretEdge.BOTTOM, tangent=-1 + 0j, normal=1j, horizontal=True),
    CaretEdge.LEFT: EdgeFrame(CaretEdge.LEFT, tangent=-1j, normal=-1 + 0j, horizontal=False),
}


def frame_for(edge: CaretEdge) -> EdgeFrame:
    return FRAMES[CaretEdge(edge)]


def corner_points(rect: BoundingRect) -> tuple[complex, complex, complex, complex]:
    """Sharp corners in traversal order: top-left, top-right, bottom-right, bottom-left.

    Corner ``i`` is where edge ``EDGE_ORDER[i]`` begins.
    """
    return (
        complex(rect.min_x, rect.min_y),
        complex(rect.max_x, rect.min_y),
        complex(rect.max_x, rect.max_y),
        complex(rect.min_x, rect.max_y),
    )


def edge_span(rect: BoundingRect, edge: CaretEdge) -> tuple[float, float]:
    """(min, max) coordinate of the edge along its measuring axis."""
    if frame_for(edge).horizontal:
        return rect.min_x, rect.max_x
    return rect.min_y, rect.max_y


def resolve_along(rect: BoundingRect, config: ShapeConfig) -> float:
    """Caret base-center coordinate along the edge's axis."""
    start, end = edge_span(rect, config.edge)
    position = config.caret_position

    if config.caret_position_type == CaretPositionType.NORMALIZED:
        factor = max(0.0, min(1.0, position))
        return start + (end - start) * factor
    if config.caret_position_type == CaretPositionType.INSET_FROM_START:
        return start + position
    return end - position


def resolve_base_center(rect: BoundingRect, config: ShapeConfig) -> complex:
    """Caret base center, pinned to the edge line."""
    along = resolve_along(rect, config)
    edge = CaretEdge(config.edge)

    if edge == CaretEdge.TOP:
        return complex(along, rect.min_y)
    if edge == CaretEdge.RIGHT:
        return complex(rect.max_x, along)
    if edge == CaretEdge.BOTTOM:
        return complex(along, rect.max_y)
    return complex(rect.min_x, along)
