"""Caret geometry: triangle points, corner suppression and the rounded tip."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from svgpathtools import Line, QuadraticBezier

from speechbubble.engine.frames import edge_span, frame_for, resolve_along, resolve_base_center
from speechbubble.models.rect import BoundingRect
from speechbubble.models.shape_config import CaretEdge, ShapeConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CaretGeometry:
    """Resolved caret, in traversal order start → tip → end."""

    edge: CaretEdge
    base_center: complex
    start: complex
    tip: complex
    end: complex
    # Clamped tip rounding; only used when the configured radius is > 0
    tip_radius: float
    rounded: bool


def caret_points(
    base_center: complex,
    edge: CaretEdge,
    half_width: float,
    height: float,
) -> tuple[complex, complex, complex]:
    """Start, tip and end of the caret triangle for the given edge."""
    frame = frame_for(edge)
    start = base_center - half_width * frame.tangent
    tip = base_center + height * frame.normal
    end = base_center + half_width * frame.tangent
    return start, tip, end


def caret_fits(rect: BoundingRect, config: ShapeConfig) -> bool:
    """False when the caret base center sits within the safe distance of a corner.

    ``rect`` is the construction rectangle (already inset). The safe distance
    uses the configured corner radius, not the inset one.
    """
    along = resolve_along(rect, config)
    start, end = edge_span(rect, config.edge)
    safe = config.safe_distance
    return not (along < start + safe or along > end - safe)


def resolve_caret(rect: BoundingRect, config: ShapeConfig) -> CaretGeometry | None:
    """Caret geometry on ``rect``, or None when corner proximity suppresses it."""
    if not caret_fits(rect, config):
        logger.debug(
            "Caret suppressed: %s edge position %.3f (%s) within %.3f of a corner",
            CaretEdge(config.edge).value,
            config.caret_position,
            config.caret_position_type.value,
            config.safe_distance,
        )
        return None

    base_center = resolve_base_center(rect, config)
    start, tip, end = caret_points(base_center, config.edge, config.caret_width / 2, config.caret_height)
    return CaretGeometry(
        edge=CaretEdge(config.edge),
        base_center=base_center,
        start=start,
        tip=tip,
        end=end,
        tip_radius=config.tip_radius,
        rounded=config.caret_corner_radius > 0,
    )


def rounded_tip_points(
    start: complex,
    tip: complex,
    end: complex,
    radius: float,
) -> tuple[complex, complex]:
    """Points ``radius`` back from the tip along each flank.

    The quadratic curve between them, with the tip as control point, is
    tangent to both flanks.
    """
    angle1 = math.atan2(tip.imag - start.imag, tip.real - start.real)
    angle2 = math.atan2(tip.imag - end.imag, tip.real - end.real)

    rounding_start = complex(tip.real - radius * math.cos(angle1), tip.imag - radius * math.sin(angle1))
    rounding_end = complex(tip.real - radius * math.cos(angle2), tip.imag - radius * math.sin(angle2))
    return rounding_start, rounding_end


def caret_segments(caret: CaretGeometry) -> list[Line | QuadraticBezier]:
    """Segments from caret start to caret end: two lines, or line-curve-line."""
    if not caret.rounded:
        return [Line(caret.start, caret.tip), Line(caret.tip, caret.end)]

    rounding_start, rounding_end = rounded_tip_points(caret.start, caret.tip, caret.end, caret.tip_radius)
    return [
        Line(caret.start, rounding_start),
        QuadraticBezier(rounding_start, caret.tip, rounding_end),
        Line(rounding_end, caret.end),
    ]
