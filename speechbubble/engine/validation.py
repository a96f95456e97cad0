"""Opt-in validation of configs and built outlines.

The builder itself never rejects input. These checks report what looks
wrong without changing the outline that would be produced.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from shapely.geometry import LinearRing

from speechbubble.engine.frames import edge_span, resolve_along
from speechbubble.engine.outline import build_outline
from speechbubble.models.rect import RectLike
from speechbubble.models.shape_config import CaretPositionType, ShapeConfig
from speechbubble.utils.geometry import sample_path, winding_direction


def check_config(config: ShapeConfig) -> list[str]:
    """List the parameters that are outside their meaningful range."""
    issues: list[str] = []
    if config.corner_radius < 0:
        issues.append(f"corner_radius is negative ({config.corner_radius})")
    if config.caret_width <= 0:
        issues.append(f"caret_width must be positive ({config.caret_width})")
    if config.caret_height <= 0:
        issues.append(f"caret_height must be positive ({config.caret_height})")
    if config.caret_corner_radius < 0:
        issues.append(f"caret_corner_radius is negative ({config.caret_corner_radius})")
    if config.inset_amount < 0:
        issues.append(f"inset_amount is negative ({config.inset_amount})")
    if config.caret_position_type == CaretPositionType.NORMALIZED and not 0.0 <= config.caret_position <= 1.0:
        issues.append(f"normalized caret_position {config.caret_position} is clamped to [0, 1]")
    if config.caret_angle != 0:
        issues.append("caret_angle has no effect on the outline")
    return issues


def validate_outline(rect: RectLike, config: ShapeConfig) -> dict[str, Any]:
    """Build the outline and inspect it.

    Returns a dict with:
    - valid: bool (no issues)
    - closed: bool
    - caret_honored: bool
    - winding: "CW", "CCW" or "degenerate", as seen on screen (y down)
    - issues: list[str]
    """
    outline = build_outline(rect, config)
    issues = check_config(config)

    if config.inset_amount > config.corner_radius:
        issues.append(
            f"inset_amount {config.inset_amount} exceeds corner_radius {config.corner_radius}; "
            "corners are square"
        )

    effective = outline.rect
    if effective.is_empty:
        issues.append(f"effective rectangle is empty: {effective.as_tuple()}")

    if outline.caret is not None:
        along = resolve_along(effective, config)
        start, end = edge_span(effective, config.edge)
        half = config.caret_width / 2
        if along - half < start + outline.corner_radius or along + half > end - outline.corner_radius:
            issues.append("caret base extends past the straight part of the edge")

    points = sample_path(outline.path)
    # y-down coordinates: positive shoelace area is clockwise on screen
    direction = winding_direction(points)
    winding = {1: "CW", -1: "CCW"}.get(direction, "degenerate")

    if direction != 0 and len(np.unique(points, axis=0)) >= 3:
        if not LinearRing(points).is_simple:
            issues.append("outline intersects itself")

    return {
        "valid": len(issues) == 0,
        "closed": outline.path.isclosed(),
        "caret_honored": outline.caret_honored,
        "winding": winding,
        "issues": issues,
    }
