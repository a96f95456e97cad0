"""Write SVG path data and standalone SVG documents for bubble outlines."""

from __future__ import annotations

from typing import Any
from xml.sax.saxutils import escape

from svgpathtools import Arc, CubicBezier, Line, Path, QuadraticBezier

from speechbubble.config import settings
from speechbubble.engine.outline import build
from speechbubble.models.rect import RectLike
from speechbubble.models.shape_config import ShapeConfig
from speechbubble.utils.geometry import bbox, sample_path


def _fmt(value: float, precision: int) -> str:
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


def _pt(point: complex, precision: int) -> str:
    return f"{_fmt(point.real, precision)} {_fmt(point.imag, precision)}"


def path_to_d(path: Path, precision: int | None = None) -> str:
    """Absolute M/L/A/Q/C commands, with Z when the path ends where it began."""
    if len(path) == 0:
        return ""
    if precision is None:
        precision = settings.svg_precision

    parts = [f"M {_pt(path[0].start, precision)}"]
    for seg in path:
        if isinstance(seg, Line):
            parts.append(f"L {_pt(seg.end, precision)}")
        elif isinstance(seg, Arc):
            parts.append(
                f"A {_fmt(seg.radius.real, precision)} {_fmt(seg.radius.imag, precision)}"
                f" {_fmt(seg.rotation, precision)} {int(seg.large_arc)} {int(seg.sweep)}"
                f" {_pt(seg.end, precision)}"
            )
        elif isinstance(seg, QuadraticBezier):
            parts.append(f"Q {_pt(seg.control, precision)} {_pt(seg.end, precision)}")
        elif isinstance(seg, CubicBezier):
            parts.append(
                f"C {_pt(seg.control1, precision)} {_pt(seg.control2, precision)} {_pt(seg.end, precision)}"
            )
        else:
            raise TypeError(f"Unsupported segment type: {type(seg).__name__}")

    if path[-1].end == path[0].start:
        parts.append("Z")
    return " ".join(parts)


def serialize_svg(
    elements: list[dict[str, Any]],
    viewbox: tuple[float, float, float, float],
    title: str = "",
    precision: int | None = None,
) -> str:
    """Generate SVG markup from element definitions. viewbox is (x, y, width, height)."""
    if precision is None:
        precision = settings.svg_precision
    vb = " ".join(_fmt(v, precision) for v in viewbox)
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg viewBox="{vb}" xmlns="http://www.w3.org/2000/svg">',
    ]

    if title:
        lines.append(f"  <title>{escape(title)}</title>")

    for elem in elements:
        tag = elem.get("tag", "path")
        attrs = {k: v for k, v in elem.items() if k != "tag"}
        attr_str = " ".join(f'{k}="{v}"' for k, v in attrs.items())
        lines.append(f"  <{tag} {attr_str} />")

    lines.append("</svg>")
    return "\n".join(lines)


def bubble_svg(
    rect: RectLike,
    config: ShapeConfig,
    fill: str = "none",
    stroke: str = "currentColor",
    stroke_width: float = 1.0,
    title: str = "",
    precision: int | None = None,
) -> str:
    """Standalone SVG whose viewBox covers the outline, caret included, plus the stroke."""
    path = build(rect, config)
    xmin, ymin, xmax, ymax = bbox(sample_path(path))
    pad = stroke_width / 2 if stroke != "none" else 0.0

    element = {
        "tag": "path",
        "d": path_to_d(path, precision),
        "fill": fill,
        "stroke": stroke,
        "stroke-width": _fmt(stroke_width, 3),
    }
    viewbox = (xmin - pad, ymin - pad, xmax - xmin + 2 * pad, ymax - ymin + 2 * pad)
    return serialize_svg([element], viewbox, title=title, precision=precision)
