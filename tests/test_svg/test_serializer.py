"""Tests for SVG path data and document output."""

import pytest
from svgpathtools import CubicBezier, Line, Path, parse_path

from speechbubble.engine.outline import build
from speechbubble.models.shape_config import CaretEdge, ShapeConfig
from speechbubble.svg.serializer import bubble_svg, path_to_d, serialize_svg
from tests.conftest import FRAME

TOP_BUBBLE_D = (
    "M 0 16 A 16 16 0 0 1 16 0 L 138 0 L 147.317 -18.633 Q 150 -24 152.683 -18.633"
    " L 162 0 L 284 0 A 16 16 0 0 1 300 16 L 300 134 A 16 16 0 0 1 284 150"
    " L 16 150 A 16 16 0 0 1 0 134 L 0 16 Z"
)


def test_top_bubble_path_data(top_config):
    assert path_to_d(build(FRAME, top_config), precision=3) == TOP_BUBBLE_D


def test_path_data_round_trips_through_svgpathtools(top_config):
    path = build(FRAME, top_config)
    parsed = parse_path(path_to_d(path, precision=6))
    assert len(parsed) == len(path)
    assert parsed.length() == pytest.approx(path.length(), rel=1e-4)


def test_precision_controls_decimals(top_config):
    d = path_to_d(build(FRAME, top_config), precision=1)
    assert "147.3 -18.6" in d
    assert "147.317" not in d


def test_negative_zero_is_written_as_zero():
    d = path_to_d(Path(Line(-0.0001 + 0j, 5 - 0.0001j)), precision=2)
    assert d == "M 0 0 L 5 0"


def test_open_path_has_no_close_command():
    d = path_to_d(Path(Line(0j, 10 + 0j), CubicBezier(10 + 0j, 12 + 2j, 14 + 2j, 16 + 0j)), precision=0)
    assert d == "M 0 0 L 10 0 C 12 2 14 2 16 0"


def test_empty_path():
    assert path_to_d(Path()) == ""


def test_serialize_svg_document():
    svg = serialize_svg([{"tag": "path", "d": "M 0 0 L 1 1", "fill": "red"}], (0, 0, 10, 10), title="demo")
    assert svg.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    assert 'viewBox="0 0 10 10"' in svg
    assert "<title>demo</title>" in svg
    assert '<path d="M 0 0 L 1 1" fill="red" />' in svg
    assert svg.endswith("</svg>")


def test_serialize_svg_escapes_title():
    svg = serialize_svg([], (0, 0, 10, 10), title="a < b & c")
    assert "<title>a &lt; b &amp; c</title>" in svg
    assert "a < b" not in svg


def test_bubble_svg_viewbox_includes_caret(top_config):
    svg = bubble_svg(FRAME, top_config, fill="#3366ff", stroke="none")
    assert 'fill="#3366ff"' in svg
    assert 'stroke="none"' in svg
    # The caret tip pokes above the rect, so the viewBox starts above y = 0
    viewbox = svg.split('viewBox="')[1].split('"')[0].split()
    assert float(viewbox[1]) < -20
    assert float(viewbox[2]) == pytest.approx(300)


def test_bubble_svg_pads_for_stroke():
    cfg = ShapeConfig.inset_from_start(16, 6, 10, CaretEdge.BOTTOM, caret_size=24)
    svg = bubble_svg(FRAME, cfg, stroke="black", stroke_width=4)
    viewbox = [float(v) for v in svg.split('viewBox="')[1].split('"')[0].split()]
    assert viewbox == pytest.approx([-2, -2, 304, 154])
