"""Tests for edge frames and base-center resolution."""

import pytest

from speechbubble.engine.frames import (
    EDGE_ORDER,
    FRAMES,
    corner_points,
    edge_span,
    resolve_along,
    resolve_base_center,
)
from speechbubble.models.shape_config import CaretEdge, ShapeConfig
from tests.conftest import FRAME, assert_point


def _config(edge, position, kind="normalized"):
    return ShapeConfig(
        corner_radius=16,
        caret_width=24,
        caret_height=24,
        caret_position=position,
        caret_position_type=kind,
        edge=edge,
    )


def test_frame_table_covers_all_edges_in_clockwise_order():
    assert EDGE_ORDER == (CaretEdge.TOP, CaretEdge.RIGHT, CaretEdge.BOTTOM, CaretEdge.LEFT)
    assert set(FRAMES) == set(CaretEdge)


@pytest.mark.parametrize("edge", list(CaretEdge))
def test_normal_is_tangent_turned_outward(edge):
    frame = FRAMES[edge]
    assert abs(frame.tangent) == 1
    assert frame.normal == frame.tangent * -1j


def test_consecutive_tangents_turn_clockwise_on_screen():
    for i, edge in enumerate(EDGE_ORDER):
        nxt = EDGE_ORDER[(i + 1) % 4]
        assert FRAMES[nxt].tangent == FRAMES[edge].tangent * 1j


def test_corner_points():
    tl, tr, br, bl = corner_points(FRAME)
    assert (tl, tr, br, bl) == (0j, 300 + 0j, 300 + 150j, 150j)


def test_edge_span():
    assert edge_span(FRAME, CaretEdge.TOP) == (0, 300)
    assert edge_span(FRAME, CaretEdge.BOTTOM) == (0, 300)
    assert edge_span(FRAME, CaretEdge.LEFT) == (0, 150)
    assert edge_span(FRAME, CaretEdge.RIGHT) == (0, 150)


def test_normalized_position_is_clamped():
    assert resolve_along(FRAME, _config("top", 0.5)) == 150
    assert resolve_along(FRAME, _config("top", 1.5)) == 300
    assert resolve_along(FRAME, _config("top", -0.3)) == 0
    assert resolve_along(FRAME, _config("left", 0.25)) == pytest.approx(37.5)


def test_inset_positions_are_not_clamped():
    assert resolve_along(FRAME, _config("top", 50, "inset_from_start")) == 50
    assert resolve_along(FRAME, _config("top", 50, "inset_from_end")) == 250
    assert resolve_along(FRAME, _config("bottom", 400, "inset_from_start")) == 400
    assert resolve_along(FRAME, _config("right", -20, "inset_from_end")) == 170


def test_inset_from_start_measures_from_min_coordinate_on_every_edge():
    # BOTTOM and LEFT run backwards in the contour but are still measured from min
    assert resolve_base_center(FRAME, _config("bottom", 50, "inset_from_start")) == 50 + 150j
    assert resolve_base_center(FRAME, _config("left", 30, "inset_from_start")) == 30j


def test_base_center_is_pinned_to_edge():
    assert_point(resolve_base_center(FRAME, _config("top", 0.5)), 150, 0)
    assert_point(resolve_base_center(FRAME, _config("right", 0.5)), 300, 75)
    assert_point(resolve_base_center(FRAME, _config("bottom", 0.5)), 150, 150)
    assert_point(resolve_base_center(FRAME, _config("left", 50, "inset_from_end")), 0, 100)
