"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from speechbubble.models.rect import BoundingRect
from speechbubble.models.shape_config import CaretEdge, ShapeConfig

# 300x150 frame used throughout: corner 16 gives a safe distance of 24.
FRAME = BoundingRect(0.0, 0.0, 300.0, 150.0)


def assert_point(actual: complex, x: float, y: float) -> None:
    assert actual.real == pytest.approx(x)
    assert actual.imag == pytest.approx(y)


def mirror_across_x(points: np.ndarray, x: float) -> np.ndarray:
    """Reflect an Nx2 point array across the vertical line at x."""
    mirrored = points.copy()
    mirrored[:, 0] = 2 * x - mirrored[:, 0]
    return mirrored


@pytest.fixture
def top_config() -> ShapeConfig:
    return ShapeConfig.at_fraction(
        corner_radius=16,
        caret_corner_radius=6,
        caret_position=0.5,
        edge=CaretEdge.TOP,
        caret_size=24,
    )


@pytest.fixture
def sharp_config() -> ShapeConfig:
    return ShapeConfig.at_fraction(
        corner_radius=16,
        caret_corner_radius=0,
        caret_position=0.5,
        edge=CaretEdge.TOP,
        caret_size=24,
    )
