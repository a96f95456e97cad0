"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from svgpathtools import Path


def sample_path(path: Path, samples_per_segment: int = 16) -> NDArray[np.float64]:
    """Sample each segment at evenly spaced t, returning an Nx2 array of (x, y).

    Each segment contributes its exact start point; Arc.point(0) can drift by an
    ulp, which would leave a near-duplicate closing point in the ring.
    """
    if len(path) == 0:
        return np.empty((0, 2))

    points: list[tuple[float, float]] = []
    ts = np.linspace(0.0, 1.0, samples_per_segment, endpoint=False)[1:]
    for seg in path:
        points.append((seg.start.real, seg.start.imag))
        for t in ts:
            pt = seg.point(float(t))
            points.append((pt.real, pt.imag))
    end = path[-1].end
    points.append((end.real, end.imag))
    return np.array(points, dtype=np.float64)


def signed_area(points: NDArray[np.float64]) -> float:
    """Shoelace formula for signed area. Positive = CCW in y-up terms (CW on screen)."""
    if len(points) < 3:
        return 0.0
    x = points[:, 0]
    y = points[:, 1]
    return float(0.5 * np.sum(x[:-1] * y[1:] - x[1:] * y[:-1]))


def winding_direction(points: NDArray[np.float64]) -> int:
    """Return 1 for CCW, -1 for CW (y-up terms), 0 if degenerate."""
    sa = signed_area(points)
    if sa > 0:
        return 1
    elif sa < 0:
        return -1
    return 0


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )
