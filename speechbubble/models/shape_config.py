"""Speech bubble shape configuration.

One canonical, immutable value. The classmethod factories cover the
convenience forms (square or rectangular caret, three ways of placing it)
and all normalize into the same fields.
"""

from __future__ import annotations

import enum

from pydantic import BaseModel, Field


class CaretEdge(str, enum.Enum):
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"


class CaretPositionType(str, enum.Enum):
    # caret_position is a fraction of the edge length, clamped to [0, 1]
    NORMALIZED = "normalized"
    # caret_position is an absolute distance from the edge's min coordinate
    INSET_FROM_START = "inset_from_start"
    # caret_position is an absolute distance from the edge's max coordinate
    INSET_FROM_END = "inset_from_end"


class ShapeConfig(BaseModel):
    """Parameters of a bubble outline.

    Ranges in the descriptions are the meaningful ones; they are not enforced.
    The builder accepts any numbers and lets the arithmetic decide the outline.
    See ``speechbubble.engine.validation`` for an opt-in check.
    """

    corner_radius: float = Field(..., description="Corner rounding of the base rectangle (>= 0)")
    caret_width: float = Field(..., description="Caret base width (> 0)")
    caret_height: float = Field(..., description="Caret protrusion length (> 0)")
    caret_corner_radius: float = Field(default=0.0, description="Tip rounding radius, 0 = sharp (>= 0)")
    caret_position: float = Field(default=0.5, description="Caret base center along the edge")
    caret_position_type: CaretPositionType = CaretPositionType.NORMALIZED
    edge: CaretEdge = CaretEdge.TOP
    caret_angle: float = Field(
        default=0.0,
        description="Degrees. Stored for interface compatibility; the outline ignores it.",
    )
    inset_amount: float = Field(default=0.0, description="Uniform shrink applied before construction")

    model_config = {"frozen": True}

    @property
    def tip_radius(self) -> float:
        """Tip rounding clamped so the curve stays within the caret flanks."""
        return min(self.caret_corner_radius, self.caret_width / 4, self.caret_height / 4)

    @property
    def safe_distance(self) -> float:
        """Minimum distance from a corner for the caret to be drawn (pre-inset radius)."""
        return self.corner_radius * 1.5

    def with_inset(self, amount: float) -> ShapeConfig:
        """Return a copy whose contour is shrunk by ``amount`` on every side."""
        return self.model_copy(update={"inset_amount": amount})

    @classmethod
    def at_fraction(
        cls,
        corner_radius: float,
        caret_corner_radius: float,
        caret_position: float,
        edge: CaretEdge | str,
        *,
        caret_size: float | None = None,
        caret_width: float | None = None,
        caret_height: float | None = None,
        caret_angle: float = 0.0,
    ) -> ShapeConfig:
        """Caret centered at ``caret_position`` (0..1) along the edge."""
        width, height = _caret_dimensions(caret_size, caret_width, caret_height)
        return cls(
            corner_radius=corner_radius,
            caret_width=width,
            caret_height=height,
            caret_corner_radius=caret_corner_radius,
            caret_position=caret_position,
            caret_position_type=CaretPositionType.NORMALIZED,
            edge=edge,
            caret_angle=caret_angle,
        )

    @classmethod
    def inset_from_start(
        cls,
        corner_radius: float,
        caret_corner_radius: float,
        caret_inset: float,
        edge: CaretEdge | str,
        *,
        caret_size: float | None = None,
        caret_width: float | None = None,
        caret_height: float | None = None,
        caret_angle: float = 0.0,
    ) -> ShapeConfig:
        """Caret centered ``caret_inset`` units from the left (TOP/BOTTOM) or top (LEFT/RIGHT)."""
        width, height = _caret_dimensions(caret_size, caret_width, caret_height)
        return cls(
            corner_radius=corner_radius,
            caret_width=width,
            caret_height=height,
            caret_corner_radius=caret_corner_radius,
            caret_position=caret_inset,
            caret_position_type=CaretPositionType.INSET_FROM_START,
            edge=edge,
            caret_angle=caret_angle,
        )

    @classmethod
    def inset_from_end(
        cls,
        corner_radius: float,
        caret_corner_radius: float,
        caret_inset_from_end: float,
        edge: CaretEdge | str,
        *,
        caret_size: float | None = None,
        caret_width: float | None = None,
        caret_height: float | None = None,
        caret_angle: float = 0.0,
    ) -> ShapeConfig:
        """Caret centered ``caret_inset_from_end`` units from the right (TOP/BOTTOM) or bottom (LEFT/RIGHT)."""
        width, height = _caret_dimensions(caret_size, caret_width, caret_height)
        return cls(
            corner_radius=corner_radius,
            caret_width=width,
            caret_height=height,
            caret_corner_radius=caret_corner_radius,
            caret_position=caret_inset_from_end,
            caret_position_type=CaretPositionType.INSET_FROM_END,
            edge=edge,
            caret_angle=caret_angle,
        )


def _caret_dimensions(
    size: float | None,
    width: float | None,
    height: float | None,
) -> tuple[float, float]:
    """Square caret from ``size`` or a rectangular one from ``width``/``height``."""
    if size is not None:
        if width is not None or height is not None:
            raise ValueError("Pass either caret_size or caret_width/caret_height, not both")
        return size, size
    if width is None or height is None:
        raise ValueError("caret_width and caret_height are required when caret_size is not given")
    return width, height
