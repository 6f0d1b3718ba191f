"""2D geometry primitives for hit-testing and bounds accumulation."""

from shapekit.api.contracts import CircleLike, LineLike, PointLike, RectangleLike
from shapekit.geometry import (
    OUT_BOTTOM,
    OUT_LEFT,
    OUT_RIGHT,
    OUT_TOP,
    Circle,
    Rectangle,
    bounding_box,
    bounding_box_array,
    pts_distance_sq,
    union_all,
)
from shapekit.runtime.errors import ShapeContractError

__all__ = [
    "Circle",
    "CircleLike",
    "LineLike",
    "OUT_BOTTOM",
    "OUT_LEFT",
    "OUT_RIGHT",
    "OUT_TOP",
    "PointLike",
    "Rectangle",
    "RectangleLike",
    "ShapeContractError",
    "bounding_box",
    "bounding_box_array",
    "pts_distance_sq",
    "union_all",
]
