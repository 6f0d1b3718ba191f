"""Geometry primitives: circles, rectangles and bounding boxes."""

from shapekit.geometry.bounds import bounding_box, bounding_box_array, union_all
from shapekit.geometry.circle import Circle
from shapekit.geometry.distance import pts_distance_sq
from shapekit.geometry.rectangle import OUT_BOTTOM, OUT_LEFT, OUT_RIGHT, OUT_TOP, Rectangle

__all__ = [
    "Circle",
    "OUT_BOTTOM",
    "OUT_LEFT",
    "OUT_RIGHT",
    "OUT_TOP",
    "Rectangle",
    "bounding_box",
    "bounding_box_array",
    "pts_distance_sq",
    "union_all",
]
