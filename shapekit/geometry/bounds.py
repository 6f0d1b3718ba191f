"""Bounding-box reductions over points and rectangles."""

from __future__ import annotations

import logging
from collections.abc import Iterable

import numpy as np
import numpy.typing as npt

from shapekit.api.contracts import PointInput, RectangleInput
from shapekit.geometry.fields import read_point
from shapekit.geometry.rectangle import Rectangle
from shapekit.runtime.config import enabled_degenerate_trace

_LOG = logging.getLogger("shapekit.geometry")


def bounding_box(points: Iterable[PointInput]) -> Rectangle | None:
    """Return the minimal rectangle enclosing ``points``, or None when there are none."""
    bb: Rectangle | None = None
    for point in points:
        if bb is None:
            x, y = read_point(point)
            bb = Rectangle(x, y, 0, 0)
        else:
            bb.add_point(point)
    if bb is None:
        _trace_empty("bounding_box")
    return bb


def bounding_box_array(points: npt.ArrayLike) -> Rectangle | None:
    """Return the bounding box of an ``(N, 2+)`` coordinate array.

    Only the first two columns are read, so ``(x, y, z)`` vertex buffers work as-is.
    """
    arr = np.asarray(points)
    if arr.ndim != 2 or arr.shape[1] < 2:
        raise ValueError(f"expected an (N, 2) coordinate array, got shape {arr.shape}")
    if arr.shape[0] == 0:
        _trace_empty("bounding_box_array")
        return None
    # Widen before subtracting so x + width still reaches the largest float32 vertex.
    xy = np.asarray(arr[:, :2], dtype=np.float64)
    lo = xy.min(axis=0)
    hi = xy.max(axis=0)
    return Rectangle(float(lo[0]), float(lo[1]), float(hi[0] - lo[0]), float(hi[1] - lo[1]))


def union_all(rects: Iterable[RectangleInput]) -> Rectangle | None:
    """Return the minimal rectangle enclosing every rectangle in ``rects``."""
    bb: Rectangle | None = None
    for rect in rects:
        if bb is None:
            bb = Rectangle.from_rect(rect)
        else:
            bb.add(rect)
    if bb is None:
        _trace_empty("union_all")
    return bb


def _trace_empty(operation: str) -> None:
    if _LOG.isEnabledFor(logging.DEBUG) and enabled_degenerate_trace():
        _LOG.debug("bounds_empty_input op=%s", operation)


__all__ = ["bounding_box", "bounding_box_array", "union_all"]
