"""Mutable axis-aligned rectangle value type."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar

from shapekit.api.contracts import LineInput, PointInput, RectangleInput
from shapekit.geometry.distance import pts_distance_sq
from shapekit.geometry.fields import read_line, read_point, read_rect
from shapekit.runtime.config import enabled_degenerate_trace

_LOG = logging.getLogger("shapekit.geometry")

OUT_LEFT = 1
OUT_TOP = 2
OUT_RIGHT = 4
OUT_BOTTOM = 8


@dataclass(slots=True)
class Rectangle:
    """Axis-aligned rectangle anchored at its top-left corner.

    Width and height may be zero or negative. Such degenerate rectangles never
    intersect anything and classify every point as outside on the collapsed axis.
    ``add`` and ``add_point`` grow the rectangle in place.
    """

    x: float
    y: float
    width: float
    height: float

    OUT_LEFT: ClassVar[int] = OUT_LEFT
    OUT_TOP: ClassVar[int] = OUT_TOP
    OUT_RIGHT: ClassVar[int] = OUT_RIGHT
    OUT_BOTTOM: ClassVar[int] = OUT_BOTTOM

    @classmethod
    def from_rect(cls, rect: RectangleInput) -> Rectangle:
        """Copy position and extents from any rectangle-like shape."""
        return cls(*read_rect(rect))

    @property
    def x2(self) -> float:
        return self.x + self.width

    @property
    def y2(self) -> float:
        return self.y + self.height

    @property
    def cx(self) -> float:
        return self.x + self.width / 2

    @property
    def cy(self) -> float:
        return self.y + self.height / 2

    @property
    def radius(self) -> float:
        """Half of the longer side, for callers expecting a circle-like bound."""
        return max(self.width, self.height) / 2

    @property
    def area(self) -> float:
        return self.width * self.height

    def equals(self, other: RectangleInput) -> bool:
        """Return exact field-wise equality with any rectangle-like shape."""
        ox, oy, ow, oh = read_rect(other)
        return self.x == ox and self.y == oy and self.width == ow and self.height == oh

    def clone(self) -> Rectangle:
        return Rectangle(self.x, self.y, self.width, self.height)

    def add(self, other: RectangleInput) -> None:
        """Grow in place to the minimal rectangle enclosing self and ``other``."""
        ox, oy, ow, oh = read_rect(other)
        self._union(ox, oy, ox + ow, oy + oh)

    def add_point(self, point: PointInput) -> None:
        """Grow in place to the minimal rectangle enclosing self and ``point``."""
        px, py = read_point(point)
        self._union(px, py, px, py)

    def _union(self, left: float, top: float, right: float, bottom: float) -> None:
        x = min(self.x, left)
        y = min(self.y, top)
        x2 = max(self.x2, right)
        y2 = max(self.y2, bottom)
        self.x = x
        self.y = y
        self.width = x2 - x
        self.height = y2 - y

    def contains_pt(self, px: float, py: float) -> bool:
        """Return whether a point is inside the rectangle, edges included."""
        return self.x <= px <= self.x2 and self.y <= py <= self.y2

    def intersects(self, other: RectangleInput) -> bool:
        """Return whether interiors overlap; touching edges do not count."""
        ox, oy, ow, oh = read_rect(other)
        if self.area <= 0 or ow <= 0 or oh <= 0:
            if _LOG.isEnabledFor(logging.DEBUG) and enabled_degenerate_trace():
                _LOG.debug(
                    "intersects_degenerate rect=%s other_w=%s other_h=%s",
                    self,
                    ow,
                    oh,
                    extra={"rect": self},
                )
            return False
        return ox + ow > self.x and oy + oh > self.y and ox < self.x2 and oy < self.y2

    def intersects_line(self, line: LineInput) -> bool:
        """Return whether a line segment touches the rectangle.

        Cohen-Sutherland clipping as in ``java.awt.geom.Rectangle2D.intersectsLine``:
        the start point is clipped against one violated boundary per pass until it
        lands inside, or both endpoints share an outside half-plane.
        """
        x1, y1, x2, y2 = read_line(line)
        out2 = self.outcode(x2, y2)
        if out2 == 0:
            return True
        out1 = self.outcode(x1, y1)
        while out1 != 0:
            if out1 & out2:
                return False
            # Endpoints disagree on the violated axis here, so the divisor is non-zero.
            if out1 & (OUT_LEFT | OUT_RIGHT):
                x = self.x2 if out1 & OUT_RIGHT else self.x
                y1 = y1 + (x - x1) * (y2 - y1) / (x2 - x1)
                x1 = x
            else:
                y = self.y2 if out1 & OUT_BOTTOM else self.y
                x1 = x1 + (y - y1) * (x2 - x1) / (y2 - y1)
                y1 = y
            out1 = self.outcode(x1, y1)
        return True

    def outcode(self, px: float, py: float) -> int:
        """Classify a point against the four half-planes of the rectangle."""
        out = 0
        if self.width <= 0:
            out |= OUT_LEFT | OUT_RIGHT
        elif px < self.x:
            out |= OUT_LEFT
        elif px > self.x2:
            out |= OUT_RIGHT
        if self.height <= 0:
            out |= OUT_TOP | OUT_BOTTOM
        elif py < self.y:
            out |= OUT_TOP
        elif py > self.y2:
            out |= OUT_BOTTOM
        return out

    def dist_sq(self, px: float, py: float) -> float:
        """Return the squared distance from a point to the nearest point of the rectangle."""
        if self.contains_pt(px, py):
            return 0
        out = self.outcode(px, py)
        if out & OUT_TOP:
            if out & OUT_LEFT:
                return pts_distance_sq(px, py, self.x, self.y)
            if out & OUT_RIGHT:
                return pts_distance_sq(px, py, self.x2, self.y)
            return (self.y - py) * (self.y - py)
        if out & OUT_BOTTOM:
            if out & OUT_LEFT:
                return pts_distance_sq(px, py, self.x, self.y2)
            if out & OUT_RIGHT:
                return pts_distance_sq(px, py, self.x2, self.y2)
            return (py - self.y2) * (py - self.y2)
        if out & OUT_LEFT:
            return (self.x - px) * (self.x - px)
        if out & OUT_RIGHT:
            return (px - self.x2) * (px - self.x2)
        # NaN coordinates land in no half-plane.
        return 0

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}

    def __str__(self) -> str:
        return f"Rectangle[x={self.x}, y={self.y}, w={self.width}, h={self.height}]"


__all__ = ["OUT_BOTTOM", "OUT_LEFT", "OUT_RIGHT", "OUT_TOP", "Rectangle"]
