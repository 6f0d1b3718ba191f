"""Circle value type."""

from __future__ import annotations

from dataclasses import dataclass

from shapekit.api.contracts import CircleInput
from shapekit.geometry.distance import pts_distance_sq
from shapekit.geometry.fields import read_circle


@dataclass(frozen=True, slots=True)
class Circle:
    """Immutable circle with derived axis-aligned bounding extents.

    A negative radius is accepted as given and yields an inverted bounding box.
    """

    cx: float
    cy: float
    radius: float

    @classmethod
    def from_circle(cls, circle: CircleInput) -> Circle:
        """Copy centre and radius from any circle-like shape."""
        return cls(*read_circle(circle))

    @property
    def x(self) -> float:
        return self.cx - self.radius

    @property
    def x2(self) -> float:
        return self.cx + self.radius

    @property
    def y(self) -> float:
        return self.cy - self.radius

    @property
    def y2(self) -> float:
        return self.cy + self.radius

    @property
    def width(self) -> float:
        return self.radius * 2

    @property
    def height(self) -> float:
        return self.radius * 2

    def contains_pt(self, x: float, y: float) -> bool:
        """Return whether a point lies strictly inside the circle."""
        return pts_distance_sq(self.cx, self.cy, x, y) < self.radius * self.radius

    def to_dict(self) -> dict[str, float]:
        return {"cx": self.cx, "cy": self.cy, "radius": self.radius}


__all__ = ["Circle"]
