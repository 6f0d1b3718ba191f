"""Structural shape contracts consumed by geometry primitives."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, TypeAlias, runtime_checkable


@runtime_checkable
class PointLike(Protocol):
    """Anything exposing numeric ``x``/``y`` coordinates."""

    @property
    def x(self) -> float: ...

    @property
    def y(self) -> float: ...


@runtime_checkable
class RectangleLike(Protocol):
    """Axis-aligned box given by top-left corner and extents."""

    @property
    def x(self) -> float: ...

    @property
    def y(self) -> float: ...

    @property
    def width(self) -> float: ...

    @property
    def height(self) -> float: ...


@runtime_checkable
class CircleLike(Protocol):
    """Circle given by centre and radius."""

    @property
    def cx(self) -> float: ...

    @property
    def cy(self) -> float: ...

    @property
    def radius(self) -> float: ...


@runtime_checkable
class LineLike(Protocol):
    """Line segment between ``(x1, y1)`` and ``(x2, y2)``."""

    @property
    def x1(self) -> float: ...

    @property
    def y1(self) -> float: ...

    @property
    def x2(self) -> float: ...

    @property
    def y2(self) -> float: ...


# Plain mappings with the same keys are accepted wherever a shape is consumed.
PointInput: TypeAlias = PointLike | Mapping[str, float]
RectangleInput: TypeAlias = RectangleLike | Mapping[str, float]
CircleInput: TypeAlias = CircleLike | Mapping[str, float]
LineInput: TypeAlias = LineLike | Mapping[str, float]


__all__ = [
    "CircleInput",
    "CircleLike",
    "LineInput",
    "LineLike",
    "PointInput",
    "PointLike",
    "RectangleInput",
    "RectangleLike",
]
