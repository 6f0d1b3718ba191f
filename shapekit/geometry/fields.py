"""Field access over structural shape inputs."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from shapekit.runtime.errors import ShapeContractError


def read_field(shape: Any, name: str) -> float:
    """Read one numeric field from an attribute-style object or a mapping."""
    value: float
    if isinstance(shape, Mapping):
        try:
            value = shape[name]
        except KeyError:
            raise ShapeContractError(name, shape) from None
        return value
    try:
        value = getattr(shape, name)
    except AttributeError:
        raise ShapeContractError(name, shape) from None
    return value


def read_point(point: Any) -> tuple[float, float]:
    return read_field(point, "x"), read_field(point, "y")


def read_rect(rect: Any) -> tuple[float, float, float, float]:
    return (
        read_field(rect, "x"),
        read_field(rect, "y"),
        read_field(rect, "width"),
        read_field(rect, "height"),
    )


def read_circle(circle: Any) -> tuple[float, float, float]:
    return read_field(circle, "cx"), read_field(circle, "cy"), read_field(circle, "radius")


def read_line(line: Any) -> tuple[float, float, float, float]:
    return (
        read_field(line, "x1"),
        read_field(line, "y1"),
        read_field(line, "x2"),
        read_field(line, "y2"),
    )


__all__ = ["read_circle", "read_field", "read_line", "read_point", "read_rect"]
