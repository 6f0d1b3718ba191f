"""Public shape contracts and configuration types."""

from shapekit.api.contracts import (
    CircleInput,
    CircleLike,
    LineInput,
    LineLike,
    PointInput,
    PointLike,
    RectangleInput,
    RectangleLike,
)
from shapekit.api.logging import LoggingConfig

__all__ = [
    "CircleInput",
    "CircleLike",
    "LineInput",
    "LineLike",
    "LoggingConfig",
    "PointInput",
    "PointLike",
    "RectangleInput",
    "RectangleLike",
]
