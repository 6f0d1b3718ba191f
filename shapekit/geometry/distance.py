"""Shared distance helpers."""

from __future__ import annotations


def pts_distance_sq(x1: float, y1: float, x2: float, y2: float) -> float:
    """Return the squared Euclidean distance between two points."""
    dx = x2 - x1
    dy = y2 - y1
    return dx * dx + dy * dy


__all__ = ["pts_distance_sq"]
