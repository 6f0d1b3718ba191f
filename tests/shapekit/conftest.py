from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FakePoint:
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class FakeRect:
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True, slots=True)
class FakeCircle:
    cx: float
    cy: float
    radius: float


@dataclass(frozen=True, slots=True)
class FakeLine:
    x1: float
    y1: float
    x2: float
    y2: float
