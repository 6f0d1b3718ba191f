from __future__ import annotations

import logging

import numpy as np
import pytest

from shapekit.geometry.bounds import bounding_box, bounding_box_array, union_all
from shapekit.geometry.rectangle import Rectangle
from tests.shapekit.conftest import FakePoint, FakeRect


def test_bounding_box_empty_is_none() -> None:
    assert bounding_box([]) is None


def test_bounding_box_single_point_is_zero_size() -> None:
    bb = bounding_box([FakePoint(1, 2)])
    assert bb is not None
    assert bb.equals(FakeRect(1, 2, 0, 0))


def test_bounding_box_two_points() -> None:
    bb = bounding_box([FakePoint(0, 0), FakePoint(4, 3)])
    assert bb is not None
    assert bb.equals(FakeRect(0, 0, 4, 3))


def test_bounding_box_accepts_mappings_and_generators() -> None:
    path = [{"x": 3, "y": -1}, {"x": -2, "y": 5}, {"x": 0, "y": 0}]
    bb = bounding_box(point for point in path)
    assert bb == Rectangle(-2, -1, 5, 6)
    assert path[0] == {"x": 3, "y": -1}


def test_bounding_box_contains_every_point() -> None:
    points = [FakePoint(7, 1), FakePoint(-4, 2.5), FakePoint(3, -9)]
    bb = bounding_box(points)
    assert bb is not None
    assert all(bb.contains_pt(p.x, p.y) for p in points)
    assert bb.equals(FakeRect(-4, -9, 11, 11.5))


def test_bounding_box_empty_input_traced_when_enabled(monkeypatch, caplog) -> None:
    monkeypatch.setenv("SHAPEKIT_TRACE_DEGENERATE", "1")
    with caplog.at_level(logging.DEBUG, logger="shapekit.geometry"):
        assert bounding_box([]) is None
    assert "bounds_empty_input op=bounding_box" in caplog.text


def test_bounding_box_empty_input_silent_by_default(monkeypatch, caplog) -> None:
    monkeypatch.delenv("SHAPEKIT_TRACE_DEGENERATE", raising=False)
    with caplog.at_level(logging.DEBUG, logger="shapekit.geometry"):
        bounding_box([])
    assert caplog.records == []


def test_bounding_box_array_reads_xy_columns() -> None:
    verts = np.array([[0.0, 0.0, 1.0], [4.0, 3.0, 1.0], [-1.0, 2.0, 0.5]], dtype=np.float32)
    bb = bounding_box_array(verts)
    assert bb == Rectangle(-1.0, 0.0, 5.0, 3.0)
    assert isinstance(bb.x, float)


def test_bounding_box_array_empty_is_none() -> None:
    assert bounding_box_array(np.empty((0, 2))) is None


@pytest.mark.parametrize("shape", [(4,), (3, 1), (2, 2, 2)])
def test_bounding_box_array_rejects_bad_shapes(shape: tuple[int, ...]) -> None:
    with pytest.raises(ValueError):
        bounding_box_array(np.zeros(shape))


def test_bounding_box_array_contains_every_float32_vertex() -> None:
    rng = np.random.default_rng(0)
    verts = rng.uniform(-500.0, 1000.0, size=(200, 3)).astype(np.float32)
    bb = bounding_box_array(verts)
    assert bb is not None
    for vx, vy, _ in verts:
        assert bb.contains_pt(float(vx), float(vy))
    assert bb.equals(bounding_box(FakePoint(float(vx), float(vy)) for vx, vy, _ in verts))


def test_union_all_merges_rectangles() -> None:
    rects = [FakeRect(0, 0, 2, 2), Rectangle(5, -1, 1, 1), {"x": 1, "y": 4, "width": 1, "height": 1}]
    bb = union_all(rects)
    assert bb == Rectangle(0, -1, 6, 6)


def test_union_all_does_not_alias_first_rectangle() -> None:
    first = Rectangle(0, 0, 1, 1)
    bb = union_all([first, FakeRect(3, 3, 1, 1)])
    assert bb is not first
    assert first == Rectangle(0, 0, 1, 1)


def test_union_all_empty_is_none() -> None:
    assert union_all([]) is None
