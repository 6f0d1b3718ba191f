from __future__ import annotations

import json

from shapekit.geometry.circle import Circle
from shapekit.runtime.json_codec import dumps_bytes, dumps_text


def test_dumps_text_round_trips_shape_payload() -> None:
    text = dumps_text({"circle": Circle(1, 2, 3).to_dict()})
    assert json.loads(text) == {"circle": {"cx": 1, "cy": 2, "radius": 3}}


def test_dumps_bytes_sort_and_pretty_options() -> None:
    raw = dumps_bytes({"b": 1, "a": 2}, pretty=True, sort_keys=True)
    assert raw.startswith(b'{\n  "a": 2')


def test_dumps_text_stringifies_unknown_values() -> None:
    assert json.loads(dumps_text({"value": object})) == {"value": str(object)}
