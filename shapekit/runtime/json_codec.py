"""Fast JSON codec helpers for log and diagnostics payloads."""

from __future__ import annotations

from typing import Any

import orjson


def dumps_bytes(
    payload: Any,
    *,
    pretty: bool = False,
    sort_keys: bool = False,
) -> bytes:
    """Serialize payload to UTF-8 JSON bytes."""
    # Newlines are emitted by the caller for line-oriented outputs.
    options = 0
    if pretty:
        options |= orjson.OPT_INDENT_2
    if sort_keys:
        options |= orjson.OPT_SORT_KEYS
    return bytes(orjson.dumps(payload, default=str, option=options))


def dumps_text(
    payload: Any,
    *,
    pretty: bool = False,
    sort_keys: bool = False,
) -> str:
    return dumps_bytes(payload, pretty=pretty, sort_keys=sort_keys).decode("utf-8")


__all__ = ["dumps_bytes", "dumps_text"]
