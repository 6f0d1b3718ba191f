"""Library configuration sourced from environment."""

from __future__ import annotations

import os
from dataclasses import dataclass


def _flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _choice(name: str, allowed: tuple[str, ...], default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    return value if value in allowed else default


@dataclass(frozen=True, slots=True)
class GeometryConfig:
    """Immutable library configuration."""

    log_level: str
    log_format: str
    trace_degenerate: bool


def resolve_log_level_name(default: str = "INFO") -> str:
    """Resolve log level with library-prefixed override."""
    value = os.getenv("SHAPEKIT_LOG_LEVEL")
    if value is None:
        value = os.getenv("LOG_LEVEL", default)
    return value.strip().upper()


def load_geometry_config() -> GeometryConfig:
    """Load immutable configuration from env vars."""
    return GeometryConfig(
        log_level=resolve_log_level_name(),
        log_format=_choice("SHAPEKIT_LOG_FORMAT", ("text", "json"), "text"),
        trace_degenerate=_flag("SHAPEKIT_TRACE_DEGENERATE", False),
    )


def enabled_degenerate_trace() -> bool:
    return _flag("SHAPEKIT_TRACE_DEGENERATE", False)


__all__ = [
    "GeometryConfig",
    "enabled_degenerate_trace",
    "load_geometry_config",
    "resolve_log_level_name",
]
