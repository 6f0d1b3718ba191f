"""Public logging configuration contract."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Console logging configuration for the ``shapekit`` logger tree."""

    level_name: str = "INFO"
    console_format: str = "text"  # text|json


__all__ = ["LoggingConfig"]
