"""Configuration, logging and error plumbing."""

from shapekit.runtime.config import GeometryConfig, load_geometry_config, resolve_log_level_name
from shapekit.runtime.errors import ShapeContractError
from shapekit.runtime.logging import (
    JsonFormatter,
    configure_logging,
    get_logger,
    setup_logging,
)

__all__ = [
    "GeometryConfig",
    "JsonFormatter",
    "ShapeContractError",
    "configure_logging",
    "get_logger",
    "load_geometry_config",
    "resolve_log_level_name",
    "setup_logging",
]
