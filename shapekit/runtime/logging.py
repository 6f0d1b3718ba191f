"""Console logging for geometry diagnostics."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from shapekit.api.logging import LoggingConfig
from shapekit.runtime.config import load_geometry_config
from shapekit.runtime.json_codec import dumps_text

# Attributes every LogRecord carries; anything else arrived through ``extra=``.
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """One JSON object per record; shapes passed via ``extra`` are emitted as dicts."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        shapes = {
            key: _shape_payload(value)
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS
        }
        if shapes:
            payload["fields"] = shapes
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return dumps_text(payload)


def _shape_payload(value: object) -> object:
    to_dict = getattr(value, "to_dict", None)
    return to_dict() if callable(to_dict) else value


def configure_logging(config: LoggingConfig) -> None:
    """Route the ``shapekit`` logger tree to stderr in the configured format."""
    handler = logging.StreamHandler()
    if config.console_format.strip().lower() == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))

    logger = logging.getLogger("shapekit")
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, config.level_name.upper(), logging.INFO))
    logger.propagate = False


def setup_logging() -> None:
    """Configure from env unless the host application already attached handlers."""
    if logging.getLogger("shapekit").handlers or logging.getLogger().handlers:
        return
    cfg = load_geometry_config()
    configure_logging(LoggingConfig(level_name=cfg.log_level, console_format=cfg.log_format))


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


__all__ = ["JsonFormatter", "configure_logging", "get_logger", "setup_logging"]
