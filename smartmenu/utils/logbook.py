"""Rotating event logger emitting structured JSON lines."""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict

from .paths import state_dir

LOGGER_NAME = "smartmenu"


def log_file() -> Path:
    return state_dir() / "logs" / "smartmenu.log"


def get_logger() -> logging.Logger:
    """Return the ``smartmenu`` logger, attaching the rotating handler once."""

    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        return logger

    path = log_file()
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(path, maxBytes=1_000_000, backupCount=5, encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger.setLevel(logging.INFO)
    logger.addHandler(handler)
    return logger


def _serialize(value: object) -> object:
    """Make ``value`` JSON-serialisable for the event log."""

    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    if isinstance(value, (list, tuple)):
        return [_serialize(item) for item in value]
    if isinstance(value, dict):
        return {str(key): _serialize(item) for key, item in value.items()}
    return str(value)


def record(action: str, **fields: object) -> Dict[str, object]:
    """Write a structured menu event and return the emitted record."""

    timestamp = datetime.now(UTC).isoformat(timespec="seconds").replace("+00:00", "Z")
    entry: Dict[str, object] = {
        "timestamp": timestamp,
        "channel": "smartmenu.menu",
        "action": action,
        **{key: _serialize(value) for key, value in fields.items()},
    }
    get_logger().info(json.dumps(entry, sort_keys=True))
    return entry


__all__ = ["LOGGER_NAME", "get_logger", "log_file", "record"]
