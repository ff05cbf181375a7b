"""Where smartmenu keeps its log directory and variable history."""

from __future__ import annotations

import os
from pathlib import Path

DEFAULT_CONFIG_NAME = "menu-config.json"
STATE_DIR_ENV = "SMARTMENU_STATE_DIR"
CONFIG_ENV = "SMARTMENU_CONFIG"


def _from_env(variable: str) -> Path | None:
    value = os.environ.get(variable, "").strip()
    return Path(value).expanduser() if value else None


def state_dir() -> Path:
    """Home of the event log (``~/.smartmenu`` unless ``SMARTMENU_STATE_DIR`` is set)."""

    override = _from_env(STATE_DIR_ENV)
    return override.resolve() if override is not None else Path.home() / ".smartmenu"


def default_config_path() -> Path:
    """Variable history file: ``SMARTMENU_CONFIG`` or ``menu-config.json`` in the cwd."""

    return _from_env(CONFIG_ENV) or Path.cwd() / DEFAULT_CONFIG_NAME


__all__ = ["default_config_path", "state_dir"]
