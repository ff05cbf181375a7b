"""Utility helpers exposed by smartmenu."""

from .logbook import get_logger, record
from .paths import default_config_path, state_dir

__all__ = ["default_config_path", "get_logger", "record", "state_dir"]
