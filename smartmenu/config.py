"""Session configuration for the interactive menu runner."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Union

from .core.classifier import CommandClassifier
from .core.menu_graph import load_menu_data
from .core.process import ProcessRunner
from .core.variable_store import VariableStore
from .utils.paths import default_config_path

logger = logging.getLogger(__name__)

SeedValue = Union[str, Sequence[str]]


@dataclass
class MenuConfig:
    """Everything needed to build a menu session.

    Use :meth:`from_mapping` for an inline menu definition and
    :meth:`from_menu_file` for a JSON document on disk.
    """

    menu: Mapping[str, Any]
    config_path: Optional[Path] = None
    env_files: Tuple[Path, ...] = ()
    seed: Dict[str, SeedValue] = field(default_factory=dict)
    store: Optional[VariableStore] = None
    validate: bool = True
    warnings: bool = True
    parent_dir_tools: Tuple[str, ...] = ("supabase",)
    extra_interactive_patterns: Tuple[Tuple[str, str], ...] = ()
    cwd: Optional[Path] = None
    menu_path: Optional[Path] = None

    @classmethod
    def from_mapping(cls, menu: Mapping[str, Any], **options: Any) -> "MenuConfig":
        return cls(menu=menu, **options)

    @classmethod
    def from_menu_file(cls, path: Path | str, **options: Any) -> "MenuConfig":
        path = Path(path)
        logger.info("Loading menu from %s", path)
        return cls(menu=load_menu_data(path), menu_path=path, **options)

    def resolved_config_path(self) -> Path:
        return Path(self.config_path) if self.config_path is not None else default_config_path()

    def build_store(self) -> VariableStore:
        """Return the variable store with env files and seed values applied."""

        store = self.store if self.store is not None else VariableStore(self.resolved_config_path())
        for env_file in self.env_files:
            store.load_env_file(env_file)
        for name, values in self.seed.items():
            store.add_variable(name, [values] if isinstance(values, str) else list(values))
        return store

    def build_classifier(self) -> CommandClassifier:
        return CommandClassifier(extra=self.extra_interactive_patterns)

    def build_runner(self) -> ProcessRunner:
        return ProcessRunner(self.cwd, parent_dir_tools=self.parent_dir_tools)


__all__ = ["MenuConfig"]
