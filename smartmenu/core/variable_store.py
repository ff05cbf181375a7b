"""Recency-ordered variable history persisted as JSON."""

from __future__ import annotations

import copy
import json
import logging
import re
from datetime import UTC, datetime
from pathlib import Path
from typing import Dict, Iterable, List, Optional

logger = logging.getLogger(__name__)

MAX_HISTORY = 10

_ENV_LINE = re.compile(r"^([A-Za-z_][A-Za-z0-9_]*)=(.*)$")


def parse_env_content(content: str) -> Dict[str, str]:
    """Parse ``KEY=VALUE`` lines, skipping blanks and ``#`` comments.

    A value wrapped in matching single or double quotes is unwrapped. Lines
    that do not look like an assignment are ignored.
    """

    env: Dict[str, str] = {}
    for line in content.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        match = _ENV_LINE.match(stripped)
        if not match:
            continue
        key, value = match.group(1), match.group(2)
        if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
            value = value[1:-1]
        env[key] = value
    return env


class VariableStore:
    """Mapping of variable name to its most-recent-first value history.

    Every mutation is written straight back to ``path`` when one is set.
    Read and write failures are logged and never interrupt the menu.
    """

    def __init__(self, path: Optional[Path] = None, *, autosave: bool = True) -> None:
        self.path = Path(path) if path is not None else None
        self.autosave = autosave
        self._data: Dict[str, List[str]] = self._load()

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------
    def _load(self) -> Dict[str, List[str]]:
        if self.path is None or not self.path.exists():
            return {}
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Could not load variable config %s: %s", self.path, exc)
            return {}
        if not isinstance(payload, dict):
            logger.warning("Ignoring variable config %s: expected a JSON object", self.path)
            return {}
        return {
            str(name): [str(value) for value in values][:MAX_HISTORY]
            for name, values in payload.items()
            if isinstance(values, list)
        }

    def save(self) -> None:
        if self.path is None:
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(self._data, indent=2), encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not save variable config %s: %s", self.path, exc)

    def _changed(self) -> None:
        if self.autosave:
            self.save()

    # ------------------------------------------------------------------
    # Recall
    # ------------------------------------------------------------------
    def recall(self, name: str) -> List[str]:
        """Return prior values for ``name``, most recent first."""

        return list(self._data.get(name, []))

    def record(self, name: str, value: str) -> None:
        """Make ``value`` the most recent entry for ``name``."""

        history = [item for item in self._data.get(name, []) if item != value]
        history.insert(0, value)
        self._data[name] = history[:MAX_HISTORY]
        self._changed()

    def __contains__(self, name: object) -> bool:
        return name in self._data

    def __len__(self) -> int:
        return len(self._data)

    def variables(self) -> List[str]:
        return sorted(self._data)

    def snapshot(self) -> Dict[str, List[str]]:
        return copy.deepcopy(self._data)

    # ------------------------------------------------------------------
    # Management
    # ------------------------------------------------------------------
    def add_variable(self, name: str, values: Iterable[str] | str = ()) -> bool:
        """Register ``name`` with initial ``values``; False if it already exists."""

        if name in self._data:
            logger.warning("Variable '%s' already exists", name)
            return False
        if isinstance(values, str):
            values = [values]
        self._data[name] = [str(value) for value in values][:MAX_HISTORY]
        self._changed()
        logger.info("Added variable '%s' with %d value(s)", name, len(self._data[name]))
        return True

    def remove_variable(self, name: str) -> bool:
        if name not in self._data:
            logger.warning("Variable '%s' does not exist", name)
            return False
        del self._data[name]
        self._changed()
        return True

    def remove_value(self, name: str, value: str) -> bool:
        """Drop one remembered value; the variable goes when its list empties."""

        history = self._data.get(name)
        if history is None:
            logger.warning("Variable '%s' does not exist", name)
            return False
        if value not in history:
            logger.warning("Value '%s' not found in variable '%s'", value, name)
            return False
        history.remove(value)
        if not history:
            del self._data[name]
        self._changed()
        return True

    def clear(self) -> None:
        self._data = {}
        self._changed()

    def export(self, output: Path) -> Path:
        """Write a timestamped copy of every variable to ``output``."""

        payload = {
            "configPath": str(self.path) if self.path is not None else None,
            "timestamp": datetime.now(UTC).isoformat(),
            "variables": self.snapshot(),
        }
        output = Path(output)
        output.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        return output

    def load_env_file(self, env_path: Path | str) -> Optional[int]:
        """Merge values from a ``.env`` file.

        Returns the number of values added, or ``None`` when the file does not
        exist or cannot be read. Values already remembered are left in place.
        """

        env_path = Path(env_path)
        if not env_path.exists():
            logger.warning("Environment file '%s' not found", env_path)
            return None
        try:
            content = env_path.read_text(encoding="utf-8")
        except OSError as exc:
            logger.warning("Error loading env file '%s': %s", env_path, exc)
            return None

        added = 0
        for key, value in parse_env_content(content).items():
            history = self._data.setdefault(key, [])
            if value in history:
                continue
            history.insert(0, value)
            self._data[key] = history[:MAX_HISTORY]
            added += 1

        if added:
            self._changed()
            logger.info("Loaded %d variables from '%s'", added, env_path)
        return added


__all__ = ["MAX_HISTORY", "VariableStore", "parse_env_content"]
