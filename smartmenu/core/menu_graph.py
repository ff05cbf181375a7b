"""In-memory menu graph built from ``{name: [[label, kind, target], ...]}`` data."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Tuple

from .errors import MenuValidationError, MissingRootMenuError

ROOT_MENU = "root"
QUIT_COMMAND = "quit"


class ItemKind(str, Enum):
    """What selecting a menu item does. Values are the on-disk spellings."""

    NAVIGATE = "menu"
    EXECUTE = "exec"
    INSPECT = "debug"


@dataclass(frozen=True)
class MenuItem:
    label: str
    kind: ItemKind
    target: str

    @classmethod
    def from_row(cls, row: Any) -> "MenuItem":
        """Build an item from a raw ``[label, kind, target]`` row.

        Raises ``ValueError`` for rows of the wrong shape or an unknown kind.
        """

        if not isinstance(row, (list, tuple)) or len(row) != 3:
            raise ValueError("must be an array with exactly 3 elements [name, type, command]")
        label, kind, target = row
        try:
            item_kind = ItemKind(kind)
        except ValueError:
            raise ValueError(f"type must be 'menu', 'exec', or 'debug', got '{kind}'") from None
        return cls(label=label, kind=item_kind, target=target)

    @property
    def is_quit(self) -> bool:
        return self.kind is ItemKind.EXECUTE and self.target == QUIT_COMMAND


@dataclass(frozen=True)
class Menu:
    name: str
    items: Tuple[MenuItem, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[MenuItem]:
        return iter(self.items)

    @property
    def title(self) -> str:
        return menu_title(self.name)


@dataclass(frozen=True)
class MenuGraph:
    """Read-only mapping of menu name to :class:`Menu`.

    Instances are normally produced by :func:`smartmenu.core.validator.load_graph`
    which validates the raw data first. :meth:`from_mapping` still refuses rows
    it cannot turn into items, so unvalidated data fails with
    :class:`MenuValidationError` rather than part-way through a session.
    """

    menus: Mapping[str, Menu] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "MenuGraph":
        if not isinstance(data, Mapping):
            raise MissingRootMenuError("Menu data must be a non-null object")

        menus: Dict[str, Menu] = {}
        errors: List[str] = []
        for name, rows in data.items():
            if not isinstance(rows, (list, tuple)):
                errors.append(f"Menu '{name}' must be an array")
                continue
            items: List[MenuItem] = []
            for index, row in enumerate(rows):
                try:
                    items.append(MenuItem.from_row(row))
                except ValueError as exc:
                    errors.append(f"Menu '{name}' item {index}: {exc}")
            menus[name] = Menu(name=name, items=tuple(items))

        if errors:
            raise MenuValidationError(f"Menu structure could not be loaded: {len(errors)} error(s)", errors)
        return cls(menus=MappingProxyType(menus))

    def __contains__(self, name: object) -> bool:
        return name in self.menus

    def __getitem__(self, name: str) -> Menu:
        return self.menus[name]

    def get(self, name: str) -> Menu | None:
        return self.menus.get(name)

    def names(self) -> List[str]:
        return list(self.menus)

    @property
    def root(self) -> Menu:
        return self.menus[ROOT_MENU]


def load_menu_data(path: Path | str) -> Dict[str, Any]:
    """Read a raw menu definition from a JSON document."""

    with Path(path).open("r", encoding="utf-8") as handle:
        return json.load(handle)


def menu_title(name: str) -> str:
    """Return a display title: ``root`` is "Main Menu", ``fileMenu`` is "File Menu"."""

    if name == ROOT_MENU:
        return "Main Menu"
    spaced = re.sub(r"([A-Z])", r" \1", name)
    return spaced[:1].upper() + spaced[1:]


__all__ = [
    "ItemKind",
    "Menu",
    "MenuGraph",
    "MenuItem",
    "QUIT_COMMAND",
    "ROOT_MENU",
    "load_menu_data",
    "menu_title",
]
