"""Menu navigation state: current menu, back-stack and the running flag."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .errors import NavigationTargetMissing
from .menu_graph import ROOT_MENU, Menu, MenuGraph, MenuItem

logger = logging.getLogger(__name__)

BACK_TOKEN = "0"
QUIT_TOKENS = frozenset({"q", "quit", "exit"})


@dataclass
class NavigationState:
    current_menu: str = ROOT_MENU
    history: List[str] = field(default_factory=list)
    running: bool = True


class ChoiceKind(str, Enum):
    ITEM = "item"
    BACK = "back"
    QUIT = "quit"
    INVALID = "invalid"


@dataclass(frozen=True)
class Choice:
    kind: ChoiceKind
    item: Optional[MenuItem] = None
    message: str = ""


class Navigator:
    """Owns a :class:`NavigationState` and applies transitions to it."""

    def __init__(self, graph: MenuGraph, state: Optional[NavigationState] = None) -> None:
        self.graph = graph
        self.state = state or NavigationState()

    @property
    def running(self) -> bool:
        return self.state.running

    @property
    def current(self) -> Menu:
        menu = self.graph.get(self.state.current_menu)
        if menu is None:
            return Menu(name=self.state.current_menu)
        return menu

    def parse(self, raw: str) -> Choice:
        """Interpret operator input against the current menu.

        ``0`` goes back, ``q``/``quit``/``exit`` stop, ``1..n`` select an item.
        Anything else is invalid and leaves the state untouched.
        """

        text = (raw or "").strip()
        if not text:
            return Choice(ChoiceKind.INVALID, message="Please enter a valid choice.")
        if text == BACK_TOKEN:
            return Choice(ChoiceKind.BACK)
        if text.lower() in QUIT_TOKENS:
            return Choice(ChoiceKind.QUIT)
        try:
            number = int(text)
        except ValueError:
            return Choice(ChoiceKind.INVALID, message="Invalid choice! Please try again.")
        item = self.choose(number)
        if item is None:
            return Choice(ChoiceKind.INVALID, message="Invalid choice! Please try again.")
        return Choice(ChoiceKind.ITEM, item=item)

    def choose(self, index: int) -> Optional[MenuItem]:
        """Return the 1-based ``index`` item of the current menu, or ``None``."""

        items = self.current.items
        if 1 <= index <= len(items):
            return items[index - 1]
        return None

    def navigate(self, target: str) -> None:
        """Push the current menu and move to ``target``."""

        if target not in self.graph:
            logger.warning("Navigation target '%s' missing from menu graph", target)
            raise NavigationTargetMissing(target)
        self.state.history.append(self.state.current_menu)
        self.state.current_menu = target

    def back(self) -> bool:
        """Pop the back-stack; returns False when there was nowhere to go."""

        if not self.state.history:
            return False
        self.state.current_menu = self.state.history.pop()
        return True

    def quit(self) -> None:
        self.state.running = False


__all__ = [
    "BACK_TOKEN",
    "Choice",
    "ChoiceKind",
    "NavigationState",
    "Navigator",
    "QUIT_TOKENS",
]
