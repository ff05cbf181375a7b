"""Reports shown for ``debug`` menu items."""

from __future__ import annotations

import os
import platform
import sys
from pathlib import Path
from typing import Callable, Dict

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..core.menu_graph import MenuGraph
from ..core.navigation import Navigator
from ..core.variable_store import VariableStore

ENV_HINTS = ("PATH", "PYTHON", "SUPA")


class ConsoleInspector:
    """Render variables, config, environment and menu state on request."""

    def __init__(
        self,
        console: Console,
        store: VariableStore,
        navigator: Navigator,
        graph: MenuGraph,
    ) -> None:
        self.console = console
        self.store = store
        self.navigator = navigator
        self.graph = graph
        self._sections: Dict[str, Callable[[], None]] = {
            "vars": self.show_variables,
            "variables": self.show_variables,
            "config": self.show_config,
            "env": self.show_environment,
            "environment": self.show_environment,
            "menu": self.show_menu,
        }

    def inspect(self, key: str) -> None:
        key = key.strip().lower()
        self.console.print(f"\n🐛 Debug: {escape(key)}")
        self.console.rule(style="dim")
        if key == "all":
            for section in (self.show_variables, self.show_config, self.show_environment, self.show_menu):
                section()
                self.console.print()
            return
        handler = self._sections.get(key)
        if handler is None:
            self.console.print(f"[red]Unknown debug type: {escape(key)}[/]")
            self.console.print("Available debug types: vars, config, env, menu, all")
            return
        handler()

    def show_variables(self) -> None:
        names = self.store.variables()
        if not names:
            self.console.print("📋 No variables configured")
            return
        table = Table(title=f"Configuration Variables ({len(names)})", show_lines=False)
        table.add_column("Variable", style="cyan")
        table.add_column("Count", justify="right")
        table.add_column("Recent values", style="green")
        for name in names:
            values = self.store.recall(name)
            preview = ", ".join(values[:3])
            if len(values) > 3:
                preview = f"{preview} (+{len(values) - 3} more)"
            table.add_row(escape(name), str(len(values)), escape(preview))
        self.console.print(table)

    def show_config(self) -> None:
        path = self.store.path
        table = Table(title="Configuration Details", show_header=False)
        table.add_column("Key", style="cyan")
        table.add_column("Value")
        table.add_row("Config file", escape(str(path)) if path else "(in memory)")
        table.add_row("Variables count", str(len(self.store)))
        table.add_row("Config exists", str(bool(path and Path(path).exists())))
        self.console.print(table)

    def show_environment(self) -> None:
        table = Table(title="Environment Information", show_header=False)
        table.add_column("Key", style="cyan")
        table.add_column("Value")
        table.add_row("Working directory", escape(os.getcwd()))
        table.add_row("Python version", platform.python_version())
        table.add_row("Platform", sys.platform)
        table.add_row("Architecture", platform.machine())
        relevant = [
            (key, value) for key, value in os.environ.items() if any(hint in key for hint in ENV_HINTS)
        ][:5]
        for key, value in relevant:
            display = value if len(value) <= 50 else value[:50] + "..."
            table.add_row(escape(key), escape(display))
        self.console.print(table)

    def show_menu(self) -> None:
        state = self.navigator.state
        current = self.graph.get(state.current_menu)
        table = Table(title="Menu Structure", show_header=False)
        table.add_column("Key", style="cyan")
        table.add_column("Value")
        table.add_row("Current menu", escape(state.current_menu))
        table.add_row("Menu history", escape(" → ".join(state.history)) or "(empty)")
        table.add_row("Available menus", escape(", ".join(self.graph.names())))
        table.add_row("Current menu items", str(len(current) if current else 0))
        self.console.print(table)


__all__ = ["ConsoleInspector"]
