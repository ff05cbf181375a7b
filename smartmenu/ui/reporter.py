"""Rich console rendering for menus and command results."""

from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from ..core.classifier import ExecutionMode
from ..core.dispatcher import DispatchReporter
from ..core.errors import CommandExecutionError, NavigationTargetMissing, SubstitutionCancelled
from ..core.menu_graph import ItemKind, Menu
from ..core.process import CommandResult

ICONS = {
    ItemKind.NAVIGATE: "📁",
    ItemKind.INSPECT: "🐛",
    ItemKind.EXECUTE: "⚡",
}


class ConsoleReporter(DispatchReporter):
    """Default :class:`DispatchReporter` writing to a Rich console."""

    def __init__(self, console: Console) -> None:
        self.console = console

    # ------------------------------------------------------------------
    # Menu rendering
    # ------------------------------------------------------------------
    def render_menu(self, menu: Menu) -> None:
        self.console.clear()
        self.console.rule(f"[bold]{escape(menu.title)}[/]")
        if not menu.items:
            self.console.print("[dim](no items)[/]")
        for index, item in enumerate(menu.items, start=1):
            icon = ICONS.get(item.kind, "⚡")
            self.console.print(f"[cyan]{index}.[/] {icon} {escape(item.label)}")
        self.console.print("\n[dim]0.[/] Go Back")

    def info(self, message: str) -> None:
        self.console.print(f"[cyan]ℹ[/] {escape(message)}")

    def warn(self, message: str) -> None:
        self.console.print(f"[yellow]⚠[/]  {escape(message)}")

    def error(self, message: str) -> None:
        self.console.print(f"[red]✖[/] {escape(message)}")

    def warnings(self, title: str, messages: Sequence[str]) -> None:
        if not messages:
            return
        self.console.print(f"[yellow]{escape(title)}[/]")
        for message in messages:
            self.console.print(f"  - {escape(message)}")

    # ------------------------------------------------------------------
    # DispatchReporter hooks
    # ------------------------------------------------------------------
    def announce(self, command: str, mode: ExecutionMode) -> None:
        if mode is ExecutionMode.INTERACTIVE:
            self.console.print(f"\nExecuting interactive command: [bold]{escape(command)}[/]")
            self.console.print("[dim]Handing control to interactive session...[/]\n")
        else:
            self.console.print(f"\nExecuting: [bold]{escape(command)}[/]\n")

    def command_finished(self, result: CommandResult, mode: ExecutionMode) -> None:
        if mode is ExecutionMode.INTERACTIVE:
            self.console.print(f"\n[green]✔[/] Command completed with exit code: {result.returncode}")
            return
        if result.stdout:
            self.console.print(escape(result.stdout.rstrip("\n")), highlight=False)
        if result.stderr.strip():
            self.warn(f"Warning: {result.stderr.strip()}")

    def command_failed(self, error: CommandExecutionError) -> None:
        body = str(error)
        if error.detail:
            body = f"{body}\n\n{error.detail}"
        self.console.print(Panel(escape(body), title="Error", title_align="left", border_style="red"))

    def substitution_cancelled(self, error: SubstitutionCancelled) -> None:
        self.warn(str(error))
        self.console.print("Command cancelled due to missing variables.")

    def navigation_failed(self, error: NavigationTargetMissing) -> None:
        self.error(str(error))

    def goodbye(self) -> None:
        self.console.print("\nGoodbye! 👋")


__all__ = ["ConsoleReporter", "ICONS"]
