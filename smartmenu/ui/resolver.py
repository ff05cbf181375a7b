"""Operator prompting for command placeholders."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.markup import escape

from ..core.variable_store import VariableStore
from .line_input import LineInput


class PromptResolver:
    """Ask the operator for a placeholder value, offering recent values first.

    With history the operator picks ``1..n`` to reuse a value or ``n+1`` (or
    any non-numeric answer) to type a new one. Any other number, an empty new
    value, or Ctrl-C/Ctrl-D means no value was supplied. New values are kept
    exactly as typed; surrounding blanks only matter for the emptiness check.
    """

    def __init__(self, store: VariableStore, line_input: LineInput, console: Console) -> None:
        self.store = store
        self.line_input = line_input
        self.console = console

    def _ask(self, label: str) -> Optional[str]:
        if label:
            self.console.print(label)
        try:
            return self.line_input.read("> ")
        except (EOFError, KeyboardInterrupt):
            return None

    def _fresh_value(self, name: str, label: str) -> Optional[str]:
        answer = self._ask(label)
        if answer is None or not answer.strip():
            return None
        self.store.record(name, answer)
        return answer

    def resolve(self, name: str) -> Optional[str]:
        options = self.store.recall(name)
        self.console.print(f"\n📝 Variable: [bold]{escape(name)}[/]")

        if not options:
            return self._fresh_value(name, "Enter value:")

        self.console.print("\nRecent values:")
        for index, option in enumerate(options, start=1):
            self.console.print(f"[cyan]{index}.[/] {escape(option)}")
        self.console.print(f"[cyan]{len(options) + 1}.[/] Enter new value")

        answer = self._ask("\nSelect option or enter new value:")
        if answer is None:
            return None
        try:
            number = int(answer.strip())
        except ValueError:
            return self._fresh_value(name, "Enter new value:")

        if 1 <= number <= len(options):
            value = options[number - 1]
            self.store.record(name, value)
            return value
        if number == len(options) + 1:
            return self._fresh_value(name, "Enter new value:")
        return None


__all__ = ["PromptResolver"]
