"""Interactive menu session: render, read a choice, dispatch, repeat."""

from __future__ import annotations

from typing import Callable, Optional

from rich.console import Console

from ..config import MenuConfig
from ..core.dispatcher import Action, CommandDispatcher, DispatchOutcome
from ..core.menu_graph import MenuGraph
from ..core.navigation import ChoiceKind, Navigator
from ..core.process import ProcessRunner
from ..core.validator import ValidationReport, load_graph
from ..core.variable_store import VariableStore
from ..utils import logbook
from .inspect import ConsoleInspector
from .line_input import LineInput
from .reporter import ConsoleReporter
from .resolver import PromptResolver

Journal = Callable[..., object]


class MenuSession:
    """High level orchestration for one interactive menu run.

    Construction validates the menu (when the config asks for it) and raises
    :class:`~smartmenu.core.errors.MenuValidationError` before anything else
    is created, so a broken menu never reaches the loop.
    """

    def __init__(
        self,
        config: MenuConfig,
        *,
        console: Optional[Console] = None,
        line_input: Optional[LineInput] = None,
        runner: Optional[ProcessRunner] = None,
        journal: Optional[Journal] = None,
    ) -> None:
        self.config = config
        self.console = console or Console(highlight=False)
        self.reporter = ConsoleReporter(self.console)

        graph, report = load_graph(config.menu, check=config.validate, warnings=config.warnings)
        self.graph: MenuGraph = graph
        self.report: Optional[ValidationReport] = report
        if report is not None and config.warnings:
            self.reporter.warnings("Menu validation warnings:", report.warnings)

        self.store: VariableStore = config.build_store()
        self.line_input = line_input or LineInput()
        self.navigator = Navigator(self.graph)
        self.journal: Journal = journal or logbook.record
        self.dispatcher = CommandDispatcher(
            self.navigator,
            PromptResolver(self.store, self.line_input, self.console),
            classifier=config.build_classifier(),
            runner=runner or config.build_runner(),
            terminal=self.line_input,
            inspector=ConsoleInspector(self.console, self.store, self.navigator, self.graph),
            reporter=self.reporter,
        )

    # ------------------------------------------------------------------
    # Loop
    # ------------------------------------------------------------------
    def run(self) -> int:
        """Run until the operator quits; returns the process exit status."""

        self.line_input.open()
        self.journal(
            "session.start",
            menus=len(self.graph.names()),
            validated=self.report is not None,
            warnings=len(self.report.warnings) if self.report is not None else 0,
        )
        try:
            while self.navigator.running:
                self.reporter.render_menu(self.navigator.current)
                try:
                    raw = self.line_input.read("\nEnter your choice (number): ")
                except (EOFError, KeyboardInterrupt):
                    self.navigator.quit()
                    break
                self.handle(raw)
        finally:
            self.line_input.close()
            self.journal("session.stop", menu=self.navigator.state.current_menu)
        return 0

    def handle(self, raw: str) -> Optional[DispatchOutcome]:
        """Apply one line of operator input."""

        choice = self.navigator.parse(raw)
        if choice.kind is ChoiceKind.QUIT:
            self.navigator.quit()
            self.reporter.goodbye()
            return None
        if choice.kind is ChoiceKind.BACK:
            self.navigator.back()
            return None
        if choice.kind is ChoiceKind.INVALID or choice.item is None:
            self.reporter.warn(choice.message)
            self.pause()
            return None

        outcome = self.dispatcher.dispatch(choice.item)
        self._log_outcome(choice.item.label, outcome)
        if outcome.pause and self.navigator.running:
            self.pause()
        return outcome

    def pause(self) -> None:
        self.console.print("\n[dim]Press Enter to continue...[/]")
        try:
            self.line_input.read("")
        except (EOFError, KeyboardInterrupt):
            self.navigator.quit()

    def _log_outcome(self, label: str, outcome: DispatchOutcome) -> None:
        if outcome.action is Action.NAVIGATED:
            self.journal("menu.navigate", label=label, menu=self.navigator.state.current_menu)
            return
        self.journal(
            f"menu.{outcome.action.value}",
            label=label,
            command=outcome.command,
            mode=outcome.mode.value if outcome.mode else None,
            returncode=outcome.result.returncode if outcome.result else None,
        )


def launch_session(config: MenuConfig) -> int:
    """Convenience wrapper for running a :class:`MenuSession`."""

    return MenuSession(config).run()


__all__ = ["MenuSession", "launch_session"]
