"""Per-choice orchestration: substitution, classification and execution."""

from __future__ import annotations

import logging
from contextlib import AbstractContextManager
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol

from .classifier import CommandClassifier, ExecutionMode
from .errors import CommandExecutionError, NavigationTargetMissing, SubstitutionCancelled
from .menu_graph import ItemKind, MenuItem
from .navigation import Navigator
from .process import CommandResult, ProcessRunner
from .substitution import VariableResolver, substitute

logger = logging.getLogger(__name__)


class DispatchReporter:
    """Extension point receiving everything the dispatcher wants to show.

    The default implementation is silent. Front ends subclass it (see
    :class:`smartmenu.ui.reporter.ConsoleReporter`) instead of patching the
    dispatcher.
    """

    def announce(self, command: str, mode: ExecutionMode) -> None:
        """Called right before ``command`` is started."""

    def command_finished(self, result: CommandResult, mode: ExecutionMode) -> None:
        """Called after a command exited with status zero."""

    def command_failed(self, error: CommandExecutionError) -> None:
        """Called for spawn failures and non-zero exits."""

    def substitution_cancelled(self, error: SubstitutionCancelled) -> None:
        """Called when the operator gave no value for a placeholder."""

    def navigation_failed(self, error: NavigationTargetMissing) -> None:
        """Called when a navigate item points at an unknown menu."""

    def goodbye(self) -> None:
        """Called once when a quit item is chosen."""


class Inspector(Protocol):
    def inspect(self, key: str) -> None:
        ...


class TerminalHandoff(Protocol):
    """Line-input resource that must be released around interactive children."""

    def released(self) -> AbstractContextManager[None]:
        ...


class Action(str, Enum):
    NAVIGATED = "navigated"
    EXECUTED = "executed"
    FAILED = "failed"
    CANCELLED = "cancelled"
    INSPECTED = "inspected"
    QUIT = "quit"


@dataclass(frozen=True)
class DispatchOutcome:
    action: Action
    pause: bool = True
    command: Optional[str] = None
    mode: Optional[ExecutionMode] = None
    result: Optional[CommandResult] = None


class CommandDispatcher:
    """Route a chosen :class:`MenuItem` to navigation, inspection or execution."""

    def __init__(
        self,
        navigator: Navigator,
        resolver: VariableResolver,
        *,
        classifier: Optional[CommandClassifier] = None,
        runner: Optional[ProcessRunner] = None,
        terminal: Optional[TerminalHandoff] = None,
        inspector: Optional[Inspector] = None,
        reporter: Optional[DispatchReporter] = None,
    ) -> None:
        self.navigator = navigator
        self.resolver = resolver
        self.classifier = classifier or CommandClassifier()
        self.runner = runner or ProcessRunner()
        self.terminal = terminal
        self.inspector = inspector
        self.reporter = reporter or DispatchReporter()

    def dispatch(self, item: MenuItem) -> DispatchOutcome:
        if item.kind is ItemKind.NAVIGATE:
            return self._navigate(item.target)
        if item.kind is ItemKind.INSPECT:
            if self.inspector is not None:
                self.inspector.inspect(item.target)
            return DispatchOutcome(Action.INSPECTED)
        if item.is_quit:
            self.navigator.quit()
            self.reporter.goodbye()
            return DispatchOutcome(Action.QUIT, pause=False)
        return self.execute(item.target)

    def _navigate(self, target: str) -> DispatchOutcome:
        try:
            self.navigator.navigate(target)
        except NavigationTargetMissing as exc:
            self.reporter.navigation_failed(exc)
            return DispatchOutcome(Action.FAILED)
        return DispatchOutcome(Action.NAVIGATED, pause=False)

    def execute(self, template: str) -> DispatchOutcome:
        """Substitute, classify and run ``template``."""

        try:
            command = substitute(template, self.resolver)
        except SubstitutionCancelled as exc:
            self.reporter.substitution_cancelled(exc)
            return DispatchOutcome(Action.CANCELLED)

        mode = self.classifier.classify(command)
        self.reporter.announce(command, mode)
        logger.info("Executing %s command: %s", mode.value, command)
        try:
            if mode is ExecutionMode.INTERACTIVE:
                result = self._run_interactive(command)
            else:
                result = self.runner.run_captured(command)
        except CommandExecutionError as exc:
            logger.error("Command could not be started: %s", exc)
            self.reporter.command_failed(exc)
            return DispatchOutcome(Action.FAILED, command=command, mode=mode)

        if not result.ok:
            logger.warning("Command exited with %s: %s", result.returncode, command)
            self.reporter.command_failed(result.error())
            return DispatchOutcome(Action.FAILED, command=command, mode=mode, result=result)

        self.reporter.command_finished(result, mode)
        return DispatchOutcome(Action.EXECUTED, command=command, mode=mode, result=result)

    def _run_interactive(self, command: str) -> CommandResult:
        if self.terminal is None:
            return self.runner.run_interactive(command)
        with self.terminal.released():
            return self.runner.run_interactive(command)


__all__ = [
    "Action",
    "CommandDispatcher",
    "DispatchOutcome",
    "DispatchReporter",
    "Inspector",
    "TerminalHandoff",
]
