"""Tests for routing menu items through substitution, classification and execution."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, List, Optional, Tuple

import pytest

from smartmenu.core.classifier import ExecutionMode
from smartmenu.core.dispatcher import Action, CommandDispatcher, DispatchReporter
from smartmenu.core.errors import CommandExecutionError
from smartmenu.core.menu_graph import ItemKind, MenuGraph, MenuItem
from smartmenu.core.navigation import Navigator
from smartmenu.core.process import CommandResult, ProcessRunner
from smartmenu.core.substitution import MappingResolver


class FakeRunner(ProcessRunner):
    def __init__(self, returncode: int = 0, fail_spawn: bool = False) -> None:
        super().__init__()
        self.returncode = returncode
        self.fail_spawn = fail_spawn
        self.calls: List[Tuple[str, str]] = []
        self.terminal: Optional["FakeTerminal"] = None
        self.terminal_open_during_run: Optional[bool] = None

    def run_captured(self, command: str) -> CommandResult:
        self.calls.append(("captured", command))
        if self.fail_spawn:
            raise CommandExecutionError(command, None, "No such file or directory")
        return CommandResult(command, self.returncode, stdout="out\n", stderr="")

    def run_interactive(self, command: str) -> CommandResult:
        self.calls.append(("interactive", command))
        if self.terminal is not None:
            self.terminal_open_during_run = self.terminal.open
        return CommandResult(command, self.returncode)


class FakeTerminal:
    def __init__(self) -> None:
        self.open = True
        self.reopened = 0

    @contextmanager
    def released(self) -> Iterator[None]:
        self.open = False
        try:
            yield
        finally:
            self.open = True
            self.reopened += 1


class RecordingReporter(DispatchReporter):
    def __init__(self) -> None:
        self.events: List[Tuple[str, object]] = []

    def announce(self, command, mode) -> None:
        self.events.append(("announce", (command, mode)))

    def command_finished(self, result, mode) -> None:
        self.events.append(("finished", result.returncode))

    def command_failed(self, error) -> None:
        self.events.append(("failed", error))

    def substitution_cancelled(self, error) -> None:
        self.events.append(("cancelled", error.variable))

    def navigation_failed(self, error) -> None:
        self.events.append(("navigation", error.target))

    def goodbye(self) -> None:
        self.events.append(("goodbye", None))


class RecordingInspector:
    def __init__(self) -> None:
        self.keys: List[str] = []

    def inspect(self, key: str) -> None:
        self.keys.append(key)


@pytest.fixture()
def parts(sample_menu):
    navigator = Navigator(MenuGraph.from_mapping(sample_menu))
    runner = FakeRunner()
    terminal = FakeTerminal()
    runner.terminal = terminal
    reporter = RecordingReporter()
    inspector = RecordingInspector()
    dispatcher = CommandDispatcher(
        navigator,
        MappingResolver({"name": "world", "user": "root", "host": "db1"}),
        runner=runner,
        terminal=terminal,
        inspector=inspector,
        reporter=reporter,
    )
    return dispatcher, navigator, runner, terminal, reporter, inspector


def test_navigate_item_moves_without_pause(parts) -> None:
    dispatcher, navigator, runner, *_ = parts

    outcome = dispatcher.dispatch(MenuItem("Files", ItemKind.NAVIGATE, "fileMenu"))

    assert outcome.action is Action.NAVIGATED
    assert outcome.pause is False
    assert navigator.state.current_menu == "fileMenu"
    assert runner.calls == []


def test_missing_navigation_target_is_reported(parts) -> None:
    dispatcher, navigator, _, _, reporter, _ = parts

    outcome = dispatcher.dispatch(MenuItem("Gone", ItemKind.NAVIGATE, "nowhere"))

    assert outcome.action is Action.FAILED
    assert outcome.pause is True
    assert reporter.events == [("navigation", "nowhere")]
    assert navigator.state.current_menu == "root"


def test_quit_stops_without_pause(parts) -> None:
    dispatcher, navigator, runner, _, reporter, _ = parts

    outcome = dispatcher.dispatch(MenuItem("Quit", ItemKind.EXECUTE, "quit"))

    assert outcome.action is Action.QUIT
    assert outcome.pause is False
    assert navigator.running is False
    assert runner.calls == []
    assert reporter.events == [("goodbye", None)]


def test_plain_command_is_captured(parts) -> None:
    dispatcher, _, runner, terminal, reporter, _ = parts

    outcome = dispatcher.dispatch(MenuItem("Greet", ItemKind.EXECUTE, "echo hello ${name}"))

    assert outcome.action is Action.EXECUTED
    assert outcome.mode is ExecutionMode.PLAIN
    assert outcome.command == "echo hello world"
    assert outcome.pause is True
    assert runner.calls == [("captured", "echo hello world")]
    assert terminal.reopened == 0
    assert reporter.events[-1] == ("finished", 0)


def test_interactive_command_releases_terminal(parts) -> None:
    dispatcher, _, runner, terminal, _, _ = parts

    outcome = dispatcher.dispatch(MenuItem("Connect", ItemKind.EXECUTE, "ssh ${user}@${host}"))

    assert outcome.mode is ExecutionMode.INTERACTIVE
    assert runner.calls == [("interactive", "ssh root@db1")]
    assert runner.terminal_open_during_run is False
    assert terminal.open is True
    assert terminal.reopened == 1


def test_cancelled_substitution_runs_nothing(parts) -> None:
    dispatcher, _, runner, _, reporter, _ = parts

    outcome = dispatcher.dispatch(MenuItem("Cat", ItemKind.EXECUTE, "cat ${missing}"))

    assert outcome.action is Action.CANCELLED
    assert outcome.pause is True
    assert runner.calls == []
    assert reporter.events == [("cancelled", "missing")]


def test_non_zero_exit_is_reported(parts) -> None:
    dispatcher, _, runner, _, reporter, _ = parts
    runner.returncode = 2

    outcome = dispatcher.dispatch(MenuItem("List", ItemKind.EXECUTE, "ls /nope"))

    assert outcome.action is Action.FAILED
    kind, error = reporter.events[-1]
    assert kind == "failed"
    assert isinstance(error, CommandExecutionError)
    assert error.returncode == 2
    assert error.detail == "out"


def test_spawn_failure_is_reported(parts) -> None:
    dispatcher, _, runner, _, reporter, _ = parts
    runner.fail_spawn = True

    outcome = dispatcher.dispatch(MenuItem("List", ItemKind.EXECUTE, "ls"))

    assert outcome.action is Action.FAILED
    assert outcome.result is None
    kind, error = reporter.events[-1]
    assert kind == "failed"
    assert error.returncode is None


def test_inspect_item_is_delegated(parts) -> None:
    dispatcher, _, runner, _, _, inspector = parts

    outcome = dispatcher.dispatch(MenuItem("Vars", ItemKind.INSPECT, "vars"))

    assert outcome.action is Action.INSPECTED
    assert outcome.pause is True
    assert inspector.keys == ["vars"]
    assert runner.calls == []


# ----------------------------------------------------------------------
# Real child processes
# ----------------------------------------------------------------------
def test_captured_run_returns_stdout(tmp_path) -> None:
    result = ProcessRunner(tmp_path).run_captured("echo hi")

    assert result.ok
    assert result.stdout == "hi\n"
    assert result.stderr == ""
    assert result.cwd == tmp_path


def test_captured_run_reports_non_zero_exit(tmp_path) -> None:
    result = ProcessRunner(tmp_path).run_captured("sh -c 'echo err >&2; exit 3'")

    assert not result.ok
    assert result.returncode == 3
    error = result.error()
    assert error.returncode == 3
    assert error.detail == "err"


def test_named_tool_runs_in_parent_directory(tmp_path) -> None:
    result = ProcessRunner(tmp_path, parent_dir_tools=("pwd",)).run_captured("pwd")

    assert result.cwd == tmp_path.resolve().parent
    assert result.stdout.strip() == str(tmp_path.resolve().parent)


def test_missing_working_directory_raises(tmp_path) -> None:
    runner = ProcessRunner(tmp_path / "gone")

    with pytest.raises(CommandExecutionError) as excinfo:
        runner.run_captured("echo hi")
    assert excinfo.value.returncode is None


def test_interactive_run_returns_exit_code(tmp_path) -> None:
    result = ProcessRunner(tmp_path).run_interactive("exit 4")

    assert result.returncode == 4
    assert result.stdout == ""


def test_dispatch_with_real_runner_reports_stderr(sample_menu, tmp_path) -> None:
    reporter = RecordingReporter()
    dispatcher = CommandDispatcher(
        Navigator(MenuGraph.from_mapping(sample_menu)),
        MappingResolver({"code": "5"}),
        runner=ProcessRunner(tmp_path),
        reporter=reporter,
    )

    outcome = dispatcher.dispatch(MenuItem("Fail", ItemKind.EXECUTE, "echo broken >&2; exit ${code}"))

    assert outcome.action is Action.FAILED
    assert outcome.result is not None and outcome.result.returncode == 5
    kind, error = reporter.events[-1]
    assert kind == "failed"
    assert error.detail == "broken"
