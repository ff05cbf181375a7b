"""Child process execution for resolved menu commands."""

from __future__ import annotations

import os
import re
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Tuple

from .errors import CommandExecutionError


@dataclass(frozen=True)
class CommandResult:
    command: str
    returncode: int
    stdout: str = ""
    stderr: str = ""
    cwd: Optional[Path] = None

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    def error(self) -> CommandExecutionError:
        return CommandExecutionError(self.command, self.returncode, (self.stderr or self.stdout).strip())


class ProcessRunner:
    """Run shell command strings, captured or with the terminal inherited.

    Commands that mention one of ``parent_dir_tools`` run one directory above
    ``cwd``; every other command runs in ``cwd`` itself.
    """

    def __init__(
        self,
        cwd: Optional[Path] = None,
        *,
        parent_dir_tools: Iterable[str] = ("supabase",),
    ) -> None:
        self.cwd = Path(cwd) if cwd is not None else None
        self.parent_dir_tools: Tuple[str, ...] = tuple(parent_dir_tools)

    def working_dir(self, command: str) -> Path:
        base = self.cwd or Path.cwd()
        for tool in self.parent_dir_tools:
            if re.search(rf"\b{re.escape(tool)}\b", command):
                return base.resolve().parent
        return base

    def run_captured(self, command: str) -> CommandResult:
        """Run ``command`` to completion, returning its captured output."""

        cwd = self.working_dir(command)
        try:
            completed = subprocess.run(
                command,
                shell=True,
                cwd=cwd,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            raise CommandExecutionError(command, None, str(exc)) from exc
        return CommandResult(
            command=command,
            returncode=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
            cwd=cwd,
        )

    def run_interactive(self, command: str) -> CommandResult:
        """Run ``command`` attached to this terminal and wait for it to exit."""

        cwd = self.working_dir(command)
        try:
            completed = subprocess.run(
                command,
                shell=True,
                cwd=cwd,
                env=dict(os.environ),
                check=False,
            )
        except OSError as exc:
            raise CommandExecutionError(command, None, str(exc)) from exc
        return CommandResult(command=command, returncode=completed.returncode, cwd=cwd)


__all__ = ["CommandResult", "ProcessRunner"]
