"""Exception taxonomy shared by the smartmenu core."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Sequence

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from .validator import ValidationReport


class SmartMenuError(RuntimeError):
    """Base class for every smartmenu failure."""


class MenuValidationError(SmartMenuError):
    """Raised when a menu definition has one or more fatal problems.

    ``errors`` lists every fatal message collected by the validator so the
    caller can show all of them at once instead of failing one at a time.
    """

    def __init__(
        self,
        message: str,
        errors: Optional[Sequence[str]] = None,
        report: Optional["ValidationReport"] = None,
    ) -> None:
        super().__init__(message)
        self.errors: List[str] = list(errors or [message])
        self.report = report


class MissingRootMenuError(MenuValidationError):
    """Raised before any other check when the ``root`` menu is absent."""


class SubstitutionCancelled(SmartMenuError):
    """Raised when no value was supplied for a command placeholder."""

    def __init__(self, variable: str) -> None:
        super().__init__(f"No value provided for variable: {variable}")
        self.variable = variable


class CommandExecutionError(SmartMenuError):
    """Raised for commands that could not be spawned or exited non-zero."""

    def __init__(self, command: str, returncode: Optional[int], detail: str = "") -> None:
        if returncode is None:
            message = f"Could not run '{command}': {detail}".rstrip(": ")
        else:
            message = f"Command exited with code {returncode}: {command}"
        super().__init__(message)
        self.command = command
        self.returncode = returncode
        self.detail = detail


class NavigationTargetMissing(SmartMenuError):
    """Raised when a navigate item points at a menu that does not exist."""

    def __init__(self, target: str) -> None:
        super().__init__(f"Menu '{target}' not found!")
        self.target = target


__all__ = [
    "CommandExecutionError",
    "MenuValidationError",
    "MissingRootMenuError",
    "NavigationTargetMissing",
    "SmartMenuError",
    "SubstitutionCancelled",
]
