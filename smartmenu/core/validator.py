"""Structural, reference and cycle validation for raw menu definitions.

Menu data arrives as ``{menu_name: [[label, kind, target], ...]}``. The
validator walks it once and collects every problem before deciding whether
the definition is usable:

* fatal errors (malformed items, dangling references, disallowed cycles)
  end in a single :class:`MenuValidationError` listing all of them;
* warnings (empty menus, unreferenced menus, placeholders shared between
  commands, a ``quit`` item with an odd label) are returned in the report
  and never block startup.

The only checks that stop immediately are the two preconditions: the data
must be a mapping and it must contain a ``root`` menu.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Set

from .errors import MenuValidationError, MissingRootMenuError
from .menu_graph import QUIT_COMMAND, ROOT_MENU, ItemKind, MenuGraph
from .substitution import extract_variables

logger = logging.getLogger(__name__)

_KINDS = tuple(kind.value for kind in ItemKind)


@dataclass
class ValidationReport:
    """Outcome of :func:`validate`."""

    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    menu_count: int = 0
    variables: List[str] = field(default_factory=list)
    duplicate_variables: List[str] = field(default_factory=list)
    cycles: List[List[str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def summary(self) -> str:
        if self.errors:
            return f"Menu structure validation failed with {len(self.errors)} error(s)"
        return (
            f"Menu structure validated successfully "
            f"({self.menu_count} menus, {len(self.variables)} unique variables)"
        )


def _is_text(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def _check_item(
    menu_name: str,
    index: int,
    item: Any,
    report: ValidationReport,
    referenced: Set[str],
    seen_variables: List[str],
) -> None:
    if not isinstance(item, (list, tuple)) or len(item) != 3:
        report.errors.append(
            f"Menu '{menu_name}' item {index}: must be an array with exactly 3 elements "
            "[name, type, command]"
        )
        return

    label, kind, target = item
    if not _is_text(label):
        report.errors.append(f"Menu '{menu_name}' item {index}: name must be a non-empty string")
    if kind not in _KINDS:
        report.errors.append(
            f"Menu '{menu_name}' item {index}: type must be 'menu', 'exec', or 'debug', got '{kind}'"
        )
    if not _is_text(target):
        report.errors.append(f"Menu '{menu_name}' item {index}: command must be a non-empty string")
        return

    if kind == ItemKind.NAVIGATE.value and target != ROOT_MENU:
        referenced.add(target)

    if kind == ItemKind.EXECUTE.value:
        for name in extract_variables(target):
            if name in seen_variables:
                if name not in report.duplicate_variables:
                    report.duplicate_variables.append(name)
            else:
                seen_variables.append(name)

        if target == QUIT_COMMAND and isinstance(label, str) and label.lower() != QUIT_COMMAND:
            report.warnings.append(
                f"Menu '{menu_name}' item {index}: 'quit' command should probably be named 'Quit'"
            )


def _navigation_targets(rows: Any) -> List[str]:
    """Return well-formed navigate targets of a raw menu, excluding ``root``."""

    if not isinstance(rows, (list, tuple)):
        return []
    targets: List[str] = []
    for row in rows:
        if not isinstance(row, (list, tuple)) or len(row) != 3:
            continue
        _, kind, target = row
        if kind == ItemKind.NAVIGATE.value and _is_text(target) and target != ROOT_MENU:
            targets.append(target)
    return targets


def find_cycles(data: Mapping[str, Any], start: str = ROOT_MENU) -> List[List[str]]:
    """Depth-first search from ``start`` returning each disallowed cycle path.

    Navigation back to ``root`` is never followed. A cycle whose looping part
    is exactly two menus (``A -> B -> A``) is the ordinary "back" idiom and is
    not reported; anything longer, and a menu linking to itself, is.
    """

    adjacency: Dict[str, List[str]] = {name: _navigation_targets(rows) for name, rows in data.items()}
    cycles: List[List[str]] = []
    visited: Set[str] = set()
    on_stack: Set[str] = set()
    path: List[str] = []

    def visit(name: str) -> None:
        if name in on_stack:
            loop = path[path.index(name):]
            if len(loop) == 2 and loop[0] == name:
                return
            cycles.append(path + [name])
            return
        if name in visited:
            return

        visited.add(name)
        on_stack.add(name)
        path.append(name)
        for target in adjacency.get(name, []):
            visit(target)
        path.pop()
        on_stack.discard(name)

    visit(start)
    return cycles


def validate(data: Any, *, warnings: bool = True) -> ValidationReport:
    """Validate raw menu ``data`` and return the report.

    Raises :class:`MissingRootMenuError` when the preconditions fail and
    :class:`MenuValidationError` when any fatal error was collected. When
    ``warnings`` is true the non-fatal findings are also logged.
    """

    if not isinstance(data, Mapping):
        raise MissingRootMenuError("Menu data must be a non-null object")
    if ROOT_MENU not in data:
        raise MissingRootMenuError("Menu structure must have a 'root' menu")

    report = ValidationReport(menu_count=len(data))
    referenced: Set[str] = set()

    for menu_name, rows in data.items():
        if not isinstance(rows, (list, tuple)):
            report.errors.append(f"Menu '{menu_name}' must be an array")
            continue
        if not rows:
            report.warnings.append(f"Menu '{menu_name}' is empty")
        for index, item in enumerate(rows):
            _check_item(menu_name, index, item, report, referenced, report.variables)

    for menu_name in data:
        if menu_name != ROOT_MENU and menu_name not in referenced:
            report.warnings.append(f"Menu '{menu_name}' is defined but never referenced")

    for target in sorted(referenced):
        if target not in data:
            report.errors.append(f"Menu '{target}' is referenced but not defined")

    for cycle in find_cycles(data):
        report.cycles.append(cycle)
        report.errors.append(f"Circular menu reference detected: {' → '.join(cycle)}")

    if report.duplicate_variables:
        report.warnings.append(
            f"Duplicate variables found: {', '.join(report.duplicate_variables)}"
        )

    if warnings:
        for message in report.warnings:
            logger.warning("Menu validation warning: %s", message)

    if report.errors:
        for message in report.errors:
            logger.error("Menu validation error: %s", message)
        raise MenuValidationError(report.summary(), errors=report.errors, report=report)

    logger.info(report.summary())
    return report


def load_graph(data: Any, *, check: bool = True, warnings: bool = True) -> tuple[MenuGraph, Optional[ValidationReport]]:
    """Validate ``data`` (unless ``check`` is false) and build the graph."""

    report = validate(data, warnings=warnings) if check else None
    return MenuGraph.from_mapping(data), report


def format_errors(errors: Sequence[str]) -> str:
    return "\n".join(f"  - {message}" for message in errors)


__all__ = [
    "ValidationReport",
    "find_cycles",
    "format_errors",
    "load_graph",
    "validate",
]
