"""Headless automation CLI for smartmenu."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from . import __version__
from .core import (
    CommandClassifier,
    MappingResolver,
    MenuValidationError,
    SubstitutionCancelled,
    VariableStore,
    extract_variables,
    load_menu_data,
    substitute,
    validate,
)
from .utils.paths import default_config_path


class CommandFailed(Exception):
    """Carry a JSON payload alongside a non-zero exit status."""

    def __init__(self, payload: Dict[str, Any]) -> None:
        super().__init__(payload.get("error", "failed"))
        self.payload = payload


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="smartmenuctl", description="smartmenu headless control surface")
    parser.add_argument("--version", action="store_true", help="Display version information and exit")
    parser.add_argument("--config", default=None, help="Variable history file (default ./menu-config.json)")
    subparsers = parser.add_subparsers(dest="command")

    # Validate -----------------------------------------------------------
    check = subparsers.add_parser("validate", help="Validate a JSON menu definition")
    check.add_argument("menu")

    # Variables ----------------------------------------------------------
    variables = subparsers.add_parser("vars", help="Manage remembered variable values")
    vars_sub = variables.add_subparsers(dest="vars_command")

    vars_sub.add_parser("list", help="List variables and their recent values")

    vars_add = vars_sub.add_parser("add", help="Register a variable")
    vars_add.add_argument("name")
    vars_add.add_argument("values", nargs="*")

    vars_remove = vars_sub.add_parser("remove", help="Remove a variable")
    vars_remove.add_argument("name")

    vars_remove_value = vars_sub.add_parser("remove-value", help="Remove one remembered value")
    vars_remove_value.add_argument("name")
    vars_remove_value.add_argument("value")

    vars_sub.add_parser("clear", help="Remove every variable")

    vars_export = vars_sub.add_parser("export", help="Export variables to a JSON file")
    vars_export.add_argument("path")

    vars_env = vars_sub.add_parser("load-env", help="Seed variables from .env files")
    vars_env.add_argument("paths", nargs="+")

    # Render -------------------------------------------------------------
    render = subparsers.add_parser("render", help="Substitute a command template and classify it")
    render.add_argument("template")
    render.add_argument(
        "--set",
        action="append",
        default=[],
        dest="assignments",
        metavar="NAME=VALUE",
        help="Value for a placeholder; may be repeated",
    )
    render.add_argument(
        "--recall",
        action="store_true",
        help="Use the most recent remembered value for placeholders not given with --set",
    )

    return parser


def _store(args: argparse.Namespace) -> VariableStore:
    return VariableStore(Path(args.config) if args.config else default_config_path())


def _handle_validate(args: argparse.Namespace) -> Any:
    try:
        data = load_menu_data(args.menu)
    except (OSError, ValueError) as exc:
        raise CommandFailed({"valid": False, "errors": [f"Could not load menu: {exc}"]}) from exc
    try:
        report = validate(data, warnings=False)
    except MenuValidationError as exc:
        warnings = exc.report.warnings if exc.report is not None else []
        raise CommandFailed({"valid": False, "errors": exc.errors, "warnings": warnings}) from exc
    return {
        "valid": True,
        "menus": report.menu_count,
        "variables": report.variables,
        "warnings": report.warnings,
    }


def _handle_vars(args: argparse.Namespace) -> Any:
    store = _store(args)
    command = args.vars_command
    if command == "list":
        return store.snapshot()
    if command == "add":
        return {"added": store.add_variable(args.name, args.values)}
    if command == "remove":
        return {"removed": store.remove_variable(args.name)}
    if command == "remove-value":
        return {"removed": store.remove_value(args.name, args.value)}
    if command == "clear":
        store.clear()
        return {"status": "cleared"}
    if command == "export":
        return {"path": str(store.export(Path(args.path)))}
    if command == "load-env":
        return {path: store.load_env_file(path) for path in args.paths}
    raise ValueError("Unknown vars command")


def _parse_assignments(assignments: Sequence[str]) -> Dict[str, str]:
    values: Dict[str, str] = {}
    for item in assignments:
        name, sep, value = item.partition("=")
        if not sep or not name:
            raise ValueError(f"Expected NAME=VALUE, got '{item}'")
        values[name] = value
    return values


def _handle_render(args: argparse.Namespace) -> Any:
    store = _store(args)
    resolver = MappingResolver(_parse_assignments(args.assignments), store, use_history=args.recall)
    try:
        command = substitute(args.template, resolver)
    except SubstitutionCancelled as exc:
        raise CommandFailed(
            {"error": str(exc), "variable": exc.variable, "variables": extract_variables(args.template)}
        ) from exc
    return {
        "command": command,
        "mode": CommandClassifier().classify(command).value,
        "variables": extract_variables(args.template),
    }


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    if args.version:
        print(__version__)
        return 0

    handlers = {
        "validate": _handle_validate,
        "vars": _handle_vars,
        "render": _handle_render,
    }
    if args.command not in handlers or (args.command == "vars" and not args.vars_command):
        parser.print_help()
        return 1

    status = 0
    try:
        result = handlers[args.command](args)
    except CommandFailed as exc:
        result = exc.payload
        status = 1
    except ValueError as exc:
        parser.error(str(exc))

    json.dump(result, sys.stdout, indent=2, default=str)
    sys.stdout.write("\n")
    return status


__all__ = ["main"]
