"""Application entry point launching the interactive menu."""

from __future__ import annotations

import argparse
import importlib.util
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape

from . import __version__
from .config import MenuConfig
from .core.errors import MenuValidationError
from .defaults import DEFAULT_MENU
from .utils import logbook


UI_PACKAGES = ("prompt_toolkit", "rich")


def _missing_ui_dependencies() -> list[str]:
    """Packages used to read choices and draw menus that cannot be imported."""

    return [name for name in UI_PACKAGES if importlib.util.find_spec(name) is None]


def _print_dependency_error(missing: list[str]) -> None:
    print(f"smartmenu needs {', '.join(sorted(missing))} to draw menus and read choices.", file=sys.stderr)
    print("Install the package with its dependencies: python -m pip install -e .", file=sys.stderr)


def _render_splash(console: Console) -> None:
    console.print(f"[bold #00B7FF]smartmenu v{__version__}[/]", justify="center")
    console.print("[#7DF9FF]Console menu system started[/]", justify="center")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="smartmenu", description="Interactive terminal menu runner")
    parser.add_argument("menu", nargs="?", help="JSON menu definition (defaults to the built-in demo menu)")
    parser.add_argument("--config", help="Variable history file (default ./menu-config.json)")
    parser.add_argument(
        "--env",
        action="append",
        default=[],
        metavar="FILE",
        help="Seed variable history from a .env file; may be repeated",
    )
    parser.add_argument("--no-validate", action="store_true", help="Skip menu validation")
    parser.add_argument("--no-warnings", action="store_true", help="Do not show validation warnings")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _config_from_args(options: argparse.Namespace) -> MenuConfig:
    settings = {
        "config_path": Path(options.config) if options.config else None,
        "env_files": tuple(Path(item) for item in options.env),
        "validate": not options.no_validate,
        "warnings": not options.no_warnings,
    }
    if options.menu:
        return MenuConfig.from_menu_file(options.menu, **settings)
    return MenuConfig.from_mapping(DEFAULT_MENU, **settings)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the menu. Returns 0 on a clean quit, 1 when startup fails."""

    options = _build_parser().parse_args(list(argv) if argv is not None else None)

    missing = _missing_ui_dependencies()
    if missing:
        _print_dependency_error(missing)
        return 1

    console = Console(highlight=False)
    logbook.get_logger()

    try:
        config = _config_from_args(options)
    except (OSError, ValueError) as exc:
        console.print(f"[red]Could not load menu: {escape(str(exc))}[/]")
        return 1

    from .ui import MenuSession

    try:
        session = MenuSession(config, console=console)
    except MenuValidationError as exc:
        console.print("[red]❌ Menu validation errors:[/]")
        for message in exc.errors:
            console.print(f"  - {message}", markup=False)
        console.print(f"[red]{escape(str(exc))}[/]")
        logbook.record("session.rejected", errors=exc.errors)
        return 1

    _render_splash(console)
    try:
        return session.run()
    finally:
        logging.shutdown()


__all__ = ["main"]
