"""User interface components for smartmenu."""

from .inspect import ConsoleInspector
from .line_input import LineInput
from .reporter import ConsoleReporter
from .resolver import PromptResolver
from .terminal import MenuSession, launch_session

__all__ = [
    "ConsoleInspector",
    "ConsoleReporter",
    "LineInput",
    "MenuSession",
    "PromptResolver",
    "launch_session",
]
