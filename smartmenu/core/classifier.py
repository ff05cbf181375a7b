"""Decide whether a resolved command needs the whole terminal."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Pattern, Sequence, Tuple


class ExecutionMode(str, Enum):
    PLAIN = "plain"
    INTERACTIVE = "interactive"


@dataclass(frozen=True)
class InteractivePattern:
    name: str
    pattern: Pattern[str]

    @classmethod
    def compile(cls, name: str, expression: str) -> "InteractivePattern":
        return cls(name=name, pattern=re.compile(expression))

    def matches(self, command: str) -> bool:
        return self.pattern.search(command) is not None


# Checked in order; the first match wins. Extend via CommandClassifier(extra=...).
DEFAULT_PATTERNS: Tuple[InteractivePattern, ...] = tuple(
    InteractivePattern.compile(name, expression)
    for name, expression in (
        ("supabase-login", r"\bsupabase\s+login\b"),
        ("supabase-link", r"\bsupabase\s+link\b"),
        ("supabase-projects", r"\bsupabase\s+projects\s+list\b"),
        ("git-commit", r"\bgit\s+commit\b"),
        ("npm-login", r"\bnpm\s+login\b"),
        ("sudo", r"\bsudo\s+"),
        ("passwd", r"(?:^|[\s;&|])passwd(?:\s|$)"),
        # bare ``ssh host``; ``ssh -o BatchMode=yes host`` stays plain
        ("ssh", r"\bssh\s+[^-\s]"),
        ("mysql-password", r"\bmysql\s+.*-p(?:\s|$)"),
        ("psql-password", r"\bpsql\s+.*-W"),
        ("nano", r"\bnano\s+"),
        ("vim", r"\bvim\s+"),
        ("emacs", r"\bemacs\s+"),
        ("less", r"\bless\s+"),
        ("more", r"\bmore\s+"),
        ("read", r"\bread\s+"),
        ("python-repl", r"\bpython3?\s*$"),
        ("node-repl", r"\bnode\s*$"),
        ("irb-repl", r"\birb\s*$"),
    )
)


class CommandClassifier:
    """Pattern table lookup mapping a literal command to an :class:`ExecutionMode`.

    Classify the command *after* substitution; templates may still contain
    placeholders that hide the real program name.
    """

    def __init__(
        self,
        patterns: Optional[Sequence[InteractivePattern]] = None,
        *,
        extra: Iterable[Tuple[str, str]] = (),
    ) -> None:
        table = list(DEFAULT_PATTERNS if patterns is None else patterns)
        table.extend(InteractivePattern.compile(name, expression) for name, expression in extra)
        self.patterns: Tuple[InteractivePattern, ...] = tuple(table)

    def match(self, command: str) -> Optional[InteractivePattern]:
        for entry in self.patterns:
            if entry.matches(command):
                return entry
        return None

    def classify(self, command: str) -> ExecutionMode:
        if self.match(command) is not None:
            return ExecutionMode.INTERACTIVE
        return ExecutionMode.PLAIN


def classify(command: str) -> ExecutionMode:
    """Classify ``command`` against :data:`DEFAULT_PATTERNS`."""

    return _DEFAULT.classify(command)


_DEFAULT = CommandClassifier()


__all__ = [
    "CommandClassifier",
    "DEFAULT_PATTERNS",
    "ExecutionMode",
    "InteractivePattern",
    "classify",
]
