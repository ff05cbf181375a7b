from __future__ import annotations

import pytest

from smartmenu.core.classifier import (
    DEFAULT_PATTERNS,
    CommandClassifier,
    ExecutionMode,
    InteractivePattern,
    classify,
)


@pytest.mark.parametrize(
    "command",
    [
        "ssh db1",
        "ssh user@server",
        "sudo reboot",
        "passwd",
        "npx supabase login",
        "supabase link --project-ref abc",
        "git commit",
        "npm login",
        "nano file.txt",
        "vim /etc/hosts",
        "less /var/log/syslog",
        "mysql -u user -p database",
        "psql -h db -U admin -W",
        "read -p 'Name: ' name",
        "python",
        "python3 ",
        "node",
        "irb",
    ],
)
def test_interactive_commands(command: str) -> None:
    assert classify(command) is ExecutionMode.INTERACTIVE


@pytest.mark.parametrize(
    "command",
    [
        "ls -la",
        "echo hello",
        "cat file.txt",
        "cat /etc/passwd",
        "ssh -o BatchMode=yes db1",
        "python script.py",
        "uname -a",
        "ping -c 4 localhost",
        "npx supabase branches list",
    ],
)
def test_plain_commands(command: str) -> None:
    assert classify(command) is ExecutionMode.PLAIN


def test_match_reports_the_pattern_name() -> None:
    classifier = CommandClassifier()
    entry = classifier.match("sudo apt update")
    assert entry is not None
    assert entry.name == "sudo"
    assert classifier.match("ls") is None


def test_extra_patterns_extend_the_default_table() -> None:
    classifier = CommandClassifier(extra=[("htop", r"\bhtop\b")])

    assert classifier.classify("htop") is ExecutionMode.INTERACTIVE
    assert classifier.classify("sudo ls") is ExecutionMode.INTERACTIVE
    assert len(classifier.patterns) == len(DEFAULT_PATTERNS) + 1


def test_custom_table_replaces_defaults() -> None:
    classifier = CommandClassifier([InteractivePattern.compile("top", r"^top$")])

    assert classifier.classify("top") is ExecutionMode.INTERACTIVE
    assert classifier.classify("sudo reboot") is ExecutionMode.PLAIN
