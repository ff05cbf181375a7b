from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Dict, Iterator, List

import pytest


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def isolated_state(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    state = tmp_path / "state"
    monkeypatch.setenv("SMARTMENU_STATE_DIR", str(state))
    monkeypatch.setenv("SMARTMENU_CONFIG", str(tmp_path / "menu-config.json"))
    yield state
    logger = logging.getLogger("smartmenu")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture()
def sample_menu() -> Dict[str, List[List[str]]]:
    return {
        "root": [
            ["Files", "menu", "fileMenu"],
            ["Greet", "exec", "echo hello ${name}"],
            ["Show Variables", "debug", "vars"],
            ["Quit", "exec", "quit"],
        ],
        "fileMenu": [
            ["List", "exec", "ls -la"],
            ["Connect", "exec", "ssh ${user}@${host}"],
            ["Back", "menu", "root"],
        ],
    }


