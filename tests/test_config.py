from __future__ import annotations

import json
from pathlib import Path

from smartmenu.config import MenuConfig
from smartmenu.core.classifier import ExecutionMode
from smartmenu.core.variable_store import VariableStore


def test_from_menu_file(tmp_path: Path, sample_menu) -> None:
    path = tmp_path / "menu.json"
    path.write_text(json.dumps(sample_menu), encoding="utf-8")

    config = MenuConfig.from_menu_file(path, warnings=False)

    assert config.menu == sample_menu
    assert config.menu_path == path
    assert config.warnings is False


def test_default_config_path_honours_environment(tmp_path: Path, sample_menu) -> None:
    config = MenuConfig.from_mapping(sample_menu)
    assert config.resolved_config_path() == tmp_path / "menu-config.json"


def test_build_store_applies_env_files_then_seed(tmp_path: Path, sample_menu) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("HOST=db1\n", encoding="utf-8")
    config = MenuConfig.from_mapping(
        sample_menu,
        config_path=tmp_path / "vars.json",
        env_files=(env_file, tmp_path / "missing.env"),
        seed={"user": "root", "HOST": "ignored"},
    )

    store = config.build_store()

    assert store.recall("HOST") == ["db1"]
    assert store.recall("user") == ["root"]
    assert VariableStore(tmp_path / "vars.json").recall("user") == ["root"]


def test_supplied_store_is_used(sample_menu) -> None:
    store = VariableStore()
    config = MenuConfig.from_mapping(sample_menu, store=store, seed={"a": ["1", "2"]})

    assert config.build_store() is store
    assert store.recall("a") == ["1", "2"]


def test_classifier_and_runner_options(tmp_path: Path, sample_menu) -> None:
    config = MenuConfig.from_mapping(
        sample_menu,
        cwd=tmp_path / "project",
        parent_dir_tools=("terraform",),
        extra_interactive_patterns=(("htop", r"\bhtop\b"),),
    )

    assert config.build_classifier().classify("htop") is ExecutionMode.INTERACTIVE
    runner = config.build_runner()
    assert runner.working_dir("terraform apply") == tmp_path.resolve()
    assert runner.working_dir("supabase start") == tmp_path / "project"
