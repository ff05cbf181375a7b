from __future__ import annotations

from typing import Dict, List, Optional

import pytest

from smartmenu.core.errors import SubstitutionCancelled
from smartmenu.core.substitution import MappingResolver, apply_values, extract_variables, substitute
from smartmenu.core.variable_store import VariableStore


class CountingResolver:
    def __init__(self, values: Dict[str, Optional[str]]) -> None:
        self.values = values
        self.calls: List[str] = []

    def resolve(self, name: str) -> Optional[str]:
        self.calls.append(name)
        return self.values.get(name)


def test_extract_variables_is_distinct_and_ordered() -> None:
    assert extract_variables("ssh ${user}@${host} ${user}") == ["user", "host"]
    assert extract_variables("ssh ${username}@${server} 'cd ${path}'") == ["username", "server", "path"]
    assert extract_variables("cat ${--file}") == ["--file"]
    assert extract_variables("echo $HOME ${}") == []


def test_each_name_resolved_once_and_applied_everywhere() -> None:
    resolver = CountingResolver({"user": "root", "host": "db1"})

    result = substitute("ssh ${user}@${host} ${user}", resolver)

    assert result == "ssh root@db1 root"
    assert resolver.calls == ["user", "host"]


def test_substitute_simple_command() -> None:
    resolver = CountingResolver({"user": "root", "host": "db1"})
    assert substitute("ssh ${user}@${host}", resolver) == "ssh root@db1"


def test_template_without_placeholders_skips_resolver() -> None:
    resolver = CountingResolver({})

    assert substitute("ls -la", resolver) == "ls -la"
    assert resolver.calls == []


def test_missing_value_cancels_whole_template() -> None:
    resolver = CountingResolver({"user": "root"})

    with pytest.raises(SubstitutionCancelled) as excinfo:
        substitute("ssh ${user}@${host} ${port}", resolver)

    assert excinfo.value.variable == "host"
    assert resolver.calls == ["user", "host"]


def test_values_are_inserted_literally() -> None:
    assert apply_values("echo ${a} ${b}", {"a": "${b}", "b": "x"}) == "echo ${b} x"
    assert apply_values("echo ${a} ${c}", {"a": "1"}) == "echo 1 ${c}"


def test_mapping_resolver_records_into_store(tmp_path) -> None:
    store = VariableStore(tmp_path / "vars.json")
    store.record("host", "old")
    resolver = MappingResolver({"user": "deploy"}, store, use_history=True)

    assert substitute("ssh ${user}@${host}", resolver) == "ssh deploy@old"
    assert store.recall("user") == ["deploy"]
    assert store.recall("host") == ["old"]


def test_mapping_resolver_treats_empty_as_missing() -> None:
    resolver = MappingResolver({"name": ""})
    with pytest.raises(SubstitutionCancelled):
        substitute("echo ${name}", resolver)
