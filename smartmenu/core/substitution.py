"""``${name}`` placeholder extraction and substitution for command templates."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Dict, List, Mapping, Optional, Protocol

from .errors import SubstitutionCancelled

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from .variable_store import VariableStore

logger = logging.getLogger(__name__)

PLACEHOLDER = re.compile(r"\$\{([^}]+)\}")


class VariableResolver(Protocol):
    """Supplies a value for one placeholder name.

    Returning ``None`` means the operator supplied nothing, which cancels the
    whole command. Resolvers are responsible for recording freshly supplied
    values into the variable store.
    """

    def resolve(self, name: str) -> Optional[str]:
        ...


def extract_variables(template: str) -> List[str]:
    """Return each distinct placeholder name once, in first-seen order."""

    names: List[str] = []
    for match in PLACEHOLDER.finditer(template):
        name = match.group(1)
        if name not in names:
            names.append(name)
    return names


def apply_values(template: str, values: Mapping[str, str]) -> str:
    """Replace every ``${name}`` occurrence for the names in ``values``.

    Substituted text is never rescanned, so a value containing ``${...}``
    is inserted literally. Names missing from ``values`` are left intact.
    """

    return PLACEHOLDER.sub(lambda match: values.get(match.group(1), match.group(0)), template)


def substitute(template: str, resolver: VariableResolver) -> str:
    """Resolve every placeholder in ``template`` and return the finished command.

    Each name is resolved once even when it occurs several times. If the
    resolver yields no value for any name, :class:`SubstitutionCancelled` is
    raised and nothing is substituted.
    """

    names = extract_variables(template)
    if not names:
        return template

    values: Dict[str, str] = {}
    for name in names:
        value = resolver.resolve(name)
        if value is None:
            logger.info("Substitution cancelled; no value for %s", name)
            raise SubstitutionCancelled(name)
        values[name] = value
    return apply_values(template, values)


class MappingResolver:
    """Resolve placeholders from a fixed mapping, falling back to recall history.

    Used by the headless CLI. When ``store`` is given, supplied values are
    recorded like operator input and unknown names fall back to the most
    recent remembered value if ``use_history`` is set.
    """

    def __init__(
        self,
        values: Mapping[str, str],
        store: Optional["VariableStore"] = None,
        *,
        use_history: bool = False,
    ) -> None:
        self.values = dict(values)
        self.store = store
        self.use_history = use_history
        self.requested: List[str] = []

    def resolve(self, name: str) -> Optional[str]:
        self.requested.append(name)
        value = self.values.get(name)
        if value is None and self.use_history and self.store is not None:
            history = self.store.recall(name)
            value = history[0] if history else None
        if value is None or value == "":
            return None
        if self.store is not None:
            self.store.record(name, value)
        return value


__all__ = [
    "MappingResolver",
    "PLACEHOLDER",
    "VariableResolver",
    "apply_values",
    "extract_variables",
    "substitute",
]
