"""Menu graph, validation, substitution and dispatch for smartmenu."""

from .classifier import CommandClassifier, ExecutionMode, InteractivePattern, classify
from .dispatcher import Action, CommandDispatcher, DispatchOutcome, DispatchReporter
from .errors import (
    CommandExecutionError,
    MenuValidationError,
    MissingRootMenuError,
    NavigationTargetMissing,
    SmartMenuError,
    SubstitutionCancelled,
)
from .menu_graph import ItemKind, Menu, MenuGraph, MenuItem, load_menu_data, menu_title
from .navigation import Choice, ChoiceKind, NavigationState, Navigator
from .process import CommandResult, ProcessRunner
from .substitution import MappingResolver, VariableResolver, extract_variables, substitute
from .validator import ValidationReport, find_cycles, load_graph, validate
from .variable_store import VariableStore, parse_env_content

__all__ = [
    "Action",
    "Choice",
    "ChoiceKind",
    "CommandClassifier",
    "CommandDispatcher",
    "CommandExecutionError",
    "CommandResult",
    "DispatchOutcome",
    "DispatchReporter",
    "ExecutionMode",
    "InteractivePattern",
    "ItemKind",
    "MappingResolver",
    "Menu",
    "MenuGraph",
    "MenuItem",
    "MenuValidationError",
    "MissingRootMenuError",
    "NavigationState",
    "NavigationTargetMissing",
    "Navigator",
    "ProcessRunner",
    "SmartMenuError",
    "SubstitutionCancelled",
    "ValidationReport",
    "VariableResolver",
    "VariableStore",
    "classify",
    "extract_variables",
    "find_cycles",
    "load_graph",
    "load_menu_data",
    "menu_title",
    "parse_env_content",
    "substitute",
    "validate",
]
