"""Rules package."""

from collections.abc import Callable
from dataclasses import dataclass

from fastpy.rules.ambiguous_name import AmbiguousNameRule
from fastpy.rules.base import Finding, NodeContext, Rule
from fastpy.rules.function_name import BadFunctionNameRule
from fastpy.rules.syntax_error import SyntaxErrorRule

__all__ = [
    "Finding",
    "NodeContext",
    "Rule",
    "RuleInfo",
    "build_rules",
    "default_rules",
    "list_rule_info",
]


@dataclass(frozen=True, slots=True)
class RuleInfo:
    """Rule metadata for listing."""

    rule_id: str
    name: str
    description: str
    default_enabled: bool


@dataclass(frozen=True, slots=True)
class _RuleSpec:
    rule_id: str
    factory: Callable[[], Rule]
    name: str
    description: str
    default_enabled: bool


def default_rules() -> list[Rule]:
    """Return the rules that run on every file."""
    return build_rules()


def build_rules(*, report_error_nodes: bool = False) -> list[Rule]:
    """Build rule instances in their fixed evaluation order."""
    built: list[Rule] = []
    for spec in _ordered_rule_specs():
        if spec.default_enabled or (report_error_nodes and spec.rule_id == SyntaxErrorRule.rule_id):
            built.append(spec.factory())
    return built


def list_rule_info() -> list[RuleInfo]:
    """Return metadata for all known rules."""
    return [
        RuleInfo(
            rule_id=spec.rule_id,
            name=spec.name,
            description=spec.description,
            default_enabled=spec.default_enabled,
        )
        for spec in _ordered_rule_specs()
    ]


def _ordered_rule_specs() -> list[_RuleSpec]:
    return [
        _spec(AmbiguousNameRule, default_enabled=True),
        _spec(BadFunctionNameRule, default_enabled=True),
        _spec(SyntaxErrorRule, default_enabled=False),
    ]


def _spec(rule_cls: type[Rule], *, default_enabled: bool) -> _RuleSpec:
    return _RuleSpec(
        rule_id=rule_cls.rule_id,
        factory=rule_cls,
        name=rule_cls.__name__,
        description=(rule_cls.__doc__ or "").strip(),
        default_enabled=default_enabled,
    )
