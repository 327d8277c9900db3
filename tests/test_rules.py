"""Tests for lint rules over parsed Python."""

from __future__ import annotations

import pytest

from fastpy.linter import lint
from fastpy.parser import parse_text
from fastpy.rules import build_rules, default_rules, list_rule_info
from fastpy.rules.ambiguous_name import AmbiguousNameRule
from fastpy.rules.base import Finding
from fastpy.rules.function_name import BadFunctionNameRule
from fastpy.rules.syntax_error import SyntaxErrorRule
from fastpy.walker import walk


def _lint(text: str, rules=None) -> list[Finding]:
    return lint(walk(parse_text(text)), rules)


def _ambiguous(text: str) -> list[Finding]:
    return [item for item in _lint(text) if item.rule_id == "ambiguous-name"]


@pytest.mark.parametrize(
    ("source", "name", "line"),
    [
        ("l = 5\n", "l", 1),
        ("O = 1\n", "O", 1),
        ("I = 2\n", "I", 1),
        ("x = 1\n\nl = 2\n", "l", 3),
        ("l += 1\n", "l", 1),
        ("l: int = 5\n", "l", 1),
        ("a, l = 1, 2\n", "l", 1),
        ("(a, O) = 1, 2\n", "O", 1),
        ("for l in range(3):\n    pass\n", "l", 1),
        ("squares = [l * l for l in range(3)]\n", "l", 1),
        ("if (l := 3):\n    pass\n", "l", 1),
        ("with open('x') as l:\n    pass\n", "l", 1),
        ("import os as l\n", "l", 1),
        ("def l():\n    pass\n", "l", 1),
        ("def O():\n    pass\n", "O", 1),
        ("def I():\n    pass\n", "I", 1),
        ("class O:\n    pass\n", "O", 1),
        ("def f(\n    x,\n    l,\n):\n    pass\n", "l", 3),
        ("def f(x, l=1):\n    return x\n", "l", 1),
        ("def f(l: int) -> int:\n    return 0\n", "l", 1),
        ("def f(*l):\n    pass\n", "l", 1),
        ("def f(**O):\n    pass\n", "O", 1),
        ("f = lambda l: 0\n", "l", 1),
        ("with open('a') as (a, l):\n    pass\n", "l", 1),
        ("with open('a') as [O, b]:\n    pass\n", "O", 1),
        ("try:\n    pass\nexcept ValueError as l:\n    pass\n", "l", 3),
        ("match x:\n    case l:\n        pass\n", "l", 2),
        ("match x:\n    case [1] as O:\n        pass\n", "O", 2),
        ("match x:\n    case [1, *l]:\n        pass\n", "l", 2),
        ("match x:\n    case Point(I):\n        pass\n", "I", 2),
        ("def f[l](x):\n    return x\n", "l", 1),
    ],
)
def test_ambiguous_binding_reported_once(source: str, name: str, line: int) -> None:
    findings = _ambiguous(source)
    assert findings == [
        Finding(rule_id="ambiguous-name", message=f"Variable name '{name}' is ambiguous", line=line)
    ]


@pytest.mark.parametrize(
    "source",
    [
        "count = 1\n",
        "l2 = 1\n",
        "L = 1\n",
        "o = 1\n",
        "print(l)\n",
        "x = l\n",
        "self.l = 1\n",
        "f(l=1)\n",
        "d['l'] = 1\n",
        "# l = 1\n",
        "def f(x=l):\n    pass\n",
        "def f(x: l):\n    pass\n",
        "with l as x:\n    pass\n",
        "with open('a') as (x, y[l]):\n    pass\n",
        "x = (a, l)\n",
        "match x:\n    case l.RED:\n        pass\n",
        "match x:\n    case O(x=1):\n        pass\n",
    ],
)
def test_non_ambiguous_or_unbound_names_are_ignored(source: str) -> None:
    assert _ambiguous(source) == []


def test_use_after_binding_is_not_reported_again() -> None:
    findings = _lint("l = 5\nprint(l)\n")
    assert findings == [
        Finding(rule_id="ambiguous-name", message="Variable name 'l' is ambiguous", line=1)
    ]


def test_findings_keep_traversal_order() -> None:
    findings = _lint("I = 0\ndef f(O):\n    l = O\n    return l\n")
    assert [(item.message, item.line) for item in findings] == [
        ("Variable name 'I' is ambiguous", 1),
        ("Variable name 'O' is ambiguous", 2),
        ("Variable name 'l' is ambiguous", 3),
    ]


def test_bad_function_name_flags_mixed_case() -> None:
    findings = _lint(
        "def doThing():\n    pass\n\nclass Shape:\n    def getArea(self):\n        pass\n"
    )
    assert findings == [
        Finding(
            rule_id="bad-function-name",
            message="Function name 'doThing' should be lowercase",
            line=1,
        ),
        Finding(
            rule_id="bad-function-name",
            message="Function name 'getArea' should be lowercase",
            line=5,
        ),
    ]


@pytest.mark.parametrize(
    "source",
    ["def do_thing():\n    pass\n", "DoThing = 1\n", "class Shape:\n    pass\n"],
)
def test_bad_function_name_ignores_other_names(source: str) -> None:
    assert _lint(source, [BadFunctionNameRule()]) == []


def test_syntax_error_rule_reports_error_nodes() -> None:
    findings = _lint("x = 1\ndef (:\n    pass\n", [SyntaxErrorRule()])
    assert findings
    assert all(item.rule_id == "syntax-error" for item in findings)


def test_syntax_error_rule_is_quiet_on_valid_code() -> None:
    assert _lint("def f():\n    return 1\n", [SyntaxErrorRule()]) == []


def test_default_rules_exclude_syntax_errors() -> None:
    assert [rule.rule_id for rule in default_rules()] == ["ambiguous-name", "bad-function-name"]
    assert [rule.rule_id for rule in build_rules(report_error_nodes=True)] == [
        "ambiguous-name",
        "bad-function-name",
        "syntax-error",
    ]


def test_list_rule_info_describes_all_rules() -> None:
    info = {item.rule_id: item for item in list_rule_info()}
    assert set(info) == {"ambiguous-name", "bad-function-name", "syntax-error"}
    assert info["ambiguous-name"].default_enabled is True
    assert info["syntax-error"].default_enabled is False
    assert info["ambiguous-name"].name == AmbiguousNameRule.__name__
    assert info["ambiguous-name"].description
