"""Ambiguous single-character name rule."""

from __future__ import annotations

from fastpy.parser import SyntaxNode
from fastpy.rules.base import Finding, NodeContext
from fastpy.rules.bindings import binding_role

AMBIGUOUS_NAMES = frozenset({"l", "O", "I"})


class AmbiguousNameRule:
    """Flags names 'l', 'O' and 'I', which read like 1 and 0 in many fonts."""

    rule_id = "ambiguous-name"

    def check(self, node: SyntaxNode, context: NodeContext) -> Finding | None:
        if node.kind != "identifier":
            return None
        name = node.text
        if name not in AMBIGUOUS_NAMES:
            return None
        if binding_role(node, context) is None:
            return None
        return Finding(
            rule_id=self.rule_id,
            message=f"Variable name '{name}' is ambiguous",
            line=node.start_line,
        )
