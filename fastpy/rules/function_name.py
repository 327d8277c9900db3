"""Function naming rule."""

from __future__ import annotations

from fastpy.parser import SyntaxNode
from fastpy.rules.base import Finding, NodeContext
from fastpy.rules.bindings import binding_role


class BadFunctionNameRule:
    """Flags mixedCase or CapWords function names."""

    rule_id = "bad-function-name"

    def check(self, node: SyntaxNode, context: NodeContext) -> Finding | None:
        if node.kind != "identifier":
            return None
        if binding_role(node, context) != "function":
            return None
        name = node.text
        if len(name) < 2 or name == name.lower():
            return None
        return Finding(
            rule_id=self.rule_id,
            message=f"Function name '{name}' should be lowercase",
            line=node.start_line,
        )
