"""Surfaces parser error recovery as findings."""

from __future__ import annotations

from fastpy.parser import SyntaxNode
from fastpy.rules.base import Finding, NodeContext


class SyntaxErrorRule:
    """Reports ERROR and missing nodes left by error-tolerant parsing."""

    rule_id = "syntax-error"

    def check(self, node: SyntaxNode, context: NodeContext) -> Finding | None:
        if node.is_missing:
            return Finding(
                rule_id=self.rule_id,
                message=f"Missing '{node.type}'",
                line=node.start_line,
            )
        if not node.is_error:
            return None
        return Finding(
            rule_id=self.rule_id,
            message=f"Syntax error near '{_clip(node.text)}'",
            line=node.start_line,
        )


def _clip(content: str, max_len: int = 40) -> str:
    first_line = content.strip().splitlines()[0] if content.strip() else ""
    if len(first_line) <= max_len:
        return first_line
    return first_line[: max_len - 3] + "..."
