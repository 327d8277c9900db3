"""Lint engine: applies per-node rules over a node sequence."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from fastpy.parser import SyntaxNode
from fastpy.rules import default_rules
from fastpy.rules.base import Finding, Rule

logger = logging.getLogger(__name__)


class _TraversalContext:
    """Remembers visited nodes by index so rules can look up parents."""

    def __init__(self) -> None:
        self._visited: dict[int, SyntaxNode] = {}

    def visit(self, node: SyntaxNode) -> None:
        self._visited[node.index] = node

    def parent(self, node: SyntaxNode) -> SyntaxNode | None:
        if node.parent_index is None:
            return None
        return self._visited.get(node.parent_index)


class LintEngine:
    """Runs a fixed rule list over nodes in traversal order."""

    def __init__(self, rules: list[Rule] | None = None) -> None:
        self.rules = rules if rules is not None else default_rules()

    def lint(self, nodes: Iterable[SyntaxNode]) -> list[Finding]:
        """Return findings ordered by node, then by rule."""
        context = _TraversalContext()
        findings: list[Finding] = []
        for node in nodes:
            context.visit(node)
            for rule in self.rules:
                try:
                    finding = rule.check(node, context)
                except UnicodeDecodeError:
                    logger.debug(
                        "Skipping node %s at line %d: text is not valid UTF-8",
                        node.type,
                        node.start_line,
                    )
                    break
                if finding is not None:
                    findings.append(finding)
        logger.debug("Lint produced %d finding(s)", len(findings))
        return findings


def lint(nodes: Iterable[SyntaxNode], rules: list[Rule] | None = None) -> list[Finding]:
    """Lint a node sequence with the given (or default) rules."""
    return LintEngine(rules).lint(nodes)
