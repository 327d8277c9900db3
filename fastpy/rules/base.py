"""Base rule protocol and finding model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from fastpy.parser import SyntaxNode


@dataclass(frozen=True, slots=True)
class Finding:
    """A single lint finding emitted by a rule."""

    rule_id: str
    message: str
    line: int


class NodeContext(Protocol):
    """Read-only view of the traversal so far."""

    def parent(self, node: SyntaxNode) -> SyntaxNode | None:
        """Return the parent of an already visited node."""


class Rule(Protocol):
    """Protocol for per-node lint rules."""

    rule_id: str

    def check(self, node: SyntaxNode, context: NodeContext) -> Finding | None:
        """Return a finding for this node, or None."""
