"""Depth-first syntax tree traversal."""

from __future__ import annotations

from collections.abc import Iterator

from fastpy.parser import SyntaxNode


class NodeWalk:
    """Lazy pre-order view of a subtree.

    Every call to ``iter()`` starts a new traversal, so the same walk can be
    consumed more than once.
    """

    __slots__ = ("root",)

    def __init__(self, root: SyntaxNode) -> None:
        self.root = root

    def __iter__(self) -> Iterator[SyntaxNode]:
        for _depth, node in _preorder(self.root):
            yield node


def walk(root: SyntaxNode) -> NodeWalk:
    """Return a restartable pre-order traversal starting at ``root``."""
    return NodeWalk(root)


def walk_with_depth(root: SyntaxNode) -> Iterator[tuple[int, SyntaxNode]]:
    """Yield ``(depth, node)`` pairs in pre-order; ``root`` has depth 0."""
    return _preorder(root)


def count_nodes(root: SyntaxNode) -> int:
    return sum(1 for _ in _preorder(root))


def _preorder(root: SyntaxNode) -> Iterator[tuple[int, SyntaxNode]]:
    stack: list[tuple[int, SyntaxNode]] = [(0, root)]
    while stack:
        depth, node = stack.pop()
        yield depth, node
        # reversed so the leftmost child is popped first
        for child in reversed(node.children):
            stack.append((depth + 1, child))
