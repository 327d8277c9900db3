"""Parser adapter: turns Python source into an owned syntax tree.

Parsing is delegated to tree-sitter through ``tree_sitter_language_pack``.
The tree-sitter tree is copied into plain ``SyntaxNode`` objects so the rest
of the package only depends on node type, position and text.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Literal

from tree_sitter import Parser, Tree, TreeCursor
from tree_sitter_language_pack import get_parser

from fastpy.source import SourceFile, source_from_text

logger = logging.getLogger(__name__)

LANGUAGE = "python"

NodeKind = Literal[
    "module",
    "function_definition",
    "class_definition",
    "identifier",
    "assignment",
    "augmented_assignment",
    "parameters",
    "ERROR",
    "other",
]

KNOWN_KINDS: frozenset[str] = frozenset(
    {
        "module",
        "function_definition",
        "class_definition",
        "identifier",
        "assignment",
        "augmented_assignment",
        "parameters",
        "ERROR",
    }
)


class ParseError(RuntimeError):
    """Raised when the parser cannot produce a tree for the source."""


@dataclass(frozen=True, slots=True)
class Point:
    """Zero-based row/column position."""

    row: int
    column: int


@dataclass(slots=True, eq=False)
class SyntaxNode:
    """One node of the parsed tree.

    ``index`` is the node's pre-order position in its tree and
    ``parent_index`` refers to the parent by that position.
    """

    index: int
    type: str
    field_name: str | None
    is_named: bool
    is_missing: bool
    start_byte: int
    end_byte: int
    start_point: Point
    end_point: Point
    parent_index: int | None = None
    children: list[SyntaxNode] = field(default_factory=list, repr=False)
    source: bytes = field(default=b"", repr=False)

    @property
    def kind(self) -> NodeKind:
        if self.type in KNOWN_KINDS:
            return self.type  # type: ignore[return-value]
        return "other"

    @property
    def start_line(self) -> int:
        return self.start_point.row + 1

    @property
    def end_line(self) -> int:
        return self.end_point.row + 1

    @property
    def is_error(self) -> bool:
        return self.type == "ERROR"

    @property
    def text(self) -> str:
        """Source text covered by this node; raises UnicodeDecodeError on bad slices."""
        return self.source[self.start_byte : self.end_byte].decode("utf-8")


def parse(source: SourceFile, parser: Parser | None = None) -> SyntaxNode:
    """Parse a source file and return the root node."""
    active_parser = parser if parser is not None else _python_parser()
    try:
        tree = active_parser.parse(source.data)
    except (ValueError, TypeError) as exc:
        raise ParseError(f"Failed to parse {source.path}: {exc}") from exc
    if tree is None:
        raise ParseError(f"Failed to parse {source.path}: parser returned no tree")

    root, node_count = _convert_tree(tree, source.data)
    logger.debug("Parsed %s into %d nodes", source.path, node_count)
    return root


def parse_text(text: str) -> SyntaxNode:
    """Parse in-memory Python text."""
    return parse(source_from_text(text))


def _python_parser() -> Parser:
    try:
        return get_parser(LANGUAGE)
    except Exception as exc:
        # get_parser raises pack-specific errors for unknown or undownloadable grammars
        raise ParseError(f"Grammar for '{LANGUAGE}' is not available: {exc}") from exc


def _convert_tree(tree: Tree, data: bytes) -> tuple[SyntaxNode, int]:
    cursor = tree.walk()
    root = _copy_node(cursor, index=0, parent_index=None, data=data)
    if not cursor.goto_first_child():
        return root, 1

    ancestors = [root]
    next_index = 1
    while True:
        parent = ancestors[-1]
        node = _copy_node(cursor, index=next_index, parent_index=parent.index, data=data)
        next_index += 1
        parent.children.append(node)

        if cursor.goto_first_child():
            ancestors.append(node)
            continue

        while not cursor.goto_next_sibling():
            cursor.goto_parent()
            ancestors.pop()
            if not ancestors:
                return root, next_index


def _copy_node(
    cursor: TreeCursor, *, index: int, parent_index: int | None, data: bytes
) -> SyntaxNode:
    ts_node = cursor.node
    return SyntaxNode(
        index=index,
        type=ts_node.type,
        field_name=cursor.field_name,
        is_named=ts_node.is_named,
        is_missing=ts_node.is_missing,
        start_byte=ts_node.start_byte,
        end_byte=ts_node.end_byte,
        start_point=Point(row=ts_node.start_point[0], column=ts_node.start_point[1]),
        end_point=Point(row=ts_node.end_point[0], column=ts_node.end_point[1]),
        parent_index=parent_index,
        source=data,
    )
