"""Tests for the tree-sitter parser adapter."""

from __future__ import annotations

import pytest

from fastpy.parser import ParseError, parse, parse_text
from fastpy.source import source_from_text
from fastpy.walker import walk


def test_parse_returns_module_root() -> None:
    root = parse_text("l = 5\nprint(l)\n")
    assert root.type == "module"
    assert root.kind == "module"
    assert root.index == 0
    assert root.parent_index is None
    assert root.start_line == 1


def test_assignment_fields_and_positions() -> None:
    root = parse_text("x = 1\n\ncount = 2\n")
    assignments = [node for node in walk(root) if node.kind == "assignment"]
    assert len(assignments) == 2

    left = assignments[1].children[0]
    assert left.kind == "identifier"
    assert left.field_name == "left"
    assert left.text == "count"
    assert left.start_line == 3
    assert (left.start_point.row, left.start_point.column) == (2, 0)


def test_unlisted_node_types_map_to_other() -> None:
    root = parse_text("print(1)\n")
    kinds = {node.type: node.kind for node in walk(root)}
    assert kinds["call"] == "other"
    assert kinds["argument_list"] == "other"
    assert kinds["identifier"] == "identifier"


def test_children_ranges_are_contained_in_parent() -> None:
    text = "def f(a, b=2):\n    return [a * b for _ in range(3)]\n"
    root = parse_text(text)
    data_len = len(text.encode("utf-8"))

    nodes = list(walk(root))
    by_index = {node.index: node for node in nodes}
    for node in nodes:
        assert 0 <= node.start_byte <= node.end_byte <= data_len
        if node.parent_index is not None:
            parent = by_index[node.parent_index]
            assert node in parent.children
            assert parent.start_byte <= node.start_byte
            assert node.end_byte <= parent.end_byte


def test_node_text_uses_byte_offsets_for_non_ascii() -> None:
    root = parse_text("café = 'ü'\nl = 1\n")
    identifiers = [node.text for node in walk(root) if node.kind == "identifier"]
    assert identifiers == ["café", "l"]


def test_invalid_program_still_yields_tree_with_error_nodes() -> None:
    root = parse_text("def (:\n    pass\n")
    assert root.type == "module"
    assert any(node.is_error or node.is_missing for node in walk(root))


def test_parser_without_tree_raises_parse_error() -> None:
    class _NoTreeParser:
        def parse(self, data: bytes) -> None:
            return None

    with pytest.raises(ParseError, match="parser returned no tree"):
        parse(source_from_text("x = 1\n"), parser=_NoTreeParser())  # type: ignore[arg-type]


def test_parser_exception_becomes_parse_error() -> None:
    class _BrokenParser:
        def parse(self, data: bytes) -> None:
            raise ValueError("no language set")

    with pytest.raises(ParseError, match="no language set"):
        parse(source_from_text("x = 1\n"), parser=_BrokenParser())  # type: ignore[arg-type]


def test_empty_source_yields_childless_module() -> None:
    root = parse_text("")
    assert root.type == "module"
    assert root.children == []
    assert (root.start_byte, root.end_byte) == (0, 0)


def test_indices_follow_preorder_and_link_parents() -> None:
    root = parse_text("def f(a):\n    return a\n\nx = f(1)\n")
    nodes = list(walk(root))
    assert [node.index for node in nodes] == list(range(len(nodes)))
    for node in nodes:
        for child in node.children:
            assert child.parent_index == node.index


def test_unavailable_grammar_becomes_parse_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def _fail(language: str) -> None:
        raise RuntimeError(f"could not download {language}")

    monkeypatch.setattr("fastpy.parser.get_parser", _fail)
    with pytest.raises(ParseError, match="Grammar for 'python' is not available"):
        parse_text("x = 1\n")
