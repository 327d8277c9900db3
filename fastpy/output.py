"""Output rendering."""

from __future__ import annotations

import json
from typing import Any

import click

from fastpy import __version__
from fastpy.parser import SyntaxNode
from fastpy.rules.base import Finding
from fastpy.session import SessionReport
from fastpy.walker import walk_with_depth

LINT_HEADER = "--- Running Linter ---"
FORMAT_HEADER = "--- Formatted Code ---"
DEBUG_HEADER = "--- Debug Parse Tree ---"


def render_human(report: SessionReport) -> str:
    """Render the report as the plain-text sections printed to stdout."""
    if report.tree is not None:
        lines = [_header(DEBUG_HEADER), *render_tree(report.tree)]
        return "\n".join(lines) + "\n"

    output = ""
    if report.mode.lint:
        lines = [_header(LINT_HEADER)]
        lines.extend(render_finding(finding) for finding in report.findings)
        output += "\n".join(lines) + "\n"

    result = report.format_result
    if result is not None:
        if output:
            output += "\n"
        output += _header(FORMAT_HEADER) + "\n"
        if report.mode.preview:
            output += result.text
            if result.text and not result.text.endswith("\n"):
                output += "\n"
        if report.mode.write:
            output += _save_message(report) + "\n"
    return output


def render_finding(finding: Finding) -> str:
    return f"[Lint] {finding.message} (line {finding.line})"


def render_tree(root: SyntaxNode) -> list[str]:
    """One line per node, indented two spaces per depth level."""
    lines: list[str] = []
    for depth, node in walk_with_depth(root):
        start, end = node.start_point, node.end_point
        lines.append(
            f"{'  ' * depth}{_node_label(node)} "
            f"[{start.row + 1}:{start.column} - {end.row + 1}:{end.column}] "
            f"bytes {node.start_byte}..{node.end_byte}"
        )
    return lines


def render_json(report: SessionReport, *, config_source: str | None = None) -> str:
    """Render stable JSON output for editors and automation."""
    return json.dumps(build_json_payload(report, config_source=config_source), sort_keys=True)


def build_json_payload(
    report: SessionReport, *, config_source: str | None = None
) -> dict[str, Any]:
    formatted: dict[str, Any] | None = None
    if report.format_result is not None:
        formatted = {
            "text": report.format_result.text,
            "changed": report.format_result.changed,
            "written": report.written,
        }

    tree: list[dict[str, Any]] | None = None
    if report.tree is not None:
        tree = [_serialize_node(depth, node) for depth, node in walk_with_depth(report.tree)]

    return {
        "path": str(report.path),
        "mode": report.mode.name,
        "findings": [_serialize_finding(item) for item in report.findings],
        "formatted": formatted,
        "tree": tree,
        "meta": {"version": __version__, "config_source": config_source},
    }


def _serialize_finding(finding: Finding) -> dict[str, Any]:
    return {"rule_id": finding.rule_id, "message": finding.message, "line": finding.line}


def _serialize_node(depth: int, node: SyntaxNode) -> dict[str, Any]:
    return {
        "depth": depth,
        "type": node.type,
        "named": node.is_named,
        "start": [node.start_point.row, node.start_point.column],
        "end": [node.end_point.row, node.end_point.column],
        "start_byte": node.start_byte,
        "end_byte": node.end_byte,
    }


def _save_message(report: SessionReport) -> str:
    if report.written:
        return click.style(f'File formatted and saved: "{report.path}"', fg="green")
    return f'File already formatted: "{report.path}"'


def _node_label(node: SyntaxNode) -> str:
    label = node.type if node.is_named else f'"{node.type}"'
    if node.is_missing:
        return f"MISSING {label}"
    return label


def _header(text: str) -> str:
    return click.style(text, bold=True)
