"""Per-invocation orchestration: load, parse, lint, format, persist."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from fastpy.config import AppConfig
from fastpy.formatter import FormatResult, format_code
from fastpy.linter import lint
from fastpy.parser import SyntaxNode, parse
from fastpy.rules import build_rules
from fastpy.rules.base import Finding
from fastpy.source import load_source, write_source
from fastpy.walker import walk

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RunMode:
    """What one invocation does, resolved from the CLI flags."""

    debug: bool = False
    lint: bool = True
    preview: bool = False
    write: bool = False

    @property
    def name(self) -> str:
        if self.debug:
            return "debug"
        if self.preview and self.write:
            return "format-preview-and-write"
        if self.write:
            return "format-and-write"
        if self.preview:
            return "format-preview"
        return "lint"

    @property
    def formats(self) -> bool:
        return self.preview or self.write


def resolve_mode(*, format: bool = False, fix: bool = False, debug: bool = False) -> RunMode:
    """Resolve independent flags into one mode.

    ``debug`` wins and suppresses lint and format. Otherwise lint always runs,
    ``format`` previews and ``fix`` writes; both together do both.
    """
    if debug:
        return RunMode(debug=True, lint=False)
    return RunMode(lint=True, preview=format, write=fix)


@dataclass(slots=True)
class SessionReport:
    """Everything one run produced, ready for rendering."""

    path: Path
    mode: RunMode
    findings: list[Finding] = field(default_factory=list)
    format_result: FormatResult | None = None
    written: bool = False
    tree: SyntaxNode | None = None


def run_session(path: Path, mode: RunMode, config: AppConfig | None = None) -> SessionReport:
    """Run one file through the steps ``mode`` selects.

    Raises ``SourceError`` or ``ParseError`` before anything is written.
    """
    app_config = config or AppConfig()
    source = load_source(path)
    root = parse(source)
    report = SessionReport(path=path, mode=mode)

    if mode.debug:
        report.tree = root
        return report

    if mode.lint:
        rules = build_rules(report_error_nodes=app_config.report_error_nodes)
        report.findings = lint(walk(root), rules)

    if mode.formats:
        report.format_result = format_code(source.text)

    if mode.write and report.format_result is not None:
        if report.format_result.changed:
            write_source(path, report.format_result.text)
            report.written = True
            logger.info("Wrote formatted output to %s", path)
        else:
            logger.info("%s is already formatted; not writing", path)

    return report
