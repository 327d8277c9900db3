"""CLI entrypoint for fastpy."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer

from fastpy import __version__
from fastpy.config import OUTPUT_FORMATS, AppConfig, load_app_config
from fastpy.output import render_human, render_json
from fastpy.parser import ParseError
from fastpy.session import RunMode, SessionReport, resolve_mode, run_session
from fastpy.source import SourceError

app = typer.Typer(
    name="fastpy",
    add_completion=False,
    help="Lint and format a Python file.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit when --version is provided."""
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.command(no_args_is_help=True)
def main_command(
    file: Annotated[Path, typer.Argument(help="Path to the Python file to lint/format.")],
    format: Annotated[
        bool,
        typer.Option("--format", "-f", help="Print the formatted code."),
    ] = False,
    fix: Annotated[
        bool,
        typer.Option("--fix", "-x", help="Apply formatting fixes to the file in place."),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option("--debug", "-d", help="Show the parse tree instead of linting."),
    ] = False,
    output_format: Annotated[
        str | None,
        typer.Option("--output-format", help="Output format: human|json.", show_default="human"),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to config TOML file."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log progress to stderr."),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Lint FILE and optionally format it."""
    _ = version
    _configure_logging(verbose)

    app_config = _load_config_or_exit(file, config_file)
    resolved_format = (output_format or app_config.output_format).lower()
    if resolved_format not in OUTPUT_FORMATS:
        raise typer.BadParameter("must be one of: human, json", param_hint="--output-format")

    mode = resolve_mode(format=format, fix=fix, debug=debug)
    report = _run_or_exit(file, mode, app_config)

    if resolved_format == "json":
        typer.echo(render_json(report, config_source=app_config.source))
    else:
        typer.echo(render_human(report), nl=False)


def main() -> None:
    """Console script entrypoint."""
    app()


def _run_or_exit(file: Path, mode: RunMode, app_config: AppConfig) -> SessionReport:
    try:
        return run_session(file, mode, app_config)
    except (SourceError, ParseError) as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _load_config_or_exit(file: Path, config_file: Path | None) -> AppConfig:
    try:
        return load_app_config(file.parent, config_path=config_file)
    except ValueError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
