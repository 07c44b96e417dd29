"""nanodiff CLI — compare an actual output file against an expected one."""

from __future__ import annotations

import logging
import sys
from contextlib import ExitStack
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from nanodiff import __version__

app = typer.Typer(
    name="nanodiff",
    help="Line-by-line comparison of an actual document against an expected one.",
    add_completion=False,
)

console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        print(f"nanodiff {__version__}")
        raise typer.Exit()


def _init_config_callback(value: bool) -> None:
    if not value:
        return
    from nanodiff.config.defaults import DEFAULT_TOML
    from nanodiff.config.loader import CONFIG_FILENAME

    config_path = Path.cwd() / CONFIG_FILENAME
    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {escape(str(config_path))}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {escape(str(config_path))}")
    raise typer.Exit()


def _fail(message: str) -> None:
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def _resolve_inputs(expected: str, actual: str, *, missing_ok: bool) -> List[Optional[Path]]:
    """Validate both input paths, reporting every failure before exiting 2."""
    from nanodiff.paths import PathError, normalize_path

    resolved: List[Optional[Path]] = []
    errors: List[str] = []
    for raw in (expected, actual):
        try:
            resolved.append(normalize_path(raw, missing_ok=missing_ok))
        except PathError as exc:
            errors.append(str(exc))

    if errors:
        for message in errors:
            _fail(message)
        raise typer.Exit(code=2)
    return resolved


@app.command()
def main(
    expected: str = typer.Argument(..., metavar="EXPECTED", help="Path to the expected (golden) output"),
    actual: str = typer.Argument(..., metavar="ACTUAL", help="Path to the actual output"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .nanodiff.toml"),
    mode: Optional[str] = typer.Option(None, "--mode", "-m", help="Line source: streaming | eager"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: unified | terminal | json"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Also write the report to file"),
    full_context: bool = typer.Option(False, "--full-context", help="Print aligned lines before the first difference"),
    no_context: bool = typer.Option(False, "--no-context", help="Hide context lines"),
    header: bool = typer.Option(False, "--header", help="Print ---/+++ lines naming both files"),
    missing_as_empty: bool = typer.Option(False, "--missing-as-empty", help="Treat a missing file as empty"),
    exit_code: Optional[int] = typer.Option(None, "--exit-code", help="Exit status when the files differ"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug logging"),
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
    init_config: bool = typer.Option(
        False, "--init-config", callback=_init_config_callback,
        is_eager=True, help="Write a starter .nanodiff.toml here and exit",
    ),
) -> None:
    """Compare ACTUAL against EXPECTED and print the differing lines.

    Usage: nanodiff [OPTIONS] -- EXPECTED ACTUAL
    """
    from nanodiff.config.loader import ConfigError, load_config
    from nanodiff.config.schema import OUTPUT_FORMATS
    from nanodiff.diff.engine import collect, do_diff
    from nanodiff.diff.sinks import DiffStats, tee
    from nanodiff.diff.sources import SOURCE_MODES, open_source
    from nanodiff.logging_utils import configure_logging
    from nanodiff.output import json_report, terminal, unified

    configure_logging(
        logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING,
        show_time=debug,
    )

    # --- Load config ---
    try:
        cfg = load_config(Path.cwd(), config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    # --- CLI overrides ---
    if mode:
        if mode not in SOURCE_MODES:
            console.print(f"[bold red]Invalid mode:[/bold red] {escape(mode)}")
            raise typer.Exit(code=2)
        cfg.diff.mode = mode  # type: ignore[assignment]
    if format:
        if format not in OUTPUT_FORMATS:
            console.print(f"[bold red]Invalid format:[/bold red] {escape(format)}")
            raise typer.Exit(code=2)
        cfg.output.format = format  # type: ignore[assignment]
    if exit_code is not None:
        if not 1 <= exit_code <= 255:
            console.print(f"[bold red]Invalid exit code:[/bold red] {exit_code} (expected 1-255)")
            raise typer.Exit(code=2)
        cfg.exit.on_diff = exit_code
    if full_context:
        cfg.diff.full_context = True
    if no_context:
        cfg.output.show_context = False
    if header:
        cfg.output.show_header = True
    if missing_as_empty:
        cfg.diff.missing_as_empty = True

    # --- Validate inputs ---
    expected_path, actual_path = _resolve_inputs(expected, actual, missing_ok=cfg.diff.missing_as_empty)

    logger.info("Expected: %s", expected_path or f"{expected} (missing, empty)")
    logger.info("Actual: %s", actual_path or f"{actual} (missing, empty)")
    logger.info("Mode: %s, format: %s", cfg.diff.mode, cfg.output.format)

    # --- Run diff ---
    stats = DiffStats()
    show_context = cfg.output.show_context
    try:
        with ExitStack() as stack:
            expected_src = stack.enter_context(
                open_source(expected_path, cfg.diff.mode, encoding=cfg.diff.encoding)
            )
            actual_src = stack.enter_context(
                open_source(actual_path, cfg.diff.mode, encoding=cfg.diff.encoding)
            )
            report_file = (
                stack.enter_context(open(output, "w", encoding="utf-8")) if output else None
            )

            if cfg.output.format == "json":
                result = collect(expected_src, actual_src, full_context=cfg.diff.full_context)
                for line in result.lines:
                    stats(line)
                report_text = json_report.render(
                    result,
                    expected_name=expected,
                    actual_name=actual,
                    show_context=show_context,
                )
                print(report_text)
                if report_file is not None:
                    report_file.write(report_text + "\n")
                has_diff = result.has_diff
            else:
                writers = []
                if cfg.output.format == "terminal":
                    writers.append(terminal.TerminalWriter(Console(), show_context=show_context))
                else:
                    writers.append(unified.UnifiedWriter(sys.stdout, show_context=show_context))
                if report_file is not None:
                    writers.append(unified.UnifiedWriter(report_file, show_context=show_context))

                if cfg.output.show_header:
                    for writer in writers:
                        writer.write_header(expected, actual)

                has_diff = do_diff(
                    expected_src,
                    actual_src,
                    tee(stats, *writers),
                    full_context=cfg.diff.full_context,
                )
    except OSError as exc:
        # Failed opens carry the filename; failed writes to stdout or the report do not.
        if exc.filename is not None:
            _fail(f"Unable to open file '{exc.filename}': {exc.strerror or exc}")
        else:
            _fail(f"Unable to write output: {exc.strerror or exc}")
        raise typer.Exit(code=2) from exc

    if output and verbose:
        console.print(f"[dim]Report written to {escape(output)}[/dim]")

    if verbose or cfg.output.show_summary:
        terminal.print_summary(console, stats, has_diff=has_diff, mode=cfg.diff.mode)

    # --- Exit code ---
    if has_diff:
        raise typer.Exit(code=cfg.exit.on_diff)
    raise typer.Exit(code=0)
