"""Rich terminal reporter — coloured markers and a run summary."""

from __future__ import annotations

from typing import Iterator

from rich.console import Console, ConsoleOptions
from rich.segment import Segment

from nanodiff.diff.models import DiffLine, DiffLineType
from nanodiff.diff.sinks import DiffStats
from nanodiff.output.unified import format_line, header_lines

_LINE_STYLE = {
    DiffLineType.CONTEXT: "",
    DiffLineType.EXPECTED_ONLY: "red",
    DiffLineType.ACTUAL_ONLY: "green",
}


class _RawLine:
    """One styled line emitted as a single segment.

    ``rich.text.Text`` expands tabs and strips control characters; a bare
    segment reaches the terminal byte for byte.
    """

    def __init__(self, text: str, style: str) -> None:
        self.text = text
        self.style = style

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> Iterator[Segment]:
        yield Segment(self.text, console.get_style(self.style) if self.style else None)
        yield Segment.line()


class TerminalWriter:
    """Sink that prints records through Rich, one styled line each.

    Line content is never parsed as markup, so square brackets and emoji
    codes in the compared documents are printed literally.
    """

    def __init__(self, console: Console, *, show_context: bool = True) -> None:
        self._console = console
        self._show_context = show_context

    def write_header(self, expected_name: str, actual_name: str) -> None:
        for text in header_lines(expected_name, actual_name):
            self._print(text, "bold")

    def __call__(self, line: DiffLine) -> None:
        if line.line_type == DiffLineType.CONTEXT and not self._show_context:
            return
        self._print(format_line(line), _LINE_STYLE[line.line_type])

    def _print(self, text: str, style: str) -> None:
        self._console.print(_RawLine(text, style), soft_wrap=True, highlight=False)


def print_summary(console: Console, stats: DiffStats, *, has_diff: bool, mode: str) -> None:
    console.print()
    console.print(f"[dim]Mode:[/dim]           {mode}")
    console.print(f"[dim]Context:[/dim]        {stats.context}")
    console.print(f"[dim]Expected only:[/dim]  {stats.expected_only}")
    console.print(f"[dim]Actual only:[/dim]    {stats.actual_only}")
    if has_diff:
        console.print("[bold red]✗ Documents differ.[/bold red]")
    else:
        console.print("[bold green]✓ Documents match.[/bold green]")
