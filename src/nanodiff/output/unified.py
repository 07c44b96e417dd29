"""Plain unified-diff style writer.

Each record is written as its marker (``" "``, ``"-"`` or ``"+"``) followed
by the line and a newline. Nothing else is added to the text.
"""

from __future__ import annotations

from typing import List, TextIO

from nanodiff.diff.models import DiffLine, DiffLineType


def format_line(line: DiffLine) -> str:
    return f"{line.line_type.marker}{line.content}"


def header_lines(expected_name: str, actual_name: str) -> List[str]:
    return [f"--- {expected_name}", f"+++ {actual_name}"]


class UnifiedWriter:
    """Sink that writes formatted records to one or more text streams."""

    def __init__(self, *streams: TextIO, show_context: bool = True) -> None:
        self._streams = streams
        self._show_context = show_context

    def write_header(self, expected_name: str, actual_name: str) -> None:
        for text in header_lines(expected_name, actual_name):
            self._write(text)

    def __call__(self, line: DiffLine) -> None:
        if line.line_type == DiffLineType.CONTEXT and not self._show_context:
            return
        self._write(format_line(line))

    def _write(self, text: str) -> None:
        for stream in self._streams:
            stream.write(text)
            stream.write("\n")
