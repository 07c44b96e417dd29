"""Reusable sinks — fan-out and running counts."""

from __future__ import annotations

from dataclasses import dataclass

from nanodiff.diff.models import DiffLine, DiffLineType, Sink


def tee(*sinks: Sink) -> Sink:
    """Return a sink that forwards every record to each of *sinks* in turn."""

    def _forward(line: DiffLine) -> None:
        for sink in sinks:
            sink(line)

    return _forward


@dataclass
class DiffStats:
    """Counts records as they stream past; usable directly as a sink."""

    context: int = 0
    expected_only: int = 0
    actual_only: int = 0

    def __call__(self, line: DiffLine) -> None:
        if line.line_type == DiffLineType.CONTEXT:
            self.context += 1
        elif line.line_type == DiffLineType.EXPECTED_ONLY:
            self.expected_only += 1
        else:
            self.actual_only += 1

    @property
    def total(self) -> int:
        return self.context + self.expected_only + self.actual_only
