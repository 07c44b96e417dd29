"""Data models for classified diff records."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List


class DiffLineType(str, Enum):
    CONTEXT = "context"
    EXPECTED_ONLY = "expected_only"
    ACTUAL_ONLY = "actual_only"

    @property
    def marker(self) -> str:
        """Unified-diff marker printed in front of the line."""
        return _MARKERS[self]


_MARKERS = {
    DiffLineType.CONTEXT: " ",
    DiffLineType.EXPECTED_ONLY: "-",
    DiffLineType.ACTUAL_ONLY: "+",
}


@dataclass(frozen=True, slots=True)
class DiffLine:
    """A single classified line emitted by the diff engine."""

    content: str
    line_type: DiffLineType


Sink = Callable[[DiffLine], None]


@dataclass
class DiffResult:
    """Every record of one comparison, in emission order."""

    lines: List[DiffLine] = field(default_factory=list)
    has_diff: bool = False

    def _count(self, line_type: DiffLineType) -> int:
        return sum(1 for line in self.lines if line.line_type == line_type)

    @property
    def context_count(self) -> int:
        return self._count(DiffLineType.CONTEXT)

    @property
    def expected_only_count(self) -> int:
        return self._count(DiffLineType.EXPECTED_ONLY)

    @property
    def actual_only_count(self) -> int:
        return self._count(DiffLineType.ACTUAL_ONLY)
