"""Diff core — line sources, record models, and the matching engine."""

from nanodiff.diff.engine import collect, do_diff
from nanodiff.diff.models import DiffLine, DiffLineType, DiffResult, Sink
from nanodiff.diff.sinks import DiffStats, tee
from nanodiff.diff.sources import (
    SOURCE_MODES,
    BufferedLineSource,
    LineSource,
    SourceMode,
    StreamingLineSource,
    open_source,
)

__all__ = [
    "SOURCE_MODES",
    "BufferedLineSource",
    "DiffLine",
    "DiffLineType",
    "DiffResult",
    "DiffStats",
    "LineSource",
    "Sink",
    "SourceMode",
    "StreamingLineSource",
    "collect",
    "do_diff",
    "open_source",
    "tee",
]
