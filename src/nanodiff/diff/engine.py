"""Core diff engine — greedy, single-pass line matching.

Every expected line is looked up in the buffer of actual lines read ahead so
far; if it is not there, the actual source is read forward until the line
turns up or the source runs dry. Actual lines skipped over on the way to a
match are reported as actual-only, an expected line that never turns up is
reported as expected-only.

Aligned lines that precede the first difference are not emitted at all
(unless ``full_context`` is set). Once a difference has been seen, every
later aligned line is emitted as context.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Optional

from nanodiff.diff.models import DiffLine, DiffLineType, DiffResult, Sink
from nanodiff.diff.sources import LineSource

logger = logging.getLogger(__name__)


def _find_match(pending: Deque[str], line: str, actual: LineSource) -> Optional[int]:
    """Return the index of *line* in *pending*, reading ahead from *actual*.

    Only the newly read line is compared while reading ahead. ``None`` means
    the actual source was exhausted without a match.
    """
    try:
        return pending.index(line)
    except ValueError:
        pass

    while (candidate := actual.next_line()) is not None:
        pending.append(candidate)
        if candidate == line:
            return len(pending) - 1
    return None


def do_diff(
    expected: LineSource,
    actual: LineSource,
    sink: Sink,
    *,
    full_context: bool = False,
) -> bool:
    """Compare *expected* against *actual*, feeding records to *sink*.

    Returns True if any expected-only or actual-only record was produced.
    Both sources are consumed completely.
    """
    pending: Deque[str] = deque()
    has_diff = False
    max_pending = 0

    for expected_line in expected:
        index = _find_match(pending, expected_line, actual)
        max_pending = max(max_pending, len(pending))

        if index is None:
            has_diff = True
            sink(DiffLine(expected_line, DiffLineType.EXPECTED_ONLY))
            continue

        if index > 0:
            has_diff = True
        for _ in range(index):
            sink(DiffLine(pending.popleft(), DiffLineType.ACTUAL_ONLY))
        pending.popleft()

        if has_diff or full_context:
            sink(DiffLine(expected_line, DiffLineType.CONTEXT))

    # Expected side is done: whatever is left on the actual side is extra.
    while pending:
        has_diff = True
        sink(DiffLine(pending.popleft(), DiffLineType.ACTUAL_ONLY))
    for actual_line in actual:
        has_diff = True
        sink(DiffLine(actual_line, DiffLineType.ACTUAL_ONLY))

    logger.debug("Diff finished: has_diff=%s, max lookahead=%d lines", has_diff, max_pending)
    return has_diff


def collect(
    expected: LineSource,
    actual: LineSource,
    *,
    full_context: bool = False,
) -> DiffResult:
    """Run :func:`do_diff` and gather every record into a DiffResult."""
    result = DiffResult()
    result.has_diff = do_diff(expected, actual, result.lines.append, full_context=full_context)
    return result
