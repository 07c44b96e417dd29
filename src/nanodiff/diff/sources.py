"""Line sources — where the diff engine pulls its lines from.

Two variants sit behind the same interface:

* ``BufferedLineSource`` reads the whole document up front.
* ``StreamingLineSource`` pulls one line at a time from an open handle.

Both strip exactly one trailing ``\\n`` from each line, so a document that
ends with a newline does not grow an extra empty line at the end.
"""

from __future__ import annotations

import io
import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Iterator, List, Literal, Optional, TextIO, Union

logger = logging.getLogger(__name__)

SourceMode = Literal["streaming", "eager"]

SOURCE_MODES = ("streaming", "eager")


def _strip_terminator(line: str) -> str:
    return line[:-1] if line.endswith("\n") else line


class LineSource(ABC):
    """Yields the lines of one document in order, then ``None`` forever."""

    @abstractmethod
    def next_line(self) -> Optional[str]:
        """Return the next line, or ``None`` once the document is exhausted."""

    def __iter__(self) -> Iterator[str]:
        while (line := self.next_line()) is not None:
            yield line


class BufferedLineSource(LineSource):
    """Document fully materialised in memory at construction time.

    Read failures while building the buffer propagate to the caller.
    """

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self._lines: List[str] = list(lines)
        self._pos = 0

    @classmethod
    def from_handle(cls, handle: TextIO) -> "BufferedLineSource":
        return cls(_strip_terminator(line) for line in handle)

    @classmethod
    def from_path(cls, path: Union[str, Path], *, encoding: str = "utf-8") -> "BufferedLineSource":
        with open(path, "r", encoding=encoding, errors="replace") as handle:
            return cls.from_handle(handle)

    @classmethod
    def from_text(cls, text: str) -> "BufferedLineSource":
        return cls.from_handle(io.StringIO(text))

    def __len__(self) -> int:
        return len(self._lines)

    def next_line(self) -> Optional[str]:
        if self._pos >= len(self._lines):
            return None
        line = self._lines[self._pos]
        self._pos += 1
        return line


class StreamingLineSource(LineSource):
    """Pulls one line per call from an already-open text handle.

    A failing read is indistinguishable from end of input: it is logged and
    the source reports exhaustion from then on.
    """

    def __init__(self, handle: TextIO, name: Optional[str] = None) -> None:
        self._handle = handle
        self._name = name or str(getattr(handle, "name", "<stream>"))
        self._exhausted = False

    def next_line(self) -> Optional[str]:
        if self._exhausted:
            return None
        try:
            line = self._handle.readline()
        except (OSError, ValueError) as exc:
            logger.warning("Reading %s failed, treating as end of input: %s", self._name, exc)
            line = ""
        if not line:
            self._exhausted = True
            return None
        return _strip_terminator(line)


@contextmanager
def open_source(
    path: Optional[Path],
    mode: SourceMode = "streaming",
    *,
    encoding: str = "utf-8",
) -> Iterator[LineSource]:
    """Open *path* as a line source of the requested *mode*.

    ``path=None`` stands for a missing document and yields an empty source.
    """
    if mode not in SOURCE_MODES:
        raise ValueError(f"Unknown source mode: {mode!r}")

    if path is None:
        logger.debug("No file given, using an empty document")
        yield BufferedLineSource()
        return

    with open(path, "r", encoding=encoding, errors="replace") as handle:
        if mode == "eager":
            buffered = BufferedLineSource.from_handle(handle)
            logger.debug("Buffered %d lines from %s", len(buffered), path)
            yield buffered
        else:
            yield StreamingLineSource(handle, name=str(path))
