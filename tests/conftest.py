"""Shared test fixtures — document files on disk and logger cleanup."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, List, Tuple

import pytest


def as_text(lines: List[str]) -> str:
    """Join *lines* the way they would appear in a newline-terminated file."""
    return "".join(f"{line}\n" for line in lines)


@pytest.fixture
def write_docs(tmp_path: Path) -> Callable[[List[str], List[str]], Tuple[Path, Path]]:
    """Write an expected/actual pair into *tmp_path* and return both paths."""

    def _write(expected: List[str], actual: List[str]) -> Tuple[Path, Path]:
        expected_path = tmp_path / "expected.txt"
        actual_path = tmp_path / "actual.txt"
        expected_path.write_text(as_text(expected), encoding="utf-8")
        actual_path.write_text(as_text(actual), encoding="utf-8")
        return expected_path, actual_path

    return _write


@pytest.fixture(autouse=True)
def _reset_nanodiff_logger():
    """Undo handler changes made by CLI runs so caplog keeps working."""
    yield
    logger = logging.getLogger("nanodiff")
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
