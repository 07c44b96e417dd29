"""Input path validation — existence, regular-file check, canonical form."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class PathError(Exception):
    """Raised when an input path is missing or is not a regular file."""


def normalize_path(path_str: Union[str, Path], *, missing_ok: bool = False) -> Optional[Path]:
    """Validate *path_str* and return it as a canonical, absolute path.

    With *missing_ok*, a path that does not exist yields ``None`` (treated
    as an empty document by the caller) instead of raising.
    """
    path = Path(path_str)

    if not path.exists():
        if missing_ok:
            return None
        raise PathError(f"'{path_str}': File not found")

    if not path.is_file():
        raise PathError(f"'{path_str}': Not a file")

    return path.resolve(strict=True)
