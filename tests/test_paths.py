"""Tests for input path validation."""

from pathlib import Path

import pytest

from nanodiff.paths import PathError, normalize_path


class TestNormalizePath:
    def test_existing_file_resolved(self, tmp_path: Path, monkeypatch):
        (tmp_path / "doc.txt").write_text("x\n")
        monkeypatch.chdir(tmp_path)
        result = normalize_path("./doc.txt")
        assert result is not None
        assert result.is_absolute()
        assert result == (tmp_path / "doc.txt").resolve()

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(PathError, match="File not found"):
            normalize_path(tmp_path / "missing.txt")

    def test_directory_rejected(self, tmp_path: Path):
        with pytest.raises(PathError, match="Not a file"):
            normalize_path(tmp_path)

    def test_missing_ok(self, tmp_path: Path):
        assert normalize_path(tmp_path / "missing.txt", missing_ok=True) is None

    def test_missing_ok_still_rejects_directory(self, tmp_path: Path):
        with pytest.raises(PathError, match="Not a file"):
            normalize_path(tmp_path, missing_ok=True)

    def test_message_names_path(self):
        with pytest.raises(PathError) as excinfo:
            normalize_path("no/such/file.txt")
        assert str(excinfo.value) == "'no/such/file.txt': File not found"
