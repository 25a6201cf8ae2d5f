"""Tests for filesystem helpers"""

import os

import pytest

from gwt.utils.paths import is_non_empty_path, working_directory


class TestWorkingDirectory:
    """Test scoped directory changes."""

    def test_changes_and_restores(self, temp_dir, monkeypatch):
        monkeypatch.chdir(temp_dir)
        target = temp_dir / "inner"
        target.mkdir()

        with working_directory(str(target)) as path:
            assert os.getcwd() == str(target)
            assert path == str(target)

        assert os.getcwd() == str(temp_dir)

    def test_restores_after_exception(self, temp_dir, monkeypatch):
        monkeypatch.chdir(temp_dir)
        target = temp_dir / "inner"
        target.mkdir()

        with pytest.raises(RuntimeError):
            with working_directory(str(target)):
                raise RuntimeError("boom")

        assert os.getcwd() == str(temp_dir)

    def test_missing_directory(self, temp_dir, monkeypatch):
        monkeypatch.chdir(temp_dir)

        with pytest.raises(FileNotFoundError):
            with working_directory(str(temp_dir / "missing")):
                pass

        assert os.getcwd() == str(temp_dir)


class TestIsNonEmptyPath:
    def test_missing(self, temp_dir):
        assert is_non_empty_path(str(temp_dir / "missing")) is False

    def test_empty_directory(self, temp_dir):
        assert is_non_empty_path(str(temp_dir)) is False

    def test_directory_with_entries(self, temp_dir):
        (temp_dir / "file.txt").write_text("x")
        assert is_non_empty_path(str(temp_dir)) is True

    def test_file(self, temp_dir):
        path = temp_dir / "file.txt"
        path.write_text("")
        assert is_non_empty_path(str(path)) is True
