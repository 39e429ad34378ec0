"""Tests for fswalk.mutators."""

import os
from pathlib import Path

import pytest

from fswalk.counter import count_all_entries
from fswalk.mutators import (
    create_directories,
    create_directory,
    remove_directory,
    remove_file,
    remove_tree,
    rename,
)
from fswalk.probe import is_directory, is_file


class TestCreateDirectory:
    def test_creates(self, tmp_path: Path) -> None:
        target = str(tmp_path / "new")
        assert create_directory(target) is True
        assert is_directory(target)

    def test_existing(self, tmp_path: Path) -> None:
        assert create_directory(str(tmp_path)) is False

    def test_missing_parent(self, tmp_path: Path) -> None:
        assert create_directory(str(tmp_path / "x" / "y")) is False

    def test_create_directories_builds_parents(self, tmp_path: Path) -> None:
        target = str(tmp_path / "x" / "y" / "z")
        assert create_directories(target) is True
        assert is_directory(target)

    def test_create_directories_existing(self, tmp_path: Path) -> None:
        assert create_directories(str(tmp_path)) is False

    @pytest.mark.parametrize("func", [create_directory, create_directories])
    def test_empty_path(self, func) -> None:
        with pytest.raises(ValueError, match="must not be empty"):
            func("")


class TestRemoveDirectory:
    def test_removes_empty(self, tmp_path: Path) -> None:
        target = tmp_path / "gone"
        target.mkdir()
        assert remove_directory(str(target)) is True
        assert not target.exists()

    def test_non_empty(self, tmp_path: Path) -> None:
        (tmp_path / "f.txt").write_text("x")
        assert remove_directory(str(tmp_path)) is False

    def test_missing(self, tmp_path: Path) -> None:
        assert remove_directory(str(tmp_path / "missing")) is False


class TestRemoveFile:
    def test_removes(self, tmp_path: Path) -> None:
        target = tmp_path / "f.txt"
        target.write_text("x")
        assert remove_file(str(target)) is True
        assert not target.exists()

    def test_missing(self, tmp_path: Path) -> None:
        assert remove_file(str(tmp_path / "missing.txt")) is False

    def test_directory_is_rejected(self, tmp_path: Path) -> None:
        with pytest.raises(IsADirectoryError):
            remove_file(str(tmp_path))

    def test_empty_path(self) -> None:
        with pytest.raises(ValueError):
            remove_file("")


class TestRename:
    def test_renames_file(self, tmp_path: Path) -> None:
        old = tmp_path / "old.txt"
        old.write_text("x")
        rename(str(old), str(tmp_path / "new.txt"))
        assert not old.exists()
        assert (tmp_path / "new.txt").read_text() == "x"

    def test_moves_directory(self, tmp_path: Path) -> None:
        (tmp_path / "src").mkdir()
        (tmp_path / "dst").mkdir()
        rename(str(tmp_path / "src"), str(tmp_path / "dst" / "moved"))
        assert is_directory(str(tmp_path / "dst" / "moved"))

    def test_missing_source(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            rename(str(tmp_path / "missing"), str(tmp_path / "other"))

    @pytest.mark.parametrize(("old", "new"), [("", "b"), ("a", "")])
    def test_empty_names(self, old: str, new: str) -> None:
        with pytest.raises(ValueError, match="must not be empty"):
            rename(old, new)


class TestRemoveTree:
    def test_removes_nested_tree(self, nested_tree: Path) -> None:
        assert remove_tree(str(nested_tree)) is True
        assert not nested_tree.exists()

    def test_second_call_returns_false(self, sample_tree: Path) -> None:
        target = sample_tree / "src"
        assert remove_tree(str(target)) is True
        assert remove_tree(str(target)) is False
        assert is_file(str(sample_tree / "README.md"))

    def test_count_after_remove_fails(self, nested_tree: Path) -> None:
        remove_tree(str(nested_tree))
        assert is_directory(str(nested_tree)) is False
        with pytest.raises(FileNotFoundError):
            count_all_entries(nested_tree)

    def test_empty_directory(self, tmp_path: Path) -> None:
        target = tmp_path / "empty"
        target.mkdir()
        assert remove_tree(str(target)) is True
        assert not target.exists()

    def test_file_is_not_a_tree(self, tmp_path: Path) -> None:
        target = tmp_path / "f.txt"
        target.write_text("x")
        assert remove_tree(str(target)) is False
        assert target.exists()

    def test_wide_directory(self, tmp_path: Path) -> None:
        target = tmp_path / "wide"
        target.mkdir()
        for i in range(50):
            (target / f"f{i:03d}.txt").write_text(str(i))
            (target / f"d{i:03d}").mkdir()
        assert remove_tree(str(target)) is True
        assert not os.path.exists(target)

    def test_empty_path(self) -> None:
        with pytest.raises(ValueError):
            remove_tree("")
