"""Shared fixtures for fswalk tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def nested_tree(tmp_path: Path) -> Path:
    """Create the reference nested tree.

    Structure::

        base/
        ├── a/
        │   ├── b/
        │   └── c/
        └── b/
            └── d/
                ├── file1.txt
                └── file2.txt
    """
    base = tmp_path / "base"
    (base / "a" / "b").mkdir(parents=True)
    (base / "a" / "c").mkdir()
    (base / "b" / "d").mkdir(parents=True)
    (base / "b" / "d" / "file1.txt").write_text("one")
    (base / "b" / "d" / "file2.txt").write_text("two")
    return base


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create a mixed tree with files at several levels.

    Structure::

        root/
        ├── docs/
        │   └── guide.md
        ├── src/
        │   ├── api/
        │   │   ├── auth.py
        │   │   └── user.py
        │   └── models/
        │       └── user.py
        ├── tests/
        │   └── test_user.py
        └── README.md
    """
    (tmp_path / "docs").mkdir()
    (tmp_path / "docs" / "guide.md").write_text("guide")
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "api").mkdir()
    (tmp_path / "src" / "api" / "auth.py").write_text("auth")
    (tmp_path / "src" / "api" / "user.py").write_text("user")
    (tmp_path / "src" / "models").mkdir()
    (tmp_path / "src" / "models" / "user.py").write_text("user")
    (tmp_path / "tests").mkdir()
    (tmp_path / "tests" / "test_user.py").write_text("test")
    (tmp_path / "README.md").write_text("readme")
    return tmp_path
