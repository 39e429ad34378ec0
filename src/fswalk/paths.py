"""Path string helpers: joining and splitting with the platform separator."""

from __future__ import annotations

import os
from functools import reduce

_SEPARATORS = tuple(sep for sep in (os.sep, os.altsep) if sep)


def _combine_two(path1: str, path2: str) -> str:
    if not path1:
        return path2
    if not path2:
        return path1
    if path1.endswith(_SEPARATORS) or path2.startswith(_SEPARATORS):
        return path1 + path2
    return path1 + os.sep + path2


def combine_paths(*paths: str) -> str:
    """Join path segments with the platform separator.

    An empty segment contributes nothing. No separator is inserted when
    one side already provides it, and existing separators are never
    collapsed (``combine_paths("a/", "/b") == "a//b"``).

    Args:
        *paths: Path segments, joined left to right.

    Returns:
        str: Combined path.
    """
    return reduce(_combine_two, paths, "")


def _last_separator(path: str) -> int:
    return max(path.rfind(sep) for sep in _SEPARATORS)


def get_filename(path: str) -> str:
    """Return the part of *path* after the last separator."""
    return path[_last_separator(path) + 1 :]


def get_filename_without_extension(path: str) -> str:
    """Return the filename of *path* with its last ``.suffix`` removed.

    Dotfiles lose their whole name (``".svn" -> ""``).
    """
    name = get_filename(path)
    dot = name.rfind(".")
    return name if dot == -1 else name[:dot]


def get_parent_directory(path: str) -> str:
    """Return the part of *path* before the last separator, or ``""``."""
    index = _last_separator(path)
    return "" if index == -1 else path[:index]
