"""Entry counting on top of the recursive walk."""

from __future__ import annotations

import os

from fswalk.enumerator import EntryType
from fswalk.walker import walk


def count_entries(
    root: str | os.PathLike[str],
    filters: EntryType = EntryType.ALL,
    depth: int = 1,
) -> int:
    """Count entries below *root* matching *filters*.

    Args:
        root: Directory to count in.
        filters: Entry types to count.
        depth: Levels below *root* to include; ``0`` means all.

    Returns:
        int: Number of matching entries, ``0`` for an empty directory.

    Raises:
        ValueError: If *root* is empty or *depth* is negative.
        OSError: If *root* or a subdirectory cannot be opened.
    """
    counter = 0

    def _count(path: str, entry_type: EntryType) -> None:
        nonlocal counter
        counter += 1

    walk(root, _count, filters, depth)
    return counter


def count_all_entries(
    root: str | os.PathLike[str],
    filters: EntryType = EntryType.ALL,
) -> int:
    """Count matching entries at every level below *root*."""
    return count_entries(root, filters, 0)
