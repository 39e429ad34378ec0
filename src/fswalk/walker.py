"""Depth-bounded, pre-order recursive walk built on DirectoryEntryIterator."""

from __future__ import annotations

import enum
import logging
import os
from dataclasses import dataclass
from typing import Callable, Optional

from fswalk.enumerator import DirectoryEntryIterator, EntryType, check_filters

logger = logging.getLogger(__name__)


class WalkAction(enum.Enum):
    """Visitor verdict for the walk."""

    CONTINUE = "continue"
    CANCEL = "cancel"


Visitor = Callable[[str, EntryType], Optional[WalkAction]]
"""Per-entry callback ``(full_path, entry_type)``.

Returning ``WalkAction.CANCEL`` stops the whole walk; ``None`` and
``WalkAction.CONTINUE`` let it proceed.
"""


@dataclass(frozen=True, slots=True)
class WalkEntry:
    """A single entry visited during a walk.

    Attributes:
        path: Walk root joined with the entry's relative location.
        entry_type: ``EntryType.DIR`` or ``EntryType.FILE``.
        level: Directory level below the walk root, starting at 1.
    """

    path: str
    entry_type: EntryType
    level: int

    @property
    def is_dir(self) -> bool:
        return self.entry_type is EntryType.DIR


def _check_walk_args(root: str | os.PathLike[str], depth: int) -> str:
    root = os.fspath(root)
    if not root:
        raise ValueError("Root directory must not be empty")
    if depth < 0:
        raise ValueError(f"Walk depth must be 0 or greater, got {depth}")
    return root


def _walk_level(
    directory: str,
    visitor: Visitor,
    filters: EntryType,
    depth: int,
    level: int,
) -> bool:
    """Walk one directory level and recurse into its subdirectories.

    Returns:
        bool: ``False`` once a visitor has cancelled the walk.
    """
    # A files-only walk still needs directories to recurse into.
    native_filters = EntryType.DIR if filters == EntryType.DIR else EntryType.ALL
    descend = depth == 0 or level + 1 <= depth

    with DirectoryEntryIterator(native_filters) as entries:
        if not entries.begin(directory):
            return True
        while True:
            path = entries.filename
            entry_type = entries.file_type

            if entry_type & filters and visitor(path, entry_type) is WalkAction.CANCEL:
                return False

            if entry_type is EntryType.DIR and descend:
                if not _walk_level(path, visitor, filters, depth, level + 1):
                    return False

            if not entries.next():
                return True


def walk(
    root: str | os.PathLike[str],
    visitor: Visitor,
    filters: EntryType = EntryType.ALL,
    depth: int = 1,
) -> bool:
    """Walk *root* pre-order, calling *visitor* for each matching entry.

    A directory is reported before its children. Sibling order is
    whatever the OS directory read returns.

    Args:
        root: Directory to walk.
        visitor: Callback invoked as ``visitor(full_path, entry_type)``.
        filters: Entry types reported to the visitor.
        depth: Levels below *root* to visit. ``1`` visits direct children
            only; ``0`` visits every descendant.

    Returns:
        bool: ``True`` if the walk completed, ``False`` if the visitor
        cancelled it.

    Raises:
        ValueError: If *root* is empty, *depth* is negative, or
            *filters* is not a valid entry filter.
        OSError: If *root* or any subdirectory cannot be opened.
    """
    root = _check_walk_args(root, depth)
    filters = check_filters(filters)

    completed = _walk_level(root, visitor, filters, depth, 1)
    if not completed:
        logger.debug("Walk cancelled by visitor: %s", root)
    return completed


def walk_all(
    root: str | os.PathLike[str],
    visitor: Visitor,
    filters: EntryType = EntryType.ALL,
) -> bool:
    """Walk every level below *root*. Same as ``walk(root, visitor, filters, 0)``."""
    return walk(root, visitor, filters, 0)


def collect_entries(
    root: str | os.PathLike[str],
    filters: EntryType = EntryType.ALL,
    depth: int = 1,
    limit: int | None = None,
) -> list[WalkEntry]:
    """Walk *root* and return the visited entries in walk order.

    Args:
        root: Directory to walk.
        filters: Entry types to collect.
        depth: Walk depth, as for ``walk``.
        limit: Cancel the walk once this many entries are collected.
            ``None`` collects everything.

    Returns:
        list[WalkEntry]: Collected entries.

    Raises:
        ValueError: If *limit* is less than 1, or on invalid walk arguments.
        OSError: If a directory cannot be opened.
    """
    if limit is not None and limit < 1:
        raise ValueError(f"Limit must be a positive integer, got {limit}")

    root = _check_walk_args(root, depth)
    root_parts = len(_split(root))
    result: list[WalkEntry] = []

    def _collect(path: str, entry_type: EntryType) -> WalkAction:
        level = len(_split(path)) - root_parts
        result.append(WalkEntry(path=path, entry_type=entry_type, level=level))
        if limit is not None and len(result) >= limit:
            return WalkAction.CANCEL
        return WalkAction.CONTINUE

    walk(root, _collect, filters, depth)
    return result


def _split(path: str) -> list[str]:
    parts = path.replace(os.altsep, os.sep) if os.altsep else path
    return [part for part in parts.split(os.sep) if part]
