"""Stateful directory enumerator over a single open OS directory handle."""

from __future__ import annotations

import enum
import logging
import os
from typing import Iterator

from fswalk.paths import combine_paths

logger = logging.getLogger(__name__)

_PSEUDO_ENTRIES = frozenset({os.curdir, os.pardir})


class EntryType(enum.IntFlag):
    """Directory entry type, combinable into a filter.

    ``EntryType.DIR | EntryType.FILE`` (``EntryType.ALL``) requests both.
    """

    DIR = 1
    FILE = 2
    ALL = DIR | FILE


def check_filters(filters: EntryType) -> EntryType:
    """Validate an entry-type filter.

    Args:
        filters: Requested filter.

    Returns:
        EntryType: The filter as an ``EntryType`` value.

    Raises:
        ValueError: If the filter is empty or has bits outside ``ALL``.
    """
    value = int(filters)
    if value <= 0 or value & ~int(EntryType.ALL):
        raise ValueError(f"Invalid entry filter: {filters!r}")
    return EntryType(value)


def _classify(entry: os.DirEntry[str]) -> EntryType | None:
    # Type bit from the directory read itself; symlinks are not followed.
    if entry.is_dir(follow_symlinks=False):
        return EntryType.DIR
    if entry.is_file(follow_symlinks=False):
        return EntryType.FILE
    return None


class DirectoryEntryIterator:
    """Enumerate the entries of one directory, one at a time.

    Usage::

        with DirectoryEntryIterator(EntryType.FILE) as entries:
            if entries.begin(directory):
                while True:
                    print(entries.filename, entries.file_type)
                    if not entries.next():
                        break

    The iterator owns an ``os.scandir`` handle from a successful
    ``begin`` until ``end``. ``.`` and ``..`` are never reported, and
    entries that are neither regular files nor directories (symlinks,
    sockets, devices) are skipped. Filters can only be changed while the
    iterator is not started.
    """

    def __init__(self, filters: EntryType = EntryType.ALL) -> None:
        self._filters = check_filters(filters)
        self._root = ""
        self._handle: Iterator[os.DirEntry[str]] | None = None
        self._filename: str | None = None
        self._file_type: EntryType | None = None

    def __enter__(self) -> DirectoryEntryIterator:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.end()

    def __copy__(self) -> DirectoryEntryIterator:
        raise TypeError("DirectoryEntryIterator owns an OS handle and cannot be copied")

    def __deepcopy__(self, memo: dict) -> DirectoryEntryIterator:
        raise TypeError("DirectoryEntryIterator owns an OS handle and cannot be copied")

    @property
    def started(self) -> bool:
        return self._handle is not None

    @property
    def root(self) -> str:
        """Directory passed to the last ``begin``."""
        return self._root

    @property
    def filters(self) -> EntryType:
        return self._filters

    @filters.setter
    def filters(self, value: EntryType) -> None:
        if self.started:
            raise RuntimeError("Cannot change filters during an enumeration")
        self._filters = check_filters(value)

    @property
    def filename(self) -> str:
        """Full path of the current entry, ``root`` joined with its name."""
        if self._filename is None:
            raise RuntimeError("Iterator is not positioned on an entry")
        return self._filename

    @property
    def file_type(self) -> EntryType:
        if self._file_type is None:
            raise RuntimeError("Iterator is not positioned on an entry")
        return self._file_type

    def begin(self, directory: str | os.PathLike[str]) -> bool:
        """Open *directory* and move to its first matching entry.

        Args:
            directory: Directory to enumerate.

        Returns:
            bool: ``True`` when positioned on an entry. ``False`` when the
            directory has no matching entry (the handle is released), or
            when the iterator is already started.

        Raises:
            ValueError: If *directory* is empty.
            OSError: If the directory cannot be opened.
        """
        directory = os.fspath(directory)
        if not directory:
            raise ValueError("Directory name must not be empty")
        if self.started:
            return False

        self._handle = os.scandir(directory)
        self._root = directory
        logger.debug("Opened directory: %s", directory)
        try:
            found = self._advance()
        except BaseException:
            self.end()
            raise
        if not found:
            self.end()
        return found

    def next(self) -> bool:
        """Move to the next matching entry.

        Returns:
            bool: ``False`` when not started or when no matching entry is
            left. An exhausted iterator stays started until ``end``.
        """
        if not self.started:
            return False
        return self._advance()

    def end(self) -> None:
        """Release the directory handle. Safe to call repeatedly."""
        handle, self._handle = self._handle, None
        self._filename = None
        self._file_type = None
        if handle is None:
            return
        handle.close()
        logger.debug("Closed directory: %s", self._root)

    def _advance(self) -> bool:
        assert self._handle is not None
        for entry in self._handle:
            if entry.name in _PSEUDO_ENTRIES:
                continue
            entry_type = _classify(entry)
            if entry_type is None or not entry_type & self._filters:
                continue
            self._filename = combine_paths(self._root, entry.name)
            self._file_type = entry_type
            return True
        self._filename = None
        self._file_type = None
        return False
