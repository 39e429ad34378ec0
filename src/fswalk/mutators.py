"""Directory and file creation, removal and renaming."""

from __future__ import annotations

import errno
import logging
import os
import stat

from fswalk.enumerator import EntryType
from fswalk.probe import is_directory
from fswalk.walker import walk

logger = logging.getLogger(__name__)


def _require_path(path: str, name: str = "path") -> None:
    if not path:
        raise ValueError(f"{name} must not be empty")


def create_directory(path: str) -> bool:
    """Create a single directory.

    Returns:
        bool: ``False`` if it already exists, its parent is missing, or
        permission is denied.

    Raises:
        ValueError: If *path* is empty.
    """
    _require_path(path)
    try:
        os.mkdir(path)
    except OSError as exc:
        logger.debug("Cannot create directory %s: %s", path, exc)
        return False
    return True


def create_directories(path: str) -> bool:
    """Create a directory along with any missing parents.

    Returns:
        bool: ``False`` if the directory already exists or cannot be
        created.

    Raises:
        ValueError: If *path* is empty.
    """
    _require_path(path)
    try:
        os.makedirs(path)
    except OSError as exc:
        logger.debug("Cannot create directories %s: %s", path, exc)
        return False
    return True


def remove_directory(path: str) -> bool:
    """Remove an empty directory.

    Returns:
        bool: ``False`` if it does not exist, is not empty, or permission
        is denied.

    Raises:
        ValueError: If *path* is empty.
    """
    _require_path(path)
    try:
        os.rmdir(path)
    except OSError as exc:
        logger.debug("Cannot remove directory %s: %s", path, exc)
        return False
    return True


def remove_file(path: str) -> bool:
    """Remove a regular file.

    Returns:
        bool: ``True`` once removed, ``False`` if *path* does not exist.

    Raises:
        ValueError: If *path* is empty.
        OSError: If *path* is not a regular file or cannot be removed.
    """
    _require_path(path)
    try:
        mode = os.stat(path).st_mode
    except FileNotFoundError:
        return False

    if stat.S_ISDIR(mode):
        raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), path)
    if not stat.S_ISREG(mode):
        raise OSError(errno.EINVAL, "Not a regular file", path)
    os.remove(path)
    return True


def rename(old_name: str, new_name: str) -> None:
    """Rename or move a file or directory.

    Raises:
        ValueError: If either name is empty.
        OSError: If the rename fails.
    """
    _require_path(old_name, "old_name")
    _require_path(new_name, "new_name")
    os.rename(old_name, new_name)


def _remove_children(path: str, entry_type: EntryType) -> None:
    if entry_type is EntryType.DIR:
        _remove_tree(path)
    else:
        remove_file(path)


def _remove_tree(directory: str) -> None:
    # Children go first, one level at a time, so parents are empty at rmdir.
    walk(directory, _remove_children, EntryType.ALL, 1)
    os.rmdir(directory)
    logger.debug("Removed directory: %s", directory)


def remove_tree(path: str) -> bool:
    """Remove a directory with all of its files and subdirectories.

    Deletion is bottom-up: every subdirectory is emptied and removed
    before its parent.

    Args:
        path: Directory to remove.

    Returns:
        bool: ``True`` once the tree is gone, ``False`` if *path* is not
        an existing directory.

    Raises:
        ValueError: If *path* is empty.
        OSError: If an entry or directory cannot be removed. Entries that
            are neither files nor directories are never enumerated, so a
            directory holding one cannot be removed.
    """
    _require_path(path)
    if not is_directory(path):
        return False
    _remove_tree(path)
    return True
