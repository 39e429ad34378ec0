"""Single-entry existence and type queries."""

from __future__ import annotations

import logging
import os
import stat

logger = logging.getLogger(__name__)


def _stat_mode(path: str) -> int | None:
    if not path:
        return None
    try:
        return os.stat(path).st_mode
    except OSError:
        return None


def is_file(path: str) -> bool:
    """Return whether *path* names an existing regular file."""
    mode = _stat_mode(path)
    return mode is not None and stat.S_ISREG(mode)


def is_directory(path: str) -> bool:
    """Return whether *path* names an existing directory."""
    mode = _stat_mode(path)
    return mode is not None and stat.S_ISDIR(mode)


def get_current_directory() -> str:
    """Return the process working directory.

    Returns:
        str: Absolute working directory, or ``""`` when it has been
        removed out from under the process.
    """
    try:
        return os.getcwd()
    except FileNotFoundError:
        logger.debug("Working directory no longer exists")
        return ""
