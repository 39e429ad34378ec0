"""Whole-file byte read and write."""

from __future__ import annotations

from pathlib import Path


def read_all_bytes(filename: str) -> bytes:
    """Read the entire content of *filename*.

    Raises:
        ValueError: If *filename* is empty.
        OSError: If the file cannot be opened or read.
    """
    if not filename:
        raise ValueError("Filename must not be empty")
    return Path(filename).read_bytes()


def write_all_bytes(filename: str, data: bytes, append: bool = False) -> None:
    """Write *data* to *filename*, truncating it unless *append* is set.

    The file is created when missing.

    Raises:
        ValueError: If *filename* is empty.
        OSError: If the file cannot be opened or written.
    """
    if not filename:
        raise ValueError("Filename must not be empty")
    with open(filename, "ab" if append else "wb") as fh:
        fh.write(data)
