"""CSV output formatter for fswalk."""

from __future__ import annotations

import csv
import io
from dataclasses import dataclass, field
from typing import Callable

from fswalk.paths import get_filename, get_parent_directory
from fswalk.walker import WalkEntry


@dataclass(frozen=True, slots=True)
class CsvColumn:
    """A single CSV output column.

    Attributes:
        name: Header name for this column.
        extract: Callable that takes a walk entry and returns a string value.
    """

    name: str
    extract: Callable[[WalkEntry], str]


def _extract_parent_dir(entry: WalkEntry) -> str:
    """Return the immediate parent directory name."""
    return get_filename(get_parent_directory(entry.path))


def _extract_filename(entry: WalkEntry) -> str:
    return get_filename(entry.path)


def _extract_fullpath(entry: WalkEntry) -> str:
    return entry.path


def _extract_type(entry: WalkEntry) -> str:
    return "dir" if entry.is_dir else "file"


def _extract_level(entry: WalkEntry) -> str:
    return str(entry.level)


DEFAULT_COLUMNS: list[CsvColumn] = [
    CsvColumn(name="parent_dir", extract=_extract_parent_dir),
    CsvColumn(name="filename", extract=_extract_filename),
    CsvColumn(name="fullpath", extract=_extract_fullpath),
    CsvColumn(name="type", extract=_extract_type),
    CsvColumn(name="level", extract=_extract_level),
]


@dataclass(frozen=True, slots=True)
class CsvOptions:
    """Options controlling CSV output.

    Attributes:
        columns: Column definitions to use. Defaults to ``DEFAULT_COLUMNS``.
        sort: Whether to sort rows by full path instead of walk order.
    """

    columns: list[CsvColumn] = field(default_factory=lambda: list(DEFAULT_COLUMNS))
    sort: bool = False


def format_csv(
    entries: list[WalkEntry],
    options: CsvOptions | None = None,
) -> str:
    """Render walk entries as CSV text.

    Output always starts with a header row; each following row is one
    entry. ``level`` is 1 for direct children of the walk root.

    Args:
        entries: Walk entries to render.
        options: Rendering options. Defaults to ``CsvOptions()``.

    Returns:
        str: CSV text with header, using LF line endings (no trailing newline).
    """
    opts = options or CsvOptions()
    ordered = sorted(entries, key=lambda e: e.path) if opts.sort else entries

    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")

    writer.writerow([col.name for col in opts.columns])
    for entry in ordered:
        writer.writerow([col.extract(entry) for col in opts.columns])

    # Remove trailing newline that csv.writer appends after the last row
    return buf.getvalue().rstrip("\n")
