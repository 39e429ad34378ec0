"""Plain one-path-per-line output with a tree-style summary report."""

from __future__ import annotations

from dataclasses import dataclass

from fswalk.walker import WalkEntry


@dataclass(frozen=True, slots=True)
class ListingOptions:
    """Options for the listing formatter.

    Attributes:
        no_report: Whether to omit the summary report line.
        sort: Whether to sort entries by path instead of walk order.
    """

    no_report: bool = False
    sort: bool = False


def _report_line(dir_count: int, file_count: int) -> str:
    """Build GNU tree-like summary line.

    Args:
        dir_count: Number of directories.
        file_count: Number of files.

    Returns:
        str: Summary string with singular/plural inflection.
    """
    dir_word = "directory" if dir_count == 1 else "directories"
    file_word = "file" if file_count == 1 else "files"
    return f"{dir_count} {dir_word}, {file_count} {file_word}"


def format_listing(
    entries: list[WalkEntry],
    options: ListingOptions | None = None,
) -> str:
    """Render walk entries as one path per line.

    Directory paths get a trailing ``/`` marker.

    Args:
        entries: Walk entries to render.
        options: Listing options.

    Returns:
        str: Rendered text without a trailing newline.
    """
    opts = options or ListingOptions()
    ordered = sorted(entries, key=lambda e: e.path) if opts.sort else entries

    lines = [f"{e.path}/" if e.is_dir else e.path for e in ordered]

    if not opts.no_report:
        dir_count = sum(1 for e in entries if e.is_dir)
        if lines:
            lines.append("")
        lines.append(_report_line(dir_count, len(entries) - dir_count))

    return "\n".join(lines)
