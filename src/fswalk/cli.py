"""CLI entry point for fswalk, the I/O boundary only."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from fswalk import FswalkError
from fswalk.counter import count_entries
from fswalk.enumerator import EntryType
from fswalk.formatter.listing import ListingOptions, format_listing
from fswalk.probe import is_directory
from fswalk.walker import WalkEntry, collect_entries


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser.

    Returns:
        argparse.ArgumentParser: Configured parser for the ``fswalk`` command.
    """
    parser = argparse.ArgumentParser(
        prog="fswalk",
        description="walk a directory tree and list or count its entries",
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Root directory to walk (default: current directory)",
    )
    parser.add_argument(
        "-L",
        "--level",
        type=int,
        default=0,
        dest="depth",
        help="Levels below the root to walk; 0 walks everything (default: 0)",
    )
    parser.add_argument(
        "-d",
        "--dirs-only",
        action="store_true",
        dest="dirs_only",
        help="Report directories only",
    )
    parser.add_argument(
        "-F",
        "--files-only",
        action="store_true",
        dest="files_only",
        help="Report files only",
    )
    parser.add_argument(
        "--count",
        action="store_true",
        help="Print the number of matching entries instead of listing them",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Stop the walk after this many entries",
    )
    parser.add_argument(
        "--csv",
        action="store_true",
        dest="csv_mode",
        help="Output as CSV (parent_dir, filename, fullpath, type, level)",
    )
    parser.add_argument(
        "--sort",
        action="store_true",
        help="Sort output by path instead of walk order",
    )
    parser.add_argument(
        "--noreport",
        action="store_true",
        dest="no_report",
        help="Omit the directory/file count report at the end",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=None,
        dest="output_file",
        help="Write output to a file instead of stdout",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug messages to stderr",
    )
    return parser


def run_fswalk(argv: list[str] | None = None) -> str:
    """Run fswalk with provided CLI args and return formatted output.

    This function is intentionally side-effect free and is the primary
    test target for CLI behavior.

    Args:
        argv: Command-line argument list without program name. If ``None``,
            uses process arguments via ``argparse`` defaults.

    Returns:
        str: Final rendered output.

    Raises:
        FswalkError: On any user-facing validation or I/O error.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    return _run_with_args(args)


def _resolve_root(directory: str) -> str:
    """Validate that the directory argument names a directory.

    Raises:
        FswalkError: If directory does not exist or is not a directory.
    """
    if not is_directory(directory):
        raise FswalkError(f"'{directory}' is not a directory")
    return directory


def _validate_option_combinations(args: argparse.Namespace) -> None:
    """Validate option values and incompatible combinations.

    Args:
        args: Parsed CLI namespace.

    Raises:
        FswalkError: If a value is out of range or options conflict.
    """
    if args.depth < 0:
        raise FswalkError("Invalid level, must be 0 or greater.")
    if args.limit is not None and args.limit < 1:
        raise FswalkError("--limit must be a positive integer")
    if args.dirs_only and args.files_only:
        raise FswalkError("--files-only (-F) is incompatible with --dirs-only (-d)")
    if args.count and args.csv_mode:
        raise FswalkError("--count is incompatible with --csv")
    if args.count and args.limit is not None:
        raise FswalkError("--count is incompatible with --limit")


def _entry_filters(args: argparse.Namespace) -> EntryType:
    if args.dirs_only:
        return EntryType.DIR
    if args.files_only:
        return EntryType.FILE
    return EntryType.ALL


def _format_output(args: argparse.Namespace, entries: list[WalkEntry]) -> str:
    """Render walk entries using selected formatter options."""
    if args.csv_mode:
        from fswalk.formatter.csv_ import CsvOptions, format_csv

        return format_csv(entries, CsvOptions(sort=args.sort))

    listing_opts = ListingOptions(no_report=args.no_report, sort=args.sort)
    return format_listing(entries, listing_opts)


def _run_with_args(args: argparse.Namespace) -> str:
    """Run the core walk/format pipeline for parsed arguments.

    Args:
        args: Parsed CLI namespace.

    Returns:
        str: Rendered output.

    Raises:
        FswalkError: On any user-facing validation or I/O error.
    """
    root = _resolve_root(args.directory)
    _validate_option_combinations(args)
    filters = _entry_filters(args)

    try:
        if args.count:
            return str(count_entries(root, filters, args.depth))
        entries = collect_entries(root, filters, args.depth, args.limit)
    except OSError as exc:
        location = exc.filename or root
        raise FswalkError(f"cannot walk '{location}': {exc.strerror or exc}") from exc

    return _format_output(args, entries)


def main() -> None:
    """Run the CLI entry point with process arguments.

    Parses args exactly once and writes output to stdout or ``-o`` file.
    Exits with code 1 on user-facing errors.
    """
    parser = build_parser()
    args = parser.parse_args()  # single parse

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        output = _run_with_args(args)
    except FswalkError as exc:
        sys.stderr.write(f"fswalk: {exc}\n")
        sys.exit(1)

    if args.output_file:
        try:
            Path(args.output_file).write_text(
                output + "\n", encoding="utf-8", newline=""
            )
        except OSError as exc:
            sys.stderr.write(f"fswalk: cannot write to '{args.output_file}': {exc}\n")
            sys.exit(1)
    else:
        sys.stdout.write(output + "\n")
