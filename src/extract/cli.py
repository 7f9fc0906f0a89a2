#!/usr/bin/env python3
"""CLI interface for parsing e-reader annotation exports."""

import argparse
from pathlib import Path

from rich.markup import escape

from common.env import env
from common.logger import console, error, setup_logging, success, warning
from export.payload_io import write_payload
from export.readwise import to_export_records

from .assembler import parse_export
from .errors import ExtractionError
from .models import NotesExport


def _load(args) -> NotesExport:
    html = args.file.read_text(encoding="utf-8")
    policy = "lenient" if args.lenient else None
    return parse_export(html, policy=policy)


def _report_skipped(export: NotesExport) -> None:
    if export.skipped:
        warning(f"Skipped {len(export.skipped)} malformed note(s)")


def cmd_show(args):
    """Print the book's highlights and comments, bare bookmarks excluded.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    try:
        export = _load(args)
    except (ExtractionError, OSError, ValueError) as e:
        error(str(e))
        return 1

    book = export.book
    console.out(f"Notes from '{book.title}' book by {book.author}", highlight=False)
    for note in export.annotations():
        console.out(note.highlight, highlight=False)
        if note.comment is not None:
            console.out(f"*Note*: {note.comment}", highlight=False)
        console.out(f"Page: {note.page}", highlight=False)

    _report_skipped(export)
    return 0


def cmd_readwise(args):
    """Write non-bookmark notes as a highlight import payload.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    try:
        export = _load(args)
        records = to_export_records(export, source_tag=args.source_tag)
        output = args.output or env.output_dir() / f"{args.file.stem}.json"
        write_payload(output, records)
    except (ExtractionError, OSError, ValueError) as e:
        error(str(e))
        return 1

    _report_skipped(export)
    success(f"Wrote [bold]{len(records)}[/bold] highlight(s) to {escape(str(output))}")
    return 0


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Parse e-reader annotation exports")
    parser.add_argument("--log-file", default=None, help="Also write logs to this file")

    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_common(sub):
        sub.add_argument("file", type=Path, help="Exported HTML annotation file")
        sub.add_argument(
            "--lenient",
            action="store_true",
            help="Skip malformed notes instead of aborting (default: strict)",
        )

    show_parser = subparsers.add_parser("show", help="Print highlights and comments")
    add_common(show_parser)
    show_parser.set_defaults(func=cmd_show)

    readwise_parser = subparsers.add_parser(
        "readwise", help="Write highlights as a Readwise import payload"
    )
    add_common(readwise_parser)
    readwise_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output JSON path (default: $POCKETBOOK_OUTPUT_DIR/<file stem>.json)",
    )
    readwise_parser.add_argument(
        "--source-tag",
        default=None,
        help="Importer identifier (default: $POCKETBOOK_SOURCE_TAG)",
    )
    readwise_parser.set_defaults(func=cmd_readwise)

    args = parser.parse_args(argv)
    setup_logging(level="WARNING", log_file=args.log_file)
    return args.func(args)


if __name__ == "__main__":
    exit(main())
