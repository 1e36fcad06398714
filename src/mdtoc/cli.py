"""Command line entry point for mdtoc."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from mdtoc.config import MDTOC_LOG_LEVEL, MDTOC_SETTINGS_PATH
from mdtoc.exceptions import MdtocError
from mdtoc.extractor import extract_headers
from mdtoc.file_utils import is_markdown_file
from mdtoc.pipeline import add_toc_to_file, add_toc_to_folder
from mdtoc.renderer import generate_outline
from mdtoc.schemas import FormatType, InsertionMethod, LinkFormat, OutlineFailure, TocSettings
from mdtoc.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdtoc",
        description="Generate a table of contents for Markdown documents.",
    )
    parser.add_argument(
        "--settings",
        type=Path,
        default=MDTOC_SETTINGS_PATH,
        help="JSON settings file (default: %(default)s)",
    )
    parser.add_argument("--format", dest="format_type", choices=[item.value for item in FormatType])
    parser.add_argument("--indent", dest="indent_size", type=int, help="Spaces per nesting level")
    parser.add_argument(
        "--no-links",
        dest="include_links",
        action="store_false",
        default=None,
        help="Render plain header text instead of links",
    )
    parser.add_argument("--link-format", choices=[item.value for item in LinkFormat])
    parser.add_argument("--min-level", dest="min_header_level", type=int)
    parser.add_argument("--max-level", dest="max_header_level", type=int)
    parser.add_argument("--insert", dest="insertion_method", choices=[item.value for item in InsertionMethod])
    parser.add_argument("--line", dest="cursor_line", type=int, help="0-based line for --insert cursor")
    parser.add_argument(
        "--log-level",
        default=MDTOC_LOG_LEVEL,
        type=str.upper,
        choices=_LOG_LEVELS,
        help="Logging level (default: %(default)s)",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    file_cmd = commands.add_parser("file", help="Add a table of contents to Markdown files")
    file_cmd.add_argument("paths", nargs="+", type=Path)

    folder_cmd = commands.add_parser("folder", help="Add a table of contents to every Markdown file in a folder")
    folder_cmd.add_argument("folder", type=Path)

    show_cmd = commands.add_parser("show", help="Print the table of contents without modifying the file")
    show_cmd.add_argument("path", type=Path)

    return parser


def resolve_settings(args: argparse.Namespace) -> TocSettings:
    """Load the settings file and apply command line overrides."""
    settings = TocSettings.load(args.settings)
    overrides = {
        key: getattr(args, key)
        for key in (
            "format_type",
            "indent_size",
            "include_links",
            "link_format",
            "min_header_level",
            "max_header_level",
            "insertion_method",
        )
        if getattr(args, key) is not None
    }
    if not overrides:
        return settings
    return TocSettings.model_validate({**settings.model_dump(), **overrides})


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        settings = resolve_settings(args)
    except (MdtocError, ValueError) as exc:
        parser.error(str(exc))

    if args.command == "show":
        return _show(args.path, settings)
    if args.command == "folder":
        return _run_folder(args.folder, settings)
    return _run_files(args.paths, settings, cursor_line=args.cursor_line)


def _show(path: Path, settings: TocSettings) -> int:
    if not is_markdown_file(path):
        print(f"{path}: not a Markdown file", file=sys.stderr)
        return 1
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"{path}: {exc}", file=sys.stderr)
        return 1
    headers = extract_headers(text)
    result = generate_outline(headers, settings.to_format_options())
    if isinstance(result, OutlineFailure):
        print(result.error, file=sys.stderr)
        return 1
    print(result.markdown)
    return 0


def _run_files(paths: list[Path], settings: TocSettings, *, cursor_line: int | None) -> int:
    exit_code = 0
    for path in paths:
        try:
            changed = asyncio.run(add_toc_to_file(path, settings, cursor_line=cursor_line))
        except (MdtocError, OSError, UnicodeDecodeError) as exc:
            logger.error("Failed to update document", extra={"path": str(path), "error": str(exc)})
            print(f"{path}: {exc}", file=sys.stderr)
            exit_code = 1
            continue
        print(f"{path}: {'updated' if changed else 'unchanged'}")
    return exit_code


def _run_folder(folder: Path, settings: TocSettings) -> int:
    if not folder.is_dir():
        print(f"{folder}: not a directory", file=sys.stderr)
        return 1

    report = asyncio.run(add_toc_to_folder(folder, settings))
    for path in report.updated:
        print(f"{path}: updated")
    for path in report.skipped:
        print(f"{path}: unchanged")
    for path, error in report.failed.items():
        print(f"{path}: {error}", file=sys.stderr)
    return 0 if report.ok else 1


if __name__ == "__main__":
    sys.exit(main())
