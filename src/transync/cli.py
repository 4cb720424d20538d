"""Command line interface.

    transync sync resources/views            # rewrite out-of-date documents
    transync check resources/views           # exit 1 when any is out of date
    transync extract resources/views/home.blade.php --show-skipped

Exit codes:
    0: OK
    1: Out-of-date documents (check) or file errors
    2: Usage error (reported by argparse)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from transync import __version__
from transync.config import SyncConfig
from transync.constants import DEFAULT_LANGUAGE, IDENTITY_LANGUAGES
from transync.diagnostics import DocumentIOError
from transync.enums import QuoteStyle, SyncStatus
from transync.locale_utils import describe_language
from transync.syntax.cursor import LineOffsetCache
from transync.workspace import SyncReport, SyncSummary, read_source, sync_paths

__all__ = ["build_parser", "main"]

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all subcommands."""
    parser = argparse.ArgumentParser(
        prog="transync",
        description=(
            "Keep Laravel translation documents (name.php) in sync with the "
            "keys used by their Blade views (name.blade.php)."
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress (-v) or every skipped call and line (-vv)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    policy = argparse.ArgumentParser(add_help=False)
    policy.add_argument("paths", nargs="+", type=Path, help="Blade views or directories")
    policy.add_argument(
        "--default-language",
        default=DEFAULT_LANGUAGE,
        help=f"Language created when a document is empty (default: {DEFAULT_LANGUAGE})",
    )
    policy.add_argument(
        "--identity-language",
        action="append",
        dest="identity_languages",
        metavar="CODE",
        help=(
            "Language whose new keys default to the key text; repeatable "
            f"(default: {', '.join(sorted(IDENTITY_LANGUAGES))})"
        ),
    )
    policy.add_argument(
        "--quote",
        choices=[style.value for style in QuoteStyle],
        default=QuoteStyle.DOUBLE.value,
        help="Quote style for keys and values (default: double)",
    )

    sync_parser = subparsers.add_parser(
        "sync", parents=[policy], help="Rewrite documents that are out of date"
    )
    sync_parser.add_argument("--dry-run", action="store_true", help="Report without writing")

    subparsers.add_parser(
        "check", parents=[policy], help="Fail when any document is out of date"
    )

    extract_parser = subparsers.add_parser("extract", help="Print the keys used by one view")
    extract_parser.add_argument("path", type=Path, help="Blade view")
    extract_parser.add_argument(
        "--show-skipped",
        action="store_true",
        help="Also list calls whose key is not a literal (on stderr)",
    )
    return parser


def _config_from_args(args: argparse.Namespace) -> SyncConfig:
    identity = (
        frozenset(args.identity_languages) if args.identity_languages else IDENTITY_LANGUAGES
    )
    return SyncConfig(
        default_language=args.default_language,
        identity_languages=identity,
        quote_style=QuoteStyle(args.quote),
    )


def _print_updated(report: SyncReport) -> None:
    outcome = report.outcome
    if outcome is None:
        return
    verb = "outdated" if report.dry_run else "updated"
    print(
        f"{verb:<8} {report.document_path} "
        f"({report.key_count} keys, +{len(outcome.added)} -{len(outcome.removed)})"
    )
    if outcome.document is not None:
        languages = ", ".join(describe_language(code) for code in outcome.document.language_codes)
        print(f"         languages: {languages}")


def _run_sync(args: argparse.Namespace, *, dry_run: bool) -> SyncSummary:
    summary = sync_paths(args.paths, config=_config_from_args(args), dry_run=dry_run)
    for report in summary.get_updated():
        _print_updated(report)
    for report in summary.get_errors():
        print(f"error    {report.markup_path}: {report.error}", file=sys.stderr)
    skipped = sum(1 for r in summary.reports if r.status == SyncStatus.NO_DOCUMENT)
    logger.info("%r (%d views without a document)", summary, skipped)
    return summary


def _run_extract(args: argparse.Namespace) -> int:
    config = SyncConfig()
    try:
        markup = read_source(args.path, max_size=config.max_source_size)
    except DocumentIOError as e:
        print(f"error    {e}", file=sys.stderr)
        return 1

    for key in config.extractor.extract(markup):
        print(key)

    if args.show_skipped:
        lines = LineOffsetCache(markup)
        for site in config.extractor.find_call_sites(markup):
            if site.skipped:
                line, column = lines.get_line_col(site.span.start)
                reason = site.reason.name if site.reason else "UNKNOWN"
                print(
                    f"{args.path}:{line}:{column}: skipped {site.function}() [{reason}]",
                    file=sys.stderr,
                )
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the command line interface.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])

    Returns:
        Process exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.command == "extract":
            return _run_extract(args)
        summary = _run_sync(args, dry_run=args.command == "check" or args.dry_run)
    except ValueError as e:
        parser.error(str(e))

    if args.command == "check":
        return 0 if summary.up_to_date else 1
    return 1 if summary.has_errors else 0
