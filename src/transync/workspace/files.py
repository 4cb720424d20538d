"""File-level synchronization of Blade views with their translation documents.

This is the I/O edge around the pure pipeline: it pairs each markup file
with its sibling document, reads both, runs plan_sync() and writes the
result back. Every outcome, including failures, is returned as an immutable
SyncReport rather than raised.

Components:
    paired_document_path - views/home.blade.php → views/home.php
    iter_markup_files - Expand files and directories into markup files
    SyncReport - Immutable result of synchronizing one markup file
    SyncSummary - Immutable aggregate of many reports
    sync_markup_file / sync_paths - Entry points used by the CLI

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace
from pathlib import Path

from transync.config import SyncConfig
from transync.diagnostics import DocumentIOError
from transync.enums import SyncStatus
from transync.sync import SyncOutcome, plan_sync

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Path helpers
    "paired_document_path",
    "iter_markup_files",
    "read_source",
    "write_source",
    # Result types
    "SyncReport",
    "SyncSummary",
    # Entry points
    "sync_markup_file",
    "sync_paths",
]

logger = logging.getLogger(__name__)

# Directories never descended into when a directory is given.
IGNORED_DIRS: frozenset[str] = frozenset(
    {
        ".git",
        ".hg",
        ".svn",
        ".idea",
        ".vscode",
        "node_modules",
        "vendor",
        "storage",
    }
)

_DEFAULT_CONFIG = SyncConfig()


def paired_document_path(markup_path: Path, *, config: SyncConfig | None = None) -> Path:
    """Path of the translation document paired with a markup file.

    Args:
        markup_path: Path ending with the markup suffix
        config: Supplies markup_suffix and document_suffix

    Returns:
        Sibling path with the document suffix

    Raises:
        ValueError: If markup_path does not end with the markup suffix

    Example:
        >>> paired_document_path(Path("views/home.blade.php"))
        PosixPath('views/home.php')
    """
    config = config or _DEFAULT_CONFIG
    name = markup_path.name
    if not name.endswith(config.markup_suffix) or name == config.markup_suffix:
        msg = f"Not a markup file (expected '*{config.markup_suffix}'): '{markup_path}'"
        raise ValueError(msg)
    stem = name[: -len(config.markup_suffix)]
    return markup_path.with_name(stem + config.document_suffix)


def iter_markup_files(
    paths: Iterable[Path], *, config: SyncConfig | None = None
) -> Iterator[Path]:
    """Expand files and directories into markup files.

    Files are yielded as given when they carry the markup suffix. Directories
    are walked recursively in sorted order, skipping IGNORED_DIRS.
    """
    config = config or _DEFAULT_CONFIG
    for path in paths:
        if path.is_dir():
            for candidate in sorted(path.rglob(f"*{config.markup_suffix}")):
                relative_parts = candidate.relative_to(path).parts[:-1]
                if any(part in IGNORED_DIRS for part in relative_parts):
                    continue
                if candidate.is_file():
                    yield candidate
        elif path.name.endswith(config.markup_suffix):
            yield path
        else:
            logger.debug("Ignoring non-markup path: %s", path)


def read_source(path: Path, *, max_size: int = 0) -> str:
    """Read a UTF-8 text file.

    Args:
        path: File to read
        max_size: Largest accepted size in bytes; 0 disables the limit

    Returns:
        File content

    Raises:
        DocumentIOError: If the file is too large or cannot be read
    """
    try:
        if max_size > 0 and path.stat().st_size > max_size:
            msg = f"File size exceeds maximum ({max_size:,} bytes): '{path}'"
            raise DocumentIOError(msg, path=str(path))
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Cannot read '{path}': {e}"
        raise DocumentIOError(msg, path=str(path)) from e


def write_source(path: Path, text: str) -> None:
    """Write a UTF-8 text file with LF line endings.

    Raises:
        DocumentIOError: If the file cannot be written
    """
    try:
        path.write_text(text, encoding="utf-8", newline="")
    except OSError as e:
        msg = f"Cannot write '{path}': {e}"
        raise DocumentIOError(msg, path=str(path)) from e


@dataclass(frozen=True, slots=True)
class SyncReport:
    """Result of synchronizing one markup file.

    Attributes:
        markup_path: The Blade view
        document_path: Its paired document
        status: What happened
        outcome: The planned pass (None unless keys were found)
        error: The failure when status is FAILED
        dry_run: True when nothing was written on purpose
    """

    markup_path: Path
    document_path: Path
    status: SyncStatus
    outcome: SyncOutcome | None = None
    error: DocumentIOError | None = None
    dry_run: bool = False

    @property
    def is_updated(self) -> bool:
        """Check if the document was (or, in dry-run mode, would be) rewritten."""
        return self.status == SyncStatus.UPDATED

    @property
    def is_error(self) -> bool:
        """Check if reading or writing failed."""
        return self.status == SyncStatus.FAILED

    @property
    def key_count(self) -> int:
        """Number of keys referenced by the markup."""
        return len(self.outcome.keys) if self.outcome is not None else 0


@dataclass(frozen=True, slots=True)
class SyncSummary:
    """Immutable aggregate of sync reports.

    All statistics are computed properties derived from ``reports``.

    Attributes:
        reports: All individual reports (immutable tuple)
    """

    reports: tuple[SyncReport, ...]

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"SyncSummary(total={self.total}, "
            f"updated={self.updated}, "
            f"errors={self.errors})"
        )

    @property
    def total(self) -> int:
        """Total number of markup files processed."""
        return len(self.reports)

    @property
    def updated(self) -> int:
        """Number of documents rewritten (or out of date, in dry-run mode)."""
        return sum(1 for r in self.reports if r.is_updated)

    @property
    def errors(self) -> int:
        """Number of failed files."""
        return sum(1 for r in self.reports if r.is_error)

    def get_errors(self) -> tuple[SyncReport, ...]:
        """Get all failed reports."""
        return tuple(r for r in self.reports if r.is_error)

    def get_updated(self) -> tuple[SyncReport, ...]:
        """Get all reports whose document changed."""
        return tuple(r for r in self.reports if r.is_updated)

    @property
    def has_errors(self) -> bool:
        """Check if any file failed."""
        return self.errors > 0

    @property
    def up_to_date(self) -> bool:
        """Check that nothing needed rewriting and nothing failed."""
        return self.updated == 0 and self.errors == 0


def sync_markup_file(
    markup_path: Path,
    *,
    config: SyncConfig | None = None,
    dry_run: bool = False,
) -> SyncReport:
    """Synchronize the document paired with one markup file.

    Nothing happens when the paired document does not exist or the markup
    references no key. The document is written only when its text changes.

    Args:
        markup_path: Path of the Blade view
        config: Policy (default: SyncConfig())
        dry_run: Compute the outcome without writing

    Returns:
        SyncReport for this file

    Raises:
        ValueError: If markup_path does not carry the markup suffix
    """
    config = config or _DEFAULT_CONFIG
    document_path = paired_document_path(markup_path, config=config)

    base = SyncReport(markup_path, document_path, SyncStatus.NO_DOCUMENT, dry_run=dry_run)

    if not document_path.is_file():
        logger.debug("No paired document for %s", markup_path)
        return base

    try:
        markup = read_source(markup_path, max_size=config.max_source_size)
        existing = read_source(document_path, max_size=config.max_source_size)
        outcome = plan_sync(markup, existing, config=config)

        if not outcome.keys:
            return replace(base, status=SyncStatus.NO_KEYS, outcome=outcome)
        if not outcome.changed:
            return replace(base, status=SyncStatus.UNCHANGED, outcome=outcome)

        if not dry_run:
            write_source(document_path, outcome.text)
            logger.info(
                "Synchronized %s: %d keys (+%d, -%d)",
                document_path,
                len(outcome.keys),
                len(outcome.added),
                len(outcome.removed),
            )
        return replace(base, status=SyncStatus.UPDATED, outcome=outcome)
    except DocumentIOError as e:
        logger.error("Failed to synchronize %s: %s", markup_path, e)
        return replace(base, status=SyncStatus.FAILED, error=e)


def sync_paths(
    paths: Iterable[Path],
    *,
    config: SyncConfig | None = None,
    dry_run: bool = False,
) -> SyncSummary:
    """Synchronize every markup file found under paths.

    Args:
        paths: Markup files and/or directories to walk
        config: Policy (default: SyncConfig())
        dry_run: Compute outcomes without writing

    Returns:
        SyncSummary over all markup files found
    """
    config = config or _DEFAULT_CONFIG
    reports = tuple(
        sync_markup_file(path, config=config, dry_run=dry_run)
        for path in iter_markup_files(paths, config=config)
    )
    return SyncSummary(reports)
