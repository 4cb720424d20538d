"""Workspace package: pairing, reading and writing files around the pipeline.

Submodules:
    files - paired_document_path, iter_markup_files, SyncReport, SyncSummary,
            sync_markup_file, sync_paths

Python 3.13+. Zero external dependencies.
"""

from transync.workspace.files import (
    SyncReport,
    SyncSummary,
    iter_markup_files,
    paired_document_path,
    read_source,
    sync_markup_file,
    sync_paths,
    write_source,
)

__all__ = [
    "SyncReport",
    "SyncSummary",
    "iter_markup_files",
    "paired_document_path",
    "read_source",
    "sync_markup_file",
    "sync_paths",
    "write_source",
]
