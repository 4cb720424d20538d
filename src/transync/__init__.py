"""transync - keep Laravel translation documents in sync with Blade views.

Extracts the translation keys a Blade view references (``__()``, ``trans()``,
``@lang()``), merges them into the view's PHP translation document without
losing existing translations, and writes the document back in a canonical,
deterministic form.

Public API:
    extract_keys - Sorted, distinct keys referenced by markup
    synchronize - New document text for markup and the existing text
    plan_sync - Same pass, returning a structured SyncOutcome
    parse_document - Parse document text into a TranslationDocument
    merge_keys - Merge keys into a TranslationDocument
    serialize_document - Render a TranslationDocument as PHP source
    SyncConfig - Policy (default language, identity languages, quote style)
    TranslationDocument - Language code → key → value table

Exceptions:
    TransyncError - Base exception class
    DocumentIOError - File read/write failure (workspace layer only)
    SerializationValidationError - Document that would not parse back

Submodules:
    transync.syntax - Scanner, extractor, parser and serializer
    transync.workspace - File pairing and per-file synchronization
    transync.diagnostics - Diagnostic codes and exceptions
    transync.cli - Command line interface
"""

from .config import SyncConfig
from .diagnostics import DocumentIOError, TransyncError
from .merge import merge_keys
from .model import TranslationDocument
from .sync import SyncOutcome, plan_sync, synchronize
from .syntax import (
    SerializationValidationError,
    extract_keys,
    parse_document,
    serialize_document,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("transync")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DocumentIOError",
    "SerializationValidationError",
    "SyncConfig",
    "SyncOutcome",
    "TransyncError",
    "TranslationDocument",
    "__version__",
    "extract_keys",
    "merge_keys",
    "parse_document",
    "plan_sync",
    "serialize_document",
    "synchronize",
]
