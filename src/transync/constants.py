"""Shared constants for transync.

This module provides centralized configuration defaults used across the
syntax, merge and workspace packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Language policy: Default language and identity-default languages
- Markup recognition: Translation function and directive names
- File pairing: Markup and document file suffixes
- Input limits: Size constraints for files read from disk

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Language policy
    "DEFAULT_LANGUAGE",
    "IDENTITY_LANGUAGES",
    # Markup recognition
    "TRANSLATION_FUNCTIONS",
    "DIRECTIVE_FUNCTIONS",
    "QUOTE_CHARS",
    # File pairing
    "MARKUP_SUFFIX",
    "DOCUMENT_SUFFIX",
    # Input limits
    "MAX_SOURCE_SIZE",
]

# ============================================================================
# LANGUAGE POLICY
# ============================================================================

# Language synthesized when the existing document has no language block.
DEFAULT_LANGUAGE: str = "ar"

# Languages whose untranslated entries default to the key text itself.
# Every other language starts with an empty string.
IDENTITY_LANGUAGES: frozenset[str] = frozenset({"ar"})

# ============================================================================
# MARKUP RECOGNITION
# ============================================================================

# Helper functions recognized anywhere a call can appear:
# {{ __('k') }}, {!! trans('k') !!}, @__('k') or a bare __('k').
TRANSLATION_FUNCTIONS: tuple[str, ...] = ("__", "trans")

# Blade directives recognized only behind the at-sign: @lang('k').
DIRECTIVE_FUNCTIONS: tuple[str, ...] = ("lang",)

# Characters that may open (and then must close) a string literal.
QUOTE_CHARS: str = "'\"`"

# ============================================================================
# FILE PAIRING
# ============================================================================

# views/home.blade.php is paired with views/home.php
MARKUP_SUFFIX: str = ".blade.php"
DOCUMENT_SUFFIX: str = ".php"

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum file size in bytes (10 MB).
# Files above this size are refused before they are read into memory.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024
