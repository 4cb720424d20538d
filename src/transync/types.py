"""Type aliases for the translation domain.

Provides semantic type aliases used throughout the package and by user code
when annotating transync call sites.

Python 3.13+. Zero external dependencies.
"""

from typing import TypeAlias

__all__ = [
    "DocumentSource",
    "LanguageCode",
    "LanguageTable",
    "MarkupSource",
    "TranslationKey",
]

TranslationKey: TypeAlias = str
"""Lookup key of a translated message (e.g., 'welcome.title')."""

LanguageCode: TypeAlias = str
"""Language identifier used as a top-level document key (e.g., 'en', 'ar')."""

LanguageTable: TypeAlias = dict[TranslationKey, str]
"""Translations of one language, keyed by TranslationKey."""

MarkupSource: TypeAlias = str
"""Raw Blade template text."""

DocumentSource: TypeAlias = str
"""Raw text of a PHP translation document."""
