"""Merge extracted keys into an existing translation document.

The merge is the only place a TranslationDocument changes, and it never
mutates its input: a new document is returned.

Rules:
    - Languages: those of the existing document, in order; a single default
      language when there are none.
    - Existing translations of a kept key are carried forward unchanged.
    - A new key starts as the key itself in identity languages, else "".
    - Keys that are no longer referenced are dropped.

Python 3.13+.
"""

from collections.abc import Iterable

from transync.constants import DEFAULT_LANGUAGE, IDENTITY_LANGUAGES
from transync.model import TranslationDocument
from transync.types import LanguageCode, LanguageTable, TranslationKey

__all__ = ["initial_value", "merge_keys"]


def initial_value(
    language: LanguageCode,
    key: TranslationKey,
    identity_languages: frozenset[LanguageCode] = IDENTITY_LANGUAGES,
) -> str:
    """Value given to a key that has no translation yet.

    Example:
        >>> initial_value("ar", "welcome.title")
        'welcome.title'
        >>> initial_value("en", "welcome.title")
        ''
    """
    return key if language in identity_languages else ""


def merge_keys(
    document: TranslationDocument | None,
    keys: Iterable[TranslationKey],
    *,
    default_language: LanguageCode = DEFAULT_LANGUAGE,
    identity_languages: frozenset[LanguageCode] = IDENTITY_LANGUAGES,
) -> TranslationDocument:
    """Merge keys into document, returning a new document.

    Args:
        document: Existing document, or None when it had no data
        keys: Keys that must be present afterwards (duplicates are ignored)
        default_language: Language used when document has none
        identity_languages: Languages whose new entries default to the key

    Returns:
        Document whose every table holds exactly the given keys

    Example:
        >>> existing = TranslationDocument({"en": {"a": "A", "old": "Old"}})
        >>> merge_keys(existing, ["a", "b"]).languages
        {'en': {'a': 'A', 'b': ''}}
    """
    unique_keys = list(dict.fromkeys(keys))
    if document is None or document.is_empty:
        existing: dict[LanguageCode, LanguageTable] = {}
        languages: tuple[LanguageCode, ...] = (default_language,)
    else:
        existing = document.languages
        languages = document.language_codes

    merged: dict[LanguageCode, LanguageTable] = {}
    for language in languages:
        previous = existing.get(language, {})
        table: LanguageTable = {}
        for key in unique_keys:
            if key in previous:
                table[key] = previous[key]
            else:
                table[key] = initial_value(language, key, identity_languages)
        merged[language] = table

    return TranslationDocument(merged)
