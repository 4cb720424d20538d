"""Synchronization pass: extract → parse → merge → serialize.

A pass is a pure computation over two strings. It never fails on malformed
input: an unparseable document is replaced by the default baseline, and
unusable call sites contribute no key.

Python 3.13+.
"""

import logging
from dataclasses import dataclass

from transync.config import SyncConfig
from transync.merge import merge_keys
from transync.model import TranslationDocument
from transync.syntax.parser import DocumentParser
from transync.types import DocumentSource, MarkupSource, TranslationKey

__all__ = ["SyncOutcome", "plan_sync", "synchronize"]

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = SyncConfig()


@dataclass(frozen=True, slots=True)
class SyncOutcome:
    """Result of planning one synchronization pass.

    Attributes:
        keys: Keys extracted from the markup, sorted
        text: New document text (the existing text when keys is empty)
        document: Merged document, None when no keys were found
        added: Keys absent from every language of the existing document
        removed: Keys of the existing document no longer referenced
        fallback: True when the existing document had no language block
        changed: True when text differs from the existing text
    """

    keys: tuple[TranslationKey, ...]
    text: DocumentSource
    document: TranslationDocument | None
    added: tuple[TranslationKey, ...] = ()
    removed: tuple[TranslationKey, ...] = ()
    fallback: bool = False
    changed: bool = False


def plan_sync(
    markup: MarkupSource,
    existing: DocumentSource,
    *,
    config: SyncConfig | None = None,
) -> SyncOutcome:
    """Compute the new document text for markup without touching any file.

    Args:
        markup: Blade template text
        existing: Current document text (may be empty)
        config: Policy (default: SyncConfig())

    Returns:
        SyncOutcome describing the pass
    """
    config = config or _DEFAULT_CONFIG
    keys = config.extractor.extract(markup)

    if not keys:
        logger.debug("No translation keys found; document left untouched")
        return SyncOutcome(keys=(), text=existing, document=None)

    parsed = DocumentParser().parse_with_diagnostics(existing)
    document = parsed.document
    fallback = not parsed.has_data
    if parsed.has_data and parsed.diagnostics:
        logger.debug("Existing document: %d lines skipped", len(parsed.diagnostics))
    if fallback and existing.strip():
        logger.warning(
            "Existing document has no language block; starting from default language %r",
            config.default_language,
        )

    merged = merge_keys(
        document,
        keys,
        default_language=config.default_language,
        identity_languages=config.identity_languages,
    )
    text = config.serializer.serialize(merged)

    previous_keys = document.keys() if document is not None else frozenset()
    key_set = frozenset(keys)
    return SyncOutcome(
        keys=tuple(keys),
        text=text,
        document=merged,
        added=tuple(sorted(key_set - previous_keys)),
        removed=tuple(sorted(previous_keys - key_set)),
        fallback=fallback,
        changed=text != existing,
    )


def synchronize(
    markup: MarkupSource,
    existing: DocumentSource,
    *,
    config: SyncConfig | None = None,
) -> DocumentSource:
    """Synchronize a document with the keys referenced by markup.

    Args:
        markup: Blade template text
        existing: Current document text (may be empty)
        config: Policy (default: SyncConfig())

    Returns:
        New document text; existing unchanged when markup has no keys

    Example:
        >>> print(synchronize("{{ __('a.b') }}", ""), end="")
        <?php
        <BLANKLINE>
        return [
            'ar' => [
                "a.b" => "a.b",
            ]
        ];
    """
    return plan_sync(markup, existing, config=config).text
