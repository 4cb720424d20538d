"""In-memory model of translation documents and markup call sites.

All nodes are frozen dataclasses. A TranslationDocument is rebuilt on every
synchronization pass and never mutated in place: the merger returns a new one.

Python 3.13+.
"""

from dataclasses import dataclass, field

from transync.diagnostics import DiagnosticCode
from transync.types import LanguageCode, LanguageTable, TranslationKey

__all__ = [
    "CallSite",
    "Span",
    "TranslationDocument",
]


@dataclass(frozen=True, slots=True)
class Span:
    """Source position span.

    Attributes:
        start: Starting character offset (inclusive)
        end: Ending character offset (exclusive)

    Example:
        Source: "{{ __('hi') }}"
        Call site span: Span(start=3, end=11)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate span invariants."""
        if self.start < 0:
            msg = f"Span start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"Span end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class CallSite:
    """One recognized translation call in markup.

    Attributes:
        function: Function or directive name (e.g., "__", "trans", "lang")
        key: Literal first argument, or None when the call was skipped
        span: From the function name to just past the first argument
            (or to the opening parenthesis when skipped)
        reason: Why the call was skipped (None when a key was extracted)
    """

    function: str
    key: TranslationKey | None
    span: Span
    reason: DiagnosticCode | None = None

    @property
    def skipped(self) -> bool:
        """True when no key could be extracted from this call."""
        return self.key is None


@dataclass(frozen=True, slots=True)
class TranslationDocument:
    """Language code → LanguageTable mapping, the full translation table.

    Language order is significant and preserved: it is the order in which
    blocks appeared in the parsed document, and the order they are written.
    Key order inside a table is not; the serializer sorts keys.

    Attributes:
        languages: Insertion-ordered language tables

    Example:
        >>> doc = TranslationDocument({"en": {"hi": "Hello"}})
        >>> doc.language_codes
        ('en',)
        >>> doc.get("en", "hi")
        'Hello'
    """

    languages: dict[LanguageCode, LanguageTable] = field(default_factory=dict)

    @property
    def language_codes(self) -> tuple[LanguageCode, ...]:
        """Language codes in document order."""
        return tuple(self.languages)

    @property
    def is_empty(self) -> bool:
        """True when the document defines no language."""
        return not self.languages

    def get(self, language: LanguageCode, key: TranslationKey) -> str | None:
        """Look up a translation, None if language or key is missing."""
        table = self.languages.get(language)
        if table is None:
            return None
        return table.get(key)

    def keys(self) -> frozenset[TranslationKey]:
        """Union of keys across all languages."""
        return frozenset(key for table in self.languages.values() for key in table)
