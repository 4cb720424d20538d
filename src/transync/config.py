"""Synchronization configuration.

SyncConfig bundles every policy knob of a synchronization pass. Defaults come
from transync.constants; each field can be overridden by keyword.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass, field

from transync.constants import (
    DEFAULT_LANGUAGE,
    DIRECTIVE_FUNCTIONS,
    DOCUMENT_SUFFIX,
    IDENTITY_LANGUAGES,
    MARKUP_SUFFIX,
    MAX_SOURCE_SIZE,
    QUOTE_CHARS,
    TRANSLATION_FUNCTIONS,
)
from transync.enums import QuoteStyle
from transync.syntax.extractor import KeyExtractor
from transync.syntax.serializer import DocumentSerializer
from transync.types import LanguageCode

__all__ = ["SyncConfig"]


@dataclass(frozen=True, slots=True)
class SyncConfig:
    """Immutable policy for one or many synchronization passes.

    Example:
        >>> config = SyncConfig(default_language="en")
        >>> config.identity_languages == frozenset({"ar"})
        True

    Attributes:
        default_language: Language synthesized for an empty document
        identity_languages: Languages whose new keys default to the key text
        quote_style: Quote used for keys and values on output
        functions: Helper functions recognized in markup
        directives: Blade directives recognized in markup
        markup_suffix: Suffix identifying markup files
        document_suffix: Suffix of the paired document
        max_source_size: Largest file (bytes) read from disk; 0 disables
    """

    default_language: LanguageCode = DEFAULT_LANGUAGE
    identity_languages: frozenset[LanguageCode] = IDENTITY_LANGUAGES
    quote_style: QuoteStyle = QuoteStyle.DOUBLE
    functions: tuple[str, ...] = TRANSLATION_FUNCTIONS
    directives: tuple[str, ...] = DIRECTIVE_FUNCTIONS
    markup_suffix: str = MARKUP_SUFFIX
    document_suffix: str = DOCUMENT_SUFFIX
    max_source_size: int = MAX_SOURCE_SIZE
    _extractor: KeyExtractor = field(init=False, repr=False, compare=False)
    _serializer: DocumentSerializer = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate fields and build the reusable extractor and serializer.

        Raises:
            ValueError: If any field would produce an unusable configuration
        """
        if not self.default_language or any(
            ch in self.default_language for ch in QUOTE_CHARS + "\\"
        ):
            msg = (
                "default_language must be non-empty and free of quote characters "
                f"and backslashes, got: {self.default_language!r}"
            )
            raise ValueError(msg)
        if not self.markup_suffix or not self.document_suffix:
            msg = "markup_suffix and document_suffix must be non-empty"
            raise ValueError(msg)
        if self.markup_suffix == self.document_suffix:
            msg = f"markup_suffix and document_suffix must differ, both are {self.markup_suffix!r}"
            raise ValueError(msg)
        if self.max_source_size < 0:
            msg = f"max_source_size must be >= 0, got {self.max_source_size}"
            raise ValueError(msg)

        # Normalize iterables passed by callers into the declared types
        object.__setattr__(self, "identity_languages", frozenset(self.identity_languages))
        object.__setattr__(self, "functions", tuple(self.functions))
        object.__setattr__(self, "directives", tuple(self.directives))
        object.__setattr__(
            self,
            "_extractor",
            KeyExtractor(functions=self.functions, directives=self.directives),
        )
        object.__setattr__(self, "_serializer", DocumentSerializer(quote_style=self.quote_style))

    @property
    def extractor(self) -> KeyExtractor:
        """Key extractor configured with this config's call names."""
        return self._extractor

    @property
    def serializer(self) -> DocumentSerializer:
        """Serializer configured with this config's quote style."""
        return self._serializer
