"""Serialize a TranslationDocument back to PHP source.

The output is the file format contract: it must be re-parseable by
DocumentParser and byte-identical for equal documents. Languages keep their
document order; keys are sorted.

    <?php

    return [
        'ar' => [
            "welcome.title" => "welcome.title",
        ],

        'en' => [
            "welcome.title" => "Hello",
        ]
    ];

Python 3.13+.
"""

from transync.constants import QUOTE_CHARS
from transync.enums import QuoteStyle
from transync.model import TranslationDocument
from transync.types import LanguageCode, LanguageTable

__all__ = [
    "DocumentSerializer",
    "SerializationValidationError",
    "quote_literal",
    "serialize_document",
]

_OPEN_TAG: str = "<?php"
_LANGUAGE_INDENT: str = "    "
_ENTRY_INDENT: str = "        "

# Language codes are written verbatim in single quotes; the parser reads
# them back without escape decoding.
_LANGUAGE_QUOTE: str = "'"
_FORBIDDEN_IN_LANGUAGE: str = QUOTE_CHARS


class SerializationValidationError(ValueError):
    """Raised when a document cannot be serialized into re-parseable text.

    Common causes:
    - Empty translation key
    - Language code that is empty or contains a quote character
    """


def quote_literal(text: str, quote: str) -> str:
    """Render text as a quoted literal.

    Only the backslash and the delimiting quote are escaped; every other
    character, including the other quote characters, is written as-is.

    Example:
        >>> quote_literal('say "hi"', '"')
        '"say \\\\"hi\\\\""'
        >>> quote_literal("it's", '"')
        '"it\\'s"'
    """
    # Order matters: backslash first to avoid double-escaping
    escaped = text.replace("\\", "\\\\").replace(quote, "\\" + quote)
    return f"{quote}{escaped}{quote}"


def _validate_document(document: TranslationDocument) -> None:
    """Validate that document will parse back to itself.

    Raises:
        SerializationValidationError: If validation fails
    """
    for language, table in document.languages.items():
        # Codes are written and read back verbatim
        if not language or any(ch in language for ch in _FORBIDDEN_IN_LANGUAGE):
            msg = (
                f"Language code {language!r} must be non-empty and free of "
                "quote characters"
            )
            raise SerializationValidationError(msg)
        if "" in table:
            msg = f"Language {language!r} contains an empty translation key"
            raise SerializationValidationError(msg)


class DocumentSerializer:
    """Converts a TranslationDocument to PHP source.

    Thread-safe serializer: the quote style is fixed at construction and all
    output is built locally per serialize() call.

    Usage:
        >>> serializer = DocumentSerializer()
        >>> print(serializer.serialize(TranslationDocument({"en": {"a": "A"}})), end="")
        <?php
        <BLANKLINE>
        return [
            'en' => [
                "a" => "A",
            ]
        ];
    """

    __slots__ = ("_quote",)

    def __init__(self, *, quote_style: QuoteStyle = QuoteStyle.DOUBLE) -> None:
        """Initialize serializer.

        Args:
            quote_style: Quote used for keys and values (default: double)
        """
        self._quote = quote_style.char

    def serialize(self, document: TranslationDocument, *, validate: bool = False) -> str:
        """Serialize document to PHP source.

        Args:
            document: Document to render
            validate: If True, check the document is re-parseable first

        Returns:
            PHP source ending with a newline

        Raises:
            SerializationValidationError: If validate=True and document is invalid
        """
        if validate:
            _validate_document(document)

        output: list[str] = [_OPEN_TAG, "", "return ["]
        languages = list(document.languages.items())
        for index, (language, table) in enumerate(languages):
            is_last = index == len(languages) - 1
            self._serialize_block(language, table, output, is_last=is_last)
            if not is_last:
                output.append("")
        output.append("];")
        return "\n".join(output) + "\n"

    def _serialize_block(
        self,
        language: LanguageCode,
        table: LanguageTable,
        output: list[str],
        *,
        is_last: bool,
    ) -> None:
        """Serialize one language block."""
        output.append(f"{_LANGUAGE_INDENT}{_LANGUAGE_QUOTE}{language}{_LANGUAGE_QUOTE} => [")
        for key in sorted(table):
            key_literal = quote_literal(key, self._quote)
            value_literal = quote_literal(table[key], self._quote)
            output.append(f"{_ENTRY_INDENT}{key_literal} => {value_literal},")
        output.append(_LANGUAGE_INDENT + "]" + ("" if is_last else ","))


def serialize_document(
    document: TranslationDocument,
    *,
    quote_style: QuoteStyle = QuoteStyle.DOUBLE,
    validate: bool = False,
) -> str:
    """Serialize document to PHP source.

    Convenience function for DocumentSerializer.serialize().

    Args:
        document: Document to render
        quote_style: Quote used for keys and values (default: double)
        validate: If True, check the document is re-parseable first

    Returns:
        PHP source ending with a newline

    Raises:
        SerializationValidationError: If validate=True and document is invalid
    """
    return DocumentSerializer(quote_style=quote_style).serialize(document, validate=validate)
