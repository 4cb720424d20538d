"""Tolerant parser for PHP translation documents.

This module provides the DocumentParser class that reads a previously
generated (or hand-edited) document into a TranslationDocument:

    <?php

    return [
        'en' => [
            "welcome.title" => "Hello",
        ],
    ];

Architecture:
    A language block header (quoted code, ``=>``, ``[``) is located with a
    regular expression. The block body is then walked with the immutable
    Cursor: each entry is ``literal => literal`` read by the string literal
    scanner in EscapeMode.VALUE. The block ends at the first ``]`` outside a
    string literal; nested arrays inside a block are not supported.

Robustness:
    Nothing in a document is fatal. Comment lines (``//`` or ``#``) are
    skipped, lines that are not a key/value pair are skipped and recorded as
    diagnostics, and a document without any language block parses to None
    ("no data") so the caller can fall back to an empty baseline.
"""

import logging
import re
from dataclasses import dataclass

from transync.diagnostics import Diagnostic, DiagnosticCode, SourceSpan
from transync.enums import EscapeMode
from transync.model import TranslationDocument
from transync.syntax.cursor import Cursor, LineOffsetCache
from transync.syntax.scanner import get_last_parse_error, scan_string_literal
from transync.types import DocumentSource, LanguageCode, LanguageTable

__all__ = ["DocumentParser", "ParsedDocument", "parse_document"]

logger = logging.getLogger(__name__)

# 'en' => [   (the code itself may not contain any quote character)
_LANGUAGE_HEADER = re.compile(r"""(['"`])([^'"`]+)\1\s*=>\s*\[""")

_ARROW: str = "=>"
_BLOCK_END: str = "]"
_ENTRY_SEPARATOR: str = ","
_LINE_COMMENTS: tuple[str, ...] = ("//", "#")


@dataclass(frozen=True, slots=True)
class ParsedDocument:
    """Parser result: the document (or None) plus what was skipped.

    Attributes:
        document: Parsed document, None when no language block was found
        diagnostics: One entry per skipped line or structural problem
    """

    document: TranslationDocument | None
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def has_data(self) -> bool:
        """True when at least one language block was found."""
        return self.document is not None


class _BlockState:
    """Mutable per-parse bookkeeping (diagnostics with lazy line lookup)."""

    __slots__ = ("_lines", "diagnostics", "source")

    def __init__(self, source: str) -> None:
        self.source = source
        self._lines: LineOffsetCache | None = None
        self.diagnostics: list[Diagnostic] = []

    def report(self, code: DiagnosticCode, message: str, start: int, end: int) -> None:
        if self._lines is None:
            self._lines = LineOffsetCache(self.source)
        line, column = self._lines.get_line_col(start)
        diagnostic = Diagnostic(
            code=code,
            message=message,
            span=SourceSpan(start=start, end=max(start, end), line=line, column=column),
        )
        logger.debug("Document parse: %s", diagnostic.format_error())
        self.diagnostics.append(diagnostic)


class DocumentParser:
    """Parser for the PHP nested-array translation document format.

    Design:
    - Stateless between calls: every parse() builds its own state
    - Every skip is local to one line; the overall parse never aborts
    - Language order and the first position of a repeated code are preserved
    """

    __slots__ = ()

    def parse(self, source: DocumentSource) -> TranslationDocument | None:
        """Parse document text.

        Args:
            source: Full document text

        Returns:
            TranslationDocument, or None when no language block is found

        Example:
            >>> doc = DocumentParser().parse("return ['en' => ['a' => 'A']];")
            >>> doc.languages
            {'en': {'a': 'A'}}
        """
        return self.parse_with_diagnostics(source).document

    def parse_with_diagnostics(self, source: DocumentSource) -> ParsedDocument:
        """Parse document text and report every skipped line.

        Args:
            source: Full document text

        Returns:
            ParsedDocument with the document (or None) and diagnostics
        """
        state = _BlockState(source)
        languages: dict[LanguageCode, LanguageTable] = {}
        pos = 0

        while (header := _LANGUAGE_HEADER.search(source, pos)) is not None:
            code = header.group(2)
            table, cursor = self._parse_block(Cursor(source, header.end()), state)
            # A repeated code replaces the table but keeps its first position
            languages[code] = table
            pos = cursor.pos

        if not languages:
            state.report(
                DiagnosticCode.NO_LANGUAGE_BLOCKS,
                "No language block found",
                0,
                len(source),
            )
            return ParsedDocument(None, tuple(state.diagnostics))

        return ParsedDocument(TranslationDocument(languages), tuple(state.diagnostics))

    def _parse_block(
        self, cursor: Cursor, state: _BlockState
    ) -> tuple[LanguageTable, Cursor]:
        """Parse entries until the closing bracket.

        Args:
            cursor: Position just after the block's opening bracket
            state: Diagnostics collector

        Returns:
            (table, cursor just past the closing bracket or at EOF)
        """
        table: LanguageTable = {}
        block_start = cursor.pos

        while True:
            cursor = cursor.skip_whitespace()

            if cursor.is_eof:
                state.report(
                    DiagnosticCode.UNTERMINATED_BLOCK,
                    f"Language block is missing its closing '{_BLOCK_END}'",
                    block_start,
                    cursor.pos,
                )
                return table, cursor

            if cursor.current == _BLOCK_END:
                return table, cursor.advance()

            if any(cursor.startswith(marker) for marker in _LINE_COMMENTS):
                cursor = cursor.skip_to_line_end()
                continue

            if cursor.current == _ENTRY_SEPARATOR:
                cursor = cursor.advance()
                continue

            cursor = self._parse_entry(cursor, table, state)

    def _parse_entry(
        self, cursor: Cursor, table: LanguageTable, state: _BlockState
    ) -> Cursor:
        """Parse one ``key => value`` entry into table.

        On any mismatch the rest of the line is skipped and a diagnostic is
        recorded.

        Returns:
            Cursor after the entry (separator consumed) or after the skipped line
        """
        entry_start = cursor.pos

        key_result = scan_string_literal(cursor, EscapeMode.VALUE)
        if key_result is None:
            return self._skip_line(cursor, state, entry_start)

        arrow = key_result.cursor.skip_whitespace()
        if not arrow.startswith(_ARROW):
            state.report(
                DiagnosticCode.EXPECTED_ARROW,
                f"Expected '{_ARROW}' after key {key_result.value!r}",
                arrow.pos,
                arrow.pos,
            )
            return self._skip_to_line_end(arrow)

        value_cursor = arrow.advance(len(_ARROW))
        value_result = scan_string_literal(value_cursor, EscapeMode.VALUE)
        if value_result is None:
            return self._skip_line(value_cursor, state, entry_start)

        table[key_result.value] = value_result.value

        # Trailing content up to the separator or the end of the line
        cursor = value_result.cursor
        stops = ("\n", "\r", _ENTRY_SEPARATOR, _BLOCK_END)
        while not cursor.is_eof and cursor.current not in stops:
            cursor = cursor.advance()
        return cursor.advance() if cursor.startswith(_ENTRY_SEPARATOR) else cursor

    def _skip_line(self, cursor: Cursor, state: _BlockState, entry_start: int) -> Cursor:
        """Record the scanner failure and skip the rest of the line."""
        error = get_last_parse_error()
        if error is not None:
            state.report(error.code, error.message, entry_start, error.position)
        return self._skip_to_line_end(cursor)

    @staticmethod
    def _skip_to_line_end(cursor: Cursor) -> Cursor:
        """Skip to the end of the line, stopping early at a closing bracket."""
        while not cursor.is_eof and cursor.current not in ("\n", "\r", _BLOCK_END):
            cursor = cursor.advance()
        return cursor


def parse_document(source: DocumentSource) -> TranslationDocument | None:
    """Parse document text into a TranslationDocument.

    Convenience function for DocumentParser().parse().

    Args:
        source: Full document text

    Returns:
        TranslationDocument, or None when no language block is found

    Example:
        >>> parse_document("") is None
        True
    """
    return DocumentParser().parse(source)
