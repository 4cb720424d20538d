"""Syntax package: scanning, extraction, parsing and serialization.

Every component here is a pure function over strings and in-memory
structures; none of them touches the filesystem.

Python 3.13+.
"""

from .cursor import Cursor, LineOffsetCache, ParseResult
from .extractor import KeyExtractor, extract_keys
from .parser import DocumentParser, ParsedDocument, parse_document
from .scanner import scan_string_literal
from .serializer import (
    DocumentSerializer,
    SerializationValidationError,
    quote_literal,
    serialize_document,
)

__all__ = [
    "Cursor",
    "DocumentParser",
    "DocumentSerializer",
    "KeyExtractor",
    "LineOffsetCache",
    "ParseResult",
    "ParsedDocument",
    "SerializationValidationError",
    "extract_keys",
    "parse_document",
    "quote_literal",
    "scan_string_literal",
    "serialize_document",
]
