"""String literal scanner shared by the key extractor and the document parser.

Reads one quoted literal in any of the three quote styles PHP and Blade
sources use (single, double, backtick), decoding backslash escapes according
to an EscapeMode.

Error Context:
    Functions store error context on failure via _set_parse_error().
    Retrieve with get_last_parse_error() for detailed diagnostics.
    A failure is never fatal: callers skip the occurrence and continue.
"""

from dataclasses import dataclass
from threading import local as thread_local

from transync.constants import QUOTE_CHARS
from transync.diagnostics import DiagnosticCode
from transync.enums import EscapeMode
from transync.syntax.cursor import Cursor, ParseResult

__all__ = [
    "ParseErrorContext",
    "clear_parse_error",
    "decode_escape",
    "get_last_parse_error",
    "is_quote",
    "scan_string_literal",
]

# Escapes expanded in EscapeMode.VALUE beyond backslash and the quote itself.
_VALUE_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
}

# Thread-local storage for parse error context
_error_thread_local = thread_local()


@dataclass(frozen=True, slots=True)
class ParseErrorContext:
    """Context information for scan failures.

    Attributes:
        code: Diagnostic code classifying the failure
        message: Human-readable error description
        position: Character position in source where the failure was detected
        expected: What the scanner expected to find (optional)
    """

    code: DiagnosticCode
    message: str
    position: int
    expected: tuple[str, ...] = ()


def _set_parse_error(
    code: DiagnosticCode, message: str, position: int, expected: tuple[str, ...] = ()
) -> None:
    """Store parse error context for later retrieval."""
    _error_thread_local.last_error = ParseErrorContext(
        code=code, message=message, position=position, expected=expected
    )


def get_last_parse_error() -> ParseErrorContext | None:
    """Get the last scan error context (if any).

    Example:
        >>> result = scan_string_literal(cursor)
        >>> if result is None:
        ...     error = get_last_parse_error()
        ...     print(f"Error at position {error.position}: {error.message}")
    """
    return getattr(_error_thread_local, "last_error", None)


def clear_parse_error() -> None:
    """Clear the last scan error context."""
    _error_thread_local.last_error = None


def is_quote(ch: str) -> bool:
    """Check whether ch opens a string literal."""
    return len(ch) == 1 and ch in QUOTE_CHARS


def decode_escape(ch: str, quote: str, mode: EscapeMode) -> str:
    """Decode the character following a backslash.

    In EscapeMode.KEY only ``\\\\`` and ``\\<quote>`` are escapes; any other
    pair is kept verbatim, like a PHP single-quoted string. In
    EscapeMode.VALUE ``\\n``, ``\\t`` and ``\\r`` are expanded too and any
    other escaped character stands for itself.

    Args:
        ch: Character after the backslash
        quote: Quote character delimiting the literal
        mode: Escape decoding mode

    Returns:
        Decoded text (one or two characters)

    Example:
        >>> decode_escape("n", "'", EscapeMode.VALUE)
        '\\n'
        >>> decode_escape("n", "'", EscapeMode.KEY)
        '\\\\n'
    """
    if ch in ("\\", quote):
        return ch
    if mode is EscapeMode.KEY:
        return "\\" + ch
    return _VALUE_ESCAPES.get(ch, ch)


def scan_string_literal(
    cursor: Cursor, mode: EscapeMode = EscapeMode.VALUE
) -> ParseResult[str] | None:
    """Scan one quoted string literal, skipping leading whitespace.

    The opening character decides the closing one; the other quote
    characters are ordinary content inside the literal.

    Examples:
        'welcome.title' → welcome.title
        "It's here" → It's here
        "say \\"hi\\"" → say "hi"

    Args:
        cursor: Position at or before the opening quote
        mode: Escape decoding mode (see decode_escape)

    Returns:
        ParseResult(value, cursor just past the closing quote) on success,
        None if there is no opening quote or the literal is unterminated
    """
    # Clear any stale error context from previous scan attempts
    clear_parse_error()

    cursor = cursor.skip_whitespace()

    if cursor.is_eof or not is_quote(cursor.current):
        _set_parse_error(
            DiagnosticCode.EXPECTED_LITERAL,
            "Expected opening quote",
            cursor.pos,
            tuple(QUOTE_CHARS),
        )
        return None

    quote = cursor.current
    start_pos = cursor.pos
    cursor = cursor.advance()
    chunks: list[str] = []

    while not cursor.is_eof:
        ch = cursor.current

        if ch == quote:
            return ParseResult("".join(chunks), cursor.advance())

        if ch == "\\":
            cursor = cursor.advance()
            if cursor.is_eof:
                break
            chunks.append(decode_escape(cursor.current, quote, mode))
        else:
            chunks.append(ch)
        cursor = cursor.advance()

    # EOF without closing quote
    _set_parse_error(
        DiagnosticCode.UNTERMINATED_LITERAL,
        f"Unterminated string literal opened at position {start_pos}",
        cursor.pos,
        (quote,),
    )
    return None
