"""Immutable cursor infrastructure for tolerant scanning.

Implements the immutable cursor pattern shared by the string literal
scanner, the key extractor and the document parser.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Line:column looked up through LineOffsetCache (only for diagnostics)

Whitespace:
    Markup and PHP sources are free-form, so skip_whitespace() accepts any
    Unicode whitespace (str.isspace), not only the ASCII blank set.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

__all__ = ["Cursor", "LineOffsetCache", "ParseResult"]

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> cursor.current
        'h'
        >>> cursor.advance().current
        'e'
        >>> cursor.current  # Original unchanged
        'h'
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input. Check is_eof first.
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped at EOF)."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def startswith(self, prefix: str) -> bool:
        """Check whether the source continues with prefix at this position.

        Example:
            >>> Cursor("a => b", 2).startswith("=>")
            True
        """
        return self.source.startswith(prefix, self.pos)

    def skip_whitespace(self) -> "Cursor":
        """Skip any whitespace, including line endings.

        Example:
            >>> Cursor("  \\n\\t x", 0).skip_whitespace().current
            'x'
        """
        c = self
        while not c.is_eof and c.current.isspace():
            c = c.advance()
        return c

    def skip_to_line_end(self) -> "Cursor":
        """Advance to the next line ending character (not consumed).

        Example:
            >>> Cursor("hello\\nworld", 0).skip_to_line_end().pos
            5
        """
        cursor = self
        while not cursor.is_eof and cursor.current not in ("\n", "\r"):
            cursor = cursor.advance()
        return cursor


class LineOffsetCache:
    """Cached line offset computation for efficient position lookups.

    Precomputes line start offsets in one pass, then answers lookups with
    binary search. Used when a whole markup file or document is reported on.

    Example:
        >>> cache = LineOffsetCache("abc\\ndef\\nghi")
        >>> cache.get_line_col(0)
        (1, 1)
        >>> cache.get_line_col(4)  # 'd' in "def"
        (2, 1)
    """

    __slots__ = ("_offsets", "_source_len")

    def __init__(self, source: str) -> None:
        """Build line offset cache from source."""
        offsets = [0]
        for i, char in enumerate(source):
            if char == "\n":
                offsets.append(i + 1)
        self._offsets: tuple[int, ...] = tuple(offsets)
        self._source_len = len(source)

    def get_line_col(self, pos: int) -> tuple[int, int]:
        """Get 1-indexed (line, column) for position.

        Positions outside the source are clamped to its bounds.
        """
        pos = max(0, min(pos, self._source_len))

        # Index of largest line start <= pos
        left, right = 0, len(self._offsets) - 1
        while left < right:
            mid = (left + right + 1) // 2
            if self._offsets[mid] <= pos:
                left = mid
            else:
                right = mid - 1

        return (left + 1, pos - self._offsets[left] + 1)


@dataclass(frozen=True, slots=True)
class ParseResult(Generic[T]):
    """Scanner result containing the scanned value and the new cursor position.

    Every scanning function has the signature:
        def scan_foo(cursor: Cursor) -> ParseResult[Foo] | None

    Example:
        >>> result = ParseResult("h", Cursor("hello", 1))
        >>> result.value
        'h'
        >>> result.cursor.current
        'e'
    """

    value: T
    cursor: Cursor
