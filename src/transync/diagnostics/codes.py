"""Diagnostic codes and data structures.

Defines skip-reason codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Diagnostic codes with unique identifiers.

    Organized by category:
        1000-1999: Scanner (string literal) problems
        2000-2999: Markup (translation call) problems
        3000-3999: Document (language block / entry) problems
    """

    # Scanner (1000-1999)
    UNTERMINATED_LITERAL = 1001
    EXPECTED_LITERAL = 1002

    # Markup (2000-2999)
    NON_LITERAL_ARGUMENT = 2001
    EMPTY_KEY = 2002

    # Document (3000-3999)
    EXPECTED_ARROW = 3001
    UNTERMINATED_BLOCK = 3002
    NO_LANGUAGE_BLOCKS = 3003


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for diagnostics.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line or
                column is less than 1
        """
        if self.start < 0:
            msg = f"SourceSpan start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1 or self.column < 1:
            msg = f"SourceSpan line/column are 1-indexed, got {self.line}:{self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Produced for every occurrence the scanner, extractor or parser skips.
    Skips are never fatal; diagnostics only explain them.

    Attributes:
        code: Unique diagnostic code
        message: Human-readable description
        span: Source location (None when not tied to a position)
        severity: Severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    severity: Literal["error", "warning"] = "warning"

    def __str__(self) -> str:
        """Return human-readable description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic on one line.

        Example output:
            warning[UNTERMINATED_LITERAL]: 3:9: Unterminated string literal

        Control characters in the message are escaped so a hostile document
        cannot forge extra log lines.

        Returns:
            Formatted diagnostic
        """
        message = self.message.encode("unicode_escape").decode("ascii")
        location = f"{self.span.line}:{self.span.column}: " if self.span else ""
        return f"{self.severity}[{self.code.name}]: {location}{message}"
