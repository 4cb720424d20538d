"""Enumerations for transync type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class EscapeMode(StrEnum):
    """How backslash escapes inside a string literal are decoded.

    StrEnum provides automatic string conversion: str(EscapeMode.KEY) == "key"
    """

    KEY = "key"
    """Translation key in markup: only \\\\ and \\<quote> are escapes"""

    VALUE = "value"
    """Document value: \\n, \\t and \\r are expanded as well"""


class QuoteStyle(StrEnum):
    """Quote character used for keys and values on output.

    StrEnum provides automatic string conversion: str(QuoteStyle.DOUBLE) == "double"
    """

    DOUBLE = "double"
    """Double quotes: "key" => "value"."""

    SINGLE = "single"
    """Single quotes: 'key' => 'value'."""

    @property
    def char(self) -> str:
        """The quote character itself."""
        return '"' if self is QuoteStyle.DOUBLE else "'"


class SyncStatus(StrEnum):
    """Outcome of synchronizing one markup file with its document.

    StrEnum provides automatic string conversion: str(SyncStatus.UPDATED) == "updated"
    """

    UPDATED = "updated"
    """Document rewritten (or would be, in dry-run mode)"""

    UNCHANGED = "unchanged"
    """Document already up to date"""

    NO_DOCUMENT = "no_document"
    """No paired document exists next to the markup file"""

    NO_KEYS = "no_keys"
    """Markup references no translation keys"""

    FAILED = "failed"
    """Reading or writing a file failed"""


__all__ = [
    "EscapeMode",
    "QuoteStyle",
    "SyncStatus",
]
