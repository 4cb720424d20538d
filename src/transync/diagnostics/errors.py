"""transync exception hierarchy with structured diagnostics.

The pure pipeline never raises on malformed input; these exceptions belong to
the edges (file access, invalid configuration handed to the serializer).

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class TransyncError(Exception):
    """Base exception for all transync errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize TransyncError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class DocumentIOError(TransyncError):
    """Reading or writing a markup file or translation document failed.

    Raised by the workspace layer only. The original OSError is chained
    as __cause__.

    Attributes:
        path: The file that could not be read or written
    """

    def __init__(self, message: str | Diagnostic, *, path: str = "") -> None:
        """Initialize DocumentIOError.

        Args:
            message: Error message string OR Diagnostic object
            path: The file involved
        """
        super().__init__(message)
        self.path = path
