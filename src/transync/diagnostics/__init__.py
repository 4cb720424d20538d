"""Diagnostic system for transync.

Provides structured diagnostics with codes and spans for every skipped
occurrence, and the exception hierarchy used at the I/O edges.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import DocumentIOError, TransyncError

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DocumentIOError",
    "SourceSpan",
    "TransyncError",
]
