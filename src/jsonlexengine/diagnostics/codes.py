"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Structural errors (token stream and document shape)
        2000-2999: Lexical errors (string and number literals)
        3000-3999: Limit errors (resource protection)
    """

    # Structural errors (1000-1999)
    UNEXPECTED_END = 1001
    UNEXPECTED_CHARACTER = 1002

    # Lexical errors (2000-2999)
    INVALID_CHARACTER = 2001
    INVALID_ESCAPE_CHARACTER = 2002
    INVALID_HEX = 2003
    INVALID_NUMBER = 2004

    # Limit errors (3000-3999)
    NESTING_DEPTH_EXCEEDED = 3001
    TRAVERSAL_DEPTH_EXCEEDED = 3002


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes. For multi-byte UTF-8 characters, character offset differs
        from byte offset.

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
            ValueError: If start is negative, end precedes start, line is
                less than 1 (lines are 1-indexed), or column is less than 1
                (columns are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools (editors, linters, CI annotations).

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None when the error has no position)
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    help_url: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self, source: str | None = None) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output. With the
        parsed text, the failing line is quoted with carets under the span.

        Example output:
            error[UNEXPECTED_CHARACTER]: Unexpected character '}' at position 8
              --> line 1, column 9
                |
              1 | {"key": }
                |         ^
              = help: Expected a value, a separator (',' or ':') or a closing bracket
              = note: see https://www.rfc-editor.org/rfc/rfc8259#section-2

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self, source)
