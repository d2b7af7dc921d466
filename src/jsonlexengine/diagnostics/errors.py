"""JSON exception hierarchy with structured diagnostics.

The parser itself never raises for malformed input; it returns ParseError
values. These exceptions serve callers that prefer raising (loads()) and
guard rails such as traversal depth limits.

Python 3.13+. Zero external dependencies.
"""

from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from jsonlexengine.syntax.errors import ParseError

__all__ = ["JsonDecodeError", "JsonError"]


class JsonError(Exception):
    """Base exception for all JSONLexEngine errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic, *, source: str | None = None) -> None:
        """Initialize JsonError.

        Args:
            message: Error message string OR Diagnostic object
            source: Parsed text quoted in the rendered Diagnostic
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error(source))
        else:
            self.diagnostic = None
            super().__init__(message)


class JsonDecodeError(JsonError):
    """Malformed JSON text passed to loads().

    Wraps the ParseError value produced by the parser so callers that catch
    the exception keep the exact, comparable error.

    Attributes:
        error: The ParseError returned by the parser
        position: 0-based character offset of the offending lexeme (or None)
        line: 1-based line of the offending lexeme (or None)
        column: 1-based column of the offending lexeme (or None)

    Example:
        >>> try:
        ...     loads("[1,]")
        ... except JsonDecodeError as e:
        ...     print(e.error)
        UnexpectedCharacter(character=']', position=3)
    """

    def __init__(
        self, error: "ParseError", diagnostic: Diagnostic, source: str | None = None
    ) -> None:
        """Initialize JsonDecodeError.

        Args:
            error: ParseError value from the parser
            diagnostic: Diagnostic rendered from the error against its source
            source: The text that failed to parse
        """
        super().__init__(diagnostic, source=source)
        self.error = error
        span = diagnostic.span
        self.position = span.start if span is not None else None
        self.line = span.line if span is not None else None
        self.column = span.column if span is not None else None
