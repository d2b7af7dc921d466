"""Parse error taxonomy.

A closed set of frozen dataclasses, one per failure kind. Errors are values:
sub-parsers return them instead of raising, the first one aborts the parse,
and tests compare them with ``==``.

Fields:
    character: The offending character
    context: Remaining unconsumed input starting at the offending character,
        so textually identical characters followed by different content
        produce distinguishable errors
    position: Unicode code points consumed before the offending lexeme
        (0-based offset into the original source)

Python 3.13+. Zero external dependencies.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from jsonlexengine.diagnostics import Diagnostic, ErrorTemplate
from jsonlexengine.syntax.cursor import Cursor

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    "ParseError",
    # Structural
    "UnexpectedEnd",
    "UnexpectedCharacter",
    # Lexical
    "InvalidCharacter",
    "InvalidEscapeCharacter",
    "InvalidHex",
    "InvalidNumber",
    # Limits
    "NestingTooDeep",
]


@dataclass(frozen=True, slots=True)
class ParseError(ABC):
    """Base class of all parse failures. Only its variants are instantiated."""

    @abstractmethod
    def to_diagnostic(self, source: str) -> Diagnostic:
        """Render this error as a Diagnostic with line/column resolved against source.

        Args:
            source: The exact text that was parsed

        Returns:
            Diagnostic with code, message, span and hint
        """


# ============================================================================
# STRUCTURAL
# ============================================================================


@dataclass(frozen=True, slots=True)
class UnexpectedEnd(ParseError):
    """Input exhausted while a structure expected more tokens."""

    def to_diagnostic(self, source: str) -> Diagnostic:
        return ErrorTemplate.unexpected_end(Cursor(source, len(source)).span())


@dataclass(frozen=True, slots=True)
class UnexpectedCharacter(ParseError):
    """Structurally invalid character at top level or within array/object syntax."""

    character: str
    position: int

    def to_diagnostic(self, source: str) -> Diagnostic:
        span = Cursor(source, self.position).span(len(self.character))
        return ErrorTemplate.unexpected_character(self.character, span)


# ============================================================================
# LEXICAL
# ============================================================================


@dataclass(frozen=True, slots=True)
class InvalidCharacter(ParseError):
    """Raw disallowed character inside a string literal."""

    character: str
    context: str
    position: int

    def to_diagnostic(self, source: str) -> Diagnostic:
        span = Cursor(source, self.position).span(1)
        return ErrorTemplate.invalid_character(self.character, self.context, span)


@dataclass(frozen=True, slots=True)
class InvalidEscapeCharacter(ParseError):
    """Unrecognized character following a backslash."""

    character: str
    context: str
    position: int

    def to_diagnostic(self, source: str) -> Diagnostic:
        span = Cursor(source, self.position).span(1)
        return ErrorTemplate.invalid_escape_character(self.character, self.context, span)


@dataclass(frozen=True, slots=True)
class InvalidHex(ParseError):
    """\\uXXXX escape that does not decode to a usable Unicode scalar value.

    ``hex_text`` holds the (up to four) characters following ``\\u``.
    """

    hex_text: str
    context: str
    position: int

    def to_diagnostic(self, source: str) -> Diagnostic:
        span = Cursor(source, self.position).span(len(self.hex_text))
        return ErrorTemplate.invalid_hex(self.hex_text, self.context, span)


@dataclass(frozen=True, slots=True)
class InvalidNumber(ParseError):
    """Numeric literal rejected by the grammar or not representable.

    For grammar violations ``literal`` is the input from the start of the
    literal (identical to ``context``). For well-formed literals whose value
    cannot be represented, ``literal`` is the literal text alone.
    """

    literal: str
    context: str
    position: int

    def to_diagnostic(self, source: str) -> Diagnostic:
        length = 1 if self.literal == self.context else len(self.literal)
        span = Cursor(source, self.position).span(length)
        return ErrorTemplate.invalid_number(self.literal, self.context, span)


# ============================================================================
# LIMITS
# ============================================================================


@dataclass(frozen=True, slots=True)
class NestingTooDeep(ParseError):
    """Array/object opened beyond the parser's nesting limit."""

    position: int
    max_depth: int

    def to_diagnostic(self, source: str) -> Diagnostic:
        span = Cursor(source, self.position).span(1)
        return ErrorTemplate.nesting_depth_exceeded(self.max_depth, span)
