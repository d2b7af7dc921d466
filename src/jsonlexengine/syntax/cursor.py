"""Immutable cursor infrastructure for type-safe parsing.

Implements the immutable cursor pattern for zero-`None` parsing.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - No `str | None` for the current character - type safety by design
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Line:column computed on-demand (O(n) only for errors)

Positions:
    Cursor.pos counts Unicode code points consumed from the start of the
    source. ParseError positions are exactly this value at the start of the
    offending lexeme.

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
"""

from dataclasses import dataclass

from jsonlexengine.diagnostics import ErrorTemplate, SourceSpan

__all__ = ["JSON_WHITESPACE", "Cursor", "ParseResult"]

# Insignificant whitespace per RFC 8259: space, tab, line feed, carriage return.
# Byte-order marks and no-break spaces are NOT whitespace.
JSON_WHITESPACE: frozenset[str] = frozenset(" \t\n\r")


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Key Design Decisions:
        1. Frozen dataclass - Immutability enforced by Python
        2. Slots - Memory efficiency (important for large documents)
        3. Simple position - Just an integer offset
        4. EOF is a property - Not a return value
        5. current raises - No None handling needed!

    Example:
        >>> cursor = Cursor("[1]", 0)
        >>> cursor.current
        '['
        >>> new_cursor = cursor.advance()
        >>> new_cursor.current
        '1'
        >>> cursor.current  # Original unchanged (immutability)
        '['
        >>> Cursor("[]", 2).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input.

        Returns:
            True if position >= source length
        """
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Returns:
            Current character at position

        Raises:
            EOFError: If at end of input

        Design Note:
            Callers test is_eof first; mypy then knows current is ALWAYS str.
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.unexpected_end(self.span())
            raise EOFError(diagnostic.message)
        return self.source[self.pos]

    @property
    def rest(self) -> str:
        """Remaining unconsumed input, starting at the current character.

        This is the context snippet carried by lexical ParseError variants.
        """
        return self.source[self.pos :]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions.

        Args:
            count: Number of positions to advance (default: 1)

        Returns:
            New Cursor instance at new position (original unchanged)

        Example:
            >>> cursor = Cursor("true", 0)
            >>> cursor.advance(4).is_eof
            True
            >>> cursor.pos  # Original unchanged
            0
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_ahead(self, n: int) -> str:
        """Get next n characters without advancing cursor.

        Args:
            n: Number of characters to get

        Returns:
            String of up to n characters starting at current position.
            May return fewer characters if near EOF.

        Example:
            >>> cursor = Cursor("\\\\u12", 2)
            >>> cursor.slice_ahead(4)
            '12'
        """
        return self.source[self.pos : self.pos + n]

    def starts_with(self, text: str) -> bool:
        """Check whether the remaining input begins with text."""
        return self.source.startswith(text, self.pos)

    def skip_whitespace(self) -> "Cursor":
        """Skip JSON whitespace (space, tab, line feed, carriage return).

        Returns:
            New cursor advanced past all consecutive whitespace characters

        Example:
            >>> cursor = Cursor(" \\t\\r\\n [", 0)
            >>> cursor.skip_whitespace().current
            '['
            >>> Cursor("\\ufeff{}", 0).skip_whitespace().pos  # BOM is not whitespace
            0
        """
        source = self.source
        pos = self.pos
        end = len(source)
        while pos < end and source[pos] in JSON_WHITESPACE:
            pos += 1
        if pos == self.pos:
            return self
        return Cursor(source, pos)

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Performance:
            O(n) where n = current position
            Only call for error reporting, not during normal parsing!

        Example:
            >>> source = '{\\n  "a": x\\n}'
            >>> Cursor(source, 0).compute_line_col()
            (1, 1)
            >>> Cursor(source, 9).compute_line_col()
            (2, 8)
        """
        line = self.source.count("\n", 0, self.pos) + 1
        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1
        return (line, col)

    def span(self, length: int = 0) -> SourceSpan:
        """Build a SourceSpan starting at the current position.

        Args:
            length: Number of characters covered (clamped to the source end)

        Returns:
            SourceSpan with 1-based line and column
        """
        line, col = self.compute_line_col()
        end = min(self.pos + length, len(self.source))
        start = min(self.pos, end)
        return SourceSpan(start=start, end=end, line=line, column=col)


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parser result containing parsed value and new cursor position.

    Type Parameters:
        T: The type of the parsed value

    Pattern:
        Every sub-parser has signature:
            def parse_foo(cursor: Cursor, ...) -> ParseResult[Foo] | ParseError:
                ...
                return ParseResult(parsed_value, new_cursor)

    Example:
        >>> cursor = Cursor("null", 0)
        >>> result = ParseResult(None, cursor.advance(4))
        >>> result.cursor.is_eof
        True
    """

    value: T
    cursor: Cursor
