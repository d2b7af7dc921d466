"""Core JSON parser implementation.

This module provides the JsonParser class that orchestrates parsing of
JSON text into the value tree defined in :mod:`jsonlexengine.syntax.values`.

Architecture:
    The parser uses an immutable cursor pattern (:class:`~jsonlexengine.syntax.cursor.Cursor`)
    to traverse source text. Each sub-parser (in :mod:`~jsonlexengine.syntax.parser.rules`,
    :mod:`~jsonlexengine.syntax.parser.primitives`, etc.) returns either a
    :class:`~jsonlexengine.syntax.cursor.ParseResult` containing the parsed value
    and updated cursor position, or a :class:`~jsonlexengine.syntax.errors.ParseError`.

Top-level contract:
    whitespace* value whitespace* EOF

    The first error aborts the parse; there is no partial tree.

Security:
    Includes configurable input size limit to prevent DoS attacks via
    unbounded memory allocation, a nesting limit that replaces
    RecursionError with NestingTooDeep, an exponent limit on the
    exact-integer path and a digit limit per number literal.

See Also:
    - :mod:`jsonlexengine.syntax.values` - All value type definitions
    - :mod:`jsonlexengine.syntax.cursor` - Cursor and ParseResult types
    - :mod:`jsonlexengine.syntax.parser.rules` - Grammar rules (values, arrays, objects)
"""

import logging

from jsonlexengine.constants import (
    MAX_DEPTH,
    MAX_INTEGER_EXPONENT,
    MAX_NUMBER_DIGITS,
    MAX_SOURCE_SIZE,
)
from jsonlexengine.core.depth_guard import depth_clamp
from jsonlexengine.enums import UnicodeProfile
from jsonlexengine.syntax.cursor import Cursor
from jsonlexengine.syntax.errors import ParseError, UnexpectedCharacter
from jsonlexengine.syntax.parser.rules import ParseContext, parse_value
from jsonlexengine.syntax.parser.whitespace import skip_leading_bom, skip_whitespace
from jsonlexengine.syntax.values import JsonValue

__all__ = ["JsonParser"]

logger = logging.getLogger(__name__)

# parse_value plus parse_array/parse_object per nesting level
_FRAMES_PER_LEVEL: int = 2


class JsonParser:
    """Strict JSON parser using immutable cursor pattern.

    Design:
    - Immutable cursor prevents infinite loops (no manual guards needed)
    - Errors are values: parse() never raises for malformed input
    - Holds only immutable configuration; safe to share across threads

    Security:
    - Configurable max_source_size prevents DoS via large inputs
    - Default limit: 10 MB
    - Configurable max_nesting_depth prevents stack exhaustion via [[[[...]]]]
    - Configurable max_integer_exponent bounds literals such as 1e999999999
    - Configurable max_number_digits bounds the cost of converting one literal

    Architecture:
    - Every parser function takes Cursor (immutable) as input
    - Every parser returns ParseResult[T] | ParseError
    - No mutation - compiler enforces progress

    Attributes:
        profile: Unicode profile for BOM and raw surrogate handling
        max_source_size: Maximum allowed source size in characters (default: 10 MB)
        max_nesting_depth: Maximum allowed array/object nesting depth (default: 256)
        max_integer_exponent: Largest power of ten on the exact-integer path
        max_number_digits: Largest digit count in one number literal
    """

    __slots__ = (
        "_max_integer_exponent",
        "_max_nesting_depth",
        "_max_number_digits",
        "_max_source_size",
        "_profile",
    )

    def __init__(
        self,
        *,
        profile: UnicodeProfile = UnicodeProfile.STRICT,
        max_source_size: int | None = None,
        max_nesting_depth: int | None = None,
        max_integer_exponent: int | None = None,
        max_number_digits: int | None = None,
    ) -> None:
        """Initialize parser with optional limits.

        Args:
            profile: Unicode profile (default: STRICT).
            max_source_size: Maximum source size in characters (default: 10 MB).
                            Set to 0 to disable size limit (not recommended).
            max_nesting_depth: Maximum array/object nesting depth (default: 256).
                              Clamped against the interpreter recursion limit.
            max_integer_exponent: Largest exponent applied on the exact-integer
                                 path (default: 100_000).
            max_number_digits: Largest digit count in one number literal
                              (default: 100_000).
        """
        self._profile = profile
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )
        self._max_nesting_depth = depth_clamp(
            max_nesting_depth if max_nesting_depth is not None else MAX_DEPTH,
            frames_per_level=_FRAMES_PER_LEVEL,
        )
        self._max_integer_exponent = (
            max_integer_exponent
            if max_integer_exponent is not None
            else MAX_INTEGER_EXPONENT
        )
        self._max_number_digits = (
            max_number_digits if max_number_digits is not None else MAX_NUMBER_DIGITS
        )

    @property
    def profile(self) -> UnicodeProfile:
        """Active Unicode profile."""
        return self._profile

    @property
    def max_source_size(self) -> int:
        """Maximum allowed source size in characters."""
        return self._max_source_size

    @property
    def max_nesting_depth(self) -> int:
        """Maximum allowed array/object nesting depth."""
        return self._max_nesting_depth

    @property
    def max_integer_exponent(self) -> int:
        """Largest power of ten applied on the exact-integer path."""
        return self._max_integer_exponent

    @property
    def max_number_digits(self) -> int:
        """Largest digit count accepted in one number literal."""
        return self._max_number_digits

    def parse(self, source: str) -> tuple[JsonValue | None, tuple[ParseError, ...]]:
        """Parse a complete JSON text.

        Args:
            source: JSON text (already decoded to str)

        Returns:
            ``(value, ())`` on success, ``(None, (error,))`` on failure.

        Raises:
            ValueError: If source exceeds max_source_size (DoS prevention)

        Example:
            >>> parser = JsonParser()
            >>> value, errors = parser.parse('{"a": [1, 2.5]}')
            >>> value["a"][1].approximate
            2.5
            >>> parser.parse("[1,]")
            (None, (UnexpectedCharacter(character=']', position=3),))
        """
        # Validate input size (DoS prevention)
        if self._max_source_size > 0 and len(source) > self._max_source_size:
            logger.warning(
                "Rejected JSON source of %d characters (limit %d)",
                len(source),
                self._max_source_size,
            )
            msg = (
                f"Source size ({len(source):,} characters) exceeds maximum "
                f"({self._max_source_size:,} characters). "
                "Configure max_source_size in JsonParser constructor to increase limit."
            )
            raise ValueError(msg)

        context = ParseContext(
            max_nesting_depth=self._max_nesting_depth,
            profile=self._profile,
            max_integer_exponent=self._max_integer_exponent,
            max_number_digits=self._max_number_digits,
        )

        cursor = skip_leading_bom(Cursor(source, 0), self._profile)
        result = parse_value(cursor, context)

        if isinstance(result, ParseError):
            return self._fail(result)

        # Anything but whitespace after the value is trailing garbage
        cursor = skip_whitespace(result.cursor)
        if not cursor.is_eof:
            return self._fail(UnexpectedCharacter(cursor.current, cursor.pos))

        return (result.value, ())

    @staticmethod
    def _fail(error: ParseError) -> tuple[None, tuple[ParseError, ...]]:
        logger.debug("JSON parse failed: %r", error)
        return (None, (error,))
