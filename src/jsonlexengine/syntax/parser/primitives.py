"""Primitive parsing utilities for the JSON parser.

This module provides the string/escape decoder and the keyword literals
(true, false, null).

Error Context:
    Every function returns either a result or a ParseError value carrying
    the offending lexeme, the remaining input and its position. Nothing
    here raises for malformed input.
"""

from jsonlexengine.enums import UnicodeProfile
from jsonlexengine.syntax.cursor import Cursor, ParseResult
from jsonlexengine.syntax.errors import (
    InvalidCharacter,
    InvalidEscapeCharacter,
    InvalidHex,
    ParseError,
    UnexpectedCharacter,
    UnexpectedEnd,
)
from jsonlexengine.syntax.values import JsonBool, JsonNull

__all__ = [
    "parse_escape_sequence",
    "parse_keyword",
    "parse_string",
]

# \uXXXX = exactly 4 hex digits (one UTF-16 code unit)
_UNICODE_ESCAPE_LEN: int = 4

# UTF-16 surrogate code point range (D800-DFFF).
# Not Unicode scalar values; each \uXXXX is decoded on its own, so pairs
# are never recombined into astral characters.
_SURROGATE_RANGE_START: int = 0xD800
_SURROGATE_RANGE_END: int = 0xDFFF

# Non-characters decoded as zero-width: they contribute no text.
# Typically artifacts of byte-order marks read with the wrong endianness.
_DROPPED_CODE_POINTS: frozenset[int] = frozenset({0xFFFE, 0xFFFF})

# Raw characters below U+0020 must be escaped inside strings.
_CONTROL_LIMIT: str = " "

_HEX_DIGITS: frozenset[str] = frozenset("0123456789abcdefABCDEF")

# Single-character escapes: \" \\ \/ \b \f \n \r \t
_SIMPLE_ESCAPES: dict[str, str] = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

_KEYWORDS: tuple[tuple[str, JsonBool | JsonNull], ...] = (
    ("true", JsonBool(True)),
    ("false", JsonBool(False)),
    ("null", JsonNull()),
)


def _is_surrogate(code_point: int) -> bool:
    return _SURROGATE_RANGE_START <= code_point <= _SURROGATE_RANGE_END


def parse_escape_sequence(cursor: Cursor) -> tuple[str, Cursor] | ParseError:
    """Parse escape sequence after backslash in string.

    Supported escape sequences:
        \\" \\\\ \\/ -> the character itself
        \\b \\f \\n \\r \\t -> backspace, form feed, LF, CR, tab
        \\uXXXX -> Unicode character (4 hex digits)

    \\uFFFE and \\uFFFF decode to the empty string. Surrogate escapes
    (\\uD800-\\uDFFF) fail with InvalidHex, paired or not.

    Args:
        cursor: Position AFTER the backslash

    Returns:
        (decoded_text, new_cursor) on success, ParseError otherwise
    """
    if cursor.is_eof:
        return UnexpectedEnd()

    escape_ch = cursor.current
    simple = _SIMPLE_ESCAPES.get(escape_ch)
    if simple is not None:
        return (simple, cursor.advance())

    if escape_ch != "u":
        return InvalidEscapeCharacter(escape_ch, cursor.rest, cursor.pos)

    cursor = cursor.advance()
    hex_digits = cursor.slice_ahead(_UNICODE_ESCAPE_LEN)
    if len(hex_digits) < _UNICODE_ESCAPE_LEN or not all(
        c in _HEX_DIGITS for c in hex_digits
    ):
        return InvalidHex(hex_digits, cursor.rest, cursor.pos)

    code_point = int(hex_digits, 16)
    if _is_surrogate(code_point):
        return InvalidHex(hex_digits, cursor.rest, cursor.pos)

    cursor = cursor.advance(_UNICODE_ESCAPE_LEN)
    if code_point in _DROPPED_CODE_POINTS:
        return ("", cursor)
    return (chr(code_point), cursor)


def parse_string(
    cursor: Cursor, profile: UnicodeProfile = UnicodeProfile.STRICT
) -> ParseResult[str] | ParseError:
    """Parse string literal: "text"

    Accumulates characters until an unescaped closing quote, expanding
    escapes via parse_escape_sequence(). Runs of plain characters are
    copied as slices rather than one character at a time.

    Examples:
        "hello" -> hello
        "tab\\there" -> tab<TAB>here
        "\\u00e4" -> U+00E4

    Args:
        cursor: Position of the opening quote
        profile: Under STRICT, raw surrogate code points are rejected

    Returns:
        ParseResult(decoded_text, cursor after closing quote), or
        InvalidCharacter for raw control characters (U+0000-U+001F),
        UnexpectedEnd if the input ends before the closing quote,
        or the escape decoder's error
    """
    source = cursor.source
    end = len(source)
    pos = cursor.pos + 1  # Skip opening "
    run_start = pos
    chunks: list[str] = []
    strict = profile is UnicodeProfile.STRICT

    while pos < end:
        ch = source[pos]

        if ch == '"':
            chunks.append(source[run_start:pos])
            return ParseResult("".join(chunks), Cursor(source, pos + 1))

        if ch == "\\":
            chunks.append(source[run_start:pos])
            escape_result = parse_escape_sequence(Cursor(source, pos + 1))
            if isinstance(escape_result, ParseError):
                return escape_result
            text, after = escape_result
            chunks.append(text)
            pos = run_start = after.pos
            continue

        if ch < _CONTROL_LIMIT or (strict and _is_surrogate(ord(ch))):
            return InvalidCharacter(ch, source[pos:], pos)

        pos += 1

    return UnexpectedEnd()


def parse_keyword(cursor: Cursor) -> ParseResult[JsonBool | JsonNull] | ParseError:
    """Parse one of the literal names: true, false, null.

    Args:
        cursor: Position of the first letter

    Returns:
        ParseResult(value, new_cursor), or UnexpectedCharacter at the
        first letter when the input does not spell a literal name
    """
    for name, value in _KEYWORDS:
        if cursor.starts_with(name):
            return ParseResult(value, cursor.advance(len(name)))
    if cursor.is_eof:
        return UnexpectedEnd()
    return UnexpectedCharacter(cursor.current, cursor.pos)
