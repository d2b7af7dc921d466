"""Grammar rules for the JSON parser.

This module contains the value dispatcher and the array/object state
machines. They are mutually recursive: containers parse their elements
through parse_value(), which dispatches back into the containers.

Recursion depth is bounded explicitly by ParseContext; exceeding the
limit yields a NestingTooDeep error instead of a RecursionError.
"""

from dataclasses import dataclass
from enum import Enum, auto

from jsonlexengine.constants import MAX_DEPTH, MAX_INTEGER_EXPONENT, MAX_NUMBER_DIGITS
from jsonlexengine.enums import UnicodeProfile
from jsonlexengine.syntax.cursor import Cursor, ParseResult
from jsonlexengine.syntax.errors import (
    NestingTooDeep,
    ParseError,
    UnexpectedCharacter,
    UnexpectedEnd,
)
from jsonlexengine.syntax.parser.numbers import parse_number
from jsonlexengine.syntax.parser.primitives import parse_keyword, parse_string
from jsonlexengine.syntax.parser.whitespace import skip_whitespace
from jsonlexengine.syntax.values import (
    JsonArray,
    JsonObject,
    JsonString,
    JsonValue,
)

__all__ = [
    "ParseContext",
    "parse_array",
    "parse_object",
    "parse_value",
]

_NUMBER_START: frozenset[str] = frozenset("-0123456789")


@dataclass(frozen=True, slots=True)
class ParseContext:
    """Explicit context for parsing operations.

    Replaces global state with explicit parameter passing for:
    - Thread safety without global state
    - Easier testing (no state reset needed)
    - Clear dependency flow

    Attributes:
        max_nesting_depth: Maximum allowed array/object nesting depth
        current_depth: Current nesting depth (0 = top level)
        profile: Unicode model applied to string literals
        max_integer_exponent: Largest power of ten on the exact-integer path
        max_number_digits: Largest digit count in one number literal
    """

    max_nesting_depth: int = MAX_DEPTH
    current_depth: int = 0
    profile: UnicodeProfile = UnicodeProfile.STRICT
    max_integer_exponent: int = MAX_INTEGER_EXPONENT
    max_number_digits: int = MAX_NUMBER_DIGITS

    def is_depth_exceeded(self) -> bool:
        """Check if maximum nesting depth has been reached."""
        return self.current_depth >= self.max_nesting_depth

    def enter_nested(self) -> "ParseContext":
        """Create new context with incremented depth for entering a container."""
        return ParseContext(
            max_nesting_depth=self.max_nesting_depth,
            current_depth=self.current_depth + 1,
            profile=self.profile,
            max_integer_exponent=self.max_integer_exponent,
            max_number_digits=self.max_number_digits,
        )


class _ArrayState(Enum):
    START = auto()  # expect value or ']'
    AFTER_COMMA = auto()  # expect value
    AFTER_VALUE = auto()  # expect ',' or ']'


class _ObjectState(Enum):
    START = auto()  # expect key or '}'
    AFTER_COMMA = auto()  # expect key
    HAVE_KEY = auto()  # expect ':'
    AFTER_VALUE = auto()  # expect ',' or '}'


# =============================================================================
# Value dispatch
# =============================================================================


def parse_value(cursor: Cursor, context: ParseContext) -> ParseResult[JsonValue] | ParseError:
    """Parse any JSON value, dispatching on its first significant character.

    Dispatch:
        '[' -> parse_array
        '{' -> parse_object
        '"' -> parse_string
        't', 'f', 'n' -> parse_keyword
        '-', '0'-'9' -> parse_number

    Args:
        cursor: Current position in source (leading whitespace allowed)
        context: Parse context (depth, profile, numeric limits)

    Returns:
        ParseResult(value, cursor after the value) on success,
        UnexpectedEnd on exhausted input, UnexpectedCharacter for any
        character that cannot start a value, or the sub-parser's error
    """
    cursor = skip_whitespace(cursor)
    if cursor.is_eof:
        return UnexpectedEnd()

    match cursor.current:
        case "[":
            return parse_array(cursor, context)
        case "{":
            return parse_object(cursor, context)
        case '"':
            string_result = parse_string(cursor, context.profile)
            if isinstance(string_result, ParseError):
                return string_result
            return ParseResult(JsonString(string_result.value), string_result.cursor)
        case "t" | "f" | "n":
            return parse_keyword(cursor)
        case ch if ch in _NUMBER_START:
            return parse_number(
                cursor, context.max_integer_exponent, context.max_number_digits
            )
        case ch:
            return UnexpectedCharacter(ch, cursor.pos)


# =============================================================================
# Containers
# =============================================================================


def parse_array(cursor: Cursor, context: ParseContext) -> ParseResult[JsonArray] | ParseError:
    """Parse array: '[' (value (',' value)*)? ']'

    State machine:
        START        ']' closes, value -> AFTER_VALUE, ',' is an error
        AFTER_COMMA  value -> AFTER_VALUE, ']' and ',' are errors
        AFTER_VALUE  ',' -> AFTER_COMMA, ']' closes, a value is an error

    Args:
        cursor: Position of the opening '['
        context: Parse context; nested values are parsed one level deeper

    Returns:
        ParseResult(JsonArray, cursor after ']') on success,
        NestingTooDeep at '[' if the depth limit is reached,
        UnexpectedCharacter for tokens in the wrong state,
        UnexpectedEnd if the input ends before ']'
    """
    if context.is_depth_exceeded():
        return NestingTooDeep(cursor.pos, context.max_nesting_depth)

    nested = context.enter_nested()
    cursor = cursor.advance()  # Skip [
    items: list[JsonValue] = []
    state = _ArrayState.START

    while True:
        cursor = skip_whitespace(cursor)
        if cursor.is_eof:
            return UnexpectedEnd()

        ch = cursor.current

        if ch == "]":
            if state is _ArrayState.AFTER_COMMA:
                return UnexpectedCharacter(ch, cursor.pos)
            return ParseResult(JsonArray(tuple(items)), cursor.advance())

        if ch == ",":
            if state is not _ArrayState.AFTER_VALUE:
                return UnexpectedCharacter(ch, cursor.pos)
            state = _ArrayState.AFTER_COMMA
            cursor = cursor.advance()
            continue

        if state is _ArrayState.AFTER_VALUE:
            return UnexpectedCharacter(ch, cursor.pos)

        result = parse_value(cursor, nested)
        if isinstance(result, ParseError):
            return result
        items.append(result.value)
        cursor = result.cursor
        state = _ArrayState.AFTER_VALUE


def parse_object(cursor: Cursor, context: ParseContext) -> ParseResult[JsonObject] | ParseError:  # noqa: PLR0911
    """Parse object: '{' (string ':' value (',' string ':' value)*)? '}'

    State machine:
        START        '}' closes, '"' key -> HAVE_KEY
        AFTER_COMMA  '"' key -> HAVE_KEY
        HAVE_KEY     ':' value -> AFTER_VALUE
        AFTER_VALUE  ',' -> AFTER_COMMA, '}' closes

    Any other token, or a token in the wrong state, is an
    UnexpectedCharacter. Duplicate keys overwrite: the last value wins
    and the key keeps the slot of its first occurrence.

    Note: PLR0911 (too many returns) is acceptable for parser grammar methods.
    Each return is a distinct grammar outcome.

    Args:
        cursor: Position of the opening '{'
        context: Parse context; member values are parsed one level deeper

    Returns:
        ParseResult(JsonObject, cursor after '}') on success, or a ParseError
    """
    if context.is_depth_exceeded():
        return NestingTooDeep(cursor.pos, context.max_nesting_depth)

    nested = context.enter_nested()
    cursor = cursor.advance()  # Skip {
    members: dict[str, JsonValue] = {}
    state = _ObjectState.START
    key = ""

    while True:
        cursor = skip_whitespace(cursor)
        if cursor.is_eof:
            return UnexpectedEnd()

        ch = cursor.current

        match ch, state:
            case "}", _ObjectState.START | _ObjectState.AFTER_VALUE:
                return ParseResult(JsonObject(members), cursor.advance())

            case '"', _ObjectState.START | _ObjectState.AFTER_COMMA:
                key_result = parse_string(cursor, context.profile)
                if isinstance(key_result, ParseError):
                    return key_result
                key = key_result.value
                cursor = key_result.cursor
                state = _ObjectState.HAVE_KEY

            case ":", _ObjectState.HAVE_KEY:
                value_result = parse_value(cursor.advance(), nested)
                if isinstance(value_result, ParseError):
                    return value_result
                members[key] = value_result.value
                cursor = value_result.cursor
                state = _ObjectState.AFTER_VALUE

            case ",", _ObjectState.AFTER_VALUE:
                cursor = cursor.advance()
                state = _ObjectState.AFTER_COMMA

            case _:
                return UnexpectedCharacter(ch, cursor.pos)
