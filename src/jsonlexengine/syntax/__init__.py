"""JSON syntax package.

Provides the parser, value tree definitions, error taxonomy, visitor
pattern and conversion to plain Python objects.

Python 3.13+.
"""

from jsonlexengine.enums import UnicodeProfile

from .convert import PythonConverter, to_python
from .cursor import Cursor, ParseResult
from .errors import (
    InvalidCharacter,
    InvalidEscapeCharacter,
    InvalidHex,
    InvalidNumber,
    NestingTooDeep,
    ParseError,
    UnexpectedCharacter,
    UnexpectedEnd,
)
from .parser import JsonParser
from .values import (
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
)
from .visitor import ValueVisitor

__all__ = [
    "Cursor",
    "InvalidCharacter",
    "InvalidEscapeCharacter",
    "InvalidHex",
    "InvalidNumber",
    "JsonArray",
    "JsonBool",
    "JsonNull",
    "JsonNumber",
    "JsonObject",
    "JsonParser",
    "JsonString",
    "JsonValue",
    "NestingTooDeep",
    "ParseError",
    "ParseResult",
    "PythonConverter",
    "UnexpectedCharacter",
    "UnexpectedEnd",
    "ValueVisitor",
    "parse",
    "to_python",
]


def parse(
    source: str, *, profile: UnicodeProfile = UnicodeProfile.STRICT
) -> tuple[JsonValue | None, tuple[ParseError, ...]]:
    """Parse JSON text into a value tree.

    Convenience function for JsonParser.parse() with default limits.

    Args:
        source: JSON text
        profile: Unicode profile (default: STRICT)

    Returns:
        ``(value, ())`` on success, ``(None, (error,))`` on failure

    Example:
        >>> from jsonlexengine.syntax import parse
        >>> value, errors = parse("[999, 111]")
        >>> [item.exact for item in value.items]
        [999, 111]
    """
    parser = JsonParser(profile=profile)
    return parser.parse(source)
