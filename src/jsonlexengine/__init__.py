"""JSONLexEngine - strict JSON decoding into an immutable value tree.

A recursive-descent JSON (RFC 8259) parser that keeps integers exact,
retains the source text of every number, and reports failures as
comparable error values with precise positions.

Public API:
    parse - Parse JSON text to a value tree, returning (value, errors)
    loads - Parse JSON text to plain Python objects, raising on failure
    JsonParser - Parser with configurable profile and limits
    to_python - Convert a value tree to plain Python objects
    UnicodeProfile - Unicode model (STRICT or UTF16)

Exceptions:
    JsonError - Base exception class
    JsonDecodeError - Malformed JSON passed to loads()

Submodules:
    jsonlexengine.syntax.values - Value types (JsonString, JsonNumber, ...)
    jsonlexengine.syntax.errors - ParseError taxonomy
    jsonlexengine.syntax.visitor - ValueVisitor traversal
    jsonlexengine.diagnostics - Diagnostic codes, templates and formatter
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import JsonDecodeError, JsonError
from .enums import UnicodeProfile
from .syntax import JsonParser, parse, to_python
from .syntax.convert import PythonValue
from .syntax.errors import (
    InvalidCharacter,
    InvalidEscapeCharacter,
    InvalidHex,
    InvalidNumber,
    NestingTooDeep,
    ParseError,
    UnexpectedCharacter,
    UnexpectedEnd,
)
from .syntax.values import (
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("jsonlexengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

# JSON grammar conformance
__rfc__ = "RFC 8259"
__spec_url__ = "https://www.rfc-editor.org/rfc/rfc8259"

__all__ = [
    "InvalidCharacter",
    "InvalidEscapeCharacter",
    "InvalidHex",
    "InvalidNumber",
    "JsonArray",
    "JsonBool",
    "JsonDecodeError",
    "JsonError",
    "JsonNull",
    "JsonNumber",
    "JsonObject",
    "JsonParser",
    "JsonString",
    "JsonValue",
    "NestingTooDeep",
    "ParseError",
    "UnexpectedCharacter",
    "UnexpectedEnd",
    "UnicodeProfile",
    "__rfc__",
    "__spec_url__",
    "__version__",
    "loads",
    "parse",
    "to_python",
]


def loads(source: str, *, profile: UnicodeProfile = UnicodeProfile.STRICT) -> PythonValue:
    """Parse JSON text into plain Python objects.

    Numbers become int when the literal denotes an integer (``1e3`` -> 1000)
    and float otherwise.

    Args:
        source: JSON text
        profile: Unicode profile (default: STRICT)

    Returns:
        str, int, float, bool, None, list or dict

    Raises:
        JsonDecodeError: If the text is not valid JSON. ``error`` holds the
            ParseError value, ``line``/``column`` its location.
        ValueError: If source exceeds the default size limit

    Example:
        >>> loads('{"n": 12e3, "x": 0.5}')
        {'n': 12000, 'x': 0.5}
    """
    value, errors = parse(source, profile=profile)
    if value is None:
        error = errors[0]
        raise JsonDecodeError(error, error.to_diagnostic(source), source)
    return to_python(value)
