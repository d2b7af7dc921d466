"""Enumerations for JSONLexEngine type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class UnicodeProfile(StrEnum):
    """Unicode model the parser emulates.

    StrEnum provides automatic string conversion: str(UnicodeProfile.STRICT) == "strict"
    """

    STRICT = "strict"
    """Unicode-scalar-value semantics: a leading byte-order mark is an
    unexpected character and raw surrogate code points are rejected."""

    UTF16 = "utf16"
    """UTF-16 code-unit semantics: a byte-order mark directly before an
    opening '{' is ignored; raw surrogate code points pass through."""


class ValueKind(StrEnum):
    """JSON type of a parsed value.

    StrEnum provides automatic string conversion: str(ValueKind.ARRAY) == "array"
    """

    STRING = "string"
    NUMBER = "number"
    BOOL = "bool"
    NULL = "null"
    ARRAY = "array"
    OBJECT = "object"


__all__ = [
    "UnicodeProfile",
    "ValueKind",
]
