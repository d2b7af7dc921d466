"""Whitespace handling utilities for the JSON parser.

This module provides whitespace skipping and the leading byte-order-mark
accommodation of the UTF-16 Unicode profile.
"""

from jsonlexengine.enums import UnicodeProfile
from jsonlexengine.syntax.cursor import Cursor

__all__ = ["BYTE_ORDER_MARK", "skip_leading_bom", "skip_whitespace"]

BYTE_ORDER_MARK: str = "\ufeff"


def skip_whitespace(cursor: Cursor) -> Cursor:
    """Skip insignificant whitespace (space, tab, LF, CR per RFC 8259).

    Applied before every structural token: start of a value, and around
    commas, colons and closing brackets. Never applied inside string or
    number literals, where every character is significant.

    Args:
        cursor: Current position in source

    Returns:
        New cursor at first non-whitespace character (or EOF)

    Design:
        Immutable cursor ensures termination.
    """
    return cursor.skip_whitespace()


def skip_leading_bom(cursor: Cursor, profile: UnicodeProfile) -> Cursor:
    """Skip a byte-order mark at the start of the document, if the profile allows.

    Under UnicodeProfile.UTF16 a U+FEFF at offset 0 is ignorable when the
    first significant character after it opens an object. Before '[' (or
    anything else), and always under UnicodeProfile.STRICT, the mark is left
    in place and the value dispatcher reports it as an unexpected character.

    Args:
        cursor: Cursor at the start of the source
        profile: Active Unicode profile

    Returns:
        Cursor past the mark and following whitespace, or the input cursor

    Example:
        >>> skip_leading_bom(Cursor("\\ufeff{}", 0), UnicodeProfile.UTF16).pos
        1
        >>> skip_leading_bom(Cursor("\\ufeff[]", 0), UnicodeProfile.UTF16).pos
        0
    """
    if profile is not UnicodeProfile.UTF16 or cursor.pos != 0:
        return cursor
    if cursor.is_eof or cursor.current != BYTE_ORDER_MARK:
        return cursor
    after = skip_whitespace(cursor.advance())
    if not after.is_eof and after.current == "{":
        return after
    return cursor
