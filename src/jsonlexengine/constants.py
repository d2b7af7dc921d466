"""Shared constants for JSONLexEngine.

This module provides centralized configuration constants used across
syntax and core packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for parsing and value traversal
- Input limits: DoS prevention via size constraints
- Numeric limits: Bounds on exact-integer construction
- Diagnostics: Presentation limits for error messages

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Input limits
    "MAX_SOURCE_SIZE",
    # Numeric limits
    "MAX_INTEGER_EXPONENT",
    "MAX_NUMBER_DIGITS",
    # Diagnostics
    "CONTEXT_SNIPPET_LENGTH",
    "EXCERPT_WIDTH",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================
#
# One limit is shared by the parser (array/object nesting) and by
# ValueVisitor traversal of value trees. A tree the parser accepted can
# therefore always be traversed.
#
# The parser recurses through parse_value -> parse_array/parse_object, two
# Python frames per nesting level. 256 levels stay well inside the default
# recursion limit of 1000 while exceeding any legitimate document shape.
#
# ============================================================================

MAX_DEPTH: int = 256

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in characters (10 MB of ASCII).
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# NUMERIC LIMITS
# ============================================================================

# Largest decimal exponent applied on the exact-integer path.
# 10**100_000 is a ~330k-bit integer and is computed in milliseconds;
# literals asking for more surface as InvalidNumber instead of exhausting
# memory.
MAX_INTEGER_EXPONENT: int = 100_000

# Largest count of digits (integer, fraction and exponent together) in one
# number literal. Decimal-to-binary conversion is superlinear in the digit
# count; longer literals surface as InvalidNumber.
MAX_NUMBER_DIGITS: int = 100_000

# ============================================================================
# DIAGNOSTICS
# ============================================================================

# Maximum characters of remaining input quoted in diagnostic messages.
# ParseError values keep the full remainder; only rendered text is cut.
CONTEXT_SNIPPET_LENGTH: int = 40

# Maximum characters of one source line quoted under a RUST diagnostic.
# Longer lines are cut around the error column and marked with "...".
EXCERPT_WIDTH: int = 80
