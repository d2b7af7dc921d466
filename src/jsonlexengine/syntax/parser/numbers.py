"""Number literal decoding for the JSON parser.

Grammar (RFC 8259 section 6):
    number = [ "-" ] int [ frac ] [ exp ]
    int    = "0" / ( digit1-9 *DIGIT )
    frac   = "." 1*DIGIT
    exp    = ( "e" / "E" ) [ "-" / "+" ] 1*DIGIT

The literal is decomposed into four textual parts (sign, integer digits,
fraction digits, signed exponent digits) and then decoded under an
exactness policy: whenever the literal denotes a mathematical integer it
becomes a Python int, computed without passing through float.

    no fraction, no exponent        -> exact
    no fraction, exponent -E        -> exact if the integer digits end in
                                       at least E zeros, else float
    no fraction, exponent +E        -> exact: digits * 10**E
    fraction, no exponent           -> float
    fraction, exponent -E           -> float
    fraction, exponent +E, E >= f   -> exact: int(digits + fraction) * 10**(E - f)
    fraction, exponent +E, E < f    -> float

(f = number of fraction digits.) Floats come from the decimal literal
itself, so they are correctly rounded.

Python 3.13+. Zero external dependencies.
"""

import math
from dataclasses import dataclass

from jsonlexengine.constants import MAX_INTEGER_EXPONENT, MAX_NUMBER_DIGITS
from jsonlexengine.syntax.cursor import Cursor, ParseResult
from jsonlexengine.syntax.errors import InvalidNumber
from jsonlexengine.syntax.values import JsonNumber

__all__ = ["NumberParts", "decode_number", "parse_number", "scan_number"]

# ASCII digits only - str.isdigit() accepts Unicode digits such as U+00B2.
_ASCII_DIGITS: frozenset[str] = frozenset("0123456789")

# int(str) refuses strings beyond sys.get_int_max_str_digits() (4300 by
# default). Longer digit runs are split in halves down to this size.
_INT_CHUNK_DIGITS: int = 1000


@dataclass(frozen=True, slots=True)
class NumberParts:
    """Textual decomposition of a numeric literal.

    Attributes:
        negative: Literal starts with '-'
        integer: Integer digits (never empty)
        fraction: Fraction digits, or None without a '.'
        exponent_marker: 'e' or 'E' as written, or None without an exponent
        exponent_sign: '+', '-' or '' as written
        exponent: Exponent digits, or None without an exponent
    """

    negative: bool
    integer: str
    fraction: str | None = None
    exponent_marker: str | None = None
    exponent_sign: str = ""
    exponent: str | None = None

    @property
    def literal(self) -> str:
        """Re-join the parts into the literal text."""
        parts = ["-" if self.negative else "", self.integer]
        if self.fraction is not None:
            parts.append("." + self.fraction)
        if self.exponent is not None:
            parts.append(f"{self.exponent_marker}{self.exponent_sign}{self.exponent}")
        return "".join(parts)

    @property
    def digit_count(self) -> int:
        """Digits in the literal across integer, fraction and exponent."""
        return (
            len(self.integer)
            + len(self.fraction or "")
            + len(self.exponent or "")
        )

    @property
    def exponent_value(self) -> int:
        """Signed exponent (0 without an exponent)."""
        if self.exponent is None:
            return 0
        value = _digits_to_int(self.exponent)
        return -value if self.exponent_sign == "-" else value


def _scan_digits(source: str, pos: int) -> int:
    """Return the end of the ASCII digit run starting at pos."""
    end = len(source)
    while pos < end and source[pos] in _ASCII_DIGITS:
        pos += 1
    return pos


def _digits_to_int(digits: str) -> int:
    """Convert a digit string of any length to int.

    Splits the run in halves and recombines as ``high * 10**len(low) + low``,
    so the cost follows big-int multiplication instead of growing with the
    square of the length.

    Example:
        >>> _digits_to_int("0042")
        42
        >>> len(str(_digits_to_int("9" * 5000)))  # doctest: +SKIP
        5000
    """
    if len(digits) <= _INT_CHUNK_DIGITS:
        return int(digits)
    middle = len(digits) // 2
    low = digits[middle:]
    return _digits_to_int(digits[:middle]) * 10 ** len(low) + _digits_to_int(low)


def _trailing_zeros(digits: str) -> int:
    return len(digits) - len(digits.rstrip("0"))


def scan_number(cursor: Cursor) -> tuple[NumberParts, Cursor] | None:
    """Split a numeric literal into its textual parts.

    Scanning stops at the first character that cannot continue the
    literal; the caller decides whether what follows is legal.

    Args:
        cursor: Position of '-' or the first digit

    Returns:
        (parts, cursor after the literal), or None if the grammar is
        violated (bare '-', leading zero, empty fraction or exponent)
    """
    source = cursor.source
    end = len(source)
    pos = cursor.pos

    negative = pos < end and source[pos] == "-"
    if negative:
        pos += 1

    int_end = _scan_digits(source, pos)
    integer = source[pos:int_end]
    if not integer:
        return None
    # Leading zeros: only "0" itself (or "-0") may start with 0
    if len(integer) > 1 and integer[0] == "0":
        return None
    pos = int_end

    fraction: str | None = None
    if pos < end and source[pos] == ".":
        frac_end = _scan_digits(source, pos + 1)
        if frac_end == pos + 1:
            return None
        fraction = source[pos + 1 : frac_end]
        pos = frac_end

    exponent_marker: str | None = None
    exponent_sign = ""
    exponent: str | None = None
    if pos < end and source[pos] in "eE":
        exponent_marker = source[pos]
        pos += 1
        if pos < end and source[pos] in "+-":
            exponent_sign = source[pos]
            pos += 1
        exp_end = _scan_digits(source, pos)
        if exp_end == pos:
            return None
        exponent = source[pos:exp_end]
        pos = exp_end

    parts = NumberParts(
        negative=negative,
        integer=integer,
        fraction=fraction,
        exponent_marker=exponent_marker,
        exponent_sign=exponent_sign,
        exponent=exponent,
    )
    return (parts, Cursor(source, pos))


def _exact(
    negative: bool, mantissa_digits: str, scale: int, max_exponent: int
) -> int | None:
    """Compute +/- mantissa * 10**scale over the integers.

    Python's int ** is exponentiation by squaring, so no float rounding is
    involved. A zero mantissa never needs the power.
    """
    mantissa = _digits_to_int(mantissa_digits)
    if mantissa == 0:
        return 0
    if scale > max_exponent:
        return None
    value = mantissa * 10**scale
    return -value if negative else value


def _approximate(literal: str) -> float | None:
    value = float(literal)
    if math.isinf(value):
        return None
    return value


def decode_number(
    parts: NumberParts,
    max_exponent: int = MAX_INTEGER_EXPONENT,
    max_digits: int = MAX_NUMBER_DIGITS,
) -> JsonNumber | None:
    """Choose the exact-integer or float representation for a literal.

    Args:
        parts: Scanned literal
        max_exponent: Largest power of ten applied on the exact path
        max_digits: Largest digit count converted at all

    Returns:
        JsonNumber carrying the literal text, or None if the value cannot
        be represented (more than max_digits digits, exact path beyond
        max_exponent, float overflow)

    Example:
        >>> decode_number(NumberParts(False, "12", exponent_marker="e", exponent="3"))
        JsonNumber(exact=12000, approximate=None, literal='12e3')
        >>> decode_number(NumberParts(False, "1200", exponent_marker="e",
        ...     exponent_sign="-", exponent="2")).exact
        12
        >>> decode_number(NumberParts(False, "1", fraction="5")).approximate
        1.5
    """
    if parts.digit_count > max_digits:
        return None

    literal = parts.literal
    exponent = parts.exponent_value
    exact: int | None

    if parts.fraction is None:
        if exponent >= 0:
            exact = _exact(parts.negative, parts.integer, exponent, max_exponent)
        elif -exponent <= _trailing_zeros(parts.integer):
            # The exponent consumes trailing zeros of the integer digits
            kept = parts.integer[: len(parts.integer) + exponent] or "0"
            exact = _exact(parts.negative, kept, 0, max_exponent)
        else:
            approximate = _approximate(literal)
            if approximate is None:
                return None
            return JsonNumber(approximate=approximate, literal=literal)
        if exact is None:
            return None
        return JsonNumber(exact=exact, literal=literal)

    fraction_len = len(parts.fraction)
    if parts.exponent is not None and exponent >= fraction_len:
        exact = _exact(
            parts.negative,
            parts.integer + parts.fraction,
            exponent - fraction_len,
            max_exponent,
        )
        if exact is None:
            return None
        return JsonNumber(exact=exact, literal=literal)

    approximate = _approximate(literal)
    if approximate is None:
        return None
    return JsonNumber(approximate=approximate, literal=literal)


def parse_number(
    cursor: Cursor,
    max_exponent: int = MAX_INTEGER_EXPONENT,
    max_digits: int = MAX_NUMBER_DIGITS,
) -> ParseResult[JsonNumber] | InvalidNumber:
    """Parse number literal: -?digits(.digits)?([eE][+-]?digits)?

    Examples:
        42 -> JsonNumber(exact=42)
        1e3 -> JsonNumber(exact=1000)
        -0.25 -> JsonNumber(approximate=-0.25)

    Args:
        cursor: Position of '-' or the first digit
        max_exponent: Largest power of ten applied on the exact path
        max_digits: Largest digit count in one literal

    Returns:
        ParseResult(JsonNumber, new_cursor) on success. On a grammar
        violation, InvalidNumber whose literal and context are both the
        input from the literal's start; on an unrepresentable value,
        InvalidNumber whose literal is the literal text.
    """
    scanned = scan_number(cursor)
    if scanned is None:
        return InvalidNumber(cursor.rest, cursor.rest, cursor.pos)

    parts, after = scanned
    number = decode_number(parts, max_exponent, max_digits)
    if number is None:
        return InvalidNumber(parts.literal, cursor.rest, cursor.pos)
    return ParseResult(number, after)
