"""Tests for syntax/parser/numbers.py.

Covers the number grammar, the exactness policy and the limits on
exact-integer construction.

Python 3.13+.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from hypothesis import event, example, given, settings
from hypothesis import strategies as st

from jsonlexengine.constants import MAX_INTEGER_EXPONENT, MAX_NUMBER_DIGITS
from jsonlexengine.syntax.cursor import Cursor, ParseResult
from jsonlexengine.syntax.errors import InvalidNumber
from jsonlexengine.syntax.parser.numbers import (
    NumberParts,
    decode_number,
    parse_number,
    scan_number,
)
from jsonlexengine.syntax.values import JsonNumber
from tests.strategies import malformed_number_literals, number_literals


def _number(source: str) -> JsonNumber:
    result = parse_number(Cursor(source, 0))
    assert isinstance(result, ParseResult), result
    return result.value


# ============================================================================
# SCANNING
# ============================================================================


class TestScanNumber:
    """Test scan_number() decomposition."""

    def test_all_parts(self) -> None:
        """Sign, integer, fraction and exponent are split as written."""
        scanned = scan_number(Cursor("-12.50E+07,", 0))
        assert scanned is not None
        parts, cursor = scanned

        assert parts == NumberParts(
            negative=True,
            integer="12",
            fraction="50",
            exponent_marker="E",
            exponent_sign="+",
            exponent="07",
        )
        assert parts.literal == "-12.50E+07"
        assert parts.exponent_value == 7
        assert cursor.pos == 10

    def test_stops_at_non_digit(self) -> None:
        """Scanning stops where the literal cannot continue."""
        scanned = scan_number(Cursor("1.5.3", 0))
        assert scanned is not None

        assert scanned[1].pos == 3

    def test_unicode_digits_not_accepted(self) -> None:
        """Only ASCII digits belong to a literal."""
        scanned = scan_number(Cursor("1\u0663", 0))
        assert scanned is not None

        assert scanned[0].integer == "1"

    @pytest.mark.parametrize("source", ["-", "01", "-01", "1.", "1.e3", "1e", "1e+", "1E-", "-a"])
    def test_grammar_violations(self, source: str) -> None:
        """Malformed literals are rejected."""
        assert scan_number(Cursor(source, 0)) is None

    def test_negative_exponent_value(self) -> None:
        """exponent_value carries the sign."""
        scanned = scan_number(Cursor("5e-3", 0))
        assert scanned is not None

        assert scanned[0].exponent_value == -3


# ============================================================================
# EXACTNESS POLICY
# ============================================================================


class TestExactnessPolicy:
    """Test the exact-integer / float decision table."""

    @pytest.mark.parametrize(
        ("literal", "exact"),
        [
            ("0", 0),
            ("-0", 0),
            ("42", 42),
            ("-17", -17),
            ("12e3", 12000),
            ("12E+3", 12000),
            ("1e007", 10_000_000),
            ("1200e-2", 12),
            ("-1200e-2", -12),
            ("100e-2", 1),
            ("1.5e1", 15),
            ("1.25e2", 125),
            ("-2.5e3", -2500),
            ("1.0e400", 10**400),
            ("0e999999999", 0),
            ("0.0e999999999", 0),
            ("123456789012345678901234567890", 123456789012345678901234567890),
        ],
    )
    def test_exact(self, literal: str, exact: int) -> None:
        """Literals that denote integers decode exactly."""
        number = _number(literal)

        assert number.exact == exact
        assert type(number.exact) is int
        assert number.approximate is None
        assert number.literal == literal

    @pytest.mark.parametrize(
        ("literal", "approximate"),
        [
            ("1.5", 1.5),
            ("-0.25", -0.25),
            ("1210e-2", 12.1),
            ("1e-5", 1e-5),
            ("1.50e1", 15.0),
            ("0.4e-1", 0.04),
            ("0e-5", 0.0),
            ("1.5e-400", 0.0),
        ],
    )
    def test_approximate(self, literal: str, approximate: float) -> None:
        """Other literals decode to the nearest float."""
        number = _number(literal)

        assert number.exact is None
        assert number.approximate == approximate
        assert number.literal == literal

    def test_negative_zero_fraction_keeps_sign(self) -> None:
        """-0.0 is a float and keeps its sign."""
        number = _number("-0.0")

        assert number.approximate == 0.0
        assert str(number.approximate) == "-0.0"

    def test_float_is_correctly_rounded(self) -> None:
        """Floats come from the decimal text, not from repeated scaling."""
        assert _number("0.1").approximate == 0.1
        assert _number("2.2250738585072014e-308").approximate == 2.2250738585072014e-308

    def test_long_digit_runs(self) -> None:
        """Digit runs beyond the int/str conversion limit decode exactly."""
        number = _number("1" + "0" * 5000)

        assert number.exact == 10**5000

    def test_long_fraction_exponent(self) -> None:
        """Long mantissas on the exact path are converted piecewise."""
        number = _number("1." + "0" * 4999 + "1e5000")

        assert number.exact == 10**5000 + 1

    @given(st.text(alphabet="0123456789", min_size=1001, max_size=6000))
    @settings(max_examples=25)
    def test_long_runs_match_decimal(self, digits: str) -> None:
        """PROPERTY: split conversion agrees with Decimal for any digit run."""
        event(f"digits={len(digits) // 1000}k")

        assert _number("1" + digits).exact == Decimal("1" + digits)

    def test_run_at_digit_limit(self) -> None:
        """A literal of exactly MAX_NUMBER_DIGITS digits still decodes."""
        number = _number("9" * MAX_NUMBER_DIGITS)

        assert number.exact == 10**MAX_NUMBER_DIGITS - 1

    @given(number_literals())
    @example("1200e-2")
    @example("1.50e1")
    def test_decision_table(self, literal: str) -> None:
        """PROPERTY: exactness follows the decision table and values are right."""
        scanned = scan_number(Cursor(literal, 0))
        assert scanned is not None
        parts = scanned[0]
        exponent = parts.exponent_value
        trailing = len(parts.integer) - len(parts.integer.rstrip("0"))

        if parts.fraction is None:
            expect_exact = exponent >= 0 or -exponent <= trailing
        else:
            expect_exact = parts.exponent is not None and exponent >= len(parts.fraction)

        number = _number(literal)
        event(f"exact={number.is_exact}")

        assert number.is_exact == expect_exact
        assert number.literal == literal
        if number.exact is not None:
            assert number.exact == int(Decimal(literal))
        else:
            assert number.approximate == float(literal)


# ============================================================================
# ERRORS
# ============================================================================


class TestNumberErrors:
    """Test InvalidNumber reporting."""

    def test_bare_minus(self) -> None:
        """Literal and context are both the remaining input."""
        result = parse_number(Cursor("[-]", 1))

        assert result == InvalidNumber("-]", "-]", 1)

    def test_leading_zero(self) -> None:
        """Leading zeros are rejected at the literal start."""
        assert parse_number(Cursor("012", 0)) == InvalidNumber("012", "012", 0)

    @given(malformed_number_literals())
    def test_malformed_literals(self, literal: str) -> None:
        """PROPERTY: malformed literals fail at their start."""
        source = "[" + literal + "]"
        result = parse_number(Cursor(source, 1))

        assert result == InvalidNumber(source[1:], source[1:], 1)

    def test_exponent_above_limit(self) -> None:
        """Exact-path exponents beyond the limit are not representable."""
        literal = f"1e{MAX_INTEGER_EXPONENT + 1}"
        result = parse_number(Cursor(literal + "]", 0))

        assert result == InvalidNumber(literal, literal + "]", 0)

    def test_exponent_at_limit(self) -> None:
        """The limit itself is still representable."""
        assert _number(f"1e{MAX_INTEGER_EXPONENT}").exact == 10**MAX_INTEGER_EXPONENT

    def test_custom_limit(self) -> None:
        """The exponent limit is configurable per call."""
        result = parse_number(Cursor("5e10", 0), max_exponent=5)

        assert result == InvalidNumber("5e10", "5e10", 0)

    def test_float_overflow(self) -> None:
        """Non-integral literals beyond float range are not representable."""
        literal = "9" * 400 + ".5"

        assert parse_number(Cursor(literal, 0)) == InvalidNumber(literal, literal, 0)


class TestDecodeNumber:
    """Test decode_number() directly."""

    def test_returns_none_beyond_limit(self) -> None:
        """None signals an unrepresentable value."""
        parts = NumberParts(False, "3", exponent_marker="e", exponent="20")

        assert decode_number(parts, max_exponent=10) is None

    def test_zero_mantissa_ignores_limit(self) -> None:
        """Zero never needs the power of ten."""
        parts = NumberParts(True, "0", fraction="000", exponent_marker="e", exponent="99")

        assert decode_number(parts, max_exponent=1) == JsonNumber(exact=0, literal="-0.000e99")

    def test_digit_limit(self) -> None:
        """Integer, fraction and exponent digits all count towards max_digits."""
        parts = NumberParts(False, "12", fraction="3", exponent_marker="e", exponent="45")

        assert parts.digit_count == 5
        assert decode_number(parts, max_digits=4) is None
        assert decode_number(parts, max_digits=5) == JsonNumber(
            exact=123 * 10**44, literal="12.3e45"
        )

    def test_digit_limit_reported_at_literal(self) -> None:
        """Over-long literals surface as InvalidNumber carrying the literal."""
        literal = "7" * (MAX_NUMBER_DIGITS + 1)

        assert parse_number(Cursor(literal + ",", 0)) == InvalidNumber(
            literal, literal + ",", 0
        )
