"""Fuzz property-based tests for the JSON parser: totality, round trips, numbers, depth."""

from __future__ import annotations

from decimal import Decimal

import pytest
from hypothesis import event, example, given, settings
from hypothesis import strategies as st

from jsonlexengine import (
    JsonNumber,
    JsonParser,
    NestingTooDeep,
    ParseError,
    UnicodeProfile,
    parse,
    to_python,
)
from jsonlexengine.syntax.cursor import Cursor
from jsonlexengine.syntax.parser.numbers import parse_number
from tests.strategies import (
    equivalent,
    json_documents,
    malformed_number_literals,
    number_literals,
)

pytestmark = pytest.mark.fuzz

_STRUCTURAL = st.sampled_from(list('[]{},:"\\ \t\n\r-0123456789.eEtrufalsn'))


# ============================================================================
# Totality
# ============================================================================


@pytest.mark.fuzz
class TestParserTotality:
    """parse() returns a value or exactly one error for any input."""

    @given(st.text(max_size=200))
    @example("")
    @example("\ufeff")
    @example("[" * 300)
    @settings(max_examples=1000)
    def test_arbitrary_text(self, source: str) -> None:
        """Arbitrary text never raises."""
        value, errors = parse(source)

        assert (value is None) == (len(errors) == 1)
        event(f"outcome={type(errors[0]).__name__ if errors else 'ok'}")

    @given(st.lists(_STRUCTURAL, max_size=60).map("".join))
    @settings(max_examples=1000)
    def test_structural_soup(self, source: str) -> None:
        """Token-heavy text never raises and errors render as diagnostics."""
        value, errors = parse(source)

        if errors:
            error = errors[0]
            assert isinstance(error, ParseError)
            diagnostic = error.to_diagnostic(source)
            assert "^" in diagnostic.format_error(source)
            if diagnostic.span is not None:
                assert 0 <= diagnostic.span.start <= len(source)
            event(f"error={type(error).__name__}")
        else:
            assert value is not None
            event("outcome=ok")

    @given(st.text(max_size=100), st.sampled_from(list(UnicodeProfile)))
    def test_deterministic(self, source: str, profile: UnicodeProfile) -> None:
        """Parsing the same text twice gives equal results."""
        assert parse(source, profile=profile) == parse(source, profile=profile)


# ============================================================================
# Round trips against standard renderings
# ============================================================================


@pytest.mark.fuzz
class TestParserRoundTrip:
    """Valid renderings parse back to the data they came from."""

    @given(json_documents(), st.sampled_from(list(UnicodeProfile)))
    @settings(max_examples=1000)
    def test_documents(self, document: tuple[object, str], profile: UnicodeProfile) -> None:
        """Both profiles decode valid documents identically."""
        data, text = document
        value, errors = parse(text, profile=profile)

        assert errors == ()
        assert value is not None
        assert equivalent(to_python(value), data)

    @given(json_documents(), st.sampled_from(list("x]}:,'")))
    def test_trailing_garbage_rejected(
        self, document: tuple[object, str], garbage: str
    ) -> None:
        """A complete document followed by a non-whitespace character fails."""
        _, text = document
        value, errors = parse(text + garbage)

        assert value is None
        assert len(errors) == 1

    @given(json_documents())
    def test_strict_profile_rejects_bom(self, document: tuple[object, str]) -> None:
        """STRICT never skips a leading byte-order mark."""
        _, text = document
        value, _ = parse("\ufeff" + text)

        assert value is None


# ============================================================================
# Numbers
# ============================================================================


@pytest.mark.fuzz
class TestNumberProperties:
    """Number literals decode to exact ints or to the correctly rounded float."""

    @given(number_literals())
    @example("-0")
    @example("0.0e-5")
    @example("150e-1")
    @settings(max_examples=1000)
    def test_valid_literal(self, literal: str) -> None:
        """The whole literal is consumed and decoded faithfully."""
        result = parse_number(Cursor(literal, 0), 100_000)

        assert not isinstance(result, ParseError)
        assert result.cursor.is_eof
        number = result.value
        assert isinstance(number, JsonNumber)
        assert number.literal == literal

        if number.is_exact:
            event("decoded=exact")
            assert number.exact == Decimal(literal)
        else:
            event("decoded=approximate")
            assert number.approximate == float(literal)

        if "." not in literal and "e-" not in literal.lower():
            assert number.is_exact

    @given(malformed_number_literals())
    def test_malformed_literal(self, literal: str) -> None:
        """Malformed literals never parse as a complete document."""
        value, errors = parse(literal)

        assert value is None
        assert len(errors) == 1

    @given(st.integers(min_value=-(10**40), max_value=10**40))
    def test_integers_exact(self, number: int) -> None:
        """Every integer literal round-trips exactly."""
        value, _ = parse(str(number))

        assert value == JsonNumber(exact=number, literal=str(number))


# ============================================================================
# Depth
# ============================================================================


@pytest.mark.fuzz
class TestDepthProperties:
    """Nesting is accepted up to the limit and rejected one level beyond."""

    @given(
        limit=st.integers(min_value=1, max_value=64),
        brackets=st.lists(st.sampled_from(["[", '{"k":']), min_size=1, max_size=80),
    )
    def test_nesting_limit(self, limit: int, brackets: list[str]) -> None:
        """NestingTooDeep is reported at the first container past the limit."""
        closers = {"[": "]", '{"k":': "}"}
        source = "".join(brackets) + "0" + "".join(closers[b] for b in reversed(brackets))
        parser = JsonParser(max_nesting_depth=limit)

        value, errors = parser.parse(source)

        if len(brackets) <= limit:
            event("nesting=within")
            assert errors == ()
            assert value is not None
        else:
            event("nesting=exceeded")
            position = len("".join(brackets[:limit]))
            assert errors == (NestingTooDeep(position, limit),)

    @given(st.integers(min_value=1, max_value=40))
    def test_depth_independent_of_whitespace(self, pad: int) -> None:
        """Whitespace between brackets does not change depth accounting."""
        space = " " * pad
        source = (space + "[") * 3 + (space + "]") * 3

        value, errors = JsonParser(max_nesting_depth=3).parse(source)

        assert errors == ()
        assert value is not None
