"""Tests for syntax/parser/primitives.py.

Covers string literals (escapes, \\u escapes, surrogate pairs), the number
state machine and the keyword rule.

Python 3.13+.
"""

from __future__ import annotations

import math

import pytest
from hypothesis import given

from obviousjson.diagnostics import DiagnosticCode
from obviousjson.syntax.cursor import (
    UNRECOGNIZED,
    Cursor,
    ParseInvalid,
    ParseResult,
)
from obviousjson.syntax.parser.primitives import (
    parse_escape_sequence,
    parse_keyword,
    parse_number,
    parse_string_literal,
)
from tests.strategies import json_number_texts


def _u(hex_digits: str) -> str:
    """Build a backslash-u escape as it appears in JSON source."""
    return "\\" + "u" + hex_digits


# ============================================================================
# STRINGS
# ============================================================================


class TestParseStringLiteral:
    """Test quoted string parsing."""

    def test_simple_string(self) -> None:
        """Plain characters are copied verbatim."""
        result = parse_string_literal(Cursor('"hello" tail', 0))

        assert isinstance(result, ParseResult)
        assert result.value == "hello"
        assert result.cursor.pos == 7

    def test_empty_string(self) -> None:
        """"" parses to the empty string."""
        result = parse_string_literal(Cursor('""', 0))

        assert isinstance(result, ParseResult)
        assert result.value == ""
        assert result.cursor.pos == 2

    def test_not_at_quote_is_unrecognized(self) -> None:
        """Anything but '"' is not a string."""
        assert parse_string_literal(Cursor("'single'", 0)) == UNRECOGNIZED

    def test_eof_is_unrecognized(self) -> None:
        """Empty input is not a string."""
        assert parse_string_literal(Cursor("", 0)) == UNRECOGNIZED

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            (r'"a\"b"', 'a"b'),
            (r'"a\\b"', "a\\b"),
            (r'"a\/b"', "a/b"),
            (r'"\b\f\n\r\t"', "\b\f\n\r\t"),
        ],
    )
    def test_standard_escapes(self, source: str, expected: str) -> None:
        """The RFC 8259 single-character escapes decode."""
        result = parse_string_literal(Cursor(source, 0))

        assert isinstance(result, ParseResult)
        assert result.value == expected

    def test_unknown_escape_is_literal(self) -> None:
        """An unknown escape keeps the escaped character: \\q -> q."""
        result = parse_string_literal(Cursor(r'"\q"', 0))

        assert isinstance(result, ParseResult)
        assert result.value == "q"

    def test_raw_control_characters_accepted(self) -> None:
        """Unescaped control characters are copied, not rejected."""
        result = parse_string_literal(Cursor('"a\nb\tc"', 0))

        assert isinstance(result, ParseResult)
        assert result.value == "a\nb\tc"

    def test_non_ascii_passthrough(self) -> None:
        """Non-ASCII text is decoded as-is."""
        result = parse_string_literal(Cursor('"\xe9\xe9 \U0001f600"', 0))

        assert isinstance(result, ParseResult)
        assert result.value == "\xe9\xe9 \U0001f600"

    @pytest.mark.parametrize("source", ['"abc', '"', '"abc\\', '"\\"'])
    def test_unterminated(self, source: str) -> None:
        """EOF before the closing quote is invalid."""
        result = parse_string_literal(Cursor(source, 0))

        assert isinstance(result, ParseInvalid)
        assert result.message == "unexpected end of string"
        assert result.diagnostic.code is DiagnosticCode.STRING_UNTERMINATED
class TestUnicodeEscapes:
    """Test \\uXXXX decoding."""

    def test_bmp_escape(self) -> None:
        """A BMP escape decodes to its character."""
        result = parse_string_literal(Cursor(f'"caf{_u("00e9")}"', 0))

        assert isinstance(result, ParseResult)
        assert result.value == "caf\N{LATIN SMALL LETTER E WITH ACUTE}"

    def test_uppercase_hex(self) -> None:
        """Hex digits are case-insensitive."""
        result = parse_string_literal(Cursor(f'"{_u("00E9")}{_u("00e9")}"', 0))

        assert isinstance(result, ParseResult)
        assert result.value == "\xe9\xe9"

    def test_surrogate_pair_joined(self) -> None:
        """An escaped high+low surrogate pair becomes one code point."""
        result = parse_string_literal(Cursor(f'"{_u("d83d")}{_u("de00")}"', 0))

        assert isinstance(result, ParseResult)
        assert result.value == "\U0001f600"
        assert len(result.value) == 1

    def test_lone_high_surrogate_kept(self) -> None:
        """A high surrogate without a low half decodes on its own."""
        result = parse_string_literal(Cursor(f'"{_u("d83d")}x"', 0))

        assert isinstance(result, ParseResult)
        assert result.value == chr(0xD83D) + "x"

    def test_high_surrogate_followed_by_non_surrogate_escape(self) -> None:
        """Two unrelated escapes decode independently."""
        result = parse_string_literal(Cursor(f'"{_u("d83d")}{_u("0041")}"', 0))

        assert isinstance(result, ParseResult)
        assert result.value == chr(0xD83D) + "A"

    @pytest.mark.parametrize("tail", ["00", "", "12"])
    def test_truncated_escape(self, tail: str) -> None:
        """Fewer than four characters left is a truncated escape."""
        result = parse_string_literal(Cursor('"' + _u(tail), 0))

        assert isinstance(result, ParseInvalid)
        assert result.message == "invalid unicode escape near end of string"
        assert result.diagnostic.code is DiagnosticCode.STRING_UNICODE_ESCAPE_TRUNCATED

    def test_quote_inside_escape_is_invalid_hex(self) -> None:
        """A closing quote inside the four characters is not a hex digit."""
        result = parse_string_literal(Cursor(f'"{_u("12")}"  ', 0))

        assert isinstance(result, ParseInvalid)
        assert result.message == "invalid unicode escape"

    def test_non_hex_escape(self) -> None:
        """Non-hex characters in the escape are invalid."""
        result = parse_string_literal(Cursor(f'"{_u("12g4")}"', 0))

        assert isinstance(result, ParseInvalid)
        assert result.message == "invalid unicode escape"
        assert result.diagnostic.code is DiagnosticCode.STRING_UNICODE_ESCAPE_INVALID

    def test_escape_sequence_direct(self) -> None:
        """parse_escape_sequence starts after the backslash."""
        result = parse_escape_sequence(Cursor("n rest", 0))

        assert not isinstance(result, ParseInvalid)
        assert result[0] == "\n"
        assert result[1].pos == 1


# ============================================================================
# NUMBERS
# ============================================================================


class TestParseNumber:
    """Test the number state machine."""

    @pytest.mark.parametrize(
        ("source", "expected", "consumed"),
        [
            ("0", 0.0, 1),
            ("-0", 0.0, 2),
            ("7", 7.0, 1),
            ("42", 42.0, 2),
            ("-17", -17.0, 3),
            ("0.5", 0.5, 3),
            ("-0.25", -0.25, 5),
            ("1e3", 1000.0, 3),
            ("1E3", 1000.0, 3),
            ("1e+3", 1000.0, 4),
            ("1e-3", 0.001, 4),
            ("2.5e2", 250.0, 5),
            ("1e007", 1e7, 5),
        ],
    )
    def test_valid_numbers(self, source: str, expected: float, consumed: int) -> None:
        """Well-formed numbers parse to the expected float."""
        result = parse_number(Cursor(source, 0))

        assert isinstance(result, ParseResult)
        assert result.value == pytest.approx(expected)
        assert result.cursor.pos == consumed

    def test_result_is_float(self) -> None:
        """Integers are returned as floats."""
        result = parse_number(Cursor("42", 0))

        assert isinstance(result, ParseResult)
        assert type(result.value) is float

    def test_negative_zero_sign(self) -> None:
        """-0 keeps its sign."""
        result = parse_number(Cursor("-0", 0))

        assert isinstance(result, ParseResult)
        assert math.copysign(1.0, result.value) == -1.0

    def test_second_decimal_point_stops(self) -> None:
        """1.2.3 parses 1.2 and leaves '.3'."""
        result = parse_number(Cursor("1.2.3", 0))

        assert isinstance(result, ParseResult)
        assert result.value == pytest.approx(1.2)
        assert result.cursor.pos == 3

    def test_leading_zero_stops(self) -> None:
        """01 parses 0 and leaves '1'."""
        result = parse_number(Cursor("01", 0))

        assert isinstance(result, ParseResult)
        assert result.value == 0.0
        assert result.cursor.pos == 1

    def test_empty_exponent(self) -> None:
        """An exponent marker with no digits scales by 10**0."""
        result = parse_number(Cursor("5e", 0))

        assert isinstance(result, ParseResult)
        assert result.value == 5.0
        assert result.cursor.pos == 2

    @pytest.mark.parametrize("source", ["", "-", "-x", "abc", "+1", ".5"])
    def test_unrecognized(self, source: str) -> None:
        """No digit after the optional sign: not a number."""
        assert parse_number(Cursor(source, 0)) == UNRECOGNIZED

    @pytest.mark.parametrize("source", ["1.", "1.x", "-0.e1"])
    def test_fraction_requires_digit(self, source: str) -> None:
        """A decimal point must be followed by a digit."""
        result = parse_number(Cursor(source, 0))

        assert isinstance(result, ParseInvalid)
        assert result.message == "digit required after decimal point"

    def test_huge_exponent_saturates_to_inf(self) -> None:
        """Exponents beyond the float range give inf."""
        result = parse_number(Cursor("1e400", 0))

        assert isinstance(result, ParseResult)
        assert result.value == math.inf

    def test_huge_negative_exponent_saturates_to_zero(self) -> None:
        """Negative exponents beyond the float range give 0.0."""
        result = parse_number(Cursor("-1e-400", 0))

        assert isinstance(result, ParseResult)
        assert result.value == 0.0

    def test_long_exponent_saturates_to_inf(self) -> None:
        """A 200k-digit exponent is consumed whole and saturates to inf."""
        source = "1e" + "9" * 200_000

        result = parse_number(Cursor(source, 0))

        assert isinstance(result, ParseResult)
        assert result.value == math.inf
        assert result.cursor.pos == len(source)

    def test_long_negative_exponent_saturates_to_zero(self) -> None:
        """A 200k-digit negative exponent is consumed whole and gives 0.0."""
        source = "-1e-" + "9" * 200_000 + "]"

        result = parse_number(Cursor(source, 0))

        assert isinstance(result, ParseResult)
        assert result.value == 0.0
        assert result.cursor.pos == len(source) - 1

    def test_exponent_just_past_saturation(self) -> None:
        """Exponents around the saturation bound still overflow correctly."""
        result = parse_number(Cursor("1e1001", 0))

        assert isinstance(result, ParseResult)
        assert result.value == math.inf

    def test_zero_with_huge_exponent(self) -> None:
        """Zero stays zero whatever the exponent."""
        result = parse_number(Cursor("0e99999", 0))

        assert isinstance(result, ParseResult)
        assert result.value == 0.0

    def test_benchmark_literal(self) -> None:
        """12345.6789e-12 parses close to the exact decimal value."""
        result = parse_number(Cursor("12345.6789e-12", 0))

        assert isinstance(result, ParseResult)
        assert result.value == pytest.approx(12345.6789e-12)

    @given(text=json_number_texts())
    def test_matches_float_conversion(self, text: str) -> None:
        """Property: well-formed literals are consumed whole and match float()."""
        result = parse_number(Cursor(text, 0))

        assert isinstance(result, ParseResult)
        assert result.cursor.pos == len(text)
        assert result.value == pytest.approx(float(text), rel=1e-9)


# ============================================================================
# KEYWORDS
# ============================================================================


class TestParseKeyword:
    """Test true/false/null."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [("true", True), ("false", False), ("null", None)],
    )
    def test_keywords(self, source: str, expected: bool | None) -> None:
        """Each keyword maps to its Python value."""
        result = parse_keyword(Cursor(source, 0))

        assert isinstance(result, ParseResult)
        assert result.value is expected
        assert result.cursor.pos == len(source)

    def test_keyword_prefix_match(self) -> None:
        """truefoo matches 'true' and leaves 'foo'."""
        result = parse_keyword(Cursor("truefoo", 0))

        assert isinstance(result, ParseResult)
        assert result.value is True
        assert result.cursor.pos == 4

    @pytest.mark.parametrize("source", ["tru", "True", "nil", "fals", "", "x"])
    def test_non_keywords_unrecognized(self, source: str) -> None:
        """Partial or differently-cased words are never invalid."""
        assert parse_keyword(Cursor(source, 0)) == UNRECOGNIZED
