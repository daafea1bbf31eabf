"""Primitive parsing rules for the JSON parser.

This module provides the leaf grammar rules: quoted strings, numbers and
the keywords true/false/null. None of them recurse.

Every rule takes a Cursor and returns a ParseOutcome:
    - UNRECOGNIZED when the first character rules the construct out
    - ParseInvalid once the construct has started but is malformed
    - ParseResult(value, cursor) on success
"""

import math
from enum import Enum, auto

from obviousjson.constants import ASCII_DIGITS, HEX_DIGITS
from obviousjson.diagnostics import ErrorTemplate
from obviousjson.syntax.cursor import (
    UNRECOGNIZED,
    Cursor,
    ParseInvalid,
    ParseOutcome,
    ParseResult,
)

# \uXXXX = 4 hex digits (BMP code unit)
_UNICODE_ESCAPE_LEN: int = 4

# UTF-16 surrogate halves. A high half followed by an escaped low half
# is combined into a single code point.
_HIGH_SURROGATE_START: int = 0xD800
_HIGH_SURROGATE_END: int = 0xDBFF
_LOW_SURROGATE_START: int = 0xDC00
_LOW_SURROGATE_END: int = 0xDFFF

# Single-character escapes. Anything else after a backslash (other than
# 'u') is kept literally: "\q" decodes to "q".
_CHAR_ESCAPES: dict[str, str] = {
    '"': '"',
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "\\": "\\",
    # Escaping the forward solidus is always valid.
    "/": "/",
}

# Keywords in match order. Whole-literal comparison: "truex" matches "true".
_KEYWORDS: tuple[tuple[str, bool | None], ...] = (
    ("true", True),
    ("false", False),
    ("null", None),
)

# Past this exponent every nonzero double overflows or underflows, so
# further exponent digits are consumed without growing the exponent.
_EXPONENT_SATURATION: int = 1000


# =============================================================================
# Strings
# =============================================================================


def _read_hex4(cursor: Cursor) -> tuple[int, Cursor] | ParseInvalid:
    """Read the four hex digits of a \\u escape (cursor is after the 'u')."""
    hex_digits, cursor = cursor.take(_UNICODE_ESCAPE_LEN)
    if len(hex_digits) < _UNICODE_ESCAPE_LEN:
        return ParseInvalid(ErrorTemplate.unicode_escape_truncated())
    if not all(c in HEX_DIGITS for c in hex_digits):
        return ParseInvalid(ErrorTemplate.unicode_escape_invalid(hex_digits))
    return int(hex_digits, 16), cursor


def _parse_unicode_escape(cursor: Cursor) -> tuple[str, Cursor] | ParseInvalid:
    """Decode \\uXXXX, joining an escaped surrogate pair into one character.

    Args:
        cursor: Position AFTER the 'u'

    Returns:
        (decoded character, new cursor) or ParseInvalid
    """
    result = _read_hex4(cursor)
    if isinstance(result, ParseInvalid):
        return result
    code_point, cursor = result

    if (
        _HIGH_SURROGATE_START <= code_point <= _HIGH_SURROGATE_END
        and cursor.at_literal("\\u")
    ):
        low = _read_hex4(cursor.advance(2))
        if not isinstance(low, ParseInvalid):
            low_point, after_low = low
            if _LOW_SURROGATE_START <= low_point <= _LOW_SURROGATE_END:
                combined = (
                    0x10000
                    + ((code_point - _HIGH_SURROGATE_START) << 10)
                    + (low_point - _LOW_SURROGATE_START)
                )
                return chr(combined), after_low
        # Not a pair: the second escape is decoded on its own by the caller.

    return chr(code_point), cursor


def parse_escape_sequence(cursor: Cursor) -> tuple[str, Cursor] | ParseInvalid:
    """Parse escape sequence after backslash in string.

    Supported escape sequences:
        \\" \\\\ \\/ \\b \\f \\n \\r \\t → the usual characters
        \\uXXXX → Unicode character (4 hex digits)
        \\<other> → <other>, unchanged

    The last case is deliberately permissive and deviates from RFC 8259.

    Args:
        cursor: Position AFTER the backslash (must not be EOF)

    Returns:
        (escaped_char, new_cursor) on success, ParseInvalid on a bad \\u escape
    """
    escape_ch = cursor.head
    cursor = cursor.advance()

    if escape_ch in _CHAR_ESCAPES:
        return _CHAR_ESCAPES[escape_ch], cursor
    if escape_ch == "u":
        return _parse_unicode_escape(cursor)
    return escape_ch, cursor


def parse_string_literal(cursor: Cursor) -> ParseOutcome[str]:
    """Parse string literal: "text"

    Examples:
        "hello" → 'hello'
        "with \\"quotes\\"" → 'with "quotes"'
        "caf\\u00e9" → 'café'
        "\\q" → 'q'

    Args:
        cursor: Current position in source

    Returns:
        ParseResult(string_value, cursor after closing quote) on success,
        UNRECOGNIZED if not at '"',
        ParseInvalid if the input ends before the closing quote
    """
    if cursor.is_eof or cursor.head != '"':
        return UNRECOGNIZED

    cursor = cursor.advance()  # Skip opening "
    value = ""

    while not cursor.is_eof:
        ch = cursor.head
        cursor = cursor.advance()

        if ch == '"':
            return ParseResult(value, cursor)

        if ch == "\\":
            if cursor.is_eof:
                break
            escape_result = parse_escape_sequence(cursor)
            if isinstance(escape_result, ParseInvalid):
                return escape_result
            escaped_char, cursor = escape_result
            value += escaped_char
        else:
            value += ch

    # EOF without closing quote
    return ParseInvalid(ErrorTemplate.string_unterminated())


# =============================================================================
# Numbers
# =============================================================================


class _NumberState(Enum):
    """States of the number scanner, mirroring the RFC 8259 number grammar."""

    INTEGRAL = auto()
    BEFORE_FRACTION = auto()
    FRACTION = auto()
    BEFORE_EXPONENT = auto()
    EXPONENT_ZEROS = auto()
    EXPONENT = auto()


def _is_digit(cursor: Cursor) -> bool:
    return not cursor.is_eof and cursor.head in ASCII_DIGITS


def _apply_exponent(value: float, exponent: int, negative: bool) -> float:
    """Scale value by 10**exponent (or divide, for a negative exponent).

    Exponents beyond the float range saturate: inf when multiplying,
    0.0 when dividing.
    """
    if not value or not exponent:
        return value
    try:
        scale = 10.0**exponent
    except OverflowError:
        return 0.0 if negative else math.inf
    return value / scale if negative else value * scale


def parse_number(cursor: Cursor) -> ParseOutcome[float]:  # noqa: PLR0912
    """Parse number literal: -?(0|[1-9][0-9]*)(.[0-9]+)?([eE][+-]?[0-9]*)?

    The value is accumulated digit by digit in double precision, so very
    large integers lose precision exactly as a float would.

    Asymmetries kept on purpose:
        - A leading '0' in the integral part ends it: "01" parses as 0 and
          leaves "1" unconsumed.
        - The exponent accepts any number of leading zeros ("1e007").

    Examples:
        42 → 42.0
        -0.5 → -0.5
        1e-3 → 0.001

    Note: PLR0912 (too many branches) is acceptable for the state machine.

    Args:
        cursor: Current position in source

    Returns:
        ParseResult(number, new_cursor) on success,
        UNRECOGNIZED if no digit follows the optional '-',
        ParseInvalid if a '.' is not followed by a digit
    """
    sign = 1.0
    if not cursor.is_eof and cursor.head == "-":
        sign = -1.0
        cursor = cursor.advance()

    if not _is_digit(cursor):
        return UNRECOGNIZED

    value = 0.0
    fraction_weight = 1.0
    exponent = 0
    exponent_negative = False

    if cursor.head == "0":
        cursor = cursor.advance()
        state = _NumberState.BEFORE_FRACTION
    else:
        state = _NumberState.INTEGRAL

    while True:
        match state:
            case _NumberState.INTEGRAL:
                if not _is_digit(cursor):
                    state = _NumberState.BEFORE_FRACTION
                    continue
                value = value * 10 + int(cursor.head)
                cursor = cursor.advance()

            case _NumberState.BEFORE_FRACTION:
                if cursor.is_eof or cursor.head != ".":
                    state = _NumberState.BEFORE_EXPONENT
                    continue
                cursor = cursor.advance()
                if not _is_digit(cursor):
                    return ParseInvalid(ErrorTemplate.fraction_digit_required())
                state = _NumberState.FRACTION

            case _NumberState.FRACTION:
                if not _is_digit(cursor):
                    state = _NumberState.BEFORE_EXPONENT
                    continue
                fraction_weight /= 10
                value += fraction_weight * int(cursor.head)
                cursor = cursor.advance()

            case _NumberState.BEFORE_EXPONENT:
                if cursor.is_eof or cursor.head not in ("e", "E"):
                    return ParseResult(value * sign, cursor)
                cursor = cursor.advance()
                if not cursor.is_eof and cursor.head in ("+", "-"):
                    exponent_negative = cursor.head == "-"
                    cursor = cursor.advance()
                state = _NumberState.EXPONENT_ZEROS

            case _NumberState.EXPONENT_ZEROS:
                if not cursor.is_eof and cursor.head == "0":
                    cursor = cursor.advance()
                else:
                    state = _NumberState.EXPONENT

            case _NumberState.EXPONENT:
                if not _is_digit(cursor):
                    value = _apply_exponent(value, exponent, exponent_negative)
                    return ParseResult(value * sign, cursor)
                if exponent <= _EXPONENT_SATURATION:
                    exponent = exponent * 10 + int(cursor.head)
                cursor = cursor.advance()


# =============================================================================
# Keywords
# =============================================================================


def parse_keyword(cursor: Cursor) -> ParseOutcome[bool | None]:
    """Parse one of the literals true, false, null.

    Args:
        cursor: Current position in source

    Returns:
        ParseResult(True | False | None, cursor after the literal) on match,
        UNRECOGNIZED otherwise. Never invalid.
    """
    for literal, value in _KEYWORDS:
        if cursor.at_literal(literal):
            return ParseResult(value, cursor.advance(len(literal)))
    return UNRECOGNIZED
