"""Python-facing entry points: parse() and parsev().

Translates parser outcomes into return values and raised exceptions:

    UNRECOGNIZED      -> JSONUnrecognizedError("could not parse as value")
    ParseInvalid(msg) -> JSONSyntaxError("invalid: " + msg)
    ParseResult       -> ParsedValue(length=consumed length, data=value)

Trailing content after a complete value is accepted by default, matching
the parser core. Pass ``strict=True`` to reject it.

Python 3.13+.
"""

from dataclasses import dataclass

from obviousjson.core import DepthLimitExceededError
from obviousjson.diagnostics import (
    DiagnosticCode,
    ErrorTemplate,
    JSONSyntaxError,
    JSONUnrecognizedError,
    SourceSpan,
)
from obviousjson.syntax import (
    Cursor,
    JSONParser,
    JSONValue,
    ParseInvalid,
    ParseResult,
    Unrecognized,
)

__all__ = ["ParsedValue", "parse", "parsev"]


@dataclass(frozen=True, slots=True)
class ParsedValue:
    """Successfully parsed value.

    Attributes:
        length: Number of characters consumed, including whitespace
            around the value
        data: The parsed value
    """

    length: int
    data: JSONValue


def _invalid_error(invalid: ParseInvalid, source: str) -> JSONSyntaxError:
    message = f"invalid: {invalid.message}"
    if invalid.diagnostic.code is DiagnosticCode.PARSE_NESTING_DEPTH_EXCEEDED:
        return DepthLimitExceededError(message, invalid.diagnostic, source=source)
    return JSONSyntaxError(message, invalid.diagnostic, source=source)


def _check_trailing(source: str, length: int) -> None:
    if length >= len(source):
        return
    line, column = Cursor(source, length).compute_line_col()
    diagnostic = ErrorTemplate.trailing_content(
        SourceSpan(start=length, end=len(source), line=line, column=column)
    )
    raise JSONSyntaxError(
        f"invalid: {diagnostic.message}", diagnostic, source=source
    )


def parsev(
    text: str,
    *,
    strict: bool = False,
    max_nesting_depth: int | None = None,
    max_source_size: int | None = None,
) -> ParsedValue:
    """Parse a JSON value and report how much of the text it used.

    Args:
        text: JSON text
        strict: Reject content after the value (default: accept it)
        max_nesting_depth: Override the array/object nesting limit
        max_source_size: Override the source size limit (0 disables it)

    Returns:
        ParsedValue with consumed length and data

    Raises:
        TypeError: If text is not a str
        JSONUnrecognizedError: If the text does not start with a value
        JSONSyntaxError: If the value is malformed, or trailing content
            is present in strict mode
        DepthLimitExceededError: If nesting exceeds max_nesting_depth
        ValueError: If text exceeds max_source_size

    Example:
        >>> parsev('[1, "two", null] trailing')
        ParsedValue(length=17, data=[1.0, 'two', None])
    """
    if not isinstance(text, str):
        msg = f"parsev() argument must be str, not {type(text).__name__}"
        raise TypeError(msg)

    parser = JSONParser(
        max_source_size=max_source_size, max_nesting_depth=max_nesting_depth
    )
    report = parser.parse_value(text)

    match report.outcome:
        case ParseResult(value=value, cursor=cursor):
            if strict:
                _check_trailing(text, cursor.pos)
            return ParsedValue(length=cursor.pos, data=value)
        case ParseInvalid() as invalid:
            raise _invalid_error(invalid, text)
        case Unrecognized():
            diagnostic = ErrorTemplate.value_unrecognized()
            raise JSONUnrecognizedError(diagnostic.message, diagnostic, source=text)


def parse(
    text: str,
    *,
    strict: bool = False,
    max_nesting_depth: int | None = None,
    max_source_size: int | None = None,
) -> JSONValue:
    """Parse a JSON value and return it.

    Same as ``parsev(...).data``; see :func:`parsev` for arguments and errors.

    Example:
        >>> parse('{"a": 1, "a": 2}')
        {'a': 2.0}
    """
    return parsev(
        text,
        strict=strict,
        max_nesting_depth=max_nesting_depth,
        max_source_size=max_source_size,
    ).data
