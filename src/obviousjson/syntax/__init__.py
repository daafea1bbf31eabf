"""JSON syntax parsing package.

Provides the cursor, the tri-state outcome types and the recursive descent
parser. Separate from the top-level API so tooling can inspect outcomes
without exceptions.

Python 3.13+.
"""

from .cursor import (
    UNRECOGNIZED,
    Cursor,
    ParseInvalid,
    ParseOutcome,
    ParseResult,
    Unrecognized,
)
from .parser import JSONParser, ParseContext, ParseReport
from .parser.rules import JSONValue

__all__ = [
    "UNRECOGNIZED",
    "Cursor",
    "JSONParser",
    "JSONValue",
    "ParseContext",
    "ParseInvalid",
    "ParseOutcome",
    "ParseReport",
    "ParseResult",
    "Unrecognized",
    "parse_value",
]


def parse_value(source: str) -> ParseReport:
    """Parse one JSON value from the start of source.

    Convenience function for JSONParser().parse_value().

    Args:
        source: JSON text

    Returns:
        ParseReport with the outcome and consumed length

    Example:
        >>> from obviousjson.syntax import parse_value
        >>> report = parse_value("truefoo")
        >>> report.outcome.value, report.consumed_length
        (True, 4)
    """
    parser = JSONParser()
    return parser.parse_value(source)
