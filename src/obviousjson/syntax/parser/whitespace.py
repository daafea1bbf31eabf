"""Whitespace handling for the JSON parser.

Per RFC 8259:
    ws = *( %x20 / %x09 / %x0A / %x0D )

Insignificant whitespace may appear before or after any value and around
the structural characters ``[ ] { } : ,``.
"""

from obviousjson.constants import WHITESPACE_CHARS
from obviousjson.syntax.cursor import Cursor, ParseResult


def skip_whitespace(cursor: Cursor) -> ParseResult[None]:
    """Skip a maximal run of insignificant whitespace.

    Accepts space (U+0020), tab (U+0009), line feed (U+000A) and
    carriage return (U+000D).

    Args:
        cursor: Current position in source

    Returns:
        ParseResult with no value and the cursor at the first
        non-whitespace character (or EOF). Always valid: a position with
        no whitespace simply yields the same cursor.

    Design:
        Immutable cursor ensures termination.
    """
    while not cursor.is_eof and cursor.head in WHITESPACE_CHARS:
        cursor = cursor.advance()
    return ParseResult(None, cursor)
