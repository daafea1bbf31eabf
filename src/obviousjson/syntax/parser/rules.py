"""Grammar rules for JSON structure.

This module provides the recursive grammar rules:
- Array parsing: '[' value (',' value)* ']'
- Object parsing: '{' string ':' value (',' string ':' value)* '}'
- The value dispatcher, which tries every value rule in a fixed order

Arrays and objects do not import the dispatcher; it is passed to them as
an explicit ``ValueParser`` argument. The dispatcher passes itself, which
forms the grammar's mutual recursion without any module-level cycle.

Lookahead Patterns:
    Every rule is recognized by its first character:
    - `"` starts a string
    - `-` or a digit starts a number
    - `t`, `f`, `n` may start a keyword
    - `[` starts an array
    - `{` starts an object

Security:
    Includes configurable nesting depth limit to prevent stack exhaustion
    via deeply nested arrays/objects (e.g., [[[[ ... ]]]]).
"""

from collections.abc import Callable
from dataclasses import dataclass

from obviousjson.constants import MAX_DEPTH
from obviousjson.diagnostics import ErrorTemplate
from obviousjson.syntax.cursor import (
    UNRECOGNIZED,
    Cursor,
    ParseInvalid,
    ParseOutcome,
    ParseResult,
    Unrecognized,
)
from obviousjson.syntax.parser.primitives import (
    parse_keyword,
    parse_number,
    parse_string_literal,
)
from obviousjson.syntax.parser.whitespace import skip_whitespace

__all__ = [
    "JSONValue",
    "ParseContext",
    "ValueParser",
    "parse_array",
    "parse_object",
    "parse_value",
]

type JSONValue = str | float | bool | None | list[JSONValue] | dict[str, JSONValue]


@dataclass(frozen=True, slots=True)
class ParseContext:
    """Explicit context for parsing operations.

    Replaces global state with explicit parameter passing for:
    - Thread safety without global state
    - Easier testing (no state reset needed)
    - Clear dependency flow

    Attributes:
        max_nesting_depth: Maximum allowed nesting depth for arrays/objects
        current_depth: Current nesting depth (0 = top level)
    """

    max_nesting_depth: int = MAX_DEPTH
    current_depth: int = 0

    def is_depth_exceeded(self) -> bool:
        """Check if maximum nesting depth has been reached."""
        return self.current_depth >= self.max_nesting_depth

    def enter_container(self) -> "ParseContext":
        """Create new context with incremented depth for entering an array/object."""
        return ParseContext(
            max_nesting_depth=self.max_nesting_depth,
            current_depth=self.current_depth + 1,
        )


type ValueParser = Callable[[Cursor, ParseContext], ParseOutcome[JSONValue]]


# =============================================================================
# Arrays
# =============================================================================


def parse_array(
    cursor: Cursor, parse_element: ValueParser, context: ParseContext
) -> ParseOutcome[list[JSONValue]]:
    """Parse array: '[' ws (value (',' value)*)? ']'

    Args:
        cursor: Current position in source
        parse_element: Rule used for every element (the value dispatcher)
        context: Nesting depth tracking

    Returns:
        ParseResult(list, cursor after ']') on success,
        UNRECOGNIZED if not at '[',
        ParseInvalid on a missing comma, a non-value element, an
        unterminated array, or when the nesting limit is reached
    """
    if cursor.is_eof or cursor.head != "[":
        return UNRECOGNIZED

    if context.is_depth_exceeded():
        return ParseInvalid(
            ErrorTemplate.nesting_depth_exceeded(context.max_nesting_depth)
        )
    nested = context.enter_container()

    cursor = skip_whitespace(cursor.advance()).cursor  # Skip [
    items: list[JSONValue] = []

    while True:
        if cursor.is_eof:
            return ParseInvalid(ErrorTemplate.array_unterminated())

        if cursor.head == "]":
            return ParseResult(items, cursor.advance())

        if items:
            if cursor.head != ",":
                return ParseInvalid(ErrorTemplate.array_missing_comma())
            cursor = cursor.advance()

        match parse_element(cursor, nested):
            case ParseResult(value=element, cursor=cursor):
                items.append(element)
            case ParseInvalid() as invalid:
                return invalid
            case Unrecognized():
                return ParseInvalid(ErrorTemplate.array_non_value())


# =============================================================================
# Objects
# =============================================================================


def parse_object(
    cursor: Cursor, parse_member_value: ValueParser, context: ParseContext
) -> ParseOutcome[dict[str, JSONValue]]:
    """Parse object: '{' ws (member (',' ws member)*)? '}'

    member ::= string ws ':' value

    Duplicate names are allowed: the last value wins and the name keeps
    the position where it first appeared.

    Args:
        cursor: Current position in source
        parse_member_value: Rule used for every member value (the value
            dispatcher)
        context: Nesting depth tracking

    Returns:
        ParseResult(dict, cursor after '}') on success,
        UNRECOGNIZED if not at '{',
        ParseInvalid on any malformed member or an unterminated object
    """
    if cursor.is_eof or cursor.head != "{":
        return UNRECOGNIZED

    if context.is_depth_exceeded():
        return ParseInvalid(
            ErrorTemplate.nesting_depth_exceeded(context.max_nesting_depth)
        )
    nested = context.enter_container()

    cursor = skip_whitespace(cursor.advance()).cursor  # Skip {
    members: dict[str, JSONValue] = {}
    first = True

    while True:
        if cursor.is_eof:
            return ParseInvalid(ErrorTemplate.object_unterminated())

        if cursor.head == "}":
            return ParseResult(members, cursor.advance())

        # A dict cannot tell "first member" from "all names were duplicates
        # of one key", so track it explicitly.
        if first:
            first = False
        else:
            if cursor.head != ",":
                return ParseInvalid(ErrorTemplate.object_missing_comma())
            cursor = skip_whitespace(cursor.advance()).cursor

        match parse_string_literal(cursor):
            case ParseResult(value=key, cursor=cursor):
                pass
            case ParseInvalid() as invalid:
                return invalid
            case Unrecognized():
                return ParseInvalid(ErrorTemplate.object_key_not_string())

        cursor = skip_whitespace(cursor).cursor
        if cursor.is_eof or cursor.head != ":":
            return ParseInvalid(ErrorTemplate.object_missing_colon())
        cursor = cursor.advance()

        match parse_member_value(cursor, nested):
            case ParseResult(value=member_value, cursor=cursor):
                members[key] = member_value
            case ParseInvalid() as invalid:
                return invalid
            case Unrecognized():
                return ParseInvalid(ErrorTemplate.object_non_value())


# =============================================================================
# Value dispatcher
# =============================================================================

# Tried in this order; the first outcome other than UNRECOGNIZED wins.
_LEAF_RULES: tuple[Callable[[Cursor], ParseOutcome[JSONValue]], ...] = (
    parse_string_literal,
    parse_number,
    parse_keyword,
)
_CONTAINER_RULES: tuple[
    Callable[[Cursor, ValueParser, ParseContext], ParseOutcome[JSONValue]], ...
] = (
    parse_array,
    parse_object,
)


def parse_value(
    cursor: Cursor, context: ParseContext | None = None
) -> ParseOutcome[JSONValue]:
    """Parse any JSON value surrounded by optional whitespace.

    Tries, in order: string, number, keyword, array, object. The first
    rule that recognizes the input decides the outcome; an invalid outcome
    is returned immediately and never retried with a later rule.

    Args:
        cursor: Current position in source
        context: Nesting depth tracking (default: top level, MAX_DEPTH)

    Returns:
        ParseResult(value, cursor after trailing whitespace) on success,
        UNRECOGNIZED if no rule applies,
        ParseInvalid propagated from the matching rule
    """
    if context is None:
        context = ParseContext()

    cursor = skip_whitespace(cursor).cursor

    outcome: ParseOutcome[JSONValue] = UNRECOGNIZED
    for leaf_rule in _LEAF_RULES:
        outcome = leaf_rule(cursor)
        if not isinstance(outcome, Unrecognized):
            break
    else:
        for container_rule in _CONTAINER_RULES:
            outcome = container_rule(cursor, parse_value, context)
            if not isinstance(outcome, Unrecognized):
                break

    if isinstance(outcome, ParseResult):
        return ParseResult(outcome.value, skip_whitespace(outcome.cursor).cursor)
    return outcome
