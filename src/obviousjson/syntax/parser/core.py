"""Core JSON parser implementation.

This module provides the JSONParser class, the configured entry point that
runs the value dispatcher over a whole document.

Architecture:
    The parser uses an immutable cursor pattern (:class:`~obviousjson.syntax.cursor.Cursor`)
    to traverse source text. Each grammar rule (in :mod:`~obviousjson.syntax.parser.rules`
    and :mod:`~obviousjson.syntax.parser.primitives`) returns one of three outcomes:

    - :class:`~obviousjson.syntax.cursor.ParseResult` - value and updated cursor
    - :class:`~obviousjson.syntax.cursor.ParseInvalid` - malformed input
    - :data:`~obviousjson.syntax.cursor.UNRECOGNIZED` - rule does not apply

    JSONParser wraps the dispatcher outcome in a :class:`ParseReport` that also
    exposes how much of the source was consumed. It never checks that the whole
    source was consumed; trailing content is the caller's decision.

Security:
    Includes configurable input size limit to prevent DoS attacks via
    unbounded memory allocation from extremely large documents, and a
    nesting depth limit against stack exhaustion.

See Also:
    - :mod:`obviousjson.syntax.cursor` - Cursor and outcome types
    - :mod:`obviousjson.syntax.parser.rules` - Arrays, objects, value dispatcher
"""

import logging
from dataclasses import dataclass

from obviousjson.constants import MAX_DEPTH, MAX_SOURCE_SIZE
from obviousjson.core import depth_clamp
from obviousjson.enums import ParseStatus
from obviousjson.syntax.cursor import Cursor, ParseOutcome, ParseResult
from obviousjson.syntax.parser.rules import JSONValue, ParseContext, parse_value

__all__ = ["JSONParser", "ParseReport"]

logger = logging.getLogger(__name__)

# parse_value -> parse_array/parse_object -> parse_value ...
_FRAMES_PER_NESTING_LEVEL: int = 2


@dataclass(frozen=True, slots=True)
class ParseReport:
    """Outcome of parsing one document.

    Attributes:
        outcome: The value dispatcher's outcome for the whole source
    """

    outcome: ParseOutcome[JSONValue]

    @property
    def status(self) -> ParseStatus:
        """Tri-state status of the outcome."""
        return self.outcome.status

    @property
    def consumed_length(self) -> int | None:
        """Cursor position reached on success, None otherwise."""
        if isinstance(self.outcome, ParseResult):
            return self.outcome.cursor.pos
        return None


class JSONParser:
    """JSON parser using immutable cursor pattern.

    Design:
    - Immutable cursor prevents infinite loops (no manual guards needed)
    - Failures are outcomes, not exceptions
    - Holds only immutable configuration: safe to share across threads

    Security:
    - Configurable max_source_size prevents DoS via large inputs
    - Default limit: 10 MB
    - Configurable max_nesting_depth prevents stack exhaustion via [[[[...]]]]

    Attributes:
        max_source_size: Maximum allowed source size in characters (default: 10 MB)
        max_nesting_depth: Maximum allowed array/object nesting depth (default: 100)
    """

    __slots__ = ("_max_nesting_depth", "_max_source_size")

    def __init__(
        self,
        *,
        max_source_size: int | None = None,
        max_nesting_depth: int | None = None,
    ) -> None:
        """Initialize parser with optional size and nesting depth limits.

        Args:
            max_source_size: Maximum source size in characters (default: 10 MB).
                            Set to 0 to disable size limit (not recommended).
            max_nesting_depth: Maximum array/object nesting depth (default: 100).
                              Clamped against the interpreter recursion limit.
        """
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )
        self._max_nesting_depth = depth_clamp(
            max_nesting_depth if max_nesting_depth is not None else MAX_DEPTH,
            frames_per_level=_FRAMES_PER_NESTING_LEVEL,
        )

    @property
    def max_source_size(self) -> int:
        """Maximum allowed source size in characters."""
        return self._max_source_size

    @property
    def max_nesting_depth(self) -> int:
        """Maximum allowed array/object nesting depth."""
        return self._max_nesting_depth

    def parse_value(self, source: str) -> ParseReport:
        """Parse one JSON value from the start of source.

        Leading and trailing whitespace around the value is consumed.
        Anything after that is left alone and shows up as
        ``consumed_length < len(source)``.

        Args:
            source: JSON text

        Returns:
            ParseReport wrapping the dispatcher outcome

        Raises:
            ValueError: If source exceeds max_source_size (DoS prevention)

        Example:
            >>> report = JSONParser().parse_value('{"x": ["a", 1.01e-1]} ')
            >>> report.status
            <ParseStatus.VALID: 'valid'>
            >>> report.consumed_length
            22
        """
        if self._max_source_size > 0 and len(source) > self._max_source_size:
            msg = (
                f"Source size ({len(source):,} characters) exceeds maximum "
                f"({self._max_source_size:,} characters). "
                "Configure max_source_size in JSONParser constructor to increase limit."
            )
            raise ValueError(msg)

        logger.debug("Parsing JSON value from %d characters", len(source))

        context = ParseContext(max_nesting_depth=self._max_nesting_depth)
        report = ParseReport(parse_value(Cursor(source, 0), context))

        logger.debug(
            "Parse finished: status=%s consumed=%s", report.status, report.consumed_length
        )
        return report
