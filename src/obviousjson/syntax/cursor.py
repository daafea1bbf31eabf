"""Immutable cursor and tri-state parse outcomes.

Implements the immutable cursor pattern for zero-`None` parsing.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - Branching is free: every advance() returns a NEW cursor, so a rule
      that backtracks simply keeps using the cursor it was given
    - EOF is a state (is_eof / is_valid), not a return value
    - Line:column computed on-demand (O(n) only for errors)

Outcomes:
    Every grammar rule returns exactly one of:

    - ``UNRECOGNIZED``: the rule does not apply here; try the next one
    - ``ParseInvalid``: the rule applies but the input is malformed
    - ``ParseResult``: the rule matched; carries value and new cursor

    Outcomes are a closed set of dataclasses meant for ``match``:

        match outcome:
            case ParseResult(value=value, cursor=cursor): ...
            case ParseInvalid(): return outcome
            case Unrecognized(): ...

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
"""

from dataclasses import dataclass
from typing import Final

from obviousjson.diagnostics import Diagnostic, ErrorTemplate
from obviousjson.enums import ParseStatus

__all__ = [
    "UNRECOGNIZED",
    "Cursor",
    "ParseInvalid",
    "ParseOutcome",
    "ParseResult",
    "Unrecognized",
]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Key Design Decisions:
        1. Frozen dataclass - Immutability enforced by Python
        2. Slots - Memory efficiency (one cursor per rule attempt)
        3. Simple position - Just an integer offset into shared text
        4. EOF is a property - Not a return value
        5. head raises - No None handling needed!

    Example:
        >>> cursor = Cursor('[1, 2]', 0)
        >>> cursor.head
        '['
        >>> new_cursor = cursor.advance()
        >>> new_cursor.head
        '1'
        >>> cursor.head  # Original unchanged (immutability)
        '['
        >>> Cursor("[]", 2).is_valid
        False
        >>> Cursor("[]", 2).head
        Traceback (most recent call last):
        ...
        EOFError: Unexpected EOF at position 2
    """

    source: str
    pos: int

    @property
    def is_valid(self) -> bool:
        """True while a character can be read at the current position."""
        return self.pos < len(self.source)

    @property
    def is_eof(self) -> bool:
        """Check if at end of input.

        Note: Use this in while loops: `while not cursor.is_eof:`
        """
        return self.pos >= len(self.source)

    @property
    def head(self) -> str:
        """Get current character.

        Returns:
            Current character at position

        Raises:
            EOFError: If at end of input

        Design Note:
            Reading past the end is a programming error in a grammar rule,
            so it raises instead of returning None. Rules check is_eof
            (or is_valid) first.
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.unexpected_eof(self.pos)
            raise EOFError(diagnostic.message)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Args:
            offset: Offset from current position (0 = current, 1 = next)

        Returns:
            Character at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def at_literal(self, literal: str) -> bool:
        """Check whether the source continues with ``literal``.

        Compares the whole literal only. Nothing after it is inspected,
        so ``Cursor("truex", 0).at_literal("true")`` is True.

        Args:
            literal: Exact text to compare against

        Returns:
            True on an exact match, False on mismatch or if fewer than
            len(literal) characters remain

        Example:
            >>> Cursor("null]", 0).at_literal("null")
            True
            >>> Cursor("nul", 0).at_literal("null")
            False
        """
        return self.source.startswith(literal, self.pos)

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions.

        Args:
            count: Number of positions to advance (default: 1)

        Returns:
            New Cursor instance at new position (original unchanged).
            The position is clamped to the source length.

        Example:
            >>> cursor = Cursor("hello", 0)
            >>> cursor2 = cursor.advance()
            >>> cursor.pos  # Original unchanged
            0
            >>> cursor2.pos  # New cursor advanced
            1
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def take(self, count: int) -> tuple[str, "Cursor"]:
        """Consume up to count characters.

        Args:
            count: Number of characters to consume

        Returns:
            (consumed text, advanced cursor). The text may be shorter than
            count near EOF.

        Example:
            >>> text, cursor = Cursor("00e9rest", 0).take(4)
            >>> text, cursor.pos
            ('00e9', 4)
        """
        return self.slice_ahead(count), self.advance(count)

    def branch(self) -> "Cursor":
        """Return an independent cursor at the same position.

        Cursors are values, so the branch shares the source text and
        nothing else. Advancing either one never affects the other.
        """
        return Cursor(self.source, self.pos)

    def slice_ahead(self, n: int) -> str:
        """Get next n characters without advancing cursor.

        Returns:
            String of up to n characters starting at current position.
            May return fewer characters if near EOF.

        Example:
            >>> cursor = Cursor("hello", 0)
            >>> cursor.slice_ahead(3)
            'hel'
            >>> cursor.slice_ahead(10)  # More than available
            'hello'
        """
        return self.source[self.pos : self.pos + n]

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Performance:
            O(n) where n = current position
            Only call for error reporting, not during normal parsing!

        Example:
            >>> source = '{\\n  "a": 1\\n} x'
            >>> Cursor(source, 0).compute_line_col()
            (1, 1)
            >>> Cursor(source, 4).compute_line_col()
            (2, 3)
        """
        line = self.source.count("\n", 0, self.pos) + 1
        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1
        return (line, col)


# =============================================================================
# Parse outcomes
# =============================================================================


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Valid outcome: parsed value and new cursor position.

    Type Parameters:
        T: The type of the parsed value

    Design:
        - Generic over result type T
        - Frozen for immutability
        - Contains BOTH parsed value AND new cursor
        - Never carries a message

    Example:
        >>> cursor = Cursor("true", 0)
        >>> result = ParseResult(True, cursor.advance(4))
        >>> result.value
        True
        >>> result.cursor.pos
        4
    """

    value: T
    cursor: Cursor

    @property
    def status(self) -> ParseStatus:
        """Always ParseStatus.VALID."""
        return ParseStatus.VALID


@dataclass(frozen=True, slots=True)
class ParseInvalid:
    """Invalid outcome: the rule applies but the input violates the grammar.

    Carries a Diagnostic with a fixed, rule-specific message. Deliberately
    has no cursor: the failure position is not reported. Callers propagate
    this outcome unchanged and never retry another rule.

    Example:
        >>> invalid = ParseInvalid(ErrorTemplate.array_missing_comma())
        >>> invalid.message
        'missing comma in array'
    """

    diagnostic: Diagnostic

    @property
    def message(self) -> str:
        """Human-readable diagnostic message."""
        return self.diagnostic.message

    @property
    def status(self) -> ParseStatus:
        """Always ParseStatus.INVALID."""
        return ParseStatus.INVALID


@dataclass(frozen=True, slots=True)
class Unrecognized:
    """Unrecognized outcome: the rule does not apply at this position.

    Use the module-level ``UNRECOGNIZED`` instance rather than constructing
    new ones; all instances compare equal.
    """

    @property
    def status(self) -> ParseStatus:
        """Always ParseStatus.UNRECOGNIZED."""
        return ParseStatus.UNRECOGNIZED


UNRECOGNIZED: Final = Unrecognized()

type ParseOutcome[T] = ParseResult[T] | ParseInvalid | Unrecognized
