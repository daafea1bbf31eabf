"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        3000-3009: Cursor and top-level value errors
        3010-3019: String literal errors
        3020-3029: Number errors
        3030-3039: Array errors
        3040-3049: Object errors
        3050-3059: Document-level errors (nesting depth, trailing content)
    """

    # Cursor and top-level value errors (3000-3009)
    UNEXPECTED_EOF = 3001
    VALUE_UNRECOGNIZED = 3002

    # String literal errors (3010-3019)
    STRING_UNTERMINATED = 3010
    STRING_UNICODE_ESCAPE_TRUNCATED = 3011
    STRING_UNICODE_ESCAPE_INVALID = 3012

    # Number errors (3020-3029)
    NUMBER_FRACTION_DIGIT_REQUIRED = 3020

    # Array errors (3030-3039)
    ARRAY_UNTERMINATED = 3030
    ARRAY_MISSING_COMMA = 3031
    ARRAY_NON_VALUE = 3032

    # Object errors (3040-3049)
    OBJECT_UNTERMINATED = 3040
    OBJECT_MISSING_COMMA = 3041
    OBJECT_KEY_NOT_STRING = 3042
    OBJECT_MISSING_COLON = 3043
    OBJECT_NON_VALUE = 3044

    # Document-level errors (3050-3059)
    PARSE_NESTING_DEPTH_EXCEEDED = 3050
    TRAILING_CONTENT = 3051


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes. For multi-byte UTF-8 characters, character offset differs
        from byte offset.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, line is
                less than 1 (lines are 1-indexed), or column is less than 1
                (columns are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Grammar rules attach a Diagnostic
    to every invalid outcome so callers get a stable code in addition to
    the fixed human-readable message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None for rule-level failures, which do not
            report a position)
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    help_url: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self, source: str | None = None) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output. With the
        JSON source and a span, the output includes the offending line.

        Example output:
            error[ARRAY_NON_VALUE]: non-value in array
              = help: Remove the trailing comma or add a value after it
              = note: see https://www.rfc-editor.org/rfc/rfc8259#section-5

        Args:
            source: JSON text the diagnostic refers to (optional)

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self, source)
