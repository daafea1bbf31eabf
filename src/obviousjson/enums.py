"""Enumerations for obviousjson type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class ParseStatus(StrEnum):
    """Tri-state status of a single grammar rule attempt.

    StrEnum provides automatic string conversion: str(ParseStatus.VALID) == "valid"
    """

    UNRECOGNIZED = "unrecognized"
    """Rule does not apply at this position; caller tries the next alternative."""

    INVALID = "invalid"
    """Rule applies but the input is malformed; the whole parse is aborted."""

    VALID = "valid"
    """Rule matched and produced a value plus an advanced cursor."""


__all__ = [
    "ParseStatus",
]
