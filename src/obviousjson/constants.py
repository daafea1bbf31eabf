"""Shared constants for obviousjson.

This module provides centralized configuration constants used across
the syntax and core packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for recursive descent parsing
- Input limits: DoS prevention via size constraints
- Grammar: Character classes shared by several grammar rules

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    "DEPTH_RESERVE_FRAMES",
    # Input limits
    "MAX_SOURCE_SIZE",
    # Grammar
    "WHITESPACE_CHARS",
    "ASCII_DIGITS",
    "HEX_DIGITS",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================
#
# Arrays and objects recurse through the value dispatcher. Every nesting
# level costs two Python frames (dispatcher + container rule), so the limit
# is also clamped against sys.getrecursionlimit() at parser construction.
#
# 100 levels is far beyond any document produced by a real serializer and
# leaves a comfortable margin below the default recursion limit of 1000.
#
# ============================================================================

# Maximum nesting depth of arrays and objects.
MAX_DEPTH: int = 100

# Stack frames kept free for the caller when clamping against the
# interpreter recursion limit.
DEPTH_RESERVE_FRAMES: int = 50

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in characters (10 MB).
# Prevents DoS attacks via unbounded memory allocation from large documents.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# GRAMMAR
# ============================================================================

# Insignificant whitespace per RFC 8259: space, tab, line feed, carriage return.
WHITESPACE_CHARS: frozenset[str] = frozenset(" \t\n\r")

# ASCII digits only. str.isdigit() accepts Unicode digits like ² or ³.
ASCII_DIGITS: str = "0123456789"

# Valid hexadecimal digit characters for \uXXXX escapes.
HEX_DIGITS: str = "0123456789abcdefABCDEF"
