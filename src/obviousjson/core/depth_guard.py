"""Depth limiting for recursion protection.

Recursive descent over arrays and objects costs Python stack frames per
nesting level. This module clamps requested nesting limits so that a
deeply nested document produces an invalid outcome instead of a
RecursionError.

Thread-safe: pure functions, no module state.
Python 3.13+.
"""

from __future__ import annotations

import logging
import sys

from obviousjson.constants import DEPTH_RESERVE_FRAMES
from obviousjson.diagnostics import JSONSyntaxError

__all__ = ["DepthLimitExceededError", "depth_clamp"]

logger = logging.getLogger(__name__)


class DepthLimitExceededError(JSONSyntaxError):
    """Raised when a document nests arrays/objects beyond the configured limit.

    This error indicates either:
    - Adversarial input designed to cause stack overflow
    - Unintended deep nesting in generated JSON
    """


def depth_clamp(
    requested_depth: int,
    reserve_frames: int = DEPTH_RESERVE_FRAMES,
    frames_per_level: int = 1,
) -> int:
    """Clamp requested depth against Python recursion limit.

    Validates requested depth against sys.getrecursionlimit() to prevent
    RecursionError on systems with constrained stack limits. Logs warning
    if clamping occurs.

    Args:
        requested_depth: Desired maximum depth
        reserve_frames: Stack frames to reserve for call overhead (default: 50)
        frames_per_level: Stack frames consumed by one level of nesting

    Returns:
        Safe depth value, clamped if necessary

    Example:
        >>> import sys
        >>> sys.setrecursionlimit(200)
        >>> depth_clamp(100)  # OK, within limit
        100
        >>> depth_clamp(500)  # Exceeds limit, clamped to 150
        150
        >>> depth_clamp(100, frames_per_level=2)  # 150 frames / 2
        75
    """
    max_safe_depth = max(
        (sys.getrecursionlimit() - reserve_frames) // frames_per_level, 1
    )
    if requested_depth > max_safe_depth:
        logger.warning(
            "Requested depth %d exceeds Python recursion limit (%d). "
            "Clamping to %d to prevent RecursionError. "
            "Consider increasing sys.setrecursionlimit() if needed.",
            requested_depth,
            sys.getrecursionlimit(),
            max_safe_depth,
        )
        return max_safe_depth
    return requested_depth
