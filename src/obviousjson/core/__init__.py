"""Core utilities shared across the syntax layer and the public API.

By isolating these utilities here, we maintain a clean dependency graph:

    diagnostics <- core <- syntax <- api

Exports:
    DepthLimitExceededError: Exception raised when nesting depth limit exceeded
    depth_clamp: Clamp a nesting limit against the interpreter recursion limit

Python 3.13+.
"""

from .depth_guard import DepthLimitExceededError, depth_clamp

__all__ = ["DepthLimitExceededError", "depth_clamp"]
