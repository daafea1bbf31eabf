"""Hypothesis strategies for obviousjson property-based testing.

Strategies are organized by domain:

- json_values: Python values that serialize to JSON, and JSON texts
  produced from them by the stdlib encoder

Usage:
    from tests.strategies import json_values, json_texts
    from tests.strategies.json_values import json_whitespace

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - json_texts, json_number_texts
"""

from .json_values import (
    json_leaves,
    json_number_texts,
    json_strings,
    json_texts,
    json_values,
    json_whitespace,
)

__all__ = [
    "json_leaves",
    "json_number_texts",
    "json_strings",
    "json_texts",
    "json_values",
    "json_whitespace",
]
