"""pytest-benchmark configuration for obviousjson benchmarks.

Configures benchmark defaults and custom options.

Python 3.13+.
"""

from __future__ import annotations

import pytest


def pytest_benchmark_update_json(config, benchmarks, output_json):  # noqa: ARG001
    """Add obviousjson metadata to benchmark results.

    Args:
        config: pytest config (required by pytest-benchmark hook signature)
        benchmarks: benchmark results (required by pytest-benchmark hook signature)
        output_json: JSON output dict to modify
    """
    output_json["project"] = "obviousjson"
    output_json["python_version"] = "3.13+"


@pytest.fixture(scope="session")
def benchmark_document() -> str:
    """Array of small objects mixing numbers, escaped strings and keywords."""
    escaped = '\\"a string\\" ' + ("\\" + "u00e9") * 2
    element = (
        '{"number": 12345.6789e-12, '
        f'"string": "this is {escaped}", '
        '"flag": true}'
    )
    return "[" + ", ".join([element] * 500) + "]"
