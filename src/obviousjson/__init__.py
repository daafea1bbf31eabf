"""obviousjson - recursive descent JSON parser with tri-state outcomes.

Every grammar rule reports one of three outcomes: the rule does not apply
(unrecognized), the rule applies but the input is malformed (invalid), or
the rule matched (valid). The public functions below turn those outcomes
into values and exceptions.

Public API:
    parse - Parse JSON text to a Python value
    parsev - Parse JSON text, also reporting the consumed length
    ParsedValue - Result of parsev (length, data)
    JSONParser - Configurable parser returning outcomes instead of raising

Exceptions:
    JSONError - Base exception class
    JSONSyntaxError - Malformed input ("invalid: ...")
    JSONUnrecognizedError - Input does not start with a JSON value
    DepthLimitExceededError - Nesting deeper than the configured limit

Submodules:
    obviousjson.syntax - Cursor, outcome types, grammar rules
    obviousjson.diagnostics - Diagnostic codes, templates, formatter
"""

from .api import ParsedValue, parse, parsev
from .core import DepthLimitExceededError
from .diagnostics import JSONError, JSONSyntaxError, JSONUnrecognizedError
from .syntax import JSONParser, JSONValue

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("obviousjson")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DepthLimitExceededError",
    "JSONError",
    "JSONParser",
    "JSONSyntaxError",
    "JSONUnrecognizedError",
    "JSONValue",
    "ParsedValue",
    "__version__",
    "parse",
    "parsev",
]
