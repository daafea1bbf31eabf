"""JSON parser module.

This module provides the main JSONParser class and the grammar rules it
drives, organized into focused submodules.

Module Organization:
- core.py: JSONParser class, ParseReport
- primitives.py: Leaf rules (strings, numbers, keywords)
- whitespace.py: Whitespace skipping
- rules.py: Arrays, objects and the value dispatcher

Public API:
    JSONParser: Main parser class
    ParseReport: Outcome plus consumed length
    ParseContext: Parse context for depth tracking (advanced usage)
"""

from obviousjson.syntax.parser.core import JSONParser, ParseReport
from obviousjson.syntax.parser.rules import ParseContext

__all__ = ["JSONParser", "ParseContext", "ParseReport"]
