"""JSON parser module.

This module provides the main JsonParser class and related parsing
utilities organized into focused submodules.

Module Organization:
- core.py: Main JsonParser class (top-level contract, limits, logging)
- primitives.py: String/escape decoder and keyword literals
- numbers.py: Number decoder and exactness policy
- whitespace.py: Whitespace skipping and leading BOM handling
- rules.py: Value dispatch and array/object state machines

Public API:
    JsonParser: Main parser class
    ParseContext: Parse context for depth tracking (advanced usage)
"""

from jsonlexengine.syntax.parser.core import JsonParser
from jsonlexengine.syntax.parser.rules import ParseContext

__all__ = ["JsonParser", "ParseContext"]
