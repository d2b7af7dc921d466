"""Fuzz testing infrastructure for JSONLexEngine.

This package contains:
- test_parser_property: Intensive property tests for the parser (totality,
  round trips against standard renderings, number decoding, depth limits)

Python 3.13+.
"""
