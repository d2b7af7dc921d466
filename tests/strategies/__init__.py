"""Hypothesis strategies for JSONLexEngine property-based testing.

This package provides reusable strategies for generating test data
across multiple test modules:

- json_values: Python data trees, their JSON text, number literals and
  whitespace runs

Usage:
    from tests.strategies import json_documents, number_literals

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - number_literals, json_documents
"""

from .json_values import (
    JSON_WHITESPACE_CHARS,
    equivalent,
    json_data,
    json_documents,
    json_keys,
    json_scalars,
    json_strings,
    malformed_number_literals,
    number_literals,
    render_json,
    whitespace_runs,
)

__all__ = [
    "JSON_WHITESPACE_CHARS",
    "equivalent",
    "json_data",
    "json_documents",
    "json_keys",
    "json_scalars",
    "json_strings",
    "malformed_number_literals",
    "number_literals",
    "render_json",
    "whitespace_runs",
]
