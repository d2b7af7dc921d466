"""Performance benchmarks for JSONLexEngine.

Benchmarks use pytest-benchmark to measure and track performance of critical operations.
Prevents performance regressions in the parser and the Python conversion pass.

Python 3.13+.
"""

from __future__ import annotations

__all__: list[str] = []
