"""pytest-benchmark configuration for JSONLexEngine benchmarks.

Configures benchmark defaults and custom options.

Python 3.13+.
"""

from __future__ import annotations

import pytest


def pytest_benchmark_update_json(config, benchmarks, output_json):  # noqa: ARG001
    """Add JSONLexEngine metadata to benchmark results.

    Args:
        config: pytest config (required by pytest-benchmark hook signature)
        benchmarks: benchmark results (required by pytest-benchmark hook signature)
        output_json: JSON output dict to modify
    """
    output_json["project"] = "JSONLexEngine"
    output_json["python_version"] = "3.13+"


@pytest.fixture(scope="session")
def benchmark_config():
    """Configure pytest-benchmark parameters."""
    return {
        "min_rounds": 5,
        "min_time": 0.000005,  # 5 us per round
        "max_time": 1.0,
        "warmup": True,
    }


@pytest.fixture(scope="session")
def large_document() -> str:
    """Array of 1000 small records (roughly 60 KB)."""
    records = [
        f'{{"id": {i}, "name": "item-{i}", "price": {i}.25, "tags": ["a", "b"], "ok": true}}'
        for i in range(1000)
    ]
    return "[" + ",\n".join(records) + "]"
