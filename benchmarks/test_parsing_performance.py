"""
Parsing performance benchmarks comparing jtree against standard libraries.

Compares parsing speed across the generated document shapes:
- Standard library json
- orjson (Rust-backed)
- ujson (C-backed)
- jtree (this project)

Run with ``pytest benchmarks --benchmark-group-by=group``.
"""

import json
from collections.abc import Callable
from typing import Any

import orjson
import pytest
import ujson  # type: ignore[import-untyped]

import jtree
from benchmarks.data_generators import DATA_TYPES
from benchmarks.data_generators import generate_test_data

PARSERS: list[tuple[str, Callable[[Any], Any]]] = [
    ("stdlib_json", json.loads),
    ("orjson", orjson.loads),
    ("ujson", ujson.loads),
    ("jtree", jtree.parse),
]


@pytest.mark.parametrize("data_type", DATA_TYPES)
@pytest.mark.parametrize("parser,parse_func", PARSERS)
def test_parsing_speed(
    benchmark: Any,
    parser: str,
    parse_func: Callable[[Any], Any],
    data_type: str,
) -> None:
    """Benchmarks one reader on one document shape."""
    benchmark.group = data_type
    test_data = generate_test_data(data_type)

    if parser == "orjson":
        # orjson is fastest on bytes
        result = benchmark(parse_func, test_data.encode("utf-8"))
    else:
        result = benchmark(parse_func, test_data)

    assert result is not None


@pytest.mark.parametrize("data_type", DATA_TYPES)
def test_jtree_strict_overhead(benchmark: Any, data_type: str) -> None:
    """Benchmarks strict mode, which only adds the trailing-data check."""
    benchmark.group = f"{data_type}-strict"
    test_data = generate_test_data(data_type)

    result = benchmark(jtree.parse, test_data, strict=True)

    assert isinstance(result, jtree.Array | jtree.Object)


@pytest.mark.parametrize("data_type", DATA_TYPES)
def test_jtree_matches_stdlib_shape(data_type: str) -> None:
    """
    Sanity-checks that every generated document is accepted by both readers
    with the same top-level container size.
    """
    test_data = generate_test_data(data_type)
    expected = json.loads(test_data)
    result = jtree.parse(test_data, strict=True)

    if isinstance(expected, list):
        assert isinstance(result, jtree.Array)
        assert len(result.items) == len(expected)
    else:
        assert isinstance(result, jtree.Object)
        assert len(result.pairs) == len(expected)
