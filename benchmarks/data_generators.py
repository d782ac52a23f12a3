"""
Test data generators for parsing benchmarks.

Creates JSON documents of different shapes:
- small and large objects
- long arrays of mixed scalars
- nesting close to the default depth bound
- string-heavy content with escape sequences
- number-heavy content exercising fractions and exponents

Generation is seeded so every run parses the same documents.
"""

import json
import random
import string
from typing import Any

_SEED = 8259
_ESCAPE_PROBABILITY = 0.3
# Escapes the reader resolves; "\/" is not part of its grammar.
_ESCAPES = ['\\"', "\\\\", "\\b", "\\f", "\\n", "\\r", "\\t"]

DATA_TYPES = (
    "small_object",
    "large_object",
    "mixed_array",
    "nested_structure",
    "string_heavy",
    "number_heavy",
)


def generate_test_data(data_type: str) -> str:
    """Generates JSON test data based on specified type."""
    generators = {
        "small_object": _generate_small_object,
        "large_object": _generate_large_object,
        "mixed_array": _generate_mixed_array,
        "nested_structure": _generate_nested_structure,
        "string_heavy": _generate_string_heavy,
        "number_heavy": _generate_number_heavy,
    }

    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    return generators[data_type](random.Random(_SEED))


def _generate_small_object(rng: random.Random) -> str:
    """Generates a small JSON object (< 1KB) with basic key-value pairs."""
    data = {
        "id": 12345,
        "name": "Alice Johnson",
        "email": "alice@example.com",
        "active": True,
        "balance": 1234.56,
        "tags": ["admin", "beta"],
        "metadata": {"created": "2024-01-15T10:30:00Z", "source": "api"},
    }
    return json.dumps(data)


def _generate_large_object(rng: random.Random) -> str:
    """Generates a large JSON object (> 10KB) of records."""
    data = {
        "account": _random_string(rng, 12),
        "transactions": [
            {
                "id": f"txn_{i:06d}",
                "amount": round(rng.uniform(1.0, 1000.0), 2),
                "currency": rng.choice(["USD", "EUR", "GBP", "JPY"]),
                "description": f"Payment for {_random_string(rng, 20)}",
                "settled": rng.choice([True, False]),
                "refund": None,
            }
            for i in range(80)
        ],
    }
    return json.dumps(data, indent=2)


def _generate_mixed_array(rng: random.Random) -> str:
    """Generates a long array with mixed scalar and object elements."""
    array: list[Any] = []
    for i in range(500):
        kind = rng.randrange(6)
        if kind == 0:
            array.append(rng.randint(-1000, 1000))
        elif kind == 1:
            array.append(round(rng.uniform(-100.0, 100.0), 3))
        elif kind == 2:
            array.append(_random_string(rng, rng.randint(5, 30)))
        elif kind == 3:
            array.append(rng.choice([True, False]))
        elif kind == 4:
            array.append(None)
        else:
            array.append({"index": i, "value": _random_string(rng, 10)})
    return json.dumps(array)


def _generate_nested_structure(rng: random.Random) -> str:
    """Generates a tree 6 levels deep with fan-out at each level."""

    def create_nested(depth: int) -> dict[str, Any]:
        if depth <= 0:
            return {"value": _random_string(rng, 10)}
        return {
            "level": depth,
            "items": [create_nested(depth - 1) for _ in range(3)],
        }

    return json.dumps(create_nested(6))


def _generate_string_heavy(rng: random.Random) -> str:
    """Generates a JSON document dominated by escaped strings."""

    def escaped_string() -> str:
        chars = []
        for _ in range(50):
            if rng.random() < _ESCAPE_PROBABILITY:
                chars.append(rng.choice(_ESCAPES))
            else:
                chars.append(
                    rng.choice(string.ascii_letters + string.digits + " ")
                )
        return '"' + "".join(chars) + '"'

    unicode_escapes = [
        f'"Unicode: \\u{rng.randint(0x00A0, 0x0FFF):04x}"' for _ in range(50)
    ]
    strings = [escaped_string() for _ in range(100)]
    return (
        '{"strings": ['
        + ", ".join(strings)
        + '], "unicode": ['
        + ", ".join(unicode_escapes)
        + "]}"
    )


def _generate_number_heavy(rng: random.Random) -> str:
    """Generates an array of integers, fractions and signed exponents."""
    numbers = []
    for _ in range(1000):
        mantissa = f"{rng.randint(-99999, 99999)}.{rng.randint(0, 999):03d}"
        if rng.random() < 0.5:
            numbers.append(f"{mantissa}e{rng.choice('+-')}{rng.randint(0, 30)}")
        else:
            numbers.append(mantissa)
    return "[" + ", ".join(numbers) + "]"


def _random_string(rng: random.Random, length: int) -> str:
    """Generates a random string of specified length."""
    return "".join(rng.choices(string.ascii_letters, k=length))
