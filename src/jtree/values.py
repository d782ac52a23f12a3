"""
Tree representation of a parsed JSON document.

Each JSON production maps to one frozen variant class. A parsed tree is built
in a single parse call and owns all of its children; nothing is shared or
mutated afterwards.
"""

import math
import struct
from dataclasses import dataclass
from typing import TypeAlias


def float32(x: float) -> float:
    """
    Rounds a Python float to the nearest IEEE-754 binary32 value.

    Magnitudes beyond the binary32 range become a signed infinity.
    """
    try:
        return struct.unpack("<f", struct.pack("<f", x))[0]
    except OverflowError:
        return math.copysign(math.inf, x)


@dataclass(frozen=True, slots=True)
class Null:
    """JSON ``null``."""


@dataclass(frozen=True, slots=True)
class Bool:
    """JSON ``true`` or ``false``."""

    value: bool


@dataclass(frozen=True, slots=True)
class String:
    """Quoted text with every escape sequence already resolved."""

    value: str


@dataclass(frozen=True, slots=True)
class Number:
    """
    JSON number approximated as a 32-bit float.

    The stored value is always representable in binary32; construct it
    through ``float32`` when building expected trees by hand.
    """

    value: float


@dataclass(frozen=True, slots=True)
class Array:
    """Ordered sequence of values."""

    items: tuple["Value", ...] = ()


@dataclass(frozen=True, slots=True)
class Object:
    """
    Ordered key/value pairs.

    Duplicate keys are kept as separate pairs in source order. Keys are
    produced by the string production, so in a parsed tree they are always
    ``String`` instances even though the slot accepts any value.
    """

    pairs: tuple[tuple["Value", "Value"], ...] = ()

    def keys(self) -> list["Value"]:
        return [key for key, _ in self.pairs]

    def get_all(self, key: str) -> list["Value"]:
        """Returns every value stored under ``key``, in source order."""
        return [
            value
            for candidate, value in self.pairs
            if isinstance(candidate, String) and candidate.value == key
        ]


Value: TypeAlias = Null | Bool | String | Number | Array | Object

__all__ = [
    "Array",
    "Bool",
    "Null",
    "Number",
    "Object",
    "String",
    "Value",
    "float32",
]
