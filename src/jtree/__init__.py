"""
Grammar-faithful JSON reader producing an immutable value tree.

Parse failures carry a trail of position-annotated context frames that render
as a line/column pointer diagnostic. Besides the full-document ``parse``, one
entrypoint per production (``parse_null`` ... ``parse_object``) is provided
for focused testing or for embedding a single production in a larger grammar.

Text left over after a successful parse is ignored unless ``strict=True`` is
passed.
"""

from typing import IO
from typing import Any

from ._profiling import ProductionStats
from ._profiling import clear_production_stats
from ._profiling import get_production_stats
from .errors import ContextFrame
from .errors import ErrorKind
from .errors import JSONParseError
from .errors import NestingDepthError
from .errors import render_error
from .parser import DEFAULT_MAX_DEPTH
from .parser import JsonParser
from .parser import ParseConfig
from .parser import Production
from .values import Array
from .values import Bool
from .values import Null
from .values import Number
from .values import Object
from .values import String
from .values import Value
from .values import float32

__version__ = "0.1.0"


def _parse_with(s: str, production: Production, kwargs: Any) -> Value:
    if not isinstance(s, str):
        raise TypeError(f"the JSON text must be str, not {type(s).__name__}")

    parser = JsonParser(s, ParseConfig(**kwargs))
    value, _ = parser.run(production)
    return value


def parse(s: str, **kwargs: Any) -> Value:
    """
    Parses any JSON value from the start of ``s``.

    Keyword arguments build a ``ParseConfig``. Raises ``JSONParseError`` when
    no value can be read.
    """
    return _parse_with(s, JsonParser.parse_value, kwargs)


def parse_null(s: str, **kwargs: Any) -> Value:
    """Parses ``null``."""
    return _parse_with(s, JsonParser.parse_null, kwargs)


def parse_bool(s: str, **kwargs: Any) -> Value:
    """Parses ``true`` or ``false``."""
    return _parse_with(s, JsonParser.parse_bool, kwargs)


def parse_string(s: str, **kwargs: Any) -> Value:
    """Parses a quoted string, resolving escapes."""
    return _parse_with(s, JsonParser.parse_string, kwargs)


def parse_array(s: str, **kwargs: Any) -> Value:
    return _parse_with(s, JsonParser.parse_array, kwargs)


def parse_number(s: str, **kwargs: Any) -> Value:
    """Parses a number literal into a 32-bit float ``Number``."""
    return _parse_with(s, JsonParser.parse_number, kwargs)


def parse_object(s: str, **kwargs: Any) -> Value:
    return _parse_with(s, JsonParser.parse_object, kwargs)


def load(fp: IO[str], **kwargs: Any) -> Value:
    """
    Parses a JSON value from a text file-like object.
    """
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    return parse(fp.read(), **kwargs)


__all__ = [
    "DEFAULT_MAX_DEPTH",
    "Array",
    "Bool",
    "ContextFrame",
    "ErrorKind",
    "JSONParseError",
    "JsonParser",
    "NestingDepthError",
    "Null",
    "Number",
    "Object",
    "ParseConfig",
    "ProductionStats",
    "String",
    "Value",
    "clear_production_stats",
    "float32",
    "get_production_stats",
    "load",
    "parse",
    "parse_array",
    "parse_bool",
    "parse_null",
    "parse_number",
    "parse_object",
    "parse_string",
    "render_error",
]
