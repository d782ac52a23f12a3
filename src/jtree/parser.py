"""
Recursive descent engine for the JSON grammar.

Every production takes a start offset into the immutable document and returns
the parsed value together with the offset of the unconsumed suffix. Trailing
whitespace after a token is always consumed, so the returned offset points at
the next significant character.

Failures unwind as a private signal. Each production that was in progress
pushes its own context frame on the way out, so the public error ends up
holding the whole trail from the outermost attempt to the offending
character.
"""

import math
import re
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import NoReturn, TypeAlias

from ._profiling import ProfileContext
from .errors import ContextFrame
from .errors import ErrorKind
from .errors import JSONParseError
from .errors import NestingDepthError
from .errors import Position
from .values import Array
from .values import Bool
from .values import Null
from .values import Number
from .values import Object
from .values import String
from .values import Value
from .values import float32

DEFAULT_MAX_DEPTH = 256

WHITESPACE = frozenset(" \t\n\r")
DIGITS = frozenset("0123456789")
HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
ESCAPES = {
    '"': '"',
    "\\": "\\",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

_NUMBER_START = frozenset("-0123456789")
# Exponents this long already overflow or underflow a 32-bit float.
_MAX_EXPONENT_DIGITS = 4
_STRING_SPECIAL = re.compile(r'["\\]')

Production: TypeAlias = Callable[["JsonParser", Position], tuple[Value, Position]]


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures parsing behavior with immutable settings.

    ``max_depth`` bounds array/object nesting. ``strict`` rejects any text
    left over after the parsed value instead of silently ignoring it.
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    strict: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.strict, bool):
            raise TypeError("strict must be a boolean")
        if isinstance(self.max_depth, bool) or not isinstance(
            self.max_depth, int
        ):
            raise TypeError("max_depth must be an integer")
        if self.max_depth < 1:
            raise ValueError("max_depth must be a positive integer")


class _Failure(Exception):
    """Unwinding signal; frames are collected innermost first."""

    def __init__(self, frame: ContextFrame) -> None:
        super().__init__(frame)
        self.frames = [frame]

    def push(self, frame: ContextFrame) -> None:
        self.frames.append(frame)

    def trail(self) -> tuple[ContextFrame, ...]:
        return tuple(reversed(self.frames))


def _parse_exponent(signed_digits: str) -> int:
    sign = -1 if signed_digits[0] == "-" else 1
    digits = signed_digits[1:].lstrip("0") or "0"
    if len(digits) > _MAX_EXPONENT_DIGITS:
        return sign * 10**_MAX_EXPONENT_DIGITS
    return sign * int(digits)


def _pow10(exponent: int) -> float:
    try:
        return float32(10.0**exponent)
    except OverflowError:
        return math.inf


def _to_number(mantissa: str, exponent: int | None) -> float:
    """
    Converts a validated number literal to a 32-bit float.

    The mantissa is rounded on its own and then scaled by a separately
    rounded power of ten, so the exponent is applied as a float32
    multiplication rather than as part of the decimal literal.
    """
    number = float32(float(mantissa))
    if exponent is not None:
        number = float32(number * _pow10(exponent))
    return number


class JsonParser:
    """
    Grammar-driven parser over one document.

    The production methods can be called individually to embed a single
    JSON production in a larger grammar; wrap the call in ``run`` to turn
    a failure into a ``JSONParseError``. All state is local to the
    instance, and an instance should only be used from one thread.
    """

    def __init__(self, text: str, config: ParseConfig | None = None) -> None:
        self.text = text
        self.length = len(text)
        self.config = config or ParseConfig()
        self._depth = 0
        self._innermost_container: Position = 0

    def run(
        self, production: Production, pos: Position = 0
    ) -> tuple[Value, Position]:
        """
        Applies ``production`` at ``pos`` and returns (value, end offset).

        Raises ``JSONParseError`` carrying the full context trail, or
        ``NestingDepthError`` when nesting exceeds the configured bound.
        """
        try:
            value, end = production(self, pos)
            if self.config.strict and end < self.length:
                self._fail(end, ErrorKind.EXTRA_DATA, "extra data")
        except _Failure as failure:
            trail = failure.trail()
            if trail[-1].kind is ErrorKind.DEPTH:
                raise NestingDepthError(self.text, trail) from None
            raise JSONParseError(self.text, trail) from None
        except RecursionError:
            frame = ContextFrame(
                self._innermost_container,
                ErrorKind.DEPTH,
                "recursion limit reached while nesting",
            )
            raise NestingDepthError(self.text, (frame,)) from None
        return value, end

    def skip_whitespace(self, pos: Position) -> Position:
        """Returns the first offset at or after ``pos`` that is not blank."""
        text = self.text
        length = self.length
        while pos < length and text[pos] in WHITESPACE:
            pos += 1
        return pos

    def parse_value(self, pos: Position) -> tuple[Value, Position]:
        """Dispatches to the first production whose opener matches."""
        start = self.skip_whitespace(pos)
        char = self.text[start : start + 1]
        for starters, production in _PRODUCTIONS:
            if char in starters:
                return production(self, start)
        self._fail(start, ErrorKind.VALUE, "expected value")

    def parse_null(self, pos: Position) -> tuple[Value, Position]:
        start = self.skip_whitespace(pos)
        with ProfileContext("null"):
            if not self.text.startswith("null", start):
                self._fail(start, ErrorKind.NULL, "expected 'null'")
        return Null(), self.skip_whitespace(start + 4)

    def parse_bool(self, pos: Position) -> tuple[Value, Position]:
        start = self.skip_whitespace(pos)
        with ProfileContext("bool"):
            if self.text.startswith("true", start):
                return Bool(True), self.skip_whitespace(start + 4)
            if self.text.startswith("false", start):
                return Bool(False), self.skip_whitespace(start + 5)
            self._fail(start, ErrorKind.BOOL, "expected 'true' or 'false'")

    def parse_string(self, pos: Position) -> tuple[Value, Position]:
        """
        Parses quoted text, resolving escape sequences.

        Whitespace is skipped around the quotes only; everything between
        them other than an escape is taken verbatim.
        """
        quote = self.skip_whitespace(pos)
        text = self.text
        if text[quote : quote + 1] != '"':
            self._fail(quote, ErrorKind.STRING, "expected '\"'")

        with ProfileContext("string"), self._context(quote, ErrorKind.STRING):
            chunks: list[str] = []
            i = quote + 1
            while True:
                special = _STRING_SPECIAL.search(text, i)
                if special is None:
                    self._fail(
                        quote,
                        ErrorKind.UNTERMINATED_STRING,
                        "unterminated string",
                    )
                if special.start() > i:
                    chunks.append(text[i : special.start()])
                i = special.start()
                if text[i] == '"':
                    break
                char, i = self._parse_escape(i, quote)
                chunks.append(char)

        return String("".join(chunks)), self.skip_whitespace(i + 1)

    def _parse_escape(
        self, backslash: Position, quote: Position
    ) -> tuple[str, Position]:
        if backslash + 1 >= self.length:
            self._fail(
                quote, ErrorKind.UNTERMINATED_STRING, "unterminated string"
            )

        introducer = self.text[backslash + 1]
        if introducer in ESCAPES:
            return ESCAPES[introducer], backslash + 2
        if introducer == "u":
            return self._parse_unicode_escape(backslash)
        self._fail(
            backslash,
            ErrorKind.ESCAPE,
            f"invalid escape sequence '\\{introducer}'",
        )

    def _parse_unicode_escape(
        self, backslash: Position
    ) -> tuple[str, Position]:
        digits = self.text[backslash + 2 : backslash + 6]
        if len(digits) < 4 or not all(d in HEX_DIGITS for d in digits):
            self._fail(
                backslash,
                ErrorKind.UNICODE_ESCAPE,
                "expected four hex digits after '\\u'",
            )

        code_point = int(digits, 16)
        if 0xD800 <= code_point <= 0xDFFF:
            self._fail(
                backslash,
                ErrorKind.UNICODE_ESCAPE,
                f"'\\u{digits}' is a surrogate half, not a unicode scalar value",
            )
        return chr(code_point), backslash + 6

    def _skip_digits(self, pos: Position) -> Position:
        text = self.text
        length = self.length
        while pos < length and text[pos] in DIGITS:
            pos += 1
        return pos

    def parse_number(self, pos: Position) -> tuple[Value, Position]:
        """
        Parses a number literal.

        Grammar: optional ``-``, an integer part that may not begin with two
        zeros, an optional ``.`` with zero or more digits, and an optional
        ``e``/``E`` exponent whose sign is mandatory.
        """
        start = self.skip_whitespace(pos)
        text = self.text
        if text[start : start + 1] not in _NUMBER_START:
            self._fail(start, ErrorKind.NUMBER, "expected number")

        with ProfileContext("number"), self._context(start, ErrorKind.NUMBER):
            i = start + 1 if text[start] == "-" else start
            if text[i : i + 1] not in DIGITS:
                self._fail(i, ErrorKind.DIGIT, "expected digit")
            if text[i] == "0" and text[i + 1 : i + 2] == "0":
                self._fail(
                    i + 1,
                    ErrorKind.LEADING_ZERO,
                    "a leading zero may not be followed by another zero",
                )
            i = self._skip_digits(i)

            if text[i : i + 1] == ".":
                i = self._skip_digits(i + 1)
            mantissa_end = i

            exponent = None
            if text[i : i + 1] in ("e", "E"):
                i += 1
                if text[i : i + 1] not in ("+", "-"):
                    self._fail(
                        i, ErrorKind.EXPONENT, "expected '+' or '-' in exponent"
                    )
                digits_start = i + 1
                i = self._skip_digits(digits_start)
                if i == digits_start:
                    self._fail(i, ErrorKind.DIGIT, "expected exponent digits")
                exponent = _parse_exponent(text[digits_start - 1 : i])

            number = _to_number(text[start:mantissa_end], exponent)

        return Number(number), self.skip_whitespace(i)

    def parse_array(self, pos: Position) -> tuple[Value, Position]:
        """Parses ``[`` values ``]`` with one optional trailing comma."""
        start = self.skip_whitespace(pos)
        text = self.text
        if text[start : start + 1] != "[":
            self._fail(start, ErrorKind.ARRAY, "expected '['")

        with (
            ProfileContext("array"),
            self._context(start, ErrorKind.ARRAY),
            self._nested(start),
        ):
            items: list[Value] = []
            i = self.skip_whitespace(start + 1)
            after_comma = True
            if text[i : i + 1] == ",":
                # lone comma in an otherwise empty array
                i = self.skip_whitespace(i + 1)
                if text[i : i + 1] != "]":
                    self._fail(i, ErrorKind.CHAR, "expected ']'")
            while i < self.length and text[i] != "]":
                item, i = self.parse_value(i)
                items.append(item)
                after_comma = text[i : i + 1] == ","
                if not after_comma:
                    break
                i = self.skip_whitespace(i + 1)

            if text[i : i + 1] != "]":
                expected = "value" if after_comma else "','"
                self._fail(i, ErrorKind.CHAR, f"expected {expected} or ']'")

        return Array(tuple(items)), self.skip_whitespace(i + 1)

    def parse_object(self, pos: Position) -> tuple[Value, Position]:
        """
        Parses ``{`` key ``:`` value pairs ``}`` with one optional trailing
        comma.

        Keys come from the string production; duplicates are kept in order.
        """
        start = self.skip_whitespace(pos)
        text = self.text
        if text[start : start + 1] != "{":
            self._fail(start, ErrorKind.OBJECT, "expected '{'")

        with (
            ProfileContext("object"),
            self._context(start, ErrorKind.OBJECT),
            self._nested(start),
        ):
            pairs: list[tuple[Value, Value]] = []
            i = self.skip_whitespace(start + 1)
            after_comma = True
            if text[i : i + 1] == ",":
                i = self.skip_whitespace(i + 1)
                if text[i : i + 1] != "}":
                    self._fail(i, ErrorKind.CHAR, "expected '}'")
            while i < self.length and text[i] != "}":
                key, i = self.parse_string(i)
                if text[i : i + 1] != ":":
                    self._fail(i, ErrorKind.CHAR, "expected ':'")
                value, i = self.parse_value(i + 1)
                pairs.append((key, value))
                after_comma = text[i : i + 1] == ","
                if not after_comma:
                    break
                i = self.skip_whitespace(i + 1)

            if text[i : i + 1] != "}":
                expected = "'\"'" if after_comma else "','"
                self._fail(i, ErrorKind.CHAR, f"expected {expected} or '}}'")

        return Object(tuple(pairs)), self.skip_whitespace(i + 1)

    @contextmanager
    def _context(self, pos: Position, kind: ErrorKind) -> Iterator[None]:
        try:
            yield
        except _Failure as failure:
            failure.push(ContextFrame(pos, kind))
            raise

    @contextmanager
    def _nested(self, pos: Position) -> Iterator[None]:
        if self._depth >= self.config.max_depth:
            self._fail(
                pos,
                ErrorKind.DEPTH,
                f"maximum nesting depth of {self.config.max_depth} exceeded",
            )
        self._depth += 1
        self._innermost_container = pos
        try:
            yield
        finally:
            self._depth -= 1

    def _fail(self, pos: Position, kind: ErrorKind, message: str) -> NoReturn:
        raise _Failure(ContextFrame(pos, kind, message))


# Attempt order for the dispatcher; the opening character sets are disjoint.
_PRODUCTIONS: tuple[tuple[frozenset[str], Production], ...] = (
    (frozenset("n"), JsonParser.parse_null),
    (frozenset("tf"), JsonParser.parse_bool),
    (frozenset('"'), JsonParser.parse_string),
    (frozenset("["), JsonParser.parse_array),
    (_NUMBER_START, JsonParser.parse_number),
    (frozenset("{"), JsonParser.parse_object),
)

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "JsonParser",
    "ParseConfig",
]
