"""
Parse failures and their diagnostic rendering.

A failure carries the trail of context frames pushed while it unwound, from
the outermost production that was being attempted down to the innermost
reason, together with the original document so offsets can be turned into
line/column pointers.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeAlias

from ._position import LineMap

Position: TypeAlias = int


class ErrorKind(Enum):
    """
    Tags for context frames.

    The first group names the production being attempted; the second names
    the concrete reason a match failed.
    """

    VALUE = "value"
    NULL = "null"
    BOOL = "bool"
    STRING = "string"
    NUMBER = "number"
    ARRAY = "array"
    OBJECT = "object"

    CHAR = "char"
    ESCAPE = "escape"
    UNICODE_ESCAPE = "unicode_escape"
    UNTERMINATED_STRING = "unterminated_string"
    LEADING_ZERO = "leading_zero"
    DIGIT = "digit"
    EXPONENT = "exponent"
    DEPTH = "depth"
    EXTRA_DATA = "extra_data"

    @property
    def is_production(self) -> bool:
        return self in _PRODUCTION_KINDS


_PRODUCTION_KINDS = frozenset(
    {
        ErrorKind.VALUE,
        ErrorKind.NULL,
        ErrorKind.BOOL,
        ErrorKind.STRING,
        ErrorKind.NUMBER,
        ErrorKind.ARRAY,
        ErrorKind.OBJECT,
    }
)


@dataclass(frozen=True, slots=True)
class ContextFrame:
    """One step of a failure trail: where it happened and what was going on."""

    pos: Position
    kind: ErrorKind
    message: str = ""

    def describe(self) -> str:
        if self.message:
            return self.message
        return f"in {self.kind.value}"


def render_error(doc: str, frames: tuple[ContextFrame, ...]) -> str:
    """
    Formats a failure trail as a numbered, pointer-style diagnostic.

    Each frame becomes a block naming its line and column, followed by the
    source line and a caret under the offending character.
    """
    line_map = LineMap(doc)
    blocks = []
    for index, frame in enumerate(frames):
        lineno, colno = line_map.line_col(frame.pos)
        what = frame.describe()
        if frame.pos >= len(doc):
            what += ", got end of input"
        blocks.append(
            f"{index}: at line {lineno}, column {colno}, {what}:\n"
            f"{line_map.line_text(frame.pos)}\n"
            f"{' ' * (colno - 1)}^\n"
        )
    return "\n".join(blocks)


class JSONParseError(ValueError):
    """
    Raised when the input does not match the requested production.

    ``frames`` holds the full context trail, outermost first. ``msg``,
    ``pos``, ``lineno`` and ``colno`` describe the innermost frame, which
    points at the first character of the offending token.
    """

    def __init__(self, doc: str, frames: tuple[ContextFrame, ...]) -> None:
        if not frames:
            raise ValueError("a parse error needs at least one context frame")

        self.doc = doc
        self.frames = frames

        innermost = frames[-1]
        self.msg = innermost.describe()
        self.pos = innermost.pos
        self.lineno, self.colno = LineMap(doc).line_col(innermost.pos)

        super().__init__(
            f"{self.msg} at line {self.lineno}, column {self.colno}"
        )

    @property
    def kind(self) -> ErrorKind:
        return self.frames[-1].kind

    def render(self) -> str:
        return render_error(self.doc, self.frames)

    def __reduce__(self) -> tuple[Any, ...]:
        return type(self), (self.doc, self.frames)

    def __str__(self) -> str:
        return self.render()


class NestingDepthError(JSONParseError):
    """Raised when arrays and objects nest deeper than the configured limit."""


__all__ = [
    "ContextFrame",
    "ErrorKind",
    "JSONParseError",
    "NestingDepthError",
    "Position",
    "render_error",
]
