"""Line and column lookup for character offsets into a document."""

from __future__ import annotations

from bisect import bisect_right
from typing import Final


class LineMap:
    """Maps character offsets to 1-based line and column numbers.

    Line starts are recorded once up front so that rendering many context
    frames against the same document only pays for a binary search each.
    """

    def __init__(self, text: str) -> None:
        """Initialize the line-start table.

        Args:
            text: The document the offsets refer to
        """
        self.text: Final = text
        self.line_starts: list[int] = [0]

        pos = text.find("\n")
        while pos != -1:
            self.line_starts.append(pos + 1)
            pos = text.find("\n", pos + 1)

    def line_index(self, pos: int) -> int:
        """Returns the 0-based index of the line containing ``pos``."""
        pos = max(0, min(pos, len(self.text)))
        return bisect_right(self.line_starts, pos) - 1

    def line_col(self, pos: int) -> tuple[int, int]:
        """Convert a character offset to a (line, column) pair.

        Args:
            pos: Character offset, clamped to the document bounds

        Returns:
            1-based line and column numbers
        """
        index = self.line_index(pos)
        pos = max(0, min(pos, len(self.text)))
        return index + 1, pos - self.line_starts[index] + 1

    def line_text(self, pos: int) -> str:
        """Returns the source line containing ``pos`` without its newline."""
        index = self.line_index(pos)
        start = self.line_starts[index]
        end = self.text.find("\n", start)
        if end == -1:
            end = len(self.text)
        return self.text[start:end].rstrip("\r")
