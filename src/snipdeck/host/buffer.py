"""In-memory text buffer implementing the insertion interface.

Used by the CLI to render inserted snippets and by tests as a stand-in for
a real editor buffer.
"""

import re
from dataclasses import dataclass

from snipdeck.models.snippet import IndentMode


@dataclass
class TextBuffer:
    """Plain text with a cursor offset.

    Attributes:
        text: Buffer contents
        cursor: Character offset of the insertion point
        depth: Fixed heading depth reported instead of scanning the text
    """

    text: str = ""
    cursor: int = 0
    depth: int | None = None

    HEADING_LINE = re.compile(r"^(\*+)[ \t]", re.MULTILINE)

    def __post_init__(self) -> None:
        if not 0 <= self.cursor <= len(self.text):
            raise ValueError(
                f"cursor {self.cursor} outside buffer of length {len(self.text)}"
            )

    @classmethod
    def at_end(cls, text: str) -> "TextBuffer":
        """Create a buffer with the cursor after the last character."""
        return cls(text=text, cursor=len(text))

    @property
    def column(self) -> int:
        """Zero-based column of the cursor."""
        return self.cursor - self._line_start(self.cursor)

    def current_depth(self) -> int | None:
        """Depth of the nearest heading line at or before the cursor."""
        if self.depth is not None:
            return self.depth
        line_end = self.text.find("\n", self.cursor)
        upto = self.text if line_end == -1 else self.text[:line_end]
        depth = None
        for match in self.HEADING_LINE.finditer(upto):
            depth = len(match.group(1))
        return depth

    def insert(self, text: str, indent_mode: IndentMode) -> None:
        """Insert ``text`` at the cursor and leave the cursor after it."""
        if indent_mode == IndentMode.NONE:
            prefix = ""
        elif indent_mode == IndentMode.FIXED:
            prefix = " " * self.column
        else:
            prefix = self._line_indentation()

        start = self.cursor
        self.text = self.text[:start] + text + self.text[start:]
        self.cursor = start + len(text)
        if prefix:
            self.indent_region(start, self.cursor, prefix)

    def indent_region(self, start: int, end: int, prefix: str) -> None:
        """Prefix every line that begins inside ``(start, end]`` with ``prefix``.

        The line holding ``start`` keeps its own indentation, since the
        inserted text continues it. Blank lines are left empty.
        """
        region = self.text[start:end]
        lines = region.split("\n")
        indented = [lines[0]] + [prefix + line if line else line for line in lines[1:]]
        new_region = "\n".join(indented)
        self.text = self.text[:start] + new_region + self.text[end:]
        if self.cursor >= end:
            self.cursor += len(new_region) - len(region)

    def _line_start(self, offset: int) -> int:
        return self.text.rfind("\n", 0, offset) + 1

    def _line_indentation(self) -> str:
        line_start = self._line_start(self.cursor)
        line = self.text[line_start : self.cursor]
        return line[: len(line) - len(line.lstrip(" \t"))]
