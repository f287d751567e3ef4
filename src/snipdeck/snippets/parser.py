"""Org-style outline parsing.

Turns outline text into a ``HeadingNode`` tree. Parsing is pure: every call
re-reads the text it is given and nothing is cached here.

Key Features:
- Heading depth from the run of leading ``*`` markers
- Trailing ``:tag1:tag2:`` annotations split off the title, order kept
- Body text attached to the heading it follows, nested headings as children
- Depth jumps are accepted as declared (no repair of skipped levels)
"""

import logging
import re
from pathlib import Path

from snipdeck.lib.errors import FileNotFoundError, ParseError
from snipdeck.models.snippet import HeadingNode

logger = logging.getLogger(__name__)


class OutlineParser:
    """Parser for Org-style outline documents.

    Example:
        >>> tree = OutlineParser().parse("* Prog\\n** Hello\\nWorld\\n")
        >>> tree.children[0].children[0].body
        'World\\n'
    """

    HEADING_PATTERN = re.compile(r"^(\*+)[ \t]+(.*?)[ \t]*$")
    TAGS_PATTERN = re.compile(r"(?:^|[ \t]+)(:(?:[\w@#%]+:)+)$")

    def parse(self, source: str | bytes, source_name: str | None = None) -> HeadingNode:
        """Parse an outline into a tree rooted at a synthetic level-0 node.

        Args:
            source: Full outline text, or raw bytes encoded as UTF-8
            source_name: Optional label used in error messages

        Returns:
            Root node whose children are the top-level headings

        Raises:
            ParseError: If bytes input cannot be decoded
        """
        text = self._decode(source, source_name)

        root = HeadingNode(level=0, title="")
        # Open headings, shallowest first; the root is always at the bottom.
        stack: list[HeadingNode] = [root]
        current = root
        body_lines: list[str] = []
        count = 0

        for line in text.splitlines():
            heading = self.match_heading(line)
            if heading is None:
                body_lines.append(line)
                continue

            current.body = self._finish_body(body_lines)
            body_lines = []

            while stack[-1].level >= heading.level:
                stack.pop()
            stack[-1].children.append(heading)
            stack.append(heading)
            current = heading
            count += 1

        current.body = self._finish_body(body_lines)
        logger.debug(f"Parsed {count} headings from {source_name or '<text>'}")
        return root

    def load(self, path: str | Path) -> HeadingNode:
        """Read and parse an outline file.

        Raises:
            FileNotFoundError: If the file does not exist
            ParseError: If the file is not valid UTF-8 text
        """
        path = Path(path)
        try:
            raw = path.read_bytes()
        except OSError as e:
            raise FileNotFoundError(
                str(path),
                "Snippet source file could not be read. "
                "Set 'source_file' in config.yaml or pass --source.",
            ) from e
        return self.parse(raw, source_name=str(path))

    def _decode(self, source: str | bytes, source_name: str | None) -> str:
        if isinstance(source, str):
            return source
        try:
            return source.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ParseError(f"not valid UTF-8 ({e.reason})", source_name) from e

    def match_heading(self, line: str) -> HeadingNode | None:
        """Parse ``line`` as a heading, or return None for body text."""
        match = self.HEADING_PATTERN.match(line)
        if match is None:
            return None

        level = len(match.group(1))
        title = match.group(2)
        tags: list[str] = []

        tag_match = self.TAGS_PATTERN.search(title)
        if tag_match:
            tags = [tag for tag in tag_match.group(1).split(":") if tag]
            title = title[: tag_match.start()].rstrip()

        return HeadingNode(level=level, title=title, tags=tags)

    @staticmethod
    def _finish_body(lines: list[str]) -> str | None:
        while lines and not lines[-1].strip():
            lines.pop()
        if not lines:
            return None
        return "\n".join(lines) + "\n"


def load_outline(path: str | Path) -> HeadingNode:
    """Parse the outline file at ``path`` with a default parser."""
    return OutlineParser().load(path)
