"""Text preparation for snippet insertion.

Snippet bodies may contain escaped heading markers (a line starting with
``\\*``) so that headings inside a snippet are not parsed as part of the
snippet file itself. On insertion those escapes become real heading markers,
sized to the depth of the place the snippet lands.
"""

import re
from collections.abc import Sequence
from dataclasses import dataclass

from snipdeck.models.snippet import (
    INDENT_AUTO_TAG,
    INDENT_FIXED_TAG,
    INDENT_NIL_TAG,
    IndentMode,
)

HEADING_MARKER = "*"


@dataclass(frozen=True)
class TransformResult:
    """Text ready for insertion plus the indentation directive to apply."""

    text: str
    indent_mode: IndentMode


class TextTransformer:
    """Applies escape substitution and picks the indentation mode.

    Attributes:
        respect_context_depth: Size expanded markers to the destination depth
        template_engine_active: Whether a templating engine will do the insert
    """

    ESCAPED_HEADING = re.compile(r"^\\\*", re.MULTILINE)

    def __init__(
        self,
        respect_context_depth: bool = True,
        template_engine_active: bool = False,
    ) -> None:
        """Initialize the transformer."""
        self.respect_context_depth = respect_context_depth
        self.template_engine_active = template_engine_active

    def transform(
        self,
        body: str,
        context_depth: int | None = None,
        tags: Sequence[str] = (),
    ) -> TransformResult:
        """Prepare a snippet body for insertion.

        Args:
            body: Snippet content as produced by the parser
            context_depth: Heading depth at the destination, if it has one
            tags: Snippet tags, consulted for indentation directives

        Returns:
            The substituted text and the indentation mode
        """
        if body.endswith("\n"):
            body = body[:-1]

        depth = self.marker_count(context_depth)
        text = self.ESCAPED_HEADING.sub(lambda _: HEADING_MARKER * depth, body)
        return TransformResult(text=text, indent_mode=self.indent_mode(tags))

    def marker_count(self, context_depth: int | None) -> int:
        """Number of markers an escaped heading expands to."""
        if self.respect_context_depth and context_depth and context_depth > 0:
            return context_depth
        return 1

    def indent_mode(self, tags: Sequence[str]) -> IndentMode:
        """Select the indentation mode; explicit tags win over the defaults."""
        if INDENT_NIL_TAG in tags:
            return IndentMode.NONE
        if INDENT_FIXED_TAG in tags:
            return IndentMode.FIXED
        if INDENT_AUTO_TAG in tags:
            return IndentMode.AUTO
        if self.template_engine_active:
            return IndentMode.TEMPLATE_DEFAULT
        return IndentMode.REINDENT
