"""Outline and snippet data structures.

This module defines the parsed outline tree and the snippet records derived
from it, plus the closed vocabularies the dispatcher and keymap builder
switch on.

Key Types:
- HeadingNode: One heading of the parsed outline with its tags, body and children
- Snippet: A heading at the snippet level, as seen by the dispatcher
- SnippetKind: The behavior variant selected by a snippet's tags
- IndentMode: How inserted text should be indented at the destination
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

FUNC_TAG = "func"
RESULTS_TAG = "results"
INDENT_NIL_TAG = "indent_nil"
INDENT_FIXED_TAG = "indent_fixed"
INDENT_AUTO_TAG = "indent_auto"
INDENT_TAG_PREFIX = "indent_"

RESERVED_TAGS: frozenset[str] = frozenset(
    {FUNC_TAG, RESULTS_TAG, INDENT_NIL_TAG, INDENT_FIXED_TAG, INDENT_AUTO_TAG}
)


class SnippetKind(str, Enum):
    """Behavior variant of a snippet, derived once from its tags.

    Attributes:
        PLAIN_TEXT: Body text is transformed and inserted
        FUNCTION_CALL: A capability or source block runs, result discarded
        FUNCTION_CALL_WITH_RESULT: As FUNCTION_CALL, result inserted as text
    """

    PLAIN_TEXT = "plain_text"
    FUNCTION_CALL = "function_call"
    FUNCTION_CALL_WITH_RESULT = "function_call_with_result"

    @classmethod
    def from_tags(cls, tags: tuple[str, ...] | list[str]) -> SnippetKind:
        """Pick the variant for a tag list; ``func`` wins over ``results``."""
        if FUNC_TAG in tags:
            return cls.FUNCTION_CALL
        if RESULTS_TAG in tags:
            return cls.FUNCTION_CALL_WITH_RESULT
        return cls.PLAIN_TEXT


class IndentMode(str, Enum):
    """Indentation directive handed to the insertion collaborator.

    Attributes:
        NONE: Insert verbatim
        FIXED: Indent continuation lines to the insertion column
        AUTO: Syntax-aware indentation by the destination
        TEMPLATE_DEFAULT: Let the templating engine apply its own default
        REINDENT: Insert, then reindent the region with the block-indent operation
    """

    NONE = "none"
    FIXED = "fixed"
    AUTO = "auto"
    TEMPLATE_DEFAULT = "template_default"
    REINDENT = "reindent"


@dataclass
class HeadingNode:
    """A heading in a parsed outline.

    The parser returns a synthetic root with ``level == 0`` whose children
    are the top-level headings and whose body is the preamble text.

    Attributes:
        level: Number of heading markers (0 for the synthetic root)
        title: Heading text with the tag annotation removed
        tags: Tags in the order they appear on the heading line
        body: Text up to the next heading, or None when there is none
        children: Nested headings in document order
    """

    level: int
    title: str
    tags: list[str] = field(default_factory=list)
    body: str | None = None
    children: list[HeadingNode] = field(default_factory=list)

    def walk(self) -> Iterator[tuple[HeadingNode, tuple[str, ...]]]:
        """Yield every descendant with the titles of its strict ancestors.

        The root itself is not yielded and contributes no title. Order is
        document pre-order.
        """
        stack: list[tuple[HeadingNode, tuple[str, ...]]] = [
            (child, ()) for child in reversed(self.children)
        ]
        while stack:
            node, ancestors = stack.pop()
            yield node, ancestors
            below = ancestors + (node.title,)
            stack.extend((child, below) for child in reversed(node.children))


@dataclass(frozen=True)
class Snippet:
    """A snippet in a category.

    ``content`` is None when the heading has no body, which is distinct from
    an empty string.

    Attributes:
        name: Heading title
        tags: Heading tags, order preserved
        content: Body text, or None
    """

    name: str
    tags: tuple[str, ...] = ()
    content: str | None = None
    kind: SnippetKind = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", tuple(self.tags))
        object.__setattr__(self, "kind", SnippetKind.from_tags(self.tags))

    @property
    def last_tag(self) -> str | None:
        """Final tag on the heading line, or None for an untagged snippet."""
        return self.tags[-1] if self.tags else None

    @classmethod
    def from_node(cls, node: HeadingNode) -> Snippet:
        """Build a snippet from a snippet-level heading."""
        return cls(name=node.title, tags=tuple(node.tags), content=node.body)
