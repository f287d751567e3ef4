"""Category and snippet extraction from a parsed outline."""

import logging

from snipdeck.models.snippet import HeadingNode, Snippet

logger = logging.getLogger(__name__)


class CategoryIndex:
    """Reads categories and their snippets out of an outline tree.

    Categories are the headings at ``category_level``; a snippet is any
    heading at ``snippet_level`` whose strict ancestors include a heading
    titled with the category name. Both lists keep document order.

    Attributes:
        category_level: Heading level of category headings
        snippet_level: Heading level of snippet headings
    """

    def __init__(self, category_level: int = 1, snippet_level: int = 2) -> None:
        """Initialize the index.

        Raises:
            ValueError: If either level is below 1
        """
        if category_level < 1 or snippet_level < 1:
            raise ValueError("heading levels must be positive")
        self.category_level = category_level
        self.snippet_level = snippet_level

    def list_categories(self, tree: HeadingNode) -> list[str]:
        """Return every category title in document order, duplicates included."""
        return [
            node.title
            for node, _ in tree.walk()
            if node.level == self.category_level
        ]

    def snippets_of(self, tree: HeadingNode, category: str) -> list[Snippet]:
        """Return the snippets filed under ``category``."""
        snippets = [
            Snippet.from_node(node)
            for node, ancestors in tree.walk()
            if node.level == self.snippet_level and category in ancestors
        ]
        logger.debug(f"Category '{category}' has {len(snippets)} snippets")
        return snippets
