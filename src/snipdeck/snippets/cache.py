"""Active category state with explicit invalidation.

The cache is the only mutable state the engine keeps. It remembers which
category is selected and the snippet list resolved for it, and throws the
list away the moment the category changes so a stale list is never served.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Sequence

from snipdeck.lib.errors import CategoryNotFoundError
from snipdeck.models.snippet import HeadingNode, Snippet
from snipdeck.snippets.index import CategoryIndex
from snipdeck.snippets.policy import resolve_category

logger = logging.getLogger(__name__)

SwitchListener = Callable[[str | None, str | None], None]
ContextProvider = Callable[[], str | None]
CategoryChooser = Callable[[Sequence[str]], str | None]


class ActiveCategoryCache:
    """Selected category and its lazily resolved snippets.

    ``set_category`` is the single mutator. It clears the snippet list under
    the same lock ``get`` resolves under, so a reader sees either the old
    category with its own snippets or the new category, never a mix.

    Attributes:
        category_name: The selected category, or None before first selection
    """

    def __init__(
        self,
        load_tree: Callable[[], HeadingNode],
        index: CategoryIndex,
        context: ContextProvider | None = None,
        chooser: CategoryChooser | None = None,
    ) -> None:
        """Initialize an empty cache.

        Args:
            load_tree: Returns a freshly parsed outline each time it is called
            index: Category index used to resolve snippet lists
            context: Supplies the host context id for automatic selection
            chooser: Asked to pick a category when the context has no match
        """
        self._load_tree = load_tree
        self._index = index
        self._context = context
        self._chooser = chooser
        self._lock = threading.RLock()
        self._category: str | None = None
        self._snippets: tuple[Snippet, ...] | None = None
        self._listeners: list[SwitchListener] = []

    @property
    def category_name(self) -> str | None:
        """Currently selected category."""
        return self._category

    @property
    def is_populated(self) -> bool:
        """Whether a snippet list is cached for the current category."""
        return self._snippets is not None

    def on_switch(self, listener: SwitchListener) -> None:
        """Register ``listener(old, new)`` to run after every category change."""
        self._listeners.append(listener)

    def get(self) -> tuple[Snippet, ...]:
        """Return the snippets of the selected category, resolving if needed.

        When no category has been selected yet, the host context is matched
        against the known categories first and the chooser is asked second.

        Raises:
            CategoryNotFoundError: If no category could be selected
        """
        with self._lock:
            if self._snippets is not None:
                logger.debug(f"Snippet cache hit for '{self._category}'")
                return self._snippets

            tree = self._load_tree()
            category = self._category
            if category is None:
                category = self._select_initial(tree)
                self.set_category(category)

            self._snippets = tuple(self._index.snippets_of(tree, category))
            logger.debug(
                f"Resolved {len(self._snippets)} snippets for category '{category}'"
            )
            return self._snippets

    def set_category(self, name: str) -> None:
        """Select ``name`` and drop any cached snippets.

        Listeners are notified after the cache is cleared; the snippet list
        itself is rebuilt on the next ``get``.
        """
        with self._lock:
            old = self._category
            self._category = name
            self._snippets = None
        logger.debug(f"Snippet category switched: {old!r} -> {name!r}")
        for listener in list(self._listeners):
            listener(old, name)

    def invalidate(self) -> None:
        """Drop the cached snippet list but keep the selected category."""
        with self._lock:
            self._snippets = None
        logger.debug("Snippet cache invalidated")

    def _select_initial(self, tree: HeadingNode) -> str:
        categories = self._index.list_categories(tree)

        if self._context is not None:
            context_id = self._context()
            match = resolve_category(context_id, categories)
            if match is not None:
                logger.debug(f"Context '{context_id}' selected category '{match}'")
                return match

        if self._chooser is not None and categories:
            choice = self._chooser(categories)
            if choice is not None:
                if choice not in categories:
                    raise CategoryNotFoundError(choice)
                return choice

        raise CategoryNotFoundError(None)
