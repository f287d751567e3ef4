"""Snippet engine wiring parser, index, cache and dispatch together.

``SnippetEngine`` is what hosts talk to. It exposes the command surface
(select a category, insert or expand a snippet, build the key table, edit
the source file) and owns the single active-category cache.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path

from snipdeck.host.capabilities import CapabilityRegistry
from snipdeck.host.protocols import InsertionTarget, TemplateEngine
from snipdeck.lib.errors import (
    CategoryNotFoundError,
    FileNotFoundError,
    SnippetNotFoundError,
    ValidationError,
)
from snipdeck.models.settings import SnippetSettings
from snipdeck.models.snippet import HeadingNode, Snippet
from snipdeck.snippets.cache import (
    ActiveCategoryCache,
    CategoryChooser,
    ContextProvider,
    SwitchListener,
)
from snipdeck.snippets.capture import append_snippet
from snipdeck.snippets.dispatch import BlockEvaluator, DispatchResult, SnippetDispatcher
from snipdeck.snippets.index import CategoryIndex
from snipdeck.snippets.keymap import KeyAction, KeyBindingBuilder
from snipdeck.snippets.parser import OutlineParser
from snipdeck.snippets.policy import resolve_category
from snipdeck.snippets.resolver import SnippetResolver

logger = logging.getLogger(__name__)

SourceOpener = Callable[[Path], None]


class SnippetEngine:
    """Snippet repository bound to one outline source file.

    Example:
        >>> engine = SnippetEngine(SnippetSettings(source_file="snippets.org"))
        >>> engine.select_category("Prog")
        'Prog'
        >>> engine.insert_snippet(buffer, "Hello").inserted_text
        'World'
    """

    def __init__(
        self,
        settings: SnippetSettings,
        registry: CapabilityRegistry | None = None,
        template_engine: TemplateEngine | None = None,
        context: ContextProvider | None = None,
        chooser: CategoryChooser | None = None,
        opener: SourceOpener | None = None,
        evaluators: Mapping[str, BlockEvaluator] | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            settings: Resolved engine settings
            registry: Capabilities for func/results snippets
            template_engine: Optional templating collaborator
            context: Supplies the host context id for automatic selection
            chooser: Prompts the user to pick from a list of names
            opener: Opens the source file for editing
            evaluators: Source block evaluators by language name
        """
        self.settings = settings
        self._parser = OutlineParser()
        self._chooser = chooser
        self._opener = opener
        self.index = CategoryIndex(
            category_level=settings.category_heading_level,
            snippet_level=settings.snippet_heading_level,
        )
        self.dispatcher = SnippetDispatcher(
            respect_context_depth=settings.respect_context_depth,
            registry=registry,
            template_engine=template_engine,
            evaluators=evaluators,
        )
        self.cache = ActiveCategoryCache(
            load_tree=self._load_tree,
            index=self.index,
            context=context,
            chooser=chooser,
        )

    @property
    def source_file(self) -> Path:
        """Outline file the snippets are read from."""
        return self.settings.source_file

    @property
    def category(self) -> str | None:
        """Currently selected category, if any."""
        return self.cache.category_name

    def on_switch(self, listener: SwitchListener) -> None:
        """Subscribe ``listener(old, new)`` to category switches."""
        self.cache.on_switch(listener)

    def list_categories(self) -> list[str]:
        """Category titles in the source file, in document order."""
        return self.index.list_categories(self._load_tree())

    def select_category(self, name: str | None = None) -> str:
        """Make ``name`` the active category, prompting when it is missing.

        Raises:
            CategoryNotFoundError: If the category does not exist or none was chosen
        """
        categories = self.list_categories()
        if name is None:
            name = self._choose(categories)
            if name is None:
                raise CategoryNotFoundError(None)
        if name not in categories:
            raise CategoryNotFoundError(name)

        self.cache.set_category(name)
        return name

    def select_for_context(self, context_id: str | None) -> str | None:
        """Switch to the category named ``context_id`` if there is one.

        Returns:
            The newly selected category, or None when nothing matched
        """
        match = resolve_category(context_id, self.list_categories())
        if match is not None:
            self.cache.set_category(match)
        return match

    def snippets(self) -> tuple[Snippet, ...]:
        """Snippets of the active category."""
        return self.cache.get()

    def resolver(self) -> SnippetResolver:
        """Lookup helper over the active category."""
        return SnippetResolver(self.snippets())

    def find_snippet(self, name: str) -> Snippet:
        """Return the first snippet named ``name`` in the active category.

        Raises:
            SnippetNotFoundError: If no snippet has that name
        """
        snippet = self.resolver().exact(name)
        if snippet is None:
            raise SnippetNotFoundError(name, self.category)
        return snippet

    def insert_snippet(
        self, target: InsertionTarget, name: str | None = None
    ) -> DispatchResult:
        """Dispatch the snippet called ``name``, prompting when it is missing.

        Raises:
            SnippetNotFoundError: If the snippet does not exist or none was chosen
        """
        if name is None:
            name = self._choose(self.resolver().names())
            if name is None:
                raise SnippetNotFoundError("", self.category)
        return self.dispatcher.dispatch(self.find_snippet(name), target)

    def expand_at_point(
        self, word: str, target: InsertionTarget
    ) -> DispatchResult | None:
        """Dispatch the first snippet keyed by ``word``, or return None."""
        snippet = self.resolver().prefix_match(word, self.settings.expand_separator)
        if snippet is None:
            logger.debug(f"No snippet expands '{word}' in '{self.category}'")
            return None
        return self.dispatcher.dispatch(snippet, target)

    def build_keybinding_table(self, target: InsertionTarget) -> dict[str, KeyAction]:
        """Key table for the active category, dispatching into ``target``."""
        builder = KeyBindingBuilder(lambda s: self.dispatcher.dispatch(s, target))
        return builder.build(self.snippets())

    def reload(self) -> None:
        """Re-read the source file on the next access."""
        self.cache.invalidate()

    def edit_source_file(self) -> Path:
        """Open the source file through the host opener, then reload.

        Raises:
            FileNotFoundError: If the source file does not exist
        """
        path = self.source_file
        if not path.exists():
            raise FileNotFoundError(str(path), "Snippet source file does not exist.")
        if self._opener is not None:
            self._opener(path)
        self.reload()
        return path

    def capture_snippet(
        self,
        name: str,
        content: str | None,
        tags: Sequence[str] = (),
    ) -> Snippet:
        """Append a snippet to the active category in the source file.

        Raises:
            ValidationError: If the name is empty or spans several lines
            CategoryNotFoundError: If no category is active or it has vanished
        """
        if not name.strip() or "\n" in name:
            raise ValidationError(
                field="name",
                message="Snippet name must be a single non-empty line",
                expected="one line of text",
                actual=repr(name),
            )

        if self.category is None:
            self.snippets()
        category = self.category
        if category is None:
            raise CategoryNotFoundError(None)

        path = self.source_file
        source = path.read_text(encoding="utf-8") if path.exists() else ""
        updated = append_snippet(
            source,
            category,
            name,
            content,
            tags,
            category_level=self.settings.category_heading_level,
            snippet_level=self.settings.snippet_heading_level,
        )
        path.write_text(updated, encoding="utf-8")
        logger.info(f"Captured snippet '{name}' into category '{category}'")

        self.reload()
        return self.find_snippet(name)

    def _load_tree(self) -> HeadingNode:
        return self._parser.load(self.source_file)

    def _choose(self, names: Sequence[str]) -> str | None:
        if self._chooser is None or not names:
            return None
        return self._chooser(names)
