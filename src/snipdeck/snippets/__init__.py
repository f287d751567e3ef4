"""Snippet repository core: outline parsing, categories, lookup and dispatch."""

from snipdeck.snippets.cache import ActiveCategoryCache
from snipdeck.snippets.dispatch import DispatchResult, SnippetDispatcher
from snipdeck.snippets.engine import SnippetEngine
from snipdeck.snippets.index import CategoryIndex
from snipdeck.snippets.keymap import KeyBindingBuilder
from snipdeck.snippets.parser import OutlineParser, load_outline
from snipdeck.snippets.policy import resolve_category
from snipdeck.snippets.resolver import SnippetResolver
from snipdeck.snippets.transform import TextTransformer, TransformResult

__all__ = [
    "ActiveCategoryCache",
    "CategoryIndex",
    "DispatchResult",
    "KeyBindingBuilder",
    "OutlineParser",
    "SnippetDispatcher",
    "SnippetEngine",
    "SnippetResolver",
    "TextTransformer",
    "TransformResult",
    "load_outline",
    "resolve_category",
]
