"""One-shot key table built from snippet tags.

The last tag of a snippet doubles as its key, so ``** Date :results:d:``
can be fired by pressing ``d`` once the table is active.
"""

import logging
from collections.abc import Callable, Iterable

from snipdeck.models.snippet import (
    FUNC_TAG,
    INDENT_TAG_PREFIX,
    RESULTS_TAG,
    Snippet,
)

logger = logging.getLogger(__name__)

KeyAction = Callable[[], object]


def key_token(snippet: Snippet) -> str | None:
    """Return the key a snippet binds to, or None if it binds none."""
    tag = snippet.last_tag
    if tag is None or tag in (FUNC_TAG, RESULTS_TAG):
        return None
    if tag.startswith(INDENT_TAG_PREFIX):
        return None
    return tag


class KeyBindingBuilder:
    """Builds key-to-action tables for a snippet list.

    Each action closes over the snippet itself rather than its name, so a
    table stays correct after the active category changes.
    """

    def __init__(self, run: Callable[[Snippet], object]) -> None:
        """Initialize the builder.

        Args:
            run: Called with the bound snippet when a key fires, normally
                the dispatcher applied to the host's destination
        """
        self._run = run

    def build(self, snippets: Iterable[Snippet]) -> dict[str, KeyAction]:
        """Map key tokens to actions; later snippets win on a shared key."""
        table: dict[str, KeyAction] = {}
        for snippet in snippets:
            key = key_token(snippet)
            if key is None:
                continue
            if key in table:
                logger.debug(f"Key '{key}' rebound to snippet '{snippet.name}'")
            table[key] = self._bind(snippet)
        return table

    def _bind(self, snippet: Snippet) -> KeyAction:
        def action() -> object:
            return self._run(snippet)

        return action
