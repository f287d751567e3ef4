"""Snippet lookup over the active category."""

from collections.abc import Sequence

from snipdeck.models.snippet import Snippet


class SnippetResolver:
    """Exact and prefix lookup over a snippet list.

    Both lookups return None rather than raising; callers decide how a miss
    is reported.
    """

    def __init__(self, snippets: Sequence[Snippet]) -> None:
        """Bind the resolver to a snippet list (usually the cache's)."""
        self._snippets = snippets

    def exact(self, name: str) -> Snippet | None:
        """Return the first snippet named exactly ``name``."""
        return next((s for s in self._snippets if s.name == name), None)

    def prefix_match(self, word: str, separator: str = ":") -> Snippet | None:
        """Return the first snippet whose name starts with ``word + separator``.

        Used for expand-at-point, where snippets are named like
        ``"dt: insert the date"`` and the user types only ``dt``.
        """
        if not word:
            return None
        prefix = word + separator
        return next((s for s in self._snippets if s.name.startswith(prefix)), None)

    def names(self) -> list[str]:
        """Snippet names in category order, for choice prompts."""
        return [s.name for s in self._snippets]
