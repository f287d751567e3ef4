"""Context-driven category selection."""

from collections.abc import Sequence


def resolve_category(
    context_id: str | None, known_categories: Sequence[str]
) -> str | None:
    """Map a host context identifier to a category name.

    Hosts raise this when their context changes (a new editing mode, a
    different project) and switch category only on a match. Matching is
    exact and case-sensitive.

    Args:
        context_id: Mode name, project name or similar identifier
        known_categories: Category names in document order

    Returns:
        The first category equal to ``context_id``, or None
    """
    if not context_id:
        return None
    for category in known_categories:
        if category == context_id:
            return category
    return None
