"""Appending new snippets to outline source text."""

from collections.abc import Sequence

from snipdeck.lib.errors import CategoryNotFoundError
from snipdeck.snippets.parser import OutlineParser


def format_heading(level: int, title: str, tags: Sequence[str] = ()) -> str:
    """Render a heading line, with a tag annotation when tags are given."""
    line = f"{'*' * level} {title}"
    if tags:
        line += " :" + ":".join(tags) + ":"
    return line


def escape_body(content: str) -> str:
    """Escape body lines that would otherwise parse as headings.

    Lines such as ``*bold* text`` are not headings and are kept as written.
    """
    parser = OutlineParser()
    escaped = [
        "\\" + line if parser.match_heading(line) else line
        for line in content.splitlines()
    ]
    return "\n".join(escaped)


def append_snippet(
    source: str,
    category: str,
    name: str,
    content: str | None,
    tags: Sequence[str] = (),
    category_level: int = 1,
    snippet_level: int = 2,
) -> str:
    """Return ``source`` with a new snippet at the end of ``category``.

    The snippet goes after the last line of the first heading titled
    ``category`` at ``category_level``, including all of its subheadings.

    Raises:
        CategoryNotFoundError: If the category heading is not present
    """
    parser = OutlineParser()
    lines = source.splitlines()

    start = None
    for i, line in enumerate(lines):
        heading = parser.match_heading(line)
        if heading and heading.level == category_level and heading.title == category:
            start = i
            break
    if start is None:
        raise CategoryNotFoundError(category)

    end = len(lines)
    for i in range(start + 1, len(lines)):
        heading = parser.match_heading(lines[i])
        if heading and heading.level <= category_level:
            end = i
            break

    # Keep blank lines that separate the category from the next heading.
    insert_at = end
    while insert_at > start + 1 and not lines[insert_at - 1].strip():
        insert_at -= 1

    block = [format_heading(snippet_level, name, tags)]
    if content:
        block.extend(escape_body(content).split("\n"))

    new_lines = lines[:insert_at] + block + lines[insert_at:]
    return "\n".join(new_lines) + "\n"
