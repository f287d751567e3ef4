"""Interfaces the snippet engine needs from its host editor."""

from typing import Protocol, runtime_checkable

from snipdeck.models.snippet import IndentMode


@runtime_checkable
class InsertionTarget(Protocol):
    """Destination that receives snippet text at its cursor."""

    def insert(self, text: str, indent_mode: IndentMode) -> None:
        """Insert ``text`` at the cursor and indent it per ``indent_mode``."""
        ...

    def current_depth(self) -> int | None:
        """Heading depth at the cursor, or None outside any heading."""
        ...


@runtime_checkable
class TemplateEngine(Protocol):
    """Optional templating engine that expands tab stops and placeholders."""

    def expand(self, text: str, indent_mode: IndentMode) -> None:
        """Expand ``text`` as a template at the destination's cursor."""
        ...
