"""Shared state for CLI commands.

Every command receives a ``CliContext`` through click's context object. It
resolves settings and builds the engine lazily, so commands that never touch
the snippet file (``--help``) stay cheap.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from functools import wraps
from pathlib import Path
from typing import Any, TypeVar

import click

from snipdeck.config.loader import ConfigLoader
from snipdeck.config.state import get_state_path, remember_category, remembered_category
from snipdeck.host.capabilities import CapabilityRegistry
from snipdeck.lib.errors import CategoryNotFoundError, ConfigError, SnipDeckError
from snipdeck.lib.logging_config import get_logger
from snipdeck.models.settings import SnippetSettings
from snipdeck.snippets.engine import SnippetEngine

logger = get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def prompt_choice(names: Sequence[str]) -> str | None:
    """Ask the user to pick one of ``names`` by number."""
    if not names:
        return None
    for i, name in enumerate(names, start=1):
        click.echo(f"  {i}. {name}", err=True)
    index = click.prompt(
        "Select", type=click.IntRange(1, len(names)), err=True
    )
    return names[index - 1]


def open_in_editor(path: Path) -> None:
    """Open ``path`` in the user's $EDITOR."""
    click.edit(filename=str(path))


@dataclass
class CliContext:
    """Options collected by the top-level group.

    Attributes:
        config_file: Explicit config file, overriding project discovery
        overrides: Settings given as CLI flags
        category: Category requested with ``--category``
        context_id: Host context identifier for automatic selection
    """

    config_file: str | None = None
    overrides: dict[str, Any] = field(default_factory=dict)
    category: str | None = None
    context_id: str | None = None
    _settings: SnippetSettings | None = field(default=None, repr=False)
    _engine: SnippetEngine | None = field(default=None, repr=False)

    @property
    def settings(self) -> SnippetSettings:
        """Resolved settings (CLI > config files > env > defaults)."""
        if self._settings is None:
            loader = ConfigLoader()
            self._settings = loader.resolve_settings(
                cli_overrides=self.overrides, config_file=self.config_file
            )
            logger.debug(f"Resolved settings: {self._settings.model_dump()}")
        return self._settings

    @property
    def state_path(self) -> Path:
        """Where the selected category is persisted."""
        return get_state_path(self.settings.state_dir)

    def engine(self) -> SnippetEngine:
        """Build the engine once, with capabilities from configured modules."""
        if self._engine is None:
            registry = CapabilityRegistry()
            registry.register_modules(self.settings.function_modules)
            self._engine = SnippetEngine(
                self.settings,
                registry=registry,
                context=lambda: self.context_id,
                chooser=prompt_choice,
                opener=open_in_editor,
            )
        return self._engine

    def active_engine(self) -> SnippetEngine:
        """Engine with a category selected.

        Selection order: ``--category``, a ``--context`` match, the
        remembered selection, then an interactive prompt on first use.
        """
        engine = self.engine()
        if engine.category is not None:
            return engine

        if self.category is not None:
            engine.select_category(self.category)
            return engine
        if engine.select_for_context(self.context_id) is not None:
            return engine

        remembered = remembered_category(self.state_path, engine.source_file)
        if remembered is not None:
            try:
                engine.select_category(remembered)
            except CategoryNotFoundError:
                logger.warning(
                    f"Remembered category '{remembered}' no longer exists; "
                    "choose another"
                )
        return engine

    def remember(self, category: str) -> None:
        """Persist ``category`` as the selection for the current source file."""
        remember_category(self.state_path, category, self.settings.source_file)


def handle_errors(fn: F) -> F:
    """Report SnipDeck errors on stderr and exit non-zero.

    Configuration problems exit with 2, every other engine error with 1.
    """

    @wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return fn(*args, **kwargs)
        except ConfigError as e:
            logger.error(f"Configuration error: {e}", exc_info=True)
            click.secho(f"Configuration Error: {e}", fg="red", err=True)
            sys.exit(2)
        except SnipDeckError as e:
            logger.debug(f"Command failed: {e}", exc_info=True)
            click.secho(f"Error: {e}", fg="red", err=True)
            sys.exit(1)

    return wrapper  # type: ignore[return-value]


pass_cli_context = click.make_pass_decorator(CliContext)
