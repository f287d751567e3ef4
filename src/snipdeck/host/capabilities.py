"""Registry of named zero-argument callables backing function snippets.

The engine never looks functions up by reflection; the host registers what
it wants ``func`` and ``results`` snippets to be able to call.
"""

from __future__ import annotations

import importlib
import inspect
import logging
from collections.abc import Callable, Iterable, Iterator
from types import ModuleType
from typing import Any

from snipdeck.lib.errors import ConfigError

logger = logging.getLogger(__name__)

Capability = Callable[[], Any]


class CapabilityRegistry:
    """Mapping from snippet name to the callable it runs.

    Example:
        >>> registry = CapabilityRegistry()
        >>> registry.register("today", lambda: "2024-01-01")
        >>> registry.resolve("today")()
        '2024-01-01'
    """

    def __init__(self, capabilities: dict[str, Capability] | None = None) -> None:
        """Initialize the registry, optionally pre-populated."""
        self._capabilities: dict[str, Capability] = {}
        for name, fn in (capabilities or {}).items():
            self.register(name, fn)

    def register(self, name: str, fn: Capability) -> None:
        """Register ``fn`` under ``name``; a later registration replaces it.

        Raises:
            TypeError: If ``fn`` is not callable
        """
        if not callable(fn):
            raise TypeError(f"Capability '{name}' must be callable")
        if name in self._capabilities:
            logger.debug(f"Replacing capability '{name}'")
        self._capabilities[name] = fn

    def resolve(self, name: str) -> Capability | None:
        """Return the callable registered as ``name``, or None."""
        return self._capabilities.get(name)

    def register_module(self, module: ModuleType | str) -> list[str]:
        """Register every public function a module defines.

        Functions imported into the module from elsewhere and names starting
        with an underscore are skipped.

        Args:
            module: Module object or importable dotted name

        Returns:
            Names that were registered

        Raises:
            ConfigError: If a module name cannot be imported
        """
        if isinstance(module, str):
            try:
                module = importlib.import_module(module)
            except ImportError as e:
                raise ConfigError(
                    "function_modules", f"Cannot import module '{module}': {e}"
                ) from e

        registered: list[str] = []
        for name, fn in inspect.getmembers(module, inspect.isfunction):
            if name.startswith("_") or fn.__module__ != module.__name__:
                continue
            self.register(name, fn)
            registered.append(name)

        logger.debug(
            f"Registered {len(registered)} capabilities from {module.__name__}"
        )
        return registered

    def register_modules(self, modules: Iterable[str]) -> None:
        """Register several modules by name, in order."""
        for module in modules:
            self.register_module(module)

    def __contains__(self, name: object) -> bool:
        return name in self._capabilities

    def __iter__(self) -> Iterator[str]:
        return iter(self._capabilities)

    def __len__(self) -> int:
        return len(self._capabilities)
