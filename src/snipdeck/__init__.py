"""SnipDeck - an outline-backed snippet repository.

Snippets live in an Org-style outline: top-level headings are categories,
the headings below them are snippets. Tags on a snippet heading decide what
it does when used.

Main features:
- Categories selected explicitly or from a host context identifier
- Plain text snippets with depth-aware heading escapes and indentation modes
- Function snippets backed by registered callables or source blocks
- One-shot key tables derived from snippet tags
- YAML configuration with environment overrides
"""

from snipdeck.config.loader import ConfigLoader
from snipdeck.lib.errors import ConfigError, SnipDeckError, ValidationError
from snipdeck.snippets.engine import SnippetEngine

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ConfigLoader",
    "ConfigError",
    "SnipDeckError",
    "SnippetEngine",
    "ValidationError",
]
