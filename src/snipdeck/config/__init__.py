"""Configuration loading and selection state for SnipDeck.

Main components:
- ConfigLoader: Discover and layer user/project config.yaml files
- Environment variable substitution (${VAR_NAME} pattern)
- Selection state persistence between CLI invocations
"""

from snipdeck.config.env_loader import get_env_var, load_env_file, substitute_env_vars
from snipdeck.config.loader import ConfigLoader

__all__ = [
    "ConfigLoader",
    "substitute_env_vars",
    "get_env_var",
    "load_env_file",
]
