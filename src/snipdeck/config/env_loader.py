"""Environment variable helpers for SnipDeck configuration files.

Supports ``${VAR}`` and ``${VAR:-default}`` references inside YAML text and
loading ``.env`` files through python-dotenv.
"""

import logging
import os
import re
from pathlib import Path

from dotenv import load_dotenv

from snipdeck.lib.errors import ConfigError

logger = logging.getLogger(__name__)

ENV_VAR_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?::-([^}]*))?\}")


def substitute_env_vars(text: str) -> str:
    """Replace ``${VAR}`` references in ``text`` with environment values.

    Args:
        text: Raw configuration text

    Returns:
        Text with every reference substituted

    Raises:
        ConfigError: If a referenced variable is unset and has no default
    """

    def _replace(match: re.Match[str]) -> str:
        name, default = match.group(1), match.group(2)
        value = os.environ.get(name)
        if value is not None:
            return value
        if default is not None:
            return default
        raise ConfigError(name, f"Environment variable '{name}' is not set")

    return ENV_VAR_PATTERN.sub(_replace, text)


def get_env_var(name: str, default: str | None = None) -> str | None:
    """Return an environment variable, treating empty values as unset."""
    value = os.environ.get(name)
    return value if value else default


def load_env_file(path: str | Path) -> bool:
    """Load variables from a ``.env`` file without overriding existing ones.

    Returns:
        True if the file existed and was loaded
    """
    env_path = Path(path)
    if not env_path.is_file():
        return False
    logger.debug(f"Loading environment from {env_path}")
    return load_dotenv(env_path, override=False)
