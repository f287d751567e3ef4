"""Configuration loader for SnipDeck.

This module provides the ConfigLoader class for discovering, parsing and
layering SnipDeck settings from YAML files, environment variables and CLI
flags.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from snipdeck.config.defaults import CONFIG_DIR_NAME, DEFAULT_SETTINGS, ENV_VAR_MAP
from snipdeck.config.env_loader import load_env_file, substitute_env_vars
from snipdeck.lib.errors import ConfigError, FileNotFoundError
from snipdeck.models.settings import ConfigFile, SnippetSettings

logger = logging.getLogger(__name__)

_INT_FIELDS = ("category_heading_level", "snippet_heading_level")
_BOOL_FIELDS = ("respect_context_depth",)


def _parse_env_value(field_name: str, value: str) -> Any:
    """Parse environment variable value to the field's type.

    Raises:
        ValueError: If an integer field holds a non-integer
    """
    if field_name in _INT_FIELDS:
        return int(value)
    elif field_name in _BOOL_FIELDS:
        return value.lower() in ("true", "1", "yes", "on")
    else:
        return value


def _get_env_value(
    field_name: str, env_vars: os._Environ[str] | dict[str, str]
) -> Any | None:
    """Get the parsed environment value for a field, or None if absent/invalid."""
    env_var_name = ENV_VAR_MAP.get(field_name)
    if not env_var_name or env_var_name not in env_vars:
        return None

    try:
        return _parse_env_value(field_name, env_vars[env_var_name])
    except ValueError:
        logger.warning(
            f"Ignoring {env_var_name}={env_vars[env_var_name]!r}: not a valid value"
        )
        return None


def _format_validation_errors(exc: PydanticValidationError) -> str:
    """Render pydantic errors as one ``field: message`` line each."""
    lines: list[str] = []
    for error in exc.errors():
        loc = ".".join(str(item) for item in error.get("loc", ())) or "settings"
        lines.append(f"  {loc}: {error.get('msg', 'invalid value')}")
    return "\n".join(lines) if lines else "  validation failed"


class ConfigLoader:
    """Loads SnipDeck settings from user and project config files.

    Config file discovery:
    - User level: ``~/.snipdeck/config.yml`` or ``config.yaml``
    - Project level: ``<project_dir>/config.yml`` or ``config.yaml``

    ``.yml`` is preferred when both extensions exist. Files are read with
    ``${VAR}`` substitution and cached per loader instance.
    """

    def __init__(self) -> None:
        """Initialize the ConfigLoader with empty caches."""
        self._user_config_loaded = False
        self._user_config: ConfigFile | None = None
        self._project_configs: dict[str, ConfigFile | None] = {}

    def load_config_file(self, file_path: str | Path) -> ConfigFile:
        """Load an explicitly named config file.

        Raises:
            FileNotFoundError: If the file does not exist
            ConfigError: If YAML parsing or validation fails
        """
        path = Path(file_path)
        if not path.is_file():
            raise FileNotFoundError(
                str(path),
                "Configuration file not found. "
                "Please ensure the file exists at this path.",
            )
        return self._parse_config(path, "config_file", "configuration") or ConfigFile()

    def load_global_config(self) -> ConfigFile | None:
        """Load user configuration from ``~/.snipdeck/``; cached after first load."""
        if self._user_config_loaded:
            return self._user_config

        config_dir = Path.home() / CONFIG_DIR_NAME
        self._user_config = self._load_from_dir(
            config_dir, "global_config", "global configuration"
        )
        self._user_config_loaded = True
        return self._user_config

    def load_project_config(self, project_dir: str | Path) -> ConfigFile | None:
        """Load project configuration from ``project_dir``; cached per directory.

        A ``.env`` file next to the project config is loaded first so its
        variables can be referenced from the YAML.
        """
        key = str(project_dir)
        if key in self._project_configs:
            return self._project_configs[key]

        project_path = Path(project_dir)
        load_env_file(project_path / ".env")
        result = self._load_from_dir(
            project_path, "project_config", "project configuration"
        )
        self._project_configs[key] = result
        return result

    def resolve_settings(
        self,
        cli_overrides: dict[str, Any] | None = None,
        project_dir: str | Path | None = None,
        config_file: str | Path | None = None,
    ) -> SnippetSettings:
        """Resolve settings with priority hierarchy.

        Priority (highest to lowest):
        1. CLI flags (``cli_overrides``, None values ignored)
        2. Explicit ``config_file``, else the project config
        3. User config (``~/.snipdeck/config.yaml``)
        4. Environment variables (``SNIPDECK_*``)
        5. Built-in defaults

        Raises:
            ConfigError: If any layer is invalid or the result fails validation
        """
        if config_file is not None:
            file_config: ConfigFile | None = self.load_config_file(config_file)
        else:
            file_config = self.load_project_config(project_dir or Path.cwd())
        user_config = self.load_global_config()

        layers = [
            user_config.model_dump(exclude_none=True) if user_config else {},
            file_config.model_dump(exclude_none=True) if file_config else {},
            {k: v for k, v in (cli_overrides or {}).items() if v is not None},
        ]

        resolved: dict[str, Any] = {}
        for field in SnippetSettings.model_fields:
            for layer in reversed(layers):
                if field in layer:
                    resolved[field] = layer[field]
                    break
            else:
                if (env_value := _get_env_value(field, os.environ)) is not None:
                    resolved[field] = env_value
                else:
                    resolved[field] = DEFAULT_SETTINGS.get(field)

        try:
            return SnippetSettings(**resolved)
        except PydanticValidationError as e:
            raise ConfigError(
                "settings",
                f"Invalid SnipDeck settings:\n{_format_validation_errors(e)}",
            ) from e

    def _load_from_dir(
        self, config_dir: Path, error_code: str, config_name: str
    ) -> ConfigFile | None:
        yml_path = config_dir / "config.yml"
        yaml_path = config_dir / "config.yaml"

        config_path = None
        if yml_path.exists():
            config_path = yml_path
            if yaml_path.exists():
                logger.info(
                    f"Both {yml_path} and {yaml_path} exist. "
                    f"Using {yml_path} (prefer .yml extension)."
                )
        elif yaml_path.exists():
            config_path = yaml_path

        if config_path is None:
            return None
        return self._parse_config(config_path, error_code, config_name)

    def _parse_config(
        self, config_path: Path, error_code: str, config_name: str
    ) -> ConfigFile | None:
        try:
            raw_text = config_path.read_text(encoding="utf-8")
            config_dict = yaml.safe_load(substitute_env_vars(raw_text))
        except OSError as e:
            raise ConfigError(
                f"{error_code}_read", f"Failed to read {config_name}: {e}"
            ) from e
        except yaml.YAMLError as e:
            raise ConfigError(
                f"{error_code}_parse",
                f"Failed to parse {config_name} at {config_path}: {str(e)}",
            ) from e

        if not config_dict:
            return None
        if not isinstance(config_dict, dict):
            raise ConfigError(
                f"{error_code}_parse",
                f"Expected a mapping in {config_path}, got {type(config_dict).__name__}",
            )

        try:
            return ConfigFile(**config_dict)
        except PydanticValidationError as e:
            raise ConfigError(
                f"{error_code}_validation",
                f"Invalid {config_name} in {config_path}:\n"
                f"{_format_validation_errors(e)}",
            ) from e
