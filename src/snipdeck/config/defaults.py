"""Default settings for SnipDeck."""

from snipdeck.models.settings import DEFAULT_SOURCE_FILE, DEFAULT_STATE_DIR

DEFAULT_SETTINGS: dict[str, int | bool | str | list[str]] = {
    "source_file": DEFAULT_SOURCE_FILE,
    "category_heading_level": 1,
    "snippet_heading_level": 2,
    "respect_context_depth": True,
    "expand_separator": ":",
    "function_modules": [],
    "state_dir": DEFAULT_STATE_DIR,
}

# Environment variable to field name mapping
ENV_VAR_MAP: dict[str, str] = {
    "source_file": "SNIPDECK_SOURCE_FILE",
    "category_heading_level": "SNIPDECK_CATEGORY_HEADING_LEVEL",
    "snippet_heading_level": "SNIPDECK_SNIPPET_HEADING_LEVEL",
    "respect_context_depth": "SNIPDECK_RESPECT_CONTEXT_DEPTH",
    "expand_separator": "SNIPDECK_EXPAND_SEPARATOR",
    "state_dir": "SNIPDECK_STATE_DIR",
}

CONFIG_DIR_NAME = ".snipdeck"
