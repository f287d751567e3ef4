"""Pydantic models for SnipDeck configuration.

``SnippetSettings`` is the resolved, fully-populated configuration the
engine runs with. ``ConfigFile`` mirrors what a user or project
``config.yaml`` may contain; every field there is optional so partial files
can be layered.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DEFAULT_STATE_DIR = "~/.snipdeck"
DEFAULT_SOURCE_FILE = "~/.snipdeck/snippets.org"


class SnippetSettings(BaseModel):
    """Resolved engine settings.

    Attributes:
        source_file: Outline file holding the snippet categories
        category_heading_level: Heading level whose titles name categories
        snippet_heading_level: Heading level whose headings are snippets
        respect_context_depth: Expand ``\\*`` to the destination's heading depth
        expand_separator: Separator between a snippet's key and its description
        function_modules: Modules whose public callables are registered as capabilities
        state_dir: Directory for the persisted category selection
    """

    model_config = ConfigDict(extra="forbid")

    source_file: Path = Field(
        default=Path(DEFAULT_SOURCE_FILE),
        validate_default=True,
        description="Outline file holding the snippet categories",
    )
    category_heading_level: int = Field(
        default=1, ge=1, description="Heading level of category headings"
    )
    snippet_heading_level: int = Field(
        default=2, ge=1, description="Heading level of snippet headings"
    )
    respect_context_depth: bool = Field(
        default=True,
        description="Expand escaped heading markers to the destination depth",
    )
    expand_separator: str = Field(
        default=":", description="Separator used by expand-at-point lookups"
    )
    function_modules: list[str] = Field(
        default_factory=list,
        description="Importable modules whose callables back func/results snippets",
    )
    state_dir: Path = Field(
        default=Path(DEFAULT_STATE_DIR),
        validate_default=True,
        description="Directory holding the persisted selection state",
    )

    @field_validator("source_file", "state_dir")
    @classmethod
    def expand_user_path(cls, v: Path) -> Path:
        """Expand ``~`` so paths from YAML and env vars behave like shell paths."""
        return v.expanduser()

    @field_validator("expand_separator")
    @classmethod
    def validate_separator(cls, v: str) -> str:
        """Validate the expand separator.

        Raises:
            ValueError: If the separator is empty
        """
        if not v:
            raise ValueError("expand_separator cannot be empty")
        return v

    @model_validator(mode="after")
    def validate_levels(self) -> "SnippetSettings":
        """Snippets must sit below their categories in the outline."""
        if self.snippet_heading_level <= self.category_heading_level:
            raise ValueError(
                "snippet_heading_level must be greater than category_heading_level "
                f"(got {self.snippet_heading_level} <= "
                f"{self.category_heading_level})"
            )
        return self


class ConfigFile(BaseModel):
    """Contents of a user-level or project-level ``config.yaml``."""

    model_config = ConfigDict(extra="forbid")

    source_file: str | None = None
    category_heading_level: int | None = Field(default=None, ge=1)
    snippet_heading_level: int | None = Field(default=None, ge=1)
    respect_context_depth: bool | None = None
    expand_separator: str | None = None
    function_modules: list[str] | None = None
    state_dir: str | None = None
