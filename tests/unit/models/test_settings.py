"""Tests for settings models."""

from pathlib import Path
from typing import Any

import pytest
from pydantic import ValidationError

from snipdeck.models.settings import ConfigFile, SnippetSettings


class TestSnippetSettings:
    """Tests for SnippetSettings validation."""

    def test_defaults_expand_home(self, temp_dir: Path, monkeypatch: Any) -> None:
        """Test that default paths are expanded against HOME."""
        monkeypatch.setenv("HOME", str(temp_dir))
        settings = SnippetSettings()
        assert settings.source_file == temp_dir / ".snipdeck" / "snippets.org"
        assert settings.state_dir == temp_dir / ".snipdeck"

    def test_string_paths_coerced(self) -> None:
        """Test that string paths become Path objects."""
        settings = SnippetSettings(source_file="/tmp/s.org")
        assert settings.source_file == Path("/tmp/s.org")

    def test_snippet_level_must_be_deeper(self) -> None:
        """Test that snippets cannot sit at or above their categories."""
        with pytest.raises(ValidationError) as exc_info:
            SnippetSettings(category_heading_level=2, snippet_heading_level=2)
        assert "snippet_heading_level" in str(exc_info.value)

    def test_levels_positive(self) -> None:
        """Test that level zero is rejected."""
        with pytest.raises(ValidationError):
            SnippetSettings(category_heading_level=0)

    def test_empty_separator(self) -> None:
        """Test that an empty expand separator is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            SnippetSettings(expand_separator="")
        assert "expand_separator cannot be empty" in str(exc_info.value)

    def test_extra_fields_forbidden(self) -> None:
        """Test that unknown settings are rejected."""
        with pytest.raises(ValidationError):
            SnippetSettings(source="x.org")  # type: ignore[call-arg]


class TestConfigFile:
    """Tests for partial config files."""

    def test_all_fields_optional(self) -> None:
        """Test that an empty config file is valid."""
        assert ConfigFile().model_dump(exclude_none=True) == {}

    def test_partial(self) -> None:
        """Test that only given fields are set."""
        config = ConfigFile(function_modules=["mysnips.caps"])
        assert config.model_dump(exclude_none=True) == {
            "function_modules": ["mysnips.caps"]
        }
