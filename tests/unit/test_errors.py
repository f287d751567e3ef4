"""Tests for the SnipDeck exception hierarchy."""

import pytest

from snipdeck.lib.errors import (
    CategoryNotFoundError,
    ConfigError,
    DispatchError,
    FileNotFoundError,
    FunctionNotFoundError,
    NoExecutableBlockError,
    ParseError,
    SnipDeckError,
    SnippetExecutionError,
    SnippetNotFoundError,
    StateError,
    ValidationError,
)


class TestSnipDeckError:
    """Tests for the base exception."""

    def test_is_exception(self) -> None:
        """Test that SnipDeckError can be raised and caught as Exception."""
        with pytest.raises(Exception):
            raise SnipDeckError("boom")

    @pytest.mark.parametrize(
        "error",
        [
            ConfigError("field", "msg"),
            ValidationError("field", "msg", "int", "str"),
            FileNotFoundError("/tmp/x", "missing"),
            StateError("/tmp/state.json", "bad"),
            ParseError("bad bytes"),
            CategoryNotFoundError("Prog"),
            SnippetNotFoundError("Hello"),
            FunctionNotFoundError("ping"),
            NoExecutableBlockError("ping", "no block"),
            SnippetExecutionError("ping", ZeroDivisionError("division by zero")),
        ],
    )
    def test_all_errors_inherit_from_base(self, error: SnipDeckError) -> None:
        """Test that every error can be handled through SnipDeckError."""
        assert isinstance(error, SnipDeckError)


class TestConfigError:
    """Tests for ConfigError."""

    def test_message_includes_field(self) -> None:
        """Test that the field name appears in the message."""
        error = ConfigError("source_file", "must be a path")
        assert error.field == "source_file"
        assert error.message == "must be a path"
        assert "'source_file'" in str(error)
        assert "must be a path" in str(error)


class TestValidationError:
    """Tests for ValidationError."""

    def test_message_includes_expected_and_actual(self) -> None:
        """Test that expected and actual values are rendered."""
        error = ValidationError("name", "bad name", "one line", "''")
        text = str(error)
        assert "Validation error in 'name': bad name" in text
        assert "Expected: one line" in text
        assert "Got: ''" in text


class TestFileNotFoundError:
    """Tests for the SnipDeck FileNotFoundError."""

    def test_does_not_shadow_builtin_hierarchy(self) -> None:
        """Test that the SnipDeck error is not an OSError."""
        error = FileNotFoundError("/tmp/snippets.org", "gone")
        assert not isinstance(error, OSError)
        assert error.path == "/tmp/snippets.org"
        assert "File not found: /tmp/snippets.org" in str(error)


class TestParseError:
    """Tests for ParseError."""

    def test_with_source(self) -> None:
        """Test that the source label is included when given."""
        error = ParseError("not valid UTF-8", "a.org")
        assert str(error) == "Cannot parse outline a.org: not valid UTF-8"

    def test_without_source(self) -> None:
        """Test the message when no source label is given."""
        assert str(ParseError("oops")) == "Cannot parse outline: oops"


class TestLookupErrors:
    """Tests for category and snippet lookup errors."""

    def test_category_not_selected(self) -> None:
        """Test the message when no category is selected at all."""
        error = CategoryNotFoundError(None)
        assert error.category is None
        assert str(error) == "No snippet category selected"

    def test_category_missing(self) -> None:
        """Test the message for an unknown category."""
        assert str(CategoryNotFoundError("Go")) == "No category named 'Go'"

    def test_snippet_missing_with_category(self) -> None:
        """Test that the searched category is named."""
        error = SnippetNotFoundError("Hello", "Prog")
        assert error.name == "Hello"
        assert str(error) == "No snippet named 'Hello' in category 'Prog'"


class TestDispatchErrors:
    """Tests for dispatch failures."""

    def test_function_not_found_is_dispatch_error(self) -> None:
        """Test FunctionNotFoundError carries the looked-up name."""
        error = FunctionNotFoundError("ping")
        assert isinstance(error, DispatchError)
        assert error.name == "ping"
        assert "'ping'" in str(error)

    def test_no_executable_block_reason(self) -> None:
        """Test NoExecutableBlockError includes the reason."""
        error = NoExecutableBlockError("calc", "body holds more than one block")
        assert isinstance(error, DispatchError)
        assert error.reason == "body holds more than one block"
        assert str(error).endswith("body holds more than one block")
