"""Tests for the tag-derived key table."""

import pytest

from snipdeck.models.snippet import Snippet
from snipdeck.snippets.keymap import KeyBindingBuilder, key_token


class TestKeyToken:
    """Tests for picking a snippet's key."""

    @pytest.mark.parametrize(
        ("tags", "expected"),
        [
            (("d",), "d"),
            (("results", "d"), "d"),
            (("x", "y"), "y"),
            (("results",), None),
            (("func",), None),
            (("d", "indent_nil"), None),
            (("indent_something",), None),
            ((), None),
        ],
    )
    def test_last_tag_unless_reserved(
        self, tags: tuple[str, ...], expected: str | None
    ) -> None:
        """Test that only a non-reserved last tag binds a key."""
        assert key_token(Snippet("s", tags=tags)) == expected


class TestKeyBindingBuilder:
    """Tests for building the table."""

    def test_actions_run_bound_snippet(self) -> None:
        """Test that firing a key runs its own snippet."""
        ran = []
        builder = KeyBindingBuilder(lambda s: ran.append(s.name) or s.name)
        table = builder.build(
            [Snippet("date", tags=("results", "d")), Snippet("sig", tags=("s",))]
        )
        assert sorted(table) == ["d", "s"]
        assert table["d"]() == "date"
        assert table["s"]() == "sig"
        assert ran == ["date", "sig"]

    def test_reserved_and_untagged_excluded(self) -> None:
        """Test that snippets without a usable key are skipped."""
        table = KeyBindingBuilder(lambda s: None).build(
            [
                Snippet("a", tags=("results",)),
                Snippet("b", tags=("func",)),
                Snippet("c", tags=("indent_fixed",)),
                Snippet("d"),
            ]
        )
        assert table == {}

    def test_last_snippet_wins_shared_key(self) -> None:
        """Test that a later snippet replaces an earlier binding."""
        builder = KeyBindingBuilder(lambda s: s.name)
        table = builder.build([Snippet("first", tags=("k",)), Snippet("second", tags=("k",))])
        assert table["k"]() == "second"

    def test_actions_bind_snippet_not_name(self) -> None:
        """Test that each action keeps its own snippet after the build loop."""
        builder = KeyBindingBuilder(lambda s: s.content)
        snippets = [Snippet("same", ("a",), "one"), Snippet("same", ("b",), "two")]
        table = builder.build(snippets)
        assert table["a"]() == "one"
        assert table["b"]() == "two"
