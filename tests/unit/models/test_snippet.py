"""Tests for outline and snippet models."""

import pytest

from snipdeck.models.snippet import HeadingNode, Snippet, SnippetKind


class TestSnippetKind:
    """Tests for deriving the behavior variant from tags."""

    @pytest.mark.parametrize(
        ("tags", "expected"),
        [
            ((), SnippetKind.PLAIN_TEXT),
            (("d",), SnippetKind.PLAIN_TEXT),
            (("func",), SnippetKind.FUNCTION_CALL),
            (("results",), SnippetKind.FUNCTION_CALL_WITH_RESULT),
            (("results", "func"), SnippetKind.FUNCTION_CALL),
            (("Func",), SnippetKind.PLAIN_TEXT),
        ],
    )
    def test_from_tags(self, tags: tuple[str, ...], expected: SnippetKind) -> None:
        """Test tag matching, which is exact and case-sensitive."""
        assert SnippetKind.from_tags(tags) == expected


class TestSnippet:
    """Tests for Snippet records."""

    def test_kind_derived_on_creation(self) -> None:
        """Test that kind is computed from the tags."""
        assert Snippet("x", tags=("results", "d")).kind == (
            SnippetKind.FUNCTION_CALL_WITH_RESULT
        )

    def test_tags_coerced_to_tuple(self) -> None:
        """Test that list tags are stored as a tuple."""
        snippet = Snippet("x", tags=["a", "b"])  # type: ignore[arg-type]
        assert snippet.tags == ("a", "b")

    def test_last_tag(self) -> None:
        """Test last_tag for tagged and untagged snippets."""
        assert Snippet("x", tags=("a", "b")).last_tag == "b"
        assert Snippet("x").last_tag is None

    def test_none_content_differs_from_empty(self) -> None:
        """Test that an absent body is not an empty string."""
        assert Snippet("x").content is None
        assert Snippet("x", content="") != Snippet("x")

    def test_immutable(self) -> None:
        """Test that snippets cannot be modified."""
        snippet = Snippet("x")
        with pytest.raises(AttributeError):
            snippet.name = "y"  # type: ignore[misc]


class TestHeadingNode:
    """Tests for tree walking."""

    def test_walk_preorder_with_ancestors(self) -> None:
        """Test that walk yields descendants with their ancestor titles."""
        b = HeadingNode(level=2, title="B", children=[HeadingNode(level=3, title="C")])
        tree = HeadingNode(
            level=0,
            title="",
            children=[
                HeadingNode(level=1, title="A", children=[b]),
                HeadingNode(level=1, title="D"),
            ],
        )
        assert [(n.title, a) for n, a in tree.walk()] == [
            ("A", ()),
            ("B", ("A",)),
            ("C", ("A", "B")),
            ("D", ()),
        ]
