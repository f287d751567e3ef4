"""Tests for appending snippets to outline text."""

import pytest

from snipdeck.lib.errors import CategoryNotFoundError
from snipdeck.snippets.capture import append_snippet, escape_body, format_heading
from snipdeck.snippets.index import CategoryIndex
from snipdeck.snippets.parser import OutlineParser


class TestFormatHeading:
    """Tests for heading rendering."""

    def test_without_tags(self) -> None:
        """Test a plain heading line."""
        assert format_heading(2, "Hello") == "** Hello"

    def test_with_tags(self) -> None:
        """Test that tags are rendered as a trailing run."""
        assert format_heading(2, "Date", ["results", "d"]) == "** Date :results:d:"

    def test_round_trips_through_parser(self) -> None:
        """Test that the parser reads back title and tags."""
        node = OutlineParser().match_heading(format_heading(3, "a: b", ["x", "y"]))
        assert node is not None
        assert (node.level, node.title, node.tags) == (3, "a: b", ["x", "y"])


class TestEscapeBody:
    """Tests for body escaping."""

    def test_heading_lines_escaped(self) -> None:
        """Test that lines starting with a marker are escaped."""
        assert escape_body("* top\ntext\n** sub") == "\\* top\ntext\n\\** sub"

    def test_other_lines_untouched(self) -> None:
        """Test that indented markers are left alone."""
        assert escape_body("  * item") == "  * item"

    def test_emphasis_untouched(self) -> None:
        """Test that a leading star without a following space is not escaped."""
        body = "*important* note\n**bold**"
        assert escape_body(body) == body


class TestAppendSnippet:
    """Tests for inserting a snippet into a category."""

    def test_appends_at_end_of_category(self, sample_outline: str) -> None:
        """Test that the snippet lands after the category's last snippet."""
        updated = append_snippet(sample_outline, "Prog", "New", "body\n", ["n"])
        tree = OutlineParser().parse(updated)
        prog = CategoryIndex().snippets_of(tree, "Prog")
        text = CategoryIndex().snippets_of(tree, "Text")
        assert prog[-1].name == "New"
        assert prog[-1].tags == ("n",)
        assert prog[-1].content == "body\n"
        assert [s.name for s in text] == ["Hello", "sig: signature"]

    def test_appends_to_last_category(self, sample_outline: str) -> None:
        """Test appending to the category at the end of the file."""
        updated = append_snippet(sample_outline, "Text", "Bye", "Ciao")
        assert updated.endswith("** Bye\nCiao\n")

    def test_keeps_separating_blank_lines(self) -> None:
        """Test that blank lines before the next category stay below the new snippet."""
        source = "* A\n** one\n1\n\n* B\n"
        assert append_snippet(source, "A", "two", "2") == (
            "* A\n** one\n1\n** two\n2\n\n* B\n"
        )

    def test_empty_content(self) -> None:
        """Test that a snippet without content is only a heading."""
        updated = append_snippet("* A\n", "A", "blank", None)
        assert updated == "* A\n** blank\n"

    def test_heading_in_content_is_escaped(self) -> None:
        """Test that captured content cannot create new headings."""
        updated = append_snippet("* A\n", "A", "tree", "* child\n")
        tree = OutlineParser().parse(updated)
        snippets = CategoryIndex().snippets_of(tree, "A")
        assert len(snippets) == 1
        assert snippets[0].content == "\\* child\n"

    def test_emphasis_in_content_reads_back(self) -> None:
        """Test that an emphasized first word survives a capture unchanged."""
        updated = append_snippet("* A\n", "A", "note", "*important* note\n")
        tree = OutlineParser().parse(updated)
        snippets = CategoryIndex().snippets_of(tree, "A")
        assert snippets[0].content == "*important* note\n"

    def test_missing_category(self) -> None:
        """Test that an unknown category raises."""
        with pytest.raises(CategoryNotFoundError):
            append_snippet("* A\n", "B", "x", "y")
