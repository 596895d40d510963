#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for line-oriented list extraction."""

import pytest

from blogrender.lists import extract_lists, strip_list_marker


@pytest.mark.unit
class TestStripListMarker:
    """Tests for list item recognition."""

    @pytest.mark.parametrize(
        "line,expected",
        [
            ("- apples", "apples"),
            ("* pears", "pears"),
            ("1. one", "one"),
            ("12. twelve", "twelve"),
        ],
    )
    def test_item_lines(self, line, expected):
        """Test that bullet and ordered markers are removed."""
        assert strip_list_marker(line) == expected

    @pytest.mark.parametrize("line", ["plain text", "-no space", "1.no space", "+ plus", "a. letter"])
    def test_non_item_lines(self, line):
        """Test that other lines are not list items."""
        assert strip_list_marker(line) is None


@pytest.mark.unit
class TestExtractLists:
    """Tests for grouping item lines into lists."""

    def test_single_bullet_list(self):
        """Test a list starting on the first line."""
        assert extract_lists("- a\n- b\n") == {"0": ["a", "b"]}

    def test_key_is_zero_based_line_of_first_item(self):
        """Test that the key is the line index of the first item."""
        markdown = "# Title\n\nIntro.\n\n- a\n- b\n"
        assert extract_lists(markdown) == {"4": ["a", "b"]}

    def test_indented_continuation_joins_previous_item(self):
        """Test that an indented line extends the last item."""
        assert extract_lists("- first\n- second\n  wrapped\n") == {"0": ["first", "second wrapped"]}

    def test_blank_line_closes_list(self):
        """Test that a blank line separates two lists."""
        markdown = "- a\n\n1. one\n2. two\n"
        assert extract_lists(markdown) == {"0": ["a"], "2": ["one", "two"]}

    def test_unindented_text_closes_list(self):
        """Test that a non-item, non-indented line ends the list."""
        markdown = "- a\nNot an item\n- b\n"
        assert extract_lists(markdown) == {"0": ["a"], "2": ["b"]}

    def test_nested_items_are_flattened(self):
        """Test that indented items join the same list."""
        markdown = "- outer\n  - inner\n- last\n"
        assert extract_lists(markdown) == {"0": ["outer", "inner", "last"]}

    def test_item_text_is_kept_verbatim(self):
        """Test that inline Markdown inside items is not transformed."""
        assert extract_lists("- **bold** [x](y)\n") == {"0": ["**bold** [x](y)"]}

    def test_no_lists(self):
        """Test a document without list lines."""
        assert extract_lists("Just a paragraph.\n\nAnother.\n") == {}

    def test_list_at_end_without_newline(self):
        """Test that a list ending the document is recorded."""
        assert extract_lists("Intro\n\n* x\n* y") == {"2": ["x", "y"]}
