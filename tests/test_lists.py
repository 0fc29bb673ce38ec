"""Tests for list rendering."""

import pytest
from html2slack.formatters.lists import to_letters, to_roman
from html2slack.mrkdwn import render
from html2slack.parser import parse_html


def list_html(tag: str, list_type: str | None = None, count: int = 3) -> str:
    type_attr = f' type="{list_type}"' if list_type else ""
    items = "\n".join(f"  <li>Item {idx}</li>" for idx in range(1, count + 1))
    return f"<{tag}{type_attr}>\n{items}\n</{tag}>"


class TestNumbering:
    """Test numbering token helpers."""

    @pytest.mark.parametrize(
        "number, expected",
        [(1, "I"), (3, "III"), (4, "IV"), (9, "IX"), (14, "XIV"), (1994, "MCMXCIV")],
    )
    def test_to_roman(self, number: int, expected: str) -> None:
        """Test Roman numeral conversion."""
        assert to_roman(number) == expected

    @pytest.mark.parametrize(
        "index, expected",
        [(0, "A"), (1, "B"), (25, "Z"), (26, "AA"), (27, "AB"), (51, "AZ"), (52, "BA")],
    )
    def test_to_letters(self, index: int, expected: str) -> None:
        """Test letters continue past Z as AA, AB, ..."""
        assert to_letters(index) == expected


class TestUnorderedList:
    """Test <ul> rendering."""

    def test_empty_list(self) -> None:
        """Test an empty list renders nothing."""
        assert render(parse_html("<ul></ul>")) == ""

    def test_bullets(self) -> None:
        """Test each item is bulleted on its own line."""
        expected = "• Item 1\n• Item 2\n• Item 3"
        assert render(parse_html(list_html("ul"))) == expected

    def test_item_text_is_escaped(self) -> None:
        """Test control characters in items are escaped."""
        assert render(parse_html("<ul><li>a &lt; b</li></ul>")) == "• a &lt; b"


class TestOrderedList:
    """Test <ol> rendering."""

    def test_empty_list(self) -> None:
        """Test an empty list renders nothing."""
        assert render(parse_html("<ol></ol>")) == ""
        assert render(parse_html('<ol type="I"></ol>')) == ""

    def test_defaults_to_numbers(self) -> None:
        """Test a list without type is numbered."""
        assert render(parse_html(list_html("ol"))) == "1. Item 1\n2. Item 2\n3. Item 3"

    def test_unknown_type_falls_back_to_numbers(self) -> None:
        """Test an unsupported type attribute numbers the items."""
        assert render(parse_html(list_html("ol", "x"))) == (
            "1. Item 1\n2. Item 2\n3. Item 3"
        )

    @pytest.mark.parametrize(
        "list_type, expected",
        [
            ("1", "1. Item 1\n2. Item 2\n3. Item 3"),
            ("A", "A. Item 1\nB. Item 2\nC. Item 3"),
            ("a", "a. Item 1\nb. Item 2\nc. Item 3"),
            ("I", "`  I.` Item 1\n` II.` Item 2\n`III.` Item 3"),
            ("i", "`  i.` Item 1\n` ii.` Item 2\n`iii.` Item 3"),
        ],
    )
    def test_list_types(self, list_type: str, expected: str) -> None:
        """Test every list type, with Roman numerals padded to align."""
        assert render(parse_html(list_html("ol", list_type))) == expected

    def test_letters_past_z(self) -> None:
        """Test the 27th item of a lettered list is AA."""
        lines = render(parse_html(list_html("ol", "A", count=27))).split("\n")
        assert lines[25] == "Z. Item 26"
        assert lines[26] == "AA. Item 27"
