"""Tests for the description list to Slack fields converter."""

import logging

from html2slack.fields import extract_fields, find_fields


class TestExtractFields:
    """Test extract_fields."""

    def test_no_description_list(self, parse) -> None:
        """Test a node without <dl> has no fields."""
        assert extract_fields(parse("<p>Some text but no list</p>")) == {}

    def test_empty_description_list(self, parse) -> None:
        """Test an empty <dl> has no fields."""
        assert extract_fields(parse("<dl></dl>")) == {}

    def test_pairs(self, parse) -> None:
        """Test dt/dd pairs become fields in order."""
        node = parse(
            """
            <dl>
              <dt>Title 1</dt>
              <dd>Some list element</dd>
              <dt>Different title</dt>
              <dd>Another list element</dd>
            </dl>"""
        )
        assert extract_fields(node) == {
            "fields": [
                {"title": "Title 1", "value": "Some list element", "short": False},
                {
                    "title": "Different title",
                    "value": "Another list element",
                    "short": False,
                },
            ]
        }

    def test_markup_in_titles_and_values(self, parse) -> None:
        """Test titles and values are rendered as inline mrkdwn."""
        node = parse(
            """
            <dl>
              <dt>Title <b>1</b></dt>
              <dd>Some <i>list</i> element</dd>
            </dl>"""
        )
        assert extract_fields(node) == {
            "fields": [
                {"title": "Title *1*", "value": "Some _list_ element", "short": False}
            ]
        }

    def test_short_fields(self, parse) -> None:
        """Test the short class on <dd> marks the field as short."""
        node = parse('<dl><dt>Title 1</dt><dd class="short">Value</dd></dl>')
        assert extract_fields(node)["fields"][0]["short"] is True

    def test_only_first_list(self, parse) -> None:
        """Test later description lists are ignored."""
        node = parse(
            """
            <dl><dt>Title 1</dt><dd class="short">Some list element</dd></dl>
            <dl><dt>Title 2</dt><dd class="short">Another list</dd></dl>"""
        )
        fields = extract_fields(node)["fields"]
        assert len(fields) == 1
        assert fields[0]["title"] == "Title 1"


class TestFindFields:
    """Test find_fields."""

    def test_mismatched_pairs_are_truncated(self, parse, caplog) -> None:
        """Test an extra <dt> is dropped with a warning."""
        node = parse("<dl><dt>A</dt><dd>1</dd><dt>B</dt></dl>")
        with caplog.at_level(logging.WARNING, logger="html2slack.fields"):
            fields = find_fields(node)

        assert [(f.title, f.value) for f in fields] == [("A", "1")]
        assert "2 <dt> and 1 <dd>" in caplog.text

    def test_values_are_escaped(self, parse) -> None:
        """Test control characters in fields are escaped."""
        fields = find_fields(parse("<dl><dt>a &lt; b</dt><dd>x &amp; y</dd></dl>"))
        assert fields[0].title == "a &lt; b"
        assert fields[0].value == "x &amp; y"
