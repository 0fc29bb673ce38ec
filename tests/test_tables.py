"""Tests for table rendering."""

from html2slack.formatters.tables import align_center, align_left, align_right
from html2slack.mrkdwn import render
from html2slack.parser import parse_html


class TestAlignment:
    """Test cell padding helpers."""

    def test_left(self) -> None:
        assert align_left("ab", 5) == "ab   "

    def test_right(self) -> None:
        assert align_right("ab", 5) == "   ab"

    def test_center_puts_extra_space_on_the_right(self) -> None:
        """Test odd padding is split floor left, ceil right."""
        assert align_center("But", 12) == "    But     "
        assert align_center("ab", 6) == "  ab  "


class TestTable:
    """Test <table> rendering."""

    def test_aligned_table(self) -> None:
        """Test a 3x3 table with mixed alignments."""
        html = """
        <table>
          <tr>
            <td>Some content</td>
            <td>is short</td>
            <td>but</td>
          </tr>
          <tr>
            <td align="center">But</td>
            <td>some is</td>
            <td>absurdly and stupidly long</td>
          </tr>
          <tr>
            <td align="right">It's also</td>
            <td align="right">cool to align on the</td>
            <td align="right">right</td>
          </tr>
        </table>"""
        expected = (
            "```| Some content | is short             | but                        |\n"
            "|--------------|----------------------|----------------------------|\n"
            "|     But      | some is              | absurdly and stupidly long |\n"
            "|--------------|----------------------|----------------------------|\n"
            "|    It's also | cool to align on the |                      right |\n"
            "```"
        )
        assert render(parse_html(html)) == expected

    def test_empty_table(self) -> None:
        """Test a table without rows renders nothing."""
        assert render(parse_html("<table></table>")) == ""

    def test_unknown_alignment_is_left(self) -> None:
        """Test an unsupported align value pads on the right."""
        html = '<table><tr><td align="justify">a</td></tr><tr><td>bbb</td></tr></table>'
        assert render(parse_html(html)) == "```| a   |\n|-----|\n| bbb |\n```"

    def test_cells_are_escaped(self) -> None:
        """Test cell text is escaped after padding."""
        html = "<table><tr><td>a&amp;b</td></tr></table>"
        assert render(parse_html(html)) == "```| a&amp;b |\n```"

    def test_ragged_rows(self) -> None:
        """Test shorter rows only render the cells they have."""
        html = "<table><tr><td>a</td><td>b</td></tr><tr><td>c</td></tr></table>"
        assert render(parse_html(html)) == "```| a | b |\n|---|---|\n| c |\n```"
