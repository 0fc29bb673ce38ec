"""Tests for the HTML attribute to Slack key mapping."""

from html2slack.attributes import map_attributes
from html2slack.models.nodes import Element


class TestMapAttributes:
    """Test map_attributes."""

    def test_plain_attributes_pass_through(self, first_element) -> None:
        """Test attributes without dashes are copied unchanged."""
        node = first_element('<p class="foo" style="bar" name="baz" id="quz"></p>')
        assert map_attributes(node) == {
            "class": "foo",
            "style": "bar",
            "name": "baz",
            "id": "quz",
        }

    def test_dashed_attributes_become_snake_case(self, first_element) -> None:
        """Test html-style dashed names are converted to slack_style ones."""
        node = first_element('<p dashed-attribute="foo" other-attribute="bar"></p>')
        assert map_attributes(node) == {
            "dashed_attribute": "foo",
            "other_attribute": "bar",
        }

    def test_every_dash_is_replaced(self) -> None:
        """Test names with several dashes have all of them replaced."""
        node = Element("section", {"author-icon-url": "https://x/y-z.png"})
        assert map_attributes(node) == {"author_icon_url": "https://x/y-z.png"}

    def test_values_are_unchanged(self) -> None:
        """Test values keep their dashes and whitespace."""
        node = Element("section", {"footer": " a-b - c "})
        assert map_attributes(node)["footer"] == " a-b - c "

    def test_excluded_attributes(self) -> None:
        """Test excluded names are left out."""
        node = Element("input", {"type": "email", "max-length": "10", "required": ""})
        mapped = map_attributes(node, exclude=("type", "required"))
        assert mapped == {"max_length": "10"}

    def test_no_attributes(self) -> None:
        """Test an element without attributes maps to an empty dict."""
        assert map_attributes(Element("p")) == {}
