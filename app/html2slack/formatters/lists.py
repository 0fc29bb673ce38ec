"""List rules.

Slack has no list syntax, so items are prefixed with a bullet or a
numbering token on their own line. Only one level of items is supported.
"""

from collections.abc import Callable

from html2slack.formatters.base import FormatterRegistry, TagFormatter
from html2slack.models.nodes import Element
from html2slack.slack_utils import escape_mrkdwn

BULLET = "•"

_ROMAN_NUMERALS = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)


def to_roman(number: int) -> str:
    """Convert a positive integer to an uppercase Roman numeral."""
    parts = []
    for value, numeral in _ROMAN_NUMERALS:
        count, number = divmod(number, value)
        parts.append(numeral * count)
    return "".join(parts)


def to_letters(index: int) -> str:
    """Convert a zero-based index to letters: A..Z, AA, AB, ..."""
    letters = ""
    number = index + 1
    while number:
        number, remainder = divmod(number - 1, 26)
        letters = chr(ord("A") + remainder) + letters
    return letters


# Prefixers map a zero-based item index to its numbering token
PREFIXERS: dict[str, Callable[[int], str]] = {
    "1": lambda idx: str(idx + 1),
    "A": to_letters,
    "a": lambda idx: to_letters(idx).lower(),
    "I": lambda idx: to_roman(idx + 1),
    "i": lambda idx: to_roman(idx + 1).lower(),
}

# Roman numerals have uneven widths; these get padded so the dots align
PADDED_TYPES = frozenset({"I", "i"})


@FormatterRegistry.register
class UnorderedListFormatter(TagFormatter):
    """Bulleted list:

    • Item 1
    • Item 2
    """

    @classmethod
    def get_tag_names(cls) -> tuple[str, ...]:
        return ("ul",)

    def format(self, text: str, node: Element) -> str:
        items = node.find_all("li")
        return "\n".join(f"{BULLET} {escape_mrkdwn(li.text)}" for li in items)


@FormatterRegistry.register
class OrderedListFormatter(TagFormatter):
    """Numbered list, following the ``type`` attribute of <ol>.

    - 1: numbers (default)
    - A / a: upper / lower case letters
    - I / i: upper / lower case Roman numerals, right-aligned in inline
      code so Slack keeps the padding:

        `  I.` Item one
        ` II.` Item two
        `III.` Item three
    """

    @classmethod
    def get_tag_names(cls) -> tuple[str, ...]:
        return ("ol",)

    def format(self, text: str, node: Element) -> str:
        list_type = node.attributes.get("type", "1")
        if list_type not in PREFIXERS:
            list_type = "1"
        prefixer = PREFIXERS[list_type]

        items = node.find_all("li")
        prefixes = [prefixer(idx) for idx in range(len(items))]

        if list_type in PADDED_TYPES and prefixes:
            width = max(len(prefix) for prefix in prefixes)
            return "\n".join(
                f"`{prefix.rjust(width)}.` {escape_mrkdwn(li.text)}"
                for prefix, li in zip(prefixes, items)
            )

        return "\n".join(
            f"{prefix}. {escape_mrkdwn(li.text)}" for prefix, li in zip(prefixes, items)
        )
