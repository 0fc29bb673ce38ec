"""Table rule: a fixed-width, Markdown-looking table inside a code block.

    | Some content | is short             | but                        |
    |--------------|----------------------|----------------------------|
    |     But      | some is              | absurdly and stupidly long |
    |--------------|----------------------|----------------------------|
    |    It's also | cool to align on the |                      right |
"""

import math
from collections.abc import Callable

from html2slack.formatters.base import FormatterRegistry, TagFormatter
from html2slack.models.nodes import Element, Text
from html2slack.slack_utils import escape_mrkdwn

# Table theme
ROW_PREFIX = "| "
ROW_SUFFIX = " |"
COLUMN_SEPARATOR = " | "
LINE_PREFIX = "|-"
LINE_SUFFIX = "-|"
LINE_PAD = "-"
LINE_SEPARATOR = "-|-"

FENCE = "```"
DEFAULT_ALIGN = "left"


def align_left(text: str, width: int) -> str:
    return text.ljust(width)


def align_right(text: str, width: int) -> str:
    return text.rjust(width)


def align_center(text: str, width: int) -> str:
    half = (width - len(text)) / 2
    return " " * math.floor(half) + text + " " * math.ceil(half)


ALIGNMENTS: dict[str, Callable[[str, int], str]] = {
    "left": align_left,
    "right": align_right,
    "center": align_center,
}


def column_widths(rows: list[list[Element]]) -> list[int]:
    """Compute the widest cell text of every column.

    Args:
        rows: Cells of each row. Rows may have different lengths.

    Returns:
        One width per column, as many columns as the longest row.
    """
    widths: list[int] = []
    for cells in rows:
        for idx, cell in enumerate(cells):
            length = len(cell.text)
            if idx < len(widths):
                widths[idx] = max(widths[idx], length)
            else:
                widths.append(length)
    return widths


def _cell_text(cell: Element) -> str:
    if not cell.children:
        return ""
    first = cell.children[0]
    if isinstance(first, Element):
        return first.text
    if isinstance(first, Text):
        return first.content
    return first


@FormatterRegistry.register
class TableFormatter(TagFormatter):
    """Render <tr>/<td> rows with per-cell ``align`` (left, right, center)."""

    @classmethod
    def get_tag_names(cls) -> tuple[str, ...]:
        return ("table",)

    def format(self, text: str, node: Element) -> str:
        rows = [row.find_all("td") for row in node.find_all("tr")]
        if not rows:
            return ""

        widths = column_widths(rows)
        dashes = LINE_SEPARATOR.join(LINE_PAD * width for width in widths)
        separator = LINE_PREFIX + dashes + LINE_SUFFIX + "\n"
        lines = [self._format_row(cells, widths) for cells in rows]
        return f"{FENCE}{separator.join(lines)}{FENCE}"

    def _format_row(self, cells: list[Element], widths: list[int]) -> str:
        formatted = []
        for idx, cell in enumerate(cells):
            align_name = cell.attributes.get("align", DEFAULT_ALIGN)
            align = ALIGNMENTS.get(align_name, align_left)
            formatted.append(escape_mrkdwn(align(_cell_text(cell), widths[idx])))
        return ROW_PREFIX + COLUMN_SEPARATOR.join(formatted) + ROW_SUFFIX + "\n"
