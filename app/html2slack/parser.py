"""Markup to document tree adapter.

Parsing is delegated to BeautifulSoup with the standard library's
``html.parser`` backend; this module only converts the soup into the
Element/Text tree the renderer works on.
"""

import logging

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

from html2slack.exceptions import InvalidEncodingError
from html2slack.models.nodes import Element, Node, Text

logger = logging.getLogger(__name__)

DOCUMENT_TAG = "#document"


def parse_html(markup: str | bytes) -> Element:
    """Parse markup into a document tree.

    Args:
        markup: HTML document or fragment. Bytes are decoded as UTF-8.

    Returns:
        Root element (tag ``#document``) whose children are the top-level
        nodes of the markup.

    Raises:
        InvalidEncodingError: If bytes are not valid UTF-8.
    """
    if isinstance(markup, bytes):
        try:
            markup = markup.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidEncodingError(
                f"Document is not valid UTF-8 (byte {e.start}): {e.reason}"
            ) from e

    soup = BeautifulSoup(markup, "html.parser")
    root = Element(tag_name=DOCUMENT_TAG, children=_convert_children(soup))
    logger.debug(f"Parsed document with {len(root.children)} top-level nodes")
    return root


def _convert_children(tag: Tag) -> list[Node]:
    children: list[Node] = []
    for child in tag.children:
        # Comments, doctypes, CDATA and processing instructions carry no content
        if isinstance(child, PreformattedString):
            continue
        if isinstance(child, NavigableString):
            children.append(Text(str(child)))
        elif isinstance(child, Tag):
            children.append(_convert_tag(child))
    return children


def _convert_tag(tag: Tag) -> Element:
    attributes: dict[str, str] = {}
    for name, value in tag.attrs.items():
        # Multi-valued attributes (class, rel, ...) come back as lists
        if isinstance(value, list):
            value = " ".join(value)
        attributes[name.lower()] = value if value is not None else ""
    return Element(
        tag_name=tag.name.lower(),
        attributes=attributes,
        children=_convert_children(tag),
    )
