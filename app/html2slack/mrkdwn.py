"""Document tree to Slack mrkdwn renderer.

Walks the sub-nodes of an element and translates them into a single mrkdwn
string. Tags with a registered formatter are rendered by it; other tags are
flattened, with children concatenated when they are all inline and put on
separate lines otherwise.
"""

from html2slack.formatters import FormatterRegistry
from html2slack.models.nodes import Element, Node, Text
from html2slack.slack_utils import escape_mrkdwn
from html2slack.tags import is_ignored, is_inline


def render(node: Node) -> str:
    """Convert a node to mrkdwn.

    Args:
        node: Element, Text, or an already rendered string.

    Returns:
        mrkdwn string. Plain strings are returned verbatim, Text content is
        escaped, and elements owned by an extractor (``dl``, ``button``)
        render to an empty string.
    """
    if isinstance(node, str):
        return node
    if isinstance(node, Text):
        return escape_mrkdwn(node.content)
    if isinstance(node, Element):
        return _render_element(node)
    return ""


def _render_element(node: Element) -> str:
    if is_ignored(node.tag_name):
        return ""

    if FormatterRegistry.is_registered(node.tag_name):
        formatter = FormatterRegistry.get(node.tag_name)
        return formatter.format(render_children(node), node)

    return render_children(node)


def render_children(node: Element) -> str:
    """Render the children of an element and join them.

    Children are concatenated if they are all text or inline elements, and
    joined with new lines otherwise. An element without children renders
    its flattened text.
    """
    if not node.children:
        return escape_mrkdwn(node.text)

    if all(_is_inline_node(child) for child in node.children):
        return "".join(render(child) for child in node.children)

    # Indentation between blocks is not content, and extractor-owned blocks
    # leave no empty line behind
    return "\n".join(
        render(child) for child in node.children if not _is_skipped_block(child)
    )


def _is_inline_node(node: Node) -> bool:
    if isinstance(node, Element):
        return is_inline(node.tag_name)
    return True


def _is_skipped_block(node: Node) -> bool:
    if isinstance(node, Element):
        return is_ignored(node.tag_name)
    if isinstance(node, Text):
        return not node.content.strip()
    return not node.strip()
