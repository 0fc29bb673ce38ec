from collections.abc import Iterable

from html2slack.models.nodes import Element


def map_attributes(node: Element, exclude: Iterable[str] = ()) -> dict[str, str]:
    """Expose HTML attributes as Slack keys.

    HTML attribute names are dashed while Slack's are snake_cased, so every
    ``-`` in a name becomes ``_`` (``author-name`` -> ``author_name``).
    Values are kept unchanged.

    Args:
        node: Element whose attributes are mapped.
        exclude: HTML attribute names to leave out.

    Returns:
        Mapped attributes.
    """
    excluded = set(exclude)
    return {
        name.replace("-", "_"): value
        for name, value in node.attributes.items()
        if name not in excluded
    }
