"""Description lists to Slack attachment fields.

Only the first <dl> of a subtree is converted:

    <dl>
      <dt>Title</dt>
      <dd class="short">Value</dd>
    </dl>
"""

import logging
from typing import Any

from html2slack.models.nodes import Element
from html2slack.models.slack import Field
from html2slack.mrkdwn import render

logger = logging.getLogger(__name__)

SHORT_CLASS = "short"


def extract_fields(node: Element) -> dict[str, Any]:
    """Convert the first description list of a node into Slack fields.

    Args:
        node: Subtree to search.

    Returns:
        ``{"fields": [...]}``, or an empty dict when there is no <dl> or it
        has no <dt>.
    """
    fields = find_fields(node)
    if not fields:
        return {}
    return {"fields": [f.to_dict() for f in fields]}


def find_fields(node: Element) -> list[Field]:
    """Pair the <dt> and <dd> of the first description list of a node."""
    definition_list = node.find("dl")
    if definition_list is None:
        return []

    titles = definition_list.find_all("dt")
    values = definition_list.find_all("dd")

    if len(titles) != len(values):
        logger.warning(
            f"Description list has {len(titles)} <dt> and {len(values)} <dd>, "
            f"keeping the first {min(len(titles), len(values))} pairs"
        )

    return [
        Field(
            # Rendered as spans so that their content flows inline
            title=render(title.retag("span")),
            value=render(value.retag("span")),
            short=SHORT_CLASS in value.class_names,
        )
        for title, value in zip(titles, values)
    ]
