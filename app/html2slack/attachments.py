"""Document to Slack message conversion.

Each <section> of the body becomes its own attachment. Section attributes
are reported verbatim in the attachment (dashes replaced by underscores),
so every attachment parameter of
https://api.slack.com/docs/message-attachments#attachment_parameters can be
set from the markup, e.g. ``<section color="#36a64f" author-name="Bot">``.

A body with the ``modal`` class is converted to a dialog instead.
"""

import logging
from typing import Any

from html2slack.attributes import map_attributes
from html2slack.buttons import find_actions
from html2slack.dialog import build_dialog
from html2slack.exceptions import StructuralError
from html2slack.fields import find_fields
from html2slack.models.nodes import Element
from html2slack.models.slack import Attachment
from html2slack.mrkdwn import render
from html2slack.parser import parse_html

logger = logging.getLogger(__name__)

MODAL_CLASS = "modal"


def assemble(root: Element) -> dict[str, Any]:
    """Convert a parsed document into a Slack payload.

    Args:
        root: Document root. Fragments without <body> are treated as the
            body themselves.

    Returns:
        A dialog dict when the body has the ``modal`` class, otherwise
        ``{"attachments": [...]}`` with one attachment per <section>.

    Raises:
        StructuralError: If a modal body has no usable <form>.
        MalformedAttributeError: If a button carries a broken ``confirm``.
    """
    body = root.find("body") or root

    if MODAL_CLASS in body.class_names:
        form = body.find("form")
        if form is None:
            raise StructuralError("Modal document requires a <form>")
        return build_dialog(form).to_dict()

    attachments = [build_attachment(section) for section in body.find_all("section")]
    logger.debug(f"Assembled {len(attachments)} attachments")
    return {"attachments": attachments}


def build_attachment(section: Element) -> dict[str, Any]:
    """Build the attachment of one section.

    The default color is overridden by section attributes, which are in
    turn overridden by the extracted fields, actions and rendered text.
    """
    attachment = Attachment(
        text=render(section),
        extra=map_attributes(section),
        fields=find_fields(section),
        actions=find_actions(section),
    )
    return attachment.to_dict()


def html_to_slack(markup: str | bytes) -> dict[str, Any]:
    """Parse markup and convert it into a Slack payload.

    Args:
        markup: HTML document or fragment.

    Returns:
        Slack attachments payload or dialog, see ``assemble``.
    """
    return assemble(parse_html(markup))
