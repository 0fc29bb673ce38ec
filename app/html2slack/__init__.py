"""html2slack: write Slack messages and dialogs as HTML.

Usage:
    from html2slack import html_to_slack

    payload = html_to_slack("<body><section><b>Deployed</b></section></body>")
    # {"attachments": [{"color": "good", "text": "*Deployed*", ...}]}

Lower-level building blocks (parse_html, render, extract_fields,
extract_buttons, build_dialog, assemble) are exported for callers that
already hold a document tree.
"""

from html2slack.attachments import assemble, html_to_slack
from html2slack.attributes import map_attributes
from html2slack.buttons import extract_buttons
from html2slack.dialog import build_dialog
from html2slack.exceptions import (
    Html2SlackError,
    InvalidEncodingError,
    MalformedAttributeError,
    StructuralError,
)
from html2slack.fields import extract_fields
from html2slack.mrkdwn import render
from html2slack.parser import parse_html
from html2slack.services.slack_client import SlackClient

__all__ = [
    "Html2SlackError",
    "InvalidEncodingError",
    "MalformedAttributeError",
    "SlackClient",
    "StructuralError",
    "assemble",
    "build_dialog",
    "extract_buttons",
    "extract_fields",
    "html_to_slack",
    "map_attributes",
    "parse_html",
    "render",
]

__version__ = "0.1.0"
