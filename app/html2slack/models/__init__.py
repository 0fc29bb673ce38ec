"""Data models for html2slack.

This package contains the parsed document tree and the Slack payload models
built from it.
"""

from .nodes import Element, Node, Text
from .slack import (
    Action,
    Attachment,
    Confirmation,
    Dialog,
    DialogElement,
    DialogElementType,
    DialogOption,
    DialogOptionGroup,
    Field,
)

__all__ = [
    "Action",
    "Attachment",
    "Confirmation",
    "Dialog",
    "DialogElement",
    "DialogElementType",
    "DialogOption",
    "DialogOptionGroup",
    "Element",
    "Field",
    "Node",
    "Text",
]
