"""HTML buttons to Slack attachment actions."""

import json
import logging
from typing import Any

from html2slack.exceptions import MalformedAttributeError
from html2slack.models.nodes import Element
from html2slack.models.slack import Action, Confirmation

logger = logging.getLogger(__name__)

CONFIRM_ATTRIBUTE = "confirm"
CONFIRM_KEYS = ("title", "text", "ok_text", "dismiss_text")


def extract_buttons(node: Element) -> dict[str, Any]:
    """Convert every <button> of a node into a Slack action.

    Args:
        node: Subtree to search.

    Returns:
        ``{"actions": [...]}``, or an empty dict when there is no button.

    Raises:
        MalformedAttributeError: If a ``confirm`` attribute is not a valid
            confirmation object.
    """
    actions = find_actions(node)
    if not actions:
        return {}
    return {"actions": [action.to_dict() for action in actions]}


def find_actions(node: Element) -> list[Action]:
    """Build an action for every <button> of a node, in document order."""
    return [_build_action(button) for button in node.find_all("button")]


def _build_action(button: Element) -> Action:
    attributes = button.attributes
    confirm = attributes.get(CONFIRM_ATTRIBUTE)
    return Action(
        text=button.text.strip(),
        name=attributes.get("name"),
        value=attributes.get("value"),
        url=attributes.get("href"),
        confirm=parse_confirmation(confirm) if confirm is not None else None,
        style=get_style(button.class_names),
    )


def get_style(class_names: set[str]) -> str | None:
    """Return the first recognized button style among the classes."""
    for style in Action.STYLES:
        if style in class_names:
            return style
    return None


def parse_confirmation(raw: str) -> Confirmation:
    """Parse a ``confirm`` attribute.

    The attribute holds a JSON object such as
    ``{"title": "Sure?", "text": "This cannot be undone", "ok-text": "Yes",
    "dismiss-text": "No"}``. Dashed keys are accepted like in attributes.

    Args:
        raw: Attribute value.

    Returns:
        Parsed confirmation.

    Raises:
        MalformedAttributeError: If the value is not a JSON object with a
            string ``text`` and string optional members.
    """
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as e:
        raise MalformedAttributeError(
            CONFIRM_ATTRIBUTE, f"Invalid JSON in 'confirm' attribute: {e}"
        ) from e

    if not isinstance(payload, dict):
        raise MalformedAttributeError(
            CONFIRM_ATTRIBUTE, "'confirm' attribute must be a JSON object"
        )

    values = {key.replace("-", "_"): value for key, value in payload.items()}
    unknown = set(values) - set(CONFIRM_KEYS)
    if unknown:
        logger.debug(f"Ignoring unknown confirm keys: {', '.join(sorted(unknown))}")

    for key in CONFIRM_KEYS:
        if key in values and not isinstance(values[key], str):
            raise MalformedAttributeError(
                CONFIRM_ATTRIBUTE, f"'confirm' member '{key}' must be a string"
            )
    if "text" not in values:
        raise MalformedAttributeError(
            CONFIRM_ATTRIBUTE, "'confirm' attribute requires a 'text' member"
        )

    return Confirmation(
        text=values["text"],
        title=values.get("title"),
        ok_text=values.get("ok_text"),
        dismiss_text=values.get("dismiss_text"),
    )
