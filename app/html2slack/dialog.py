"""HTML forms to Slack dialogs.

    <form action="callback_id">
      <header>Dialog title</header>
      <label>
        Email
        <input type="email" name="email" required>
      </label>
      <input type="submit" value="Send">
    </form>

Each <label> wrapping an <input>, <select> or <textarea> becomes a dialog
element; labels without a control are dropped.
"""

import logging

from html2slack.attributes import map_attributes
from html2slack.exceptions import StructuralError
from html2slack.models.nodes import Element, Text
from html2slack.models.slack import (
    Dialog,
    DialogElement,
    DialogElementType,
    DialogOption,
    DialogOptionGroup,
)
from html2slack.slack_utils import truncate

logger = logging.getLogger(__name__)

# Slack dialog limits
TITLE_MAX_LENGTH = 23
SUBMIT_LABEL_MAX_LENGTH = 23
LABEL_MAX_LENGTH = 24

# Attributes turned into dedicated keys instead of being copied
RESERVED_ATTRIBUTES = ("type", "required")


def build_dialog(form: Element) -> Dialog:
    """Convert a form into a Slack dialog.

    Args:
        form: The <form> element.

    Returns:
        Dialog with the form's action as callback id and state.

    Raises:
        StructuralError: If the form has no submit input or no <header>.
    """
    submit = form.find("input", _is_submit)
    if submit is None:
        raise StructuralError('Dialog form requires an <input type="submit">')

    header = form.find("header")
    if header is None:
        raise StructuralError("Dialog form requires a <header>")

    elements = [
        element
        for element in (_build_element(label) for label in _top_level_labels(form))
        if element is not None
    ]

    dialog = Dialog(
        title=truncate(header.text.strip(), TITLE_MAX_LENGTH),
        callback_id=form.attributes.get("action", ""),
        submit_label=truncate(
            submit.attributes.get("value", ""), SUBMIT_LABEL_MAX_LENGTH
        ),
        elements=elements,
    )
    logger.debug(f"Built dialog '{dialog.callback_id}' with {len(elements)} elements")
    return dialog


def _is_submit(node: Element) -> bool:
    return node.attributes.get("type") == "submit"


def _is_control_input(node: Element) -> bool:
    return not _is_submit(node)


def _top_level_labels(form: Element) -> list[Element]:
    labels: list[Element] = []

    def walk(node: Element) -> None:
        for child in node.child_elements():
            if child.tag_name == "label":
                labels.append(child)
            else:
                walk(child)

    walk(form)
    return labels


def _label_text(label: Element) -> str:
    for child in label.children:
        if isinstance(child, Element):
            continue
        content = child.content if isinstance(child, Text) else child
        if content.strip():
            return truncate(content.strip(), LABEL_MAX_LENGTH)
    return ""


def _build_element(label: Element) -> DialogElement | None:
    text_input = label.find("input", _is_control_input)
    if text_input is not None:
        return build_text_element(_label_text(label), text_input)

    select = label.find("select")
    if select is not None:
        return build_select_element(_label_text(label), select)

    textarea = label.find("textarea")
    if textarea is not None:
        return build_textarea_element(_label_text(label), textarea)

    return None


def build_text_element(label: str, node: Element) -> DialogElement:
    """Build a text element; non-text input types become its subtype."""
    input_type = node.attributes.get("type", "text")
    return DialogElement(
        type=DialogElementType.TEXT,
        label=label,
        subtype=input_type if input_type != "text" else None,
        optional="required" not in node.attributes,
        attributes=map_attributes(node, exclude=RESERVED_ATTRIBUTES),
    )


def build_textarea_element(label: str, node: Element) -> DialogElement:
    """Build a textarea element; a ``type`` attribute becomes its subtype."""
    return DialogElement(
        type=DialogElementType.TEXTAREA,
        label=label,
        subtype=node.attributes.get("type"),
        optional="required" not in node.attributes,
        attributes=map_attributes(node, exclude=RESERVED_ATTRIBUTES),
    )


def build_select_element(label: str, node: Element) -> DialogElement:
    """Build a select element with flat options or option groups."""
    selected = node.find("option", lambda option: "selected" in option.attributes)

    groups = node.child_elements("optgroup")
    option_groups = None
    options = None
    if groups:
        option_groups = [
            DialogOptionGroup(
                label=group.attributes.get("label", ""),
                options=[
                    _build_option(option) for option in group.child_elements("option")
                ],
            )
            for group in groups
        ]
    else:
        options = [_build_option(option) for option in node.child_elements("option")]

    return DialogElement(
        type=DialogElementType.SELECT,
        label=label,
        optional="required" not in node.attributes,
        attributes=map_attributes(node, exclude=RESERVED_ATTRIBUTES),
        value=_option_value(selected) if selected is not None else None,
        options=options,
        option_groups=option_groups,
    )


def _build_option(option: Element) -> DialogOption:
    return DialogOption(label=option.text.strip(), value=_option_value(option))


def _option_value(option: Element) -> str:
    # Like browsers, an option without value submits its text
    return option.attributes.get("value", option.text.strip())
