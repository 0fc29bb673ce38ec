"""Slack payload models produced by the converters.

Each model mirrors one object of Slack's legacy attachment / dialog API and
knows how to serialize itself with ``to_dict()``. Optional members are
omitted from the output rather than sent as null.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar


@dataclass
class Field:
    """An attachment field (one ``<dt>``/``<dd>`` pair).

    Attributes:
        title: Field title, may contain mrkdwn.
        value: Field value, may contain mrkdwn.
        short: Whether Slack may lay the field out side by side.
    """

    title: str
    value: str
    short: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"title": self.title, "value": self.value, "short": self.short}


@dataclass
class Confirmation:
    """Confirmation popup shown before a button action runs."""

    text: str
    title: str | None = None
    ok_text: str | None = None
    dismiss_text: str | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.title is not None:
            result["title"] = self.title
        result["text"] = self.text
        if self.ok_text is not None:
            result["ok_text"] = self.ok_text
        if self.dismiss_text is not None:
            result["dismiss_text"] = self.dismiss_text
        return result


@dataclass
class Action:
    """An attachment action button.

    Attributes:
        text: Literal button label.
        name: Action name sent back on interaction.
        value: Action value, defaults to the name when unset.
        url: Target URL for link buttons.
        confirm: Optional confirmation popup.
        style: One of ``STYLES`` or None.
    """

    STYLES: ClassVar[tuple[str, ...]] = ("primary", "danger", "normal")

    text: str
    name: str | None = None
    value: str | None = None
    url: str | None = None
    confirm: Confirmation | None = None
    style: str | None = None
    type: str = field(default="button", init=False)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"text": self.text}
        if self.name is not None:
            result["name"] = self.name
        value = self.value if self.value is not None else self.name
        if value is not None:
            result["value"] = value
        if self.url is not None:
            result["url"] = self.url
        if self.confirm is not None:
            result["confirm"] = self.confirm.to_dict()
        result["type"] = self.type
        if self.style is not None:
            result["style"] = self.style
        return result


@dataclass
class Attachment:
    """A message attachment built from one ``<section>``.

    Attributes:
        text: Rendered mrkdwn body.
        color: Sidebar color.
        extra: Attribute-mapped keys from the section, applied over ``color``.
        fields: Fields extracted from the first description list.
        actions: Buttons of the section.
    """

    MRKDWN_IN: ClassVar[list[str]] = ["text", "pretext", "fields"]

    text: str
    color: str = "good"
    extra: dict[str, str] = field(default_factory=dict)
    fields: list[Field] = field(default_factory=list)
    actions: list[Action] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"color": self.color, **self.extra}
        if self.fields:
            result["fields"] = [f.to_dict() for f in self.fields]
        if self.actions:
            result["actions"] = [a.to_dict() for a in self.actions]
        result["text"] = self.text
        result["mrkdwn_in"] = list(self.MRKDWN_IN)
        return result


class DialogElementType(Enum):
    """Dialog input kinds."""

    TEXT = "text"
    TEXTAREA = "textarea"
    SELECT = "select"


@dataclass
class DialogOption:
    label: str
    value: str

    def to_dict(self) -> dict[str, str]:
        return {"value": self.value, "label": self.label}


@dataclass
class DialogOptionGroup:
    label: str
    options: list[DialogOption] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"label": self.label, "options": [o.to_dict() for o in self.options]}


@dataclass
class DialogElement:
    """A single dialog input.

    Attributes:
        type: Input kind.
        label: Label shown above the input (already truncated).
        optional: Whether the input may be left empty.
        subtype: Text subtype (email, number, tel, url).
        attributes: Attribute-mapped keys of the control (name, placeholder, ...).
        value: Pre-selected value of a select.
        options: Flat options of a select.
        option_groups: Grouped options of a select.
    """

    type: DialogElementType
    label: str
    optional: bool = True
    subtype: str | None = None
    attributes: dict[str, str] = field(default_factory=dict)
    value: str | None = None
    options: list[DialogOption] | None = None
    option_groups: list[DialogOptionGroup] | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"type": self.type.value, "label": self.label}
        if self.subtype is not None:
            result["subtype"] = self.subtype
        result["optional"] = self.optional
        result.update(self.attributes)
        if self.value is not None:
            result["value"] = self.value
        if self.option_groups is not None:
            result["option_groups"] = [g.to_dict() for g in self.option_groups]
        elif self.options is not None:
            result["options"] = [o.to_dict() for o in self.options]
        return result


@dataclass
class Dialog:
    """A Slack dialog built from a ``<form>``.

    Attributes:
        title: Dialog title (already truncated).
        callback_id: Identifier sent back on submission.
        submit_label: Label of the submit button (already truncated).
        elements: Inputs in document order.
    """

    title: str
    callback_id: str
    submit_label: str = ""
    elements: list[DialogElement] = field(default_factory=list)

    @property
    def state(self) -> str:
        return self.callback_id

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "callback_id": self.callback_id,
            "state": self.state,
            "submit_label": self.submit_label,
            "elements": [e.to_dict() for e in self.elements],
        }
