"""Parsed document tree consumed by the renderer and the extractors.

A document is a tree of Element and Text nodes. Plain strings are accepted
wherever a node is expected and behave like pre-rendered text.
"""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field, replace
from typing import TypeAlias, Union


@dataclass(frozen=True)
class Text:
    """A run of character data.

    Attributes:
        content: Decoded text (entities already resolved by the parser).
    """

    content: str


@dataclass(frozen=True)
class Element:
    """An HTML element.

    Attributes:
        tag_name: Lower-cased tag name.
        attributes: Attribute values keyed by name. Valueless attributes
            (e.g. ``required``) map to an empty string.
        children: Child nodes in document order.
    """

    tag_name: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list["Node"] = field(default_factory=list)

    @property
    def class_names(self) -> set[str]:
        """Classes listed in the ``class`` attribute."""
        return set(self.attributes.get("class", "").split())

    @property
    def raw_text(self) -> str:
        """Concatenation of the direct text children only."""
        return "".join(
            _text_of(child) for child in self.children if not isinstance(child, Element)
        )

    @property
    def text(self) -> str:
        """Concatenation of all descendant text."""
        return "".join(
            child.text if isinstance(child, Element) else _text_of(child)
            for child in self.children
        )

    def child_elements(self, tag_name: str | None = None) -> list["Element"]:
        """Return the direct element children, optionally filtered by tag."""
        return [
            child
            for child in self.children
            if isinstance(child, Element)
            and (tag_name is None or child.tag_name == tag_name)
        ]

    def iter_descendants(self) -> Iterator["Element"]:
        """Yield every descendant element in document order."""
        for child in self.children:
            if isinstance(child, Element):
                yield child
                yield from child.iter_descendants()

    def find_all(
        self, tag_name: str, predicate: Callable[["Element"], bool] | None = None
    ) -> list["Element"]:
        """Return all descendants with the given tag, in document order.

        Args:
            tag_name: Tag to look for.
            predicate: Optional extra filter applied to each match.

        Returns:
            Matching elements (empty list if there are none).
        """
        return [
            el
            for el in self.iter_descendants()
            if el.tag_name == tag_name and (predicate is None or predicate(el))
        ]

    def find(
        self, tag_name: str, predicate: Callable[["Element"], bool] | None = None
    ) -> "Element | None":
        """Return the first descendant with the given tag, or None."""
        for el in self.iter_descendants():
            if el.tag_name == tag_name and (predicate is None or predicate(el)):
                return el
        return None

    def retag(self, tag_name: str) -> "Element":
        """Return a copy of this element under another tag name.

        The copy shares attributes and children with the original, which
        is left untouched.
        """
        return replace(self, tag_name=tag_name)


Node: TypeAlias = Union[Element, Text, str]


def _text_of(node: "Text | str") -> str:
    return node.content if isinstance(node, Text) else node
