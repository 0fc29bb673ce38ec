"""Base formatter interface and registry for mrkdwn tag rules.

This module defines the TagFormatter abstract class and FormatterRegistry
mapping tag names to the formatter that renders them.
"""

import logging
from abc import ABC, abstractmethod

from html2slack.models.nodes import Element

logger = logging.getLogger(__name__)


class TagFormatter(ABC):
    """Abstract base class for tag formatters.

    Formatters turn an element into mrkdwn. Inline rules wrap the already
    rendered inner text; structural rules (lists, tables) walk the element
    themselves and ignore it.
    """

    @classmethod
    @abstractmethod
    def get_tag_names(cls) -> tuple[str, ...]:
        """Return the tags handled by this formatter.

        Returns:
            Tuple of lower-cased tag names (e.g., ("b", "strong")).
        """
        pass

    @abstractmethod
    def format(self, text: str, node: Element) -> str:
        """Render an element as mrkdwn.

        Args:
            text: The element's children, already rendered.
            node: The element itself.

        Returns:
            mrkdwn string.
        """
        pass


class FormatterRegistry:
    """Registry of tag formatters.

    Formatters self-register on import via the @register decorator. Tags
    without a formatter fall back to the renderer's generic block/inline
    recursion.

    Example:
        >>> formatter = FormatterRegistry.get("strong")
        >>> formatter.format("hello", node)
        '*hello*'
    """

    _formatters: dict[str, type[TagFormatter]] = {}

    @classmethod
    def register(cls, formatter_class: type[TagFormatter]) -> type[TagFormatter]:
        """Register a formatter class for each of its tags.

        Can be used as a class decorator:

            @FormatterRegistry.register
            class BoldFormatter(TagFormatter):
                ...

        Args:
            formatter_class: Formatter class to register.

        Returns:
            The formatter class (for decorator chaining).
        """
        for tag_name in formatter_class.get_tag_names():
            if tag_name in cls._formatters:
                logger.warning(
                    f"Tag '{tag_name}' already has a formatter, "
                    f"replacing with {formatter_class.__name__}"
                )
            cls._formatters[tag_name] = formatter_class
        logger.debug(
            f"Registered {formatter_class.__name__} for: "
            f"{', '.join(formatter_class.get_tag_names())}"
        )
        return formatter_class

    @classmethod
    def get(cls, tag_name: str) -> TagFormatter:
        """Get a formatter instance for a tag.

        Args:
            tag_name: Lower-cased tag name.

        Returns:
            Formatter instance.

        Raises:
            KeyError: If no formatter is registered for the tag.
        """
        if tag_name not in cls._formatters:
            raise KeyError(f"No formatter registered for tag '{tag_name}'")
        return cls._formatters[tag_name]()

    @classmethod
    def is_registered(cls, tag_name: str) -> bool:
        """Check if a tag has a registered formatter.

        Args:
            tag_name: Lower-cased tag name.

        Returns:
            True if a formatter is registered, False otherwise.
        """
        return tag_name in cls._formatters

    @classmethod
    def get_registered_tags(cls) -> list[str]:
        """Get the list of tags with a formatter."""
        return list(cls._formatters.keys())
