"""mrkdwn formatters package.

Importing this package registers every tag rule with FormatterRegistry.
"""

from . import inline, lists, tables
from .base import FormatterRegistry, TagFormatter

__all__ = [
    "FormatterRegistry",
    "TagFormatter",
    "inline",
    "lists",
    "tables",
]
