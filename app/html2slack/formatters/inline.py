"""Inline mrkdwn rules.

These rules only wrap the rendered inner text, following
https://slack.com/help/articles/202288908-Format-your-messages
"""

from html2slack.formatters.base import FormatterRegistry, TagFormatter
from html2slack.models.nodes import Element


@FormatterRegistry.register
class BoldFormatter(TagFormatter):
    """*bold*, also used for headings."""

    @classmethod
    def get_tag_names(cls) -> tuple[str, ...]:
        return ("b", "strong", "h1", "h2", "h3", "h4", "h5", "h6")

    def format(self, text: str, node: Element) -> str:
        return f"*{text}*"


@FormatterRegistry.register
class ItalicFormatter(TagFormatter):
    """_italic_"""

    @classmethod
    def get_tag_names(cls) -> tuple[str, ...]:
        return ("i", "em")

    def format(self, text: str, node: Element) -> str:
        return f"_{text}_"


@FormatterRegistry.register
class StrikeFormatter(TagFormatter):
    """~strikethrough~"""

    @classmethod
    def get_tag_names(cls) -> tuple[str, ...]:
        return ("strike", "s", "del")

    def format(self, text: str, node: Element) -> str:
        return f"~{text}~"


@FormatterRegistry.register
class InlineQuoteFormatter(TagFormatter):
    """>Some quote"""

    @classmethod
    def get_tag_names(cls) -> tuple[str, ...]:
        return ("q",)

    def format(self, text: str, node: Element) -> str:
        return f">{text}"


@FormatterRegistry.register
class MultilineQuoteFormatter(TagFormatter):
    """Quote everything that follows in the message.

    Uses <textarea> so that minifiers leave the white-space alone:

        >>>Some multi line content
        that is treated as one quote
    """

    @classmethod
    def get_tag_names(cls) -> tuple[str, ...]:
        return ("textarea",)

    def format(self, text: str, node: Element) -> str:
        return f">>>{text}"


@FormatterRegistry.register
class BlockquoteFormatter(TagFormatter):
    """Quote each line separately so the quote can be exited.

        >This will be in the quote
        >As will this
    """

    @classmethod
    def get_tag_names(cls) -> tuple[str, ...]:
        return ("blockquote",)

    def format(self, text: str, node: Element) -> str:
        return "\n".join(f">{line}" for line in text.strip().split("\n"))


@FormatterRegistry.register
class CodeFormatter(TagFormatter):
    """`inline code`"""

    @classmethod
    def get_tag_names(cls) -> tuple[str, ...]:
        return ("code",)

    def format(self, text: str, node: Element) -> str:
        return f"`{text}`"


@FormatterRegistry.register
class PreformattedFormatter(TagFormatter):
    """```multi-line code```"""

    @classmethod
    def get_tag_names(cls) -> tuple[str, ...]:
        return ("pre",)

    def format(self, text: str, node: Element) -> str:
        return f"```{text}```"


@FormatterRegistry.register
class LinkFormatter(TagFormatter):
    """Links in Slack's angle-bracket syntax.

    - <https://destination|Label> (web)
    - <@recipient|Name> (user)
    - <#location|Name> (channel)

    An anchor without href renders its text only.
    """

    @classmethod
    def get_tag_names(cls) -> tuple[str, ...]:
        return ("a",)

    def format(self, text: str, node: Element) -> str:
        href = node.attributes.get("href")
        if not href:
            return text
        return f"<{href}|{text}>"
