"""Utility functions for producing Slack text.

Slack requires escaping <, >, and & in message text; everything else is
sent as is.
"""


def escape_mrkdwn(text: str) -> str:
    """Escape special Slack mrkdwn characters in plain text.

    Args:
        text: The text to escape. Must not already be escaped.

    Returns:
        The escaped text safe for Slack mrkdwn.
    """
    # Order matters: escape & first since it's used in other escapes
    text = text.replace("&", "&amp;")
    text = text.replace("<", "&lt;")
    text = text.replace(">", "&gt;")
    return text


def truncate(text: str, limit: int) -> str:
    """Cut text down to at most ``limit`` characters."""
    return text[:limit]
