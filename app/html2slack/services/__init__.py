from html2slack.services.slack_client import SlackClient

__all__ = [
    "SlackClient",
]
