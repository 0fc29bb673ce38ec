import os


class Config:
    """Application configuration."""

    # Slack configuration
    SLACK_WEBHOOK_URL = os.environ.get("SLACK_WEBHOOK_URL", "")
    # Seconds, kept as text and converted by the --timeout option
    SLACK_REQUEST_TIMEOUT = os.environ.get("SLACK_REQUEST_TIMEOUT", "30")
